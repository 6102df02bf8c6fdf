"""
Message DTO used across adapters.

Content may be plain text or a list of :class:`ContentPart` items. Adapters
that only accept text use :meth:`Message.text_or_joined`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Union

from .content_part import ContentPart

Role = Literal["system", "user", "assistant", "tool"]


@dataclass
class Message:
    """A chat message.

    Attributes:
        role: Author role.
        content: Plain text or structured parts.
    """

    role: Role
    content: Union[str, List[ContentPart]]

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role="assistant", content=content)

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    def is_structured(self) -> bool:
        """Return True if the message content is a structured list of parts."""
        return isinstance(self.content, list)

    def text_or_joined(self) -> str:
        """Return a flattened string view of the content.

        Text parts are joined with newlines; non-text parts are rendered as
        bracketed type tokens.
        """
        if isinstance(self.content, str):
            return self.content
        parts: List[str] = []
        for p in self.content:
            parts.append(p.text if p.text else f"[{p.type}]")
        return "\n".join(parts)


__all__ = ["Message", "Role"]
