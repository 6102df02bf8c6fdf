"""
ChatRequest DTO for provider-agnostic chat invocations.

Adapters map this normalized request shape to their wire format. The model is
not part of the request: it is supplied to the dispatcher separately and
resolved to an adapter there.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .message import Message


@dataclass
class ChatRequest:
    """Normalized chat request sent to adapters.

    Attributes:
        messages: Ordered list of chat `Message` instances.
        system: Optional system prompt, merged with any system messages.
        max_tokens: Maximum tokens for the completion.
        temperature: Sampling temperature when supported by the provider.
        tools: Optional tool specifications (``name``, ``description``,
            ``parameters`` JSON schema).
        extra: JSON-serializable escape hatch merged into the wire payload.
    """

    messages: List[Message]
    system: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    tools: Optional[List[Dict[str, Any]]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_user(cls, content: str, **kwargs: Any) -> "ChatRequest":
        """Build a single-turn request from user text."""
        return cls(messages=[Message.user(content)], **kwargs)

    def system_text(self) -> Optional[str]:
        """Return the combined system prompt from ``system`` and system-role messages."""
        chunks: List[str] = []
        if self.system:
            chunks.append(self.system)
        chunks.extend(m.text_or_joined() for m in self.messages if m.role == "system")
        return "\n\n".join(chunks) if chunks else None

    def non_system_messages(self) -> List[Message]:
        return [m for m in self.messages if m.role != "system"]


__all__ = ["ChatRequest"]
