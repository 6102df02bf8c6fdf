"""
ChatResponse DTO representing normalized provider chat responses.

``captured_raw_body`` holds the provider JSON only when raw capture was
requested and is excluded from default serialization.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .model_iden import ModelIden
from .tool_call import ToolCall
from .usage import Usage


@dataclass
class ChatResponse:
    """Provider-agnostic response from a chat invocation.

    Attributes:
        text: Assistant text, if any.
        model_iden: Resolved adapter and model identifier.
        reasoning_content: Reasoning text when the provider returns it.
        tool_calls: Tool invocations requested by the model.
        usage: Token accounting when reported.
        captured_raw_body: Provider JSON body, only when capture was requested.
    """

    text: Optional[str]
    model_iden: ModelIden
    reasoning_content: Optional[str] = None
    tool_calls: List[ToolCall] = field(default_factory=list)
    usage: Optional[Usage] = None
    captured_raw_body: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary excluding the raw body."""
        return {
            "text": self.text,
            "reasoning_content": self.reasoning_content,
            "tool_calls": [t.to_dict() for t in self.tool_calls],
            "model_iden": self.model_iden.to_dict(),
            "usage": self.usage.to_dict() if self.usage else None,
        }


__all__ = ["ChatResponse"]
