"""
Normalized chat stream events.

A stream yields exactly one ``start`` event, any number of ``chunk``,
``tool_chunk`` and ``reasoning_chunk`` events, then one ``end`` event whose
:class:`StreamEnd` carries whatever the capture options asked for.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from .tool_call import ToolCall
from .usage import Usage

StreamEventKind = Literal["start", "chunk", "tool_chunk", "reasoning_chunk", "end"]


@dataclass
class StreamToolChunk:
    """Partial tool call fragment keyed by its index in the response."""

    index: int
    call_id: str = ""
    fn_name: str = ""
    arguments: str = ""


@dataclass
class StreamEnd:
    """Terminal stream payload; fields are set only when captured."""

    captured_usage: Optional[Usage] = None
    captured_content: Optional[str] = None
    captured_reasoning_content: Optional[str] = None
    captured_tools: List[ToolCall] = field(default_factory=list)


@dataclass
class ChatStreamEvent:
    """One event of a :class:`~genai_dispatch.base.streaming.ChatStream`."""

    kind: StreamEventKind
    content: Optional[str] = None
    tool_chunk: Optional[StreamToolChunk] = None
    end: Optional[StreamEnd] = None

    @property
    def is_end(self) -> bool:
        return self.kind == "end"


__all__ = ["ChatStreamEvent", "StreamEventKind", "StreamEnd", "StreamToolChunk"]
