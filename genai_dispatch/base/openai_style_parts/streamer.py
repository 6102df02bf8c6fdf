"""
Server-sent event normalization for OpenAI-compatible streaming chat.

Purpose:
- Turn ``data:`` payloads from ``/chat/completions`` (``stream=True``) into
  :class:`ChatStreamEvent` items.
- Accumulate content, reasoning and tool-call fragments for the terminal
  ``end`` event when the matching capture option is enabled.

Usage reporting differs per provider:
- OpenAI, Azure OpenAI, Ollama: a trailing chunk with empty ``choices`` and a
  ``usage`` object (requires ``stream_options.include_usage``).
- Groq: ``x_groq.usage`` on the chunk carrying ``finish_reason``.
- xAI, DeepSeek: ``usage`` on the chunk carrying ``finish_reason``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from ..adapter_kind import AdapterKind
from ..constants import SSE_DONE
from ..errors import ErrorCode, TransportFailure
from ..http.transport import parse_json_data
from ..models import CaptureOptions, ChatStreamEvent, StreamEnd, StreamToolChunk, ToolCall, Usage
from .style_helpers import parse_tool_arguments


class UsageLocation(str, Enum):
    """Where a provider reports token usage in a stream."""

    TRAILING_CHUNK = "trailing_chunk"
    FINISH_CHUNK = "finish_chunk"
    X_GROQ = "x_groq"


class OpenAIStreamer:
    """Iterate normalized events over a stream of SSE data payloads."""

    def __init__(
        self,
        data: Iterator[str],
        *,
        adapter: AdapterKind,
        options: CaptureOptions,
        usage_location: UsageLocation = UsageLocation.TRAILING_CHUNK,
    ) -> None:
        self._data = data
        self._adapter = adapter
        self._options = options
        self._usage_location = usage_location
        self._content: List[str] = []
        self._reasoning: List[str] = []
        self._tools: Dict[int, StreamToolChunk] = {}
        self._usage: Optional[Usage] = None

    def __iter__(self) -> Iterator[ChatStreamEvent]:
        try:
            yield ChatStreamEvent(kind="start")
            for data in self._data:
                if data == SSE_DONE:
                    break
                if not data:
                    continue
                yield from self._events_for(parse_json_data(data, self._adapter))
            yield ChatStreamEvent(kind="end", end=self._build_end())
        finally:
            close = getattr(self._data, "close", None)
            if callable(close):
                close()

    def _malformed(self, what: str, value: Any) -> TransportFailure:
        return TransportFailure(
            code=ErrorCode.MALFORMED_RESPONSE,
            detail=f"malformed stream event: {what} is {type(value).__name__}",
            adapter=self._adapter,
        )

    def _events_for(self, chunk: Any) -> Iterator[ChatStreamEvent]:
        if not isinstance(chunk, dict):
            raise self._malformed("chunk", chunk)
        choices = chunk.get("choices") or []
        if not isinstance(choices, list):
            raise self._malformed("choices", choices)
        if not choices:
            if self._usage_location is UsageLocation.TRAILING_CHUNK:
                self._capture_usage(chunk.get("usage"))
            return
        choice = choices[0]
        if not isinstance(choice, dict):
            raise self._malformed("choice", choice)
        if choice.get("finish_reason"):
            if self._usage_location is UsageLocation.FINISH_CHUNK:
                self._capture_usage(chunk.get("usage"))
            elif self._usage_location is UsageLocation.X_GROQ:
                x_groq = chunk.get("x_groq") or {}
                if not isinstance(x_groq, dict):
                    raise self._malformed("x_groq", x_groq)
                self._capture_usage(x_groq.get("usage"))
        delta = choice.get("delta") or {}
        if not isinstance(delta, dict):
            raise self._malformed("delta", delta)

        content = self._text(delta, "content")
        if content:
            if self._options.capture_content:
                self._content.append(content)
            yield ChatStreamEvent(kind="chunk", content=content)

        reasoning = self._text(delta, "reasoning_content") or self._text(delta, "reasoning")
        if reasoning:
            if self._options.capture_reasoning_content:
                self._reasoning.append(reasoning)
            yield ChatStreamEvent(kind="reasoning_chunk", content=reasoning)

        for raw in delta.get("tool_calls") or []:
            if not isinstance(raw, dict):
                raise self._malformed("tool call", raw)
            yield ChatStreamEvent(kind="tool_chunk", tool_chunk=self._merge_tool(raw))

    def _text(self, obj: Dict[str, Any], key: str) -> Optional[str]:
        value = obj.get(key)
        if value is not None and not isinstance(value, str):
            raise self._malformed(key, value)
        return value

    def _capture_usage(self, raw: Any) -> None:
        if raw is not None and not isinstance(raw, dict):
            raise self._malformed("usage", raw)
        if raw and self._options.capture_usage:
            self._usage = Usage.from_openai(raw)

    def _merge_tool(self, raw: Dict[str, Any]) -> StreamToolChunk:
        """Fold one tool-call fragment into the accumulator keyed by ``index``."""
        index = raw.get("index")
        if not isinstance(index, int):
            index = len(self._tools)
        fn = raw.get("function") or {}
        if not isinstance(fn, dict):
            raise self._malformed("tool function", fn)
        fragment = StreamToolChunk(
            index=index,
            call_id=raw.get("id") or "",
            fn_name=fn.get("name") or "",
            arguments=self._text(fn, "arguments") or "",
        )
        acc = self._tools.setdefault(index, StreamToolChunk(index=index))
        acc.call_id = acc.call_id or fragment.call_id
        acc.fn_name = acc.fn_name or fragment.fn_name
        acc.arguments += fragment.arguments
        return fragment

    def _build_end(self) -> StreamEnd:
        opts = self._options
        tools: List[ToolCall] = []
        if opts.capture_tools:
            tools = [
                ToolCall(call_id=t.call_id, fn_name=t.fn_name, fn_arguments=parse_tool_arguments(t.arguments))
                for _, t in sorted(self._tools.items())
            ]
        return StreamEnd(
            captured_usage=self._usage,
            captured_content="".join(self._content) if opts.capture_content else None,
            captured_reasoning_content="".join(self._reasoning) if opts.capture_reasoning_content else None,
            captured_tools=tools,
        )


__all__ = ["OpenAIStreamer", "UsageLocation"]
