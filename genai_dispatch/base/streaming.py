"""ChatStream: the iterator returned by streaming chat calls.

Wraps a generator of :class:`ChatStreamEvent` produced by an adapter. The
underlying HTTP response is released when the stream is exhausted, closed
explicitly, or used as a context manager.
"""
from __future__ import annotations

from typing import Iterator, Optional

from .models import ChatStreamEvent, ModelIden, StreamEnd


class ChatStream:
    """Iterable of normalized stream events for one call.

    Attributes:
        model_iden: Resolved adapter and model identifier.
    """

    def __init__(self, events: Iterator[ChatStreamEvent], model_iden: ModelIden) -> None:
        self._events = events
        self.model_iden = model_iden
        self._closed = False

    def __iter__(self) -> "ChatStream":
        return self

    def __next__(self) -> ChatStreamEvent:
        if self._closed:
            raise StopIteration
        try:
            return next(self._events)
        except StopIteration:
            self._closed = True
            raise

    def close(self) -> None:
        """Stop the stream and release the connection."""
        if not self._closed:
            self._closed = True
            close = getattr(self._events, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "ChatStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def collect_text(self) -> tuple[str, Optional[StreamEnd]]:
        """Drain the stream; return concatenated text chunks and the end payload."""
        chunks = []
        end: Optional[StreamEnd] = None
        for ev in self:
            if ev.kind == "chunk" and ev.content:
                chunks.append(ev.content)
            elif ev.kind == "end":
                end = ev.end
        return "".join(chunks), end


__all__ = ["ChatStream"]
