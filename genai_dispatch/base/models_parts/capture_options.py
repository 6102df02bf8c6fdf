"""
Per-call capture options.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CaptureOptions:
    """What the dispatcher should retain from a provider response.

    Attributes:
        capture_raw_body: Keep the provider JSON body on the response.
        capture_usage: Collect token usage on streaming end events.
        capture_content: Accumulate streamed text for the end event.
        capture_reasoning_content: Accumulate streamed reasoning text.
        capture_tools: Collect completed tool calls for the end event.
    """

    capture_raw_body: bool = False
    capture_usage: bool = False
    capture_content: bool = False
    capture_reasoning_content: bool = False
    capture_tools: bool = False

    @classmethod
    def capture_all(cls) -> "CaptureOptions":
        return cls(True, True, True, True, True)


DEFAULT_CAPTURE = CaptureOptions()

__all__ = ["CaptureOptions", "DEFAULT_CAPTURE"]
