"""OpenAI-compatible adapter internals.

Exports:
- ``BaseOpenAIStyleAdapter``: chat and streaming chat over ``/chat/completions``
- ``OpenAIStreamer``: SSE event normalization with per-provider usage capture
"""

from .base import BaseOpenAIStyleAdapter
from .streamer import OpenAIStreamer, UsageLocation

__all__ = ["BaseOpenAIStyleAdapter", "OpenAIStreamer", "UsageLocation"]
