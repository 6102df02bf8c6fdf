"""DeepSeekAdapter using the OpenAI-compatible Chat Completions API.

Reasoning models (``deepseek-reasoner``) return ``reasoning_content`` next to
``content``; both are mapped by the shared parser. Streams report usage on
the chunk carrying ``finish_reason``.
"""

from __future__ import annotations

from ..base.adapter_kind import AdapterKind
from ..base.openai_style_parts import BaseOpenAIStyleAdapter, UsageLocation


class DeepSeekAdapter(BaseOpenAIStyleAdapter):
    """DeepSeek adapter; chat and streaming chat only."""

    kind = AdapterKind.DEEPSEEK
    usage_location = UsageLocation.FINISH_CHUNK
