"""GroqAdapter: OpenAI-compatible chat on Groq's hosted models.

Groq streams report usage under ``x_groq.usage`` on the chunk that carries
``finish_reason``.
"""

from __future__ import annotations

from ..base.adapter_kind import AdapterKind
from ..base.openai_style_parts import BaseOpenAIStyleAdapter, UsageLocation


class GroqAdapter(BaseOpenAIStyleAdapter):
    kind = AdapterKind.GROQ
    usage_location = UsageLocation.X_GROQ
