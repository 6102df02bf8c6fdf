"""XAIAdapter built on the OpenAI-style base class."""

from __future__ import annotations

from ..base.adapter_kind import AdapterKind
from ..base.openai_style_parts import BaseOpenAIStyleAdapter, UsageLocation


class XAIAdapter(BaseOpenAIStyleAdapter):
    kind = AdapterKind.XAI
    usage_location = UsageLocation.FINISH_CHUNK
