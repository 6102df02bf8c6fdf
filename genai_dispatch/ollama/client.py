"""OllamaAdapter for a local Ollama daemon.

Talks to the daemon's OpenAI-compatible ``/v1`` surface. Ollama is the
resolver's fallback, so any model name no rule claims lands here. A local
daemon normally needs no key; when one is configured (reverse proxy) it is
sent as a bearer token.
"""

from __future__ import annotations

from ..base.adapter_kind import AdapterKind
from ..base.openai_style_parts import BaseOpenAIStyleAdapter


class OllamaAdapter(BaseOpenAIStyleAdapter):
    kind = AdapterKind.OLLAMA
