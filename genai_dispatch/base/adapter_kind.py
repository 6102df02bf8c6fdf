"""
Adapter kinds (provider backends).

Values are lowercase snake_case and double as the configuration section name,
the environment variable prefix (upper-cased) and the namespace accepted in
``"<kind>::<model>"`` identifiers.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class AdapterKind(str, Enum):
    """Closed set of provider backends."""

    OPENAI = "openai"
    AZURE_OPENAI = "azure_openai"
    ANTHROPIC = "anthropic"
    COHERE = "cohere"
    GEMINI = "gemini"
    GROQ = "groq"
    XAI = "xai"
    DEEPSEEK = "deepseek"
    OLLAMA = "ollama"

    @classmethod
    def from_name(cls, name: str) -> Optional["AdapterKind"]:
        """Return the kind named ``name`` (case-insensitive, aliases accepted), if any."""
        key = (name or "").strip().lower()
        key = _ALIASES.get(key, key)
        for kind in cls:
            if kind.value == key:
                return kind
        return None


_ALIASES = {"azure": "azure_openai", "google": "gemini", "grok": "xai"}


__all__ = ["AdapterKind"]
