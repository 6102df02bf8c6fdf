"""genai_dispatch.config.env
=========================

Environment variable mapping for adapter credentials and endpoints.

- ``ENV_MAP`` maps adapter names to the canonical API key variable.
- ``ENV_ALIASES`` lists accepted names per setting, canonical first, for
  adapters that historically used more than one variable.

Helpers return ``None`` for unknown adapters or unset variables and never
raise; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "azure_openai": "AZURE_OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "cohere": "COHERE_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "groq": "GROQ_API_KEY",
    "xai": "XAI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "ollama": "OLLAMA_API_KEY",
}

# (adapter, field) -> ordered env var names, canonical first
ENV_ALIASES: Dict[Tuple[str, str], Tuple[str, ...]] = {
    ("gemini", "api_key"): ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    ("azure_openai", "base_url"): ("AZURE_OPENAI_BASE_URL", "AZURE_OPENAI_ENDPOINT"),
}

ENV_FIELD_SUFFIXES: Dict[str, str] = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "headers": "HEADERS",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder (``changeme``, ``test_...``)."""
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_name(adapter: str) -> Optional[str]:
    """Return the canonical API key variable for an adapter, if known."""
    return ENV_MAP.get(adapter.lower()) if adapter else None


def get_env_var_candidates(adapter: str, field: str = "api_key") -> Iterable[str]:
    """Yield acceptable variable names for ``field``, canonical first."""
    a = (adapter or "").lower()
    suffix = ENV_FIELD_SUFFIXES.get(field)
    if not a or suffix is None:
        return
    canonical = f"{a.upper()}_{suffix}"
    yield canonical
    for alias in ENV_ALIASES.get((a, field), ()):
        if alias != canonical:
            yield alias


def resolve_env_value(adapter: str, field: str = "api_key") -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, variable_name)`` for the first non-empty candidate.

    ``(None, None)`` when nothing is set.
    """
    for name in get_env_var_candidates(adapter, field):
        if val := os.environ.get(name):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "ENV_FIELD_SUFFIXES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_env_value",
]
