"""genai_dispatch.config.defaults
==============================

Default values used when configuration does not set them. Plain constants
only; no I/O and no imports from other dispatch modules.
"""

from __future__ import annotations

# ---- Adapter base URLs ----
# Azure OpenAI has no default: the resource endpoint must be configured.
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
GROQ_DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
XAI_DEFAULT_BASE_URL = "https://api.x.ai/v1"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
OLLAMA_DEFAULT_BASE_URL = "http://localhost:11434/v1"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
COHERE_DEFAULT_BASE_URL = "https://api.cohere.com/v2"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

# ---- CLI defaults ----
# Model used by ``genai-dispatch image`` when none is given.
CLI_DEFAULT_IMAGE_MODEL = "dall-e-3"


__all__ = [
    "OPENAI_DEFAULT_BASE_URL",
    "GROQ_DEFAULT_BASE_URL",
    "XAI_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "OLLAMA_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "COHERE_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_BASE_URL",
    "CLI_DEFAULT_IMAGE_MODEL",
]
