"""Shared constants for the dispatch layer and adapters.

Central location for request bounds and per-operation path suffixes so that
validation and URL construction never rely on scattered literals.
"""
from __future__ import annotations

# Image generation bounds (OpenAI Images API contract)
IMAGE_PROMPT_MAX_CHARS = 4000
IMAGE_N_MIN = 1
IMAGE_N_MAX = 10
IMAGE_SIZES = ("256x256", "512x512", "1024x1024", "1792x1024", "1024x1792")
IMAGE_QUALITIES = ("standard", "hd")
IMAGE_STYLES = ("vivid", "natural")
IMAGE_RESPONSE_FORMATS = ("url", "b64_json")
DEFAULT_IMAGE_CONTENT_TYPE = "image/png"

# OpenAI-compatible operation paths
OPENAI_CHAT_PATH = "/chat/completions"
OPENAI_EMBEDDINGS_PATH = "/embeddings"
OPENAI_IMAGES_PATH = "/images/generations"

# Anthropic
ANTHROPIC_MESSAGES_PATH = "/messages"
ANTHROPIC_VERSION = "2023-06-01"
ANTHROPIC_DEFAULT_MAX_TOKENS = 1024

# Cohere (v2 API)
COHERE_CHAT_PATH = "/chat"
COHERE_EMBED_PATH = "/embed"

# Gemini (path templates take the wire model name)
GEMINI_GENERATE_PATH = "/models/{model}:generateContent"
GEMINI_BATCH_EMBED_PATH = "/models/{model}:batchEmbedContents"

# Server-sent events
SSE_DATA_PREFIX = "data:"
SSE_DONE = "[DONE]"

__all__ = [
    "IMAGE_PROMPT_MAX_CHARS",
    "IMAGE_N_MIN",
    "IMAGE_N_MAX",
    "IMAGE_SIZES",
    "IMAGE_QUALITIES",
    "IMAGE_STYLES",
    "IMAGE_RESPONSE_FORMATS",
    "DEFAULT_IMAGE_CONTENT_TYPE",
    "OPENAI_CHAT_PATH",
    "OPENAI_EMBEDDINGS_PATH",
    "OPENAI_IMAGES_PATH",
    "ANTHROPIC_MESSAGES_PATH",
    "ANTHROPIC_VERSION",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "COHERE_CHAT_PATH",
    "COHERE_EMBED_PATH",
    "GEMINI_GENERATE_PATH",
    "GEMINI_BATCH_EMBED_PATH",
    "SSE_DATA_PREFIX",
    "SSE_DONE",
]
