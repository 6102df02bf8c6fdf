"""Gemini adapter package."""

from .client import GeminiAdapter

__all__ = ["GeminiAdapter"]
