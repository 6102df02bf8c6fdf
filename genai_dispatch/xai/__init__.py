"""xAI (Grok) adapter package."""

from .client import XAIAdapter

__all__ = ["XAIAdapter"]
