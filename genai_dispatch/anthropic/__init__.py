"""Anthropic adapter package."""

from .client import AnthropicAdapter

__all__ = ["AnthropicAdapter"]
