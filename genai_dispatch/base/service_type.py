"""
Service type classification.

Defines the closed set of operation kinds a request can target. Adding a
member here is the only change needed for every adapter to acquire a defined
(rejecting) behaviour for it, via the default methods on
:class:`~genai_dispatch.base.adapter.Adapter`.
"""
from __future__ import annotations

from enum import Enum


class ServiceType(str, Enum):
    """Operation kinds understood by the dispatcher."""

    CHAT = "chat"
    CHAT_STREAM = "chat_stream"
    EMBED = "embed"
    IMAGE_GENERATION = "image_generation"


__all__ = ["ServiceType"]
