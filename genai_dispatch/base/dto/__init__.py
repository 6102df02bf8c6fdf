"""DTO validation package for the dispatch layer."""

from .adapter_params import AdapterParams
from .requests import ChatRequestDTO, EmbedRequestDTO, ImageRequestDTO, MessageDTO, ToolSpecDTO
from .validation import validate_request

__all__ = [
    "AdapterParams",
    "ChatRequestDTO",
    "EmbedRequestDTO",
    "ImageRequestDTO",
    "MessageDTO",
    "ToolSpecDTO",
    "validate_request",
]
