"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``genai_dispatch.base.models_parts``.
"""

from .models_parts.capture_options import DEFAULT_CAPTURE, CaptureOptions
from .models_parts.chat_request import ChatRequest
from .models_parts.chat_response import ChatResponse
from .models_parts.chat_stream_event import ChatStreamEvent, StreamEnd, StreamToolChunk
from .models_parts.content_part import ContentPart, ContentPartType, ImageSource
from .models_parts.embed_request import EmbedRequest
from .models_parts.embed_response import EmbedResponse
from .models_parts.endpoint import Endpoint
from .models_parts.image_request import ImageRequest
from .models_parts.image_response import ImageResponse
from .models_parts.message import Message, Role
from .models_parts.model_iden import NAMESPACE_SEPARATOR, ModelIden
from .models_parts.tool_call import ToolCall
from .models_parts.usage import Usage

__all__ = [
    "CaptureOptions",
    "DEFAULT_CAPTURE",
    "ChatRequest",
    "ChatResponse",
    "ChatStreamEvent",
    "StreamEnd",
    "StreamToolChunk",
    "ContentPart",
    "ContentPartType",
    "ImageSource",
    "EmbedRequest",
    "EmbedResponse",
    "Endpoint",
    "ImageRequest",
    "ImageResponse",
    "Message",
    "Role",
    "ModelIden",
    "NAMESPACE_SEPARATOR",
    "ToolCall",
    "Usage",
]
