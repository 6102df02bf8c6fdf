"""genai_dispatch package

Provider-agnostic dispatch of chat, streaming chat, embedding and image
generation calls to OpenAI, Azure OpenAI, Anthropic, Cohere, Gemini, Groq,
xAI, DeepSeek and Ollama.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`Client`, :class:`ClientConfig`
    - Classification: :class:`ServiceType`, :class:`AdapterKind`, :class:`ModelResolver`
    - Errors: :class:`DispatchError` and its subclasses, :class:`ErrorCode`
    - Requests/responses from :mod:`genai_dispatch.base.models`
"""

from .base.adapter_kind import AdapterKind
from .base.dto.adapter_params import AdapterParams
from .base.errors import (
    DispatchError,
    ErrorCode,
    InvalidRequest,
    ResolutionFailure,
    ServiceTypeNotSupported,
    TransportFailure,
)
from .base.models import (
    CaptureOptions,
    ChatRequest,
    ChatResponse,
    ContentPart,
    EmbedRequest,
    EmbedResponse,
    Endpoint,
    ImageRequest,
    ImageResponse,
    Message,
    ModelIden,
    Usage,
)
from .base.resolver import ModelResolver
from .base.result import DispatchResult
from .base.service_type import ServiceType
from .base.streaming import ChatStream
from .client import Client, ClientConfig

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Client",
    "ClientConfig",
    "AdapterKind",
    "AdapterParams",
    "ServiceType",
    "ModelResolver",
    "DispatchResult",
    "DispatchError",
    "ErrorCode",
    "InvalidRequest",
    "ResolutionFailure",
    "ServiceTypeNotSupported",
    "TransportFailure",
    "CaptureOptions",
    "ChatRequest",
    "ChatResponse",
    "ChatStream",
    "ContentPart",
    "EmbedRequest",
    "EmbedResponse",
    "Endpoint",
    "ImageRequest",
    "ImageResponse",
    "Message",
    "ModelIden",
    "Usage",
]
