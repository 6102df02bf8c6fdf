"""Adapter capability contract.

Every provider adapter derives from :class:`Adapter`, which exposes one method
per :class:`ServiceType`. Each method's default implementation raises
:class:`ServiceTypeNotSupported`, so:

* an adapter overrides exactly the operations its provider offers;
* a new service type added centrally is rejected uniformly by every adapter
  until one explicitly overrides it.

Adapters never build URLs by hand. :meth:`Adapter.url_for` delegates to
:func:`~genai_dispatch.base.http.url.build_url`, which preserves the
endpoint's query string, and :meth:`Adapter.request_headers` layers the
endpoint's headers over the adapter's auth headers.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, ClassVar, Dict, FrozenSet, Iterator, Mapping, Optional

from .adapter_kind import AdapterKind
from .errors import ErrorCode, InvalidRequest, ServiceTypeNotSupported, TransportFailure
from .http.transport import open_stream, post_json
from .http.url import build_url, merge_headers
from .logging import get_logger
from .models import (
    CaptureOptions,
    ChatRequest,
    ChatResponse,
    EmbedRequest,
    EmbedResponse,
    Endpoint,
    ImageRequest,
    ImageResponse,
    ModelIden,
)
from .service_type import ServiceType
from .streaming import ChatStream

SERVICE_METHODS: Mapping[ServiceType, str] = {
    ServiceType.CHAT: "exec_chat",
    ServiceType.CHAT_STREAM: "exec_chat_stream",
    ServiceType.EMBED: "embed",
    ServiceType.IMAGE_GENERATION: "exec_image_generation",
}


class Adapter:
    """Base class for provider adapters.

    Subclasses set ``kind`` and override the capability methods they support.

    Parameters
    ----------
    endpoint:
        Base URL and preserved headers. ``None`` when the adapter has no usable
        default (Azure OpenAI) and nothing was configured.
    api_key:
        Credential for the provider, if any.
    extra:
        Adapter-specific settings from configuration.
    """

    kind: ClassVar[AdapterKind]

    def __init__(
        self,
        endpoint: Optional[Endpoint],
        api_key: Optional[str] = None,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._endpoint = endpoint
        self._api_key = api_key
        self._extra: Dict[str, Any] = dict(extra or {})
        self._logger = get_logger(f"genai.{self.kind.value}")

    @property
    def endpoint(self) -> Optional[Endpoint]:
        return self._endpoint

    # ----- Capability surface (defaults reject) -----

    def exec_chat(self, iden: ModelIden, request: ChatRequest, options: CaptureOptions) -> ChatResponse:
        """Execute a single chat completion."""
        raise self._unsupported(ServiceType.CHAT)

    def exec_chat_stream(self, iden: ModelIden, request: ChatRequest, options: CaptureOptions) -> ChatStream:
        """Open a streaming chat completion."""
        raise self._unsupported(ServiceType.CHAT_STREAM)

    def embed(self, iden: ModelIden, request: EmbedRequest, options: CaptureOptions) -> EmbedResponse:
        """Embed one or more texts."""
        raise self._unsupported(ServiceType.EMBED)

    def exec_image_generation(self, iden: ModelIden, request: ImageRequest, options: CaptureOptions) -> ImageResponse:
        """Generate images from a text prompt."""
        raise self._unsupported(ServiceType.IMAGE_GENERATION)

    def _unsupported(self, service_type: ServiceType) -> ServiceTypeNotSupported:
        return ServiceTypeNotSupported(adapter=self.kind, service_type=service_type)

    # ----- Capability introspection -----

    @classmethod
    def supported_service_types(cls) -> FrozenSet[ServiceType]:
        """Return the service types this adapter class overrides."""
        return frozenset(
            st for st, name in SERVICE_METHODS.items() if getattr(cls, name) is not getattr(Adapter, name)
        )

    def method_for(self, service_type: ServiceType) -> Callable[..., Any]:
        """Return the bound capability method for ``service_type``."""
        return getattr(self, SERVICE_METHODS[service_type])

    # ----- Outbound call helpers -----

    def auth_headers(self) -> Dict[str, str]:
        """Provider authentication and protocol headers (none by default)."""
        return {}

    def request_headers(self) -> Dict[str, str]:
        return merge_headers(self._endpoint, self.auth_headers())

    def url_for(self, path: str) -> str:
        """Build the request URL for an operation path under the endpoint."""
        if self._endpoint is None:
            raise InvalidRequest(field="endpoint", reason=f"no endpoint configured for adapter '{self.kind.value}'")
        return build_url(self._endpoint, path)

    def _post(self, path: str, payload: Dict[str, Any], *, purpose: str) -> Any:
        return post_json(
            self.url_for(path),
            headers=self.request_headers(),
            payload=payload,
            purpose=f"{self.kind.value}.{purpose}",
            adapter=self.kind,
        )

    def _open_stream(self, path: str, payload: Dict[str, Any]):
        return open_stream(
            self.url_for(path),
            headers=self.request_headers(),
            payload=payload,
            purpose=f"{self.kind.value}.chat.stream",
            adapter=self.kind,
        )

    @contextmanager
    def _parsing(self, what: str) -> Iterator[None]:
        """Convert shape errors while reading a provider body into ``TransportFailure``."""
        try:
            yield
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as exc:
            raise TransportFailure(
                code=ErrorCode.MALFORMED_RESPONSE,
                detail=f"unexpected {what} payload: {exc}",
                adapter=self.kind,
                raw=exc,
            ) from exc

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        base = self._endpoint.base_url if self._endpoint else None
        return f"{type(self).__name__}(kind={self.kind.value!r}, base_url={base!r})"


__all__ = ["Adapter", "SERVICE_METHODS"]
