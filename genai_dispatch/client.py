"""Public client.

:class:`Client` is the entry point for callers. It owns an immutable
:class:`ClientConfig` and a :class:`Dispatcher`, and turns every
``DispatchResult`` into either a value or a raised :class:`DispatchError`.

Example::

    from genai_dispatch import Client, ImageRequest

    client = Client()
    res = client.exec_image_generation("dall-e-3", ImageRequest.from_prompt("a red fox").with_n(2))
    for image in res.all_images():
        print(image.source.value)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .base.adapter_kind import AdapterKind
from .base.dispatcher import Dispatcher
from .base.dto.adapter_params import AdapterParams
from .base.models import (
    CaptureOptions,
    ChatRequest,
    ChatResponse,
    EmbedRequest,
    EmbedResponse,
    ImageRequest,
    ImageResponse,
    ModelIden,
)
from .base.resolver import ModelResolver
from .base.result import DispatchResult
from .base.service_type import ServiceType
from .base.streaming import ChatStream


@dataclass(frozen=True)
class ClientConfig:
    """Read-only client configuration.

    Attributes:
        adapters: Explicit per-kind settings; unset values fall back to the
            layered configuration (file, environment, defaults).
        resolver: Model-to-adapter resolver.
        capture: Capture options used when a call passes none.
    """

    adapters: Mapping[AdapterKind, AdapterParams] = field(default_factory=dict)
    resolver: ModelResolver = field(default_factory=ModelResolver)
    capture: Optional[CaptureOptions] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "adapters", MappingProxyType(dict(self.adapters)))

    def with_adapter(self, kind: AdapterKind, params: AdapterParams) -> "ClientConfig":
        """Return a copy with ``params`` registered for ``kind``."""
        adapters = dict(self.adapters)
        adapters[kind] = params
        return ClientConfig(adapters=adapters, resolver=self.resolver, capture=self.capture)


class Client:
    """Provider-agnostic client for chat, streaming chat, embeddings and images."""

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self._config = config or ClientConfig()
        self._dispatcher = Dispatcher(resolver=self._config.resolver, adapter_params=self._config.adapters)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def resolve(self, model: str) -> ModelIden:
        """Return the adapter kind and model name a call for ``model`` would use."""
        return self._config.resolver.resolve_iden(model)

    def dispatch(
        self,
        service_type: ServiceType,
        model: str,
        request: Any,
        options: Optional[CaptureOptions] = None,
    ) -> DispatchResult[Any]:
        """Dispatch without raising; inspect the returned result instead."""
        return self._dispatcher.dispatch(service_type, model, request, options or self._config.capture)

    def exec_chat(self, model: str, request: ChatRequest, options: Optional[CaptureOptions] = None) -> ChatResponse:
        return self.dispatch(ServiceType.CHAT, model, request, options).unwrap()

    def exec_chat_stream(self, model: str, request: ChatRequest, options: Optional[CaptureOptions] = None) -> ChatStream:
        return self.dispatch(ServiceType.CHAT_STREAM, model, request, options).unwrap()

    def embed(self, model: str, request: EmbedRequest, options: Optional[CaptureOptions] = None) -> EmbedResponse:
        return self.dispatch(ServiceType.EMBED, model, request, options).unwrap()

    def exec_image_generation(
        self, model: str, request: ImageRequest, options: Optional[CaptureOptions] = None
    ) -> ImageResponse:
        """Generate images with the adapter that owns ``model``.

        Raises:
            ServiceTypeNotSupported: The adapter has no image generation.
            InvalidRequest: The request breaks a documented bound, or the
                adapter has no endpoint configured.
            TransportFailure: The provider call failed.
        """
        return self.dispatch(ServiceType.IMAGE_GENERATION, model, request, options).unwrap()


__all__ = ["Client", "ClientConfig"]
