"""Capability contract: default methods reject, overrides define support."""

from __future__ import annotations

import pytest

from genai_dispatch.base.adapter import SERVICE_METHODS, Adapter
from genai_dispatch.base.adapter_kind import AdapterKind
from genai_dispatch.base.dispatcher import Dispatcher
from genai_dispatch.base.errors import ErrorCode, ServiceTypeNotSupported
from genai_dispatch.base.factory import AdapterFactory
from genai_dispatch.base.models import (
    DEFAULT_CAPTURE,
    ChatRequest,
    EmbedRequest,
    Endpoint,
    ImageRequest,
    ModelIden,
)
from genai_dispatch.base.service_type import ServiceType

ALL = frozenset(ServiceType)
CHAT_ONLY = frozenset({ServiceType.CHAT, ServiceType.CHAT_STREAM})

EXPECTED = {
    AdapterKind.OPENAI: ALL,
    AdapterKind.AZURE_OPENAI: ALL,
    AdapterKind.GROQ: CHAT_ONLY,
    AdapterKind.XAI: CHAT_ONLY,
    AdapterKind.DEEPSEEK: CHAT_ONLY,
    AdapterKind.OLLAMA: CHAT_ONLY,
    AdapterKind.ANTHROPIC: frozenset({ServiceType.CHAT}),
    AdapterKind.COHERE: frozenset({ServiceType.CHAT, ServiceType.EMBED}),
    AdapterKind.GEMINI: frozenset({ServiceType.CHAT, ServiceType.EMBED}),
}

REQUESTS = {
    ServiceType.CHAT: ChatRequest.from_user("hi"),
    ServiceType.CHAT_STREAM: ChatRequest.from_user("hi"),
    ServiceType.EMBED: EmbedRequest.from_text("hi"),
    ServiceType.IMAGE_GENERATION: ImageRequest.from_prompt("a lighthouse at dusk"),
}

UNSUPPORTED_PAIRS = [(kind, st) for kind, supported in EXPECTED.items() for st in ServiceType if st not in supported]


def test_every_kind_is_registered():
    assert set(AdapterFactory.supported()) == set(AdapterKind)


@pytest.mark.parametrize("kind", list(AdapterKind))
def test_supported_service_types(kind):
    klass = AdapterFactory.adapter_class(kind)
    assert klass.kind is kind
    assert klass.supported_service_types() == EXPECTED[kind]


def test_service_method_table_covers_every_service_type():
    assert set(SERVICE_METHODS) == set(ServiceType)


@pytest.mark.parametrize("kind, service_type", UNSUPPORTED_PAIRS)
def test_default_method_raises_service_type_not_supported(kind, service_type):
    klass = AdapterFactory.adapter_class(kind)
    adapter = klass(endpoint=Endpoint.from_url("https://unused.example"), api_key="k")
    iden = ModelIden(kind, "m")
    with pytest.raises(ServiceTypeNotSupported) as info:
        adapter.method_for(service_type)(iden, REQUESTS[service_type], DEFAULT_CAPTURE)
    err = info.value
    assert err.adapter is kind
    assert err.service_type is service_type
    assert err.code is ErrorCode.UNSUPPORTED
    assert "Service type" in str(err) and "not supported" in str(err)


@pytest.mark.parametrize("kind, service_type", UNSUPPORTED_PAIRS)
def test_dispatch_of_unsupported_pair_fails_without_network(kind, service_type, mock_http):
    result = Dispatcher().dispatch(service_type, f"{kind.value}::m", REQUESTS[service_type])
    assert not result.ok
    assert isinstance(result.error, ServiceTypeNotSupported)
    assert result.error.adapter is kind
    assert mock_http.requests == []


def test_anthropic_image_generation_message():
    result = Dispatcher().dispatch(
        ServiceType.IMAGE_GENERATION, "claude-3-5-sonnet-latest", ImageRequest.from_prompt("a cat")
    )
    assert "Service type" in result.error.message
    assert "not supported" in result.error.message
    assert "anthropic" in result.error.message


def test_new_subclass_without_overrides_supports_nothing():
    class Bare(Adapter):
        kind = AdapterKind.OLLAMA

    assert Bare.supported_service_types() == frozenset()
    with pytest.raises(ServiceTypeNotSupported):
        Bare(endpoint=None).exec_chat(ModelIden(AdapterKind.OLLAMA, "m"), REQUESTS[ServiceType.CHAT], DEFAULT_CAPTURE)
