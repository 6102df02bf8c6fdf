"""Public client surface."""

from __future__ import annotations

import pytest

from genai_dispatch import (
    AdapterKind,
    AdapterParams,
    CaptureOptions,
    Client,
    ClientConfig,
    ImageRequest,
    InvalidRequest,
    ModelResolver,
    ServiceType,
    ServiceTypeNotSupported,
)


def test_config_is_immutable():
    cfg = ClientConfig()
    with pytest.raises(TypeError):
        cfg.adapters[AdapterKind.OPENAI] = AdapterParams()  # type: ignore[index]
    with pytest.raises(Exception):
        cfg.capture = CaptureOptions()  # type: ignore[misc]


def test_with_adapter_returns_copy():
    cfg = ClientConfig()
    updated = cfg.with_adapter(AdapterKind.OLLAMA, AdapterParams(base_url="http://box:11434/v1"))
    assert AdapterKind.OLLAMA not in cfg.adapters
    assert updated.adapters[AdapterKind.OLLAMA].base_url == "http://box:11434/v1"
    assert updated.resolver is cfg.resolver


def test_resolve_uses_configured_resolver():
    resolver = ModelResolver().with_registry({"house-model": AdapterKind.GROQ})
    client = Client(ClientConfig(resolver=resolver))
    assert client.resolve("house-model").adapter_kind is AdapterKind.GROQ
    assert client.resolve("claude-3-haiku").adapter_kind is AdapterKind.ANTHROPIC


def test_image_generation_on_anthropic_raises(mock_http):
    with pytest.raises(ServiceTypeNotSupported) as exc:
        Client().exec_image_generation("claude-3-opus", ImageRequest.from_prompt("fox"))
    assert exc.value.adapter is AdapterKind.ANTHROPIC
    assert exc.value.service_type is ServiceType.IMAGE_GENERATION
    assert mock_http.requests == []


def test_image_generation_returns_images(mock_http):
    mock_http.reply(json_body={"data": [{"url": "https://img/1.png"}, {"url": "https://img/2.png"}]})
    res = Client().exec_image_generation("dall-e-3", ImageRequest.from_prompt("fox").with_n(2))
    assert [p.source.value for p in res.all_images()] == ["https://img/1.png", "https://img/2.png"]
    assert res.model_iden.adapter_kind is AdapterKind.OPENAI
    assert mock_http.last.url.path == "/v1/images/generations"


def test_configured_capture_is_default(mock_http):
    mock_http.reply(json_body={"data": [{"b64_json": "QUJD"}]})
    client = Client(ClientConfig(capture=CaptureOptions(capture_raw_body=True)))
    res = client.exec_image_generation("dall-e-3", ImageRequest.from_prompt("fox"))
    assert res.captured_raw_body == {"data": [{"b64_json": "QUJD"}]}


def test_dispatch_does_not_raise(mock_http):
    result = Client().dispatch(ServiceType.IMAGE_GENERATION, "dall-e-3", ImageRequest(prompt="fox", n=11))
    assert not result.ok
    assert isinstance(result.error, InvalidRequest)
    assert result.error.field == "n"
