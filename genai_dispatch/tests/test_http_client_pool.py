"""Unit tests for the shared httpx client pool."""
from __future__ import annotations

from genai_dispatch.base.http import close_all_clients, get_httpx_client
from genai_dispatch.base.timeouts import TimeoutConfig, get_timeout_config


def setup_function(_):
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_key_returns_same_instance():
    assert get_httpx_client(None, "openai.chat") is get_httpx_client(None, "openai.chat")


def test_different_purpose_returns_different_instances():
    assert get_httpx_client(None, "openai.chat") is not get_httpx_client(None, "openai.chat.stream")


def test_different_base_url_returns_different_instances():
    assert get_httpx_client("https://a.example", "chat") is not get_httpx_client("https://b.example", "chat")


def test_stream_purpose_uses_stream_timeout(monkeypatch):
    monkeypatch.setenv("GENAI_TIMEOUT_HTTP_SECONDS", "33")
    monkeypatch.setenv("GENAI_TIMEOUT_STREAM_SECONDS", "7")
    assert get_httpx_client(None, "groq.chat").timeout.read == 33
    assert get_httpx_client(None, "groq.chat.stream").timeout.read == 7


def test_timeout_env_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("GENAI_TIMEOUT_HTTP_SECONDS", "-1")
    monkeypatch.setenv("GENAI_TIMEOUT_CONNECT_SECONDS", "soon")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == TimeoutConfig().http_timeout_seconds
    assert cfg.connect_timeout_seconds == TimeoutConfig().connect_timeout_seconds


def test_close_all_clients_closes():
    c = get_httpx_client(None, "x")
    close_all_clients()
    assert c.is_closed
    assert get_httpx_client(None, "x") is not c
