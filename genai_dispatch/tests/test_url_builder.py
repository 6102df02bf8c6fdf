"""URL building keeps endpoint query strings and caller headers intact."""

from __future__ import annotations

import pytest

from genai_dispatch.base.http.url import build_url, join_path, merge_headers
from genai_dispatch.base.models import Endpoint


@pytest.mark.parametrize(
    "base, path, expected",
    [
        (
            "https://res.openai.azure.com/openai/deployments/d1?api-version=2024-02-01",
            "/images/generations",
            "https://res.openai.azure.com/openai/deployments/d1/images/generations?api-version=2024-02-01",
        ),
        ("https://api.openai.com/v1", "/images/generations", "https://api.openai.com/v1/images/generations"),
        ("https://api.openai.com/v1/", "images/generations", "https://api.openai.com/v1/images/generations"),
        ("https://api.openai.com/v1/", "/chat/completions", "https://api.openai.com/v1/chat/completions"),
        ("http://localhost:11434", "/v1/chat/completions", "http://localhost:11434/v1/chat/completions"),
        ("https://h/p?a=1&b=two%20words&a=3", "/x", "https://h/p/x?a=1&b=two%20words&a=3"),
    ],
)
def test_build_url(base, path, expected):
    assert build_url(Endpoint.from_url(base), path) == expected


def test_build_url_accepts_plain_string():
    assert build_url("https://h/v1?k=v", "/embed") == "https://h/v1/embed?k=v"


def test_no_query_added_when_base_has_none():
    assert "?" not in build_url("https://api.cohere.com/v2", "/chat")


def test_query_string_is_byte_identical():
    query = "api-version=2024-10-21&x=%2Fslash&empty="
    url = build_url(f"https://h/deployments/d?{query}", "/chat/completions")
    assert url.split("?", 1)[1] == query


@pytest.mark.parametrize(
    "base, suffix, expected",
    [("/v1", "/x", "/v1/x"), ("/v1/", "x", "/v1/x"), ("", "x", "/x"), ("/v1", "", "/v1"), ("/v1//", "//x", "/v1/x")],
)
def test_join_path(base, suffix, expected):
    assert join_path(base, suffix) == expected


def test_merge_headers_keeps_caller_headers_and_lets_them_win():
    ep = Endpoint.from_url("https://h", {"X-Team": "research", "authorization": "Bearer caller"})
    merged = merge_headers(ep, {"Authorization": "Bearer adapter", "anthropic-version": "2023-06-01"})
    assert merged == {
        "anthropic-version": "2023-06-01",
        "X-Team": "research",
        "authorization": "Bearer caller",
    }


def test_merge_headers_without_endpoint():
    assert merge_headers(None, {"a": "1"}) == {"a": "1"}


def test_endpoint_headers_are_frozen():
    src = {"X-A": "1"}
    ep = Endpoint.from_url("https://h", src)
    src["X-A"] = "2"
    assert ep.headers["X-A"] == "1"
    with pytest.raises(TypeError):
        ep.headers["X-B"] = "3"  # type: ignore[index]
