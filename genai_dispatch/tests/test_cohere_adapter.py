"""Cohere v2 adapter."""

from __future__ import annotations

from genai_dispatch.base.models import ChatRequest, EmbedRequest, Message
from genai_dispatch.client import Client


def test_chat(mock_http, monkeypatch):
    monkeypatch.setenv("COHERE_API_KEY", "co")
    mock_http.reply(
        json_body={
            "id": "c1",
            "finish_reason": "COMPLETE",
            "message": {"role": "assistant", "content": [{"type": "text", "text": "Hi!"}]},
            "usage": {"billed_units": {"input_tokens": 3, "output_tokens": 2}, "tokens": {"input_tokens": 70, "output_tokens": 2}},
        }
    )
    res = Client().exec_chat("command-r-plus", ChatRequest(messages=[Message.system("s"), Message.user("hey")], max_tokens=20))
    assert str(mock_http.last.url) == "https://api.cohere.com/v2/chat"
    assert mock_http.last.headers["authorization"] == "Bearer co"
    assert mock_http.last_json() == {
        "model": "command-r-plus",
        "messages": [{"role": "system", "content": "s"}, {"role": "user", "content": "hey"}],
        "max_tokens": 20,
    }
    assert res.text == "Hi!"
    assert res.usage.prompt_tokens == 70
    assert res.usage.total_tokens == 72


def test_chat_tool_calls(mock_http):
    mock_http.reply(
        json_body={
            "message": {
                "role": "assistant",
                "tool_plan": "I will look it up",
                "tool_calls": [{"id": "t1", "type": "function", "function": {"name": "search", "arguments": "{\"q\": \"x\"}"}}],
            }
        }
    )
    res = Client().exec_chat("command-a-03-2025", ChatRequest.from_user("find x"))
    assert res.text is None
    assert res.reasoning_content == "I will look it up"
    assert res.tool_calls[0].fn_arguments == {"q": "x"}


def test_embed(mock_http):
    mock_http.reply(
        json_body={
            "id": "e1",
            "embeddings": {"float": [[1, 2], [3, 4]]},
            "meta": {"billed_units": {"input_tokens": 6}},
        }
    )
    res = Client().embed("embed-english-v3.0", EmbedRequest(inputs=["a", "b"]))
    assert str(mock_http.last.url) == "https://api.cohere.com/v2/embed"
    assert mock_http.last_json() == {
        "model": "embed-english-v3.0",
        "texts": ["a", "b"],
        "input_type": "search_document",
        "embedding_types": ["float"],
    }
    assert res.embeddings == [[1.0, 2.0], [3.0, 4.0]]
    assert res.usage.prompt_tokens == 6


def test_embed_input_type_override(mock_http):
    mock_http.reply(json_body={"embeddings": {"float": [[0.5]]}})
    Client().embed("embed-english-v3.0", EmbedRequest(inputs=["q"], extra={"input_type": "search_query"}))
    assert mock_http.last_json()["input_type"] == "search_query"
