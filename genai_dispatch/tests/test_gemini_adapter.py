"""Gemini generateContent / batchEmbedContents adapter."""

from __future__ import annotations

from genai_dispatch.base.models import ChatRequest, ContentPart, EmbedRequest, Message
from genai_dispatch.client import Client


def test_chat(mock_http, monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "gk")
    mock_http.reply(
        json_body={
            "candidates": [
                {
                    "content": {
                        "role": "model",
                        "parts": [
                            {"text": "thinking...", "thought": True},
                            {"text": "Paris"},
                            {"functionCall": {"name": "lookup", "args": {"q": "capital"}}},
                        ],
                    }
                }
            ],
            "usageMetadata": {"promptTokenCount": 5, "candidatesTokenCount": 1, "totalTokenCount": 6},
        }
    )
    req = ChatRequest(
        messages=[
            Message.system("geography"),
            Message.user("capital of France?"),
            Message.assistant("Let me check"),
            Message(role="user", content=[ContentPart.from_image_base64("QUJD", "image/jpeg")]),
        ],
        max_tokens=10,
        temperature=0.0,
    )

    res = Client().exec_chat("gemini-2.0-flash", req)

    assert str(mock_http.last.url) == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
    )
    assert mock_http.last.headers["x-goog-api-key"] == "gk"
    body = mock_http.last_json()
    assert body["systemInstruction"] == {"parts": [{"text": "geography"}]}
    assert [c["role"] for c in body["contents"]] == ["user", "model", "user"]
    assert body["contents"][2]["parts"] == [{"inlineData": {"mimeType": "image/jpeg", "data": "QUJD"}}]
    assert body["generationConfig"] == {"maxOutputTokens": 10, "temperature": 0.0}
    assert res.text == "Paris"
    assert res.reasoning_content == "thinking..."
    assert res.tool_calls[0].fn_name == "lookup"
    assert res.usage.total_tokens == 6


def test_batch_embed(mock_http):
    mock_http.reply(json_body={"embeddings": [{"values": [0.1, 0.2]}, {"values": [0.3, 0.4]}]})
    res = Client().embed("text-embedding-004", EmbedRequest(inputs=["a", "b"]))
    assert str(mock_http.last.url) == (
        "https://generativelanguage.googleapis.com/v1beta/models/text-embedding-004:batchEmbedContents"
    )
    body = mock_http.last_json()
    assert body["requests"][1] == {"model": "models/text-embedding-004", "content": {"parts": [{"text": "b"}]}}
    assert res.embeddings == [[0.1, 0.2], [0.3, 0.4]]


def test_empty_candidates_yield_no_text(mock_http):
    mock_http.reply(json_body={"candidates": []})
    res = Client().exec_chat("gemini-1.5-pro", ChatRequest.from_user("hi"))
    assert res.text is None
    assert res.tool_calls == []
