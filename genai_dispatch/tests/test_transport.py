"""JSON transport: payload encoding failures are caller errors."""

from __future__ import annotations

import pytest

from genai_dispatch.base.adapter_kind import AdapterKind
from genai_dispatch.base.errors import InvalidRequest
from genai_dispatch.base.http.transport import open_stream, post_json


@pytest.mark.parametrize("send", [post_json, open_stream])
def test_unencodable_payload_is_invalid_request(send, mock_http):
    with pytest.raises(InvalidRequest) as exc:
        send(
            "https://api.example/v1/chat/completions",
            headers={},
            payload={"seed": object()},
            purpose="openai.chat",
            adapter=AdapterKind.OPENAI,
        )
    assert exc.value.field == "request"
    assert mock_http.requests == []


def test_post_json_returns_decoded_body(mock_http):
    mock_http.reply(json_body={"ok": True})
    body = post_json("https://api.example/v1/x?api-version=1", headers={"X-A": "1"}, payload={"a": 1}, purpose="t")
    assert body == {"ok": True}
    assert mock_http.last.headers["X-A"] == "1"
    assert mock_http.last.url.params["api-version"] == "1"
