"""Pytest configuration for the dispatch test suite.

- ``isolated_config`` (autouse) clears adapter credentials and endpoints from
  the environment, points ``DOTENV_FILE`` at a missing file, and resets the
  config cache so tests never see a developer's real keys.
- ``mock_http`` routes every transport call to an ``httpx.MockTransport`` and
  records the requests it receives.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterator, List, Optional

import httpx
import pytest

from genai_dispatch.base.http import close_all_clients
from genai_dispatch.config import reset_config_cache
from genai_dispatch.config.env import ENV_ALIASES, ENV_FIELD_SUFFIXES, ENV_MAP


def _adapter_env_vars() -> List[str]:
    names = [f"{a.upper()}_{s}" for a in ENV_MAP for s in ENV_FIELD_SUFFIXES.values()]
    for aliases in ENV_ALIASES.values():
        names.extend(aliases)
    return names


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for name in _adapter_env_vars():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("GENAI_CONFIG_FILE", raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


class MockHTTP:
    """Recorder and responder behind an ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.purposes: List[str] = []
        self._responder: Callable[[httpx.Request], httpx.Response] = lambda req: httpx.Response(200, json={})
        self.client = httpx.Client(transport=httpx.MockTransport(self._handle))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._responder(request)

    def get_client(self, base_url: Optional[str], purpose: str) -> httpx.Client:
        self.purposes.append(purpose)
        return self.client

    def reply(self, status: int = 200, json_body: Any = None, text: Optional[str] = None) -> None:
        if json_body is not None:
            self._responder = lambda req: httpx.Response(status, json=json_body)
        else:
            self._responder = lambda req: httpx.Response(status, text=text or "")

    def reply_with(self, fn: Callable[[httpx.Request], httpx.Response]) -> None:
        self._responder = fn

    def reply_sse(self, payloads: List[Any], done: bool = True) -> None:
        """Reply with a server-sent event stream; dict payloads are JSON-encoded."""
        lines = [f"data: {json.dumps(p) if not isinstance(p, str) else p}\n\n" for p in payloads]
        if done:
            lines.append("data: [DONE]\n\n")
        body = "".join(lines).encode("utf-8")
        self._responder = lambda req: httpx.Response(
            200, content=body, headers={"content-type": "text/event-stream"}
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture()
def mock_http(monkeypatch: pytest.MonkeyPatch) -> Iterator[MockHTTP]:
    mock = MockHTTP()
    monkeypatch.setattr("genai_dispatch.base.http.transport.get_httpx_client", mock.get_client)
    yield mock
    mock.client.close()
