"""Structured logging: normalized keys and dispatch lifecycle events."""

from __future__ import annotations

import json
import logging
from typing import Iterator, List

import pytest

from genai_dispatch.base.dispatcher import Dispatcher
from genai_dispatch.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from genai_dispatch.base.log_support import JsonFormatter
from genai_dispatch.base.models import ChatRequest, ImageRequest
from genai_dispatch.base.service_type import ServiceType


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.payloads: List[dict] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            payload = {"event": "", "msg": record.getMessage()}
        self.payloads.append(payload)


@pytest.fixture()
def captured() -> Iterator[_ListHandler]:
    base = get_logger()
    handler = _ListHandler()
    base.addHandler(handler)
    yield handler
    base.removeHandler(handler)


def test_child_loggers_propagate_to_base():
    child = get_logger("genai.unit")
    assert child.propagate
    assert not logging.getLogger("genai").propagate


def test_log_event_drops_none_fields(captured):
    log_event(get_logger("genai.unit"), "unit.event", LogContext(adapter="openai"), a=1, b=None)
    assert captured.payloads[-1] == {"event": "unit.event", "adapter": "openai", "a": 1}


def test_normalized_event_has_canonical_keys(captured):
    normalized_log_event(get_logger("genai.unit"), "unit.norm", None, phase="start", error_code="auth", phase_extra=1)
    payload = captured.payloads[-1]
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload
    assert payload["tokens"] is None


def test_extra_fields_cannot_clobber_canonical(captured):
    normalized_log_event(get_logger("genai.unit"), "unit.norm", None, phase="start", tokens={"total_tokens": 1}, extra_x="y")
    assert captured.payloads[-1]["tokens"] == {"total_tokens": 1}


def test_dispatch_logs_start_and_error(captured, mock_http):
    Dispatcher().dispatch(ServiceType.IMAGE_GENERATION, "claude-3-opus", ImageRequest.from_prompt("fox"))
    events = [p for p in captured.payloads if p["event"].startswith("dispatch.")]
    assert [e["event"] for e in events] == ["dispatch.start", "dispatch.error"]
    assert events[1]["error_code"] == "unsupported"
    assert events[1]["adapter"] == "anthropic"
    assert events[1]["service_type"] == "image_generation"


def test_dispatch_logs_success_with_tokens(captured, mock_http):
    mock_http.reply(json_body={"choices": [{"message": {"content": "x"}}], "usage": {"prompt_tokens": 1, "completion_tokens": 1}})
    Dispatcher().dispatch(ServiceType.CHAT, "gpt-4o", ChatRequest.from_user("hi"))
    success = [p for p in captured.payloads if p["event"] == "dispatch.success"][-1]
    assert success["tokens"] == {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2}
    assert "latency_ms" in success


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("GENAI_LOG_LEVEL", "error")
    assert get_logger().level == logging.ERROR
    monkeypatch.setenv("GENAI_LOG_LEVEL", "info")
    assert get_logger().level == logging.INFO


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "genai.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        log_event(get_logger("genai.unit"), "file.event", None, n=1)
        for h in logger.handlers:
            h.flush()
        line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "file.event"
        assert record["logger"] == "genai.unit"
    finally:
        configure_logger(level="INFO", file_path=None)


def test_json_formatter_hoists_payload():
    record = logging.LogRecord("genai.x", logging.INFO, __file__, 1, '{"event": "e", "k": 2}', None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e"
    assert out["k"] == 2
    assert "msg" not in out
