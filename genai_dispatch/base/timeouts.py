"""Timeout configuration for the transport layer.

The dispatch layer has no timeout or cancellation policy of its own; the only
bound is the ``httpx`` client timeout, sourced here so that no numeric
literals are scattered across adapters.

Supported environment variables (all optional, positive floats):
    GENAI_TIMEOUT_CONNECT_SECONDS
    GENAI_TIMEOUT_HTTP_SECONDS
    GENAI_TIMEOUT_STREAM_SECONDS

Values are parsed on first use and cached; the cache refreshes when the
variables change so tests can adjust them with ``monkeypatch``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

_ENV_NAMES = (
    "GENAI_TIMEOUT_CONNECT_SECONDS",
    "GENAI_TIMEOUT_HTTP_SECONDS",
    "GENAI_TIMEOUT_STREAM_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values in seconds.

    Attributes:
        connect_timeout_seconds: Time allowed to establish a connection.
        http_timeout_seconds: Read timeout for non-streaming requests.
        stream_timeout_seconds: Idle read timeout between streamed chunks.
    """

    connect_timeout_seconds: float = 10.0
    http_timeout_seconds: float = 120.0
    stream_timeout_seconds: float = 60.0

    def for_purpose(self, streaming: bool) -> httpx.Timeout:
        """Return the ``httpx.Timeout`` for a pooled client."""
        read = self.stream_timeout_seconds if streaming else self.http_timeout_seconds
        return httpx.Timeout(read, connect=self.connect_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Return the positive float in ``name`` or ``default`` when unset or invalid."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(n, "") for n in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float(_ENV_NAMES[0], defaults.connect_timeout_seconds),
        http_timeout_seconds=_parse_env_float(_ENV_NAMES[1], defaults.http_timeout_seconds),
        stream_timeout_seconds=_parse_env_float(_ENV_NAMES[2], defaults.stream_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
