"""Shared HTTP client pool for adapters.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so adapters do not allocate a client per call. Timeouts derive
    exclusively from :func:`get_timeout_config`.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``. Adapters pass absolute
      URLs built by :func:`~genai_dispatch.base.http.url.build_url`, so they
      use ``base_url=None`` and a purpose such as ``"openai.chat"``.
    - Purposes ending in ``.stream`` get the streaming read timeout.
    - All clients are closed at interpreter exit via ``atexit``; tests may
      call :func:`close_all_clients` explicitly.
"""
from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional base URL set on the client; ``None`` groups clients
            that are always called with absolute URLs.
        purpose: Short discriminator for separate pools (e.g. ``"openai.chat"``).

    Returns:
        A reusable ``httpx.Client`` instance.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        timeout = get_timeout_config().for_purpose(streaming=purpose.endswith(".stream"))
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            with contextlib.suppress(Exception):  # nosec B110 - best-effort shutdown
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
