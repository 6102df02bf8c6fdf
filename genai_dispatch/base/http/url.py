"""Request URL construction that preserves endpoint query parameters.

An endpoint's base URL may already carry query parameters that the provider
requires on every call (Azure OpenAI's ``api-version``). ``build_url`` appends
an operation path to the base path and re-attaches the original query string
untouched, so adapters never need endpoint-specific URL handling.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

from ..models import Endpoint


def join_path(base_path: str, suffix: str) -> str:
    """Join two path segments with exactly one ``/`` between them."""
    if not suffix:
        return base_path
    if not base_path:
        return "/" + suffix.lstrip("/")
    return base_path.rstrip("/") + "/" + suffix.lstrip("/")


def build_url(endpoint: Endpoint | str, path: str) -> str:
    """Return the request URL for ``path`` under ``endpoint``.

    The base URL is split into scheme, host, path, query and fragment; ``path``
    is appended to the base path; the original query string and fragment are
    re-attached verbatim. A base without a query yields a URL without one.

    Example:
        ``https://host/openai/deployments/d1?api-version=2024-02-01`` with
        ``/images/generations`` gives
        ``https://host/openai/deployments/d1/images/generations?api-version=2024-02-01``.
    """
    base_url = endpoint.base_url if isinstance(endpoint, Endpoint) else endpoint
    parts = urlsplit(base_url)
    return urlunsplit((parts.scheme, parts.netloc, join_path(parts.path, path), parts.query, parts.fragment))


def merge_headers(endpoint: Optional[Endpoint], auth_headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return outbound headers: adapter headers first, endpoint headers on top.

    Caller-configured endpoint headers are never modified or dropped; when a
    name collides (case-insensitively) the caller's value wins.
    """
    merged: Dict[str, str] = {}
    for source in (auth_headers or {}, endpoint.headers if endpoint else {}):
        for name, value in source.items():
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
    return merged


__all__ = ["build_url", "join_path", "merge_headers"]
