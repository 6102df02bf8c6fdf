"""
Endpoint value object.

An endpoint is the caller-configured base URL plus static headers that must
reach the transport unchanged. The base URL may already carry query parameters
(Azure OpenAI requires ``?api-version=...`` on every call); those are kept
verbatim by :func:`genai_dispatch.base.http.url.build_url`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Endpoint:
    """Read-only base URL and preserved headers shared by every call of a client.

    Attributes:
        base_url: Absolute base URL, optionally with a query string.
        headers: Caller-supplied headers forwarded on every request.
    """

    base_url: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the header mapping so concurrent calls share an immutable snapshot.
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers or {})))

    @classmethod
    def from_url(cls, base_url: str, headers: Optional[Mapping[str, str]] = None) -> "Endpoint":
        """Build an endpoint from a URL string and optional header mapping."""
        return cls(base_url=base_url.strip(), headers=dict(headers or {}))


__all__ = ["Endpoint"]
