"""Typed parameter object for adapter initialization.

Purpose
-------
Capture the per-adapter settings a client may override (credentials, endpoint
URL, static headers) without long argument lists. Values left ``None`` fall
back to the layered configuration in :mod:`genai_dispatch.config`.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_dump()` convenience.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdapterParams(BaseModel):
    """Common adapter initialization parameters.

    Attributes
    ----------
    api_key:
        API key or token. Prefer environment configuration; this field exists
        for explicit wiring.
    base_url:
        Endpoint base URL, which may carry query parameters (Azure
        ``api-version``) that are preserved on every call.
    headers:
        Static HTTP headers forwarded unchanged on every request.
    extra:
        Free-form adapter-specific settings.
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    headers: Mapping[str, str] = Field(default_factory=dict)
    extra: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["AdapterParams"]
