"""
Normalized error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every dispatch failure. Values
are lowercase snake_case and are considered a stable public contract for
logging and CLI exit reporting.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    MALFORMED_RESPONSE = "malformed_response"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
