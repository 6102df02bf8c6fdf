"""Dispatch error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``genai_dispatch.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.dispatch_error import (
    DispatchError,
    InvalidRequest,
    ResolutionFailure,
    ServiceTypeNotSupported,
    TransportFailure,
)
from .errors_parts.classification import classify_exception, status_to_code

__all__ = [
    "ErrorCode",
    "DispatchError",
    "ServiceTypeNotSupported",
    "InvalidRequest",
    "TransportFailure",
    "ResolutionFailure",
    "classify_exception",
    "status_to_code",
]
