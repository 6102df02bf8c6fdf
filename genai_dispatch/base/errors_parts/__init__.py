"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `genai_dispatch.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .dispatch_error import (
    DispatchError,
    InvalidRequest,
    ResolutionFailure,
    ServiceTypeNotSupported,
    TransportFailure,
)
from .classification import classify_exception, status_to_code

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
