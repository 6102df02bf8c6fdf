"""
Dispatch failure taxonomy.

The dispatch layer surfaces exactly four failure shapes. All of them derive
from :class:`DispatchError` so callers can catch the family at once, and each
carries a normalized :class:`ErrorCode` for logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..adapter_kind import AdapterKind
from ..service_type import ServiceType
from .error_code import ErrorCode


class DispatchError(Exception):
    """Base class for every failure returned by the dispatcher."""

    code: ErrorCode = ErrorCode.UNKNOWN
    retryable: bool = False

    @property
    def message(self) -> str:  # pragma: no cover - overridden
        return "dispatch failed"

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


@dataclass(eq=False)
class ServiceTypeNotSupported(DispatchError):
    """The resolved adapter has no implementation for the requested service type.

    Attributes:
        adapter: Adapter kind that rejected the call.
        service_type: The requested operation kind.
    """

    adapter: AdapterKind
    service_type: ServiceType

    code = ErrorCode.UNSUPPORTED

    @property
    def message(self) -> str:
        return (
            f"Service type '{self.service_type.value}' is not supported "
            f"by adapter '{self.adapter.value}'"
        )


@dataclass(eq=False)
class InvalidRequest(DispatchError):
    """The request failed a locally checkable constraint before any network call.

    Attributes:
        field: Name of the offending request field.
        reason: Human-readable description of the violated constraint.
    """

    field: str
    reason: str

    code = ErrorCode.VALIDATION

    @property
    def message(self) -> str:
        return f"invalid '{self.field}': {self.reason}"


@dataclass(eq=False)
class TransportFailure(DispatchError):
    """Opaque pass-through of a lower-layer network, HTTP, or payload failure.

    Attributes:
        detail: Human-readable description from the lower layer.
        code: Classification of the underlying failure.
        adapter: Adapter kind whose call failed, when known.
        status: HTTP status code when the provider answered.
        raw: The original exception for diagnostics.
    """

    detail: str
    code: ErrorCode = ErrorCode.UNKNOWN
    adapter: Optional[AdapterKind] = None
    status: Optional[int] = None
    raw: Optional[BaseException] = None

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.code in (ErrorCode.TRANSIENT, ErrorCode.RATE_LIMIT, ErrorCode.TIMEOUT, ErrorCode.UNAVAILABLE)

    @property
    def message(self) -> str:
        origin = self.adapter.value if self.adapter else "-"
        status = f" (http {self.status})" if self.status is not None else ""
        return f"{origin}{status} {self.detail}"


@dataclass(eq=False)
class ResolutionFailure(DispatchError):
    """No adapter could be produced for a resolved kind.

    Resolution is total, so this signals a programming error such as an
    adapter kind missing from the factory table.
    """

    model: str
    detail: str = "no adapter registered"

    code = ErrorCode.INTERNAL

    @property
    def message(self) -> str:
        return f"cannot resolve adapter for '{self.model}': {self.detail}"


__all__ = [
    "DispatchError",
    "ServiceTypeNotSupported",
    "InvalidRequest",
    "TransportFailure",
    "ResolutionFailure",
]
