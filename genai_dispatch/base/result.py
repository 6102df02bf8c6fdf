"""
DispatchResult: success-or-failure value returned by the dispatcher.

A failure always carries one of the :class:`DispatchError` subclasses, so
callers can branch on ``ok`` or call :meth:`DispatchResult.unwrap` to get the
value or have the typed error raised.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import DispatchError

T = TypeVar("T")


@dataclass(frozen=True)
class DispatchResult(Generic[T]):
    """Outcome of one dispatched call."""

    value: Optional[T] = None
    error: Optional[DispatchError] = None

    @classmethod
    def success(cls, value: T) -> "DispatchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DispatchError) -> "DispatchResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


__all__ = ["DispatchResult"]
