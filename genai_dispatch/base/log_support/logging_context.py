"""Structured logging context object for dispatch events.

:class:`LogContext` carries the fields common to every event of one call
(adapter, model, service type) plus an ``extra`` mapping. ``to_dict`` merges
``extra`` and prunes ``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for dispatch logging events."""

    adapter: Optional[str] = None
    model: Optional[str] = None
    service_type: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
