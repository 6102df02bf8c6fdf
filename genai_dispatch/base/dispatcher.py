"""Dispatcher: route a service call to the adapter owning a model.

Flow for one call:
    1. resolve the model identifier to a :class:`ModelIden`;
    2. look up (or lazily create) the adapter for its kind;
    3. validate the request locally;
    4. invoke the adapter method for the service type;
    5. attach ``model_iden`` and drop the raw body unless capture was asked for.

Every :class:`DispatchError` raised on the way is returned as a failed
:class:`DispatchResult`; the error shape does not depend on the adapter.
The adapter cache is filled with ``dict.setdefault``: two threads racing on
the same kind may both build an adapter, and one instance wins.
"""
from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional

from .adapter import Adapter
from .adapter_kind import AdapterKind
from .dto.adapter_params import AdapterParams
from .dto.validation import validate_request
from .errors import DispatchError, ResolutionFailure
from .factory import AdapterFactory, UnknownAdapterError
from .logging import LogContext, get_logger, normalized_log_event
from .models import DEFAULT_CAPTURE, CaptureOptions, ModelIden
from .resolver import ModelResolver
from .result import DispatchResult
from .service_type import ServiceType
from .streaming import ChatStream


class Dispatcher:
    """Resolve, validate and route calls to adapters.

    Parameters:
        resolver: Model resolver; defaults to the built-in rule list.
        adapter_params: Per-kind explicit settings passed to the factory.
        factory: Adapter factory class (replaceable in tests).
    """

    def __init__(
        self,
        resolver: Optional[ModelResolver] = None,
        adapter_params: Optional[Mapping[AdapterKind, AdapterParams]] = None,
        factory: type = AdapterFactory,
    ) -> None:
        self._resolver = resolver or ModelResolver()
        self._params: Dict[AdapterKind, AdapterParams] = dict(adapter_params or {})
        self._factory = factory
        self._adapters: Dict[AdapterKind, Adapter] = {}
        self._logger = get_logger("genai.dispatch")

    @property
    def resolver(self) -> ModelResolver:
        return self._resolver

    def adapter_for(self, kind: AdapterKind) -> Adapter:
        """Return the cached adapter for ``kind``, creating it on first use."""
        adapter = self._adapters.get(kind)
        if adapter is None:
            adapter = self._adapters.setdefault(kind, self._factory.create(kind, self._params.get(kind)))
        return adapter

    def dispatch(
        self,
        service_type: ServiceType,
        model: str,
        request: Any,
        capture_opts: Optional[CaptureOptions] = None,
    ) -> DispatchResult[Any]:
        """Run one call and return its :class:`DispatchResult`."""
        options = capture_opts or DEFAULT_CAPTURE
        iden = self._resolver.resolve_iden(model)
        ctx = LogContext(adapter=iden.adapter_kind.value, model=model, service_type=service_type.value)
        normalized_log_event(self._logger, "dispatch.start", ctx, phase="start")
        t0 = time.perf_counter()
        try:
            value = self._invoke(service_type, iden, request, options)
        except DispatchError as err:
            normalized_log_event(
                self._logger,
                "dispatch.error",
                ctx,
                phase="finalize",
                error_code=err.code.value,
                level=logging.WARNING,
                error=err.message,
            )
            return DispatchResult.failure(err)
        usage = getattr(value, "usage", None)
        normalized_log_event(
            self._logger,
            "dispatch.success",
            ctx,
            phase="finalize",
            tokens=usage.to_dict() if usage is not None else None,
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 2),
        )
        return DispatchResult.success(value)

    def _invoke(self, service_type: ServiceType, iden: ModelIden, request: Any, options: CaptureOptions) -> Any:
        try:
            adapter = self.adapter_for(iden.adapter_kind)
        except UnknownAdapterError as exc:
            raise ResolutionFailure(model=iden.model_name, detail=str(exc)) from exc
        validate_request(service_type, request)
        value = adapter.method_for(service_type)(iden, request, options)
        return self._finalize(value, iden, options)

    @staticmethod
    def _finalize(value: Any, iden: ModelIden, options: CaptureOptions) -> Any:
        if isinstance(value, ChatStream):
            value.model_iden = iden
            return value
        raw = value.captured_raw_body if options.capture_raw_body else None
        return replace(value, model_iden=iden, captured_raw_body=raw)


__all__ = ["Dispatcher"]
