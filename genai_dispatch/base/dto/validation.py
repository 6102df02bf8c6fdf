"""
Request validation entry point used by the dispatcher.

Maps each :class:`ServiceType` to its DTO and converts Pydantic validation
errors into the dispatch taxonomy's :class:`InvalidRequest`, naming the first
offending field.
"""
from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, Type

from pydantic import BaseModel, ValidationError

from ..errors import InvalidRequest
from ..models import ChatRequest, EmbedRequest, ImageRequest
from ..service_type import ServiceType
from .requests import ChatRequestDTO, EmbedRequestDTO, ImageRequestDTO

_EXPECTED: Dict[ServiceType, tuple[type, Type[BaseModel]]] = {
    ServiceType.CHAT: (ChatRequest, ChatRequestDTO),
    ServiceType.CHAT_STREAM: (ChatRequest, ChatRequestDTO),
    ServiceType.EMBED: (EmbedRequest, EmbedRequestDTO),
    ServiceType.IMAGE_GENERATION: (ImageRequest, ImageRequestDTO),
}


def _first_error(exc: ValidationError) -> InvalidRequest:
    errors = exc.errors()
    if not errors:  # pragma: no cover - pydantic always reports at least one
        return InvalidRequest(field="request", reason=str(exc))
    first = errors[0]
    loc = [str(p) for p in first.get("loc", ())]
    field = ".".join(loc) if loc else "request"
    return InvalidRequest(field=field, reason=str(first.get("msg", "invalid value")))


def _as_mapping(request: Any) -> Dict[str, Any]:
    if isinstance(request, ChatRequest):
        # Message content may hold ContentPart dataclasses; keep them as-is.
        data = {k: v for k, v in vars(request).items() if k != "messages"}
        data["messages"] = [{"role": m.role, "content": m.content} for m in request.messages]
        return data
    return {f.name: getattr(request, f.name) for f in fields(request)}


def validate_request(service_type: ServiceType, request: Any) -> None:
    """Check ``request`` against the constraints for ``service_type``.

    Raises:
        InvalidRequest: When the request has the wrong type or violates a
            documented constraint.
    """
    expected_type, dto = _EXPECTED[service_type]
    if not isinstance(request, expected_type):
        raise InvalidRequest(
            field="request",
            reason=f"expected {expected_type.__name__} for {service_type.value}, got {type(request).__name__}",
        )
    try:
        dto.model_validate(_as_mapping(request))
    except ValidationError as exc:
        raise _first_error(exc) from exc


__all__ = ["validate_request"]
