"""
Pydantic DTOs validating requests before dispatch.

Purpose
-------
Enforce the locally checkable constraints of each request kind (prompt length,
image count, enumerated option values, non-empty inputs) so that the
dispatcher can reject a bad request before any adapter override, URL
construction, or network call happens.

External dependencies: Pydantic only (no network calls).

Failure semantics: constructing a DTO raises ``pydantic.ValidationError``;
:mod:`genai_dispatch.base.dto.validation` converts it to ``InvalidRequest``.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from ..constants import (
    IMAGE_N_MAX,
    IMAGE_N_MIN,
    IMAGE_PROMPT_MAX_CHARS,
    IMAGE_QUALITIES,
    IMAGE_RESPONSE_FORMATS,
    IMAGE_SIZES,
    IMAGE_STYLES,
)
from ..models import ContentPart

# Literal types over the shared constants tuples
ImageSize = Literal[IMAGE_SIZES]  # type: ignore[valid-type]
ImageQuality = Literal[IMAGE_QUALITIES]  # type: ignore[valid-type]
ImageStyle = Literal[IMAGE_STYLES]  # type: ignore[valid-type]
ImageResponseFormat = Literal[IMAGE_RESPONSE_FORMATS]  # type: ignore[valid-type]


def _json_serializable(value: Dict[str, Any]) -> Dict[str, Any]:
    try:
        json.dumps(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"must be JSON-serializable: {exc}") from exc
    return value


class ImageRequestDTO(BaseModel):
    """Validated image generation request.

    Rules:
        - ``prompt`` is non-empty and at most 4000 characters.
        - ``n`` (when set) lies within [1, 10].
        - ``size``, ``quality``, ``style``, ``response_format`` take documented values.
    """

    prompt: str = Field(..., min_length=1, max_length=IMAGE_PROMPT_MAX_CHARS)
    n: Optional[int] = Field(default=None, ge=IMAGE_N_MIN, le=IMAGE_N_MAX)
    size: Optional[ImageSize] = None
    quality: Optional[ImageQuality] = None
    style: Optional[ImageStyle] = None
    response_format: Optional[ImageResponseFormat] = None


class MessageDTO(BaseModel):
    """A chat message with non-empty content."""

    role: Literal["system", "user", "assistant", "tool"]
    content: Union[str, List[Any]]

    @model_validator(mode="after")
    def _validate_content(self) -> "MessageDTO":
        content = self.content
        if isinstance(content, str):
            if content.strip() == "":
                raise ValueError("content string must be non-empty")
        elif not content:
            raise ValueError("content parts must be a non-empty list")
        return self

    @field_validator("content")
    @classmethod
    def _parts_are_content_parts(cls, value: Union[str, List[Any]]) -> Union[str, List[Any]]:
        if isinstance(value, list):
            for i, part in enumerate(value):
                if not isinstance(part, ContentPart):
                    raise ValueError(f"part {i} must be a ContentPart, got {type(part).__name__}")
        return value


class ToolSpecDTO(BaseModel):
    """A tool the model may call: ``name`` plus optional description and JSON schema."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None

    @field_validator("parameters")
    @classmethod
    def _parameters_are_json(cls, value: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        return value if value is None else _json_serializable(value)


class ChatRequestDTO(BaseModel):
    """Validated chat request.

    Rules:
        - ``messages`` is non-empty and contains at least one non-system message.
        - ``max_tokens`` (when set) is positive.
        - ``temperature`` (when set) lies within [0.0, 2.0].
    """

    messages: List[MessageDTO] = Field(..., min_length=1)
    system: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    tools: Optional[List[ToolSpecDTO]] = None
    extra: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("extra")
    @classmethod
    def _extra_is_json(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        return _json_serializable(value)

    @model_validator(mode="after")
    def _validate_sequence(self) -> "ChatRequestDTO":
        if all(m.role == "system" for m in self.messages):
            raise ValueError("at least one non-system message is required")
        return self


class EmbedRequestDTO(BaseModel):
    """Validated embedding request: one or more non-empty inputs."""

    inputs: List[str] = Field(..., min_length=1)
    dimensions: Optional[int] = Field(default=None, gt=0)
    extra: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("extra")
    @classmethod
    def _extra_is_json(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        return _json_serializable(value)

    @model_validator(mode="after")
    def _validate_inputs(self) -> "EmbedRequestDTO":
        if any(not s.strip() for s in self.inputs):
            raise ValueError("inputs must not contain empty strings")
        return self


__all__ = ["ImageRequestDTO", "MessageDTO", "ToolSpecDTO", "ChatRequestDTO", "EmbedRequestDTO"]
