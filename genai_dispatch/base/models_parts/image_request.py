"""
ImageRequest DTO for text-to-image generation.

Only ``prompt`` is required. Optional fields stay ``None`` so that the
provider applies its own defaults; the documented bounds are enforced by
:mod:`genai_dispatch.base.dto.validation` before dispatch.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ImageRequest:
    """Image generation request.

    Attributes:
        prompt: Text description of the desired image(s); at most 4000 characters.
        n: Number of images to generate, between 1 and 10.
        size: One of ``256x256``, ``512x512``, ``1024x1024``, ``1792x1024``, ``1024x1792``.
        quality: ``standard`` or ``hd``.
        style: ``vivid`` or ``natural``.
        response_format: ``url`` or ``b64_json``.
    """

    prompt: str
    n: Optional[int] = None
    size: Optional[str] = None
    quality: Optional[str] = None
    style: Optional[str] = None
    response_format: Optional[str] = None

    @classmethod
    def from_prompt(cls, prompt: str) -> "ImageRequest":
        return cls(prompt=prompt)

    def with_n(self, n: int) -> "ImageRequest":
        return replace(self, n=n)

    def with_size(self, size: str) -> "ImageRequest":
        return replace(self, size=size)

    def with_quality(self, quality: str) -> "ImageRequest":
        return replace(self, quality=quality)

    def with_style(self, style: str) -> "ImageRequest":
        return replace(self, style=style)

    def with_response_format(self, response_format: str) -> "ImageRequest":
        return replace(self, response_format=response_format)

    def to_payload(self) -> Dict[str, Any]:
        """Return the set fields as a wire-ready mapping (unset fields omitted)."""
        fields = {
            "prompt": self.prompt,
            "n": self.n,
            "size": self.size,
            "quality": self.quality,
            "style": self.style,
            "response_format": self.response_format,
        }
        return {k: v for k, v in fields.items() if v is not None}


__all__ = ["ImageRequest"]
