"""
ImageResponse DTO.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .content_part import ContentPart
from .model_iden import ModelIden
from .usage import Usage


@dataclass
class ImageResponse:
    """Generated images as ``ContentPart(type="image")`` items.

    Attributes:
        images: Generated images in provider order.
        model_iden: Resolved adapter and model identifier.
        usage: Token accounting when reported (e.g. ``gpt-image-1``).
        captured_raw_body: Provider JSON body, only when capture was requested.
        revised_prompts: Provider-revised prompts aligned with ``images``.
    """

    images: List[ContentPart]
    model_iden: ModelIden
    usage: Optional[Usage] = None
    captured_raw_body: Optional[Any] = None
    revised_prompts: Optional[List[Optional[str]]] = None

    def first_image(self) -> Optional[ContentPart]:
        return self.images[0] if self.images else None

    def all_images(self) -> List[ContentPart]:
        return list(self.images)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "images": [p.to_dict() for p in self.images],
            "model_iden": self.model_iden.to_dict(),
            "usage": self.usage.to_dict() if self.usage else None,
            "revised_prompts": self.revised_prompts,
        }


__all__ = ["ImageResponse"]
