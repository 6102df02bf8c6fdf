"""
EmbedRequest DTO.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class EmbedRequest:
    """Texts to embed.

    Attributes:
        inputs: One or more input strings.
        dimensions: Optional output dimensionality for providers that support it.
        extra: Escape hatch merged into the wire payload.
    """

    inputs: List[str]
    dimensions: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_text(cls, text: str) -> "EmbedRequest":
        return cls(inputs=[text])


__all__ = ["EmbedRequest"]
