"""
EmbedResponse DTO.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .model_iden import ModelIden
from .usage import Usage


@dataclass
class EmbedResponse:
    """Embedding vectors in input order."""

    embeddings: List[List[float]]
    model_iden: ModelIden
    usage: Optional[Usage] = None
    captured_raw_body: Optional[Any] = None

    def first_embedding(self) -> Optional[List[float]]:
        return self.embeddings[0] if self.embeddings else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "embeddings": self.embeddings,
            "model_iden": self.model_iden.to_dict(),
            "usage": self.usage.to_dict() if self.usage else None,
        }


__all__ = ["EmbedResponse"]
