"""OpenAIAdapter.

Chat and streaming chat come from ``BaseOpenAIStyleAdapter``; this adapter
also wires the Embeddings and Images endpoints, which OpenAI is the reference
implementation of.
"""

from __future__ import annotations

from ..base.adapter_kind import AdapterKind
from ..base.models import (
    CaptureOptions,
    EmbedRequest,
    EmbedResponse,
    ImageRequest,
    ImageResponse,
    ModelIden,
)
from ..base.openai_style_parts import BaseOpenAIStyleAdapter


class OpenAIAdapter(BaseOpenAIStyleAdapter):
    kind = AdapterKind.OPENAI

    def embed(self, iden: ModelIden, request: EmbedRequest, options: CaptureOptions) -> EmbedResponse:
        return self._openai_embed(iden, request)

    def exec_image_generation(self, iden: ModelIden, request: ImageRequest, options: CaptureOptions) -> ImageResponse:
        """POST ``/images/generations`` and map ``data[]`` to image parts."""
        return self._openai_image(iden, request)
