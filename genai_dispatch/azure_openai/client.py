"""AzureOpenAIAdapter.

Azure serves the OpenAI protocol under a per-deployment base URL that must
carry the ``api-version`` query parameter, for example::

    https://res.openai.azure.com/openai/deployments/d1?api-version=2024-02-01

The operation path is inserted before the query string by the shared URL
builder, so ``/images/generations`` becomes
``.../deployments/d1/images/generations?api-version=2024-02-01``.

There is no default endpoint. Without a configured ``base_url`` every call
fails with ``InvalidRequest(field="endpoint")`` before any network I/O.
Authentication uses the ``api-key`` header instead of a bearer token.
"""

from __future__ import annotations

from typing import Dict

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


class AzureOpenAIAdapter(BaseOpenAIStyleAdapter):
    kind = AdapterKind.AZURE_OPENAI

    def auth_headers(self) -> Dict[str, str]:
        if not self._api_key:
            return {}
        return {"api-key": self._api_key}

    def embed(self, iden: ModelIden, request: EmbedRequest, options: CaptureOptions) -> EmbedResponse:
        return self._openai_embed(iden, request)

    def exec_image_generation(self, iden: ModelIden, request: ImageRequest, options: CaptureOptions) -> ImageResponse:
        return self._openai_image(iden, request)
