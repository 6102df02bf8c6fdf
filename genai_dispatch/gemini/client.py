"""GeminiAdapter for the Generative Language API (v1beta).

Chat via ``models/{model}:generateContent`` and embeddings via
``models/{model}:batchEmbedContents``. The key travels in the
``x-goog-api-key`` header so configured query parameters stay untouched.
"""

from __future__ import annotations

from typing import Dict

from ..base.adapter import Adapter
from ..base.adapter_kind import AdapterKind
from ..base.constants import GEMINI_BATCH_EMBED_PATH, GEMINI_GENERATE_PATH
from ..base.models import (
    CaptureOptions,
    ChatRequest,
    ChatResponse,
    EmbedRequest,
    EmbedResponse,
    ModelIden,
)
from .helpers import build_batch_embed_params, build_generate_params, parse_generate_body


class GeminiAdapter(Adapter):
    kind = AdapterKind.GEMINI

    def auth_headers(self) -> Dict[str, str]:
        if not self._api_key:
            return {}
        return {"x-goog-api-key": self._api_key}

    def exec_chat(self, iden: ModelIden, request: ChatRequest, options: CaptureOptions) -> ChatResponse:
        path = GEMINI_GENERATE_PATH.format(model=iden.wire_name)
        body = self._post(path, build_generate_params(request), purpose="chat")
        with self._parsing("generateContent"):
            text, thoughts, tools, usage = parse_generate_body(body)
        return ChatResponse(
            text=text,
            model_iden=iden,
            reasoning_content=thoughts,
            tool_calls=tools,
            usage=usage,
            captured_raw_body=body,
        )

    def embed(self, iden: ModelIden, request: EmbedRequest, options: CaptureOptions) -> EmbedResponse:
        path = GEMINI_BATCH_EMBED_PATH.format(model=iden.wire_name)
        body = self._post(path, build_batch_embed_params(iden.wire_name, request), purpose="embed")
        with self._parsing("batchEmbedContents"):
            vectors = [[float(x) for x in e["values"]] for e in body["embeddings"]]
        return EmbedResponse(embeddings=vectors, model_iden=iden, captured_raw_body=body)
