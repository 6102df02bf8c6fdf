"""CohereAdapter for the Cohere v2 API.

Supports chat (``/chat``) and embeddings (``/embed``). Cohere's v2 chat
accepts OpenAI-shaped messages and tool specs but returns content as a list of
typed blocks and reports usage under ``usage.tokens``/``usage.billed_units``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.adapter import Adapter
from ..base.adapter_kind import AdapterKind
from ..base.constants import COHERE_CHAT_PATH, COHERE_EMBED_PATH
from ..base.models import (
    CaptureOptions,
    ChatRequest,
    ChatResponse,
    EmbedRequest,
    EmbedResponse,
    ModelIden,
    Usage,
)
from ..base.openai_style_parts.style_helpers import parse_openai_tool_calls, to_openai_tools

# Embeddings are produced for storage/search documents unless overridden via ``extra``
DEFAULT_INPUT_TYPE = "search_document"


def _usage(body: Dict[str, Any]) -> Optional[Usage]:
    usage = body.get("usage") or body.get("meta") or {}
    counts = usage.get("tokens") or usage.get("billed_units")
    return Usage.from_openai(counts) if counts else None


class CohereAdapter(Adapter):
    kind = AdapterKind.COHERE

    def auth_headers(self) -> Dict[str, str]:
        if not self._api_key:
            return {}
        return {"Authorization": f"Bearer {self._api_key}"}

    def exec_chat(self, iden: ModelIden, request: ChatRequest, options: CaptureOptions) -> ChatResponse:
        messages: List[Dict[str, Any]] = []
        system = request.system_text()
        if system:
            messages.append({"role": "system", "content": system})
        messages.extend({"role": m.role, "content": m.text_or_joined()} for m in request.non_system_messages())
        payload: Dict[str, Any] = {"model": iden.wire_name, "messages": messages}
        if request.max_tokens is not None:
            payload["max_tokens"] = int(request.max_tokens)
        if request.temperature is not None:
            payload["temperature"] = float(request.temperature)
        tools = to_openai_tools(request.tools)
        if tools:
            payload["tools"] = tools
        payload.update(request.extra)

        body = self._post(COHERE_CHAT_PATH, payload, purpose="chat")
        with self._parsing("chat"):
            message = body["message"]
            texts = [c["text"] for c in message.get("content") or [] if c.get("type") == "text"]
            tool_calls = parse_openai_tool_calls(message.get("tool_calls"))
            usage = _usage(body)
        return ChatResponse(
            text="".join(texts) if texts else None,
            model_iden=iden,
            reasoning_content=message.get("tool_plan"),
            tool_calls=tool_calls,
            usage=usage,
            captured_raw_body=body,
        )

    def embed(self, iden: ModelIden, request: EmbedRequest, options: CaptureOptions) -> EmbedResponse:
        payload: Dict[str, Any] = {
            "model": iden.wire_name,
            "texts": list(request.inputs),
            "input_type": DEFAULT_INPUT_TYPE,
            "embedding_types": ["float"],
        }
        if request.dimensions is not None:
            payload["output_dimension"] = int(request.dimensions)
        payload.update(request.extra)

        body = self._post(COHERE_EMBED_PATH, payload, purpose="embed")
        with self._parsing("embed"):
            embeddings = body["embeddings"]
            if isinstance(embeddings, dict):
                embeddings = embeddings["float"]
            vectors = [[float(x) for x in vec] for vec in embeddings]
            usage = _usage(body)
        return EmbedResponse(embeddings=vectors, model_iden=iden, usage=usage, captured_raw_body=body)
