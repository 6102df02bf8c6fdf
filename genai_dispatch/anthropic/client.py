"""AnthropicAdapter.

Chat only: Anthropic has no embeddings or image generation endpoint, and
streaming is not wired here, so those service types keep the default
``ServiceTypeNotSupported`` behaviour.
"""

from __future__ import annotations

from typing import Dict

from ..base.adapter import Adapter
from ..base.adapter_kind import AdapterKind
from ..base.constants import ANTHROPIC_MESSAGES_PATH, ANTHROPIC_VERSION
from ..base.models import CaptureOptions, ChatRequest, ChatResponse, ModelIden
from .helpers import build_params, parse_body


class AnthropicAdapter(Adapter):
    kind = AdapterKind.ANTHROPIC

    def auth_headers(self) -> Dict[str, str]:
        headers = {"anthropic-version": ANTHROPIC_VERSION}
        if self._api_key:
            headers["x-api-key"] = self._api_key
        return headers

    def exec_chat(self, iden: ModelIden, request: ChatRequest, options: CaptureOptions) -> ChatResponse:
        body = self._post(ANTHROPIC_MESSAGES_PATH, build_params(iden.wire_name, request), purpose="chat")
        with self._parsing("messages"):
            text, thinking, tools, usage = parse_body(body)
        return ChatResponse(
            text=text,
            model_iden=iden,
            reasoning_content=thinking,
            tool_calls=tools,
            usage=usage,
            captured_raw_body=body,
        )
