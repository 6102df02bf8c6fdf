"""BaseOpenAIStyleAdapter: shared implementation for Chat Completions providers.

Purpose:
- Provide chat and streaming chat for every provider speaking the
  OpenAI-compatible ``/chat/completions`` protocol (OpenAI, Azure OpenAI,
  Groq, xAI, DeepSeek, Ollama).
- Offer embedding and image helpers that only the providers supporting those
  endpoints wire into their capability methods.

External dependencies:
- HTTP through :mod:`genai_dispatch.base.http.transport` (pooled httpx).

Failure semantics:
- Transport and status errors surface as ``TransportFailure`` from the
  transport layer; unexpected body shapes as ``TransportFailure`` with
  ``MALFORMED_RESPONSE``.
"""

from __future__ import annotations

from typing import ClassVar, Dict, Iterator

from ..adapter import Adapter
from ..constants import OPENAI_CHAT_PATH, OPENAI_EMBEDDINGS_PATH, OPENAI_IMAGES_PATH
from ..http.transport import iter_sse_data
from ..logging import LogContext, normalized_log_event
from ..models import (
    CaptureOptions,
    ChatRequest,
    ChatResponse,
    ChatStreamEvent,
    EmbedRequest,
    EmbedResponse,
    ImageRequest,
    ImageResponse,
    ModelIden,
)
from ..streaming import ChatStream
from .streamer import OpenAIStreamer, UsageLocation
from .style_helpers import (
    build_chat_params,
    build_embed_params,
    build_image_params,
    build_stream_params,
    parse_chat_body,
    parse_embed_body,
    parse_image_body,
)


class BaseOpenAIStyleAdapter(Adapter):
    """Reusable base class for OpenAI-compatible adapters.

    Subclasses set ``kind`` and, when their stream reports usage differently,
    ``usage_location``. Providers with embeddings or image generation override
    ``embed``/``exec_image_generation`` and delegate to ``_openai_embed`` and
    ``_openai_image`` so capability stays explicit per adapter.
    """

    usage_location: ClassVar[UsageLocation] = UsageLocation.TRAILING_CHUNK

    def auth_headers(self) -> Dict[str, str]:
        if not self._api_key:
            return {}
        return {"Authorization": f"Bearer {self._api_key}"}

    # ----- Chat -----
    def exec_chat(self, iden: ModelIden, request: ChatRequest, options: CaptureOptions) -> ChatResponse:
        body = self._post(OPENAI_CHAT_PATH, build_chat_params(iden.wire_name, request), purpose="chat")
        with self._parsing("chat completion"):
            text, reasoning, tools, usage = parse_chat_body(body)
        return ChatResponse(
            text=text,
            model_iden=iden,
            reasoning_content=reasoning,
            tool_calls=tools,
            usage=usage,
            captured_raw_body=body,
        )

    def exec_chat_stream(self, iden: ModelIden, request: ChatRequest, options: CaptureOptions) -> ChatStream:
        include_usage = options.capture_usage and self.usage_location is UsageLocation.TRAILING_CHUNK
        params = build_stream_params(iden.wire_name, request, include_usage=include_usage)
        response = self._open_stream(OPENAI_CHAT_PATH, params)
        normalized_log_event(
            self._logger,
            "stream.open",
            LogContext(adapter=self.kind.value, model=iden.model_name, service_type="chat_stream"),
            phase="start",
        )
        return ChatStream(self._stream_events(response, options), iden)

    def _stream_events(self, response, options: CaptureOptions) -> Iterator[ChatStreamEvent]:
        try:
            yield from OpenAIStreamer(
                iter_sse_data(response, self.kind),
                adapter=self.kind,
                options=options,
                usage_location=self.usage_location,
            )
        finally:
            response.close()

    # ----- Helpers for optional capabilities -----
    def _openai_embed(self, iden: ModelIden, request: EmbedRequest) -> EmbedResponse:
        body = self._post(OPENAI_EMBEDDINGS_PATH, build_embed_params(iden.wire_name, request), purpose="embed")
        with self._parsing("embeddings"):
            vectors, usage = parse_embed_body(body)
        return EmbedResponse(embeddings=vectors, model_iden=iden, usage=usage, captured_raw_body=body)

    def _openai_image(self, iden: ModelIden, request: ImageRequest) -> ImageResponse:
        body = self._post(OPENAI_IMAGES_PATH, build_image_params(iden.wire_name, request), purpose="image")
        with self._parsing("image generation"):
            images, revised, usage = parse_image_body(body)
        return ImageResponse(
            images=images,
            model_iden=iden,
            usage=usage,
            captured_raw_body=body,
            revised_prompts=revised if any(revised) else None,
        )


__all__ = ["BaseOpenAIStyleAdapter"]
