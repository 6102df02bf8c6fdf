"""
Helper utilities for OpenAI-style wire payloads.

Purpose:
- Translate normalized DTOs into Chat Completions, Embeddings and Images
  request bodies.
- Interpret the JSON bodies those endpoints return.

No network I/O happens here; functions only prepare inputs or read outputs.
Missing keys surface as ``KeyError``/``TypeError`` and are converted into
``TransportFailure`` by the calling adapter.
"""

from __future__ import annotations

import json
import typing as _t

from ..constants import DEFAULT_IMAGE_CONTENT_TYPE
from ..models import (
    ChatRequest,
    ContentPart,
    EmbedRequest,
    ImageRequest,
    Message,
    ToolCall,
    Usage,
)


def image_part_url(part: ContentPart) -> str:
    """Return a URL for an image part, inlining base64 data as a data URL."""
    source = part.source
    if source is None or source.is_url:
        return source.value if source else ""
    return f"data:{part.content_type or DEFAULT_IMAGE_CONTENT_TYPE};base64,{source.value}"


def to_openai_content(message: Message) -> _t.Any:
    if not message.is_structured():
        return message.content
    out: list[dict] = []
    for part in message.content:  # type: ignore[union-attr]
        if part.is_image():
            out.append({"type": "image_url", "image_url": {"url": image_part_url(part)}})
        elif part.text is not None:
            out.append({"type": "text", "text": part.text})
    return out


def build_openai_messages(request: ChatRequest) -> list[dict]:
    """Build the ``messages`` array with the combined system prompt first."""
    messages: list[dict] = []
    system = request.system_text()
    if system:
        messages.append({"role": "system", "content": system})
    for m in request.non_system_messages():
        messages.append({"role": m.role, "content": to_openai_content(m)})
    return messages


def to_openai_tools(tools: _t.Optional[list[dict]]) -> _t.Optional[list[dict]]:
    """Wrap ``{name, description, parameters}`` specs as function tools."""
    if not tools:
        return None
    out = []
    for t in tools:
        if t.get("type") == "function":
            out.append(t)
            continue
        fn = {"name": t["name"], "parameters": t.get("parameters") or {"type": "object", "properties": {}}}
        if t.get("description"):
            fn["description"] = t["description"]
        out.append({"type": "function", "function": fn})
    return out


def build_chat_params(model: str, request: ChatRequest) -> dict:
    """Assemble a Chat Completions body for ``model``."""
    params: dict = {"model": model, "messages": build_openai_messages(request)}
    if request.max_tokens is not None:
        params["max_tokens"] = int(request.max_tokens)
    if request.temperature is not None:
        params["temperature"] = float(request.temperature)
    tools = to_openai_tools(request.tools)
    if tools:
        params["tools"] = tools
    params.update(request.extra)
    return params


def build_stream_params(model: str, request: ChatRequest, *, include_usage: bool) -> dict:
    """Same as :func:`build_chat_params` with ``stream=True``.

    ``include_usage`` asks the server for a trailing usage chunk
    (``stream_options.include_usage``).
    """
    params = build_chat_params(model, request)
    params["stream"] = True
    if include_usage:
        params["stream_options"] = {"include_usage": True}
    return params


def parse_tool_arguments(raw: _t.Any) -> dict:
    if isinstance(raw, dict):
        return raw
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def parse_openai_tool_calls(raw_calls: _t.Optional[list]) -> list[ToolCall]:
    calls: list[ToolCall] = []
    for c in raw_calls or []:
        fn = c["function"]
        calls.append(
            ToolCall(call_id=c.get("id") or "", fn_name=fn["name"], fn_arguments=parse_tool_arguments(fn.get("arguments")))
        )
    return calls


def parse_chat_body(body: dict) -> tuple[_t.Optional[str], _t.Optional[str], list[ToolCall], _t.Optional[Usage]]:
    """Return ``(text, reasoning, tool_calls, usage)`` from a completion body.

    Reasoning is read from ``reasoning_content`` (DeepSeek) or ``reasoning``
    (Groq, Ollama).
    """
    message = body["choices"][0]["message"]
    text = message.get("content")
    reasoning = message.get("reasoning_content") or message.get("reasoning")
    tools = parse_openai_tool_calls(message.get("tool_calls"))
    usage = Usage.from_openai(body["usage"]) if body.get("usage") else None
    return text, reasoning, tools, usage


def build_embed_params(model: str, request: EmbedRequest) -> dict:
    params: dict = {"model": model, "input": list(request.inputs), "encoding_format": "float"}
    if request.dimensions is not None:
        params["dimensions"] = int(request.dimensions)
    params.update(request.extra)
    return params


def parse_embed_body(body: dict) -> tuple[list[list[float]], _t.Optional[Usage]]:
    """Return vectors ordered by their ``index`` and the reported usage."""
    items = sorted(body["data"], key=lambda d: d.get("index", 0))
    vectors = [[float(x) for x in item["embedding"]] for item in items]
    usage = Usage.from_openai(body["usage"]) if body.get("usage") else None
    return vectors, usage


def build_image_params(model: _t.Optional[str], request: ImageRequest) -> dict:
    """Images API body; ``model`` is omitted for deployment-scoped endpoints."""
    params = request.to_payload()
    if model:
        params["model"] = model
    return params


def parse_image_body(body: dict) -> tuple[list[ContentPart], list[_t.Optional[str]], _t.Optional[Usage]]:
    """Return image parts, revised prompts and usage from an Images API body.

    Each ``data`` item carries either ``url`` or ``b64_json``; items with
    neither are skipped.
    """
    images: list[ContentPart] = []
    revised: list[_t.Optional[str]] = []
    content_type = f"image/{body['output_format']}" if body.get("output_format") else DEFAULT_IMAGE_CONTENT_TYPE
    for item in body["data"]:
        if item.get("url"):
            images.append(ContentPart.from_image_url(item["url"], content_type))
        elif item.get("b64_json"):
            images.append(ContentPart.from_image_base64(item["b64_json"], content_type))
        else:
            continue
        revised.append(item.get("revised_prompt"))
    usage = Usage.from_openai(body["usage"]) if body.get("usage") else None
    return images, revised, usage


__all__ = [
    "build_openai_messages",
    "build_chat_params",
    "build_stream_params",
    "build_embed_params",
    "build_image_params",
    "image_part_url",
    "parse_chat_body",
    "parse_embed_body",
    "parse_image_body",
    "parse_openai_tool_calls",
    "parse_tool_arguments",
    "to_openai_content",
    "to_openai_tools",
]
