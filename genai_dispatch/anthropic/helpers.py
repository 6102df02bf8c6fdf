"""Anthropic Messages API payload helpers.

Purpose:
- Build ``/messages`` request bodies from :class:`ChatRequest`.
- Read text, thinking, tool use and usage from the response body.

Anthropic takes the system prompt as a top-level ``system`` field, requires
``max_tokens``, and names token counts ``input_tokens``/``output_tokens``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..base.constants import ANTHROPIC_DEFAULT_MAX_TOKENS, DEFAULT_IMAGE_CONTENT_TYPE
from ..base.models import ChatRequest, ContentPart, Message, ToolCall, Usage


def _image_block(part: ContentPart) -> Dict[str, Any]:
    source = part.source
    if source is not None and source.is_url:
        return {"type": "image", "source": {"type": "url", "url": source.value}}
    return {
        "type": "image",
        "source": {
            "type": "base64",
            "media_type": part.content_type or DEFAULT_IMAGE_CONTENT_TYPE,
            "data": source.value if source else "",
        },
    }


def to_anthropic_content(message: Message) -> Any:
    if not message.is_structured():
        return message.content
    blocks: List[Dict[str, Any]] = []
    for part in message.content:  # type: ignore[union-attr]
        if part.is_image():
            blocks.append(_image_block(part))
        elif part.text is not None:
            blocks.append({"type": "text", "text": part.text})
    return blocks


def to_anthropic_tools(tools: Optional[List[Dict[str, Any]]]) -> Optional[List[Dict[str, Any]]]:
    if not tools:
        return None
    out = []
    for t in tools:
        spec = {"name": t["name"], "input_schema": t.get("parameters") or {"type": "object", "properties": {}}}
        if t.get("description"):
            spec["description"] = t["description"]
        out.append(spec)
    return out


def build_params(model: str, request: ChatRequest) -> Dict[str, Any]:
    """Assemble the Messages API body.

    ``tool`` role messages are sent as ``user`` turns, which is how the
    Messages API carries tool results.
    """
    params: Dict[str, Any] = {
        "model": model,
        "max_tokens": int(request.max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS),
        "messages": [
            {"role": "assistant" if m.role == "assistant" else "user", "content": to_anthropic_content(m)}
            for m in request.non_system_messages()
        ],
    }
    system = request.system_text()
    if system:
        params["system"] = system
    if request.temperature is not None:
        params["temperature"] = float(request.temperature)
    tools = to_anthropic_tools(request.tools)
    if tools:
        params["tools"] = tools
    params.update(request.extra)
    return params


def parse_body(body: Dict[str, Any]) -> Tuple[Optional[str], Optional[str], List[ToolCall], Optional[Usage]]:
    """Return ``(text, thinking, tool_calls, usage)``; text parts are newline-joined."""
    texts: List[str] = []
    thinking: List[str] = []
    tools: List[ToolCall] = []
    for block in body["content"]:
        btype = block["type"]
        if btype == "text":
            texts.append(block["text"])
        elif btype == "thinking":
            thinking.append(block.get("thinking") or "")
        elif btype == "tool_use":
            tools.append(ToolCall(call_id=block["id"], fn_name=block["name"], fn_arguments=dict(block.get("input") or {})))
    usage = Usage.from_openai(body["usage"]) if body.get("usage") else None
    return ("\n".join(texts) if texts else None), ("\n".join(thinking) if thinking else None), tools, usage


__all__ = ["build_params", "parse_body", "to_anthropic_content", "to_anthropic_tools"]
