"""Gemini ``generateContent`` payload helpers.

Gemini names the assistant role ``model``, puts the system prompt in
``systemInstruction``, nests generation options under ``generationConfig``
and reports usage in ``usageMetadata``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..base.constants import DEFAULT_IMAGE_CONTENT_TYPE
from ..base.models import ChatRequest, ContentPart, EmbedRequest, Message, ToolCall, Usage


def _part(part: ContentPart) -> Optional[Dict[str, Any]]:
    if part.is_image():
        mime = part.content_type or DEFAULT_IMAGE_CONTENT_TYPE
        source = part.source
        if source is not None and source.is_url:
            return {"fileData": {"mimeType": mime, "fileUri": source.value}}
        return {"inlineData": {"mimeType": mime, "data": source.value if source else ""}}
    if part.text is not None:
        return {"text": part.text}
    return None


def to_gemini_parts(message: Message) -> List[Dict[str, Any]]:
    if not message.is_structured():
        return [{"text": message.content}]
    return [p for p in (_part(cp) for cp in message.content) if p is not None]  # type: ignore[union-attr]


def build_generate_params(request: ChatRequest) -> Dict[str, Any]:
    """Body for ``models/{model}:generateContent`` (the model is in the path)."""
    params: Dict[str, Any] = {
        "contents": [
            {"role": "model" if m.role == "assistant" else "user", "parts": to_gemini_parts(m)}
            for m in request.non_system_messages()
        ]
    }
    system = request.system_text()
    if system:
        params["systemInstruction"] = {"parts": [{"text": system}]}
    generation: Dict[str, Any] = {}
    if request.max_tokens is not None:
        generation["maxOutputTokens"] = int(request.max_tokens)
    if request.temperature is not None:
        generation["temperature"] = float(request.temperature)
    if generation:
        params["generationConfig"] = generation
    if request.tools:
        decls = []
        for t in request.tools:
            decl = {"name": t["name"], "parameters": t.get("parameters") or {"type": "object", "properties": {}}}
            if t.get("description"):
                decl["description"] = t["description"]
            decls.append(decl)
        params["tools"] = [{"functionDeclarations": decls}]
    params.update(request.extra)
    return params


def usage_from_metadata(meta: Optional[Dict[str, Any]]) -> Optional[Usage]:
    if not meta:
        return None
    return Usage.from_counts(meta.get("promptTokenCount"), meta.get("candidatesTokenCount"), meta.get("totalTokenCount"))


def parse_generate_body(body: Dict[str, Any]) -> Tuple[Optional[str], Optional[str], List[ToolCall], Optional[Usage]]:
    """Return ``(text, thoughts, tool_calls, usage)`` from the first candidate."""
    candidates = body.get("candidates") or []
    texts: List[str] = []
    thoughts: List[str] = []
    tools: List[ToolCall] = []
    if candidates:
        for part in (candidates[0].get("content") or {}).get("parts") or []:
            if "functionCall" in part:
                call = part["functionCall"]
                tools.append(ToolCall(call_id=call.get("id") or call["name"], fn_name=call["name"], fn_arguments=dict(call.get("args") or {})))
            elif "text" in part:
                (thoughts if part.get("thought") else texts).append(part["text"])
    return (
        "".join(texts) if texts else None,
        "".join(thoughts) if thoughts else None,
        tools,
        usage_from_metadata(body.get("usageMetadata")),
    )


def build_batch_embed_params(model: str, request: EmbedRequest) -> Dict[str, Any]:
    """Body for ``models/{model}:batchEmbedContents``; one entry per input."""
    requests = []
    for text in request.inputs:
        entry: Dict[str, Any] = {"model": f"models/{model}", "content": {"parts": [{"text": text}]}}
        if request.dimensions is not None:
            entry["outputDimensionality"] = int(request.dimensions)
        entry.update(request.extra)
        requests.append(entry)
    return {"requests": requests}


__all__ = [
    "build_generate_params",
    "build_batch_embed_params",
    "parse_generate_body",
    "to_gemini_parts",
    "usage_from_metadata",
]
