"""CLI action handlers.

Every handler prints one JSON document to stdout on success and returns 0.
A :class:`DispatchError` is printed to stderr as
``{"error": <code>, "message": <text>}`` and yields exit code 1; an auth
failure also carries a ``hint`` and the accepted ``env_vars``. Streaming
chat prints text chunks as they arrive followed by a newline.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, TextIO

from ..base.errors import DispatchError, ErrorCode, TransportFailure
from ..base.models import CaptureOptions, ChatRequest, EmbedRequest, ImageRequest
from ..client import Client
from ..config.env import get_env_var_candidates, get_env_var_name


def make_client() -> Client:
    """Build the client used by handlers (patched in tests)."""
    return Client()


def _emit(payload: Dict[str, Any], out: TextIO) -> None:
    out.write(json.dumps(payload, ensure_ascii=False, indent=2))
    out.write("\n")


def report_error(err: DispatchError, err_out: TextIO) -> int:
    """Print the error payload; auth failures also name the API key variables."""
    payload: Dict[str, Any] = {"error": err.code.value, "message": err.message}
    if isinstance(err, TransportFailure) and err.code is ErrorCode.AUTH and err.adapter is not None:
        canonical = get_env_var_name(err.adapter.value)
        if canonical:
            payload["hint"] = f"set {canonical} or configure api_key for {err.adapter.value}"
            payload["env_vars"] = list(get_env_var_candidates(err.adapter.value, "api_key"))
    _emit(payload, err_out)
    return 1


def handle_resolve(args: argparse.Namespace, out: TextIO = sys.stdout) -> int:
    _emit(make_client().resolve(args.model).to_dict(), out)
    return 0


def handle_chat(args: argparse.Namespace, out: TextIO = sys.stdout) -> int:
    client = make_client()
    request = ChatRequest.from_user(
        args.prompt,
        system=args.system,
        max_tokens=args.max_tokens,
        temperature=args.temperature,
    )
    if not args.stream:
        _emit(client.exec_chat(args.model, request).to_dict(), out)
        return 0
    options = CaptureOptions(capture_usage=True)
    with client.exec_chat_stream(args.model, request, options) as stream:
        for event in stream:
            if event.kind == "chunk" and event.content:
                out.write(event.content)
                out.flush()
    out.write("\n")
    return 0


def handle_embed(args: argparse.Namespace, out: TextIO = sys.stdout) -> int:
    _emit(make_client().embed(args.model, EmbedRequest(inputs=list(args.texts))).to_dict(), out)
    return 0


def build_image_request(args: argparse.Namespace) -> ImageRequest:
    return ImageRequest(
        prompt=args.prompt,
        n=args.n,
        size=args.size,
        quality=args.quality,
        style=args.style,
        response_format=args.response_format,
    )


def handle_image(args: argparse.Namespace, out: TextIO = sys.stdout) -> int:
    options = CaptureOptions(capture_raw_body=args.raw)
    res = make_client().exec_image_generation(args.model, build_image_request(args), options)
    payload = res.to_dict()
    if args.raw:
        payload["raw"] = res.captured_raw_body
    _emit(payload, out)
    return 0


HANDLERS = {
    "resolve": handle_resolve,
    "chat": handle_chat,
    "embed": handle_embed,
    "image": handle_image,
}


__all__ = [
    "HANDLERS",
    "build_image_request",
    "handle_chat",
    "handle_embed",
    "handle_image",
    "handle_resolve",
    "make_client",
    "report_error",
]
