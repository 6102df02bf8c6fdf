"""CLI parser construction for genai-dispatch.

Wires subparsers only; handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ..base.constants import IMAGE_QUALITIES, IMAGE_RESPONSE_FORMATS, IMAGE_SIZES, IMAGE_STYLES
from ..config.defaults import CLI_DEFAULT_IMAGE_MODEL


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with ``resolve``, ``chat``, ``embed`` and ``image``.

    Option choices are left to request validation so that a bad value yields
    the same ``validation`` error payload as a library call.
    """
    p = argparse.ArgumentParser(prog="genai-dispatch", description="Dispatch AI requests to the adapter owning a model")
    p.add_argument("--log-level", default=None, help="Override GENAI_LOG_LEVEL for this run")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_resolve = sub.add_parser("resolve", help="Show which adapter a model identifier resolves to")
    p_resolve.add_argument("model")

    p_chat = sub.add_parser("chat", help="Send a single-turn chat message")
    p_chat.add_argument("model")
    p_chat.add_argument("prompt")
    p_chat.add_argument("--system", default=None)
    p_chat.add_argument("--max-tokens", type=int, default=None)
    p_chat.add_argument("--temperature", type=float, default=None)
    p_chat.add_argument("--stream", action="store_true", help="Print tokens as they arrive")

    p_embed = sub.add_parser("embed", help="Embed one or more texts")
    p_embed.add_argument("model")
    p_embed.add_argument("texts", nargs="+")

    p_image = sub.add_parser("image", help="Generate images from a prompt")
    p_image.add_argument("prompt")
    p_image.add_argument("--model", default=CLI_DEFAULT_IMAGE_MODEL)
    p_image.add_argument("--n", type=int, default=None)
    p_image.add_argument("--size", default=None, help="One of: " + ", ".join(IMAGE_SIZES))
    p_image.add_argument("--quality", default=None, help="One of: " + ", ".join(IMAGE_QUALITIES))
    p_image.add_argument("--style", default=None, help="One of: " + ", ".join(IMAGE_STYLES))
    p_image.add_argument("--response-format", default=None, help="One of: " + ", ".join(IMAGE_RESPONSE_FORMATS))
    p_image.add_argument("--raw", action="store_true", help="Include the provider response body")

    return p


__all__ = ["build_parser"]
