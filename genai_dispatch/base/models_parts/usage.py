"""
Token usage statistics in canonical prompt/completion/total form.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional


def _coerce_count(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        n = int(value)
    except (TypeError, ValueError):
        return None
    return n if n >= 0 else None


@dataclass(frozen=True)
class Usage:
    """Token accounting for one call.

    ``total_tokens`` is derived when both components are known and the
    provider omitted it.
    """

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    @classmethod
    def from_counts(cls, prompt: Any = None, completion: Any = None, total: Any = None) -> "Usage":
        p, c, t = _coerce_count(prompt), _coerce_count(completion), _coerce_count(total)
        if t is None and p is not None and c is not None:
            t = p + c
        return cls(prompt_tokens=p, completion_tokens=c, total_tokens=t)

    @classmethod
    def from_openai(cls, raw: Optional[Mapping[str, Any]]) -> "Usage":
        """Map OpenAI-style ``prompt_tokens``/``completion_tokens`` (or ``input_tokens``/``output_tokens``)."""
        raw = raw or {}
        return cls.from_counts(
            raw.get("prompt_tokens", raw.get("input_tokens")),
            raw.get("completion_tokens", raw.get("output_tokens")),
            raw.get("total_tokens"),
        )

    def is_empty(self) -> bool:
        return self.prompt_tokens is None and self.completion_tokens is None and self.total_tokens is None

    def to_dict(self) -> Dict[str, Optional[int]]:
        return asdict(self)


__all__ = ["Usage"]
