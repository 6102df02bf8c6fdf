"""Model identifier → adapter kind resolution.

Resolution is an explicit, ordered rule list so that the order is a checkable
invariant rather than a chain of conditionals:

1. exact registry lookup;
2. ``"<kind>::<model>"`` namespace;
3. prefix rules, first match wins;
4. the default kind.

``resolve`` is total (every string maps to exactly one kind) and, since a
resolver is immutable, deterministic for its lifetime. Extending the registry
produces a new resolver via :meth:`ModelResolver.with_registry`.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from .adapter_kind import AdapterKind
from .models import NAMESPACE_SEPARATOR, ModelIden


@dataclass(frozen=True)
class PrefixRule:
    """Route identifiers starting with any of ``prefixes`` to ``kind``."""

    kind: AdapterKind
    prefixes: Tuple[str, ...]

    def match(self, model: str) -> Optional[AdapterKind]:
        return self.kind if model.startswith(self.prefixes) else None


# Exact names that the prefix rules would misroute or cannot recognize.
DEFAULT_REGISTRY: Mapping[str, AdapterKind] = MappingProxyType(
    {
        # Groq-hosted open models
        "llama-3.1-8b-instant": AdapterKind.GROQ,
        "llama-3.3-70b-versatile": AdapterKind.GROQ,
        "llama-guard-3-8b": AdapterKind.GROQ,
        "gemma2-9b-it": AdapterKind.GROQ,
        "meta-llama/llama-4-scout-17b-16e-instruct": AdapterKind.GROQ,
        "meta-llama/llama-4-maverick-17b-128e-instruct": AdapterKind.GROQ,
        "moonshotai/kimi-k2-instruct": AdapterKind.GROQ,
        "qwen/qwen3-32b": AdapterKind.GROQ,
        "openai/gpt-oss-20b": AdapterKind.GROQ,
        "openai/gpt-oss-120b": AdapterKind.GROQ,
        "deepseek-r1-distill-llama-70b": AdapterKind.GROQ,
        # Gemini embedding model sharing OpenAI's "text-embedding" prefix
        "text-embedding-004": AdapterKind.GEMINI,
    }
)

DEFAULT_PREFIX_RULES: Tuple[PrefixRule, ...] = (
    PrefixRule(AdapterKind.OPENAI, ("gpt", "chatgpt", "o1", "o3", "o4", "text-embedding", "dall-e", "gpt-image")),
    PrefixRule(AdapterKind.ANTHROPIC, ("claude",)),
    PrefixRule(AdapterKind.COHERE, ("command", "embed-")),
    PrefixRule(AdapterKind.GEMINI, ("gemini",)),
    PrefixRule(AdapterKind.XAI, ("grok",)),
    PrefixRule(AdapterKind.DEEPSEEK, ("deepseek",)),
)

DEFAULT_KIND = AdapterKind.OLLAMA


class ModelResolver:
    """Resolve model identifiers to adapter kinds.

    Parameters
    ----------
    registry:
        Exact identifier → kind entries, consulted first.
    prefix_rules:
        Ordered prefix rules, consulted after the namespace form.
    default:
        Kind used when nothing else matches.
    """

    def __init__(
        self,
        registry: Optional[Mapping[str, AdapterKind]] = None,
        prefix_rules: Sequence[PrefixRule] = DEFAULT_PREFIX_RULES,
        default: AdapterKind = DEFAULT_KIND,
    ) -> None:
        base = dict(DEFAULT_REGISTRY if registry is None else registry)
        self._registry: Mapping[str, AdapterKind] = MappingProxyType(base)
        self._prefix_rules: Tuple[PrefixRule, ...] = tuple(prefix_rules)
        self._default = default

    @property
    def registry(self) -> Mapping[str, AdapterKind]:
        return self._registry

    @property
    def prefix_rules(self) -> Tuple[PrefixRule, ...]:
        return self._prefix_rules

    @property
    def default(self) -> AdapterKind:
        return self._default

    def with_registry(self, entries: Mapping[str, AdapterKind]) -> "ModelResolver":
        """Return a new resolver whose registry also contains ``entries``."""
        merged = dict(self._registry)
        merged.update(entries)
        return ModelResolver(registry=merged, prefix_rules=self._prefix_rules, default=self._default)

    def resolve(self, model: str) -> AdapterKind:
        """Return the adapter kind for ``model``; never fails."""
        name = model or ""
        registered = self._registry.get(name)
        if registered is not None:
            return registered
        namespace, sep, _ = name.partition(NAMESPACE_SEPARATOR)
        if sep:
            kind = AdapterKind.from_name(namespace)
            if kind is not None:
                return kind
        for rule in self._prefix_rules:
            kind = rule.match(name)
            if kind is not None:
                return kind
        return self._default

    def resolve_iden(self, model: str) -> ModelIden:
        """Return the :class:`ModelIden` for ``model`` (name kept as passed)."""
        return ModelIden(adapter_kind=self.resolve(model), model_name=model or "")


__all__ = [
    "ModelResolver",
    "PrefixRule",
    "DEFAULT_REGISTRY",
    "DEFAULT_PREFIX_RULES",
    "DEFAULT_KIND",
]
