"""Adapter factory.

Purpose
-------
Create adapter instances for an :class:`AdapterKind`. Adapter modules are
imported lazily with ``importlib`` so that importing the dispatch layer does
not import every provider package.

Configuration
-------------
Constructor inputs come from :func:`genai_dispatch.config.get_adapter_config`
with the caller's :class:`AdapterParams` applied as overrides. An adapter
whose configuration has no ``base_url`` is created without an endpoint and
rejects calls with ``InvalidRequest(field="endpoint")``.

The factory performs no retries or fallbacks; it either returns an instance
or raises :class:`UnknownAdapterError`.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from ..config import get_adapter_config
from .adapter import Adapter
from .adapter_kind import AdapterKind
from .dto.adapter_params import AdapterParams
from .models import Endpoint

_CORE_KEYS = ("api_key", "base_url", "headers")


class UnknownAdapterError(Exception):
    """Raised when an adapter kind cannot be mapped to an importable class."""


class AdapterFactory:
    """Create adapters based on their kind.

    Design notes
    ------------
    - Uses ``importlib.import_module`` for explicit import semantics.
    - Raises :class:`UnknownAdapterError` with an actionable message for
      unregistered kinds, import failures and missing classes.
    """

    _ADAPTERS: Dict[AdapterKind, Dict[str, str]] = {
        AdapterKind.OPENAI: {"module": "genai_dispatch.openai.client", "class": "OpenAIAdapter"},
        AdapterKind.AZURE_OPENAI: {"module": "genai_dispatch.azure_openai.client", "class": "AzureOpenAIAdapter"},
        AdapterKind.ANTHROPIC: {"module": "genai_dispatch.anthropic.client", "class": "AnthropicAdapter"},
        AdapterKind.COHERE: {"module": "genai_dispatch.cohere.client", "class": "CohereAdapter"},
        AdapterKind.GEMINI: {"module": "genai_dispatch.gemini.client", "class": "GeminiAdapter"},
        AdapterKind.GROQ: {"module": "genai_dispatch.groq.client", "class": "GroqAdapter"},
        AdapterKind.XAI: {"module": "genai_dispatch.xai.client", "class": "XAIAdapter"},
        AdapterKind.DEEPSEEK: {"module": "genai_dispatch.deepseek.client", "class": "DeepSeekAdapter"},
        AdapterKind.OLLAMA: {"module": "genai_dispatch.ollama.client", "class": "OllamaAdapter"},
    }

    @classmethod
    def adapter_class(cls, kind: AdapterKind) -> Type[Adapter]:
        """Import and return the adapter class registered for ``kind``."""
        spec = cls._ADAPTERS.get(kind)
        if not spec:
            raise UnknownAdapterError(f"no adapter registered for kind '{kind}'")
        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownAdapterError(f"failed to import module '{module_path}' for '{kind.value}': {exc}") from exc
        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownAdapterError(f"adapter class '{class_name}' not found in '{module_path}'") from exc

    @classmethod
    def create(cls, kind: AdapterKind, params: Optional[AdapterParams] = None) -> Adapter:
        """Create an adapter with merged configuration.

        Parameters
        ----------
        kind:
            Adapter kind to instantiate.
        params:
            Optional explicit settings; non-``None`` values win over the
            file and environment layers.
        """
        klass = cls.adapter_class(kind)
        cfg = get_adapter_config(kind.value, cls._overrides(params))
        base_url = cfg.get("base_url")
        endpoint = Endpoint.from_url(base_url, cfg.get("headers")) if base_url else None
        extra = {k: v for k, v in cfg.items() if k not in _CORE_KEYS}
        return klass(endpoint=endpoint, api_key=cfg.get("api_key"), extra=extra)

    @classmethod
    def supported(cls) -> Tuple[AdapterKind, ...]:
        """Return the registered adapter kinds in declaration order."""
        return tuple(cls._ADAPTERS.keys())

    @staticmethod
    def _overrides(params: Optional[AdapterParams]) -> Dict[str, Any]:
        """Flatten ``AdapterParams`` into config overrides.

        Empty ``headers`` do not replace configured headers; ``extra`` keys are
        merged at top level.
        """
        if params is None:
            return {}
        out: Dict[str, Any] = dict(params.extra)
        if params.api_key is not None:
            out["api_key"] = params.api_key
        if params.base_url is not None:
            out["base_url"] = params.base_url
        headers: Mapping[str, str] = params.headers
        if headers:
            out["headers"] = dict(headers)
        return out


__all__ = ["AdapterFactory", "UnknownAdapterError"]
