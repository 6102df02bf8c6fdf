"""Layered configuration for adapters.

Merge order (later wins):
    1. Built-in defaults (base URLs)
    2. Optional config file (JSON or YAML) at ``GENAI_CONFIG_FILE``
    3. Environment variables (``<NAME>_API_KEY``, ``<NAME>_BASE_URL``,
       ``<NAME>_HEADERS`` as a JSON object, plus the aliases in
       :mod:`genai_dispatch.config.env`)
    4. In-code overrides passed to :func:`get_adapter_config`

A ``.env`` file (``DOTENV_FILE``, default ``.env``) is loaded once before the
environment is read. Existing variables win unless they hold a placeholder.

Config file example::

    azure_openai:
      base_url: https://res.openai.azure.com/openai/deployments/d1?api-version=2024-02-01
      api_key: ...
    ollama:
      base_url: http://gpu-box:11434/v1
      headers:
        X-Team: research

Public API
----------
* get_adapter_config(name: str, overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.logging import get_logger
from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    COHERE_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_BASE_URL,
    GROQ_DEFAULT_BASE_URL,
    OLLAMA_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_BASE_URL,
    XAI_DEFAULT_BASE_URL,
)
from .env import ENV_FIELD_SUFFIXES, is_placeholder, resolve_env_value

CONFIG_FILE_ENV_VAR = "GENAI_CONFIG_FILE"
DOTENV_ENV_VAR = "DOTENV_FILE"

_logger = get_logger("genai.config")

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"base_url": OPENAI_DEFAULT_BASE_URL},
    "azure_openai": {},
    "anthropic": {"base_url": ANTHROPIC_DEFAULT_BASE_URL},
    "cohere": {"base_url": COHERE_DEFAULT_BASE_URL},
    "gemini": {"base_url": GEMINI_DEFAULT_BASE_URL},
    "groq": {"base_url": GROQ_DEFAULT_BASE_URL},
    "xai": {"base_url": XAI_DEFAULT_BASE_URL},
    "deepseek": {"base_url": DEEPSEEK_DEFAULT_BASE_URL},
    "ollama": {"base_url": OLLAMA_DEFAULT_BASE_URL},
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Parse ``KEY=VALUE`` lines from the dotenv file into ``os.environ`` once."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_ENV_VAR, ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                if k.startswith("export "):
                    k = k[len("export "):].strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    except (OSError, UnicodeDecodeError) as exc:
        _logger.warning("ignoring unreadable dotenv file %s: %s", path, exc)
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV_VAR)
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _logger.warning("ignoring unreadable config file %s: %s", path, exc)
        _FILE_CACHE = {}
        return _FILE_CACHE
    try:
        data: Any = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            _logger.warning("ignoring unreadable config file %s: %s", path, exc)
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def _parse_headers(raw: str, var: str) -> Dict[str, str]:
    try:
        parsed = json.loads(raw)
    except ValueError:
        _logger.warning("ignoring %s: not a JSON object", var)
        return {}
    if not isinstance(parsed, dict):
        _logger.warning("ignoring %s: not a JSON object", var)
        return {}
    return {str(k): str(v) for k, v in parsed.items()}


def _env_overrides(name: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in ENV_FIELD_SUFFIXES:
        val, var = resolve_env_value(name, field)
        if val is None:
            continue
        if field == "headers":
            headers = _parse_headers(val, var or field)
            if headers:
                out[field] = headers
            continue
        out[field] = val
    return out


def _file_section(name: str) -> Dict[str, Any]:
    """Return the config file section for ``name`` with mistyped core keys dropped."""
    section = _load_external_config().get(name)
    if not isinstance(section, dict):
        return {}
    out: Dict[str, Any] = {}
    for k, v in section.items():
        if k in ("api_key", "base_url") and not isinstance(v, str):
            _logger.warning("ignoring %s.%s in config file: expected a string", name, k)
            continue
        if k == "headers":
            if not isinstance(v, dict):
                _logger.warning("ignoring %s.headers in config file: expected a mapping", name)
                continue
            v = {str(hk): str(hv) for hk, hv in v.items()}
        out[str(k)] = v
    return out


def reset_config_cache() -> None:
    """Forget the cached config file and allow the dotenv file to be re-read."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def get_adapter_config(name: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for an adapter.

    Keys: ``base_url``, ``api_key``, ``headers`` (dict) and any extra keys the
    config file provides. ``headers`` from later layers replace, not extend,
    earlier ones.
    """
    _load_dotenv_once()
    key = (name or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(key, {})

    cfg |= _file_section(key)

    cfg |= _env_overrides(key)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


__all__ = [
    "CONFIG_FILE_ENV_VAR",
    "DEFAULTS",
    "DOTENV_ENV_VAR",
    "get_adapter_config",
    "reset_config_cache",
]
