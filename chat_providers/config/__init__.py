"""Layered configuration for chat providers.

Goals
-----
* Centralize defaults (models, base URLs).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``CHAT_PROVIDERS_CONFIG_FILE``
    3. Environment variables (e.g. ``OPENAI_MODEL``, ``OPENAI_API_KEY``)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider)``.

The chat client itself never reads configuration; it receives explicit
``ChatOptions``. This layer exists for the CLI and for applications that want
the same precedence rules.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_API_KEY, <PROVIDER>_BASE_URL, <PROVIDER>_SYSTEM_PROMPT
e.g. DEEPSEEK_MODEL, OLLAMA_BASE_URL.

External Config File
--------------------
JSON is attempted first, then YAML::

    deepseek:
      model: deepseek-chat
      base_url: https://api.deepseek.com/v1
    custom:
      base_url: https://api.moonshot.cn/v1
      model: moonshot-v1-8k
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    ANTHROPIC_DEFAULT_MODEL,
    COHERE_DEFAULT_MODEL,
    DEEPSEEK_DEFAULT_MODEL,
    GEMINI_DEFAULT_MODEL,
    GROQ_DEFAULT_MODEL,
    OLLAMA_DEFAULT_MODEL,
    OPENAI_DEFAULT_MODEL,
    XAI_DEFAULT_MODEL,
)
from .env import resolve_provider_key


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL},
    "anthropic": {"model": ANTHROPIC_DEFAULT_MODEL},
    "cohere": {"model": COHERE_DEFAULT_MODEL},
    "gemini": {"model": GEMINI_DEFAULT_MODEL},
    "groq": {"model": GROQ_DEFAULT_MODEL},
    "ollama": {"model": OLLAMA_DEFAULT_MODEL},
    "xai": {"model": XAI_DEFAULT_MODEL},
    "deepseek": {"model": DEEPSEEK_DEFAULT_MODEL},
    "custom": {},
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "system_prompt": "SYSTEM_PROMPT",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("CHAT_PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def reset_config_cache() -> None:
    """Forget the parsed external config file (next lookup re-reads it)."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider key (``"openai"``, ``"custom"``...).

    Merge order (later wins): defaults -> external config -> env vars ->
    env key aliases (only when no key yet) -> overrides.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if not cfg.get("api_key"):
        key, _ = resolve_provider_key(name)
        if key:
            cfg["api_key"] = key

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
