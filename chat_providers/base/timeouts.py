"""Timeout values for the chat providers layer.

Only model discovery carries an enforced wall-clock budget; streaming and
single-shot chat calls rely on the vendor SDK defaults.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use only. Supported environment variable (optional):
        CHAT_PROVIDERS_HTTP_TIMEOUT_SECONDS
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from ..config.defaults import MODEL_DISCOVERY_TIMEOUT_SECONDS

HTTP_TIMEOUT_ENV = "CHAT_PROVIDERS_HTTP_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Timeout for plain HTTP requests issued by this
            package (model listing, Ollama tag listing).
    """

    http_timeout_seconds: float = MODEL_DISCOVERY_TIMEOUT_SECONDS


_CACHED: TimeoutConfig | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED  # noqa: PLW0603 - documented module cache
    if _CACHED is None:
        _CACHED = TimeoutConfig(
            http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, MODEL_DISCOVERY_TIMEOUT_SECONDS)
        )
    return _CACHED


def reset_timeout_config() -> None:
    """Drop the cached configuration so the next lookup re-reads the environment."""
    global _CACHED  # noqa: PLW0603
    _CACHED = None


__all__ = ["TimeoutConfig", "get_timeout_config", "reset_timeout_config", "HTTP_TIMEOUT_ENV"]
