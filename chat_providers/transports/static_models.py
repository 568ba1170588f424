"""Built-in model lists for families without dynamic discovery.

These lists mirror what each vendor documents as generally available chat
models; callers are expected to add others manually.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from ..base.provider_registry import WireFamily

STATIC_MODELS: Dict[WireFamily, Tuple[str, ...]] = {
    WireFamily.ANTHROPIC: (
        "claude-3-7-sonnet-latest",
        "claude-3-5-sonnet-latest",
        "claude-3-5-haiku-latest",
        "claude-3-opus-latest",
        "claude-3-haiku-20240307",
    ),
    WireFamily.COHERE: (
        "command-r-plus",
        "command-r",
        "command",
        "command-light",
    ),
    WireFamily.GEMINI: (
        "gemini-2.0-flash",
        "gemini-2.0-flash-lite",
        "gemini-1.5-pro",
        "gemini-1.5-flash",
        "gemini-1.5-flash-8b",
    ),
    WireFamily.GROQ: (
        "llama-3.3-70b-versatile",
        "llama-3.1-8b-instant",
        "gemma2-9b-it",
        "mixtral-8x7b-32768",
    ),
    WireFamily.XAI: (
        "grok-3",
        "grok-3-mini",
        "grok-2-1212",
        "grok-beta",
    ),
}


def static_model_names(family: WireFamily) -> List[str]:
    """Return a copy of the built-in list for ``family`` (empty when none)."""
    return list(STATIC_MODELS.get(family, ()))


__all__ = ["STATIC_MODELS", "static_model_names"]
