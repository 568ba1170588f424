"""Token usage extraction from vendor response objects.

Counters are copied as reported. A missing counter stays ``None``; totals
are never derived from the parts. Returns ``None`` when no counter at all is
present so callers can tell "no usage reported" apart from zeros.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..base.models import TokenUsage


def _coerce_int(value: Any) -> Optional[int]:
    """Coerce ``value`` to a non-negative ``int`` or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError):
        return None
    return iv if iv >= 0 else None


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def usage_from_counts(prompt: Any, completion: Any, total: Any = None) -> Optional[TokenUsage]:
    usage = TokenUsage(
        prompt_tokens=_coerce_int(prompt),
        completion_tokens=_coerce_int(completion),
        total_tokens=_coerce_int(total),
    )
    return None if usage.is_empty() else usage


def extract_openai_usage(raw_usage: Any) -> Optional[TokenUsage]:
    """Map ``{prompt_tokens, completion_tokens, total_tokens}``."""
    if raw_usage is None:
        return None
    return usage_from_counts(
        _field(raw_usage, "prompt_tokens"),
        _field(raw_usage, "completion_tokens"),
        _field(raw_usage, "total_tokens"),
    )


def extract_anthropic_usage(raw_usage: Any) -> Optional[TokenUsage]:
    """Map ``{input_tokens, output_tokens}``; Anthropic reports no total."""
    if raw_usage is None:
        return None
    return usage_from_counts(
        _field(raw_usage, "input_tokens"),
        _field(raw_usage, "output_tokens"),
        _field(raw_usage, "total_tokens"),
    )


def extract_gemini_usage(raw_usage: Any) -> Optional[TokenUsage]:
    """Map ``usage_metadata`` (``prompt_token_count`` ...)."""
    if raw_usage is None:
        return None
    return usage_from_counts(
        _field(raw_usage, "prompt_token_count"),
        _field(raw_usage, "candidates_token_count"),
        _field(raw_usage, "total_token_count"),
    )


def extract_ollama_usage(payload: Mapping[str, Any]) -> Optional[TokenUsage]:
    """Map Ollama's ``prompt_eval_count`` / ``eval_count``."""
    return usage_from_counts(payload.get("prompt_eval_count"), payload.get("eval_count"))


__all__ = [
    "usage_from_counts",
    "extract_openai_usage",
    "extract_anthropic_usage",
    "extract_gemini_usage",
    "extract_ollama_usage",
]
