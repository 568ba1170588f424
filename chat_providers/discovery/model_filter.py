"""Model-name exclusion filter.

Drops identifiers of non-chat models (speech, image, embeddings, moderation,
legacy completion engines) by case-insensitive substring match. Relative
order of kept names is preserved.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..config.defaults import MODEL_EXCLUDE_PATTERNS


def is_excluded(model_id: str, patterns: Sequence[str] = MODEL_EXCLUDE_PATTERNS) -> bool:
    lowered = model_id.lower()
    return any(p in lowered for p in patterns)


def filter_models(model_ids: Iterable[str], patterns: Sequence[str] = MODEL_EXCLUDE_PATTERNS) -> List[str]:
    return [m for m in model_ids if not is_excluded(m, patterns)]


__all__ = ["is_excluded", "filter_models"]
