"""URL helpers shared by discovery and transports."""
from __future__ import annotations

from typing import Optional


def normalize_base_url(url: Optional[str]) -> str:
    """Trim ``url`` and make it end in exactly one ``/``.

    Empty or whitespace-only input yields ``""``. A value already ending in
    ``/`` is returned unchanged (after trimming), so the function is
    idempotent.
    """
    text = (url or "").strip()
    if not text:
        return ""
    return text if text.endswith("/") else f"{text}/"


def join_url(base: str, path: str) -> str:
    """Append ``path`` (without leading slash) to a normalized ``base``."""
    return f"{normalize_base_url(base)}{path.lstrip('/')}"


__all__ = ["normalize_base_url", "join_url"]
