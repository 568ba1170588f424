"""Streaming metrics data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..models import TokenUsage


@dataclass
class StreamMetrics:
    """Collected streaming metrics for a single invocation.

    Attributes:
        emitted: Number of content events emitted.
        time_to_first_token_ms: Delay from stream open to first content event.
        total_duration_ms: Wall time until the terminal event.
        usage: Usage captured from the native end signal, reported as-is.
    """

    emitted: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    usage: Optional[TokenUsage] = None


__all__ = ["StreamMetrics"]
