"""Native stream events produced by transports.

Transports translate vendor chunks into these four shapes; the stream driver
turns them into consumer-facing events. ``NativeStart`` and
``NativeReasoningChunk`` are consumed by the driver and never reach the
consumer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..models import TokenUsage


@dataclass(frozen=True)
class NativeStart:
    pass


@dataclass(frozen=True)
class NativeChunk:
    text: str


@dataclass(frozen=True)
class NativeReasoningChunk:
    text: str


@dataclass(frozen=True)
class NativeEnd:
    """End of stream; ``usage`` holds the captured counters, if any."""

    usage: Optional[TokenUsage] = None


NativeStreamEvent = Union[NativeStart, NativeChunk, NativeReasoningChunk, NativeEnd]


__all__ = ["NativeStart", "NativeChunk", "NativeReasoningChunk", "NativeEnd", "NativeStreamEvent"]
