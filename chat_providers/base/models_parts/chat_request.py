"""
Normalized request DTOs handed from the request builder to transports.

``SamplingOptions`` carries only the fields the caller set; the request
builder returns ``None`` instead of an empty instance for single-shot calls.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .message import ChatMessage


@dataclass(frozen=True)
class SamplingOptions:
    """Generation controls plus the streaming capture flags.

    ``capture_content`` and ``capture_usage`` are forced on for streaming so
    the final Done event can carry the accumulated text and usage.
    """

    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    stop_sequences: Optional[Tuple[str, ...]] = None
    capture_content: bool = False
    capture_usage: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return only the fields that are set (flags only when enabled)."""
        out: Dict[str, Any] = {}
        if self.temperature is not None:
            out["temperature"] = self.temperature
        if self.top_p is not None:
            out["top_p"] = self.top_p
        if self.max_tokens is not None:
            out["max_tokens"] = self.max_tokens
        if self.stop_sequences is not None:
            out["stop_sequences"] = list(self.stop_sequences)
        if self.capture_content:
            out["capture_content"] = True
        if self.capture_usage:
            out["capture_usage"] = True
        return out


@dataclass(frozen=True)
class NormalizedChatRequest:
    """Provider-agnostic request: optional system slot plus ordered messages."""

    messages: Tuple[ChatMessage, ...]
    system: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "system": self.system,
            "messages": [m.to_dict() for m in self.messages],
        }


__all__ = ["SamplingOptions", "NormalizedChatRequest"]
