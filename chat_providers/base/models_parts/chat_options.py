"""
ChatOptions DTO: caller-supplied request configuration.

Optional fields left as ``None`` mean "provider default"; nothing is coerced
or clamped here. ``api_key`` is excluded from ``repr`` and from
:meth:`ChatOptions.to_dict` so options can be logged safely.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ChatOptions:
    """Request options bound to a :class:`~chat_providers.client.ChatClient`.

    Attributes:
        model: Model identifier (required).
        base_url: Optional custom endpoint. When set, requests are routed
            explicitly to it instead of the provider default.
        api_key: Opaque credential. Never logged, never in ``repr``.
        temperature: Sampling temperature (conceptually 0..2).
        top_p: Nucleus sampling mass (conceptually 0..1).
        max_tokens: Maximum output tokens.
        system_prompt: Dedicated system instruction slot.
        stop_sequences: Ordered stop sequences.
    """

    model: str
    base_url: Optional[str] = None
    api_key: Optional[str] = field(default=None, repr=False)
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    system_prompt: Optional[str] = None
    stop_sequences: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        # Freeze list input so the options stay immutable after construction.
        if self.stop_sequences is not None and not isinstance(self.stop_sequences, tuple):
            object.__setattr__(self, "stop_sequences", tuple(self.stop_sequences))

    def to_dict(self) -> Dict[str, Any]:
        """Return a log-safe dictionary (credential reduced to a presence flag)."""
        return {
            "model": self.model,
            "base_url": self.base_url,
            "has_credential": bool(self.api_key),
            "temperature": self.temperature,
            "top_p": self.top_p,
            "max_tokens": self.max_tokens,
            "system_prompt": self.system_prompt,
            "stop_sequences": list(self.stop_sequences) if self.stop_sequences is not None else None,
        }


__all__ = ["ChatOptions"]
