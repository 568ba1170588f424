"""
ChatResponse and TokenUsage DTOs.

Usage counters are reported as-is; a missing counter stays ``None`` and is
never derived from the others.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TokenUsage:
    """Token counters reported by a provider. Any of them may be absent."""

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    def is_empty(self) -> bool:
        return self.prompt_tokens is None and self.completion_tokens is None and self.total_tokens is None

    def to_dict(self) -> Dict[str, Optional[int]]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


@dataclass(frozen=True)
class ChatResponse:
    """Result of a single-shot chat call.

    Attributes:
        content: Response text, or the ``"No response"`` placeholder.
        model: Model name the provider reports having used, falling back to
            the requested one.
        usage: Token usage when the provider reports it.
    """

    content: str
    model: str
    usage: Optional[TokenUsage] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "model": self.model,
            "usage": self.usage.to_dict() if self.usage else None,
        }


__all__ = ["ChatResponse", "TokenUsage"]
