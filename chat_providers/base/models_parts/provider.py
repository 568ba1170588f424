"""
Provider identity DTO.

A provider is one of a closed set of named backends plus a ``custom``
variant carrying a free-form name for arbitrary OpenAI-compatible endpoints.
Instances are immutable and hashable so they can key registries and caches.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ProviderKind(str, Enum):
    """Tag of a :class:`Provider`. Values double as config/env keys."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    COHERE = "cohere"
    GEMINI = "gemini"
    GROQ = "groq"
    OLLAMA = "ollama"
    XAI = "xai"
    DEEPSEEK = "deepseek"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Provider:
    """A chat backend selection.

    Attributes:
        kind: The provider tag.
        name: Free-form display name; only meaningful (and required) for
            ``ProviderKind.CUSTOM``.

    Named providers are available as class attributes (``Provider.OPENAI``);
    custom ones are built with :meth:`custom`.
    """

    kind: ProviderKind
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ProviderKind.CUSTOM:
            if self.name is None:
                raise ValueError("custom provider requires a name")
        elif self.name is not None:
            raise ValueError(f"provider {self.kind.value!r} does not take a name")

    @classmethod
    def custom(cls, name: str) -> "Provider":
        return cls(ProviderKind.CUSTOM, name)

    @classmethod
    def parse(cls, value: str) -> "Provider":
        """Parse ``"deepseek"`` or ``"custom:<name>"`` (case-insensitive tag)."""
        text = (value or "").strip()
        tag, sep, rest = text.partition(":")
        try:
            kind = ProviderKind(tag.strip().lower())
        except ValueError:
            raise ValueError(f"unknown provider: {value!r}") from None
        if kind is ProviderKind.CUSTOM:
            return cls.custom(rest.strip() if sep else "custom")
        if sep:
            raise ValueError(f"provider {kind.value!r} does not take a name")
        return cls(kind)

    @property
    def key(self) -> str:
        """Config/env key (``"openai"``, ``"custom"`` ...)."""
        return self.kind.value

    @property
    def is_custom(self) -> bool:
        return self.kind is ProviderKind.CUSTOM

    def __str__(self) -> str:
        return f"custom:{self.name}" if self.is_custom else self.kind.value


Provider.OPENAI = Provider(ProviderKind.OPENAI)
Provider.ANTHROPIC = Provider(ProviderKind.ANTHROPIC)
Provider.COHERE = Provider(ProviderKind.COHERE)
Provider.GEMINI = Provider(ProviderKind.GEMINI)
Provider.GROQ = Provider(ProviderKind.GROQ)
Provider.OLLAMA = Provider(ProviderKind.OLLAMA)
Provider.XAI = Provider(ProviderKind.XAI)
Provider.DEEPSEEK = Provider(ProviderKind.DEEPSEEK)

NAMED_PROVIDERS = (
    Provider.OPENAI,
    Provider.ANTHROPIC,
    Provider.COHERE,
    Provider.GEMINI,
    Provider.GROQ,
    Provider.OLLAMA,
    Provider.XAI,
    Provider.DEEPSEEK,
)


__all__ = ["Provider", "ProviderKind", "NAMED_PROVIDERS"]
