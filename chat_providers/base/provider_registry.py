"""Provider registry: static capability and connection table.

Purpose
-------
Map every :class:`Provider` to its connection parameters (default base URL,
credential slot, wire family) and capability flags. ``get_provider_spec`` is a
pure total function over the closed provider set; ``custom`` providers always
resolve and carry their name into the description.

External dependencies
---------------------
Standard library only. No I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ..config.defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    COHERE_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_BASE_URL,
    GROQ_DEFAULT_BASE_URL,
    OLLAMA_DEFAULT_HOST,
    OPENAI_COMPATIBLE_FALLBACK_BASE_URL,
    OPENAI_DEFAULT_BASE_URL,
    XAI_DEFAULT_BASE_URL,
)
from ..config.env import ENV_MAP
from .models import Provider, ProviderCapabilities, ProviderKind


class WireFamily(str, Enum):
    """Protocol dialect spoken by a provider's transport."""

    OPENAI_COMPATIBLE = "openai_compatible"
    ANTHROPIC = "anthropic"
    COHERE = "cohere"
    GEMINI = "gemini"
    GROQ = "groq"
    OLLAMA = "ollama"
    XAI = "xai"


@dataclass(frozen=True)
class ProviderSpec:
    """Registry entry for one provider.

    Attributes:
        supports_list_models: Whether dynamic model discovery is available.
        supports_custom_base_url: Whether a caller-supplied endpoint is honored.
        default_base_url: Endpoint used when no base URL is supplied.
        credential_env_key: Named credential slot (``None`` for Ollama).
        wire_family: Transport dialect.
        description: Human-readable summary.
    """

    supports_list_models: bool
    supports_custom_base_url: bool
    default_base_url: str
    credential_env_key: Optional[str]
    wire_family: WireFamily
    description: str

    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(
            supports_list_models=self.supports_list_models,
            supports_custom_base_url=self.supports_custom_base_url,
            description=self.description,
        )


_MANUAL_MODELS = "requires manually configured model list"

_REGISTRY: Dict[ProviderKind, ProviderSpec] = {
    ProviderKind.OPENAI: ProviderSpec(
        supports_list_models=True,
        supports_custom_base_url=True,
        default_base_url=OPENAI_DEFAULT_BASE_URL,
        credential_env_key=ENV_MAP["openai"],
        wire_family=WireFamily.OPENAI_COMPATIBLE,
        description="OpenAI official API, supports the GPT model family",
    ),
    ProviderKind.ANTHROPIC: ProviderSpec(
        supports_list_models=False,
        supports_custom_base_url=False,
        default_base_url=ANTHROPIC_DEFAULT_BASE_URL,
        credential_env_key=ENV_MAP["anthropic"],
        wire_family=WireFamily.ANTHROPIC,
        description=f"Anthropic Claude models, {_MANUAL_MODELS}",
    ),
    ProviderKind.COHERE: ProviderSpec(
        supports_list_models=False,
        supports_custom_base_url=False,
        default_base_url=COHERE_DEFAULT_BASE_URL,
        credential_env_key=ENV_MAP["cohere"],
        wire_family=WireFamily.COHERE,
        description=f"Cohere models, {_MANUAL_MODELS}",
    ),
    ProviderKind.GEMINI: ProviderSpec(
        supports_list_models=False,
        supports_custom_base_url=False,
        default_base_url=GEMINI_DEFAULT_BASE_URL,
        credential_env_key=ENV_MAP["gemini"],
        wire_family=WireFamily.GEMINI,
        description=f"Google Gemini models, {_MANUAL_MODELS}",
    ),
    ProviderKind.GROQ: ProviderSpec(
        supports_list_models=False,
        supports_custom_base_url=False,
        default_base_url=GROQ_DEFAULT_BASE_URL,
        credential_env_key=ENV_MAP["groq"],
        wire_family=WireFamily.GROQ,
        description=f"Groq fast inference service, {_MANUAL_MODELS}",
    ),
    ProviderKind.OLLAMA: ProviderSpec(
        supports_list_models=True,
        supports_custom_base_url=True,
        default_base_url=OLLAMA_DEFAULT_HOST,
        credential_env_key=None,
        wire_family=WireFamily.OLLAMA,
        description="Ollama local model service, supports discovering installed models",
    ),
    ProviderKind.XAI: ProviderSpec(
        supports_list_models=False,
        supports_custom_base_url=False,
        default_base_url=XAI_DEFAULT_BASE_URL,
        credential_env_key=ENV_MAP["xai"],
        wire_family=WireFamily.XAI,
        description=f"xAI Grok models, {_MANUAL_MODELS}",
    ),
    ProviderKind.DEEPSEEK: ProviderSpec(
        supports_list_models=True,
        supports_custom_base_url=True,
        default_base_url=DEEPSEEK_DEFAULT_BASE_URL,
        credential_env_key=ENV_MAP["deepseek"],
        wire_family=WireFamily.OPENAI_COMPATIBLE,
        description="DeepSeek models via the OpenAI-compatible API",
    ),
}


def get_provider_spec(provider: Provider) -> ProviderSpec:
    """Return the registry entry for ``provider`` (total, pure)."""
    if provider.kind is ProviderKind.CUSTOM:
        # No dedicated endpoint: falls back to the OpenAI default.
        return ProviderSpec(
            supports_list_models=True,
            supports_custom_base_url=True,
            default_base_url=OPENAI_COMPATIBLE_FALLBACK_BASE_URL,
            credential_env_key=ENV_MAP["custom"],
            wire_family=WireFamily.OPENAI_COMPATIBLE,
            description=f"Custom provider: {provider.name}, assumed OpenAI-compatible",
        )
    return _REGISTRY[provider.kind]


def uses_fallback_base_url(provider: Provider) -> bool:
    """True when ``provider`` has no dedicated default endpoint of its own."""
    return provider.kind is ProviderKind.CUSTOM


__all__ = ["WireFamily", "ProviderSpec", "get_provider_spec", "uses_fallback_base_url"]
