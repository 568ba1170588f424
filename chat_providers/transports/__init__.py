"""Transport registry.

Transports are imported lazily with ``importlib`` so a missing vendor SDK
only affects the families that need it.
"""

from __future__ import annotations

from importlib import import_module
from typing import Dict, Tuple

from ..base.errors import ErrorCode, ProviderError
from ..base.provider_registry import WireFamily
from .base import Transport

# family -> (module, class, takes_family_arg)
_TRANSPORTS: Dict[WireFamily, Tuple[str, str, bool]] = {
    WireFamily.OPENAI_COMPATIBLE: ("chat_providers.transports.openai_style", "OpenAIStyleTransport", True),
    WireFamily.GROQ: ("chat_providers.transports.openai_style", "OpenAIStyleTransport", True),
    WireFamily.XAI: ("chat_providers.transports.openai_style", "OpenAIStyleTransport", True),
    WireFamily.COHERE: ("chat_providers.transports.openai_style", "OpenAIStyleTransport", True),
    WireFamily.ANTHROPIC: ("chat_providers.transports.anthropic", "AnthropicTransport", False),
    WireFamily.GEMINI: ("chat_providers.transports.gemini", "GeminiTransport", False),
    WireFamily.OLLAMA: ("chat_providers.transports.ollama", "OllamaTransport", False),
}


def get_transport(family: WireFamily, *, provider: str = "unknown") -> Transport:
    """Instantiate the transport for ``family``.

    Raises:
        ProviderError: ``UNSUPPORTED`` when no transport is registered or the
            module cannot be imported.
    """
    entry = _TRANSPORTS.get(family)
    if entry is None:
        raise ProviderError(
            code=ErrorCode.UNSUPPORTED,
            message=f"no transport registered for wire family {family.value!r}",
            provider=provider,
        )
    module_path, class_name, takes_family = entry
    try:
        cls = getattr(import_module(module_path), class_name)
    except (ImportError, AttributeError) as exc:
        raise ProviderError(
            code=ErrorCode.UNSUPPORTED,
            message=f"transport {module_path}.{class_name} unavailable: {exc}",
            provider=provider,
            raw=exc,
        ) from exc
    return cls(family) if takes_family else cls()


__all__ = ["Transport", "get_transport"]
