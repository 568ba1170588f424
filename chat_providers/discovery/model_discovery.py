"""Provider-level model discovery.

``discover_models`` answers "which models can this credential use?" without
ever raising. Providers whose registry entry disables listing fail fast with
a fixed message and no I/O; the rest go through
:meth:`ChatClient.get_available_models_safe`.
"""

from __future__ import annotations

from typing import Optional

from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ChatOptions, ModelListResult, Provider
from ..base.provider_registry import get_provider_spec
from ..config.defaults import LIST_MODELS_UNSUPPORTED_MESSAGE

_logger = get_logger("chat_providers.discovery")


def discover_models(provider: Provider, credential: Optional[str], base_url: Optional[str] = None) -> ModelListResult:
    if not get_provider_spec(provider).supports_list_models:
        log_event(_logger, "models.fetch.unsupported", LogContext(provider=str(provider)))
        return ModelListResult.failure(LIST_MODELS_UNSUPPORTED_MESSAGE)

    from ..client import ChatClient  # local import to avoid cycles

    client = ChatClient(provider, ChatOptions(model="", base_url=base_url, api_key=credential))
    return client.get_available_models_safe()


def get_models_from_provider(provider: Provider, api_key: Optional[str], base_url: Optional[str] = None) -> ModelListResult:
    """Same as :func:`discover_models`; the credential parameter is named ``api_key``."""
    return discover_models(provider, api_key, base_url)


__all__ = ["discover_models", "get_models_from_provider"]
