"""Credential placement strategies.

A client selects one strategy at construction time:

``ExplicitEndpointStrategy``
    A custom base URL was supplied. The normalized endpoint, credential and
    wire family travel explicitly with every request.

``ProviderSlotStrategy``
    No base URL was supplied. The credential is bound to the provider's named
    slot (``OPENAI_API_KEY`` ...) and the provider default endpoint is used.

Both resolve to a :class:`ServiceTarget` that transports consume directly.
Nothing here writes to ``os.environ``. When the caller supplied no
credential, the slot strategy reads the slot from the environment once per
resolve, so vendor SDKs never pick up a key from the wrong slot.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Protocol

from ..config.env import is_placeholder
from .logging import get_logger, log_event
from .log_support import LogContext
from .models import ChatOptions, Provider
from .provider_registry import ProviderSpec, WireFamily, get_provider_spec, uses_fallback_base_url
from .utils.urls import normalize_base_url

_LOGGER = get_logger("chat_providers.credentials")


def read_credential_slot(slot: Optional[str]) -> Optional[str]:
    """Read (never write) the process environment value bound to ``slot``."""
    if not slot:
        return None
    val = os.environ.get(slot)
    return None if not val or is_placeholder(val) else val


@dataclass(frozen=True)
class ServiceTarget:
    """Resolved destination of one call.

    ``api_key`` is excluded from ``repr``.
    """

    endpoint: str
    api_key: Optional[str] = field(repr=False)
    wire_family: WireFamily
    model: str
    credential_slot: Optional[str] = None
    explicit: bool = False


class CredentialStrategy(Protocol):
    """Resolve a :class:`ServiceTarget` for a given model."""

    def resolve(self, model: str) -> ServiceTarget: ...


@dataclass(frozen=True)
class ExplicitEndpointStrategy:
    """Route every request to a caller-supplied endpoint."""

    endpoint: str
    api_key: Optional[str] = field(repr=False)
    wire_family: WireFamily

    def resolve(self, model: str) -> ServiceTarget:
        return ServiceTarget(
            endpoint=self.endpoint,
            api_key=self.api_key,
            wire_family=self.wire_family,
            model=model,
            credential_slot=None,
            explicit=True,
        )


@dataclass(frozen=True)
class ProviderSlotStrategy:
    """Bind the credential to the provider's named slot and default endpoint."""

    credential_slot: Optional[str]
    api_key: Optional[str] = field(repr=False)
    default_endpoint: str
    wire_family: WireFamily

    def resolve(self, model: str) -> ServiceTarget:
        return ServiceTarget(
            endpoint=self.default_endpoint,
            api_key=self.api_key or read_credential_slot(self.credential_slot),
            wire_family=self.wire_family,
            model=model,
            credential_slot=self.credential_slot,
            explicit=False,
        )


def select_strategy(provider: Provider, options: ChatOptions, spec: Optional[ProviderSpec] = None) -> CredentialStrategy:
    """Pick the strategy for ``provider``/``options``.

    The explicit strategy is used exactly when a non-empty base URL is given.
    """
    spec = spec or get_provider_spec(provider)
    endpoint = normalize_base_url(options.base_url)
    if endpoint:
        if not spec.supports_custom_base_url:
            log_event(
                _LOGGER,
                "credentials.custom_base_url_unsupported",
                LogContext(provider=str(provider), model=options.model, endpoint=endpoint),
                level=logging.WARNING,
            )
        return ExplicitEndpointStrategy(endpoint=endpoint, api_key=options.api_key, wire_family=spec.wire_family)
    if uses_fallback_base_url(provider):
        log_event(
            _LOGGER,
            "credentials.fallback_base_url",
            LogContext(provider=str(provider), model=options.model, endpoint=spec.default_base_url),
            level=logging.WARNING,
        )
    return ProviderSlotStrategy(
        credential_slot=spec.credential_env_key,
        api_key=options.api_key,
        default_endpoint=spec.default_base_url,
        wire_family=spec.wire_family,
    )


__all__ = [
    "ServiceTarget",
    "CredentialStrategy",
    "ExplicitEndpointStrategy",
    "ProviderSlotStrategy",
    "select_strategy",
    "read_credential_slot",
]
