"""Shared fixtures for the chat_providers test suite.

All tests run offline: HTTP goes through ``httpx.MockTransport`` and chat
transports are replaced with scripted fakes.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Iterator, List, Optional

import httpx
import pytest

from chat_providers.base.logging import BASE_LOGGER_NAME, get_logger
from chat_providers.base.timeouts import reset_timeout_config
from chat_providers.config import DEFAULTS, ENV_FIELD_MAP, reset_config_cache
from chat_providers.config.env import ENV_ALIASES, ENV_MAP

from .fakes import FakeTransport


@pytest.fixture(autouse=True)
def clean_credential_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove every credential slot so tests never see a developer's keys."""
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for provider in DEFAULTS:
        names.update(f"{provider.upper()}_{suffix}" for suffix in ENV_FIELD_MAP.values())
    for name in names:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("CHAT_PROVIDERS_CONFIG_FILE", raising=False)
    monkeypatch.delenv("CHAT_PROVIDERS_HTTP_TIMEOUT_SECONDS", raising=False)
    reset_config_cache()
    reset_timeout_config()
    yield
    reset_config_cache()
    reset_timeout_config()


class _JsonListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())

    def events(self) -> List[dict]:
        out = []
        for m in self.messages:
            try:
                out.append(json.loads(m))
            except ValueError:
                continue
        return out


@pytest.fixture()
def log_events() -> Iterator[_JsonListHandler]:
    """Capture structured events emitted under the ``chat_providers`` logger."""
    base = get_logger(BASE_LOGGER_NAME)
    handler = _JsonListHandler()
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        base.removeHandler(handler)
        base.setLevel(previous)


@pytest.fixture()
def install_transport(monkeypatch: pytest.MonkeyPatch) -> Callable[[FakeTransport], FakeTransport]:
    """Route ``ChatClient`` transport lookups to the given fake."""

    def _install(fake: FakeTransport) -> FakeTransport:
        def _get_transport(family, *, provider: str = "unknown"):
            fake.families_requested.append(family)
            return fake

        monkeypatch.setattr("chat_providers.client.get_transport", _get_transport)
        return fake

    return _install


@pytest.fixture()
def mock_http(monkeypatch: pytest.MonkeyPatch):
    """Install an ``httpx.MockTransport`` for discovery and Ollama calls.

    Returns a function taking the request handler; captured requests are
    appended to the returned list.
    """

    def _install(handler: Callable[[httpx.Request], httpx.Response], *, error: Optional[Exception] = None) -> List[httpx.Request]:
        seen: List[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if error is not None:
                raise error
            return handler(request)

        def _open(timeout=None, base_url=None, transport=None):
            kwargs = {"transport": httpx.MockTransport(_handler)}
            if timeout is not None:
                kwargs["timeout"] = timeout
            return httpx.Client(**kwargs)

        monkeypatch.setattr("chat_providers.discovery.openai_listing.open_httpx_client", _open)
        monkeypatch.setattr("chat_providers.transports.ollama.open_httpx_client", _open)
        return seen

    return _install
