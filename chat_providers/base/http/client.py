"""HTTP client factory for the chat providers layer.

Purpose:
    Hand out a fresh ``httpx.Client`` for every outbound call. Each discovery
    or Ollama request owns its connection and closes it when done; nothing is
    pooled or shared between calls.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Testing:
    ``transport`` accepts an ``httpx.MockTransport`` so tests can intercept
    requests without sockets. Tests usually monkeypatch
    :func:`open_httpx_client` in the consuming module to inject one.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..timeouts import get_timeout_config


def open_httpx_client(
    timeout: Optional[float] = None,
    base_url: Optional[str] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Return a new ``httpx.Client``; callers close it (use it as a context manager).

    Parameters:
        timeout: Seconds for the whole request. ``None`` uses
            ``get_timeout_config().http_timeout_seconds``.
        base_url: Optional base URL for relative requests.
        transport: Optional custom transport (tests).
    """
    if timeout is None:
        timeout = get_timeout_config().http_timeout_seconds
    kwargs = {"timeout": timeout}
    if base_url:
        kwargs["base_url"] = base_url
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.Client(**kwargs)


__all__ = ["open_httpx_client"]
