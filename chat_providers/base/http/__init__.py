"""HTTP utilities for chat providers.

Exports ``open_httpx_client`` which returns a fresh per-call ``httpx.Client``.
"""

from .client import open_httpx_client

__all__ = ["open_httpx_client"]
