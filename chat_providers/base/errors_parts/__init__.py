"""Errors parts package public surface.

Prefer importing from :mod:`chat_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception, classify_status, wrap_exception

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "classify_status", "wrap_exception"]
