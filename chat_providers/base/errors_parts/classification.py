"""
Exception classification into normalized :class:`ErrorCode` values.

Order of precedence: ``ProviderError`` passthrough, timeouts, transport-level
``httpx`` failures, HTTP status attributes (SDK errors expose ``status_code``),
JSON decode errors, then substring heuristics on the message.
"""
from __future__ import annotations

import json
from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Return an HTTP status from ``status_code``, ``status`` or ``response.status_code``."""
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.UNAVAILABLE,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


_MESSAGE_PATTERNS = (
    (ErrorCode.TIMEOUT, ("timeout", "timed out")),
    (ErrorCode.AUTH, ("api key", "unauthorized", "forbidden", "authentication")),
    (ErrorCode.RATE_LIMIT, ("rate limit", "too many requests")),
    (ErrorCode.UNSUPPORTED, ("unsupported", "not supported", "not installed")),
    (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
    (ErrorCode.UNAVAILABLE, ("unavailable", "connection refused")),
    (ErrorCode.VALIDATION, ("invalid", "malformed", "validation")),
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    for code, patterns in _MESSAGE_PATTERNS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_status(status: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode`."""
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    return ErrorCode.SERVER_ERROR if status >= 500 else ErrorCode.PROTOCOL


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`."""
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSPORT
    status = _extract_status(exc)
    if status is not None:
        return classify_status(status)
    if isinstance(exc, json.JSONDecodeError):
        return ErrorCode.PROTOCOL
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def wrap_exception(exc: BaseException, *, provider: str, model: Optional[str] = None) -> ProviderError:
    """Return ``exc`` as a :class:`ProviderError`, classifying it when needed."""
    if isinstance(exc, ProviderError):
        return exc
    return ProviderError(
        code=classify_exception(exc),
        message=str(exc) or exc.__class__.__name__,
        provider=provider,
        model=model,
        raw=exc,
    )


__all__ = [
    "classify_exception",
    "classify_status",
    "wrap_exception",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
