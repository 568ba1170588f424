"""Direct model listing for OpenAI-compatible endpoints.

Purpose
    ``GET {base_url}models`` with a bearer credential, validated through the
    pydantic listing DTO and passed through the exclusion filter.

External Dependencies
    * ``httpx`` through :func:`open_httpx_client` (fresh client per call).
    * ``pydantic`` for payload validation.

Timeout Strategy
    ``get_timeout_config().http_timeout_seconds`` (30 seconds by default).

Failure Semantics
    :func:`fetch_openai_compatible_models` never raises; failures come back as
    :meth:`ModelListResult.failure` carrying one of three message shapes:
    ``HTTP error {status}: {body}``, ``Failed to parse response: ...`` or
    ``Network request failed: ...``. :func:`list_openai_compatible_models`
    raises :class:`ProviderError` with the same messages for callers that
    need the error code. The credential never appears in messages or logs.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ..base.dto import OpenAIModelsResponse
from ..base.errors import ErrorCode, ProviderError, classify_exception, classify_status
from ..base.http import open_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ModelListResult
from ..base.timeouts import get_timeout_config
from ..base.utils.urls import join_url
from .model_filter import filter_models

_logger = get_logger("chat_providers.discovery")


def models_url(base_url: str) -> str:
    """``https://api.deepseek.com/v1`` -> ``https://api.deepseek.com/v1/models``."""
    return join_url(base_url, "models")


def list_openai_compatible_models(
    api_key: Optional[str],
    base_url: str,
    *,
    provider: str = "openai_compatible",
) -> List[str]:
    """Return filtered model ids served by an OpenAI-compatible endpoint or raise.

    Bypasses provider dispatch entirely; callers supply the credential and the
    base URL (normalized here).

    Raises:
        ProviderError: on transport failure, non-2xx status or an
            undecodable / invalid body.
    """
    url = models_url(base_url)
    ctx = LogContext(provider=provider, endpoint=url)
    normalized_log_event(_logger, "models.fetch.start", ctx, phase="start", attempt=1, emitted=None, tokens=None)
    t0 = time.perf_counter()
    headers = {"Authorization": f"Bearer {api_key or ''}", "Content-Type": "application/json"}
    try:
        with open_httpx_client(timeout=get_timeout_config().http_timeout_seconds) as client:
            resp = client.get(url, headers=headers)
    except httpx.HTTPError as exc:
        code = classify_exception(exc)
        _log_error(ctx, code, f"Network request failed: {exc}")
        raise ProviderError(
            code=code,
            message=f"Network request failed: {exc}",
            provider=provider,
            raw=exc,
        ) from exc

    if not resp.is_success:
        message = f"HTTP error {resp.status_code}: {resp.text}"
        code = classify_status(resp.status_code)
        _log_error(ctx, code, message, status=resp.status_code)
        raise ProviderError(code=code, message=message, provider=provider)

    try:
        payload = OpenAIModelsResponse.model_validate_json(resp.content)
    except ValidationError as exc:
        message = f"Failed to parse response: {exc}"
        _log_error(ctx, ErrorCode.PROTOCOL, message)
        raise ProviderError(code=ErrorCode.PROTOCOL, message=message, provider=provider, raw=exc) from exc

    models = filter_models(payload.ids())
    normalized_log_event(
        _logger,
        "models.fetch.end",
        ctx,
        phase="finalize",
        attempt=1,
        emitted=len(models),
        tokens=None,
        latency_ms=(time.perf_counter() - t0) * 1000.0,
        discovered=len(payload.data),
    )
    return models


def fetch_openai_compatible_models(
    api_key: Optional[str],
    base_url: str,
    *,
    provider: str = "openai_compatible",
) -> ModelListResult:
    """Standalone listing utility: same request, failures returned as values."""
    try:
        models = list_openai_compatible_models(api_key, base_url, provider=provider)
    except ProviderError as exc:
        return ModelListResult.failure(exc.message)
    return ModelListResult.ok(models)


def _log_error(ctx: LogContext, code: ErrorCode, message: str, **fields) -> None:
    normalized_log_event(
        _logger,
        "models.fetch.error",
        ctx,
        phase="finalize",
        attempt=1,
        emitted=False,
        tokens=None,
        error_code=code.value,
        level=logging.WARNING,
        error=message,
        **fields,
    )


__all__ = ["fetch_openai_compatible_models", "list_openai_compatible_models", "models_url"]
