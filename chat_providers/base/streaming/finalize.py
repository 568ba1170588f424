"""Finalize stream helper.

Builds the terminal event and emits the consolidated ``stream.end`` /
``stream.error`` log line.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..logging import LogContext, normalized_log_event
from .events import ChatStreamEvent, StreamDone, StreamError
from .metrics import StreamMetrics


def finalize_stream(
    *,
    logger: logging.Logger,
    ctx: LogContext,
    metrics: StreamMetrics,
    total_content: str = "",
    error: Optional[str] = None,
    error_code: Optional[str] = None,
) -> ChatStreamEvent:
    """Create the terminal event and log it."""
    normalized_log_event(
        logger,
        "stream.end" if error is None else "stream.error",
        ctx,
        phase="finalize",
        attempt=None,
        emitted=metrics.emitted > 0,
        tokens=metrics.usage,
        error_code=error_code,
        level=logging.INFO if error is None else logging.WARNING,
        emitted_count=metrics.emitted,
        time_to_first_token_ms=metrics.time_to_first_token_ms,
        total_duration_ms=metrics.total_duration_ms,
        error=error,
    )
    if error is not None:
        return StreamError(message=error, error_code=error_code)
    return StreamDone(total_content=total_content, usage=metrics.usage)


__all__ = ["finalize_stream"]
