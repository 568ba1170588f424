"""Stream driver: native transport events -> consumer lifecycle events.

``StreamDriver.run`` implements the stream state machine::

    Idle -> Started -> Streaming (0..n Content) -> Done
                    \\-> Error

``StreamStart`` is yielded before the native stream is opened. From then on
every failure (opening the stream included) becomes a single in-band
``StreamError``. A native stream that ends without an end signal is finalized
with ``StreamDone`` without usage.

Closing the generator early closes the native stream.
"""
from __future__ import annotations

import logging
import time
from contextlib import ExitStack
from typing import Callable, Iterable, Iterator

from ..errors import classify_exception
from ..logging import LogContext, normalized_log_event
from .events import ChatStreamEvent, StreamContent, StreamStart
from .finalize import finalize_stream
from .metrics import StreamMetrics
from .native import NativeChunk, NativeEnd, NativeReasoningChunk, NativeStart, NativeStreamEvent


def _register_stream_cleanup(stream: object, stack: ExitStack) -> None:
    close = getattr(stream, "close", None)
    if callable(close):
        stack.callback(close)


class StreamDriver:
    """Run one streaming call.

    Args:
        ctx: Log context for the call.
        opener: Zero-arg callable returning an iterable of native events.
        logger: Logger receiving ``stream.*`` events.
    """

    def __init__(
        self,
        *,
        ctx: LogContext,
        opener: Callable[[], Iterable[NativeStreamEvent]],
        logger: logging.Logger,
    ) -> None:
        self.ctx = ctx
        self._opener = opener
        self._logger = logger
        self.metrics = StreamMetrics()

    def run(self) -> Iterator[ChatStreamEvent]:
        t0 = time.perf_counter()
        normalized_log_event(
            self._logger,
            "stream.start",
            self.ctx,
            phase="start",
            attempt=1,
            emitted=False,
            tokens=None,
        )
        yield StreamStart()

        accumulated: list[str] = []
        with ExitStack() as stack:
            try:
                stream = self._opener()
                _register_stream_cleanup(stream, stack)
                for native in stream:
                    if isinstance(native, NativeChunk):
                        if self.metrics.time_to_first_token_ms is None:
                            self.metrics.time_to_first_token_ms = (time.perf_counter() - t0) * 1000.0
                        self.metrics.emitted += 1
                        accumulated.append(native.text)
                        yield StreamContent(native.text)
                    elif isinstance(native, NativeEnd):
                        self.metrics.usage = native.usage
                        break
                    elif isinstance(native, (NativeStart, NativeReasoningChunk)):
                        continue
            except Exception as exc:
                self.metrics.total_duration_ms = (time.perf_counter() - t0) * 1000.0
                yield finalize_stream(
                    logger=self._logger,
                    ctx=self.ctx,
                    metrics=self.metrics,
                    error=str(exc) or exc.__class__.__name__,
                    error_code=classify_exception(exc).value,
                )
                return
        self.metrics.total_duration_ms = (time.perf_counter() - t0) * 1000.0
        yield finalize_stream(
            logger=self._logger,
            ctx=self.ctx,
            metrics=self.metrics,
            total_content="".join(accumulated),
        )


__all__ = ["StreamDriver"]
