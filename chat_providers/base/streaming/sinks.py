"""Event sinks: push-style consumers of stream events.

``add`` receives every in-band event. ``add_error`` is reserved for failures
that prevent the stream from starting at all (before ``StreamStart``).
"""

from __future__ import annotations

from typing import Callable, List, Optional, Protocol, runtime_checkable

from .events import ChatStreamEvent, StreamDone, StreamError, concat_content


@runtime_checkable
class StreamSink(Protocol):
    def add(self, event: ChatStreamEvent) -> None: ...

    def add_error(self, error: BaseException) -> None: ...


class CollectingSink:
    """Keep every event (and setup error) in memory."""

    def __init__(self) -> None:
        self.events: List[ChatStreamEvent] = []
        self.errors: List[BaseException] = []

    def add(self, event: ChatStreamEvent) -> None:
        self.events.append(event)

    def add_error(self, error: BaseException) -> None:
        self.errors.append(error)

    @property
    def terminal(self) -> Optional[ChatStreamEvent]:
        """Last event when it is terminal, else ``None``."""
        if self.events and isinstance(self.events[-1], (StreamDone, StreamError)):
            return self.events[-1]
        return None

    @property
    def text(self) -> str:
        return concat_content(self.events)

    @property
    def succeeded(self) -> bool:
        return isinstance(self.terminal, StreamDone)


class CallbackSink:
    """Forward events to plain callables."""

    def __init__(
        self,
        on_event: Callable[[ChatStreamEvent], None],
        on_error: Optional[Callable[[BaseException], None]] = None,
    ) -> None:
        self._on_event = on_event
        self._on_error = on_error

    def add(self, event: ChatStreamEvent) -> None:
        self._on_event(event)

    def add_error(self, error: BaseException) -> None:
        if self._on_error is not None:
            self._on_error(error)


__all__ = ["StreamSink", "CollectingSink", "CallbackSink"]
