"""Scripted test doubles for transports and vendor SDK objects."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Iterator, List, Optional, Sequence

from chat_providers.base.credentials import ServiceTarget
from chat_providers.base.models import ChatResponse, NormalizedChatRequest, SamplingOptions
from chat_providers.base.provider_registry import WireFamily
from chat_providers.base.streaming import NativeStreamEvent
from chat_providers.transports.base import Transport


class FakeTransport(Transport):
    """Transport replaying scripted results and recording calls.

    ``stream_script`` items are yielded in order; an ``Exception`` instance in
    the script is raised at that point. ``open_error`` is raised when the
    stream is opened.
    """

    family = WireFamily.OPENAI_COMPATIBLE
    sdk_name = "fake"

    def __init__(
        self,
        *,
        response: Optional[ChatResponse] = None,
        chat_error: Optional[Exception] = None,
        stream_script: Sequence[Any] = (),
        open_error: Optional[Exception] = None,
        models: Sequence[str] = (),
        available: bool = True,
    ) -> None:
        self.response = response
        self.chat_error = chat_error
        self.stream_script = list(stream_script)
        self.open_error = open_error
        self.models = list(models)
        self.available = available
        self.calls: List[tuple] = []
        self.families_requested: List[WireFamily] = []
        self.closed = False

    def _sdk(self) -> Any:
        return object() if self.available else None

    def exec_chat(self, target: ServiceTarget, request: NormalizedChatRequest, sampling: Optional[SamplingOptions]) -> ChatResponse:
        self.calls.append(("chat", target, request, sampling))
        if self.chat_error is not None:
            raise self.chat_error
        assert self.response is not None  # nosec B101
        return self.response

    def exec_chat_stream(self, target: ServiceTarget, request: NormalizedChatRequest, sampling: SamplingOptions) -> Iterator[NativeStreamEvent]:
        self.calls.append(("stream", target, request, sampling))
        if self.open_error is not None:
            raise self.open_error
        return self._iterate()

    def _iterate(self) -> Iterator[NativeStreamEvent]:
        try:
            for item in self.stream_script:
                if isinstance(item, Exception):
                    raise item
                yield item
        finally:
            self.closed = True

    def list_model_names(self, target: ServiceTarget) -> List[str]:
        self.calls.append(("models", target))
        return list(self.models)


def ns(**kwargs: Any) -> SimpleNamespace:
    return SimpleNamespace(**kwargs)


class FakeSdkStream:
    """Iterable SDK stream with a ``close`` hook."""

    def __init__(self, items: Sequence[Any], error: Optional[Exception] = None) -> None:
        self._items = list(items)
        self._error = error
        self.closed = False

    def __iter__(self):
        yield from self._items
        if self._error is not None:
            raise self._error

    def close(self) -> None:
        self.closed = True
