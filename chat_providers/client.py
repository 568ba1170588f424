"""ChatClient: one provider + one set of options, many independent calls.

Purpose
-------
Tie the registry, credential strategy, request builder and transports into
the caller-facing operations:

* ``chat`` single-shot completion, raising :class:`ProviderError` on failure.
* ``chat_stream`` / ``stream_events`` streamed completion as lifecycle events.
* ``get_available_models`` / ``get_available_models_safe`` model discovery.
* ``supports_list_models`` / ``get_provider_capabilities`` pure queries.

Streaming error channels
------------------------
Failures before ``StreamStart`` (missing SDK, no transport for the family)
are setup failures: ``chat_stream`` reports them through
``sink.add_error`` and raises ``ProviderError``. Once ``StreamStart`` has been
emitted every failure, including opening the native stream, arrives as an
in-band ``StreamError`` and ``chat_stream`` returns ``None``. Consumers must
inspect the last event to learn whether the stream succeeded.

No retries, no pooling. Each call builds its own SDK / HTTP client.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from .base.credentials import CredentialStrategy, ServiceTarget, select_strategy
from .base.errors import ProviderError, wrap_exception
from .base.logging import LogContext, get_logger, normalized_log_event
from .base.models import (
    ChatMessage,
    ChatOptions,
    ChatResponse,
    ModelListResult,
    NormalizedChatRequest,
    Provider,
    ProviderCapabilities,
    SamplingOptions,
)
from .base.provider_registry import ProviderSpec, WireFamily, get_provider_spec
from .base.request_builder import build_chat_options, build_request, build_stream_options
from .base.streaming import ChatStreamEvent, StreamDriver, StreamSink
from .discovery.openai_listing import list_openai_compatible_models
from .transports import Transport, get_transport

_logger = get_logger("chat_providers.client")

_FETCH_FAILED = "Failed to fetch model list"


@dataclass(frozen=True)
class ChatClient:
    """Immutable pairing of a :class:`Provider` and its :class:`ChatOptions`.

    The credential strategy is selected once, at construction.
    """

    provider: Provider
    options: ChatOptions
    spec: ProviderSpec = field(init=False, repr=False, compare=False)
    strategy: CredentialStrategy = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        spec = get_provider_spec(self.provider)
        object.__setattr__(self, "spec", spec)
        object.__setattr__(self, "strategy", select_strategy(self.provider, self.options, spec))

    # ----- pure queries -----
    def supports_list_models(self) -> bool:
        return self.spec.supports_list_models

    def get_provider_capabilities(self) -> ProviderCapabilities:
        return self.spec.capabilities()

    # ----- shared setup -----
    def _target(self) -> ServiceTarget:
        return self.strategy.resolve(self.options.model)

    def _ctx(self, target: ServiceTarget) -> LogContext:
        return LogContext(
            provider=str(self.provider),
            model=self.options.model,
            wire_family=target.wire_family.value,
            endpoint=target.endpoint,
        )

    def _transport(self) -> Transport:
        transport = get_transport(self.spec.wire_family, provider=str(self.provider))
        transport.check_available(str(self.provider), self.options.model)
        return transport

    # ----- model discovery -----
    def get_available_models(self) -> List[str]:
        """Return model names, raising :class:`ProviderError` on failure.

        OpenAI-compatible providers are listed over HTTP (filtered); other
        families use their transport's native list.
        """
        target = self._target()
        if target.wire_family is WireFamily.OPENAI_COMPATIBLE:
            return list_openai_compatible_models(target.api_key, target.endpoint, provider=str(self.provider))
        try:
            return self._transport().list_model_names(target)
        except ProviderError:
            raise
        except Exception as exc:
            raise wrap_exception(exc, provider=str(self.provider)) from exc

    def get_available_models_safe(self) -> ModelListResult:
        """Return a :class:`ModelListResult`; never raises."""
        try:
            models = self.get_available_models()
        except ProviderError as exc:
            return ModelListResult.failure(f"{_FETCH_FAILED}: {exc.message}")
        except Exception as exc:
            return ModelListResult.failure(f"{_FETCH_FAILED}: {exc}")
        return ModelListResult.ok(models)

    # ----- single-shot chat -----
    def chat(self, messages: Iterable[ChatMessage]) -> ChatResponse:
        """Send ``messages`` and wait for the full response.

        Raises:
            ProviderError: for any setup, transport or protocol failure.
        """
        target = self._target()
        ctx = self._ctx(target)
        request = build_request(messages, self.options)
        sampling = build_chat_options(self.options)
        normalized_log_event(
            _logger,
            "chat.start",
            ctx,
            phase="start",
            attempt=1,
            emitted=None,
            tokens=None,
            message_count=len(request.messages),
            has_system=request.system is not None,
            sampling=sampling.to_dict() if sampling else None,
        )
        t0 = time.perf_counter()
        try:
            response = self._transport().exec_chat(target, request, sampling)
        except Exception as exc:
            err = wrap_exception(exc, provider=str(self.provider), model=self.options.model)
            normalized_log_event(
                _logger,
                "chat.error",
                ctx,
                phase="finalize",
                attempt=1,
                emitted=False,
                tokens=None,
                error_code=err.code.value,
                level=logging.ERROR,
                error=err.message,
            )
            if err is exc:
                raise
            raise err from exc
        normalized_log_event(
            _logger,
            "chat.end",
            ctx,
            phase="finalize",
            attempt=1,
            emitted=True,
            tokens=response.usage,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
            resolved_model=response.model,
        )
        return response

    # ----- streaming -----
    def _prepare_stream(self, messages: Iterable[ChatMessage]) -> StreamDriver:
        """Run stream setup; failures here happen before ``StreamStart``."""
        try:
            target = self._target()
            transport = self._transport()
            request = build_request(messages, self.options)
            stream_options = build_stream_options(self.options)
        except Exception as exc:
            err = wrap_exception(exc, provider=str(self.provider), model=self.options.model)
            normalized_log_event(
                _logger,
                "stream.setup.error",
                LogContext(provider=str(self.provider), model=self.options.model),
                phase="setup",
                attempt=None,
                emitted=False,
                tokens=None,
                error_code=err.code.value,
                level=logging.ERROR,
                error=err.message,
            )
            if err is exc:
                raise
            raise err from exc
        return StreamDriver(
            ctx=self._ctx(target),
            opener=_opener(transport, target, request, stream_options),
            logger=_logger,
        )

    def stream_events(self, messages: Iterable[ChatMessage]) -> Iterator[ChatStreamEvent]:
        """Return an iterator of lifecycle events.

        Setup failures raise :class:`ProviderError` from this call; everything
        after that is reported in-band. Closing the iterator closes the
        native stream.
        """
        return self._prepare_stream(messages).run()

    def chat_stream(self, messages: Iterable[ChatMessage], sink: StreamSink) -> None:
        """Push lifecycle events for one streamed completion into ``sink``."""
        try:
            driver = self._prepare_stream(messages)
        except ProviderError as err:
            sink.add_error(err)
            raise
        for event in driver.run():
            sink.add(event)


def _opener(transport: Transport, target: ServiceTarget, request: NormalizedChatRequest, options: SamplingOptions):
    def _open():
        return transport.exec_chat_stream(target, request, options)

    return _open


__all__ = ["ChatClient"]
