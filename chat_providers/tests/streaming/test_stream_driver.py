"""Stream driver: native events to lifecycle events."""

from types import SimpleNamespace

import httpx

from chat_providers.base.errors import ErrorCode, ProviderError
from chat_providers.base.models import TokenUsage
from chat_providers.base.streaming import (
    NativeChunk,
    NativeEnd,
    NativeReasoningChunk,
    NativeStart,
    StreamContent,
    StreamDone,
    StreamError,
    StreamStart,
    validate_event_sequence,
)


def _script(*items):
    """Generator yielding items, raising any exception instance found."""
    for item in items:
        if isinstance(item, Exception):
            raise item
        yield item


def test_three_chunks_then_done_with_usage(make_driver):
    usage = TokenUsage(prompt_tokens=5, completion_tokens=3, total_tokens=8)
    events = list(
        make_driver(
            [NativeStart(), NativeChunk("A"), NativeChunk("B"), NativeChunk("C"), NativeEnd(usage)]
        ).run()
    )
    assert events == [  # nosec B101
        StreamStart(),
        StreamContent("A"),
        StreamContent("B"),
        StreamContent("C"),
        StreamDone(total_content="ABC", usage=usage),
    ]
    assert validate_event_sequence(events) == []  # nosec B101


def test_reasoning_and_native_start_are_dropped(make_driver):
    events = list(
        make_driver([NativeStart(), NativeReasoningChunk("thinking..."), NativeChunk("ok"), NativeEnd()]).run()
    )
    assert events == [StreamStart(), StreamContent("ok"), StreamDone(total_content="ok", usage=None)]  # nosec B101


def test_empty_stream_is_start_then_done(make_driver):
    events = list(make_driver([NativeStart(), NativeEnd()]).run())
    assert events == [StreamStart(), StreamDone(total_content="")]  # nosec B101


def test_missing_end_signal_finalizes_with_done(make_driver):
    events = list(make_driver([NativeChunk("x"), NativeChunk("y")]).run())
    assert isinstance(events[-1], StreamDone)  # nosec B101
    assert events[-1].total_content == "xy"  # nosec B101
    assert events[-1].usage is None  # nosec B101


def test_events_after_end_are_ignored(make_driver):
    events = list(make_driver([NativeChunk("a"), NativeEnd(), NativeChunk("late")]).run())
    assert [type(e) for e in events] == [StreamStart, StreamContent, StreamDone]  # nosec B101


def test_mid_stream_failure_becomes_in_band_error(make_driver):
    events = list(make_driver(_script(NativeChunk("A"), NativeChunk("B"), httpx.ReadError("socket closed"))).run())
    assert events[:3] == [StreamStart(), StreamContent("A"), StreamContent("B")]  # nosec B101
    assert isinstance(events[-1], StreamError)  # nosec B101
    assert "socket closed" in events[-1].message  # nosec B101
    assert events[-1].error_code == ErrorCode.TRANSPORT.value  # nosec B101
    assert validate_event_sequence(events) == []  # nosec B101


def test_open_failure_after_start_is_in_band(make_driver):
    err = ProviderError(code=ErrorCode.AUTH, message="bad key", provider="openai")
    events = list(make_driver(open_error=err).run())
    assert len(events) == 2  # nosec B101
    assert events[0] == StreamStart()  # nosec B101
    assert isinstance(events[1], StreamError)  # nosec B101
    assert events[1].error_code == "auth"  # nosec B101


def test_exception_without_message_uses_class_name(make_driver):
    events = list(make_driver(_script(RuntimeError())).run())
    assert events[-1].message == "RuntimeError"  # nosec B101


def test_closing_early_closes_native_stream(make_driver):
    closed = SimpleNamespace(value=False)

    class _Native:
        def __iter__(self):
            yield NativeChunk("one")
            yield NativeChunk("two")

        def close(self):
            closed.value = True

    gen = make_driver(_Native()).run()
    assert next(gen) == StreamStart()  # nosec B101
    assert next(gen) == StreamContent("one")  # nosec B101
    gen.close()
    assert closed.value  # nosec B101


def test_stream_is_closed_after_normal_completion(make_driver):
    closed = SimpleNamespace(value=False)

    class _Native:
        def __iter__(self):
            return iter([NativeChunk("z"), NativeEnd()])

        def close(self):
            closed.value = True

    list(make_driver(_Native()).run())
    assert closed.value  # nosec B101


def test_metrics_count_content_events(make_driver):
    driver = make_driver([NativeChunk("a"), NativeChunk("b"), NativeEnd()])
    list(driver.run())
    assert driver.metrics.emitted == 2  # nosec B101
    assert driver.metrics.time_to_first_token_ms is not None  # nosec B101
    assert driver.metrics.total_duration_ms is not None  # nosec B101


def test_stream_logs_start_and_end(make_driver, log_events):
    list(make_driver([NativeChunk("a"), NativeEnd(TokenUsage(1, 2, 3))]).run())
    events = {e["event"]: e for e in log_events.events()}
    assert "stream.start" in events and "stream.end" in events  # nosec B101
    assert events["stream.end"]["tokens"] == {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3}  # nosec B101
    assert events["stream.end"]["emitted"] is True  # nosec B101
