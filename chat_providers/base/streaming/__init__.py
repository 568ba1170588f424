"""Streaming package: events, native transport events, sinks and the driver."""

from .events import (
    ChatStreamEvent,
    StreamContent,
    StreamDone,
    StreamError,
    StreamStart,
    concat_content,
    is_terminal,
    validate_event_sequence,
)
from .native import NativeChunk, NativeEnd, NativeReasoningChunk, NativeStart, NativeStreamEvent
from .sinks import CallbackSink, CollectingSink, StreamSink
from .metrics import StreamMetrics
from .finalize import finalize_stream
from .driver import StreamDriver

__all__ = [
    "ChatStreamEvent",
    "StreamStart",
    "StreamContent",
    "StreamDone",
    "StreamError",
    "concat_content",
    "is_terminal",
    "validate_event_sequence",
    "NativeStart",
    "NativeChunk",
    "NativeReasoningChunk",
    "NativeEnd",
    "NativeStreamEvent",
    "StreamSink",
    "CollectingSink",
    "CallbackSink",
    "StreamMetrics",
    "finalize_stream",
    "StreamDriver",
]
