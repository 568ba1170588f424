"""Consumer-facing stream lifecycle events.

A stream emits exactly one :class:`StreamStart`, zero or more
:class:`StreamContent` events and exactly one terminal event,
:class:`StreamDone` or :class:`StreamError`. When ``StreamDone`` occurs, its
``total_content`` equals the concatenation of all preceding content chunks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

from ..models import TokenUsage


@dataclass(frozen=True)
class StreamStart:
    kind = "start"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind}


@dataclass(frozen=True)
class StreamContent:
    """One incremental chunk (never the running total)."""

    content: str
    kind = "content"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "content": self.content}


@dataclass(frozen=True)
class StreamDone:
    """Successful terminal event with the accumulated text and captured usage."""

    total_content: str
    usage: Optional[TokenUsage] = None
    kind = "done"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "total_content": self.total_content,
            "usage": self.usage.to_dict() if self.usage else None,
        }


@dataclass(frozen=True)
class StreamError:
    """Failed terminal event.

    ``error_code`` carries the normalized :class:`ErrorCode` value when the
    failure was classified.
    """

    message: str
    error_code: Optional[str] = None
    kind = "error"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "message": self.message, "error_code": self.error_code}


ChatStreamEvent = Union[StreamStart, StreamContent, StreamDone, StreamError]


def is_terminal(event: ChatStreamEvent) -> bool:
    return isinstance(event, (StreamDone, StreamError))


def concat_content(events: Iterable[ChatStreamEvent]) -> str:
    """Concatenate the payloads of all content events, in order."""
    return "".join(e.content for e in events if isinstance(e, StreamContent))


def validate_event_sequence(events: Iterable[ChatStreamEvent]) -> List[str]:
    """Return a list of grammar violations (empty when the sequence is well formed)."""
    seq = list(events)
    problems: List[str] = []
    if not seq or not isinstance(seq[0], StreamStart):
        problems.append("sequence must open with StreamStart")
    if sum(isinstance(e, StreamStart) for e in seq) > 1:
        problems.append("more than one StreamStart")
    terminals = [i for i, e in enumerate(seq) if is_terminal(e)]
    if len(terminals) != 1:
        problems.append(f"expected exactly one terminal event, found {len(terminals)}")
    elif terminals[0] != len(seq) - 1:
        problems.append("terminal event is not last")
    done = next((e for e in seq if isinstance(e, StreamDone)), None)
    if done is not None and done.total_content != concat_content(seq):
        problems.append("StreamDone.total_content differs from concatenated content")
    return problems


__all__ = [
    "ChatStreamEvent",
    "StreamStart",
    "StreamContent",
    "StreamDone",
    "StreamError",
    "is_terminal",
    "concat_content",
    "validate_event_sequence",
]
