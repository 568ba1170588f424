"""Request builder: caller messages + options -> normalized request.

Pure transformations, no I/O and no validation. An empty message list passes
through; the transport or upstream API rejects it.
"""
from __future__ import annotations

from typing import Iterable, Optional

from .models import ChatMessage, ChatOptions, NormalizedChatRequest, SamplingOptions


def build_request(messages: Iterable[ChatMessage], options: ChatOptions) -> NormalizedChatRequest:
    """Map messages 1:1 (order and role preserved) and fill the system slot.

    ``options.system_prompt`` goes into ``system`` as-is; SYSTEM-role entries in
    ``messages`` are left in place. Transports decide precedence.
    """
    return NormalizedChatRequest(
        messages=tuple(ChatMessage(m.role, m.content) for m in messages),
        system=options.system_prompt,
    )


def _has_sampling(options: ChatOptions) -> bool:
    return any(
        v is not None
        for v in (options.temperature, options.top_p, options.max_tokens, options.stop_sequences)
    )


def build_chat_options(options: ChatOptions) -> Optional[SamplingOptions]:
    """Return sampling options holding only the set fields, or ``None`` if none are set."""
    if not _has_sampling(options):
        return None
    return SamplingOptions(
        temperature=options.temperature,
        top_p=options.top_p,
        max_tokens=options.max_tokens,
        stop_sequences=options.stop_sequences,
    )


def build_stream_options(options: ChatOptions) -> SamplingOptions:
    """Return streaming options (always present) with content and usage capture on."""
    return SamplingOptions(
        temperature=options.temperature,
        top_p=options.top_p,
        max_tokens=options.max_tokens,
        stop_sequences=options.stop_sequences,
        capture_content=True,
        capture_usage=True,
    )


__all__ = ["build_request", "build_chat_options", "build_stream_options"]
