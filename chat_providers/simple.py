"""Convenience helpers for one-off provider interactions.

These wrap :class:`ChatClient` for callers that do not want to build options
by hand. ``quick_chat`` / ``quick_chat_stream`` always use the provider's
default endpoint and a temperature of 0.7.
"""
from __future__ import annotations

import time
from typing import Optional

from .base.models import ChatMessage, ChatOptions, Provider, ProviderCapabilities, TokenUsage
from .base.provider_registry import get_provider_spec
from .base.streaming import StreamContent, StreamDone, StreamSink, StreamStart
from .client import ChatClient
from .config.defaults import QUICK_CHAT_TEMPERATURE, SAMPLE_STREAM_DEFAULT_DELAY_SECONDS


def create_chat_client(provider: Provider, options: ChatOptions) -> ChatClient:
    return ChatClient(provider, options)


def _quick_options(model: str, api_key: Optional[str]) -> ChatOptions:
    return ChatOptions(model=model, api_key=api_key, temperature=QUICK_CHAT_TEMPERATURE)


def quick_chat(provider: Provider, model: str, api_key: Optional[str], message: str) -> str:
    """Send a single user message and return the response text.

    Raises:
        ProviderError: when the call fails.
    """
    client = ChatClient(provider, _quick_options(model, api_key))
    return client.chat([ChatMessage.user(message)]).content


def quick_chat_stream(
    provider: Provider,
    model: str,
    api_key: Optional[str],
    message: str,
    sink: StreamSink,
) -> None:
    """Stream a single user message into ``sink`` (same channels as ``ChatClient.chat_stream``)."""
    client = ChatClient(provider, _quick_options(model, api_key))
    client.chat_stream([ChatMessage.user(message)], sink)


def check_provider_supports_list_models(provider: Provider) -> bool:
    return get_provider_spec(provider).supports_list_models


def get_provider_capabilities_info(provider: Provider) -> ProviderCapabilities:
    return get_provider_spec(provider).capabilities()


SAMPLE_CHUNK_COUNT = 5
SAMPLE_USAGE = TokenUsage(prompt_tokens=10, completion_tokens=20, total_tokens=30)


def sample_stream(sink: StreamSink, delay: float = SAMPLE_STREAM_DEFAULT_DELAY_SECONDS) -> None:
    """Emit a scripted stream without contacting any provider.

    Start, then ``"Test chunk 1"`` .. ``"Test chunk 5"`` spaced by ``delay``
    seconds, then Done with the concatenated text and usage 10/20/30. Useful
    for exercising a consumer end to end.
    """
    sink.add(StreamStart())
    chunks = []
    for i in range(1, SAMPLE_CHUNK_COUNT + 1):
        if delay > 0:
            time.sleep(delay)
        chunk = f"Test chunk {i}"
        chunks.append(chunk)
        sink.add(StreamContent(chunk))
    sink.add(StreamDone(total_content="".join(chunks), usage=SAMPLE_USAGE))


__all__ = [
    "create_chat_client",
    "quick_chat",
    "quick_chat_stream",
    "check_provider_supports_list_models",
    "get_provider_capabilities_info",
    "sample_stream",
]
