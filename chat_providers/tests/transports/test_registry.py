"""Transport registry lookups and usage extraction."""

import pytest

from chat_providers.base.errors import ErrorCode, ProviderError
from chat_providers.base.models import TokenUsage
from chat_providers.base.provider_registry import WireFamily
from chat_providers.transports import _TRANSPORTS, get_transport
from chat_providers.transports.anthropic import AnthropicTransport
from chat_providers.transports.ollama import OllamaTransport
from chat_providers.transports.openai_style import OpenAIStyleTransport
from chat_providers.transports.usage import extract_anthropic_usage, extract_openai_usage, usage_from_counts


@pytest.mark.parametrize("family", [WireFamily.OPENAI_COMPATIBLE, WireFamily.GROQ, WireFamily.XAI, WireFamily.COHERE])
def test_openai_style_families(family):
    transport = get_transport(family)
    assert isinstance(transport, OpenAIStyleTransport)  # nosec B101
    assert transport.family is family  # nosec B101


def test_dedicated_transports():
    assert isinstance(get_transport(WireFamily.ANTHROPIC), AnthropicTransport)  # nosec B101
    assert isinstance(get_transport(WireFamily.OLLAMA), OllamaTransport)  # nosec B101


def test_unregistered_family_is_unsupported(monkeypatch):
    monkeypatch.delitem(_TRANSPORTS, WireFamily.COHERE)
    with pytest.raises(ProviderError) as ei:
        get_transport(WireFamily.COHERE, provider="cohere")
    assert ei.value.code is ErrorCode.UNSUPPORTED  # nosec B101


def test_usage_is_never_derived():
    assert extract_anthropic_usage({"input_tokens": 3, "output_tokens": 4}) == TokenUsage(3, 4, None)  # nosec B101
    assert extract_openai_usage({"prompt_tokens": 1}) == TokenUsage(1, None, None)  # nosec B101
    assert usage_from_counts(None, None) is None  # nosec B101
    assert usage_from_counts("7", -1) == TokenUsage(7, None, None)  # nosec B101
