"""Anthropic transport: parameter building and raw stream translation."""

import pytest

from chat_providers.base.credentials import ServiceTarget
from chat_providers.base.models import ChatMessage, NormalizedChatRequest, SamplingOptions, TokenUsage
from chat_providers.base.provider_registry import WireFamily
from chat_providers.base.streaming import NativeChunk, NativeEnd, NativeReasoningChunk, NativeStart
from chat_providers.transports.anthropic import AnthropicTransport, build_anthropic_params

from ..fakes import FakeSdkStream, ns

TARGET = ServiceTarget(endpoint="https://api.anthropic.com/", api_key="sk-ant", wire_family=WireFamily.ANTHROPIC, model="claude-x")


def test_system_slot_and_system_messages_are_merged():
    request = NormalizedChatRequest(
        messages=(ChatMessage.system("inline rule"), ChatMessage.user("hi"), ChatMessage.assistant("hey")),
        system="primary",
    )
    params = build_anthropic_params(TARGET, request, None)
    assert params["system"] == "primary\n\ninline rule"  # nosec B101
    assert params["messages"] == [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hey"}]  # nosec B101
    assert params["max_tokens"] == 4096  # nosec B101


def test_sampling_mapping():
    request = NormalizedChatRequest(messages=(ChatMessage.user("hi"),))
    params = build_anthropic_params(TARGET, request, SamplingOptions(temperature=0.3, max_tokens=50, stop_sequences=("END",)))
    assert params["max_tokens"] == 50 and params["temperature"] == 0.3  # nosec B101
    assert params["stop_sequences"] == ["END"]  # nosec B101
    assert "system" not in params  # nosec B101


class _FakeAnthropic:
    instances = []
    next_result = None

    def __init__(self, *, api_key, base_url):
        self.api_key = api_key
        self.base_url = base_url
        self.calls = []
        self.closed = False
        self.messages = ns(create=self._create)
        _FakeAnthropic.instances.append(self)

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        return _FakeAnthropic.next_result

    def close(self):
        self.closed = True


@pytest.fixture()
def fake_anthropic(monkeypatch):
    _FakeAnthropic.instances = []
    monkeypatch.setattr("chat_providers.transports.anthropic.Anthropic", _FakeAnthropic)
    return _FakeAnthropic


def test_exec_chat_reports_no_total(fake_anthropic):
    fake_anthropic.next_result = ns(
        model="claude-x-2025",
        content=[ns(type="thinking", thinking="..."), ns(type="text", text="Hi "), ns(type="text", text="there")],
        usage=ns(input_tokens=7, output_tokens=2),
    )
    resp = AnthropicTransport().exec_chat(TARGET, NormalizedChatRequest(messages=(ChatMessage.user("hi"),)), None)
    assert resp.content == "Hi there"  # nosec B101
    assert resp.usage == TokenUsage(prompt_tokens=7, completion_tokens=2, total_tokens=None)  # nosec B101
    assert fake_anthropic.instances[0].closed  # nosec B101


def test_stream_events(fake_anthropic):
    stream = FakeSdkStream(
        [
            ns(type="message_start", message=ns(usage=ns(input_tokens=11))),
            ns(type="content_block_start"),
            ns(type="content_block_delta", delta=ns(type="thinking_delta", thinking="plan")),
            ns(type="content_block_delta", delta=ns(type="text_delta", text="A")),
            ns(type="content_block_delta", delta=ns(type="text_delta", text="B")),
            ns(type="message_delta", usage=ns(output_tokens=2)),
            ns(type="message_stop"),
        ]
    )
    fake_anthropic.next_result = stream
    sampling = SamplingOptions(capture_content=True, capture_usage=True)
    events = list(AnthropicTransport().exec_chat_stream(TARGET, NormalizedChatRequest(messages=(ChatMessage.user("hi"),)), sampling))
    assert events == [  # nosec B101
        NativeStart(),
        NativeReasoningChunk("plan"),
        NativeChunk("A"),
        NativeChunk("B"),
        NativeEnd(TokenUsage(11, 2, None)),
    ]
    assert stream.closed  # nosec B101
    assert fake_anthropic.instances[0].calls[0]["stream"] is True  # nosec B101


def test_listing_is_static():
    assert "claude-3-5-haiku-latest" in AnthropicTransport().list_model_names(TARGET)  # nosec B101
