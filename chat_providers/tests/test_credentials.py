"""Credential strategy selection and resolution."""

import os

from chat_providers.base.credentials import (
    ExplicitEndpointStrategy,
    ProviderSlotStrategy,
    read_credential_slot,
    select_strategy,
)
from chat_providers.base.models import ChatOptions, Provider
from chat_providers.base.provider_registry import WireFamily


def test_explicit_strategy_when_base_url_given():
    strategy = select_strategy(Provider.DEEPSEEK, ChatOptions(model="deepseek-chat", base_url="https://proxy.local/v1", api_key="k"))
    assert isinstance(strategy, ExplicitEndpointStrategy)  # nosec B101
    target = strategy.resolve("deepseek-chat")
    assert target.endpoint == "https://proxy.local/v1/"  # nosec B101
    assert target.api_key == "k"  # nosec B101
    assert target.explicit and target.credential_slot is None  # nosec B101
    assert target.wire_family is WireFamily.OPENAI_COMPATIBLE  # nosec B101


def test_blank_base_url_uses_slot_strategy():
    strategy = select_strategy(Provider.OPENAI, ChatOptions(model="gpt-4o", base_url="   ", api_key="k"))
    assert isinstance(strategy, ProviderSlotStrategy)  # nosec B101
    target = strategy.resolve("gpt-4o")
    assert target.endpoint == "https://api.openai.com/v1/"  # nosec B101
    assert target.credential_slot == "OPENAI_API_KEY"  # nosec B101
    assert not target.explicit  # nosec B101


def test_selection_does_not_touch_environment():
    before = dict(os.environ)
    select_strategy(Provider.ANTHROPIC, ChatOptions(model="claude", api_key="abc")).resolve("claude")
    select_strategy(Provider.OPENAI, ChatOptions(model="gpt", base_url="http://x", api_key="abc")).resolve("gpt")
    assert dict(os.environ) == before  # nosec B101


def test_slot_strategy_reads_slot_when_no_key(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk-live")
    target = select_strategy(Provider.GROQ, ChatOptions(model="llama")).resolve("llama")
    assert target.api_key == "gsk-live"  # nosec B101


def test_explicit_key_beats_slot(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk-env")
    target = select_strategy(Provider.GROQ, ChatOptions(model="llama", api_key="gsk-arg")).resolve("llama")
    assert target.api_key == "gsk-arg"  # nosec B101


def test_placeholder_slot_value_ignored(monkeypatch):
    monkeypatch.setenv("XAI_API_KEY", "your-key-placeholder")
    assert read_credential_slot("XAI_API_KEY") is None  # nosec B101
    assert read_credential_slot(None) is None  # nosec B101


def test_unsupported_custom_url_warns_but_is_used(log_events):
    strategy = select_strategy(Provider.ANTHROPIC, ChatOptions(model="claude", base_url="https://gw.local"))
    assert isinstance(strategy, ExplicitEndpointStrategy)  # nosec B101
    assert any(e["event"] == "credentials.custom_base_url_unsupported" for e in log_events.events())  # nosec B101


def test_custom_provider_falls_back_to_openai_endpoint(log_events):
    target = select_strategy(Provider.custom("moonshot"), ChatOptions(model="m")).resolve("m")
    assert target.endpoint == "https://api.openai.com/v1/"  # nosec B101
    assert any(e["event"] == "credentials.fallback_base_url" for e in log_events.events())  # nosec B101


def test_target_repr_hides_credential():
    target = select_strategy(Provider.OPENAI, ChatOptions(model="m", api_key="sk-hidden")).resolve("m")
    assert "sk-hidden" not in repr(target)  # nosec B101
    assert "sk-hidden" not in repr(select_strategy(Provider.OPENAI, ChatOptions(model="m", api_key="sk-hidden")))  # nosec B101
