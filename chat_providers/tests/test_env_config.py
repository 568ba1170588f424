"""Layered configuration and credential slot helpers."""

import json

from chat_providers.config import get_model, get_provider_config, reset_config_cache
from chat_providers.config.env import (
    get_env_var_candidates,
    get_env_var_name,
    is_placeholder,
    resolve_provider_key,
)


def test_slot_names():
    assert get_env_var_name("openai") == "OPENAI_API_KEY"  # nosec B101
    assert get_env_var_name("ollama") is None  # nosec B101
    assert list(get_env_var_candidates("gemini")) == ["GEMINI_API_KEY", "GOOGLE_API_KEY"]  # nosec B101


def test_placeholder_detection():
    assert is_placeholder("changeme")  # nosec B101
    assert is_placeholder("test_abc")  # nosec B101
    assert not is_placeholder("sk-live-123")  # nosec B101
    assert not is_placeholder(None)  # nosec B101


def test_resolve_key_uses_alias(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "g-live")
    assert resolve_provider_key("gemini") == ("g-live", "GOOGLE_API_KEY")  # nosec B101
    assert resolve_provider_key("xai") == (None, None)  # nosec B101


def test_defaults_then_env_then_overrides(monkeypatch):
    assert get_model("deepseek") == "deepseek-chat"  # nosec B101
    monkeypatch.setenv("DEEPSEEK_MODEL", "deepseek-reasoner")
    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-ds")
    cfg = get_provider_config("deepseek")
    assert cfg["model"] == "deepseek-reasoner" and cfg["api_key"] == "sk-ds"  # nosec B101
    cfg = get_provider_config("deepseek", {"model": "pinned", "base_url": None})
    assert cfg["model"] == "pinned"  # nosec B101
    assert "base_url" not in cfg  # nosec B101


def test_external_file_json_and_yaml(monkeypatch, tmp_path):
    jpath = tmp_path / "providers.json"
    jpath.write_text(json.dumps({"custom": {"base_url": "https://api.moonshot.cn/v1", "model": "moonshot-v1-8k"}}))
    monkeypatch.setenv("CHAT_PROVIDERS_CONFIG_FILE", str(jpath))
    reset_config_cache()
    assert get_provider_config("custom")["base_url"] == "https://api.moonshot.cn/v1"  # nosec B101

    ypath = tmp_path / "providers.yaml"
    ypath.write_text("ollama:\n  base_url: http://gpu-box:11434\n")
    monkeypatch.setenv("CHAT_PROVIDERS_CONFIG_FILE", str(ypath))
    reset_config_cache()
    cfg = get_provider_config("ollama")
    assert cfg["base_url"] == "http://gpu-box:11434"  # nosec B101
    assert cfg["model"] == "llama3.2"  # nosec B101
