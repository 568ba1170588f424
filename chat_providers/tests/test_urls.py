"""Base URL normalization."""

import pytest

from chat_providers.base.utils.urls import join_url, normalize_base_url


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("https://api.deepseek.com/v1", "https://api.deepseek.com/v1/"),
        ("https://api.deepseek.com/v1/", "https://api.deepseek.com/v1/"),
        ("  http://localhost:11434  ", "http://localhost:11434/"),
        ("", ""),
        ("   ", ""),
        (None, ""),
    ],
)
def test_normalize_base_url(raw, expected):
    assert normalize_base_url(raw) == expected  # nosec B101


def test_normalize_is_idempotent():
    once = normalize_base_url("https://example.invalid/api")
    assert normalize_base_url(once) == once  # nosec B101


def test_join_url():
    assert join_url("https://api.deepseek.com/v1", "models") == "https://api.deepseek.com/v1/models"  # nosec B101
    assert join_url("http://localhost:11434/", "/api/tags") == "http://localhost:11434/api/tags"  # nosec B101
