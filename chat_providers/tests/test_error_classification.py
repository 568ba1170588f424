"""Exception classification into normalized error codes."""

import json
import types

import httpx
import pytest

from chat_providers.base.errors import ErrorCode, ProviderError, classify_exception, classify_status, wrap_exception


@pytest.mark.parametrize(
    "status,code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (503, ErrorCode.UNAVAILABLE),
        (504, ErrorCode.TIMEOUT),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.PROTOCOL),
    ],
)
def test_classify_status(status, code):
    assert classify_status(status) is code  # nosec B101


def test_status_attribute_on_sdk_like_errors():
    exc = Exception("boom")
    exc.status_code = 429
    assert classify_exception(exc) is ErrorCode.RATE_LIMIT  # nosec B101
    exc2 = Exception("x")
    exc2.response = types.SimpleNamespace(status_code=401)
    assert classify_exception(exc2) is ErrorCode.AUTH  # nosec B101


def test_transport_and_timeout_errors():
    assert classify_exception(httpx.ConnectTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.TRANSPORT  # nosec B101


def test_json_and_message_heuristics():
    assert classify_exception(json.JSONDecodeError("bad", "{", 0)) is ErrorCode.PROTOCOL  # nosec B101
    assert classify_exception(RuntimeError("Invalid API key provided")) is ErrorCode.AUTH  # nosec B101
    assert classify_exception(RuntimeError("model does not exist")) is ErrorCode.NOT_FOUND  # nosec B101
    assert classify_exception(RuntimeError("???")) is ErrorCode.UNKNOWN  # nosec B101


def test_provider_error_passthrough():
    err = ProviderError(code=ErrorCode.UNSUPPORTED, message="x", provider="gemini")
    assert classify_exception(err) is ErrorCode.UNSUPPORTED  # nosec B101
    assert wrap_exception(err, provider="other") is err  # nosec B101


def test_wrap_exception_keeps_raw_and_context():
    raw = ValueError("malformed payload")
    err = wrap_exception(raw, provider="deepseek", model="deepseek-chat")
    assert err.code is ErrorCode.VALIDATION  # nosec B101
    assert err.raw is raw  # nosec B101
    assert str(err) == "deepseek:deepseek-chat validation: malformed payload"  # nosec B101
