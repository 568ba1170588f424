"""Ollama transport over a mocked HTTP daemon."""

import json

import httpx
import pytest

from chat_providers.base.credentials import ServiceTarget
from chat_providers.base.errors import ErrorCode, ProviderError
from chat_providers.base.models import ChatMessage, NormalizedChatRequest, SamplingOptions, TokenUsage
from chat_providers.base.provider_registry import WireFamily
from chat_providers.base.streaming import NativeChunk, NativeEnd, NativeReasoningChunk, NativeStart
from chat_providers.transports.ollama import OllamaTransport, build_ollama_payload

TARGET = ServiceTarget(endpoint="http://localhost:11434/", api_key=None, wire_family=WireFamily.OLLAMA, model="llama3.2")
REQUEST = NormalizedChatRequest(messages=(ChatMessage.user("hi"),), system="terse")


def test_payload_options_mapping():
    payload = build_ollama_payload(TARGET, REQUEST, SamplingOptions(temperature=0.1, max_tokens=20), stream=True)
    assert payload["messages"][0] == {"role": "system", "content": "terse"}  # nosec B101
    assert payload["options"] == {"temperature": 0.1, "num_predict": 20}  # nosec B101
    assert payload["stream"] is True  # nosec B101
    assert "options" not in build_ollama_payload(TARGET, REQUEST, None, stream=False)  # nosec B101


def test_exec_chat(mock_http):
    seen = mock_http(
        lambda req: httpx.Response(
            200,
            json={"model": "llama3.2:latest", "message": {"role": "assistant", "content": "hello"}, "done": True, "prompt_eval_count": 8, "eval_count": 3},
        )
    )
    resp = OllamaTransport().exec_chat(TARGET, REQUEST, None)
    assert resp.content == "hello" and resp.model == "llama3.2:latest"  # nosec B101
    assert resp.usage == TokenUsage(8, 3, None)  # nosec B101
    assert str(seen[0].url) == "http://localhost:11434/api/chat"  # nosec B101
    assert json.loads(seen[0].content)["stream"] is False  # nosec B101


def test_exec_chat_http_error(mock_http):
    mock_http(lambda req: httpx.Response(404, text="model not found"))
    with pytest.raises(ProviderError) as ei:
        OllamaTransport().exec_chat(TARGET, REQUEST, None)
    assert ei.value.message == "HTTP error 404: model not found"  # nosec B101
    assert ei.value.code is ErrorCode.NOT_FOUND  # nosec B101


def test_stream_ndjson(mock_http):
    lines = [
        {"message": {"thinking": "hmm"}, "done": False},
        {"message": {"content": "Hi"}, "done": False},
        {"message": {"content": " there"}, "done": False},
        {"message": {"content": ""}, "done": True, "prompt_eval_count": 4, "eval_count": 2},
    ]
    body = "\n".join(json.dumps(x) for x in lines) + "\n"
    mock_http(lambda req: httpx.Response(200, content=body.encode()))
    sampling = SamplingOptions(capture_content=True, capture_usage=True)
    events = list(OllamaTransport().exec_chat_stream(TARGET, REQUEST, sampling))
    assert events == [  # nosec B101
        NativeStart(),
        NativeReasoningChunk("hmm"),
        NativeChunk("Hi"),
        NativeChunk(" there"),
        NativeEnd(TokenUsage(4, 2, None)),
    ]


def test_stream_error_line(mock_http):
    mock_http(lambda req: httpx.Response(200, content=b'{"error": "model requires more memory"}\n'))
    gen = OllamaTransport().exec_chat_stream(TARGET, REQUEST, SamplingOptions())
    assert next(gen) == NativeStart()  # nosec B101
    with pytest.raises(ProviderError) as ei:
        next(gen)
    assert "more memory" in ei.value.message  # nosec B101


def test_list_model_names(mock_http):
    mock_http(lambda req: httpx.Response(200, json={"models": [{"name": "a"}, {"model": "no-name"}, {"name": "b"}]}))
    assert OllamaTransport().list_model_names(TARGET) == ["a", "b"]  # nosec B101
