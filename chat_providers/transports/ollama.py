"""Ollama transport (local daemon, plain HTTP via ``httpx``).

Endpoints:
- ``POST {host}api/chat`` for chat; streaming responses are NDJSON lines.
- ``GET {host}api/tags`` for installed models.

No credential is required. Chat calls run without a client timeout; only
the tag listing uses the configured HTTP timeout.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Optional

import httpx

from ..base.credentials import ServiceTarget
from ..base.errors import ErrorCode, ProviderError
from ..base.http import open_httpx_client
from ..base.models import ChatResponse, NormalizedChatRequest, SamplingOptions
from ..base.provider_registry import WireFamily
from ..base.streaming import NativeChunk, NativeEnd, NativeReasoningChunk, NativeStart, NativeStreamEvent
from ..base.utils.urls import join_url
from ..config.defaults import NO_RESPONSE_PLACEHOLDER
from .base import Transport
from .openai_style import build_openai_messages
from .usage import extract_ollama_usage

_NO_TIMEOUT = httpx.Timeout(None)


def build_ollama_payload(
    target: ServiceTarget,
    request: NormalizedChatRequest,
    sampling: Optional[SamplingOptions],
    *,
    stream: bool,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "model": target.model,
        "messages": build_openai_messages(request),
        "stream": stream,
    }
    if sampling is None:
        return payload
    options: Dict[str, Any] = {}
    if sampling.temperature is not None:
        options["temperature"] = sampling.temperature
    if sampling.top_p is not None:
        options["top_p"] = sampling.top_p
    if sampling.max_tokens is not None:
        options["num_predict"] = sampling.max_tokens
    if sampling.stop_sequences is not None:
        options["stop"] = list(sampling.stop_sequences)
    if options:
        payload["options"] = options
    return payload


def _raise_for_status(resp: httpx.Response, target: ServiceTarget, body: str) -> None:
    if resp.is_success:
        return
    raise ProviderError(
        code=ErrorCode.NOT_FOUND if resp.status_code == 404 else ErrorCode.PROTOCOL,
        message=f"HTTP error {resp.status_code}: {body}",
        provider="ollama",
        model=target.model,
    )


class OllamaTransport(Transport):
    family = WireFamily.OLLAMA
    sdk_name = "httpx"

    def exec_chat(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: Optional[SamplingOptions],
    ) -> ChatResponse:
        url = join_url(target.endpoint, "api/chat")
        with open_httpx_client(timeout=_NO_TIMEOUT) as client:
            resp = client.post(url, json=build_ollama_payload(target, request, sampling, stream=False))
            _raise_for_status(resp, target, resp.text)
            data = resp.json()
        message = data.get("message") or {}
        return ChatResponse(
            content=message.get("content") or NO_RESPONSE_PLACEHOLDER,
            model=data.get("model") or target.model,
            usage=extract_ollama_usage(data),
        )

    def exec_chat_stream(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: SamplingOptions,
    ) -> Iterator[NativeStreamEvent]:
        url = join_url(target.endpoint, "api/chat")
        payload = build_ollama_payload(target, request, sampling, stream=True)
        with open_httpx_client(timeout=_NO_TIMEOUT) as client:
            with client.stream("POST", url, json=payload) as resp:
                if not resp.is_success:
                    _raise_for_status(resp, target, resp.read().decode("utf-8", errors="replace"))
                yield NativeStart()
                for line in resp.iter_lines():
                    if not line.strip():
                        continue
                    data = json.loads(line)
                    if data.get("error"):
                        raise ProviderError(
                            code=ErrorCode.PROTOCOL,
                            message=str(data["error"]),
                            provider="ollama",
                            model=target.model,
                        )
                    message = data.get("message") or {}
                    if message.get("thinking"):
                        yield NativeReasoningChunk(message["thinking"])
                    if message.get("content"):
                        yield NativeChunk(message["content"])
                    if data.get("done"):
                        usage = extract_ollama_usage(data)
                        yield NativeEnd(usage=usage if sampling.capture_usage else None)
                        return

    def list_model_names(self, target: ServiceTarget) -> List[str]:
        url = join_url(target.endpoint, "api/tags")
        with open_httpx_client() as client:
            resp = client.get(url)
            _raise_for_status(resp, target, resp.text)
            data = resp.json()
        return [m["name"] for m in data.get("models", []) if isinstance(m, dict) and m.get("name")]


__all__ = ["OllamaTransport", "build_ollama_payload"]
