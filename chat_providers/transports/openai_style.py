"""OpenAI Chat Completions transport.

Serves every family that speaks the Chat Completions dialect through the
official ``openai`` SDK: OpenAI-compatible endpoints (OpenAI, DeepSeek,
custom), Groq, xAI and Cohere's compatibility API.

System handling: ``request.system`` is sent as a leading ``system`` message;
SYSTEM-role entries stay where the caller put them.

Usage capture while streaming: families that accept
``stream_options={"include_usage": True}`` get it when ``capture_usage`` is
set; Groq reports usage under ``x_groq.usage`` on the final chunk instead.
"""

from __future__ import annotations

from contextlib import suppress
from typing import Any, Dict, Iterator, List, Optional

try:
    from openai import OpenAI
except Exception:  # pragma: no cover
    OpenAI = None  # type: ignore

from ..base.credentials import ServiceTarget
from ..base.models import ChatResponse, NormalizedChatRequest, SamplingOptions
from ..base.provider_registry import WireFamily
from ..base.streaming import NativeChunk, NativeEnd, NativeReasoningChunk, NativeStart, NativeStreamEvent
from ..config.defaults import NO_RESPONSE_PLACEHOLDER
from .base import Transport
from .static_models import static_model_names
from .usage import extract_openai_usage

_INCLUDE_USAGE_FAMILIES = frozenset({WireFamily.OPENAI_COMPATIBLE, WireFamily.XAI})


def build_openai_messages(request: NormalizedChatRequest) -> List[Dict[str, str]]:
    messages: List[Dict[str, str]] = []
    if request.system:
        messages.append({"role": "system", "content": request.system})
    messages.extend(m.to_dict() for m in request.messages)
    return messages


def build_chat_params(target: ServiceTarget, request: NormalizedChatRequest, sampling: Optional[SamplingOptions]) -> Dict[str, Any]:
    """Assemble ``chat.completions.create`` kwargs; only set sampling fields are sent."""
    params: Dict[str, Any] = {"model": target.model, "messages": build_openai_messages(request)}
    if sampling is None:
        return params
    if sampling.temperature is not None:
        params["temperature"] = sampling.temperature
    if sampling.top_p is not None:
        params["top_p"] = sampling.top_p
    if sampling.max_tokens is not None:
        params["max_tokens"] = sampling.max_tokens
    if sampling.stop_sequences is not None:
        params["stop"] = list(sampling.stop_sequences)
    return params


def build_stream_params(
    target: ServiceTarget,
    request: NormalizedChatRequest,
    sampling: SamplingOptions,
) -> Dict[str, Any]:
    params = build_chat_params(target, request, sampling)
    params["stream"] = True
    if sampling.capture_usage and target.wire_family in _INCLUDE_USAGE_FAMILIES:
        params["stream_options"] = {"include_usage": True}
    return params


def extract_openai_text(resp: Any) -> str:
    try:
        return resp.choices[0].message.content or ""
    except (AttributeError, IndexError, TypeError):
        return ""


def _chunk_usage(chunk: Any) -> Any:
    usage = getattr(chunk, "usage", None)
    if usage is not None:
        return usage
    x_groq = getattr(chunk, "x_groq", None)
    if isinstance(x_groq, dict):
        return x_groq.get("usage")
    return getattr(x_groq, "usage", None)


def _chunk_delta(chunk: Any) -> Any:
    choices = getattr(chunk, "choices", None) or []
    if not choices:
        return None
    return getattr(choices[0], "delta", None)


class OpenAIStyleTransport(Transport):
    """Chat Completions over the ``openai`` SDK for one wire family."""

    sdk_name = "openai"

    def __init__(self, family: WireFamily) -> None:
        self.family = family

    def _sdk(self) -> Any:
        return OpenAI

    def _make_client(self, target: ServiceTarget) -> Any:
        # Empty string keeps the SDK from falling back to OPENAI_API_KEY for other slots.
        return OpenAI(api_key=target.api_key or "", base_url=target.endpoint)

    def exec_chat(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: Optional[SamplingOptions],
    ) -> ChatResponse:
        client = self._make_client(target)
        try:
            resp = client.chat.completions.create(**build_chat_params(target, request, sampling))
        finally:
            with suppress(Exception):
                client.close()
        text = extract_openai_text(resp)
        return ChatResponse(
            content=text or NO_RESPONSE_PLACEHOLDER,
            model=getattr(resp, "model", None) or target.model,
            usage=extract_openai_usage(getattr(resp, "usage", None)),
        )

    def exec_chat_stream(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: SamplingOptions,
    ) -> Iterator[NativeStreamEvent]:
        client = self._make_client(target)
        try:
            stream = client.chat.completions.create(**build_stream_params(target, request, sampling))
            try:
                yield NativeStart()
                usage = None
                for chunk in stream:
                    raw_usage = _chunk_usage(chunk)
                    if raw_usage is not None:
                        usage = extract_openai_usage(raw_usage)
                    delta = _chunk_delta(chunk)
                    if delta is None:
                        continue
                    reasoning = getattr(delta, "reasoning_content", None)
                    if reasoning:
                        yield NativeReasoningChunk(reasoning)
                    content = getattr(delta, "content", None)
                    if content:
                        yield NativeChunk(content)
                yield NativeEnd(usage=usage if sampling.capture_usage else None)
            finally:
                with suppress(Exception):
                    stream.close()
        finally:
            with suppress(Exception):
                client.close()

    def list_model_names(self, target: ServiceTarget) -> List[str]:
        if self.family is not WireFamily.OPENAI_COMPATIBLE:
            return static_model_names(self.family)
        client = self._make_client(target)
        try:
            return [m.id for m in client.models.list()]
        finally:
            with suppress(Exception):
                client.close()


__all__ = [
    "OpenAIStyleTransport",
    "build_openai_messages",
    "build_chat_params",
    "build_stream_params",
    "extract_openai_text",
]
