"""Anthropic Messages API transport (``anthropic`` SDK).

System handling: the Messages API has a single ``system`` parameter and no
system role. ``request.system`` comes first, followed by the contents of any
SYSTEM-role messages in order, joined with blank lines; those messages are
removed from the turn list.

``max_tokens`` is mandatory for this API; ``ANTHROPIC_FALLBACK_MAX_TOKENS``
applies when the caller left it unset.
"""

from __future__ import annotations

from contextlib import suppress
from typing import Any, Dict, Iterator, List, Optional

try:
    from anthropic import Anthropic
except Exception:  # pragma: no cover
    Anthropic = None  # type: ignore

from ..base.credentials import ServiceTarget
from ..base.models import ChatResponse, ChatRole, NormalizedChatRequest, SamplingOptions
from ..base.provider_registry import WireFamily
from ..base.streaming import NativeChunk, NativeEnd, NativeReasoningChunk, NativeStart, NativeStreamEvent
from ..config.defaults import ANTHROPIC_FALLBACK_MAX_TOKENS, NO_RESPONSE_PLACEHOLDER
from .base import Transport
from .static_models import static_model_names
from .usage import usage_from_counts


def build_anthropic_params(
    target: ServiceTarget,
    request: NormalizedChatRequest,
    sampling: Optional[SamplingOptions],
) -> Dict[str, Any]:
    system_parts: List[str] = [request.system] if request.system else []
    turns: List[Dict[str, str]] = []
    for m in request.messages:
        if m.role is ChatRole.SYSTEM:
            system_parts.append(m.content)
        else:
            turns.append(m.to_dict())
    max_tokens = sampling.max_tokens if sampling and sampling.max_tokens is not None else ANTHROPIC_FALLBACK_MAX_TOKENS
    params: Dict[str, Any] = {"model": target.model, "messages": turns, "max_tokens": max_tokens}
    if system_parts:
        params["system"] = "\n\n".join(system_parts)
    if sampling is not None:
        if sampling.temperature is not None:
            params["temperature"] = sampling.temperature
        if sampling.top_p is not None:
            params["top_p"] = sampling.top_p
        if sampling.stop_sequences is not None:
            params["stop_sequences"] = list(sampling.stop_sequences)
    return params


def extract_anthropic_text(resp: Any) -> str:
    """Concatenate the ``text`` blocks of a Messages response."""
    out: List[str] = []
    for block in getattr(resp, "content", None) or []:
        if getattr(block, "type", None) == "text":
            out.append(getattr(block, "text", "") or "")
    return "".join(out)


class AnthropicTransport(Transport):
    family = WireFamily.ANTHROPIC
    sdk_name = "anthropic"

    def _sdk(self) -> Any:
        return Anthropic

    def _make_client(self, target: ServiceTarget) -> Any:
        return Anthropic(api_key=target.api_key, base_url=target.endpoint)

    def exec_chat(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: Optional[SamplingOptions],
    ) -> ChatResponse:
        client = self._make_client(target)
        try:
            resp = client.messages.create(**build_anthropic_params(target, request, sampling))
        finally:
            with suppress(Exception):
                client.close()
        raw_usage = getattr(resp, "usage", None)
        return ChatResponse(
            content=extract_anthropic_text(resp) or NO_RESPONSE_PLACEHOLDER,
            model=getattr(resp, "model", None) or target.model,
            usage=usage_from_counts(
                getattr(raw_usage, "input_tokens", None),
                getattr(raw_usage, "output_tokens", None),
            ),
        )

    def exec_chat_stream(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: SamplingOptions,
    ) -> Iterator[NativeStreamEvent]:
        """Translate raw Messages stream events.

        ``message_start`` carries the input token count, ``message_delta`` the
        running output count; ``thinking_delta`` blocks are reasoning.
        """
        client = self._make_client(target)
        try:
            params = build_anthropic_params(target, request, sampling)
            stream = client.messages.create(stream=True, **params)
            try:
                prompt_tokens = completion_tokens = None
                for event in stream:
                    etype = getattr(event, "type", None)
                    if etype == "message_start":
                        message_usage = getattr(getattr(event, "message", None), "usage", None)
                        prompt_tokens = getattr(message_usage, "input_tokens", None)
                        yield NativeStart()
                    elif etype == "content_block_delta":
                        delta = getattr(event, "delta", None)
                        dtype = getattr(delta, "type", None)
                        if dtype == "text_delta" and getattr(delta, "text", None):
                            yield NativeChunk(delta.text)
                        elif dtype == "thinking_delta" and getattr(delta, "thinking", None):
                            yield NativeReasoningChunk(delta.thinking)
                    elif etype == "message_delta":
                        delta_usage = getattr(event, "usage", None)
                        out = getattr(delta_usage, "output_tokens", None)
                        if out is not None:
                            completion_tokens = out
                    elif etype == "message_stop":
                        usage = usage_from_counts(prompt_tokens, completion_tokens)
                        yield NativeEnd(usage=usage if sampling.capture_usage else None)
                        return
            finally:
                with suppress(Exception):
                    stream.close()
        finally:
            with suppress(Exception):
                client.close()

    def list_model_names(self, target: ServiceTarget) -> List[str]:
        return static_model_names(self.family)


__all__ = ["AnthropicTransport", "build_anthropic_params", "extract_anthropic_text"]
