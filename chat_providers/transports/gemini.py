"""Gemini transport (``google-genai`` SDK).

Each call builds its own ``genai.Client(api_key=...)``; the credential lives
on that client only, so concurrent calls with different Gemini keys do not
share state.

Roles: ``assistant`` maps to Gemini's ``model`` role. ``request.system`` and
SYSTEM-role messages are joined into the config's ``system_instruction``.
"""

from __future__ import annotations

from contextlib import suppress
from typing import Any, Dict, Iterator, List, Optional, Tuple

try:
    from google import genai  # type: ignore
except Exception:  # pragma: no cover
    genai = None  # type: ignore

from ..base.credentials import ServiceTarget
from ..base.models import ChatResponse, ChatRole, NormalizedChatRequest, SamplingOptions
from ..base.provider_registry import WireFamily
from ..base.streaming import NativeChunk, NativeEnd, NativeReasoningChunk, NativeStart, NativeStreamEvent
from ..config.defaults import NO_RESPONSE_PLACEHOLDER
from .base import Transport
from .static_models import static_model_names
from .usage import extract_gemini_usage

_ROLE_MAP = {ChatRole.USER: "user", ChatRole.ASSISTANT: "model"}


def build_gemini_contents(request: NormalizedChatRequest) -> Tuple[Optional[str], List[Dict[str, Any]]]:
    """Return ``(system_instruction, contents)``."""
    system_parts: List[str] = [request.system] if request.system else []
    contents: List[Dict[str, Any]] = []
    for m in request.messages:
        if m.role is ChatRole.SYSTEM:
            system_parts.append(m.content)
        else:
            contents.append({"role": _ROLE_MAP[m.role], "parts": [{"text": m.content}]})
    return ("\n\n".join(system_parts) or None), contents


def build_generation_config(
    sampling: Optional[SamplingOptions],
    system_instruction: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """``GenerateContentConfig`` in dict form; ``None`` when nothing is set."""
    config: Dict[str, Any] = {}
    if system_instruction:
        config["system_instruction"] = system_instruction
    if sampling is not None:
        if sampling.temperature is not None:
            config["temperature"] = sampling.temperature
        if sampling.top_p is not None:
            config["top_p"] = sampling.top_p
        if sampling.max_tokens is not None:
            config["max_output_tokens"] = sampling.max_tokens
        if sampling.stop_sequences is not None:
            config["stop_sequences"] = list(sampling.stop_sequences)
    return config or None


def _iter_parts(chunk: Any) -> Iterator[Any]:
    candidates = getattr(chunk, "candidates", None) or []
    if not candidates:
        return
    content = getattr(candidates[0], "content", None)
    yield from getattr(content, "parts", None) or []


def extract_gemini_text(resp: Any) -> str:
    """Return the non-thought text of a response or chunk."""
    return "".join(
        getattr(p, "text", "") or ""
        for p in _iter_parts(resp)
        if not getattr(p, "thought", False)
    )


class GeminiTransport(Transport):
    family = WireFamily.GEMINI
    sdk_name = "google-genai"

    def _sdk(self) -> Any:
        return genai

    def _make_client(self, target: ServiceTarget) -> Any:
        return genai.Client(api_key=target.api_key)

    @staticmethod
    def _params(target: ServiceTarget, request: NormalizedChatRequest, sampling: Optional[SamplingOptions]) -> Dict[str, Any]:
        system_instruction, contents = build_gemini_contents(request)
        return {
            "model": target.model,
            "contents": contents,
            "config": build_generation_config(sampling, system_instruction),
        }

    def exec_chat(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: Optional[SamplingOptions],
    ) -> ChatResponse:
        client = self._make_client(target)
        try:
            resp = client.models.generate_content(**self._params(target, request, sampling))
        finally:
            with suppress(Exception):
                client.close()
        return ChatResponse(
            content=extract_gemini_text(resp) or NO_RESPONSE_PLACEHOLDER,
            model=getattr(resp, "model_version", None) or target.model,
            usage=extract_gemini_usage(getattr(resp, "usage_metadata", None)),
        )

    def exec_chat_stream(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: SamplingOptions,
    ) -> Iterator[NativeStreamEvent]:
        client = self._make_client(target)
        try:
            stream = client.models.generate_content_stream(**self._params(target, request, sampling))
            yield NativeStart()
            usage = None
            for chunk in stream:
                raw_usage = getattr(chunk, "usage_metadata", None)
                if raw_usage is not None:
                    usage = extract_gemini_usage(raw_usage) or usage
                for part in _iter_parts(chunk):
                    text = getattr(part, "text", None)
                    if not text:
                        continue
                    if getattr(part, "thought", False):
                        yield NativeReasoningChunk(text)
                    else:
                        yield NativeChunk(text)
            yield NativeEnd(usage=usage if sampling.capture_usage else None)
        finally:
            with suppress(Exception):
                client.close()

    def list_model_names(self, target: ServiceTarget) -> List[str]:
        return static_model_names(self.family)


__all__ = ["GeminiTransport", "build_gemini_contents", "build_generation_config", "extract_gemini_text"]
