"""CLI action handlers.

Purpose
-------
Subcommand handlers for ``chat-providers``. Results are written to stdout as
JSON (one document, or one line per stream event); errors go to stderr as
JSON. Credentials are never printed.

Exit codes
----------
0 success, 1 provider/stream failure, 2 invalid input.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Optional, TextIO

from ..base.errors import ProviderError
from ..base.models import NAMED_PROVIDERS, ChatMessage, ChatOptions, Provider
from ..base.streaming import CallbackSink, ChatStreamEvent, StreamDone
from ..client import ChatClient
from ..config import get_provider_config
from ..discovery import discover_models
from ..simple import get_provider_capabilities_info, sample_stream

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _emit(payload: Dict[str, Any], stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    out.write(json.dumps(payload, ensure_ascii=False) + "\n")
    out.flush()


def _error(message: str, **fields: Any) -> None:
    _emit({"error": message, **fields}, sys.stderr)


def _parse_provider(value: str) -> Optional[Provider]:
    try:
        return Provider.parse(value)
    except ValueError as exc:
        _error(str(exc))
        return None


def resolve_options(provider: Provider, args: argparse.Namespace) -> Dict[str, Any]:
    """Merge config layers with CLI flags (flags win)."""
    overrides = {
        "api_key": getattr(args, "api_key", None),
        "base_url": getattr(args, "base_url", None),
        "model": getattr(args, "model", None),
        "system_prompt": getattr(args, "system_prompt", None),
    }
    return get_provider_config(provider.key, overrides)


def handle_capabilities(args: argparse.Namespace) -> int:
    if args.provider:
        provider = _parse_provider(args.provider)
        if provider is None:
            return EXIT_USAGE
        providers = [provider]
    else:
        providers = list(NAMED_PROVIDERS)
    _emit({str(p): get_provider_capabilities_info(p).to_dict() for p in providers})
    return EXIT_OK


def handle_models(args: argparse.Namespace) -> int:
    provider = _parse_provider(args.provider)
    if provider is None:
        return EXIT_USAGE
    cfg = resolve_options(provider, args)
    result = discover_models(provider, cfg.get("api_key"), cfg.get("base_url"))
    _emit({"provider": str(provider), **result.to_dict()})
    return EXIT_OK if result.success else EXIT_FAILURE


def _build_chat_options(cfg: Dict[str, Any], args: argparse.Namespace) -> ChatOptions:
    return ChatOptions(
        model=cfg["model"],
        base_url=cfg.get("base_url"),
        api_key=cfg.get("api_key"),
        temperature=args.temperature,
        top_p=args.top_p,
        max_tokens=args.max_tokens,
        system_prompt=cfg.get("system_prompt"),
        stop_sequences=tuple(args.stop) if args.stop else None,
    )


def handle_chat(args: argparse.Namespace) -> int:
    provider = _parse_provider(args.provider)
    if provider is None:
        return EXIT_USAGE
    cfg = resolve_options(provider, args)
    if not cfg.get("model"):
        _error("no model configured", provider=str(provider))
        return EXIT_USAGE
    client = ChatClient(provider, _build_chat_options(cfg, args))
    messages = [ChatMessage.user(args.prompt)]

    if not args.stream:
        try:
            response = client.chat(messages)
        except ProviderError as exc:
            _error(exc.message, code=exc.code.value, provider=exc.provider)
            return EXIT_FAILURE
        _emit(response.to_dict())
        return EXIT_OK

    last: Dict[str, Optional[ChatStreamEvent]] = {"event": None}

    def _on_event(event: ChatStreamEvent) -> None:
        last["event"] = event
        _emit(event.to_dict())

    try:
        client.chat_stream(messages, CallbackSink(_on_event))
    except ProviderError as exc:
        _error(exc.message, code=exc.code.value, provider=exc.provider)
        return EXIT_FAILURE
    return EXIT_OK if isinstance(last["event"], StreamDone) else EXIT_FAILURE


def handle_demo_stream(args: argparse.Namespace) -> int:
    sample_stream(CallbackSink(lambda event: _emit(event.to_dict())), delay=max(args.delay, 0.0))
    return EXIT_OK


__all__ = [
    "handle_capabilities",
    "handle_models",
    "handle_chat",
    "handle_demo_stream",
    "resolve_options",
    "EXIT_OK",
    "EXIT_FAILURE",
    "EXIT_USAGE",
]
