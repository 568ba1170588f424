"""CLI parser construction for chat-providers.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ..config.defaults import PROVIDER_CLI_DEFAULT_PROVIDER, SAMPLE_STREAM_DEFAULT_DELAY_SECONDS

SUBCOMMANDS = ("capabilities", "models", "chat", "demo-stream")


def _add_connection_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--provider",
        default=PROVIDER_CLI_DEFAULT_PROVIDER,
        help="Provider key, or custom:<name> for an OpenAI-compatible endpoint",
    )
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--api-key", default=None, help="Overrides the provider's credential slot")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser and subcommands (no side effects)."""
    p = argparse.ArgumentParser(prog="chat-providers", description="Multi-provider chat client")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_caps = sub.add_parser("capabilities", help="Show provider capabilities (no network)")
    p_caps.add_argument("--provider", default=None, help="Single provider; all named providers when omitted")

    p_models = sub.add_parser("models", help="Discover models available to a credential")
    _add_connection_flags(p_models)

    p_chat = sub.add_parser("chat", help="Send one prompt")
    _add_connection_flags(p_chat)
    p_chat.add_argument("--model", default=None)
    p_chat.add_argument("--prompt", required=True)
    p_chat.add_argument("--system", dest="system_prompt", default=None)
    p_chat.add_argument("--temperature", type=float, default=None)
    p_chat.add_argument("--top-p", type=float, default=None)
    p_chat.add_argument("--max-tokens", type=int, default=None)
    p_chat.add_argument("--stop", action="append", default=None, help="Stop sequence (repeatable)")
    p_chat.add_argument("--stream", action="store_true", help="Print stream events as JSON lines")

    p_demo = sub.add_parser("demo-stream", help="Emit a scripted stream without network access")
    p_demo.add_argument("--delay", type=float, default=SAMPLE_STREAM_DEFAULT_DELAY_SECONDS)

    return p


__all__ = ["build_parser", "SUBCOMMANDS"]
