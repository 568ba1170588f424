"""chat-providers CLI (package entrypoint).

Wires argument parsing to the handlers in ``cli_actions``. Performs no
provider logic directly.
"""

from __future__ import annotations

from typing import Optional

from ..base.logging import configure_logger
from .cli_actions import handle_capabilities, handle_chat, handle_demo_stream, handle_models
from .cli_parser import build_parser

_HANDLERS = {
    "capabilities": handle_capabilities,
    "models": handle_models,
    "chat": handle_chat,
    "demo-stream": handle_demo_stream,
}


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    p = build_parser()
    args = p.parse_args(argv)
    if args.log_level:
        configure_logger(level=args.log_level)
    return _HANDLERS[args.cmd](args)


__all__ = ["main"]
