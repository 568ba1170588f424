"""JSON logging formatter used by the chat_providers logger.

Serializes standard logging fields, hoists keys from JSON-encoded messages to
the top level, and masks any field whose name looks like a credential.
"""
from __future__ import annotations

import contextlib
import json
import logging
from datetime import datetime, timezone

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

REDACTED = "***"

# Lower-cased field names whose values must never reach a log sink.
SECRET_FIELD_NAMES = frozenset({"api_key", "apikey", "authorization", "auth", "credential", "token"})

_RECORD_INTERNALS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "name",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


def redact(payload: dict) -> dict:
    """Return a shallow copy of ``payload`` with credential-like keys masked."""
    return {k: (REDACTED if k.lower() in SECRET_FIELD_NAMES and v else v) for k, v in payload.items()}


class JsonFormatter(logging.Formatter):
    """Lightweight JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        msg_text = record.getMessage()
        base["msg"] = msg_text
        with contextlib.suppress(ValueError):
            parsed = json.loads(msg_text)
            if isinstance(parsed, dict):
                # Structured events are hoisted so lines are not double-encoded.
                base.update(parsed)
                base.pop("msg", None)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RECORD_INTERNALS:
                continue
            if k not in base:
                base[k] = v
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(redact(base), ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO", "REDACTED", "SECRET_FIELD_NAMES", "redact"]
