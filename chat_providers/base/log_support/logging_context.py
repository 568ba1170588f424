"""Structured logging context carried through a single chat or discovery call."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Common fields merged into every event of one operation.

    ``wire_family`` and ``endpoint`` identify where a request went; the
    credential itself is never part of the context.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    wire_family: Optional[str] = None
    endpoint: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
