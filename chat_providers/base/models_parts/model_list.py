"""
ModelListResult DTO returned by model discovery.

Discovery never raises; outcomes are values. ``success`` implies no error
message and ``not success`` implies an empty model list. Use the
:meth:`ModelListResult.ok` / :meth:`ModelListResult.failure` constructors to
keep that invariant.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional


@dataclass(frozen=True)
class ModelListResult:
    models: List[str] = field(default_factory=list)
    success: bool = True
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.success and self.error_message is not None:
            raise ValueError("successful ModelListResult cannot carry an error message")
        if not self.success and self.models:
            raise ValueError("failed ModelListResult must have an empty model list")

    @classmethod
    def ok(cls, models: Iterable[str]) -> "ModelListResult":
        return cls(models=list(models), success=True, error_message=None)

    @classmethod
    def failure(cls, message: str) -> "ModelListResult":
        return cls(models=[], success=False, error_message=message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "models": list(self.models),
            "success": self.success,
            "error_message": self.error_message,
        }


__all__ = ["ModelListResult"]
