"""
ProviderCapabilities DTO: the caller-facing subset of a registry entry.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ProviderCapabilities:
    """Whether a provider lists models / accepts a custom base URL, plus a description."""

    supports_list_models: bool
    supports_custom_base_url: bool
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "supports_list_models": self.supports_list_models,
            "supports_custom_base_url": self.supports_custom_base_url,
            "description": self.description,
        }


__all__ = ["ProviderCapabilities"]
