"""
Pydantic DTOs for the OpenAI-compatible ``GET /models`` listing payload.

Purpose
-------
Validate the listing body returned by OpenAI, DeepSeek and other
OpenAI-compatible endpoints before extracting model identifiers.

Only ``data[].id`` is required. Every other field is optional and unknown
fields are ignored, since compatible vendors add their own metadata.

External dependencies: Pydantic only (no network calls).
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class OpenAIModel(BaseModel):
    """One entry of the ``data`` array."""

    model_config = ConfigDict(extra="ignore")

    id: str
    object: Optional[str] = None
    created: Optional[int] = None
    owned_by: Optional[str] = None


class OpenAIModelsResponse(BaseModel):
    """Top-level listing payload: ``{object?, data: [...]}``."""

    model_config = ConfigDict(extra="ignore")

    object: Optional[str] = None
    data: List[OpenAIModel]

    def ids(self) -> List[str]:
        return [m.id for m in self.data]


__all__ = ["OpenAIModel", "OpenAIModelsResponse"]
