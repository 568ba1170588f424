"""Pydantic DTOs for validating provider payloads."""

from .openai_models import OpenAIModel, OpenAIModelsResponse

__all__ = ["OpenAIModel", "OpenAIModelsResponse"]
