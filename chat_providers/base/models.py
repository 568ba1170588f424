"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``chat_providers.base.models_parts`` to keep a stable import path.
"""

from .models_parts.provider import NAMED_PROVIDERS, Provider, ProviderKind
from .models_parts.message import ChatMessage, ChatRole
from .models_parts.chat_options import ChatOptions
from .models_parts.chat_request import NormalizedChatRequest, SamplingOptions
from .models_parts.chat_response import ChatResponse, TokenUsage
from .models_parts.model_list import ModelListResult
from .models_parts.capabilities import ProviderCapabilities

__all__ = [
    "Provider",
    "ProviderKind",
    "NAMED_PROVIDERS",
    "ChatMessage",
    "ChatRole",
    "ChatOptions",
    "SamplingOptions",
    "NormalizedChatRequest",
    "ChatResponse",
    "TokenUsage",
    "ModelListResult",
    "ProviderCapabilities",
]
