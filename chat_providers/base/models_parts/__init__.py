"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
``chat_providers.base.models_parts`` if needed, while
``chat_providers.base.models`` remains the primary stable import path.
"""

from .provider import NAMED_PROVIDERS, Provider, ProviderKind
from .message import ChatMessage, ChatRole
from .chat_options import ChatOptions
from .chat_request import NormalizedChatRequest, SamplingOptions
from .chat_response import ChatResponse, TokenUsage
from .model_list import ModelListResult
from .capabilities import ProviderCapabilities

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
