"""
Chat providers base package.

Provider-agnostic building blocks: DTOs, the provider registry, credential
strategies, the request builder, streaming primitives, errors and logging.
"""

from .errors import ErrorCode, ProviderError
from .models import ChatMessage, ChatOptions, ChatResponse, Provider, TokenUsage
from .provider_registry import ProviderSpec, WireFamily, get_provider_spec
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ChatMessage",
    "ChatOptions",
    "ChatResponse",
    "Provider",
    "TokenUsage",
    "ProviderSpec",
    "WireFamily",
    "get_provider_spec",
    "TimeoutConfig",
    "get_timeout_config",
]
