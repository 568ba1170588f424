"""chat_providers package

One client surface over several chat-completion backends (OpenAI,
Anthropic, Cohere, Gemini, Groq, Ollama, xAI, DeepSeek and custom
OpenAI-compatible endpoints).

Public API (re-exported):
    - Client: :class:`ChatClient`, :func:`create_chat_client`
    - DTOs: :class:`Provider`, :class:`ChatOptions`, :class:`ChatMessage`,
      :class:`ChatResponse`, :class:`TokenUsage`, :class:`ModelListResult`,
      :class:`ProviderCapabilities`
    - Streaming: event types and the :class:`StreamSink` helpers
    - Discovery: :func:`discover_models`, :func:`fetch_openai_compatible_models`
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`

Example::

    from chat_providers import ChatClient, ChatMessage, ChatOptions, Provider

    client = ChatClient(Provider.DEEPSEEK, ChatOptions(model="deepseek-chat", api_key=key))
    print(client.chat([ChatMessage.user("hello")]).content)
"""

from .base.errors import ErrorCode, ProviderError
from .base.models import (
    ChatMessage,
    ChatOptions,
    ChatResponse,
    ChatRole,
    ModelListResult,
    Provider,
    ProviderCapabilities,
    ProviderKind,
    TokenUsage,
)
from .base.provider_registry import ProviderSpec, WireFamily, get_provider_spec
from .base.request_builder import build_chat_options, build_stream_options
from .base.streaming import (
    CallbackSink,
    ChatStreamEvent,
    CollectingSink,
    StreamContent,
    StreamDone,
    StreamError,
    StreamSink,
    StreamStart,
)
from .base.utils.urls import normalize_base_url
from .client import ChatClient
from .discovery import discover_models, fetch_openai_compatible_models, filter_models, get_models_from_provider
from .simple import (
    check_provider_supports_list_models,
    create_chat_client,
    get_provider_capabilities_info,
    quick_chat,
    quick_chat_stream,
    sample_stream,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorCode",
    "ProviderError",
    "ChatMessage",
    "ChatOptions",
    "ChatResponse",
    "ChatRole",
    "ModelListResult",
    "Provider",
    "ProviderCapabilities",
    "ProviderKind",
    "TokenUsage",
    "ProviderSpec",
    "WireFamily",
    "get_provider_spec",
    "build_chat_options",
    "build_stream_options",
    "ChatStreamEvent",
    "StreamStart",
    "StreamContent",
    "StreamDone",
    "StreamError",
    "StreamSink",
    "CollectingSink",
    "CallbackSink",
    "normalize_base_url",
    "ChatClient",
    "discover_models",
    "get_models_from_provider",
    "fetch_openai_compatible_models",
    "filter_models",
    "create_chat_client",
    "quick_chat",
    "quick_chat_stream",
    "check_provider_supports_list_models",
    "get_provider_capabilities_info",
    "sample_stream",
]
