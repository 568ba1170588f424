"""chat_providers.config.defaults
=============================

Central place for small, stable default values used across the chat_providers
package and its CLI. These defaults can be overridden via environment
variables or an external configuration file (see :mod:`chat_providers.config`),
but provide sensible fallbacks for local development and tests.

Module Purpose
--------------
- Provide a single import location for default constants (no I/O).
- Keep adapters and the CLI free of magic literals.

This module intentionally avoids importing from other chat_providers packages
to prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Provider endpoints (always stored with a single trailing slash) ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1/"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/v1/"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/"
COHERE_DEFAULT_BASE_URL = "https://api.cohere.ai/compatibility/v1/"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/"
GROQ_DEFAULT_BASE_URL = "https://api.groq.com/openai/v1/"
XAI_DEFAULT_BASE_URL = "https://api.x.ai/v1/"
OLLAMA_DEFAULT_HOST = "http://localhost:11434/"

# OpenAI-compatible providers without a dedicated endpoint reuse the OpenAI one.
OPENAI_COMPATIBLE_FALLBACK_BASE_URL = OPENAI_DEFAULT_BASE_URL


# ---- Default models (CLI/config convenience only; ChatOptions.model is required) ----
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-haiku-latest"
COHERE_DEFAULT_MODEL = "command-r-plus"
GEMINI_DEFAULT_MODEL = "gemini-2.0-flash"
GROQ_DEFAULT_MODEL = "llama-3.3-70b-versatile"
XAI_DEFAULT_MODEL = "grok-3-mini"
DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"
OLLAMA_DEFAULT_MODEL = "llama3.2"


# ---- Model discovery ----
# Wall-clock budget for the OpenAI-compatible ``GET {base}models`` call.
MODEL_DISCOVERY_TIMEOUT_SECONDS = 30.0

# Case-insensitive substrings marking non-chat models (audio, image,
# embeddings, moderation and legacy completion engines).
MODEL_EXCLUDE_PATTERNS = (
    "whisper",
    "tts",
    "dall-e",
    "embedding",
    "moderation",
    "babbage",
    "ada",
    "curie",
    "davinci",
)

LIST_MODELS_UNSUPPORTED_MESSAGE = (
    "This provider does not support dynamic model listing; please add models manually"
)


# ---- Chat execution ----
# Returned as content when a single-shot response carries no text.
NO_RESPONSE_PLACEHOLDER = "No response"

# Anthropic's Messages API requires max_tokens; used only when the caller left it unset.
ANTHROPIC_FALLBACK_MAX_TOKENS = 4096

# Sampling temperature applied by the quick_chat helpers.
QUICK_CHAT_TEMPERATURE = 0.7


# ---- CLI defaults ----
PROVIDER_CLI_DEFAULT_PROVIDER = "openai"
SAMPLE_STREAM_DEFAULT_DELAY_SECONDS = 0.5


__all__ = [
    "OPENAI_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "COHERE_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_BASE_URL",
    "GROQ_DEFAULT_BASE_URL",
    "XAI_DEFAULT_BASE_URL",
    "OLLAMA_DEFAULT_HOST",
    "OPENAI_COMPATIBLE_FALLBACK_BASE_URL",
    "OPENAI_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_MODEL",
    "COHERE_DEFAULT_MODEL",
    "GEMINI_DEFAULT_MODEL",
    "GROQ_DEFAULT_MODEL",
    "XAI_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_MODEL",
    "OLLAMA_DEFAULT_MODEL",
    "MODEL_DISCOVERY_TIMEOUT_SECONDS",
    "MODEL_EXCLUDE_PATTERNS",
    "LIST_MODELS_UNSUPPORTED_MESSAGE",
    "NO_RESPONSE_PLACEHOLDER",
    "ANTHROPIC_FALLBACK_MAX_TOKENS",
    "QUICK_CHAT_TEMPERATURE",
    "PROVIDER_CLI_DEFAULT_PROVIDER",
    "SAMPLE_STREAM_DEFAULT_DELAY_SECONDS",
]
