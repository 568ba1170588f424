"""Model discovery: provider dispatch, direct OpenAI-compatible listing, filter."""

from .model_filter import filter_models, is_excluded
from .openai_listing import fetch_openai_compatible_models, list_openai_compatible_models, models_url
from .model_discovery import discover_models, get_models_from_provider

__all__ = [
    "filter_models",
    "is_excluded",
    "fetch_openai_compatible_models",
    "list_openai_compatible_models",
    "models_url",
    "discover_models",
    "get_models_from_provider",
]
