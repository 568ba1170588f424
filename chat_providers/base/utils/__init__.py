"""Small pure helpers."""

from .urls import join_url, normalize_base_url

__all__ = ["normalize_base_url", "join_url"]
