"""Converter resolution cache."""

from unacy.core.cache.path_cache import PathCache

__all__ = ["PathCache"]
