"""Caches for parsed templates."""

from __future__ import annotations

from mustache_resolver.cache.base import Cache
from mustache_resolver.cache.memory import MemoryCache
from mustache_resolver.cache.null import NullCache

__all__ = ["Cache", "MemoryCache", "NullCache"]
