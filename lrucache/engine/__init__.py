"""LRU cache engine: index plus recency list kept in lockstep."""

from .cache import CacheStats, InvalidConfiguration, LRUCache

__all__ = ["CacheStats", "InvalidConfiguration", "LRUCache"]
