"""Fixed-capacity LRU cache engine.

The engine pairs a ``dict`` index (key -> node) with a
:class:`~lrucache.engine.recency.RecencyList`. Every public operation updates
both structures before returning, so a key is in the index if and only if its
node is linked between the list sentinels.

Example
-------
>>> cache = LRUCache(2)
>>> cache.put(1, 10)
>>> cache.put(2, 20)
>>> cache.get(1)
10
>>> cache.put(3, 30)  # evicts key 2
>>> cache.snapshot()
[30, 10]
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, TextIO, Tuple

from .recency import Node, RecencyList

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when a cache is constructed with a non-positive capacity."""


@dataclass
class CacheStats:
    """Hit/miss/eviction counters for a single cache.

    Attributes
    ----------
    hits : int
        ``get`` calls that found the key.
    misses : int
        ``get`` calls that did not find the key.
    evictions : int
        Entries dropped to respect the capacity bound.
    """

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Ratio of hits to lookups (0.0-1.0)."""
        lookups = self.hits + self.misses
        if lookups == 0:
            return 0.0
        return self.hits / lookups


def _validate_capacity(capacity: Any) -> int:
    # bool is an int subclass
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidConfiguration(
            f"capacity must be a positive integer, got {capacity!r}"
        )
    if capacity <= 0:
        raise InvalidConfiguration(f"capacity must be positive, got {capacity}")
    return capacity


class LRUCache:
    """Least-recently-used cache holding at most ``capacity`` entries.

    Parameters
    ----------
    capacity : int
        Maximum number of live entries. Must be a positive integer.

    Raises
    ------
    InvalidConfiguration
        If ``capacity`` is zero, negative, or not an integer.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = _validate_capacity(capacity)
        self._index: Dict[Hashable, Node] = {}
        self._recency = RecencyList()
        self.stats = CacheStats()
        logger.debug("lru_cache.initialized", extra={"capacity": self._capacity})

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the value for ``key`` and mark it most-recently-used.

        Returns None when the key is absent; a miss changes nothing.
        """
        node = self._index.get(key)
        if node is None:
            self.stats.misses += 1
            return None
        self._recency.promote(node)
        self.stats.hits += 1
        return node.value

    def put(self, key: Hashable, value: Any) -> None:
        """Insert or overwrite ``key`` and mark it most-recently-used.

        Inserting a new key into a full cache evicts the least-recently-used
        entry.
        """
        node = self._index.get(key)
        if node is not None:
            node.value = value
            self._recency.promote(node)
            return

        node = Node(key, value)
        self._recency.insert_at_head(node)
        self._index[key] = node

        if len(self._index) > self._capacity:
            self._evict()

    def _evict(self) -> None:
        lru = self._recency.last()
        if lru is None:  # pragma: no cover - capacity >= 1 keeps this unreachable
            return
        self._recency.detach(lru)
        del self._index[lru.key]
        self.stats.evictions += 1
        logger.debug(
            "lru_cache.evicted",
            extra={"key": lru.key, "capacity": self._capacity},
        )

    def peek(self, key: Hashable) -> Optional[Any]:
        """Return the value for ``key`` without touching its recency."""
        node = self._index.get(key)
        return None if node is None else node.value

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        """Yield ``(key, value)`` pairs from most- to least-recently-used."""
        for node in self._recency:
            yield node.key, node.value

    def snapshot(self) -> List[Any]:
        """Return live values ordered from most- to least-recently-used."""
        return [node.value for node in self._recency]

    def format_snapshot(self) -> str:
        """Render the snapshot as ``[v1 v2 ]``; an empty cache renders as ''."""
        if self._recency.is_empty():
            return ""
        return "[" + "".join(f"{value} " for value in self.snapshot()) + "]"

    def print(self, out: Optional[TextIO] = None) -> None:
        """Write :meth:`format_snapshot` and a newline; nothing when empty."""
        rendered = self.format_snapshot()
        if not rendered:
            return
        print(rendered, file=out if out is not None else sys.stdout)

    def describe(self) -> str:
        """Return a one-line occupancy and counter summary for debugging."""
        return (
            f"Cache: {len(self)}/{self._capacity} | Hits: {self.stats.hits} | "
            f"Misses: {self.stats.misses} | Evictions: {self.stats.evictions}"
        )

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, entries={list(self.items())})"
