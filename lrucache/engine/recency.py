"""Recency list backing the LRU cache engine.

A doubly linked list ordered from most-recently-used (right after the head
sentinel) to least-recently-used (right before the tail sentinel). The two
sentinels never hold data, so insertion and removal never special-case the
list ends.

Only :class:`lrucache.engine.cache.LRUCache` mutates this list; it is not
exported from the package.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional


class Node:
    """Single cache entry linked into the recency list."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.prev: Optional[Node] = None
        self.next: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, value={self.value!r})"


class RecencyList:
    """Sentinel-bounded doubly linked list of :class:`Node` objects."""

    def __init__(self) -> None:
        self.head = Node(None, None)
        self.tail = Node(None, None)
        self.head.next = self.tail
        self.tail.prev = self.head

    def _is_sentinel(self, node: Node) -> bool:
        return node is self.head or node is self.tail

    def detach(self, node: Node) -> None:
        """Splice ``node`` out by linking its neighbours to each other."""
        if self._is_sentinel(node):
            raise ValueError("sentinel nodes cannot be detached")
        if node.prev is None or node.next is None:
            raise ValueError(f"{node!r} is not linked")
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None

    def insert_at_head(self, node: Node) -> None:
        """Link ``node`` right after the head sentinel (most-recently-used)."""
        first = self.head.next
        node.prev = self.head
        node.next = first
        first.prev = node  # type: ignore[union-attr]
        self.head.next = node

    def promote(self, node: Node) -> None:
        """Move an already linked node to the most-recently-used position."""
        if self.head.next is node:
            return
        self.detach(node)
        self.insert_at_head(node)

    def last(self) -> Optional[Node]:
        """Return the least-recently-used node, or None when empty."""
        node = self.tail.prev
        if node is self.head:
            return None
        return node

    def is_empty(self) -> bool:
        return self.head.next is self.tail

    def __iter__(self) -> Iterator[Node]:
        """Walk the live nodes from most- to least-recently-used."""
        node = self.head.next
        while node is not self.tail:
            yield node  # type: ignore[misc]
            node = node.next  # type: ignore[union-attr]
