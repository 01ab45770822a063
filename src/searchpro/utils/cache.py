"""Caching helpers for SearchPro."""
from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, List, Optional, TypeVar

from ..errors import InvalidConfiguration
from ..logging_setup import get_logger

logger = get_logger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Bounded key/value store evicting the least recently used entry.

    Both ``get`` hits and ``set`` move the key to the most-recently-used end
    of the underlying ``OrderedDict``; eviction pops from the other end.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise InvalidConfiguration(f"LRU capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._entries: "OrderedDict[K, V]" = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for ``key`` and mark it most recently used.

        A miss returns ``default`` and leaves the order untouched; pass a
        sentinel when ``None`` itself may be stored.
        """
        if key not in self._entries:
            return default
        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: K, value: V) -> None:
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) >= self._capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("LRU evicted %r", evicted)
        self._entries[key] = value

    def keys(self) -> List[K]:
        """Keys ordered from least to most recently used."""
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self._entries)})"


__all__ = ["LRUCache"]
