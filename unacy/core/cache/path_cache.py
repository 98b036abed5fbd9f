"""
Memoization of resolved multi-hop converters.
"""

import threading
from collections.abc import Hashable

from unacy.models.converter import Converter

CacheKey = tuple[Hashable, Hashable]


class PathCache:
    """
    Converters keyed by (source, target).

    Reads are plain dict lookups; writes go through a lock.

    Entries are only valid for the graph they were resolved against. A
    registry builds a fresh cache whenever its graph changes.
    """

    def __init__(self, entries: dict[CacheKey, Converter] | None = None, enabled: bool = True):
        """
        Initialize path cache.

        Args:
            entries: Initial entries (copied)
            enabled: When False, put() is a no-op and get() always misses
        """
        self._entries: dict[CacheKey, Converter] = dict(entries or {})
        self._lock = threading.Lock()
        self.enabled = enabled

    def get(self, source: Hashable, target: Hashable) -> Converter | None:
        if not self.enabled:
            return None
        return self._entries.get((source, target))

    def put(self, source: Hashable, target: Hashable, converter: Converter) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._entries[(source, target)] = converter

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def copy(self) -> "PathCache":
        """Independent cache holding a snapshot of the current entries."""
        with self._lock:
            return PathCache(self._entries, enabled=self.enabled)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
