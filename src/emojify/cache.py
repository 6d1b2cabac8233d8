"""
Append-only memoization shared by the converter pipeline.

Entries are computed idempotently, so concurrent callers may race to compute
the same value; the first insert wins and later inserts return the stored
value. Lookups take the lock too so the hit/miss counters stay exact.
"""

import threading
from typing import Any, Dict, Generic, Hashable, Optional, TypeVar

V = TypeVar("V")

_MISSING: Any = object()


class InsertOnlyCache(Generic[V]):
    """Thread-safe insert-if-absent map with hit/miss statistics."""

    def __init__(self, name: str, max_entries: Optional[int] = None):
        self.name = name
        # Advisory only; reported by info()
        self.max_entries = max_entries

        self._entries: Dict[Hashable, V] = {}
        self._lock = threading.Lock()

        self._hits = 0
        self._misses = 0

    def lookup(self, key: Hashable) -> Any:
        """Return the cached value, or ``MISSING`` when the key was never stored."""
        with self._lock:
            value = self._entries.get(key, _MISSING)
            if value is _MISSING:
                self._misses += 1
            else:
                self._hits += 1
        return value

    def insert_if_absent(self, key: Hashable, value: V) -> V:
        """Store ``value`` unless another writer got there first; return the winner."""
        with self._lock:
            return self._entries.setdefault(key, value)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def info(self) -> Dict[str, Any]:
        with self._lock:
            hits, misses, entries = self._hits, self._misses, len(self._entries)
        total = hits + misses
        return {
            "name": self.name,
            "entries": entries,
            "max_entries": self.max_entries,
            "hits": hits,
            "misses": misses,
            "hit_rate": (hits / total) if total else 0.0,
        }


MISSING = _MISSING

__all__ = ["InsertOnlyCache", "MISSING"]
