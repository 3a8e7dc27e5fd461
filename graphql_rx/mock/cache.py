"""Minimal result cache keyed by operation cache key."""

from __future__ import annotations

import copy
from threading import RLock
from typing import Any, Dict, Mapping, Optional


class ResultCache:
    """Thread-safe mapping of cache key to result ``data``.

    Stored and returned values are deep copies so consumers cannot mutate
    cached state in place.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._entries: Dict[str, Mapping[str, Any]] = {}

    def read(self, key: str) -> Optional[Mapping[str, Any]]:
        with self._lock:
            entry = self._entries.get(key)
            return copy.deepcopy(entry) if entry is not None else None

    def write(self, key: str, data: Mapping[str, Any]) -> bool:
        """Store ``data``; returns ``True`` when the entry changed."""
        with self._lock:
            if self._entries.get(key) == data:
                return False
            self._entries[key] = copy.deepcopy(dict(data))
            return True

    def evict(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["ResultCache"]
