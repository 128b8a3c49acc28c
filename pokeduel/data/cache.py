"""Per-session lookup cache for provider responses.

Append-only and never invalidated: a battle run is short-lived and PokeAPI
data is effectively static. Not meant for long-running processes (no TTL).
"""
from __future__ import annotations
from typing import Any, Dict

# Returned by get() on a miss, so any stored value (None included) is a hit
MISSING: Any = object()

class LookupCache:
    def __init__(self):
        self._entries: Dict[str, Any] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: str, default: Any = MISSING) -> Any:
        if key in self._entries:
            self.hits += 1
            return self._entries[key]
        self.misses += 1
        return default

    def put(self, key: str, value: Any) -> None:
        # First write wins; entries are never replaced
        self._entries.setdefault(key, value)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

__all__ = ["LookupCache","MISSING"]
