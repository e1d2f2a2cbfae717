# terraai/services/cache.py
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from ..utils.time import utcnow

DEFAULT_TTL = timedelta(minutes=30)

@dataclass
class CacheEntry:
    key: str
    value: Any
    timestamp: datetime

class TTLCache:
    """
    Process-local key/value store with lazy expiry.

    An entry is stale once `clock() - timestamp > ttl`; stale entries are
    skipped on read but stay in the map until evict()/purge_expired()/clear().
    """

    def __init__(self, ttl: timedelta = DEFAULT_TTL, clock: Callable[[], datetime] = utcnow):
        self.ttl = ttl
        self.clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def _fresh(self, entry: CacheEntry) -> bool:
        return self.clock() - entry.timestamp <= self.ttl

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is not None and self._fresh(entry):
            return entry.value
        return None

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(key=key, value=value, timestamp=self.clock())

    def evict(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def purge_expired(self) -> int:
        stale = [k for k, e in self._entries.items() if not self._fresh(e)]
        for k in stale:
            del self._entries[k]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._entries)
