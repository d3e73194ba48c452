# src/storage/ttl_cache.py

"""Bounded in-memory cache with per-entry time-to-live."""

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Final

from src.config.settings import Settings

logger = logging.getLogger("smart_cart.cache")


class _Missing:
    """Sentinel type so ``None`` can be cached like any other value."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


@dataclass
class CacheEntry:
    """A cached value and the time it was stored."""

    value: Any
    timestamp: float


class TTLCache:
    """LRU cache whose entries expire ``ttl`` seconds after insertion.

    Expired entries are dropped when read.  Once ``max_entries`` is
    exceeded the least-recently-used entry is evicted, so memory stays
    bounded no matter how many distinct keys are requested.

    Not thread-safe, and two callers missing on the same key will both
    fetch and both store.
    """

    def __init__(
        self,
        ttl: float | None = None,
        max_entries: int | None = None,
    ) -> None:
        self.ttl: float = Settings.CACHE_TTL if ttl is None else ttl
        self.max_entries: int = (
            Settings.CACHE_MAX_ENTRIES
            if max_entries is None
            else max_entries
        )
        if self.max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        entry = self._entries.get(key)  # type: ignore[call-overload]
        return entry is not None and self._is_fresh(entry, time.time())

    def _is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.timestamp < self.ttl

    def get(self, key: str) -> Any:
        """Return the cached value, or ``MISSING`` when absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return MISSING
        if not self._is_fresh(entry, time.time()):
            del self._entries[key]
            logger.debug("Expired cache entry for '%s'", key)
            return MISSING
        self._entries.move_to_end(key)
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, timestamp=time.time())
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted least-recently-used entry '%s'", evicted)

    def clear(self) -> int:
        """Purge all entries and return how many were removed."""
        count = len(self._entries)
        self._entries.clear()
        logger.info("Cache purged (%d entries removed)", count)
        return count
