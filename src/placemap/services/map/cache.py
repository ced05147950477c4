"""Short-lived cache for map responses keyed by zoom level and viewport."""

from __future__ import annotations

import hashlib
import json
import threading
import time
from typing import Any, Callable, Optional

from cachetools import TTLCache

from ...models.domain import Bounds

DEFAULT_TTL_SECONDS = 300
DEFAULT_MAX_ENTRIES = 512


def make_cache_key(zoom: int, bounds: Optional[Bounds | dict]) -> str:
    """Key a response on zoom plus an md5 of the canonical bounds JSON."""
    if isinstance(bounds, Bounds):
        payload: Any = bounds.as_dict()
    else:
        payload = bounds
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    digest = hashlib.md5(canonical.encode("utf-8")).hexdigest()
    return f"places_map_{zoom}_{digest}"


class MapResultCache:
    """Thread-safe TTL cache with LRU eviction once ``max_entries`` is reached."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries: TTLCache = TTLCache(maxsize=max_entries, ttl=ttl_seconds, timer=timer)
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            self._entries.expire()
            return len(self._entries)

    def stats(self) -> dict[str, Any]:
        with self._lock:
            self._entries.expire()
            return {
                "size": len(self._entries),
                "maxsize": self._entries.maxsize,
                "ttlSeconds": self.ttl_seconds,
                "hits": self.hits,
                "misses": self.misses,
            }
