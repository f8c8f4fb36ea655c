from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from cachetools import LRUCache

from .config import CACHE_MAX_ENTRIES


class KeyedCache:
    """
    Small in-process cache split into named regions, one LRUCache per region.
    Reads refresh recency, so the least recently used entry is evicted first.
    """

    def __init__(self, max_entries: int = CACHE_MAX_ENTRIES):
        self.max_entries = max_entries
        self._regions: Dict[str, LRUCache] = {}
        self._lock = threading.Lock()

    def get_cached(self, key: str, region: str) -> Optional[Any]:
        with self._lock:
            bucket = self._regions.get(region)
            if bucket is None:
                return None
            return bucket.get(key)

    def set_cache(self, key: str, value: Any, region: str) -> None:
        with self._lock:
            bucket = self._regions.get(region)
            if bucket is None:
                bucket = self._regions[region] = LRUCache(maxsize=self.max_entries)
            bucket[key] = value

    def clear(self, region: Optional[str] = None) -> None:
        with self._lock:
            if region is None:
                self._regions.clear()
            else:
                self._regions.pop(region, None)

    def __len__(self) -> int:
        return sum(len(b) for b in self._regions.values())
