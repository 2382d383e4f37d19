"""
In-process TTL cache of raw upstream records, keyed by region id.
"""
import asyncio
import time
from typing import Callable, Dict, List, Optional
from cachetools import TTLCache
from ..domain.protocols import RawLoader
from ...common.metrics import MetricsCollector


class RegionCache:
    """
    Raw feed cache for one provider.

    Concurrent misses on the same region share one in-flight load: the
    first caller starts it and every later caller awaits the same task, so
    one expiry costs one upstream call and one failure answers every
    waiter at once. Failed loads are not cached.
    """

    def __init__(
        self,
        ttl_seconds: float = 60.0,
        maxsize: int = 64,
        clock: Callable[[], float] = time.monotonic,
        metrics: Optional[MetricsCollector] = None
    ):
        self.ttl_seconds = ttl_seconds
        self._metrics = metrics
        self._entries = TTLCache(maxsize=maxsize, ttl=ttl_seconds, timer=clock)
        self._inflight: Dict[int, asyncio.Task] = {}

    def get(self, key: int) -> Optional[List[dict]]:
        """Returns live data for key, or None on miss/expiry."""
        return self._entries.get(key)

    def set(self, key: int, data: List[dict]):
        self._entries[key] = data

    async def get_or_load(self, key: int, loader: RawLoader) -> List[dict]:
        cached = self.get(key)
        if cached is not None:
            self._record_hit()
            return cached

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._load(key, loader))
            self._inflight[key] = task
        else:
            self._record_hit()

        # A cancelled caller must not cancel the load other callers share
        return await asyncio.shield(task)

    async def _load(self, key: int, loader: RawLoader) -> List[dict]:
        try:
            data = await loader()
            self.set(key, data)
            return data
        finally:
            self._inflight.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)

    def _record_hit(self):
        if self._metrics:
            self._metrics.record_cache_hit()
