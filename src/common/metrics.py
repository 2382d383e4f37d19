from dataclasses import dataclass
from typing import Dict
import threading
import time

@dataclass
class FetchMetrics:
    """Upstream fetch counters for one provider"""
    upstream_calls: int
    cache_hits: int
    upstream_failures: int
    records_dropped: int
    uptime_seconds: float

    def to_dict(self) -> Dict:
        return {
            'upstream_calls': self.upstream_calls,
            'cache_hits': self.cache_hits,
            'upstream_failures': self.upstream_failures,
            'records_dropped': self.records_dropped,
            'uptime_seconds': round(self.uptime_seconds, 1)
        }


class MetricsCollector:
    """Collects upstream fetch counters for a provider"""

    def __init__(self):
        self.upstream_calls = 0
        self.cache_hits = 0
        self.upstream_failures = 0
        self.records_dropped = 0
        self.start_time = time.time()
        self._lock = threading.Lock()

    def record_upstream_call(self):
        with self._lock:
            self.upstream_calls += 1

    def record_cache_hit(self):
        with self._lock:
            self.cache_hits += 1

    def record_failure(self):
        with self._lock:
            self.upstream_failures += 1

    def record_dropped(self, count: int = 1):
        with self._lock:
            self.records_dropped += count

    def get_metrics(self) -> FetchMetrics:
        with self._lock:
            return FetchMetrics(
                upstream_calls=self.upstream_calls,
                cache_hits=self.cache_hits,
                upstream_failures=self.upstream_failures,
                records_dropped=self.records_dropped,
                uptime_seconds=time.time() - self.start_time
            )
