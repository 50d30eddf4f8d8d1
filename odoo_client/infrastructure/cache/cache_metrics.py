"""Cache metrics tracking for observability.

Lightweight in-memory hit/miss/error counters per cache namespace. The
namespace is the key kind ("search", "read", ...), so the hit rate of each
data operation can be watched separately.

Usage:
    metrics = CacheMetrics()
    metrics.record_hit("search")
    metrics.get_stats("search")["hit_rate"]
"""

from collections import defaultdict
from dataclasses import dataclass
from threading import Lock
from typing import Any


@dataclass
class CacheStats:
    """Cache statistics for a specific cache namespace.

    Attributes:
        hits: Number of cache hits (value found in cache).
        misses: Number of cache misses (value not in cache).
        errors: Number of cache operation errors.
        invalidations: Number of dirty markers consumed.
    """

    hits: int = 0
    misses: int = 0
    errors: int = 0
    invalidations: int = 0

    @property
    def total_requests(self) -> int:
        """Total cache requests (hits + misses)."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Cache hit rate (0.0 to 1.0)."""
        if self.total_requests == 0:
            return 0.0
        return self.hits / self.total_requests

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary for JSON serialization."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "errors": self.errors,
            "invalidations": self.invalidations,
            "total_requests": self.total_requests,
            "hit_rate": round(self.hit_rate, 4),
        }


class CacheMetrics:
    """Thread-safe in-memory cache metrics tracker.

    Example:
        metrics = CacheMetrics()
        metrics.record_hit("read")
        metrics.record_miss("search")
        metrics.get_all_stats()
    """

    def __init__(self) -> None:
        self._stats: dict[str, CacheStats] = defaultdict(CacheStats)
        self._lock = Lock()

    def record_hit(self, namespace: str) -> None:
        with self._lock:
            self._stats[namespace].hits += 1

    def record_miss(self, namespace: str) -> None:
        with self._lock:
            self._stats[namespace].misses += 1

    def record_error(self, namespace: str) -> None:
        with self._lock:
            self._stats[namespace].errors += 1

    def record_invalidation(self, namespace: str) -> None:
        with self._lock:
            self._stats[namespace].invalidations += 1

    def get_stats(self, namespace: str) -> dict[str, Any]:
        """Get statistics for a specific namespace.

        Returns:
            Dictionary with hits, misses, errors, invalidations,
            total_requests, hit_rate.
        """
        with self._lock:
            stats = self._stats.get(namespace, CacheStats())
            return stats.to_dict()

    def get_all_stats(self) -> dict[str, dict[str, Any]]:
        """Get statistics for all namespaces."""
        with self._lock:
            return {
                namespace: stats.to_dict() for namespace, stats in self._stats.items()
            }

