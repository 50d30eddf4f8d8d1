"""Record cache: read-through response caching with dirty markers.

Two implementations of RecordCacheProtocol, chosen once when the client is
built (see `odoo_client.core.container.get_record_cache`):

- RedisRecordCache: backend answered a ping at construction.
- NullRecordCache: backend unreachable or disabled; every operation is a
  silent no-op and every lookup is a miss. Never re-probed.

Key Patterns:
    - {prefix}:search:{digest}        -> JSON response
    - {prefix}:search_count:{digest}  -> JSON response
    - {prefix}:read:{digest}          -> JSON response
    - {prefix}:search_read:{digest}   -> JSON response
    - {prefix}:read_ids:{digest}      -> DIRTY_SENTINEL (one-shot)

The backend is never the source of truth: any backend failure is logged,
counted, and treated as a miss.
"""

from typing import Any

from odoo_client.core.constants import DEFAULT_CACHE_TTL, DIRTY_SENTINEL
from odoo_client.core.result import Success
from odoo_client.domain.protocols.cache_protocol import CacheProtocol
from odoo_client.domain.protocols.logger_protocol import LoggerProtocol
from odoo_client.infrastructure.cache.cache_keys import CacheKeys
from odoo_client.infrastructure.cache.cache_metrics import CacheMetrics


class RedisRecordCache:
    """Record cache backed by a CacheProtocol adapter.

    Note: Does NOT inherit from RecordCacheProtocol (uses structural typing).

    Attributes:
        _cache: Backend implementing CacheProtocol.
        _keys: Key builder (used for metric namespaces).
        _ttl: Standard time to live in seconds.
        _metrics: Hit/miss/error counters.
    """

    def __init__(
        self,
        cache: CacheProtocol,
        *,
        logger: LoggerProtocol,
        keys: CacheKeys | None = None,
        ttl: int = DEFAULT_CACHE_TTL,
        metrics: CacheMetrics | None = None,
    ) -> None:
        """Initialize record cache.

        Args:
            cache: Backend implementing CacheProtocol.
            logger: Structured logger.
            keys: Key builder; defaults to the "odoo" prefix.
            ttl: Standard time to live in seconds.
            metrics: Metrics tracker; a fresh one is created if omitted.
        """
        self._cache = cache
        self._logger = logger
        self._keys = keys or CacheKeys(prefix="odoo")
        self._ttl = ttl
        self._metrics = metrics or CacheMetrics()

    @property
    def available(self) -> bool:
        return True

    def get(self, key: str) -> Any | None:
        """Get a cached response.

        Args:
            key: Cache key.

        Returns:
            Decoded response if cached, None otherwise (miss or error).
        """
        namespace = self._keys.namespace_from_key(key)
        result = self._cache.get_json(key)

        match result:
            case Success(value=None):
                self._metrics.record_miss(namespace)
                self._logger.debug("Cache miss", key=key)
                return None
            case Success(value=value):
                self._metrics.record_hit(namespace)
                self._logger.debug("Cache hit", key=key)
                return value
            case _:
                # Cache error - fail open (treat as miss)
                self._metrics.record_error(namespace)
                self._metrics.record_miss(namespace)
                self._logger.warning(
                    "Cache error getting response",
                    key=key,
                    error=str(result.error),
                )
                return None

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store a response.

        Args:
            key: Cache key.
            value: JSON-serializable response.
            ttl: Time to live in seconds. If None, uses the standard TTL.
        """
        if ttl is None:
            ttl = self._ttl

        result = self._cache.set_json(key, value, ttl=ttl)
        if not isinstance(result, Success):
            self._metrics.record_error(self._keys.namespace_from_key(key))
            self._logger.warning(
                "Failed to cache response",
                key=key,
                error=str(result.error),
            )

    def mark_dirty(self, key: str) -> None:
        """Mark the record set identified by key as modified.

        Args:
            key: Dirty-marker key (CacheKeys.read_ids).
        """
        result = self._cache.set(key, DIRTY_SENTINEL, ttl=self._ttl)
        if not isinstance(result, Success):
            self._metrics.record_error(self._keys.namespace_from_key(key))
            self._logger.warning(
                "Failed to mark records dirty",
                key=key,
                error=str(result.error),
            )

    def consume_if_dirty(self, key: str) -> bool:
        """Consume the dirty marker at key.

        Args:
            key: Dirty-marker key (CacheKeys.read_ids).

        Returns:
            True if the marker was present (and has been deleted), False
            otherwise. Any other value at key is left untouched.
        """
        namespace = self._keys.namespace_from_key(key)
        result = self._cache.get(key)

        match result:
            case Success(value=value) if value == DIRTY_SENTINEL:
                deleted = self._cache.delete(key)
                if not isinstance(deleted, Success):
                    self._metrics.record_error(namespace)
                    self._logger.warning(
                        "Failed to clear dirty marker",
                        key=key,
                        error=str(deleted.error),
                    )
                self._metrics.record_invalidation(namespace)
                self._logger.debug("Dirty marker consumed", key=key)
                return True
            case Success():
                return False
            case _:
                self._metrics.record_error(namespace)
                self._logger.warning(
                    "Cache error checking dirty marker",
                    key=key,
                    error=str(result.error),
                )
                return False

    def stats(self, namespace: str | None = None) -> dict[str, Any]:
        """Counters for one key kind, or for every kind when namespace is None."""
        if namespace is not None:
            return self._metrics.get_stats(namespace)
        return self._metrics.get_all_stats()

    def close(self) -> None:
        self._cache.close()


class NullRecordCache:
    """Record cache used when the backend is unavailable.

    Every lookup is a miss, every write is dropped.
    """

    @property
    def available(self) -> bool:
        return False

    def get(self, key: str) -> Any | None:
        return None

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        return None

    def mark_dirty(self, key: str) -> None:
        return None

    def consume_if_dirty(self, key: str) -> bool:
        return False

    def stats(self, namespace: str | None = None) -> dict[str, Any]:
        return {}

    def close(self) -> None:
        return None
