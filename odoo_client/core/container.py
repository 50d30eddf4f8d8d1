"""Composition root.

Owns the factory logic that turns Settings into concrete adapters:
- get_logger(): structlog console adapter (singleton)
- get_record_cache(): Redis-backed record cache, or the null variant when
  Redis is disabled or does not answer a ping

Usage:
    from odoo_client.core.container import get_logger, get_record_cache

    logger = get_logger()
    cache = get_record_cache()
    cache.available  # False when Redis is down
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from odoo_client.core.config import Settings, get_settings
from odoo_client.core.result import Success

if TYPE_CHECKING:
    from odoo_client.domain.protocols.logger_protocol import LoggerProtocol
    from odoo_client.domain.protocols.record_cache_protocol import (
        RecordCacheProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from odoo_client.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


def get_record_cache(
    settings: Settings | None = None,
    *,
    logger: "LoggerProtocol | None" = None,
) -> "RecordCacheProtocol":
    """Build the record cache for one client.

    Availability is decided here, once: the Redis client is created and
    pinged. Any failure yields NullRecordCache and is never raised.

    Args:
        settings: Settings to read the cache address from.
        logger: Logger for the cache; defaults to get_logger().

    Returns:
        RedisRecordCache if Redis answered, NullRecordCache otherwise.
    """
    from redis import Redis

    from odoo_client.infrastructure.cache.cache_keys import CacheKeys
    from odoo_client.infrastructure.cache.record_cache import (
        NullRecordCache,
        RedisRecordCache,
    )
    from odoo_client.infrastructure.cache.redis_adapter import RedisAdapter

    settings = settings or get_settings()
    logger = logger or get_logger()

    if not settings.cache_enabled:
        logger.info("Response cache disabled")
        return NullRecordCache()

    redis_client = Redis(
        host=settings.cache_host,
        port=settings.cache_port,
        db=settings.cache_db,
        decode_responses=False,
        socket_connect_timeout=settings.cache_connect_timeout,
        socket_timeout=settings.cache_connect_timeout,
    )
    adapter = RedisAdapter(redis_client)

    result = adapter.ping()
    if not isinstance(result, Success):
        logger.warning(
            "Response cache unavailable, running uncached",
            host=settings.cache_host,
            port=settings.cache_port,
            error=str(result.error),
        )
        adapter.close()
        return NullRecordCache()

    logger.info(
        "Response cache connected",
        host=settings.cache_host,
        port=settings.cache_port,
        ttl=settings.cache_ttl,
    )
    return RedisRecordCache(
        adapter,
        logger=logger,
        keys=CacheKeys(prefix=settings.cache_key_prefix),
        ttl=settings.cache_ttl,
    )
