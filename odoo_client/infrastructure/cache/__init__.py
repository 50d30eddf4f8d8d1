"""Cache infrastructure package.

Architecture:
- RedisAdapter: Redis implementation of CacheProtocol (Result types)
- CacheKeys: key derivation per data operation
- CacheMetrics: hit/miss/error counters per key kind
- RedisRecordCache / NullRecordCache: the record cache used by OdooClient
- Use odoo_client.core.container.get_record_cache() to build one
"""

from odoo_client.infrastructure.cache.cache_keys import CacheKeys
from odoo_client.infrastructure.cache.cache_metrics import CacheMetrics, CacheStats
from odoo_client.infrastructure.cache.record_cache import (
    NullRecordCache,
    RedisRecordCache,
)
from odoo_client.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = [
    "CacheKeys",
    "CacheMetrics",
    "CacheStats",
    "NullRecordCache",
    "RedisAdapter",
    "RedisRecordCache",
]
