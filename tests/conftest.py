"""Pytest configuration and shared fixtures.

Unit tests run against in-memory doubles:
- fake_transport: records remote calls, answers from a response table
- memory_cache: dict-backed CacheProtocol honouring TTLs (freezegun-friendly)
- record_cache: RedisRecordCache over memory_cache
- client: OdooClient wired to both

Integration tests use a real Redis and are skipped when none is reachable.
"""

import os
from unittest.mock import MagicMock

import pytest
from redis import Redis
from redis.exceptions import RedisError

from odoo_client.client import OdooClient
from odoo_client.core.config import Settings
from odoo_client.infrastructure.cache.cache_keys import CacheKeys
from odoo_client.infrastructure.cache.record_cache import RedisRecordCache
from odoo_client.infrastructure.cache.redis_adapter import RedisAdapter
from tests.utils.fakes import FakeTransport, InMemoryCache


@pytest.fixture
def logger():
    """Structured logger double (bind() returns another MagicMock)."""
    return MagicMock()


@pytest.fixture
def settings():
    """Settings with the Redis probe disabled."""
    return Settings(cache_enabled=False)


@pytest.fixture
def keys():
    return CacheKeys(prefix="odoo")


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def memory_cache():
    return InMemoryCache()


@pytest.fixture
def record_cache(memory_cache, logger, keys):
    return RedisRecordCache(memory_cache, logger=logger, keys=keys, ttl=3600)


@pytest.fixture
def client(fake_transport, record_cache, settings, logger):
    """OdooClient with an available (in-memory) cache."""
    return OdooClient(
        "http://odoo.test/xmlrpc/2",
        "testdb",
        "admin",
        "secret",
        cache=record_cache,
        transport=fake_transport,
        settings=settings,
        logger=logger,
    )


@pytest.fixture
def redis_test_client():
    """Fresh Redis client on a scratch database, skipped if Redis is down."""
    client = Redis(
        host=os.getenv("ODOO_CACHE_HOST", "127.0.0.1"),
        port=int(os.getenv("ODOO_CACHE_PORT", "6379")),
        db=15,
        socket_connect_timeout=1,
    )
    try:
        client.ping()
    except RedisError:
        pytest.skip("Redis not reachable")

    client.flushdb()
    yield client

    client.flushdb()
    client.close()


@pytest.fixture
def cache_adapter(redis_test_client):
    return RedisAdapter(redis_test_client)
