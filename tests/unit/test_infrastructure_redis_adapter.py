"""Unit tests for RedisAdapter error mapping.

Happy paths run against a real Redis in
tests/integration/test_cache_redis.py. These tests use a mocked Redis client
to verify that every failure becomes a Failure(CacheError) and nothing is
raised.
"""

from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from odoo_client.core.enums import ErrorCode
from odoo_client.core.result import Failure, Success
from odoo_client.infrastructure.cache.redis_adapter import RedisAdapter
from odoo_client.infrastructure.enums import InfrastructureErrorCode
from odoo_client.infrastructure.errors import CacheError


@pytest.fixture
def redis_client():
    return MagicMock()


@pytest.fixture
def adapter(redis_client):
    return RedisAdapter(redis_client)


@pytest.mark.unit
class TestRedisAdapterSuccess:
    """Test value handling with a cooperative client."""

    def test_get_decodes_bytes(self, adapter, redis_client):
        redis_client.get.return_value = b"caf\xc3\xa9"

        result = adapter.get("key")

        assert result == Success(value="café")

    def test_get_json_parses(self, adapter, redis_client):
        redis_client.get.return_value = b'[{"id": 1}]'

        assert adapter.get_json("key") == Success(value=[{"id": 1}])

    def test_set_with_ttl_uses_setex(self, adapter, redis_client):
        """Test a TTL is applied atomically with SETEX."""
        result = adapter.set("key", "value", ttl=3600)

        assert isinstance(result, Success)
        redis_client.setex.assert_called_once_with("key", 3600, "value")
        redis_client.set.assert_not_called()

    def test_set_without_ttl(self, adapter, redis_client):
        adapter.set("key", "value")

        redis_client.set.assert_called_once_with("key", "value")

    def test_delete_reports_existence(self, adapter, redis_client):
        redis_client.delete.return_value = 0

        assert adapter.delete("key") == Success(value=False)

    def test_close(self, adapter, redis_client):
        adapter.close()

        redis_client.close.assert_called_once()


@pytest.mark.unit
class TestRedisAdapterFailures:
    """Test exceptions are mapped to Failure results."""

    def test_get_connection_error(self, adapter, redis_client):
        """Test RedisError on get maps to CACHE_GET_ERROR."""
        redis_client.get.side_effect = RedisConnectionError("Connection refused")

        result = adapter.get("key")

        assert isinstance(result, Failure)
        assert isinstance(result.error, CacheError)
        assert result.error.code == ErrorCode.CACHE_OPERATION_FAILED
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_GET_ERROR
        assert result.error.details["key"] == "key"

    def test_get_json_invalid_payload(self, adapter, redis_client):
        """Test an undecodable entry is a SERIALIZATION_FAILED failure."""
        redis_client.get.return_value = b"{not json"

        result = adapter.get_json("key")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SERIALIZATION_FAILED

    def test_get_json_propagates_get_failure(self, adapter, redis_client):
        redis_client.get.side_effect = RedisTimeoutError("Timeout reading from socket")

        result = adapter.get_json("key")

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_GET_ERROR

    def test_set_error(self, adapter, redis_client):
        redis_client.setex.side_effect = RedisConnectionError("Connection reset")

        result = adapter.set("key", "value", ttl=10)

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_SET_ERROR
        assert result.error.details["ttl"] == 10

    def test_set_json_unserializable(self, adapter, redis_client):
        """Test values JSON cannot encode fail without touching Redis."""
        result = adapter.set_json("key", {"when": object()}, ttl=10)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SERIALIZATION_FAILED
        redis_client.setex.assert_not_called()

    def test_delete_error(self, adapter, redis_client):
        redis_client.delete.side_effect = RedisConnectionError("Connection reset")

        result = adapter.delete("key")

        assert isinstance(result, Failure)
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.CACHE_DELETE_ERROR
        )

    def test_unexpected_error_is_mapped(self, adapter, redis_client):
        """Test non-Redis exceptions are mapped too."""
        redis_client.get.side_effect = OSError("Broken pipe")

        result = adapter.get("key")

        assert isinstance(result, Failure)
        assert result.error.details["type"] == "OSError"

    def test_ping_failure(self, adapter, redis_client):
        """Test an unreachable server maps to CACHE_UNAVAILABLE."""
        redis_client.ping.side_effect = RedisConnectionError("Connection refused")

        result = adapter.ping()

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CACHE_UNAVAILABLE
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.CACHE_CONNECTION_ERROR
        )
