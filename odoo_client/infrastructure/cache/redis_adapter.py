"""Redis adapter implementing CacheProtocol.

Wraps a synchronous Redis client and maps every Redis exception to a
CacheError inside a Failure result.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError with InfrastructureErrorCode
- Returns Result types for all operations
- Fail-open strategy for resilience
"""

import json
from typing import Any

from redis import Redis
from redis.exceptions import RedisError

from odoo_client.core.enums import ErrorCode
from odoo_client.core.result import Failure, Result, Success
from odoo_client.infrastructure.enums import InfrastructureErrorCode
from odoo_client.infrastructure.errors import CacheError


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Redis client instance.
        """
        self._redis = redis_client

    def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = self._redis.get(key)
            # Redis returns bytes or None
            if value is None:
                return Success(value=None)
            decoded = value.decode("utf-8") if isinstance(value, bytes) else value
            return Success(value=decoded)
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_OPERATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
                    message=f"Failed to get key '{key}' from cache",
                    details={"key": key, "error": str(e)},
                )
            )
        except Exception as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_OPERATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
                    message=f"Unexpected error getting key '{key}'",
                    details={"key": key, "error": str(e), "type": type(e).__name__},
                )
            )

    def get_json(self, key: str) -> Result[Any, CacheError]:
        """Get JSON value from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with parsed value if found, None if not found, or CacheError.
        """
        result = self.get(key)

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=val) if val is not None:
                try:
                    return Success(value=json.loads(val))
                except json.JSONDecodeError as e:
                    return Failure(
                        error=CacheError(
                            code=ErrorCode.SERIALIZATION_FAILED,
                            infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
                            message=f"Failed to parse JSON for key '{key}'",
                            details={"key": key, "error": str(e)},
                        )
                    )
            case Failure(error=err):
                return Failure(error=err)
            case _:
                # Unreachable but needed for type checker
                return Success(value=None)

    def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        try:
            if ttl is not None:
                self._redis.setex(key, ttl, value)
            else:
                self._redis.set(key, value)
            return Success(value=None)
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_OPERATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
                    message=f"Failed to set key '{key}' in cache",
                    details={"key": key, "ttl": ttl, "error": str(e)},
                )
            )
        except Exception as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_OPERATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
                    message=f"Unexpected error setting key '{key}'",
                    details={"key": key, "error": str(e), "type": type(e).__name__},
                )
            )

    def set_json(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set JSON value in Redis.

        Args:
            key: Cache key.
            value: JSON-serializable value.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.SERIALIZATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
                    message=f"Failed to serialize value for key '{key}'",
                    details={"key": key, "error": str(e)},
                )
            )
        return self.set(key, serialized, ttl)

    def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Args:
            key: Cache key to delete.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        try:
            deleted_count = self._redis.delete(key)
            return Success(value=deleted_count > 0)
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_OPERATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    message=f"Failed to delete key '{key}' from cache",
                    details={"key": key, "error": str(e)},
                )
            )
        except Exception as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_OPERATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    message=f"Unexpected error deleting key '{key}'",
                    details={"key": key, "error": str(e), "type": type(e).__name__},
                )
            )

    def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check).

        Returns:
            Result with True if Redis is reachable, or CacheError.
        """
        try:
            self._redis.ping()
            return Success(value=True)
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_UNAVAILABLE,
                    infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    message="Redis health check failed",
                    details={"error": str(e)},
                )
            )
        except Exception as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_UNAVAILABLE,
                    infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    message="Unexpected error during Redis health check",
                    details={"error": str(e), "type": type(e).__name__},
                )
            )

    def close(self) -> None:
        """Close the Redis connection pool."""
        self._redis.close()
