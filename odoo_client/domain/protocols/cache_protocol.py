"""Cache protocol: what the record cache needs from a key-value backend.

Infrastructure adapters implement this protocol to provide TTL-based storage.

Architecture:
- Protocol-based - uses structural typing
- All operations return Result types
- Fail-open strategy: backend failures must not break data operations
"""

from typing import Any, Protocol

from odoo_client.core.errors import DomainError
from odoo_client.core.result import Result


class CacheProtocol(Protocol):
    """Key-value backend with per-key expiration."""

    def get(self, key: str) -> Result[str | None, DomainError]:
        """Get raw string value.

        Returns:
            Result with value if found, None if not found, or CacheError.

        Example:
            result = cache.get("odoo:read_ids:9a1c...")
            match result:
                case Success(value=None):
                    # Cache miss
                    pass
                case Success(value=raw):
                    # Key found
                    pass
                case Failure(error):
                    # Cache error - fail open
                    logger.warning("Cache get failed", error=str(error))
        """
        ...

    def get_json(self, key: str) -> Result[Any, DomainError]:
        """Get JSON value, deserialized.

        Returns:
            Result with the decoded value, None if not found, or CacheError
            (including undecodable payloads).
        """
        ...

    def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Set raw string value.

        Args:
            key: Cache key.
            value: Value to cache (string).
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        ...

    def set_json(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Set JSON-serializable value.

        Returns:
            Result with None on success, or CacheError (including values that
            cannot be serialized).
        """
        ...

    def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete key.

        Returns:
            Result with True if key was deleted, False if key didn't exist,
            or CacheError.
        """
        ...

    def ping(self) -> Result[bool, DomainError]:
        """Check backend connectivity.

        Returns:
            Result with True if reachable, or CacheError.
        """
        ...

    def close(self) -> None:
        """Release backend connections."""
        ...
