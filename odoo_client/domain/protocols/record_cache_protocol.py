"""Record cache protocol: read-through caching with one-shot invalidation.

The record cache sits between the data operations and a CacheProtocol
backend. It never raises: an unavailable or failing backend degrades to
"always miss".

Cache Strategy:
    - Read-shaped responses cached under a key derived from their parameters
    - `write` marks the (model, ids) key dirty
    - `read` consumes the dirty marker and goes live once
    - Every entry expires after the configured TTL (default one hour)

Key Patterns:
    - {prefix}:{kind}:{digest} (see CacheKeys)
"""

from typing import Any, Protocol


class RecordCacheProtocol(Protocol):
    """Record cache protocol (port)."""

    @property
    def available(self) -> bool:
        """Whether the backend was reachable at construction."""
        ...

    def get(self, key: str) -> Any | None:
        """Return the cached response, or None on miss or backend error."""
        ...

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store a response; failures are logged and swallowed."""
        ...

    def mark_dirty(self, key: str) -> None:
        """Store the dirty sentinel at key with the standard TTL."""
        ...

    def consume_if_dirty(self, key: str) -> bool:
        """Delete the dirty sentinel at key and return True if it was there.

        Any other value at key is left untouched and False is returned.
        """
        ...

    def stats(self, namespace: str | None = None) -> dict[str, Any]:
        """Hit/miss/error counters for one key namespace, or all of them."""
        ...

    def close(self) -> None:
        """Release the backend."""
        ...
