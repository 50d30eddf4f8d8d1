"""Domain-level error codes (machine-readable).

Codes follow the ENTITY_ACTION_REASON convention and travel inside
DomainError values carried by Failure results.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Serialization errors
    SERIALIZATION_FAILED = "serialization_failed"

    # Cache errors
    CACHE_UNAVAILABLE = "cache_unavailable"
    CACHE_OPERATION_FAILED = "cache_operation_failed"
