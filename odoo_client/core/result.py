"""Result types for railway-oriented programming.

Cache adapters return a Result instead of raising, so a broken or missing
cache backend can never interrupt an RPC call that already succeeded.

Usage:
    result = adapter.get("odoo:search:1f0c...")
    match result:
        case Success(value=None):
            # Cache miss
            ...
        case Success(value=payload):
            return json.loads(payload)
        case Failure(error=err):
            logger.warning("Cache get failed", error=str(err))
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
