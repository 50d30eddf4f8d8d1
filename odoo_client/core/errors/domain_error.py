"""Base error value for railway-oriented results.

DomainError is NOT an exception. It is returned inside Failure results by
adapters that must never interrupt the caller (the cache layer). Errors from
the remote server travel as ordinary exceptions and are not wrapped.

Usage:
    from odoo_client.core.errors import DomainError
    from odoo_client.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from odoo_client.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
