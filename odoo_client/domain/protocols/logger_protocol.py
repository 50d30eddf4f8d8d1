"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging: a message plus key-value context.

Security:
    - NEVER log passwords or API keys. The client logs the login and the
      database, never the password.

Usage:
    from odoo_client.core.container import get_logger

    logger = get_logger()
    logger.info("Authenticated", database="prod", uid=2)

    scoped = logger.bind(database="prod")
    scoped.debug("RPC call", endpoint="object", method="search")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
