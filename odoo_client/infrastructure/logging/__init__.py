"""Structured logging adapters (structlog)."""

from odoo_client.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
