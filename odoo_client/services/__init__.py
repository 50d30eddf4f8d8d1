"""Client-side services."""

from odoo_client.services.session_service import SessionService

__all__ = ["SessionService"]
