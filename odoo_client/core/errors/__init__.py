"""Core errors package.

Usage:
    from odoo_client.core.errors import DomainError
"""

from odoo_client.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
