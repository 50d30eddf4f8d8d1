"""Infrastructure errors package.

Usage:
    from odoo_client.infrastructure.errors import CacheError
"""

from odoo_client.infrastructure.errors.infrastructure_error import (
    CacheError,
    InfrastructureError,
)

__all__ = [
    "InfrastructureError",
    "CacheError",
]
