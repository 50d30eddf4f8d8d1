"""Infrastructure enums package.

Usage:
    from odoo_client.infrastructure.enums import InfrastructureErrorCode
"""

from odoo_client.infrastructure.enums.infrastructure_error_code import (
    InfrastructureErrorCode,
)

__all__ = ["InfrastructureErrorCode"]
