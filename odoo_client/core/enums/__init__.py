"""Core enums package.

Usage:
    from odoo_client.core.enums import ErrorCode, Environment
"""

from odoo_client.core.enums.environment import Environment
from odoo_client.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
