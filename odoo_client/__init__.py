"""Odoo XML-RPC client with Redis-backed response caching.

Usage:
    from odoo_client import OdooClient

    odoo = OdooClient("https://erp.example.com/xmlrpc/2", "prod", "admin", "secret")
    odoo.search_count("res.partner", [["active", "=", True]])
"""

from odoo_client.client import OdooClient
from odoo_client.core.config import Settings, get_settings
from odoo_client.domain.value_objects import ConnectionProfile

__version__ = "0.1.0"

__all__ = [
    "ConnectionProfile",
    "OdooClient",
    "Settings",
    "get_settings",
]
