"""Immutable value objects."""

from odoo_client.domain.value_objects.connection_profile import ConnectionProfile

__all__ = ["ConnectionProfile"]
