"""Core building blocks shared by every layer.

- config: pydantic-settings configuration (ODOO_* environment variables)
- container: composition root (settings, logger, cache factory)
- result: Success/Failure result types
- errors/enums: DomainError hierarchy and machine-readable codes
"""
