"""Protocols implemented by infrastructure adapters and test doubles.

Usage:
    from odoo_client.domain.protocols import CacheProtocol, RecordCacheProtocol
"""

from odoo_client.domain.protocols.cache_protocol import CacheProtocol
from odoo_client.domain.protocols.logger_protocol import LoggerProtocol
from odoo_client.domain.protocols.record_cache_protocol import RecordCacheProtocol
from odoo_client.domain.protocols.rpc_transport_protocol import (
    RpcEndpointProtocol,
    RpcTransportProtocol,
)

__all__ = [
    "CacheProtocol",
    "LoggerProtocol",
    "RecordCacheProtocol",
    "RpcEndpointProtocol",
    "RpcTransportProtocol",
]
