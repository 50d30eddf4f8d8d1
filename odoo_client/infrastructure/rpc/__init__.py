"""XML-RPC transport over httpx."""

from odoo_client.infrastructure.rpc.xmlrpc_transport import (
    XmlRpcEndpoint,
    XmlRpcTransport,
)

__all__ = ["XmlRpcEndpoint", "XmlRpcTransport"]
