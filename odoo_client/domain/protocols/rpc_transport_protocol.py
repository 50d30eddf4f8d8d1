"""RPC transport protocols.

The transport performs one synchronous remote call per invocation and
propagates every failure unchanged (network errors, HTTP errors, remote
faults). Retries, if ever wanted, belong to the caller.
"""

from typing import Any, Protocol


class RpcEndpointProtocol(Protocol):
    """Handle bound to one remote service ("common" or "object")."""

    name: str
    url: str

    def call(self, method: str, *params: Any) -> Any:
        """Invoke `method` with positional `params` and return the decoded result."""
        ...


class RpcTransportProtocol(Protocol):
    """Holds the single active endpoint handle."""

    def endpoint(self, name: str) -> RpcEndpointProtocol:
        """Return the handle for `name`, rebinding if another endpoint is active."""
        ...

    def close(self) -> None:
        """Release network resources."""
        ...
