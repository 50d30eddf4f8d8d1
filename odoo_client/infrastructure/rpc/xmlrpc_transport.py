"""XML-RPC transport for the remote business-data server.

Requests are encoded with `xmlrpc.client.dumps`, POSTed with httpx and
decoded with `xmlrpc.client.loads`. Errors are NOT translated:

- httpx.TimeoutException / httpx.RequestError: host unreachable
- httpx.HTTPStatusError: non-2xx response
- xmlrpc.client.Fault: remote fault (bad credentials, access rights, ...)
- xml.parsers.expat.ExpatError / xmlrpc.client.ResponseError: malformed body

Endpoint binding:
    Exactly one endpoint handle is active. Asking for the bound endpoint
    returns the same handle; asking for another one discards the previous
    handle and binds a new one. All handles share one httpx.Client.

Architecture:
    - Implements RpcTransportProtocol (structural typing)
    - Uses httpx for HTTP, xmlrpc.client only as the wire codec
"""

import xmlrpc.client
from threading import Lock
from typing import Any

import httpx

from odoo_client.domain.protocols.logger_protocol import LoggerProtocol

_HEADERS = {"Content-Type": "text/xml; charset=utf-8", "Accept": "text/xml"}


class XmlRpcEndpoint:
    """Handle bound to one remote service.

    Attributes:
        name: Endpoint name ("common" or "object").
        url: Full endpoint URL (host base + "/" + name).
    """

    def __init__(
        self,
        *,
        name: str,
        url: str,
        http_client: httpx.Client,
        logger: LoggerProtocol,
    ) -> None:
        self.name = name
        self.url = url
        self._http = http_client
        self._logger = logger

    def call(self, method: str, *params: Any) -> Any:
        """Invoke a remote method.

        Parameters are never logged (execute_kw carries the password).

        Args:
            method: Remote method name (e.g. "execute_kw").
            *params: Positional XML-RPC parameters.

        Returns:
            The decoded response value.

        Raises:
            httpx.HTTPError: Transport failure or non-2xx status.
            xmlrpc.client.Fault: Remote fault.
        """
        payload = xmlrpc.client.dumps(params, methodname=method, allow_none=True)
        self._logger.debug("RPC call", endpoint=self.name, method=method)

        response = self._http.post(
            self.url,
            content=payload.encode("utf-8"),
            headers=_HEADERS,
        )
        response.raise_for_status()

        result, _ = xmlrpc.client.loads(response.content)
        return result[0] if result else None

    def __repr__(self) -> str:
        return f"XmlRpcEndpoint(name={self.name!r}, url={self.url!r})"


class XmlRpcTransport:
    """XML-RPC transport holding the single active endpoint handle.

    Args:
        host: Base URL, e.g. "https://erp.example.com/xmlrpc/2".
        logger: Structured logger.
        timeout: HTTP timeout in seconds.
        http_client: Optional pre-built httpx.Client (tests inject one
            backed by httpx.MockTransport).
    """

    def __init__(
        self,
        host: str,
        *,
        logger: LoggerProtocol,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._host = host.rstrip("/")
        self._logger = logger
        self._http = http_client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._active: XmlRpcEndpoint | None = None
        self._lock = Lock()

    @property
    def active_endpoint(self) -> XmlRpcEndpoint | None:
        """Currently bound handle, if any."""
        return self._active

    def endpoint(self, name: str) -> XmlRpcEndpoint:
        """Return the handle for `name`, rebinding if needed.

        Args:
            name: Endpoint name ("common" or "object").

        Returns:
            The active XmlRpcEndpoint for `name`.
        """
        with self._lock:
            if self._active is not None and self._active.name == name:
                return self._active

            self._active = XmlRpcEndpoint(
                name=name,
                url=f"{self._host}/{name}",
                http_client=self._http,
                logger=self._logger,
            )
            self._logger.debug("Endpoint bound", endpoint=name, url=self._active.url)
            return self._active

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()
