"""Session identifier management.

Obtains the numeric user id with one `authenticate` call on the "common"
endpoint and memoizes it for the client's lifetime.

Rules:
    - Once memoized, the identifier is never changed or re-fetched (there
      is no re-authentication when a server-side session expires).
    - Transport errors propagate unchanged and nothing is memoized, so the
      next data call authenticates again.
    - A falsy result (the server rejected the credentials) is returned but
      not memoized; the following execute_kw call surfaces the remote fault.
    - Initialisation is serialized with a lock so concurrent callers
      authenticate at most once.
"""

from threading import Lock
from typing import Any

from odoo_client.core.constants import COMMON_ENDPOINT
from odoo_client.domain.protocols.logger_protocol import LoggerProtocol
from odoo_client.domain.protocols.rpc_transport_protocol import RpcTransportProtocol
from odoo_client.domain.value_objects import ConnectionProfile


class SessionService:
    """Lazily authenticates and caches the session identifier.

    Attributes:
        _transport: RPC transport used for the authenticate call.
        _profile: Connection profile (database, username, password).
        _uid: Memoized identifier, None until authenticated.
    """

    def __init__(
        self,
        transport: RpcTransportProtocol,
        profile: ConnectionProfile,
        *,
        logger: LoggerProtocol,
    ) -> None:
        self._transport = transport
        self._profile = profile
        self._logger = logger
        self._uid: int | None = None
        self._lock = Lock()

    @property
    def uid(self) -> int | None:
        """Memoized identifier, or None if not authenticated yet."""
        return self._uid

    def get_identifier(self) -> Any:
        """Return the session identifier, authenticating on first use.

        Returns:
            The numeric user id (or the server's falsy answer when the
            credentials were rejected).

        Raises:
            Whatever the transport raises (network error, remote fault).
        """
        if self._uid is not None:
            return self._uid

        with self._lock:
            if self._uid is not None:
                return self._uid

            uid = self._transport.endpoint(COMMON_ENDPOINT).call(
                "authenticate",
                self._profile.database,
                self._profile.username,
                self._profile.password,
                {},
            )
            if not uid:
                self._logger.warning(
                    "Authentication rejected",
                    database=self._profile.database,
                    username=self._profile.username,
                )
                return uid

            self._uid = uid
            self._logger.info(
                "Authenticated",
                database=self._profile.database,
                username=self._profile.username,
                uid=uid,
            )
            return self._uid
