"""Odoo XML-RPC client with transparent response caching.

Public CRUD operations composed from the session service, the XML-RPC
transport and the record cache.

Read-shaped operations (search, search_count, search_read):
    cache lookup -> on miss authenticate (first use only) -> execute_kw
    -> store under the same key -> return the response verbatim.

read:
    a dirty marker left by `write` for the same (model, ids) forces one live
    call; otherwise it behaves like the other read-shaped operations, keyed
    by (model, ids, fields).

Write-shaped operations (create, write, unlink):
    always live. Only `write` invalidates, and only the (model, ids) dirty
    key. `create` and `unlink` leave cached search/count/read results in
    place until they expire.

Transport errors propagate unchanged; cache problems never do.

Usage:
    with OdooClient("https://erp.example.com/xmlrpc/2", "prod", "admin", "secret") as odoo:
        ids = odoo.search("res.partner", [["is_company", "=", True]], limit=10)
        partners = odoo.read("res.partner", ids, ["name", "email"])
"""

from typing import Any, Mapping, Sequence

from odoo_client.core.config import Settings, get_settings
from odoo_client.core.constants import (
    COMMON_ENDPOINT,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    DEFAULT_ORDER,
    OBJECT_ENDPOINT,
)
from odoo_client.core.container import get_logger, get_record_cache
from odoo_client.domain.protocols.logger_protocol import LoggerProtocol
from odoo_client.domain.protocols.record_cache_protocol import RecordCacheProtocol
from odoo_client.domain.protocols.rpc_transport_protocol import RpcTransportProtocol
from odoo_client.domain.value_objects import ConnectionProfile
from odoo_client.infrastructure.cache.cache_keys import CacheKeys
from odoo_client.infrastructure.rpc.xmlrpc_transport import XmlRpcTransport
from odoo_client.services.session_service import SessionService


class OdooClient:
    """Client for the Odoo external XML-RPC API.

    Args:
        host: XML-RPC base URL (e.g. "https://erp.example.com/xmlrpc/2").
        database: Database to log into.
        user: Login of the remote user.
        password: Password or API key.
        cache: Record cache. If None, one is built from settings (Redis at
            127.0.0.1:6379 by default); an unreachable Redis is not an error.
        transport: RPC transport. If None, an XmlRpcTransport over httpx.
        settings: Settings; defaults to get_settings().
        logger: Structured logger; defaults to get_logger().
    """

    def __init__(
        self,
        host: str,
        database: str,
        user: str,
        password: str,
        *,
        cache: RecordCacheProtocol | None = None,
        transport: RpcTransportProtocol | None = None,
        settings: Settings | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._profile = ConnectionProfile(
            host=host,
            database=database,
            username=user,
            password=password,
        )
        self._logger = (logger or get_logger()).bind(database=database)
        self._keys = CacheKeys(prefix=self._settings.cache_key_prefix)
        self._cache = (
            cache
            if cache is not None
            else get_record_cache(self._settings, logger=self._logger)
        )
        self._transport = transport or XmlRpcTransport(
            host,
            logger=self._logger,
            timeout=self._settings.rpc_timeout,
        )
        self._session = SessionService(
            self._transport,
            self._profile,
            logger=self._logger,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "OdooClient":
        """Build a client from ODOO_URL, ODOO_DATABASE, ODOO_USERNAME, ODOO_PASSWORD.

        Raises:
            ValueError: If any part of the connection profile is missing.
        """
        settings = settings or get_settings()
        missing = [
            name
            for name in ("url", "database", "username", "password")
            if not getattr(settings, name)
        ]
        if missing:
            raise ValueError(f"Missing connection settings: {', '.join(missing)}")
        return cls(
            settings.url,
            settings.database,
            settings.username,
            settings.password,
            settings=settings,
            **kwargs,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def profile(self) -> ConnectionProfile:
        return self._profile

    @property
    def cache_available(self) -> bool:
        """False when the cache backend could not be reached at construction."""
        return self._cache.available

    @property
    def uid(self) -> int | None:
        """Session identifier, or None before the first data call."""
        return self._session.uid

    def cache_stats(self, namespace: str | None = None) -> dict[str, Any]:
        """Hit/miss/error counters per operation kind.

        Args:
            namespace: Key kind ("search", "read", ...). If None, counters
                for every kind seen so far, keyed by kind.
        """
        return self._cache.stats(namespace)

    # =========================================================================
    # Data operations
    # =========================================================================

    def version(self) -> dict[str, Any]:
        """Server version information (no authentication, never cached)."""
        return self._transport.endpoint(COMMON_ENDPOINT).call("version")

    def search(
        self,
        model: str,
        criteria: Sequence[Any],
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
        order: str = DEFAULT_ORDER,
    ) -> list[int]:
        """Search record ids.

        Args:
            model: Model name (e.g. "res.partner").
            criteria: Domain, e.g. [["active", "=", True]].
            offset: Number of records to skip.
            limit: Maximum number of ids.
            order: Sort specification. Not part of the cache key.

        Returns:
            List of record ids.
        """
        key = self._keys.search(model, criteria, offset, limit)
        return self._read_through(
            key,
            model,
            "search",
            [criteria],
            {"offset": offset, "limit": limit, "order": order},
        )

    def search_count(self, model: str, criteria: Sequence[Any]) -> int:
        """Count records matching a domain."""
        key = self._keys.search_count(model, criteria)
        return self._read_through(key, model, "search_count", [criteria])

    def read(
        self,
        model: str,
        ids: Sequence[int],
        fields: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Read records.

        A `write` on the same (model, ids) since the last read forces this
        call to go live, whatever `fields` is.

        Args:
            model: Model name.
            ids: Record ids.
            fields: Fields to fetch; empty or None fetches all fields.

        Returns:
            List of records.
        """
        fields = list(fields or [])
        key = self._keys.read(model, ids, fields)
        kwargs = {"fields": fields}

        if self._cache.consume_if_dirty(self._keys.read_ids(model, ids)):
            self._logger.debug("Records modified since last read", model=model)
            response = self._execute(model, "read", [ids], kwargs)
            self._cache.set(key, response)
            return response

        return self._read_through(key, model, "read", [ids], kwargs)

    def search_read(
        self,
        model: str,
        criteria: Sequence[Any],
        fields: Sequence[str] | None = None,
        limit: int = DEFAULT_LIMIT,
        order: str = DEFAULT_ORDER,
    ) -> list[dict[str, Any]]:
        """Search and read records in one call.

        Args:
            model: Model name.
            criteria: Domain.
            fields: Fields to fetch; empty or None fetches all fields.
            limit: Maximum number of records.
            order: Sort specification. Not part of the cache key.

        Returns:
            List of records.
        """
        fields = list(fields or [])
        key = self._keys.search_read(model, criteria, fields, limit)
        return self._read_through(
            key,
            model,
            "search_read",
            [criteria],
            {"fields": fields, "limit": limit, "order": order},
        )

    def create(self, model: str, data: Mapping[str, Any]) -> int:
        """Create a record and return its id. Does not touch the cache."""
        return self._execute(model, "create", [dict(data)])

    def write(
        self,
        model: str,
        ids: Sequence[int],
        fields: Mapping[str, Any],
    ) -> bool:
        """Update records and mark them dirty for the next `read`.

        Args:
            model: Model name.
            ids: Record ids to update.
            fields: Mapping of field name to new value.

        Returns:
            The server's success flag.
        """
        response = self._execute(model, "write", [ids, dict(fields)])
        self._cache.mark_dirty(self._keys.read_ids(model, ids))
        return response

    def unlink(self, model: str, ids: Sequence[int]) -> bool:
        """Delete records. Cached results that mention them stay until expiry."""
        return self._execute(model, "unlink", [ids])

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Release the HTTP client and the cache connection."""
        self._transport.close()
        self._cache.close()

    def __enter__(self) -> "OdooClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"OdooClient(host={self._profile.host!r}, "
            f"database={self._profile.database!r}, "
            f"user={self._profile.username!r})"
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _read_through(
        self,
        key: str,
        model: str,
        method: str,
        args: list[Any],
        kwargs: dict[str, Any] | None = None,
    ) -> Any:
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        response = self._execute(model, method, args, kwargs)
        self._cache.set(key, response)
        return response

    def _execute(
        self,
        model: str,
        method: str,
        args: list[Any],
        kwargs: dict[str, Any] | None = None,
    ) -> Any:
        uid = self._session.get_identifier()
        params: list[Any] = [
            self._profile.database,
            uid,
            self._profile.password,
            model,
            method,
            args,
        ]
        if kwargs is not None:
            params.append(kwargs)
        return self._transport.endpoint(OBJECT_ENDPOINT).call("execute_kw", *params)
