"""Test doubles for the cache backend and the RPC transport.

InMemoryCache honours TTLs through time.time(), so freezegun can move it
past expiry. FakeTransport records every remote call and answers from a
table keyed by remote method (authenticate, version) or by the model method
passed to execute_kw (search, read, ...).
"""

import json
import time
from typing import Any

from odoo_client.core.result import Success


class InMemoryCache:
    """Dict-backed CacheProtocol implementation."""

    def __init__(self) -> None:
        self.store: dict[str, tuple[str, float | None]] = {}
        self.closed = False

    def _live(self, key: str) -> str | None:
        entry = self.store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and time.time() >= expires_at:
            del self.store[key]
            return None
        return value

    def get(self, key: str):
        return Success(value=self._live(key))

    def get_json(self, key: str):
        raw = self._live(key)
        return Success(value=None if raw is None else json.loads(raw))

    def set(self, key: str, value: str, ttl: int | None = None):
        expires_at = time.time() + ttl if ttl is not None else None
        self.store[key] = (value, expires_at)
        return Success(value=None)

    def set_json(self, key: str, value: Any, ttl: int | None = None):
        return self.set(key, json.dumps(value), ttl)

    def delete(self, key: str):
        return Success(value=self.store.pop(key, None) is not None)

    def ping(self):
        return Success(value=True)

    def close(self) -> None:
        self.closed = True


class FakeEndpoint:
    def __init__(self, transport: "FakeTransport", name: str) -> None:
        self.name = name
        self.url = f"http://odoo.test/xmlrpc/2/{name}"
        self._transport = transport

    def call(self, method: str, *params: Any) -> Any:
        return self._transport.dispatch(self.name, method, params)


class FakeTransport:
    """Records calls; raises or answers per configured response."""

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = {"authenticate": 2, **(responses or {})}
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.closed = False

    def endpoint(self, name: str) -> FakeEndpoint:
        return FakeEndpoint(self, name)

    def dispatch(self, endpoint: str, method: str, params: tuple[Any, ...]) -> Any:
        self.calls.append((endpoint, method, params))
        name = params[4] if method == "execute_kw" else method
        response = self.responses[name]
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return response(*params)
        return response

    def execute_calls(self, model_method: str | None = None) -> list[tuple[Any, ...]]:
        """Params of execute_kw calls, optionally filtered by model method."""
        return [
            params
            for _, method, params in self.calls
            if method == "execute_kw"
            and (model_method is None or params[4] == model_method)
        ]

    def method_calls(self, method: str) -> list[tuple[Any, ...]]:
        return [params for _, name, params in self.calls if name == method]

    def close(self) -> None:
        self.closed = True
