"""Cache key construction utilities.

Centralized key derivation so every data operation keys its responses the
same way. All keys follow the pattern: {prefix}:{kind}:{digest}

The digest is a SHA-256 over a canonical JSON encoding of the key-format
version, the key kind and the operation's identifying parameters, in order.
Lists stay order-sensitive (fields ["a", "b"] and ["b", "a"] are different
keys); mappings are encoded with sorted keys so equal dicts give equal keys.
Values JSON has no type for (XML-RPC DateTime, Binary, ...) are encoded as
{"__type__": <class name>, "value": str(value)}, so they never share a key
with a plain string of the same text.

Usage:
    from odoo_client.infrastructure.cache.cache_keys import CacheKeys

    keys = CacheKeys(prefix="odoo")
    key = keys.search("res.partner", [["active", "=", True]], 0, 100)
"""

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Sequence

from odoo_client.core.constants import CACHE_KEY_VERSION


def _tag_unencodable(value: Any) -> dict[str, str]:
    return {"__type__": type(value).__qualname__, "value": str(value)}


@dataclass(frozen=True)
class CacheKeys:
    """Centralized cache key construction utilities.

    Attributes:
        prefix: Cache key prefix (typically "odoo").

    Example:
        keys = CacheKeys(prefix="odoo")
        keys.read_ids("res.partner", [42])  # "odoo:read_ids:5d1e..."
    """

    prefix: str

    def search(
        self,
        model: str,
        criteria: Sequence[Any],
        offset: int,
        limit: int,
    ) -> str:
        """Key for `search` results.

        Pattern: {prefix}:search:{digest(model, criteria, offset, limit)}

        The sort order is not part of the key.
        """
        return self._build("search", model, criteria, offset, limit)

    def search_count(self, model: str, criteria: Sequence[Any]) -> str:
        """Key for `search_count` results.

        Pattern: {prefix}:search_count:{digest(model, criteria)}
        """
        return self._build("search_count", model, criteria)

    def read_ids(self, model: str, ids: Sequence[Any]) -> str:
        """Dirty-marker key for a record set.

        Pattern: {prefix}:read_ids:{digest(model, ids)}

        Written by `write`, consumed by `read`. Never holds a response.
        """
        return self._build("read_ids", model, ids)

    def read(
        self,
        model: str,
        ids: Sequence[Any],
        fields: Sequence[str],
    ) -> str:
        """Key for `read` results.

        Pattern: {prefix}:read:{digest(model, ids, fields)}
        """
        return self._build("read", model, ids, fields)

    def search_read(
        self,
        model: str,
        criteria: Sequence[Any],
        fields: Sequence[str],
        limit: int,
    ) -> str:
        """Key for `search_read` results.

        Pattern: {prefix}:search_read:{digest(model, criteria, fields, limit)}

        The sort order is not part of the key.
        """
        return self._build("search_read", model, criteria, fields, limit)

    def namespace_from_key(self, key: str) -> str:
        """Extract cache namespace (the key kind) for metrics tracking.

        Example:
            keys.namespace_from_key("odoo:search:ab12...")  # "search"
        """
        parts = key.split(":")
        if len(parts) >= 3:
            return parts[-2]
        return "unknown"

    def _build(self, kind: str, *parts: Any) -> str:
        return f"{self.prefix}:{kind}:{self.digest(kind, *parts)}"

    @staticmethod
    def digest(kind: str, *parts: Any) -> str:
        """Stable content hash of the ordered key inputs."""
        canonical = json.dumps(
            [CACHE_KEY_VERSION, kind, *parts],
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            default=_tag_unencodable,
        )
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
