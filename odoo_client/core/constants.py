"""Centralized constants for internal implementation details.

Environment-specific values belong in `odoo_client/core/config.py`. The
values here are protocol facts that callers must not tune.

Example:
    >>> from odoo_client.core.constants import OBJECT_ENDPOINT, DIRTY_SENTINEL
"""

# =============================================================================
# Remote endpoints
# =============================================================================

COMMON_ENDPOINT: str = "common"
"""Service exposing `version` and `authenticate`."""

OBJECT_ENDPOINT: str = "object"
"""Service exposing `execute_kw` for model methods."""


# =============================================================================
# Query defaults
# =============================================================================

DEFAULT_OFFSET: int = 0
"""Default number of records skipped by `search`."""

DEFAULT_LIMIT: int = 100
"""Default maximum number of records returned by `search` / `search_read`."""

DEFAULT_ORDER: str = ""
"""Default sort specification (server default ordering)."""


# =============================================================================
# Cache
# =============================================================================

DEFAULT_CACHE_TTL: int = 60 * 60
"""Standard time-to-live for every cache entry in seconds (one hour)."""

DIRTY_SENTINEL: str = "__odoo_client_dirty__"
"""Raw value marking a record set as modified since it was last read.

Responses are stored JSON-encoded, so no cached response can equal this
unquoted string.
"""

CACHE_KEY_VERSION: str = "v1"
"""Version tag mixed into every key digest. Bump when the key format changes."""
