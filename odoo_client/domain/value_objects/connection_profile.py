"""Connection profile value object.

Immutable after construction and owned by one client instance. The password
is excluded from repr so profiles can be logged safely.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, kw_only=True)
class ConnectionProfile:
    """Where and as whom the client connects.

    Attributes:
        host: XML-RPC base URL (endpoint names are appended to it).
        database: Database to log into.
        username: Login of the remote user.
        password: Password or API key (hidden from repr).
    """

    host: str
    database: str
    username: str
    password: str = field(repr=False)
