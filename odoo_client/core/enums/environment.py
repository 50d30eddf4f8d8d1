"""Runtime environment types.

Used by Settings and the logger factory:
- DEVELOPMENT: human-readable console logs
- TESTING / CI: JSON logs for machine parsing
- PRODUCTION: JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
