"""
Configuration management using Pydantic Settings.

Loads typed, validated configuration from ODOO_* environment variables.
Every field has a default so the client can be constructed from explicit
arguments without any environment at all.

Architecture:
- Flat Settings structure (no nesting)
- Type validation via Pydantic
- Cached singleton via get_settings()

Usage:
    from odoo_client.core.config import get_settings

    settings = get_settings()
    settings.cache_host  # "127.0.0.1"
    settings.cache_ttl   # 3600
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from odoo_client.core.constants import DEFAULT_CACHE_TTL
from odoo_client.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Client settings (flat structure).

    Configuration precedence:
        1. Environment variables (ODOO_ prefix)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Connection profile (used by OdooClient.from_settings)
    url: str | None = Field(
        default=None,
        description="XML-RPC base URL (e.g., https://erp.example.com/xmlrpc/2)",
    )
    database: str | None = Field(
        default=None,
        description="Database to log into",
    )
    username: str | None = Field(
        default=None,
        description="Login of the remote user",
    )
    password: str | None = Field(
        default=None,
        description="Password or API key of the remote user",
    )
    rpc_timeout: float = Field(
        default=30.0,
        description="HTTP timeout for every remote call in seconds",
    )

    # Cache configuration (Redis)
    cache_enabled: bool = Field(
        default=True,
        description="Disable to run every operation live without probing Redis",
    )
    cache_host: str = Field(
        default="127.0.0.1",
        description="Redis host",
    )
    cache_port: int = Field(
        default=6379,
        description="Redis port",
    )
    cache_db: int = Field(
        default=0,
        description="Redis logical database",
    )
    cache_connect_timeout: float = Field(
        default=1.0,
        description="Redis socket connect timeout in seconds (availability probe)",
    )
    cache_ttl: int = Field(
        default=DEFAULT_CACHE_TTL,
        description="Time to live of every cache entry in seconds",
    )
    cache_key_prefix: str = Field(
        default="odoo",
        description="Prefix of every cache key",
    )

    model_config = SettingsConfigDict(
        env_prefix="ODOO_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """
        Remove trailing slashes from the base URL.

        Args:
            v: URL string.

        Returns:
            str | None: URL without trailing slash.
        """
        return v.rstrip("/") if v else v

    @field_validator("cache_ttl")
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:
        """
        Validate cache TTL is positive.

        Raises:
            ValueError: If TTL is zero or negative.
        """
        if v <= 0:
            raise ValueError("cache_ttl must be a positive number of seconds")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level to upper case and reject unknown levels."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
