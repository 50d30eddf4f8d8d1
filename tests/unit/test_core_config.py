"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from ODOO_* environment variables
- Environment detection
- Validation (url, cache_ttl, log_level)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from odoo_client.core.config import Settings, get_settings
from odoo_client.core.enums import Environment


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default values with an empty environment."""

    def test_defaults(self):
        """Test every field has a usable default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.url is None
        assert settings.rpc_timeout == 30.0
        assert settings.cache_enabled is True
        assert settings.cache_host == "127.0.0.1"
        assert settings.cache_port == 6379
        assert settings.cache_db == 0
        assert settings.cache_ttl == 3600
        assert settings.cache_key_prefix == "odoo"


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test loading from ODOO_* variables."""

    def test_connection_profile(self):
        env = {
            "ODOO_URL": "https://erp.example.com/xmlrpc/2/",
            "ODOO_DATABASE": "prod",
            "ODOO_USERNAME": "bot",
            "ODOO_PASSWORD": "api-key",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = get_settings()

        assert settings.url == "https://erp.example.com/xmlrpc/2"
        assert settings.database == "prod"
        assert settings.username == "bot"
        assert settings.password == "api-key"

    def test_cache_settings(self):
        env = {
            "ODOO_CACHE_ENABLED": "false",
            "ODOO_CACHE_HOST": "redis",
            "ODOO_CACHE_PORT": "6380",
            "ODOO_CACHE_TTL": "60",
            "ODOO_CACHE_KEY_PREFIX": "erp",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = get_settings()

        assert settings.cache_enabled is False
        assert settings.cache_host == "redis"
        assert settings.cache_port == 6380
        assert settings.cache_ttl == 60
        assert settings.cache_key_prefix == "erp"

    def test_environment_detection(self):
        with patch.dict(os.environ, {"ODOO_ENVIRONMENT": "production"}, clear=True):
            settings = get_settings()

        assert settings.environment == Environment.PRODUCTION
        assert settings.is_development is False

    def test_get_settings_is_cached(self):
        """Test get_settings() returns the same instance."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_settings() is get_settings()


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_cache_ttl_must_be_positive(self, ttl):
        with pytest.raises(ValidationError, match="cache_ttl"):
            Settings(cache_ttl=ttl)

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_log_level_rejects_unknown(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="staging")
