"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self, monkeypatch):
        """Settings should have sensible defaults."""
        for name in ("JWT_SECRET", "SESSION_SECRET", "ENVIRONMENT", "BCRYPT_ROUNDS", "DEBUG"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "API de Monitoramento"
        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.port == 3000
        assert settings.token_ttl_hours == 8
        assert settings.session_cookie_name == "session_token"
        assert settings.bcrypt_rounds == 10
        assert settings.supabase_timeout_seconds == 10

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000", "TOKEN_TTL_HOURS": "1"}):
            settings = Settings()
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.token_ttl_hours == 1

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "SUPABASE_DB_URL": "postgresql://localhost/test",
        }):
            settings = Settings()
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.supabase_db_url == "postgresql://localhost/test"

    @pytest.mark.parametrize("environment,expected", [
        ("production", True),
        ("PRODUCTION", True),
        ("development", False),
        ("test", False),
    ])
    def test_is_production(self, environment, expected):
        """is_production should follow ENVIRONMENT case-insensitively."""
        assert Settings(environment=environment).is_production is expected


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance until the cache is cleared."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
