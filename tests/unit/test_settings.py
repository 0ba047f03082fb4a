"""
Unit tests for settings and the application factory.
"""

import pytest
from pydantic import ValidationError

from backend.main import build_catalog_provider, create_app
from backend.settings import Settings
from infrastructure.exercisedb_client import ExerciseDBClient


@pytest.mark.unit
class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.environment == "test"
        assert settings.is_test is True
        assert settings.exercisedb_configured is False
        assert settings.catalog_cache_ttl_seconds == 3300
        assert settings.deload_session_limit == 20

    def test_environment_is_lowercased(self):
        assert Settings(environment="Production", _env_file=None).is_production

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="qa", _env_file=None)

    def test_cache_ttl_capped_at_one_hour(self):
        with pytest.raises(ValidationError):
            Settings(catalog_cache_ttl_seconds=7200, _env_file=None)

    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("RAPIDAPI_KEY", "secret")
        monkeypatch.setenv("DELOAD_SESSION_LIMIT", "30")

        settings = Settings(_env_file=None)

        assert settings.exercisedb_configured is True
        assert settings.deload_session_limit == 30


@pytest.mark.unit
class TestAppFactory:
    """Tests for create_app and build_catalog_provider."""

    def test_static_provider_without_key(self, test_settings):
        provider = build_catalog_provider(test_settings)

        assert provider.is_remote_configured is False

    def test_exercisedb_provider_with_key(self):
        settings = Settings(environment="test", rapidapi_key="secret", _env_file=None)

        provider = build_catalog_provider(settings)

        assert provider.is_remote_configured is True
        assert isinstance(provider._source, ExerciseDBClient)

    def test_app_state(self, test_settings):
        app = create_app(settings=test_settings)

        assert app.state.settings is test_settings
        assert app.state.catalog_provider.is_remote_configured is False
