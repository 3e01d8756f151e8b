"""
==============================================================================
Settings Tests
==============================================================================

Tests for environment-driven configuration.

==============================================================================
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from product_catalog.config import Settings, get_settings


class TestSettings:
    """Tests for Settings validation and helpers."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings(_env_file=None)
        assert settings.app_env == "development"
        assert settings.storage_backend == "sql"
        assert settings.database_url == "sqlite:///./storage/db/catalog.db"
        assert settings.is_development is True

    def test_env_overrides(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("STORAGE_BACKEND", "MEMORY")
        monkeypatch.setenv("APP_ENV", "production")
        settings = Settings(_env_file=None)
        assert settings.uses_memory_storage is True
        assert settings.is_production is True

    def test_unknown_env_falls_back(self):
        """Test unknown environments become development."""
        assert Settings(app_env="qa").app_env == "development"

    def test_invalid_backend_rejected(self):
        """Test unsupported storage backends fail validation."""
        with pytest.raises(ValidationError):
            Settings(storage_backend="redis")

    def test_invalid_log_level_rejected(self):
        """Test unknown log levels fail validation."""
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_effective_log_level(self):
        """Test debug mode forces DEBUG logging."""
        assert Settings(log_level="warning").effective_log_level == logging.WARNING
        assert Settings(log_level="warning", debug=True).effective_log_level == logging.DEBUG

    @pytest.mark.parametrize("url, expected", [
        ("sqlite:///./storage/db/catalog.db", Path("storage/db/catalog.db")),
        ("sqlite:////var/lib/catalog.db", Path("/var/lib/catalog.db")),
        ("sqlite://", None),
        ("sqlite:///:memory:", None),
        ("postgresql://user:pw@localhost/catalog", None),
    ])
    def test_database_path(self, url, expected):
        """Test SQLite file paths are extracted from URLs."""
        assert Settings(database_url=url).get_database_path() == expected

    def test_ensure_directories(self, tmp_path):
        """Test the SQLite directory is created."""
        db_file = tmp_path / "a" / "b" / "catalog.db"
        Settings(database_url=f"sqlite:///{db_file}").ensure_directories()
        assert db_file.parent.is_dir()

    def test_get_settings_cached(self):
        """Test get_settings returns one shared instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
