"""Tests for Settings configuration class."""

from pathlib import Path

import pytest


class TestSettingsDefaults:
    """Test that Settings loads sensible defaults."""

    def test_settings_loads_with_defaults(self, monkeypatch):
        """Settings should load default values when no env vars are set."""
        for var in ("DIRECTORY_PATH", "OUTPUT_DIR", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        from skillswap.config.settings import Settings

        settings = Settings(_env_file=None)

        assert settings.directory_path == Path("./data/skills.yaml")
        assert settings.output_dir == Path("./artifacts")
        assert settings.log_level == "INFO"


class TestSettingsFromEnvironment:
    """Test that Settings reads from environment variables."""

    def test_settings_reads_paths_from_env(self, monkeypatch):
        """Settings should read path configurations from environment."""
        monkeypatch.setenv("DIRECTORY_PATH", "/custom/skills.json")
        monkeypatch.setenv("OUTPUT_DIR", "/custom/output")

        from skillswap.config.settings import Settings

        settings = Settings(_env_file=None)
        assert settings.directory_path == Path("/custom/skills.json")
        assert settings.output_dir == Path("/custom/output")

    def test_settings_normalizes_log_level(self, monkeypatch):
        """Settings should upper-case LOG_LEVEL."""
        monkeypatch.setenv("LOG_LEVEL", "debug")

        from skillswap.config.settings import Settings

        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"


class TestSettingsValidation:
    """Test that Settings validates values correctly."""

    def test_settings_rejects_unknown_log_level(self, monkeypatch):
        """Settings should reject an unknown log level."""
        from pydantic import ValidationError

        from skillswap.config.settings import Settings

        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestGetSettings:
    """Test the settings singleton helpers."""

    def test_get_settings_is_singleton(self):
        """get_settings should return the same instance."""
        from skillswap.config.settings import get_settings

        assert get_settings() is get_settings()

    def test_reset_settings_clears_singleton(self):
        """reset_settings should clear the singleton."""
        from skillswap.config.settings import get_settings, reset_settings

        first = get_settings()
        reset_settings()
        assert get_settings() is not first
