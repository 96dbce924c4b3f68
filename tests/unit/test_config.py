"""
Unit tests for settings.
"""
import pytest

from config import Settings, get_settings


class TestSettings:
    """Environment driven configuration."""

    def test_defaults(self, monkeypatch):
        """Defaults apply without environment variables."""
        for name in ("T2L_LOG_LEVEL", "T2L_LOG_FILE", "T2L_JSON_INDENT", "T2L_SOURCE_ENCODING"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.log_file is None
        assert settings.source_encoding == "utf-8-sig"
        assert settings.json_indent == 2

    def test_environment_prefix(self, monkeypatch):
        """T2L_ variables override the defaults."""
        monkeypatch.setenv("T2L_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("T2L_JSON_INDENT", "4")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.json_indent == 4

    def test_invalid_level_rejected(self, monkeypatch):
        """Unknown log levels are rejected."""
        monkeypatch.setenv("T2L_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        """get_settings returns one cached instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
