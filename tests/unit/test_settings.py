"""Unit tests for the settings module."""

from event_facade.settings import Settings, get_settings


def test_settings_default_values(fresh_settings):
    """Test default values for settings."""
    settings = Settings()
    assert settings.CLONE is True
    assert settings.LOG_LEVEL == "INFO"
    assert settings.JSON_LOGS is False


def test_settings_from_environment(monkeypatch, fresh_settings):
    """Test EVENT_FACADE_* variables override defaults."""
    monkeypatch.setenv("EVENT_FACADE_CLONE", "false")
    monkeypatch.setenv("EVENT_FACADE_LOG_LEVEL", "DEBUG")
    settings = get_settings()
    assert settings.CLONE is False
    assert settings.LOG_LEVEL == "DEBUG"


def test_settings_cached(fresh_settings):
    """Test get_settings returns a singleton."""
    assert get_settings() is get_settings()


def test_paths():
    """Test that the packaged alias config is found."""
    settings = Settings()
    assert settings.ALIAS_CONFIG_PATH.name == "aliases.yaml"
    assert settings.ALIAS_CONFIG_PATH.exists()
