"""Tests for settings loading."""

from onenote_api.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.onenote_api_root == "https://www.onenote.com/api"
    assert settings.onenote_api_version == "v1.0"
    assert settings.onenote_beta_version == "beta"
    assert settings.onenote_timeout_ms == 30_000
    assert settings.log_level == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("ONENOTE_TIMEOUT_MS", "5000")
    monkeypatch.setenv("onenote_auth_header", "Bearer abc")
    settings = Settings(_env_file=None)
    assert settings.onenote_timeout_ms == 5000
    assert settings.onenote_auth_header == "Bearer abc"


def test_get_settings_cached():
    assert get_settings() is get_settings()
