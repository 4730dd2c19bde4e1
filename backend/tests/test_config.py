"""Configuration — tests for environment-driven settings.

Tests cover:
    - PORT defaults to 3333 when unset
    - Numeric PORT is honored
    - Non-numeric, empty or out-of-range PORT falls back to 3333
    - get_settings() is cached
"""

import pytest

from people_api.config import DEFAULT_PORT, Settings, get_settings


def test_port_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings(_env_file=None).port == DEFAULT_PORT == 3333


def test_numeric_port_is_used(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


@pytest.mark.parametrize("raw", ["abc", "", "0", "70000", "80.5"])
def test_invalid_port_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("PORT", raw)
    assert Settings(_env_file=None).port == DEFAULT_PORT


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FORMAT", "DOCS_URL", "HOST"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.host == "0.0.0.0"
    assert settings.docs_url == "/api-docs"
    assert settings.log_format == "text"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
