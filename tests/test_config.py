from __future__ import annotations

import pytest

from cbclient.config import DEFAULT_REST_BASE_URL, AppSettings, get_settings
from cbclient.utils.exceptions import ConfigurationError


def test_defaults_without_environment() -> None:
    settings = get_settings()

    assert settings.coinbase.rest_base_url == DEFAULT_REST_BASE_URL
    assert settings.coinbase.access_token is None
    assert settings.coinbase.timeout == 10.0
    assert settings.logging.normalized_level == "INFO"
    assert settings.logging.file_enabled is False


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COINBASE_ACCESS_TOKEN", "secret-token")
    monkeypatch.setenv("COINBASE_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE_NAME", "cbclient.log")

    settings = AppSettings.load()

    assert settings.coinbase.access_token is not None
    assert settings.coinbase.access_token.get_secret_value() == "secret-token"
    assert "secret-token" not in repr(settings.coinbase)
    assert settings.coinbase.timeout == 2.5
    assert settings.logging.normalized_level == "DEBUG"
    assert settings.logging.file_enabled is True


def test_malformed_number_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COINBASE_TIMEOUT", "soon")

    assert AppSettings.load().coinbase.timeout == 10.0


def test_invalid_value_raises_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COINBASE_TIMEOUT", "-1")

    with pytest.raises(ConfigurationError):
        AppSettings.load()


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
