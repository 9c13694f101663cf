"""
Configuration Tests
"""

import pytest

from extkit.core.config import Settings, get_settings, reset_settings
from extkit.core.exceptions import InvalidConfigurationError
from extkit.utils.env import Env
from extkit.utils.logger import LogLevel


def test_defaults():
    settings = Settings.from_env(Env(environ={}))
    assert settings == Settings()
    assert settings.debounce_ms == 300
    assert settings.locale == "en_US"
    assert settings.log_level is LogLevel.INFO
    assert settings.log_format == "text"


def test_reads_prefixed_variables():
    env = Env(environ={
        "EXTKIT_DEBOUNCE_MS": "500",
        "EXTKIT_LOCALE": "fr_FR",
        "EXTKIT_LOG_LEVEL": "debug",
        "EXTKIT_LOG_FORMAT": "JSON",
    })

    settings = Settings.from_env(env)

    assert settings.debounce_ms == 500
    assert settings.locale == "fr_FR"
    assert settings.log_level is LogLevel.DEBUG
    assert settings.log_format == "json"


@pytest.mark.parametrize(
    "environ",
    [
        {"EXTKIT_DEBOUNCE_MS": "-1"},
        {"EXTKIT_DEBOUNCE_MS": "soon"},
        {"EXTKIT_LOG_LEVEL": "chatty"},
        {"EXTKIT_LOG_FORMAT": "xml"},
        {"EXTKIT_LOCALE": ""},
    ],
)
def test_invalid_values_raise_configuration_error(environ):
    with pytest.raises(InvalidConfigurationError):
        Settings.from_env(Env(environ=environ))


def test_settings_validate_on_construction():
    with pytest.raises(InvalidConfigurationError):
        Settings(debounce_ms=-10)


def test_get_settings_is_cached_until_reset(monkeypatch):
    monkeypatch.setenv("EXTKIT_DEBOUNCE_MS", "120")
    first = get_settings()

    monkeypatch.setenv("EXTKIT_DEBOUNCE_MS", "240")
    assert get_settings() is first

    reset_settings()
    assert get_settings().debounce_ms == 240
