"""
Shared test fixtures.
"""

import io
import os

import pytest

from extkit.core.config import reset_settings
from extkit.utils import logger as logger_module


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test without EXTKIT_* variables, .env files, cached settings or logging changes."""
    for key in list(os.environ):
        if key.startswith("EXTKIT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setitem(logger_module._defaults, "level", logger_module._defaults["level"])
    monkeypatch.setitem(logger_module._defaults, "handlers", logger_module._defaults["handlers"])
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def log_stream(monkeypatch):
    """Capture package log output at DEBUG level."""
    stream = io.StringIO()
    monkeypatch.setitem(logger_module._defaults, "level", logger_module.LogLevel.DEBUG)
    monkeypatch.setitem(
        logger_module._defaults,
        "handlers",
        [logger_module.StreamHandler(stream=stream)],
    )
    return stream


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    """Fake millisecond clock starting at 1000."""
    return FakeClock(1000.0)
