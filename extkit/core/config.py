"""
extkit Configuration
====================

Package settings resolved from EXTKIT_* environment variables.

Variables:
    EXTKIT_DEBOUNCE_MS   Default debounce window in milliseconds (300)
    EXTKIT_LOCALE        Default locale for currency formatting (en_US)
    EXTKIT_LOG_LEVEL     DEBUG, INFO, WARNING, ERROR or CRITICAL (INFO)
    EXTKIT_LOG_FORMAT    "text" or "json" (text)

Example:
    settings = get_settings()
    gate = DebounceGate(settings.debounce_ms)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from extkit.core.exceptions import InvalidConfigurationError
from extkit.utils.env import Env
from extkit.utils.logger import LogLevel


ENV_PREFIX = "EXTKIT_"

DEFAULT_DEBOUNCE_MS = 300
DEFAULT_LOCALE = "en_US"
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class Settings:
    """Resolved package settings."""

    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    locale: str = DEFAULT_LOCALE
    log_level: LogLevel = LogLevel.INFO
    log_format: str = "text"

    def __post_init__(self) -> None:
        if isinstance(self.debounce_ms, bool) or not isinstance(self.debounce_ms, int):
            raise InvalidConfigurationError(
                f"debounce_ms must be an integer, got {self.debounce_ms!r}"
            )
        if self.debounce_ms < 0:
            raise InvalidConfigurationError(
                f"debounce_ms must be non-negative, got {self.debounce_ms}"
            )
        if not self.locale:
            raise InvalidConfigurationError("locale must not be empty")
        if self.log_format not in LOG_FORMATS:
            raise InvalidConfigurationError(
                f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}"
            )

    @classmethod
    def from_env(cls, env: Optional[Env] = None) -> "Settings":
        """
        Build settings from the environment.

        Args:
            env: Environment reader (process environment plus .env by default)

        Raises:
            InvalidConfigurationError: If a variable holds an unusable value
        """
        if env is None:
            env = Env().load()

        try:
            return cls(
                debounce_ms=env.int(f"{ENV_PREFIX}DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS),
                locale=env.str(f"{ENV_PREFIX}LOCALE", DEFAULT_LOCALE),
                log_level=LogLevel.parse(env.str(f"{ENV_PREFIX}LOG_LEVEL", "INFO")),
                log_format=env.str(f"{ENV_PREFIX}LOG_FORMAT", "text").strip().lower(),
            )
        except InvalidConfigurationError:
            raise
        except ValueError as e:
            raise InvalidConfigurationError(str(e)) from e


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the process-wide settings, loading them on first use."""
    global _settings

    if _settings is None:
        _settings = Settings.from_env()

    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
