"""
extkit Core Package
===================

Errors and configuration shared by every extkit module.
"""

from __future__ import annotations

from extkit.core.exceptions import (
    ExtkitError,
    InvalidArgumentError,
    InvalidConfigurationError,
)
from extkit.core.config import Settings, get_settings, reset_settings

__all__ = [
    "ExtkitError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "Settings",
    "get_settings",
    "reset_settings",
]
