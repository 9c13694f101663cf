"""
extkit - Everyday Helpers for Built-in Types
============================================

Small, independent helpers for values that may be missing, strings,
numbers, collections, dates and currency, plus a debounce gate for
click-style handlers.

Features:
---------
- Debounce gate with thread-safe check-and-update
- Relative time labels ("5 minutes ago", "Yesterday", "25 Dec 2023")
- Ordinal day suffixes
- Null-safe string, number and collection helpers
- Locale-aware currency formatting

Quick Start:
    >>> from extkit import DebounceGate, relative_from_now, ordinal_day
    >>> gate = DebounceGate(300)
    >>> gate.attempt(lambda: print("clicked"), now=0)
    clicked
    True
    >>> gate.attempt(lambda: print("clicked"), now=120)
    False
    >>> ordinal_day(22)
    '22nd'
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from typing import TYPE_CHECKING

# Core imports (always available)
from extkit.core.exceptions import (
    ExtkitError,
    InvalidArgumentError,
    InvalidConfigurationError,
)
from extkit.timing.debounce import DebounceGate, safe_click
from extkit.timing.relative import (
    RelativeTimeKind,
    RelativeTimeLabel,
    human_friendly_date,
    ordinal_day,
    ordinal_suffix,
    relative_from_now,
    to_relative_time,
)

# Lazy imports: currency pulls in Babel's locale data
if TYPE_CHECKING:
    from extkit.core.config import Settings, get_settings
    from extkit.utils.currency import to_currency


def __getattr__(name: str):
    """Lazy loading of optional components for faster startup."""
    _imports = {
        "to_currency": "extkit.utils.currency",
        "Settings": "extkit.core.config",
        "get_settings": "extkit.core.config",
    }

    if name in _imports:
        import importlib
        module = importlib.import_module(_imports[name])
        return getattr(module, name)

    raise AttributeError(f"module 'extkit' has no attribute '{name}'")


__all__ = [
    # Metadata
    "__version__",
    "__license__",
    # Errors
    "ExtkitError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    # Debounce
    "DebounceGate",
    "safe_click",
    # Relative time
    "RelativeTimeKind",
    "RelativeTimeLabel",
    "relative_from_now",
    "to_relative_time",
    "human_friendly_date",
    "ordinal_suffix",
    "ordinal_day",
    # Lazy
    "to_currency",
    "Settings",
    "get_settings",
]
