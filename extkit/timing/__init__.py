"""
extkit Timing Package
=====================

Debounce gate and relative time labels.
"""

from __future__ import annotations

from extkit.timing.debounce import DebounceGate, monotonic_ms, safe_click
from extkit.timing.relative import (
    RelativeTimeKind,
    RelativeTimeLabel,
    format_date,
    format_short_date,
    human_friendly_date,
    ordinal_day,
    ordinal_suffix,
    relative_from_now,
    to_relative_time,
)

__all__ = [
    # Debounce
    "DebounceGate",
    "monotonic_ms",
    "safe_click",
    # Relative time
    "RelativeTimeKind",
    "RelativeTimeLabel",
    "relative_from_now",
    "to_relative_time",
    "human_friendly_date",
    "format_date",
    "format_short_date",
    "ordinal_suffix",
    "ordinal_day",
]
