"""
extkit Utils Package
====================

Null-safe helpers for strings, numbers, collections and currency, plus
logging and environment access.
"""

from __future__ import annotations

from extkit.utils.env import Env
from extkit.utils.logger import Logger, LogLevel, get_logger, configure_logging
from extkit.utils.conditions import or_default, map_or, if_let
from extkit.utils.numeric import or_zero, percentage_of, in_range_or, format_decimal
from extkit.utils.containers import (
    or_empty_list,
    or_empty_dict,
    or_empty_set,
    when_not_empty,
    safe_get_or_else,
    map_if_not_empty,
)
from extkit.utils.strings import (
    Validator,
    capitalize_first,
    to_title_case,
    remove_whitespaces,
    remove_special_chars,
    mask,
    word_count,
    total_chars,
    is_email,
    is_phone_number,
)

__all__ = [
    # Environment
    "Env",
    # Logging
    "Logger",
    "LogLevel",
    "get_logger",
    "configure_logging",
    # Conditions
    "or_default",
    "map_or",
    "if_let",
    # Numbers
    "or_zero",
    "percentage_of",
    "in_range_or",
    "format_decimal",
    # Collections
    "or_empty_list",
    "or_empty_dict",
    "or_empty_set",
    "when_not_empty",
    "safe_get_or_else",
    "map_if_not_empty",
    # Strings
    "Validator",
    "capitalize_first",
    "to_title_case",
    "remove_whitespaces",
    "remove_special_chars",
    "mask",
    "word_count",
    "total_chars",
    "is_email",
    "is_phone_number",
]
