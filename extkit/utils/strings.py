"""
extkit String Helpers
=====================

Casing, cleanup, counting, masking and format validation for strings.

All helpers accept None and treat it as an empty string.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Pattern


Validator = Callable[[str], bool]

_WHITESPACE: Pattern = re.compile(r"\s")
_SPECIAL_CHARS: Pattern = re.compile(r"[^A-Za-z0-9 ]")
_EMAIL: Pattern = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE: Pattern = re.compile(r"\+?[0-9. ()-]{7,25}")


# =============================================================================
# Transformations
# =============================================================================

def capitalize_first(text: Optional[str]) -> str:
    """
    Title-case the first character, leaving the rest untouched.

    Example:
        >>> capitalize_first("hello World")
        'Hello World'
    """
    if not text:
        return ""
    return text[0].title() + text[1:]


def to_title_case(text: Optional[str]) -> str:
    """
    Capitalize the first letter of each space-separated word.

    Runs of spaces are preserved.

    Example:
        >>> to_title_case("the quick  fox")
        'The Quick  Fox'
    """
    if not text:
        return ""
    return " ".join(capitalize_first(word) for word in text.split(" "))


def remove_whitespaces(text: Optional[str]) -> str:
    """Strip every whitespace character, including inner ones."""
    if not text:
        return ""
    return _WHITESPACE.sub("", text)


def remove_special_chars(text: Optional[str]) -> str:
    """Keep only ASCII letters, digits and spaces."""
    if not text:
        return ""
    return _SPECIAL_CHARS.sub("", text)


def mask(
    text: Optional[str],
    start: int = 0,
    end: Optional[int] = None,
    char: str = "*",
) -> str:
    """
    Replace characters in [start, end) with `char`.

    Args:
        text: Input text
        start: First masked index (inclusive)
        end: Last masked index (exclusive), defaults to the end of the text
        char: Mask character

    Returns:
        Masked text of the same length

    Example:
        >>> mask("4111111111111111", end=12)
        '************1111'
    """
    if not text:
        return ""

    length = len(text)
    if end is None:
        end = length
    start = max(0, min(start, length))
    end = max(start, min(end, length))

    return text[:start] + char * (end - start) + text[end:]


# =============================================================================
# Counting
# =============================================================================

def word_count(text: Optional[str]) -> int:
    """Number of whitespace-separated words."""
    if not text:
        return 0
    return len(text.split())


def total_chars(text: Optional[str]) -> int:
    return len(text) if text else 0


# =============================================================================
# Validation
# =============================================================================

def is_email(text: Optional[str]) -> bool:
    """
    Check for a `user@domain.tld` shaped address.

    Example:
        >>> is_email("jane.doe@example.com"), is_email("jane@localhost")
        (True, False)
    """
    if not text:
        return False
    return _EMAIL.fullmatch(text) is not None


def is_phone_number(text: Optional[str]) -> bool:
    """
    Check for a loosely formatted phone number.

    Accepts an optional leading "+" followed by 7 to 25 digits, spaces,
    dots, hyphens or parentheses.
    """
    if not text:
        return False
    return _PHONE.fullmatch(text) is not None
