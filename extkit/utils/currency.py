"""
extkit Currency Formatting
==========================

Locale-aware currency strings built on Babel's CLDR data.

Example:
    >>> to_currency(1234.5)
    '$1,234.50'
    >>> to_currency(1234.5, locale="de_DE")
    '1.234,50\xa0€'
    >>> to_currency(1234.5, locale="de_DE", show_symbol=False)
    '1.234,50'
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional, Union

from babel import Locale, UnknownLocaleError
from babel.numbers import (
    UnknownCurrencyError,
    format_currency,
    get_territory_currencies,
    validate_currency,
)

from extkit.core.config import get_settings
from extkit.core.exceptions import InvalidArgumentError


_NON_NUMERIC = re.compile(r"[^\d.,-]")


def _parse_locale(locale: Union[str, Locale, None]) -> Locale:
    if isinstance(locale, Locale):
        return locale
    if locale is None:
        locale = get_settings().locale
    try:
        return Locale.parse(locale)
    except (UnknownLocaleError, ValueError) as e:
        raise InvalidArgumentError(f"Unknown locale: {locale!r}") from e


def default_currency(locale: Union[str, Locale, None] = None) -> str:
    """
    Currency in use in the locale's territory.

    Raises:
        InvalidArgumentError: If the locale names no territory (e.g. plain "en")
    """
    loc = _parse_locale(locale)
    currencies = get_territory_currencies(loc.territory) if loc.territory else []
    if not currencies:
        raise InvalidArgumentError(
            f"Locale {str(loc)!r} has no territory currency; pass a currency code"
        )
    return currencies[0]


def to_currency(
    value: Optional[Union[int, float, Decimal]],
    locale: Union[str, Locale, None] = None,
    currency: Optional[str] = None,
    show_symbol: bool = True,
) -> str:
    """
    Format a number as money with exactly two decimal places.

    Args:
        value: Amount; None gives an empty string
        locale: Locale identifier such as "en_US" (settings default when None)
        currency: ISO 4217 code (the locale territory's currency when None)
        show_symbol: Keep the currency symbol; when False only digits,
            separators and the minus sign remain

    Returns:
        Formatted amount

    Raises:
        InvalidArgumentError: If the locale or currency is unknown
    """
    if value is None:
        return ""

    loc = _parse_locale(locale)
    code = (currency or default_currency(loc)).upper()

    try:
        validate_currency(code)
    except UnknownCurrencyError as e:
        raise InvalidArgumentError(f"Unknown currency: {code!r}") from e

    result = format_currency(value, code, locale=loc, currency_digits=False)

    if show_symbol:
        return result
    return _NON_NUMERIC.sub("", result).strip()
