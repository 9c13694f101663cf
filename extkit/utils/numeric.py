"""
extkit Number Helpers
=====================

Null-safe numeric defaults, percentages, range checks and decimal formatting.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Type, Union

from extkit.utils.conditions import or_default


Number = Union[int, float, Decimal]


def or_zero(value: Optional[Number], kind: Type = int) -> Number:
    """
    Return `value`, or zero of type `kind` when it is None.

    Example:
        >>> or_zero(None), or_zero(None, float), or_zero(7)
        (0, 0.0, 7)
    """
    return or_default(value, kind(0))


def percentage_of(value: Optional[Number], total: Optional[Number]) -> float:
    """
    Percentage that `value` represents of `total`.

    Returns 0.0 instead of failing when total is zero or either side is None.

    Example:
        >>> percentage_of(25, 200)
        12.5
    """
    if not total or value is None:
        return 0.0
    return float(value) / float(total) * 100


def in_range_or(value: Number, minimum: Number, maximum: Number, default: Number) -> Number:
    """Return `value` if minimum <= value <= maximum, else `default`."""
    if value is not None and minimum <= value <= maximum:
        return value
    return default


def format_decimal(value: Optional[Number], digits: int = 2) -> str:
    """
    Format with a fixed number of decimal places.

    Halves round away from zero, applied to the shortest decimal form of the
    value, so 1.005 gives "1.01" although the float sits just below it.

    Example:
        >>> format_decimal(3.14159)
        '3.14'
        >>> format_decimal(0.125)
        '0.13'
        >>> format_decimal(2.5, digits=0)
        '3'
    """
    if value is None:
        return ""
    if digits < 0:
        digits = 0

    amount = Decimal(str(value))
    if not amount.is_finite():
        return f"{value:.{digits}f}"

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + digits + 2)
        rounded = amount.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"
