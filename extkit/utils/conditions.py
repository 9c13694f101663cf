"""
extkit Conditions
=================

Helpers for values that may be None.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar


T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
R = TypeVar("R")


def or_default(value: Optional[T], default: T) -> T:
    """
    Return `value` unless it is None, else `default`.

    Unlike `value or default`, falsy values such as 0 and "" are kept.

    Example:
        >>> or_default(None, 5), or_default(0, 5)
        (5, 0)
    """
    return default if value is None else value


def map_or(
    value: Optional[T],
    default: R,
    block: Callable[[T], Optional[R]],
) -> R:
    """
    Apply `block` to a present value, falling back to `default`.

    The default is used when `value` is None or when `block` itself
    returns None.

    Example:
        >>> map_or("42", 0, int)
        42
        >>> map_or(None, 0, int)
        0
    """
    if value is None:
        return default
    return or_default(block(value), default)


def if_let(
    p1: Optional[T1],
    p2: Optional[T2],
    block: Callable[[T1, T2], R],
) -> Optional[R]:
    """
    Call `block(p1, p2)` only when both values are present.

    Returns:
        The block's result, or None if either value is None
    """
    if p1 is not None and p2 is not None:
        return block(p1, p2)
    return None
