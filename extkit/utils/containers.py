"""
extkit Collection Helpers
=========================

Null-safe access to lists, dicts and sets.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Set, TypeVar


T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")


def or_empty_list(items: Optional[List[T]]) -> List[T]:
    """Return `items`, or a new empty list when it is None."""
    return [] if items is None else items


def or_empty_dict(mapping: Optional[Dict[K, V]]) -> Dict[K, V]:
    """Return `mapping`, or a new empty dict when it is None."""
    return {} if mapping is None else mapping


def or_empty_set(items: Optional[Set[T]]) -> Set[T]:
    """Return `items`, or a new empty set when it is None."""
    return set() if items is None else items


def when_not_empty(items: Optional[Sequence[T]], block: Callable[[Sequence[T]], Any]) -> None:
    """Call `block(items)` only if items is neither None nor empty."""
    if items:
        block(items)


def safe_get_or_else(items: Optional[Sequence[T]], index: int, default: T) -> T:
    """
    Element at `index`, or `default` when the sequence is None or the index
    is out of bounds.

    Negative indices count as out of bounds rather than indexing from the end.

    Example:
        >>> safe_get_or_else([1, 2, 3], 5, 0)
        0
    """
    if items is not None and 0 <= index < len(items):
        return items[index]
    return default


def map_if_not_empty(items: Optional[Sequence[T]], transform: Callable[[T], R]) -> List[R]:
    """
    Map `transform` over items, or return [] for None / empty input.

    Example:
        >>> map_if_not_empty([1, 2, 3], lambda n: n * n)
        [1, 4, 9]
        >>> map_if_not_empty(None, lambda n: n * n)
        []
    """
    if not items:
        return []
    return [transform(item) for item in items]
