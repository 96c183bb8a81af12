"""Small interview-style exercises on lists."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Any

__all__ = [
    "has_common_item_naive",
    "has_common_item",
    "find_pair_naive",
    "find_pair_sorted",
    "find_pair_unsorted",
    "first_recurring",
]


def has_common_item_naive(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """Compare every pair of items; two empty sequences count as matching."""
    if not first and not second:
        return True
    return any(a == b for a in first for b in second)


def has_common_item(first: Iterable[Hashable], second: Iterable[Hashable]) -> bool:
    """Return True if any item of ``second`` also occurs in ``first``."""
    seen = set(first)
    return any(item in seen for item in second)


def find_pair_naive(values: Sequence[int], total: int) -> tuple[int, int] | None:
    """Return the first pair at distinct positions summing to ``total``, or None."""
    for i, a in enumerate(values):
        for b in values[i + 1 :]:
            if a + b == total:
                return a, b
    return None


def find_pair_sorted(values: Sequence[int], total: int) -> tuple[int, int] | None:
    """Two-pointer pair search over an ascending sequence."""
    low, high = 0, len(values) - 1
    while low < high:
        current = values[low] + values[high]
        if current > total:
            high -= 1
        elif current < total:
            low += 1
        else:
            return values[low], values[high]
    return None


def find_pair_unsorted(values: Iterable[int], total: int) -> tuple[int, int] | None:
    """Single-pass pair search; returns ``(item, complement)`` for the first hit."""
    seen: set[int] = set()
    for value in values:
        complement = total - value
        if complement in seen:
            return value, complement
        seen.add(value)
    return None


def first_recurring(values: Iterable[Hashable]) -> Any:
    """Return the first item seen a second time, or None if all are distinct."""
    seen: set[Hashable] = set()
    for value in values:
        if value in seen:
            return value
        seen.add(value)
    return None