"""Basic list operations: filtering, merging, reversing and searching."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "remove_elements",
    "move_zeroes",
    "merge_sorted",
    "reverse_string",
    "linear_search",
    "binary_search",
    "binary_search_recursive",
]


def remove_elements(values: Iterable[Any], target: Any) -> list[Any]:
    """Return the items that differ from ``target``, in their original order."""
    return [value for value in values if value != target]


def move_zeroes(values: Iterable[int]) -> list[int]:
    """Return the non-zero items in order, followed by all the zeros."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the item from ``first`` comes before the one from ``second``.
    """
    left, right = list(first), list(second)
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def linear_search(values: Iterable[Any], key: Any) -> int:
    """Return the index of the first item equal to ``key``, or -1 if absent."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return -1


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending ``values``, or -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def binary_search_recursive(values: Sequence[Any], key: Any) -> int:
    """Recursive binary search; same contract as :func:`binary_search`."""

    def search(low: int, high: int) -> int:
        if low > high:
            return -1
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(values) - 1)