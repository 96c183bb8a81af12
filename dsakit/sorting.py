"""Comparison sorts. Each takes any iterable and returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "better_bubble_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def better_bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops as soon as a pass makes no swap."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within the first ``size`` items."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, root)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
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


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable divide-and-conquer sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    """Partition around the last item; return the pivot's final position."""
    pivot = items[high]
    index = low
    for i in range(low, high):
        if items[i] < pivot:
            items[i], items[index] = items[index], items[i]
            index += 1
    items[high], items[index] = items[index], items[high]
    return index


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the last item of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by selecting the smallest remaining item for each position."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if items[j] < items[smallest]:
                smallest = j
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items