"""A growable array that doubles its capacity when it runs out of room."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["DynamicArray"]

_INITIAL_CAPACITY = 2


class DynamicArray:
    """Array of values backed by a fixed block that doubles when full."""

    def __init__(self) -> None:
        self._slots: list[Any] = [None] * _INITIAL_CAPACITY
        self._size = 0

    def _grow(self) -> None:
        self._slots.extend([None] * len(self._slots))

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError(f"array indices must be integers, not {type(index).__name__}")
        if not 0 <= index < self._size:
            raise IndexError(f"array index {index} out of range")

    def append(self, value: Any) -> None:
        """Add ``value`` after the last item, growing the storage if needed."""
        if self._size == len(self._slots):
            self._grow()
        self._slots[self._size] = value
        self._size += 1

    def replace(self, index: int, value: Any) -> None:
        """Overwrite the item at ``index``.

        An ``index`` equal to the current capacity appends ``value`` instead.
        """
        if index == self.capacity():
            self.append(value)
            return
        self._check_index(index)
        self._slots[index] = value

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` at ``index``, shifting later items one place right."""
        if not isinstance(index, int):
            raise TypeError(f"array indices must be integers, not {type(index).__name__}")
        if not 0 <= index <= self._size:
            raise IndexError(f"array index {index} out of range")
        if self._size == len(self._slots):
            self._grow()
        self._slots[index + 1 : self._size + 1] = self._slots[index : self._size]
        self._slots[index] = value
        self._size += 1

    def pop(self, index: int | None = None) -> Any:
        """Remove and return the item at ``index``, or the last item if omitted."""
        if self._size == 0:
            raise IndexError("pop from empty array")
        if index is None:
            index = self._size - 1
        self._check_index(index)
        value = self._slots[index]
        self._slots[index : self._size - 1] = self._slots[index + 1 : self._size]
        self._size -= 1
        self._slots[self._size] = None
        return value

    def capacity(self) -> int:
        """Return how many items fit before the storage must grow."""
        return len(self._slots)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._slots[index]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[: self._size])

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r})"