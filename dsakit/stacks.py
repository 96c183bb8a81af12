"""Last-in, first-out stacks: one bounded and list-backed, one linked."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["StackOverflow", "EmptyStackError", "ArrayStack", "LinkedStack"]

DEFAULT_CAPACITY = 128


class StackOverflow(OverflowError):
    """Raised when pushing onto a full bounded stack."""


class EmptyStackError(IndexError):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """Stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The largest number of items the stack can hold."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise StackOverflow if the stack is full."""
        if len(self._items) >= self._capacity:
            raise StackOverflow("stack overflows")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise EmptyStackError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise EmptyStackError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({list(self)!r}, capacity={self._capacity})"


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None) -> None:
        self.value = value
        self.next = next_node


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise EmptyStackError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the top of the stack down to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"