"""Singly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["LinkedList"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list with constant-time append and prepend."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it lands at the 0-based ``position``.

        A position at or past the end appends; a negative one raises IndexError.
        """
        if position < 0:
            raise IndexError(f"invalid position {position}")
        if position == 0:
            self.prepend(value)
        elif position >= self._size:
            self.append(value)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(value, previous.next)
            self._size += 1

    def remove(self, position: int) -> Any:
        """Remove and return the node at the 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"cannot remove node at position {position}")
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(position - 2)
            node = previous.next
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
        self._size -= 1
        return node.value

    def get(self, index: int) -> Any:
        """Return the value at the 0-based ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of bounds")
        return self._node_at(index).value

    def find(self, value: Any) -> int:
        """Return the 0-based index of the first node holding ``value``."""
        for index, item in enumerate(self):
            if item == value:
                return index
        raise ValueError(f"{value!r} is not in the list")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"