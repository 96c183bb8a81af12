"""Circular singly linked list whose last node links back to the first."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["CircularList"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self


class CircularList:
    """Circular singly linked list addressed by 0-based indices."""

    def __init__(self) -> None:
        self._tail: _Node | None = None
        self._size = 0

    def _node_at(self, index: int) -> _Node:
        node = self._tail.next
        for _ in range(index):
            node = node.next
        return node

    def insert_at_beginning(self, value: Any) -> None:
        """Add ``value`` as the new first node."""
        node = _Node(value)
        if self._tail is None:
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Add ``value`` as the new last node."""
        self.insert_at_beginning(value)
        self._tail = self._tail.next

    def insert_at(self, value: Any, index: int) -> None:
        """Insert ``value`` at ``index``; valid indices run from 0 to the length."""
        if not 0 <= index <= self._size:
            raise IndexError(f"invalid index {index}")
        if index == 0:
            self.insert_at_beginning(value)
        elif index == self._size:
            self.insert_at_end(value)
        else:
            previous = self._node_at(index - 1)
            node = _Node(value)
            node.next = previous.next
            previous.next = node
            self._size += 1

    def delete_at_beginning(self) -> Any:
        """Remove and return the first value."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def delete_at_end(self) -> Any:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        last = self._tail
        if self._size == 1:
            self._tail = None
        else:
            previous = self._node_at(self._size - 2)
            previous.next = last.next
            self._tail = previous
        self._size -= 1
        return last.value

    def delete_at(self, index: int) -> Any:
        """Remove and return the value at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"invalid index {index}")
        if index == 0:
            return self.delete_at_beginning()
        if index == self._size - 1:
            return self.delete_at_end()
        previous = self._node_at(index - 1)
        node = previous.next
        previous.next = node.next
        self._size -= 1
        return node.value

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"