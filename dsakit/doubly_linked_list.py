"""Doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["DoublyLinkedList"]


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list addressed by 1-based positions."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front."""
        if self._head is None:
            self.append(value)
            return
        node = _Node(value)
        node.next = self._head
        self._head.prev = node
        self._head = node
        self._size += 1

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it becomes the node at 1-based ``position``.

        A position equal to the length appends ``value`` after the last node;
        positions below 1 or above the length raise IndexError.
        """
        if position > self._size:
            raise IndexError(f"position {position} is too large")
        if position < 1:
            raise IndexError(f"position {position} must be at least 1")
        if position == 1:
            self.prepend(value)
        elif position == self._size:
            self.append(value)
        else:
            target = self._node_at(position)
            node = _Node(value)
            node.prev = target.prev
            node.next = target
            target.prev.next = node
            target.prev = node
            self._size += 1

    def remove(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"cannot delete at position {position}")
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"