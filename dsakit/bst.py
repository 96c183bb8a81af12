"""Unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["EmptyTreeError", "BinarySearchTree"]


class EmptyTreeError(LookupError):
    """Raised when deleting from a tree that holds no values."""


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Binary search tree; smaller values go left, equal or larger go right."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, value: Any) -> None:
        """Add ``value`` as a new leaf."""
        node = _Node(value)
        parent: _Node | None = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right
        if parent is None:
            self._root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove one node holding ``value``, keeping the ordering intact.

        Raise EmptyTreeError on an empty tree and KeyError if ``value`` is absent.
        """
        if self._root is None:
            raise EmptyTreeError("tree is empty")
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)

        if node.left is not None and node.right is not None:
            # Copy in the in-order successor, then unlink the successor instead.
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending (in-order) order."""
        pending: list[_Node] = []
        node = self._root
        while node is not None or pending:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"