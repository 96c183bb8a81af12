"""First-in, first-out queues and a priority queue."""

from __future__ import annotations

from bisect import insort
from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = ["EmptyQueueError", "LinkedQueue", "StackQueue", "PriorityQueue"]


class EmptyQueueError(IndexError):
    """Raised when reading from or removing from an empty queue."""


class LinkedQueue:
    """FIFO queue; iteration runs from the newest item to the oldest."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` to the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest item."""
        if not self._items:
            raise EmptyQueueError("queue is already empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"


class StackQueue:
    """FIFO queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def enqueue(self, value: Any) -> None:
        """Add ``value`` to the back of the queue."""
        self._inbox.append(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest item."""
        self._refill()
        if not self._outbox:
            raise EmptyQueueError("queue is empty")
        return self._outbox.pop()

    def peek(self) -> Any:
        """Return the oldest item without removing it."""
        self._refill()
        if not self._outbox:
            raise EmptyQueueError("queue is empty")
        return self._outbox[-1]

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class PriorityQueue:
    """Queue kept in ascending order of priority number.

    Items of equal priority keep their insertion order. ``dequeue`` removes
    the item at the far end: the largest priority number, latest inserted.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[Any, Any]] = []

    def enqueue(self, value: Any, priority: Any) -> None:
        """Add ``value`` after every item whose priority is not larger."""
        insort(self._entries, (priority, value), key=lambda entry: entry[0])

    def dequeue(self) -> Any:
        """Remove and return the value with the largest priority number."""
        if not self._entries:
            raise EmptyQueueError("queue is empty")
        return self._entries.pop()[1]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(priority, value)`` pairs in queue order."""
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"PriorityQueue({list(self)!r})"