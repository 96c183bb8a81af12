"""Fixed-size hash table for integer keys using open addressing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["HashTable"]

TABLE_SIZE = 128

_DELETED = object()


class HashTable:
    """Integer-keyed map with linear probing over ``TABLE_SIZE`` slots."""

    def __init__(self) -> None:
        self._slots: list[Any] = [None] * TABLE_SIZE

    @staticmethod
    def _probe(key: int) -> Iterator[int]:
        start = key % TABLE_SIZE
        for step in range(TABLE_SIZE):
            yield (start + step) % TABLE_SIZE

    def _locate(self, key: int) -> int | None:
        for slot_index in self._probe(key):
            slot = self._slots[slot_index]
            if slot is None:
                return None
            if slot is not _DELETED and slot[0] == key:
                return slot_index
        return None

    def insert(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        existing = self._locate(key)
        if existing is not None:
            self._slots[existing] = (key, value)
            return
        for slot_index in self._probe(key):
            slot = self._slots[slot_index]
            if slot is None or slot is _DELETED:
                self._slots[slot_index] = (key, value)
                return
        raise OverflowError("hash table is full")

    def get(self, key: int) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        slot_index = self._locate(key)
        if slot_index is None:
            raise KeyError(key)
        return self._slots[slot_index][1]

    def remove(self, key: int) -> None:
        """Delete ``key`` and its value; raise KeyError if absent."""
        slot_index = self._locate(key)
        if slot_index is None:
            raise KeyError(key)
        self._slots[slot_index] = _DELETED

    def items(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(key, value)`` pairs in slot order."""
        for slot in self._slots:
            if slot is not None and slot is not _DELETED:
                yield slot