"""Ring buffer queue of fixed capacity backed by an Array."""

from __future__ import annotations

from typing import Any

from chaincoll.array import Array
from chaincoll.common import EmptyError, FullError, Queue


class Ring(Queue):
    """A queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        # One slot stays unused so that a full ring differs from an empty one.
        self._data = Array(capacity + 1)
        self._read = 0
        self._write = 0

    def _next_index(self, index: int) -> int:
        following = index + 1
        return following if self._data.is_valid_index(following) else 0

    def __len__(self) -> int:
        if self._write >= self._read:
            return self._write - self._read
        return len(self._data) + self._write - self._read

    def space(self) -> int:
        """Number of items that can still be enqueued."""
        return len(self._data) - len(self) - 1

    def enqueue(self, item: Any) -> None:
        """Add an item at the back; raise FullError when there is no room."""
        following = self._next_index(self._write)
        if following == self._read:
            raise FullError("ring is full")
        self._data[self._write] = item
        self._write = following

    def peek(self) -> Any:
        """Return the front item; raise EmptyError when empty."""
        if self._read == self._write:
            raise EmptyError("ring is empty")
        return self._data[self._read]

    def dequeue(self) -> Any:
        """Remove and return the front item; raise EmptyError when empty."""
        item = self.peek()
        self._data[self._read] = None
        self._read = self._next_index(self._read)
        return item