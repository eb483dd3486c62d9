"""Unbounded queue backed by a LinkedList."""

from __future__ import annotations

from typing import Any

from chaincoll.common import EmptyError, Queue
from chaincoll.linked_list import LinkedList


class ListQueue(Queue):
    """A first-in, first-out queue with no capacity limit."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def enqueue(self, item: Any) -> None:
        """Add an item at the back."""
        self._list.insert_tail(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise EmptyError when empty."""
        try:
            return self._list.remove_head()
        except EmptyError:
            raise EmptyError("queue is empty") from None

    def peek(self) -> Any:
        """Return the front item; raise EmptyError when empty."""
        try:
            return self._list.head()
        except EmptyError:
            raise EmptyError("queue is empty") from None

    def __len__(self) -> int:
        return len(self._list)