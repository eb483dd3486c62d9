"""Unbounded stack backed by a LinkedList."""

from __future__ import annotations

from typing import Any

from chaincoll.common import EmptyError, Stack
from chaincoll.linked_list import LinkedList


class ListStack(Stack):
    """A last-in, first-out stack with no capacity limit."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def push(self, item: Any) -> None:
        """Put an item on top."""
        self._list.insert_head(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise EmptyError when empty."""
        try:
            return self._list.remove_head()
        except EmptyError:
            raise EmptyError("stack is empty") from None

    def peek(self) -> Any:
        """Return the top item; raise EmptyError when empty."""
        try:
            return self._list.head()
        except EmptyError:
            raise EmptyError("stack is empty") from None

    def __len__(self) -> int:
        return len(self._list)