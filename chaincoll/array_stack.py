"""Stack of fixed capacity backed by an Array."""

from __future__ import annotations

from typing import Any

from chaincoll.array import Array
from chaincoll.common import EmptyError, FullError, Stack


class ArrayStack(Stack):
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        self._data = Array(capacity)
        self._top = 0

    def push(self, item: Any) -> None:
        """Put an item on top; raise FullError when there is no room."""
        if not self._data.is_valid_index(self._top):
            raise FullError("stack is full")
        self._data[self._top] = item
        self._top += 1

    def pop(self) -> Any:
        """Remove and return the top item; raise EmptyError when empty."""
        if self._top == 0:
            raise EmptyError("stack is empty")
        self._top -= 1
        item = self._data[self._top]
        self._data[self._top] = None
        return item

    def peek(self) -> Any:
        """Return the top item; raise EmptyError when empty."""
        if self._top == 0:
            raise EmptyError("stack is empty")
        return self._data[self._top - 1]

    def space(self) -> int:
        """Number of items that can still be pushed."""
        return len(self._data) - self._top

    def __len__(self) -> int:
        return self._top