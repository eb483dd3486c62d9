"""Map stored as a linked list of key-value items, searched linearly."""

from __future__ import annotations

import sys
from typing import Any, Iterator

from chaincoll.common import (
    CmpFn,
    KeyExistsError,
    KeyNotFoundError,
    Map,
    MapItem,
    default_cmp,
)
from chaincoll.linked_list import LinkedList, ListCursor


class ListMap(Map):
    """A map whose keys are matched with a three-way comparison function."""

    def __init__(self, cmp: CmpFn | None = None) -> None:
        self._data = LinkedList()
        self._cursor = ListCursor(self._data)
        self._cmp = cmp if cmp is not None else default_cmp

    def _move_to_item(self, key: Any) -> MapItem | None:
        self._cursor.reset()
        while not self._cursor.at_end():
            (item,) = self._cursor.get(0, 1)
            if self._cmp(key, item.key) == 0:
                return item
            self._cursor.move(1)
        return None

    def get(self, key: Any) -> Any:
        """Return the value under ``key``; raise KeyNotFoundError when absent."""
        item = self._move_to_item(key)
        if item is None:
            raise KeyNotFoundError(key)
        return item.value

    def set(self, key: Any, value: Any) -> Any:
        """Store ``value`` under ``key``; return the previous value or None."""
        item = self._move_to_item(key)
        if item is None:
            self._data.insert_tail(MapItem(key, value))
            return None
        previous, item.value = item.value, value
        return previous

    def set_new(self, key: Any, value: Any) -> None:
        """Store ``value`` under a new ``key``; raise KeyExistsError if present."""
        if self._move_to_item(key) is not None:
            raise KeyExistsError(key)
        self._data.insert_tail(MapItem(key, value))

    def delete(self, key: Any) -> MapItem:
        """Remove ``key`` and return its item; raise KeyNotFoundError when absent."""
        item = self._move_to_item(key)
        if item is None:
            raise KeyNotFoundError(key)
        self._cursor.move(1)
        self._cursor.remove(-1, 1)
        return item

    def dump(self, end: str = "\n") -> str:
        """Print every item as ``(index){key -> value}`` followed by ``end``; return the text."""
        text = "".join(
            f"({index}){{{item.key} -> {item.value}}} " for index, item in enumerate(self)
        ) + end
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    def __iter__(self) -> Iterator[MapItem]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)