"""Growable sequence stored as a chain of fixed-size Array nodes."""

from __future__ import annotations

from typing import Any, Iterable

from chaincoll.array import Array
from chaincoll.linked_list import LinkedList


class ArrayChain:
    """Append-only storage that grows by adding nodes of ``node_size`` slots."""

    def __init__(self, node_size: int) -> None:
        if node_size < 1:
            raise ValueError(f"node size must be at least 1, got {node_size}")
        self._node_size = node_size
        self._nodes = LinkedList()
        self._cursor: Array | None = None
        self._cursor_index = 0
        self._total = 0

    @property
    def node_size(self) -> int:
        """Number of slots in each node."""
        return self._node_size

    def _new_node(self) -> None:
        node = Array(self._node_size)
        self._nodes.insert_tail(node)
        self._cursor = node
        self._cursor_index = 0

    def add(self, elem: Any) -> None:
        """Append one element, starting a new node when the current one is full."""
        if self._cursor is None or not self._cursor.is_valid_index(self._cursor_index):
            self._new_node()
        self._cursor[self._cursor_index] = elem
        self._cursor_index += 1
        self._total += 1

    def extend(self, items: Iterable[Any]) -> None:
        """Append every element of ``items`` in order."""
        for item in items:
            self.add(item)

    def to_array(self, reserve: int = 0) -> Array:
        """Copy the elements into a new Array with ``reserve`` extra empty slots at the end."""
        if reserve < 0:
            raise ValueError(f"reserve must not be negative, got {reserve}")
        result = Array(self._total + reserve)
        index = 0
        for node in self._nodes:
            for item in node:
                if index >= self._total:
                    break
                result[index] = item
                index += 1
        return result

    def __len__(self) -> int:
        return self._total