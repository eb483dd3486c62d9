"""Doubly linked list with a sentinel node, plus a cursor for editing it in place."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from chaincoll.array import Array
from chaincoll.common import ContainerError, EmptyError


class CursorMoveError(ContainerError, IndexError):
    """Raised when a cursor offset points beyond either end of the list."""


class CursorGetError(ContainerError, IndexError):
    """Raised when fewer elements remain than a cursor read asked for."""


class RemovingCurrentError(ContainerError, ValueError):
    """Raised when a removal range would include the cursor's own element."""


class _Node:
    __slots__ = ("prev", "next", "data")

    def __init__(self, data: Any = None) -> None:
        self.prev: _Node = self
        self.next: _Node = self
        self.data = data

    def insert_before(self, data: Any) -> None:
        node = _Node(data)
        node.prev = self.prev
        node.next = self
        self.prev.next = node
        self.prev = node

    def insert_after(self, data: Any) -> None:
        node = _Node(data)
        node.next = self.next
        node.prev = self
        self.next.prev = node
        self.next = node

    def unlink(self) -> Any:
        self.prev.next = self.next
        self.next.prev = self.prev
        self.prev = self.next = self
        return self.data


class LinkedList:
    """A doubly linked list that keeps track of its size."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._root = _Node()
        self._size = 0
        if items is not None:
            for item in items:
                self.insert_tail(item)

    def _reset(self) -> None:
        self._root.prev = self._root
        self._root.next = self._root
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._root.next
        while node is not self._root:
            following = node.next
            yield node.data
            node = following

    def __reversed__(self) -> Iterator[Any]:
        node = self._root.prev
        while node is not self._root:
            preceding = node.prev
            yield node.data
            node = preceding

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        """Tell whether the list holds no elements."""
        return self._root.next is self._root

    def insert_head(self, data: Any) -> None:
        """Insert ``data`` at the front."""
        self._root.insert_after(data)
        self._size += 1

    def insert_tail(self, data: Any) -> None:
        """Insert ``data`` at the back."""
        self._root.insert_before(data)
        self._size += 1

    def _require_items(self) -> None:
        if self.is_empty():
            raise EmptyError("list is empty")

    def remove_head(self) -> Any:
        """Remove and return the first element; raise EmptyError when empty."""
        self._require_items()
        data = self._root.next.unlink()
        self._size -= 1
        return data

    def remove_tail(self) -> Any:
        """Remove and return the last element; raise EmptyError when empty."""
        self._require_items()
        data = self._root.prev.unlink()
        self._size -= 1
        return data

    def head(self) -> Any:
        """Return the first element; raise EmptyError when empty."""
        self._require_items()
        return self._root.next.data

    def tail(self) -> Any:
        """Return the last element; raise EmptyError when empty."""
        self._require_items()
        return self._root.prev.data

    def concat(self, other: LinkedList | None) -> None:
        """Move every element of ``other`` to the end of this list, leaving ``other`` empty."""
        if other is None:
            return
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other.is_empty():
            return
        root, other_root = self._root, other._root
        root.prev.next = other_root.next
        other_root.next.prev = root.prev
        root.prev = other_root.prev
        other_root.prev.next = root
        self._size += other._size
        other._reset()

    def to_array(self) -> Array:
        """Copy the elements, in order, into a new Array."""
        array = Array(self._size)
        for index, item in enumerate(self):
            array[index] = item
        return array


class ListCursor:
    """A position inside a LinkedList from which elements are read, inserted and removed.

    A new cursor stands at the end of the list; ``reset`` moves it to the first element.
    """

    def __init__(
        self,
        linked_list: LinkedList,
        remove_fn: Callable[[Any], Any] | None = None,
    ) -> None:
        self._list = linked_list
        self._remove_fn = remove_fn
        self._current = linked_list._root

    @property
    def linked_list(self) -> LinkedList:
        """The list this cursor walks."""
        return self._list

    def _relative(self, offset: int) -> _Node:
        root = self._list._root
        node = self._current
        if offset >= 0:
            # Moving forward may stop on the sentinel, which marks the end.
            while node is not root and offset > 0:
                node = node.next
                offset -= 1
        else:
            offset = -offset
            # Moving backward never steps onto the sentinel.
            while node.prev is not root and offset > 0:
                node = node.prev
                offset -= 1
        if offset > 0:
            raise CursorMoveError("cursor offset out of range")
        return node

    def get(self, offset: int = 0, count: int = 1) -> list[Any]:
        """Return ``count`` elements starting ``offset`` places from the cursor."""
        root = self._list._root
        node = self._relative(offset)
        result = []
        while len(result) < count and node is not root:
            result.append(node.data)
            node = node.next
        if len(result) < count:
            raise CursorGetError(
                f"only {len(result)} of {count} requested elements are available"
            )
        return result

    def move(self, offset: int) -> None:
        """Move the cursor ``offset`` places; a negative offset moves backward."""
        self._current = self._relative(offset)

    def insert_before(self, offset: int, data: Any) -> None:
        """Insert ``data`` before the element ``offset`` places from the cursor."""
        self._relative(offset).insert_before(data)
        self._list._size += 1

    def remove(self, offset: int, count: int = 1) -> list[Any]:
        """Remove ``count`` elements starting ``offset`` places from the cursor.

        The cursor's own element cannot be removed. Each removed element is passed
        to the cursor's ``remove_fn``, if any; the removed elements are returned.
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if offset <= 0 < offset + count:
            raise RemovingCurrentError("the range includes the cursor's element")
        first = self._relative(offset)
        stop = self._relative(offset + count)

        removed = []
        node = first
        while node is not stop:
            removed.append(node.data)
            node = node.next

        first.prev.next = stop
        stop.prev = first.prev
        self._list._size -= len(removed)

        if self._remove_fn is not None:
            for data in removed:
                self._remove_fn(data)
        return removed

    def at_end(self) -> bool:
        """Tell whether the cursor stands past the last element."""
        return self._current is self._list._root

    def reset(self) -> None:
        """Move the cursor to the first element (or the end of an empty list)."""
        self._current = self._list._root.next