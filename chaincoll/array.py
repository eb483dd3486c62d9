"""Fixed-size array with bounds-checked access."""

from __future__ import annotations

from typing import Any, Iterator

from chaincoll.common import CmpFn


class Array:
    """A fixed number of slots; indices must lie in ``range(len(self))``."""

    def __init__(self, size: int, fill: Any = None) -> None:
        if size < 0:
            raise ValueError(f"array size must not be negative, got {size}")
        self._items: list[Any] = [fill] * size

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Array({self._items!r})"

    def is_valid_index(self, index: int) -> bool:
        """Tell whether ``index`` lies within the array."""
        return 0 <= index < len(self._items)

    def _check(self, index: int) -> None:
        if not self.is_valid_index(index):
            raise IndexError(
                f"index {index} out of range for array of {len(self._items)} elements"
            )

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check(index)
        return self._items[index]

    def set(self, index: int, value: Any) -> None:
        """Store ``value`` at ``index``."""
        self._check(index)
        self._items[index] = value

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def compare(self, cmp: CmpFn, i: int, j: int) -> int:
        """Compare the elements at ``i`` and ``j`` with ``cmp``."""
        return cmp(self._items[i], self._items[j])

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at ``i`` and ``j``."""
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def reverse(self, start: int = 0, end: int | None = None) -> None:
        """Reverse the elements in ``[start, end)``; ``end`` is clamped to the size."""
        if end is None:
            end = len(self._items)
        if start == end:
            raise ValueError("cannot reverse an empty range")
        if not self.is_valid_index(start):
            raise IndexError(
                f"start {start} out of range for array of {len(self._items)} elements"
            )
        end = min(end, len(self._items))
        if end < start:
            raise ValueError(f"range end {end} lies before start {start}")
        self._items[start:end] = self._items[start:end][::-1]