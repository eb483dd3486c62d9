"""In-place sorting of an Array with a three-way comparison function."""

from __future__ import annotations

from chaincoll.array import Array
from chaincoll.common import CmpFn


def _require_cmp(cmp: CmpFn | None) -> CmpFn:
    if cmp is None:
        raise ValueError("a comparison function is required")
    return cmp


def _divide(array: Array, cmp: CmpFn, start: int, end: int) -> int:
    middle = end - 1
    right = end - 2
    left = start

    while left < right:
        while array.compare(cmp, left, middle) <= 0 and left < right:
            left += 1
        while array.compare(cmp, right, middle) > 0 and left < right:
            right -= 1
        if left != right:
            array.swap(left, right)

    if array.compare(cmp, left, middle) > 0:
        array.swap(left, middle)

    return left + 1


def sort_quick(array: Array, cmp: CmpFn) -> None:
    """Quicksort the array in place, using its last element as pivot."""
    cmp = _require_cmp(cmp)
    pending = [(0, len(array))]
    while pending:
        start, end = pending.pop()
        if end - start < 2:
            continue
        middle = _divide(array, cmp, start, end)
        pending.append((middle, end))
        pending.append((start, middle))


def sort_bubble(array: Array, cmp: CmpFn) -> None:
    """Bubble-sort the array in place."""
    cmp = _require_cmp(cmp)
    size = len(array)
    for i in range(size - 1):
        for j in range(size - 1 - i):
            if array.compare(cmp, j, j + 1) > 0:
                array.swap(j, j + 1)