"""Hash map whose buckets are ListMaps created on first use."""

from __future__ import annotations

import sys
from typing import Any, Iterator

from chaincoll.array import Array
from chaincoll.common import (
    CmpFn,
    HashFn,
    KeyNotFoundError,
    Map,
    MapItem,
    default_cmp,
    default_hash,
)
from chaincoll.list_map import ListMap


class HashMap(Map):
    """A map with a fixed number of buckets, each holding a ListMap of colliding keys."""

    def __init__(
        self,
        bucket_size: int,
        cmp: CmpFn | None = None,
        calc_hash: HashFn | None = None,
    ) -> None:
        if bucket_size <= 0:
            raise ValueError(f"bucket size must be positive, got {bucket_size}")
        self._buckets = Array(bucket_size)
        self._bucket_size = bucket_size
        self._cmp = cmp if cmp is not None else default_cmp
        self._calc_hash = calc_hash if calc_hash is not None else default_hash

    @property
    def bucket_size(self) -> int:
        """Number of buckets."""
        return self._bucket_size

    def _slot(self, key: Any) -> int:
        return self._calc_hash(key) % self._bucket_size

    def _bucket(self, key: Any) -> ListMap | None:
        return self._buckets[self._slot(key)]

    def _bucket_or_new(self, key: Any) -> ListMap:
        index = self._slot(key)
        bucket = self._buckets[index]
        if bucket is None:
            bucket = ListMap(self._cmp)
            self._buckets[index] = bucket
        return bucket

    def get(self, key: Any) -> Any:
        """Return the value under ``key``; raise KeyNotFoundError when absent."""
        bucket = self._bucket(key)
        if bucket is None:
            raise KeyNotFoundError(key)
        return bucket.get(key)

    def set(self, key: Any, value: Any) -> Any:
        """Store ``value`` under ``key``; return the previous value or None."""
        return self._bucket_or_new(key).set(key, value)

    def set_new(self, key: Any, value: Any) -> None:
        """Store ``value`` under a new ``key``; raise KeyExistsError if present."""
        self._bucket_or_new(key).set_new(key, value)

    def delete(self, key: Any) -> MapItem:
        """Remove ``key`` and return its item; raise KeyNotFoundError when absent."""
        bucket = self._bucket(key)
        if bucket is None:
            raise KeyNotFoundError(key)
        return bucket.delete(key)

    def dump(self, end: str = "\n") -> str:
        """Print one line per bucket followed by ``end``; return the text."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            line = f"[{index: 9d}] "
            if bucket is not None:
                line += "".join(
                    f"({position}){{{item.key} -> {item.value}}} "
                    for position, item in enumerate(bucket)
                )
            lines.append(line + "\n")
        text = "".join(lines) + end
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    def __iter__(self) -> Iterator[MapItem]:
        for bucket in self._buckets:
            if bucket is not None:
                yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets if bucket is not None)