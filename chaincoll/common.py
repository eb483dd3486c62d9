"""Shared comparison and hash functions, error types and container interfaces."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterator

CmpFn = Callable[[Any, Any], int]
HashFn = Callable[[Any], int]

_SIZE_MASK = (1 << 64) - 1


class ContainerError(Exception):
    """Base class for every error raised by the containers."""


class EmptyError(ContainerError):
    """Raised when reading from an empty container."""


class FullError(ContainerError):
    """Raised when writing to a container that has no room left."""


class KeyNotFoundError(ContainerError, KeyError):
    """Raised when a map has no entry for the requested key."""


class KeyExistsError(ContainerError, KeyError):
    """Raised when a map already holds the key that should be new."""


class TraverseDirection(enum.IntEnum):
    """Order in which a tree is walked."""

    DEPTH_LEFT = 4
    DEPTH_RIGHT = 5
    BREADTH_LEFT = 8
    BREADTH_RIGHT = 9


@dataclass
class MapItem:
    """A key and the value stored under it."""

    key: Any
    value: Any

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value


def default_cmp(left: Any, right: Any) -> int:
    """Three-way comparison: negative, zero or positive like ``left - right``."""
    if left == right:
        return 0
    return -1 if left < right else 1


def default_hash(obj: Any) -> int:
    """Use an integer as its own hash; other objects use the built-in hash."""
    if isinstance(obj, int):
        return obj & _SIZE_MASK
    return hash(obj) & _SIZE_MASK


def address_hash(obj: Any) -> int:
    """Hash an object by its identity, spreading out aligned addresses."""
    return (((id(obj) >> 3) + 1) * 131) & _SIZE_MASK


def _signed_chars(obj: Any) -> Iterator[int]:
    data = obj.encode("utf-8") if isinstance(obj, str) else bytes(obj)
    data = data.split(b"\0", 1)[0]
    return (b - 256 if b >= 128 else b for b in data)


def str_hash_simple(obj: Any) -> int:
    """Hash a string by summing its characters."""
    return sum(_signed_chars(obj)) & _SIZE_MASK


def str_hash_bkdr(obj: Any) -> int:
    """Hash a string the BKDR way with seed 131."""
    result = 0
    for char in _signed_chars(obj):
        result = (result * 131 + char) & _SIZE_MASK
    return result


class Stack(ABC):
    """Last-in, first-out container interface."""

    @abstractmethod
    def push(self, item: Any) -> None:
        """Put an item on top."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the top item."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the top item without removing it."""


class Queue(ABC):
    """First-in, first-out container interface."""

    @abstractmethod
    def enqueue(self, item: Any) -> None:
        """Add an item at the back."""

    @abstractmethod
    def dequeue(self) -> Any:
        """Remove and return the front item."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the front item without removing it."""


class Map(ABC):
    """Key-value container interface."""

    @abstractmethod
    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``."""

    @abstractmethod
    def set(self, key: Any, value: Any) -> Any:
        """Store ``value`` under ``key``; return the previous value or None."""

    @abstractmethod
    def set_new(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, which must not be present yet."""

    @abstractmethod
    def delete(self, key: Any) -> MapItem:
        """Remove ``key`` and return the removed item."""