"""Binary tree nodes with insertion, rotation, printing and traversal."""

from __future__ import annotations

import sys
from collections import deque
from typing import Any, Callable, Iterator

from chaincoll.common import TraverseDirection


class BinaryNode:
    """A node of a binary tree that knows its parent and both children."""

    def __init__(self, data: Any = None, parent: BinaryNode | None = None) -> None:
        self.data = data
        self.parent = parent
        self.left: BinaryNode | None = None
        self.right: BinaryNode | None = None

    def __repr__(self) -> str:
        return f"BinaryNode({self.data!r})"

    def insert_left(self, data: Any) -> BinaryNode:
        """Insert a node between this node and its left child; return the new node."""
        node = BinaryNode(data, self)
        if self.left is not None:
            self.left.parent = node
        node.left = self.left
        self.left = node
        return node

    def insert_right(self, data: Any) -> BinaryNode:
        """Insert a node between this node and its right child; return the new node."""
        node = BinaryNode(data, self)
        if self.right is not None:
            self.right.parent = node
        node.right = self.right
        self.right = node
        return node

    def _replace_in_parent(self, parent: BinaryNode | None, pivot: BinaryNode) -> None:
        if parent is None:
            return
        if parent.left is self:
            parent.left = pivot
        elif parent.right is self:
            parent.right = pivot

    def rotate_left(self) -> BinaryNode:
        """Rotate the subtree left; return its new root, which takes this node's place."""
        pivot = self.right
        if pivot is None:
            raise ValueError("cannot rotate left a node without a right child")
        parent = self.parent
        pivot.parent = parent
        self.parent = pivot
        if pivot.left is not None:
            pivot.left.parent = self
        self.right = pivot.left
        pivot.left = self
        self._replace_in_parent(parent, pivot)
        return pivot

    def rotate_right(self) -> BinaryNode:
        """Rotate the subtree right; return its new root, which takes this node's place."""
        pivot = self.left
        if pivot is None:
            raise ValueError("cannot rotate right a node without a left child")
        parent = self.parent
        pivot.parent = parent
        self.parent = pivot
        if pivot.right is not None:
            pivot.right.parent = self
        self.left = pivot.right
        pivot.right = self
        self._replace_in_parent(parent, pivot)
        return pivot

    @staticmethod
    def _dump_lines(
        node: BinaryNode | None, depth: int, format_fn: Callable[[Any], str]
    ) -> Iterator[str]:
        pending: list[tuple[BinaryNode | None, int]] = [(node, depth)]
        while pending:
            current, level = pending.pop()
            indent = "\t" * level
            if current is None:
                yield f"{indent}<NULL>\n"
                continue
            yield f"{indent}{format_fn(current.data)}\n"
            pending.append((current.left, level + 1))
            pending.append((current.right, level + 1))

    def dump(self, format_fn: Callable[[Any], str] = str, depth: int = 0) -> str:
        """Print the subtree, right child before left, one tab per level; return the text."""
        text = "".join(self._dump_lines(self, depth, format_fn))
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    def traverse(
        self, direction: TraverseDirection | int = TraverseDirection.DEPTH_LEFT
    ) -> Iterator[Any]:
        """Yield the data of every node in the subtree in the given order."""
        direction = TraverseDirection(direction)
        return self._walk(direction)

    def _walk(self, direction: TraverseDirection) -> Iterator[Any]:
        depth_first = direction in (
            TraverseDirection.DEPTH_LEFT,
            TraverseDirection.DEPTH_RIGHT,
        )
        right_then_left = direction in (
            TraverseDirection.DEPTH_LEFT,
            TraverseDirection.BREADTH_RIGHT,
        )
        queue: deque[BinaryNode] = deque([self])
        while queue:
            current = queue.popleft()
            yield current.data
            children = (
                (current.right, current.left)
                if right_then_left
                else (current.left, current.right)
            )
            for child in children:
                if child is None:
                    continue
                if depth_first:
                    queue.appendleft(child)
                else:
                    queue.append(child)