"""Unbalanced binary search tree that allows duplicate keys."""

from __future__ import annotations

import sys
from typing import IO, Any, Generic, Iterator, TypeVar

T = TypeVar("T")

_INDENT = "      "


class _Node(Generic[T]):
    __slots__ = ("data", "parent", "left", "right")

    def __init__(self, data: T, parent: _Node[T] | None = None) -> None:
        self.data = data
        self.parent = parent
        self.left: _Node[T] | None = None
        self.right: _Node[T] | None = None


class BSTree(Generic[T]):
    """Binary search tree iterated in ascending order.

    Equal keys are placed in the left subtree, so duplicates are kept.
    """

    def __init__(self) -> None:
        self._root: _Node[T] | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _nodes(self, reverse: bool = False) -> Iterator[_Node[T]]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right if reverse else node.left
            node = stack.pop()
            yield node
            node = node.left if reverse else node.right

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[T]:
        return (node.data for node in self._nodes(reverse=True))

    def __repr__(self) -> str:
        return f"BSTree({list(self)!r})"

    def insert(self, item: T) -> None:
        if self._root is None:
            self._root = _Node(item)
            self._size = 1
            return
        node = self._root
        while True:
            if item <= node.data:  # type: ignore[operator]
                if node.left is None:
                    node.left = _Node(item, node)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(item, node)
                    break
                node = node.right
        self._size += 1

    def _remove(self, node: _Node[T]) -> None:
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data = successor.data
            node = successor
        child = node.left if node.left is not None else node.right
        if child is not None:
            child.parent = node.parent
        if node.parent is None:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child
        self._size -= 1

    def pop_front(self) -> None:
        """Remove the smallest element; does nothing when empty."""
        if self._root is not None:
            self._remove(next(self._nodes()))

    def pop_back(self) -> None:
        """Remove the largest element; does nothing when empty."""
        if self._root is not None:
            self._remove(next(self._nodes(reverse=True)))

    def erase(self, item: Any) -> bool:
        """Remove one element equal to ``item``; return whether one was found."""
        node = self._root
        while node is not None and item != node.data:
            node = node.left if item < node.data else node.right
        if node is None:
            return False
        self._remove(node)
        return True

    def erase_at(self, index: int) -> bool:
        """Remove the element at in-order position ``index``.

        Returns False if the tree is empty.
        """
        if self._root is None:
            return False
        if not 0 <= index < self._size:
            raise IndexError(f"tree index out of range: {index}")
        for position, node in enumerate(self._nodes()):
            if position == index:
                self._remove(node)
                break
        return True

    def find(self, item: Any) -> int | None:
        """In-order index of the first element equal to ``item``, or None."""
        for index, value in enumerate(self):
            if value == item:
                return index
        return None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def sort(self) -> None:
        """Does nothing: the tree is always in order."""

    def print_tree(self, out: IO[str] | None = None) -> None:
        """Write the tree's shape, right subtree before left, to ``out``."""
        out = sys.stdout if out is None else out
        out.write("print:\n")
        self._print_node(self._root, 0, out)

    def _print_node(self, node: _Node[T] | None, depth: int, out: IO[str]) -> None:
        out.write(_INDENT * depth)
        if node is None:
            out.write(f"[{depth}]\n")
            return
        out.write(f"[{depth}]  {node.data}\n")
        self._print_node(node.right, depth + 1, out)
        self._print_node(node.left, depth + 1, out)