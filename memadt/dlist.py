"""Circular doubly linked list with a sentinel node."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: _Node[T] = self
        self.next: _Node[T] = self


class DList(Generic[T]):
    """Doubly linked list that keeps insertion order."""

    def __init__(self) -> None:
        self._sentinel: _Node[T] = _Node(None)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._sentinel.next
        while node is not self._sentinel:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[T]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            preceding = node.prev
            yield node.data
            node = preceding

    def __repr__(self) -> str:
        return f"DList({list(self)!r})"

    def _unlink(self, node: _Node[T]) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1

    def push_back(self, item: T) -> None:
        node: _Node[T] = _Node(item)
        last = self._sentinel.prev
        node.prev = last
        node.next = self._sentinel
        last.next = node
        self._sentinel.prev = node
        self._size += 1

    def pop_front(self) -> None:
        """Remove the first element; does nothing when empty."""
        if self._size:
            self._unlink(self._sentinel.next)

    def pop_back(self) -> None:
        """Remove the last element; does nothing when empty."""
        if self._size:
            self._unlink(self._sentinel.prev)

    def erase_at(self, index: int) -> bool:
        """Remove the element at ``index``; return False if the list is empty."""
        if not self._size:
            return False
        if not 0 <= index < self._size:
            raise IndexError(f"list index out of range: {index}")
        for position, node in enumerate(self._nodes()):
            if position == index:
                self._unlink(node)
                break
        return True

    def erase(self, item: Any) -> bool:
        """Remove the first element equal to ``item``; return whether one was found."""
        for node in self._nodes():
            if node.data == item:
                self._unlink(node)
                return True
        return False

    def find(self, item: Any) -> int | None:
        """Index of the first element equal to ``item``, or None."""
        for index, value in enumerate(self):
            if value == item:
                return index
        return None

    def clear(self) -> None:
        self._sentinel.next = self._sentinel.prev = self._sentinel
        self._size = 0

    def sort(self) -> None:
        """Sort the elements in ascending order, in place."""
        for node, value in zip(list(self._nodes()), sorted(self)):
            node.data = value