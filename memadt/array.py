"""Dynamic array whose removals move the last element into the hole."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class Array(Generic[T]):
    """Unordered dynamic array.

    Removing an element other than the last one fills its slot with the last
    element, so removals take constant time but do not preserve order.
    """

    def __init__(self) -> None:
        self._data: list[T] = []

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __repr__(self) -> str:
        return f"Array({self._data!r})"

    def push_back(self, item: T) -> None:
        self._data.append(item)

    def pop_front(self) -> None:
        """Remove the first element, moving the last one into its place."""
        self.erase_at(0)

    def pop_back(self) -> None:
        """Remove the last element; does nothing when empty."""
        if self._data:
            self._data.pop()

    def erase_at(self, index: int) -> bool:
        """Remove the element at ``index``; return False if the array is empty."""
        if not self._data:
            return False
        if not 0 <= index < len(self._data):
            raise IndexError(f"array index out of range: {index}")
        last = self._data.pop()
        if index < len(self._data):
            self._data[index] = last
        return True

    def erase(self, item: Any) -> bool:
        """Remove the first element equal to ``item``; return whether one was found."""
        index = self.find(item)
        if index is None:
            return False
        return self.erase_at(index)

    def find(self, item: Any) -> int | None:
        """Index of the first element equal to ``item``, or None."""
        for index, value in enumerate(self._data):
            if value == item:
                return index
        return None

    def clear(self) -> None:
        self._data.clear()

    def sort(self) -> None:
        self._data.sort()