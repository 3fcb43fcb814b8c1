"""Test bench that drives an array, linked list or search tree of short strings."""

from __future__ import annotations

import functools
import sys
from typing import IO, Any

from memadt.array import Array
from memadt.bst import BSTree
from memadt.dlist import DList
from memadt.util import RandomNumGen

_PER_LINE = 4
"""Number of objects printed per line."""

_CONTAINERS = {"array": Array, "dlist": DList, "bst": BSTree}

_shared_rng = RandomNumGen(0)


@functools.total_ordering
class AdtTestObj:
    """A string no longer than the current class-wide length limit."""

    _str_len = 5

    def __init__(self, text: str | None = None, rng: RandomNumGen | None = None) -> None:
        if text is None:
            rng = _shared_rng if rng is None else rng
            text = "".join(
                chr(ord("a") + rng(26)) for _ in range(type(self)._str_len)
            )
        self.text = text[: type(self)._str_len]

    @classmethod
    def set_len(cls, length: int) -> None:
        cls._str_len = length

    @classmethod
    def get_len(cls) -> int:
        return cls._str_len

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AdtTestObj):
            return NotImplemented
        return self.text == other.text

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, AdtTestObj):
            return NotImplemented
        return self.text < other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"AdtTestObj({self.text!r})"


class AdtTest:
    """Holds AdtTestObj items in a container of the chosen kind."""

    def __init__(self, kind: str = "dlist", rng: RandomNumGen | None = None) -> None:
        if kind not in _CONTAINERS:
            raise ValueError(f"unknown container kind: {kind!r}")
        self.kind = kind
        self.rng = _shared_rng if rng is None else rng
        self._container = _CONTAINERS[kind]()

    def reset(self, length: int) -> None:
        """Remove every object and set the string length limit."""
        self.delete_all()
        AdtTestObj.set_len(length)

    def __len__(self) -> int:
        return len(self._container)

    def add(self, obj: AdtTestObj | None = None) -> None:
        """Add ``obj``, or a random object when none is given."""
        if obj is None:
            obj = AdtTestObj(rng=self.rng)
        if self.kind == "bst":
            self._container.insert(obj)
        else:
            self._container.push_back(obj)

    def delete_all(self) -> None:
        self._container.clear()

    def delete_obj(self, obj: AdtTestObj) -> bool:
        """Remove one object equal to ``obj``; return whether one was found."""
        return self._container.erase(obj)

    def delete_front(self, repeat: int = 1) -> None:
        for _ in range(repeat):
            self._container.pop_front()

    def delete_back(self, repeat: int = 1) -> None:
        for _ in range(repeat):
            self._container.pop_back()

    def delete_random(self, repeat: int = 1) -> None:
        """Remove ``repeat`` objects at random positions, while any are left."""
        remaining = len(self._container)
        for _ in range(repeat):
            if self._container.erase_at(self.rng(remaining)):
                remaining -= 1

    def find(self, obj: AdtTestObj) -> bool:
        return self._container.find(obj) is not None

    def sort(self) -> None:
        self._container.sort()

    def print(
        self, out: IO[str] | None = None, reverse: bool = False, verbose: bool = False
    ) -> None:
        """Write every object, four per line, forwards or backwards."""
        out = sys.stdout if out is None else out
        if verbose and self.kind == "bst":
            self._container.print_tree(out)
        out.write(f"=== ADT ({self.kind}) ===\n")
        if reverse:
            size = len(self._container)
            r = size % _PER_LINE
            for idx, item in zip(range(size - 1, -1, -1), reversed(self._container)):
                _write_item(out, idx, item, r)
        else:
            for idx, item in enumerate(self._container):
                _write_item(out, idx, item, _PER_LINE - 1)
        out.write("\n")

    def print_data(self, index: int, out: IO[str] | None = None) -> None:
        """Write the object at ``index``; nothing is written for a bad index."""
        out = sys.stdout if out is None else out
        if index < 0:
            return
        for idx, item in enumerate(self._container):
            if idx == index:
                _write_item(out, idx, item, index % _PER_LINE)
                return


def _write_item(out: IO[str], idx: int, item: Any, r: int) -> None:
    out.write(f"[{idx:>3}] = {str(item):>3}   ")
    if idx % _PER_LINE == r:
        out.write("\n")