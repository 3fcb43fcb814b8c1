"""Exercise the memory manager with lists of objects and arrays."""

from __future__ import annotations

import sys
from typing import IO

from memadt.memmgr import DEFAULT_BLOCK_SIZE, SIZE_T, MemMgr

OBJ_SIZE = 84
"""Size in bytes of one test object."""

_PER_LINE = 50


class MemTest:
    """Allocates and frees test objects and arrays through a MemMgr."""

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        self.mem_mgr = MemMgr(block_size, OBJ_SIZE)
        self._obj_list: list[int | None] = []
        self._arr_list: list[int | None] = []

    def reset(self, block_size: int = 0) -> None:
        """Forget every object and array and reset the memory manager."""
        self._obj_list.clear()
        self._arr_list.clear()
        self.mem_mgr.reset(block_size)

    def obj_list_size(self) -> int:
        return len(self._obj_list)

    def arr_list_size(self) -> int:
        return len(self._arr_list)

    def new_objs(self, n: int) -> None:
        """Allocate ``n`` objects. Raises MemoryError if one does not fit."""
        for _ in range(n):
            self._obj_list.append(self.mem_mgr.alloc(OBJ_SIZE))

    def new_arrs(self, n: int, size: int) -> None:
        """Allocate ``n`` arrays of ``size`` objects each."""
        for _ in range(n):
            self._arr_list.append(self.mem_mgr.alloc_arr(size * OBJ_SIZE + SIZE_T))

    def delete_obj(self, idx: int) -> None:
        """Free the object at ``idx``; an already freed slot is left alone."""
        if not 0 <= idx < len(self._obj_list):
            raise IndexError(f"object index out of range: {idx}")
        address = self._obj_list[idx]
        if address is not None:
            self.mem_mgr.free(address)
            self._obj_list[idx] = None

    def delete_arr(self, idx: int) -> None:
        """Free the array at ``idx``; an already freed slot is left alone."""
        if not 0 <= idx < len(self._arr_list):
            raise IndexError(f"array index out of range: {idx}")
        address = self._arr_list[idx]
        if address is not None:
            self.mem_mgr.free_arr(address)
            self._arr_list[idx] = None

    def report(self, out: IO[str] | None = None) -> None:
        """Write the memory manager state and the live/freed slot maps."""
        out = sys.stdout if out is None else out
        self.mem_mgr.report(out)
        out.write(
            "=========================================\n"
            "=             class MemTest             =\n"
            "=========================================\n"
            "Object list ---\n"
        )
        _write_slots(out, self._obj_list)
        out.write("\nArray list ---\n")
        _write_slots(out, self._arr_list)
        out.write("\n")


def _write_slots(out: IO[str], slots: list[int | None]) -> None:
    for count, address in enumerate(slots, start=1):
        out.write("x" if address is None else "o")
        if count % _PER_LINE == 0:
            out.write("\n")