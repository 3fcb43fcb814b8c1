"""Block-based memory manager with size-indexed recycle lists.

Memory is simulated: addresses are plain integers handed out from large
blocks, and freed addresses are kept in recycle lists keyed by array size so
that later requests of the same shape can reuse them.
"""

from __future__ import annotations

import sys
from typing import IO, Iterator

SIZE_T = 8
"""Size in bytes of the machine word that every request is rounded to."""

R_SIZE = 256
"""Number of recycle list heads."""

DEFAULT_BLOCK_SIZE = 65536


def to_size_t(t: int) -> int:
    """Round ``t`` up to the nearest multiple of SIZE_T."""
    return t if t % SIZE_T == 0 else SIZE_T * (1 + t // SIZE_T)


def downto_size_t(t: int) -> int:
    """Round ``t`` down to the nearest multiple of SIZE_T."""
    return SIZE_T * (t // SIZE_T)


class MemBlock:
    """A contiguous range of simulated memory carved out front to back."""

    _next_address = 0x10000

    def __init__(self, size: int, next_block: MemBlock | None = None) -> None:
        self.size = size
        self.begin = MemBlock._next_address
        MemBlock._next_address += to_size_t(size) + SIZE_T
        self.end = self.begin + size
        self.ptr = self.begin
        self.next_block = next_block

    def reset(self) -> None:
        """Make the whole block available again."""
        self.ptr = self.begin

    def get_mem(self, t: int) -> int | None:
        """Take ``t`` bytes from the block; return their address or None if short."""
        if self.remain_size() < t:
            return None
        address = self.ptr
        self.ptr += t
        return address

    def remain_size(self) -> int:
        return self.end - self.ptr


class RecycleList:
    """Freed addresses of one array size, most recently freed first."""

    def __init__(self, arr_size: int = 0) -> None:
        self.arr_size = arr_size
        self._items: list[int] = []
        self.next_list: RecycleList | None = None

    def push_front(self, address: int) -> None:
        self._items.append(address)

    def pop_front(self) -> int | None:
        """Remove and return the most recently freed address, or None if empty."""
        return self._items.pop() if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def reset(self) -> None:
        """Forget every recycled address and drop the chained lists."""
        self._items.clear()
        self.next_list = None

    def chain(self) -> Iterator[RecycleList]:
        """This list followed by every list chained after it."""
        current: RecycleList | None = self
        while current is not None:
            yield current
            current = current.next_list


class MemMgr:
    """Allocator for objects of a fixed size and arrays of them."""

    def __init__(
        self, block_size: int = DEFAULT_BLOCK_SIZE, obj_size: int = 84
    ) -> None:
        if block_size % SIZE_T != 0:
            raise ValueError(f"block size must be a multiple of {SIZE_T}")
        if obj_size <= 0:
            raise ValueError("object size must be positive")
        self.block_size = block_size
        self.obj_size = obj_size
        self._active = MemBlock(block_size)
        self._recycle = [RecycleList(i) for i in range(R_SIZE)]
        self._array_counts: dict[int, int] = {}

    def reset(self, block_size: int = 0) -> None:
        """Drop all but the first block and all recycled memory.

        A non-zero ``block_size`` becomes the new block size.
        """
        if block_size % SIZE_T != 0:
            raise ValueError(f"block size must be a multiple of {SIZE_T}")
        while self._active.next_block is not None:
            self._active = self._active.next_block
        for head in self._recycle:
            head.reset()
        self._array_counts.clear()
        if block_size != 0:
            self.block_size = block_size
            self._active = MemBlock(block_size)
        else:
            self._active.reset()

    def alloc(self, t: int) -> int:
        """Allocate one object of ``t`` bytes, which must be the object size."""
        if t != self.obj_size:
            raise ValueError(
                f"object allocation of {t} bytes, expected {self.obj_size}"
            )
        return self._get_mem(t)

    def alloc_arr(self, t: int) -> int:
        """Allocate an array of ``t`` bytes: its elements plus a leading count word."""
        address = self._get_mem(t)
        self._array_counts[address] = (t - SIZE_T) // self.obj_size
        return address

    def free(self, address: int) -> None:
        self._recycle_list(0).push_front(address)

    def free_arr(self, address: int) -> None:
        """Recycle an array into the list matching its element count."""
        try:
            n = self._array_counts.pop(address)
        except KeyError:
            raise ValueError(f"no array allocated at {address:#x}") from None
        self._recycle_list(n).push_front(address)

    def num_blocks(self) -> int:
        count = 0
        block: MemBlock | None = self._active
        while block is not None:
            count += 1
            block = block.next_block
        return count

    def report(self, out: IO[str] | None = None) -> None:
        """Write block and recycle list statistics to ``out``."""
        out = sys.stdout if out is None else out
        out.write(
            "=========================================\n"
            "=              Memory Manager           =\n"
            "=========================================\n"
            f"* Block size            : {self.block_size} Bytes\n"
            f"* Number of blocks      : {self.num_blocks()}\n"
            f"* Free mem in last block: {self._active.remain_size()}\n"
            "* Recycle list          : \n"
        )
        count = 0
        for head in self._recycle:
            for rlist in head.chain():
                s = len(rlist)
                if s:
                    out.write(f"[{rlist.arr_size:>3}] = {s:<10}")
                    count += 1
                    if count % 4 == 0:
                        out.write("\n")
        out.write("\n")

    def _array_size(self, t: int) -> int:
        if t % SIZE_T != 0 or t < self.obj_size:
            raise ValueError(f"invalid memory size {t}")
        return (t - SIZE_T) // self.obj_size

    def _recycle_list(self, n: int) -> RecycleList:
        """The recycle list for array size ``n``, created if it does not exist."""
        rlist = self._recycle[n % R_SIZE]
        if rlist.arr_size == n:
            return rlist
        while rlist.next_list is not None:
            rlist = rlist.next_list
            if rlist.arr_size == n:
                return rlist
        rlist.next_list = RecycleList(n)
        return rlist.next_list

    def _get_mem(self, t: int) -> int:
        t = to_size_t(t)
        if t > self.block_size:
            raise MemoryError(
                f"Requested memory ({t}) is greater than block size"
                f"({self.block_size}). Exception raised..."
            )
        rlist = self._recycle_list(self._array_size(t))
        recycled = rlist.pop_front()
        if recycled is not None:
            return recycled
        address = self._active.get_mem(t)
        if address is None:
            remain = self._active.remain_size()
            if remain >= self.obj_size:
                self._recycle_list(self._array_size(remain)).push_front(
                    self._active.ptr
                )
            self._active = MemBlock(self.block_size, self._active)
            address = self._active.get_mem(t)
            assert address is not None
        return address