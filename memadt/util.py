"""Shared utilities: random numbers, resource usage, directory listing."""

from __future__ import annotations

import os
import random
import sys
from typing import IO, Any, MutableSequence

try:
    import resource
except ImportError:  # not available on every platform
    resource = None  # type: ignore[assignment]


class RandomNumGen:
    """Seeded generator of integers in ``[0, bound)``."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(os.getpid() if seed is None else seed)

    def __call__(self, bound: int) -> int:
        return int(bound * self._rng.random())


def _check_mem() -> float:
    """Peak resident memory of this process in megabytes."""
    if resource is None:
        return 0.0
    try:
        maxrss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    except OSError:
        return 0.0
    if sys.platform == "darwin":
        return maxrss / float(1 << 20)
    return maxrss / float(1 << 10)


def _check_time() -> float:
    return os.times().user


class Usage:
    """Tracks CPU time and memory used since the last reset."""

    def __init__(self) -> None:
        self.init_mem = 0.0
        self.current_mem = 0.0
        self.period_used_time = 0.0
        self.total_used_time = 0.0
        self._current_time = 0.0
        self.reset()

    def reset(self) -> None:
        self.init_mem = _check_mem()
        self._current_time = _check_time()
        self.period_used_time = 0.0
        self.total_used_time = 0.0

    def report(self, rep_time: bool, rep_mem: bool, out: IO[str] | None = None) -> None:
        """Write time and/or memory usage to ``out`` (standard output by default)."""
        out = sys.stdout if out is None else out
        if rep_time:
            now = _check_time()
            self.period_used_time = now - self._current_time
            self.total_used_time += self.period_used_time
            self._current_time = now
            out.write(f"Period time used : {self.period_used_time:.4g} seconds\n")
            out.write(f"Total time used  : {self.total_used_time:.4g} seconds\n")
        if rep_mem:
            self.current_mem = _check_mem() - self.init_mem
            out.write(f"Total memory used: {self.current_mem:.4g} M Bytes\n")


def list_dir(prefix: str = "", directory: str | os.PathLike[str] = ".") -> list[str]:
    """Sorted names in ``directory`` that start with ``prefix``.

    Raises OSError if the directory cannot be read.
    """
    return sorted(
        name
        for name in os.listdir(directory)
        if name not in (".", "..") and name.startswith(prefix)
    )


_HASH_SIZES = (
    (8, 7),
    (16, 13),
    (32, 31),
    (64, 61),
    (128, 127),
    (512, 509),
    (2048, 1499),
    (8192, 4999),
    (32768, 13999),
    (131072, 59999),
    (524288, 100019),
    (2097152, 300007),
    (8388608, 900001),
    (33554432, 1000003),
    (134217728, 3000017),
    (536870912, 5000011),
)


def hash_size(s: int) -> int:
    """Suggested hash table size for ``s`` entries."""
    for limit, size in _HASH_SIZES:
        if s < limit:
            return size
    return 7000003


def remove_data(items: MutableSequence[Any], value: Any) -> None:
    """Remove every element equal to ``value`` from ``items`` in place, keeping order."""
    items[:] = [item for item in items if item != value]