"""Memory usage reporting."""

from __future__ import annotations

import gc
import sys
import tracemalloc
from typing import TextIO


def bytes_to_mb(value: int) -> int:
    return value // 1024 // 1024


def print_mem_usage(file: TextIO | None = None) -> None:
    """Write a one-line memory usage report."""
    alloc, peak = tracemalloc.get_traced_memory()
    num_gc = sum(stat["collections"] for stat in gc.get_stats())
    (file or sys.stdout).write(
        f"Alloc = {bytes_to_mb(alloc)} MiB\tTotalAlloc = {bytes_to_mb(peak)} MiB"
        f"\tSys = {bytes_to_mb(peak)} MiB\tNumGC = {num_gc}\n"
    )