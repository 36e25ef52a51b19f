"""Heap allocation accounting and container index ranges."""

from __future__ import annotations

import threading
from enum import IntEnum

_UINT64_MOD = 1 << 64
_INDEX_BITS = (8, 16, 32, 64)


class AllocationType(IntEnum):
    """Category an allocation is counted under."""

    OBJECT = 0
    CONTAINER = 1


class MemoryStats:
    """Thread-safe running totals of allocated bytes and allocation counts.

    Counters are unsigned 64-bit values: freeing more than was allocated
    wraps around rather than going negative.
    """

    __slots__ = ("_lock", "_bytes", "_counts")

    def __init__(self):
        self._lock = threading.Lock()
        self._bytes = {kind: 0 for kind in AllocationType}
        self._counts = {kind: 0 for kind in AllocationType}

    @staticmethod
    def _check(alloc_type, size):
        kind = AllocationType(alloc_type)
        if size < 0:
            raise ValueError(f"allocation size must not be negative, got {size}")
        return kind

    def record_alloc(self, alloc_type, size):
        """Count one allocation of ``size`` bytes."""
        kind = self._check(alloc_type, size)
        with self._lock:
            self._bytes[kind] = (self._bytes[kind] + size) % _UINT64_MOD
            self._counts[kind] = (self._counts[kind] + 1) % _UINT64_MOD

    def record_free(self, alloc_type, size):
        """Count the release of one allocation of ``size`` bytes."""
        kind = self._check(alloc_type, size)
        with self._lock:
            self._bytes[kind] = (self._bytes[kind] - size) % _UINT64_MOD
            self._counts[kind] = (self._counts[kind] - 1) % _UINT64_MOD

    def allocation_bytes(self, alloc_type):
        """Return the bytes currently outstanding for ``alloc_type``."""
        with self._lock:
            return self._bytes[AllocationType(alloc_type)]

    def allocation_count(self, alloc_type):
        """Return the allocations currently outstanding for ``alloc_type``."""
        with self._lock:
            return self._counts[AllocationType(alloc_type)]


platform_memory = MemoryStats()


def index_range(bits):
    """Return the range of signed index values a container with ``bits``-bit indices holds.

    Only 8, 16, 32 and 64 are supported.
    """
    if bits not in _INDEX_BITS:
        raise ValueError(f"unsupported allocator index size: {bits}")
    half = 1 << (bits - 1)
    return range(-half, half)