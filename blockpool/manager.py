"""Routes allocations to small, medium and large block pools."""

from __future__ import annotations

from .common import (
    HEADER_SIZE,
    LARGE_BLOCK_SIZE,
    MEDIUM_BLOCK_SIZE,
    SMALL_BLOCK_SIZE,
    Pointer,
)
from .pool import MemoryPool

SMALL_POOL_SIZE = 2 * 1024 * 1024
MEDIUM_POOL_SIZE = 1 * 1024 * 1024
LARGE_POOL_SIZE = 1 * 1024 * 1024


class MemoryManager:
    """Picks a pool by request size and falls back to plain buffers."""

    _instance: "MemoryManager | None" = None

    def __init__(self) -> None:
        self._small: MemoryPool | None = None
        self._medium: MemoryPool | None = None
        self._large: MemoryPool | None = None
        self._initialized = False

    @classmethod
    def get_instance(cls) -> "MemoryManager":
        """Return the process-wide manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def initialize(self) -> None:
        """Create the three pools; does nothing if already done."""
        if not self._initialized:
            self._small = MemoryPool(SMALL_POOL_SIZE, SMALL_BLOCK_SIZE)
            self._medium = MemoryPool(MEDIUM_POOL_SIZE, MEDIUM_BLOCK_SIZE)
            self._large = MemoryPool(LARGE_POOL_SIZE, LARGE_BLOCK_SIZE)
            self._initialized = True

    def shutdown(self) -> None:
        """Drop the pools."""
        if self._initialized:
            self._small = self._medium = self._large = None
            self._initialized = False

    def _select_pool(self, size: int) -> MemoryPool | None:
        required = size + HEADER_SIZE
        if required <= SMALL_BLOCK_SIZE:
            return self._small
        if required <= MEDIUM_BLOCK_SIZE:
            return self._medium
        if required <= LARGE_BLOCK_SIZE:
            return self._large
        return None

    def allocate(self, size: int) -> Pointer:
        """Return memory for ``size`` bytes, from a pool when one fits."""
        if self._initialized:
            pool = self._select_pool(size)
            if pool is not None:
                ptr = pool.allocate(size)
                if ptr is not None:
                    return ptr
        return Pointer(bytearray(size), 0)

    def deallocate(self, ptr: Pointer | None) -> None:
        """Give memory back to the pool it came from, if any."""
        if ptr is None or not self._initialized:
            return
        block = ptr.offset_by(-HEADER_SIZE)
        for pool in (self._small, self._medium, self._large):
            if pool is not None and pool.is_valid_pool_pointer(block):
                pool.deallocate(ptr)
                return