"""A fixed-size block pool over one contiguous byte arena."""

from __future__ import annotations

from dataclasses import replace

from .common import (
    HEADER_SIZE,
    MAGIC_NUMBER,
    POINTER_SIZE,
    BlockHeader,
    Pointer,
    PoolError,
)


class MemoryPool:
    """Hands out equally sized blocks from a preallocated arena."""

    def __init__(self, total_size: int, block_size: int) -> None:
        if block_size < HEADER_SIZE + POINTER_SIZE:
            raise PoolError("block size is too small")
        if block_size % 8 != 0:
            raise PoolError("block size must be a multiple of 8")
        if total_size % block_size != 0:
            raise PoolError("total size must be a multiple of the block size")
        block_count = total_size // block_size
        if block_count <= 0:
            raise PoolError("a pool needs at least one block")

        self._total_size = total_size
        self._block_size = block_size
        self._block_count = block_count
        self._used = 0
        self._memory = bytearray(total_size)
        self._bitmap = 0
        self._pool_id = id(self) & 0xFFFF
        self._free: list[int] = []

        fresh = BlockHeader(MAGIC_NUMBER, self._pool_id, 0, 0)
        for index in reversed(range(block_count)):
            self._write_header(index * block_size, fresh)
            self._free.append(index)

    def _read_header(self, offset: int) -> BlockHeader:
        return BlockHeader.unpack(self._memory[offset:offset + HEADER_SIZE])

    def _write_header(self, offset: int, header: BlockHeader) -> None:
        self._memory[offset:offset + HEADER_SIZE] = header.pack()

    def _set_flag(self, offset: int, flag: int) -> None:
        self._write_header(
            offset, replace(self._read_header(offset), allocation_flag=flag)
        )

    def allocate(self, size: int) -> Pointer | None:
        """Take a free block; return a pointer past its header, or None if full."""
        if size < 0 or size > self._block_size - HEADER_SIZE:
            raise PoolError("requested size is too large for this pool")
        if not self._free:
            return None

        index = self._free.pop()
        offset = index * self._block_size
        self._set_flag(offset, 1)
        self._bitmap |= 1 << index
        self._used += 1
        return Pointer(self._memory, offset + HEADER_SIZE)

    def deallocate(self, ptr: Pointer | None) -> None:
        """Return a block obtained from :meth:`allocate` to the pool."""
        if ptr is None:
            return
        block = ptr.offset_by(-HEADER_SIZE)
        if not self.is_valid_pool_pointer(block):
            raise PoolError("pointer does not belong to this pool")

        offset = block.offset
        if self._read_header(offset).allocation_flag != 1:
            raise PoolError("block has already been released")
        self._set_flag(offset, 0)

        index = offset // self._block_size
        self._bitmap &= ~(1 << index)
        self._free.append(index)
        self._used -= 1

    def used_block_count(self) -> int:
        """Number of blocks currently handed out."""
        return self._used

    def fragmentation_ratio(self) -> float:
        """Allocated/free transitions over twice the used count, capped at 1."""
        if self._used <= 1 or self._used >= self._block_count:
            return 0.0
        states = [bool(self._bitmap >> i & 1) for i in range(self._block_count)]
        transitions = sum(a != b for a, b in zip(states, states[1:]))
        return min(1.0, transitions / (2.0 * self._used))

    def is_valid_pool_pointer(self, ptr: Pointer) -> bool:
        """Tell whether ``ptr`` addresses the header of one of this pool's blocks."""
        if ptr.buffer is not self._memory:
            return False
        if not 0 <= ptr.offset < self._total_size:
            return False
        if ptr.offset % self._block_size != 0:
            return False
        header = self._read_header(ptr.offset)
        return header.magic_number == MAGIC_NUMBER and header.pool_id == self._pool_id