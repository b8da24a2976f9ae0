"""Shared constants, the block header layout and the pointer type."""

from __future__ import annotations

import struct
from dataclasses import dataclass

CACHE_LINE_SIZE = 64

SMALL_BLOCK_SIZE = 64
MEDIUM_BLOCK_SIZE = 256
LARGE_BLOCK_SIZE = 1024

MAGIC_NUMBER = 0xDEADBEEF

_HEADER_FORMAT = struct.Struct("<IHBB")
HEADER_SIZE = _HEADER_FORMAT.size
POINTER_SIZE = 8


class PoolError(Exception):
    """Raised when a pool is misconfigured or misused."""


@dataclass(frozen=True)
class BlockHeader:
    """The 8-byte header stored at the start of every pool block."""

    magic_number: int
    pool_id: int
    allocation_flag: int
    padding: int = 0

    def pack(self) -> bytes:
        """Return the header's wire form."""
        return _HEADER_FORMAT.pack(
            self.magic_number, self.pool_id, self.allocation_flag, self.padding
        )

    @classmethod
    def unpack(cls, data) -> "BlockHeader":
        """Read a header from the first bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise PoolError(
                f"a block header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*_HEADER_FORMAT.unpack_from(data))


@dataclass(frozen=True, eq=False)
class Pointer:
    """An address: a position inside a particular byte buffer."""

    buffer: bytearray
    offset: int = 0

    def offset_by(self, delta: int) -> "Pointer":
        """Return the pointer ``delta`` bytes away in the same buffer."""
        return Pointer(self.buffer, self.offset + delta)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        return self.buffer is other.buffer and self.offset == other.offset

    def __hash__(self) -> int:
        return hash((id(self.buffer), self.offset))