import pytest

from blockpool.common import (
    HEADER_SIZE,
    MAGIC_NUMBER,
    BlockHeader,
    Pointer,
    PoolError,
)


def test_header_size_is_eight_bytes():
    assert HEADER_SIZE == 8
    assert len(BlockHeader(MAGIC_NUMBER, 1, 0).pack()) == 8


def test_magic_number_wire_bytes():
    packed = BlockHeader(MAGIC_NUMBER, 0, 0).pack()
    assert packed[:4] == b"\xef\xbe\xad\xde"


def test_header_round_trip():
    header = BlockHeader(MAGIC_NUMBER, 0x1234, 1, 0)
    assert BlockHeader.unpack(header.pack()) == header


def test_unpack_reads_only_prefix():
    header = BlockHeader(MAGIC_NUMBER, 7, 1)
    assert BlockHeader.unpack(header.pack() + b"extra") == header


def test_unpack_short_data_raises():
    with pytest.raises(PoolError):
        BlockHeader.unpack(b"\x00\x01")


def test_pointer_offset_by_same_buffer():
    buf = bytearray(16)
    moved = Pointer(buf, 8).offset_by(-8)
    assert moved.buffer is buf
    assert moved.offset == 0


def test_pointer_equality_uses_buffer_identity():
    a = bytearray(4)
    b = bytearray(4)
    assert Pointer(a, 0) == Pointer(a, 0)
    assert not Pointer(a, 0) == Pointer(b, 0)
    assert len({Pointer(a, 1), Pointer(a, 1)}) == 1