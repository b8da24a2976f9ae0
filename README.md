# blockpool

blockpool provides a fixed-size block memory pool and a manager that chooses a
pool by request size. Each pool keeps its memory in one `bytearray`. An
allocation is returned as a `Pointer`, which is a position inside a particular
buffer.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Pools

`blockpool.pool.MemoryPool(total_size, block_size)` splits `total_size` bytes
into blocks of `block_size` bytes each. Every block begins with an 8-byte
`BlockHeader`, which holds three things:

- a magic number, `0xDEADBEEF`;
- a pool id;
- an allocation flag.

Free blocks are kept in LIFO order, so the block freed most recently is the next
one handed out. A bitmap records which blocks are in use.

```python
from blockpool.pool import MemoryPool

pool = MemoryPool(total_size=64 * 16, block_size=64)

a = pool.allocate(32)        # a Pointer just past the block header
b = pool.allocate(56)        # up to block_size - 8 bytes per block
print(pool.used_block_count())      # 2

pool.deallocate(a)
print(pool.fragmentation_ratio())   # 0.0: only one block is in use
```

When every block is in use, `allocate` returns `None`. Calling
`deallocate(None)` does nothing.

The pool raises `blockpool.common.PoolError` in these cases:

- the block size is smaller than 16 bytes, or is not a multiple of 8;
- the total size is not a whole, non-zero number of blocks;
- a request is negative, or is larger than `block_size - 8`;
- a pointer passed to `deallocate` does not belong to the pool;
- a block is freed twice.

`is_valid_pool_pointer(ptr)` tells whether `ptr` is the start of one of this
pool's blocks. That start is the block's header, not the address that
`allocate` returned. The method checks four things:

- the buffer;
- the range;
- the alignment to a block boundary;
- the header's magic number and pool id.

## Fragmentation

`fragmentation_ratio()` walks the blocks in order and counts every change from
used to free or from free to used. It divides that count by twice the number of
used blocks and caps the result at 1.0.

It returns 0.0 in these cases:

- one block or none is in use;
- every block is in use.

## Common types

`blockpool.common` holds the shared pieces:

- The block size constants: `SMALL_BLOCK_SIZE` (64), `MEDIUM_BLOCK_SIZE` (256) and `LARGE_BLOCK_SIZE` (1024).
- `MAGIC_NUMBER` and `HEADER_SIZE` (8).
- `BlockHeader`, a frozen dataclass. It has `pack()`, which returns the little-endian byte form. It also has `BlockHeader.unpack(data)`, which raises `PoolError` when given fewer than 8 bytes.
- `Pointer(buffer, offset)`. Its `offset_by(delta)` returns the position `delta` bytes away in the same buffer. Two pointers are equal only when they refer to the same buffer object at the same offset.

## The manager

`blockpool.manager.MemoryManager.get_instance()` returns a process-wide manager.
Once initialized, the manager holds three pools:

| Pool   | Block size | Pool size |
|--------|-----------:|----------:|
| small  | 64 B       | 2 MB      |
| medium | 256 B      | 1 MB      |
| large  | 1 KB       | 1 MB      |

The manager picks the smallest pool whose blocks can hold the request plus the
8-byte header.

```python
from blockpool.manager import MemoryManager

manager = MemoryManager.get_instance()
manager.initialize()

ptr = manager.allocate(100)   # 100 + 8 header bytes fit a 256 B block
manager.deallocate(ptr)

manager.shutdown()
```

The manager does not pick a pool in three cases. In each of them, `allocate`
returns a pointer to a fresh standalone `bytearray` of the requested size:

- the manager has not been initialized;
- the request needs more than 1 KB, including the header;
- the chosen pool is full.

`deallocate` returns a pointer to the pool it came from. It does nothing in
these cases:

- the pointer is `None`;
- the pointer is a standalone buffer;
- the manager is not initialized.

`initialize()` does nothing when the manager is already initialized.
`shutdown()` drops the pools and leaves the manager uninitialized.

## What it does not do

blockpool models an allocator over Python byte buffers. It does not hand out
real process memory. It also does not guard pools for use across threads.