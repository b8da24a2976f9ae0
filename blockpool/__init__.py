"""Fixed-size block memory pools over byte buffers and a size-class memory manager."""

__version__ = "1.0.0"
__all__ = ["common", "pool", "manager"]