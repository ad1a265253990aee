"""Byte-buffer and string helpers with C library semantics."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "transform"]