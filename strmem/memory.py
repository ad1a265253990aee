"""Byte-buffer operations: filling, copying, searching and comparing.

Buffers are bytes-like objects; functions that write require a mutable one
such as ``bytearray`` or a writable ``memoryview``. A count that reaches past
the end of a buffer raises ``ValueError`` instead of running off the end.
"""

from __future__ import annotations

import sys
from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(s: MutableBuffer, c: int, n: int) -> MutableBuffer:
    """Fill the first ``n`` bytes of ``s`` with ``c`` truncated to a byte."""
    _check_count(n, s)
    s[:n] = bytes([c & 0xFF]) * n
    return s


def bzero(s: MutableBuffer, n: int) -> MutableBuffer:
    """Zero the first ``n`` bytes of ``s``."""
    return memset(s, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``nmemb`` elements of ``size`` bytes.

    A request for zero elements or zero-sized elements yields a one-byte
    buffer. A total that would overflow the platform's size type raises
    ``MemoryError``.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    if SIZE_MAX // size < nmemb:
        raise MemoryError(f"cannot allocate {nmemb} elements of {size} bytes")
    return bytearray(nmemb * size)


def memchr(s: Buffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in ``s[:n]``, or None."""
    _check_count(n, s)
    index = bytes(s[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: MutableBuffer | None, src: Buffer | None, n: int) -> MutableBuffer | None:
    """Copy ``n`` bytes from ``src`` to ``dest``; correct when the two overlap.

    With neither buffer given, nothing is done and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memmove needs both a destination and a source buffer")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest