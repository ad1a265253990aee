"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import operator
import os
from typing import Union

from strmem.strings import strdup

Text = Union[str, bytes, bytearray, memoryview]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s: Text) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def putchar_fd(c: int | str | bytes, fd: int) -> None:
    """Write one character to ``fd``; an integer is written as its low byte."""
    if isinstance(c, (str, bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        data = _encode(c)
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: Text, fd: int) -> None:
    """Write the string ``s`` up to its first NUL to ``fd``."""
    _write_all(fd, _encode(strdup(s)))


def putendl_fd(s: Text, fd: int) -> None:
    """Write the string ``s`` followed by a newline to ``fd``."""
    putstr_fd(s, fd)
    _write_all(fd, b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the integer ``n`` to ``fd``."""
    _write_all(fd, str(operator.index(n)).encode("ascii"))