"""NUL-terminated string operations.

A string is a ``str`` or a bytes-like object whose content ends at its first
NUL character, or at its end if it holds none. Searches return an index into
the string, or None when nothing is found. The bounded copy functions write
into a mutable byte buffer, never past ``size`` bytes, and always leave the
result NUL-terminated when ``size`` allows.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Union

Text = Union[str, bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _terminated(s: Text) -> str | bytes | bytearray:
    """Return the content of ``s`` up to, not including, its first NUL."""
    if isinstance(s, memoryview):
        s = s.tobytes()
    if isinstance(s, str):
        end = s.find("\0")
    elif isinstance(s, (bytes, bytearray)):
        end = s.find(0)
    else:
        raise TypeError(f"expected a str or bytes-like object, got {type(s).__name__}")
    return s if end < 0 else s[:end]


def _codes(s: str | bytes | bytearray) -> list[int]:
    return [ord(ch) for ch in s] if isinstance(s, str) else list(s)


def _char_code(s: Text, c: int | str) -> int:
    """Return the code to look for in ``s``; byte strings compare on the low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        code = ord(c)
    elif isinstance(c, int) and not isinstance(c, bool):
        code = c
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return code if isinstance(s, str) else code & 0xFF


def _source_bytes(src: Text) -> bytes | bytearray:
    if isinstance(src, str):
        raise TypeError("source must be bytes-like when copying into a byte buffer")
    return _terminated(src)


def _check_size(dst: MutableBuffer, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strdup(s: Text) -> str | bytes | bytearray:
    """Return a copy of the string's content, ending at its first NUL."""
    body = _terminated(s)
    if isinstance(body, bytearray):
        return bytearray(body)
    return body


def strlcpy(dst: MutableBuffer, src: Text, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``; a result of ``size`` or more means the copy
    was truncated. With ``size`` zero nothing is written.
    """
    _check_size(dst, size)
    data = _source_bytes(src)
    if size == 0:
        return len(data)
    count = min(len(data), size - 1)
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: MutableBuffer, src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst``, keeping the whole within ``size`` bytes.

    Returns the length the full concatenation would have: the initial length
    of ``dst`` (capped at ``size``) plus the length of ``src``.
    """
    _check_size(dst, size)
    d_len = strlen(dst)
    data = _source_bytes(src)
    s_len = len(data)
    if d_len >= size:
        return size + s_len
    count = min(s_len, size - d_len - 1)
    dst[d_len : d_len + count] = data[:count]
    dst[d_len + count] = 0
    return d_len + s_len


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch.

    A string that ends early compares as if followed by NUL.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    left = _codes(_terminated(s1)[:n])
    right = _codes(_terminated(s2)[:n])
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b:
            return a - b
    return 0


def strchr(s: Text, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    code = _char_code(s, c)
    body = _terminated(s)
    if code == 0:
        return len(body)
    index = body.find(chr(code) if isinstance(body, str) else code)
    return None if index < 0 else index


def strrchr(s: Text, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    code = _char_code(s, c)
    body = _terminated(s)
    if code == 0:
        return len(body)
    index = body.rfind(chr(code) if isinstance(body, str) else code)
    return None if index < 0 else index


def strnstr(big: Text, little: Text, length: int) -> int | None:
    """Return where ``little`` first occurs wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when there is no match.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _terminated(little)
    if not needle:
        return 0
    haystack = _terminated(big)[:length]
    index = haystack.find(needle)
    return None if index < 0 else index