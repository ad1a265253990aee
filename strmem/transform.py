"""Building new strings: number conversion, slicing, joining, trimming, splitting, mapping.

Strings follow the same rules as in :mod:`strmem.strings`: a ``str`` or a
bytes-like object whose content ends at its first NUL. Results have the type
of the content they were built from.
"""

from __future__ import annotations

import operator
from itertools import takewhile
from typing import Callable, Union

from strmem.chars import isdigit
from strmem.strings import strdup, strlen

Text = Union[str, bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]

_SPACES = "\t\n\v\f\r "


def _same_kind(a: str | bytes | bytearray, b: str | bytes | bytearray) -> None:
    if isinstance(a, str) != isinstance(b, str):
        raise TypeError("cannot mix str and bytes-like strings")


def atoi(s: Text) -> int:
    """Parse a leading decimal integer, as C ``atoi`` does.

    Leading whitespace (tab, newline, vertical tab, form feed, carriage
    return, space) is skipped, one optional sign is read, then ASCII digits
    up to the first non-digit. No digits yield 0.
    """
    body = strdup(s)
    text = body if isinstance(body, str) else bytes(body).decode("latin-1")
    text = text.lstrip(_SPACES)
    negative = text.startswith("-")
    if text[:1] in ("-", "+"):
        text = text[1:]
    digits = "".join(takewhile(isdigit, text))
    value = int(digits) if digits else 0
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal form of the integer ``n``."""
    return str(operator.index(n))


def substr(s: Text, start: int, length: int) -> str | bytes | bytearray:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end of the string yields an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    body = strdup(s)
    if start > len(body):
        return body[:0]
    return body[start : start + length]


def strjoin(s1: Text, s2: Text) -> str | bytes | bytearray:
    """Return the concatenation of two strings."""
    first, second = strdup(s1), strdup(s2)
    _same_kind(first, second)
    return first + second


def strtrim(s: Text, charset: Text) -> str | bytes | bytearray:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    body, chars = strdup(s), strdup(charset)
    _same_kind(body, chars)
    return body.strip(chars)


def _separator(body: str | bytes | bytearray, sep: int | str | bytes) -> int:
    if isinstance(sep, (str, bytes, bytearray)):
        if len(sep) != 1:
            raise ValueError(f"expected a single separator character, got {len(sep)}")
        code = ord(sep) if isinstance(sep, str) else sep[0]
    elif isinstance(sep, int) and not isinstance(sep, bool):
        code = sep
    else:
        raise TypeError(f"expected a character or an int, got {type(sep).__name__}")
    return code if isinstance(body, str) else code & 0xFF


def split(s: Text, sep: int | str | bytes) -> list:
    """Split ``s`` on the character ``sep``, dropping empty words.

    A NUL separator never occurs inside a string, so the whole string is one
    word.
    """
    body = strdup(s)
    code = _separator(body, sep)
    if code == 0:
        return [body] if body else []
    token = chr(code) if isinstance(body, str) else bytes([code])
    return [word for word in body.split(token) if word]


def strmapi(s: Text, f: Callable) -> str | bytes | bytearray:
    """Build a new string from ``f(index, char)`` applied to each character.

    For a ``str`` the function receives and returns one-character strings;
    for bytes it receives and returns integers, kept to their low byte.
    """
    body = strdup(s)
    if isinstance(body, str):
        mapped = [f(index, ch) for index, ch in enumerate(body)]
        for ch in mapped:
            if not isinstance(ch, str) or len(ch) != 1:
                raise ValueError(f"mapping must return one character, got {ch!r}")
        return "".join(mapped)
    return type(body)(operator.index(f(index, b)) & 0xFF for index, b in enumerate(body))


def striteri(s: MutableBuffer, f: Callable[[int, int], int | None]) -> None:
    """Call ``f(index, byte)`` for each byte of the string in ``s``, in place.

    When ``f`` returns an integer, that byte is replaced by its low byte;
    returning None leaves it unchanged.
    """
    if isinstance(s, memoryview):
        if s.readonly:
            raise TypeError("striteri needs a writable buffer")
    elif not isinstance(s, bytearray):
        raise TypeError(f"striteri needs a mutable byte buffer, got {type(s).__name__}")
    length = strlen(s)
    for index, value in enumerate(bytes(s[:length])):
        result = f(index, value)
        if result is not None:
            s[index] = operator.index(result) & 0xFF