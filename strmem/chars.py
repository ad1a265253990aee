"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Classification is strictly ASCII: codes outside 0-127 never match.
"""

from __future__ import annotations

from typing import overload

_DIGITS = range(ord("0"), ord("9") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_PRINTABLE = range(32, 127)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, validating its form."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def isdigit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return _code(c) in _DIGITS


def isalpha(c: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0-127."""
    return _code(c) in _ASCII


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return _code(c) in _PRINTABLE


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...
def tolower(c):
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if code in _UPPER:
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...
def toupper(c):
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code