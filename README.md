# strmem

strmem is a small library of byte-buffer and string helpers. They behave like the
classic C string and memory routines. It offers length-limited copies and
comparisons, searches that stop at a NUL terminator, and numeric conversions.
The helpers take ordinary Python values such as `bytearray`, `bytes`, `memoryview`
and `str`, and they raise exceptions in the usual Python way.

## Installation

```
pip install strmem
```

To also install the test tools:

```
pip install "strmem[test]"
```

## Conventions

- A string is a `str` or a bytes-like object. Its content ends at its first NUL
  character, or at its end if it holds none.
- Searches return an index into the string or buffer, or `None` when nothing is
  found.
- A byte count that reaches past the end of a buffer raises `ValueError`. A
  negative count also raises `ValueError`.
- Functions that write need a mutable buffer, such as a `bytearray` or a
  writable `memoryview`.

## Modules

- `strmem.chars`: ASCII character classification and case mapping. Each
  function takes an integer code or a one-character string. The functions are
  `isalnum`, `isalpha`, `isascii`, `isdigit` and `isprint`, which return `bool`,
  and `tolower` and `toupper`. The case functions return the same kind of value
  they were given.
- `strmem.memory`: operations on byte buffers.
  - `memset`, `bzero`, `memcpy` and `memmove` change a buffer and return it.
  - `memchr` returns an index or `None`.
  - `memcmp` returns the byte difference at the first mismatch.
  - `calloc` returns a zeroed `bytearray`. A zero count or zero size gives one
    byte. A total that would overflow the platform size type raises
    `MemoryError`.
- `strmem.strings`: measuring, copying, comparing and searching strings. The
  functions are `strlen`, `strdup`, `strlcpy`, `strlcat`, `strncmp`, `strchr`,
  `strrchr` and `strnstr`.
  - `strlcpy` and `strlcat` copy into a mutable byte buffer. They never write
    more than `size` bytes, and they return the length the full result would
    have.
- `strmem.output`: writing to a file descriptor with `os.write`. The functions
  are `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`.
- `strmem.transform`: building new strings. The functions are `atoi`, `itoa`,
  `substr`, `strjoin`, `strtrim`, `split`, `strmapi` and `striteri`.
  - `split` drops empty words.
  - `striteri` changes a mutable byte buffer in place.

## Example

```python
from strmem.chars import isdigit, toupper
from strmem.memory import memchr
from strmem.strings import strlcpy
from strmem.transform import atoi, itoa, split, strtrim

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
isdigit("7")                   # True
toupper("a")                   # "A"
toupper(ord("a"))              # 65
memchr(b"abc", ord("c"), 3)    # 2

buf = bytearray(4)
strlcpy(buf, b"hello", 4)      # 5; buf is now bytearray(b"hel\x00")
```

## Running the tests

```
pytest
```