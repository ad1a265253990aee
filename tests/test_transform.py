import pytest
from hypothesis import given
from hypothesis import strategies as st

from strmem.transform import (
    atoi,
    itoa,
    split,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


# atoi / itoa

@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n\v\f\r 7", 7),
        ("+15abc", 15),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("-+5", 0),
        ("12\0" "34", 12),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_bytes():
    assert atoi(b"  -2147483648") == -2147483648


@given(st.integers())
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_itoa_matches_python_formatting(n):
    assert itoa(n) == str(n)


def test_itoa_extremes():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_float():
    with pytest.raises(TypeError):
        itoa(1.5)


# substr

def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"


def test_substr_clips_length():
    assert substr("hello", 3, 100) == "lo"


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""
    assert substr(b"hello", 10, 2) == b""


def test_substr_start_at_end():
    assert substr("abc", 3, 1) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 1)
    with pytest.raises(ValueError):
        substr("abc", 0, -1)


@given(st.text(alphabet=st.characters(blacklist_characters="\0")), st.integers(0, 50), st.integers(0, 50))
def test_substr_length_bound(s, start, length):
    result = substr(s, start, length)
    assert len(result) <= length
    assert result in s


# strjoin

def test_strjoin_str_and_bytes():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(b"foo", b"bar") == b"foobar"


def test_strjoin_stops_at_nul():
    assert strjoin("ab\0zz", "cd") == "abcd"


def test_strjoin_mixed_types_rejected():
    with pytest.raises(TypeError):
        strjoin("a", b"b")


@given(st.text(alphabet=st.characters(blacklist_characters="\0")), st.text(alphabet=st.characters(blacklist_characters="\0")))
def test_strjoin_prefix_and_suffix(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_keeps_inner():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_all_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_input_and_set():
    assert strtrim("", "abc") == ""
    assert strtrim("  x ", "") == "  x "


def test_strtrim_bytes():
    assert strtrim(b"--word--", b"-") == b"word"


@given(st.text(alphabet="ab c"), st.text(alphabet="ab c", min_size=1))
def test_strtrim_ends_not_in_set(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset


# split

def test_split_drops_empty_words():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_no_separator_present():
    assert split("word", ",") == ["word"]


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_bytes_with_int_separator():
    assert split(b"a:b::c", ord(":")) == [b"a", b"b", b"c"]


def test_split_nul_separator():
    assert split("a b", "\0") == ["a b"]
    assert split("", 0) == []


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(st.text(alphabet="ab,"))
def test_split_invariants(s):
    words = split(s, ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert "".join(words) == s.replace(",", "")


# strmapi

def test_strmapi_uses_index():
    assert strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbCd"


def test_strmapi_bytes():
    assert strmapi(b"abc", lambda i, b: b - 32) == b"ABC"


def test_strmapi_empty():
    assert strmapi("", lambda i, c: "x") == ""


def test_strmapi_rejects_multichar():
    with pytest.raises(ValueError):
        strmapi("ab", lambda i, c: c * 2)


@given(st.text(alphabet=st.characters(blacklist_characters="\0")))
def test_strmapi_identity(s):
    assert strmapi(s, lambda i, c: c) == s


# striteri

def test_striteri_in_place():
    buf = bytearray(b"abc\0def")
    striteri(buf, lambda i, b: b - 32)
    assert buf == bytearray(b"ABC\0def")


def test_striteri_none_leaves_unchanged():
    buf = bytearray(b"hello")
    seen = []
    striteri(buf, lambda i, b: seen.append(i))
    assert buf == bytearray(b"hello")
    assert seen == [0, 1, 2, 3, 4]


def test_striteri_writable_memoryview():
    buf = bytearray(b"xyz")
    striteri(memoryview(buf), lambda i, b: ord("0") + i)
    assert buf == bytearray(b"012")


def test_striteri_rejects_immutable():
    with pytest.raises(TypeError):
        striteri(b"abc", lambda i, b: b)
    with pytest.raises(TypeError):
        striteri("abc", lambda i, b: b)
    with pytest.raises(TypeError):
        striteri(memoryview(b"abc"), lambda i, b: b)