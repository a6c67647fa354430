import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import toupper
from ftkit.textops import itoa, split, striteri, strjoin, strmapi, strtrim, substr

_plain = st.text(alphabet=st.characters(blacklist_characters="\0"), max_size=30)


# substr

def test_substr_start_past_end_is_empty():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 42, 0) == ""


def test_substr_bytes_keeps_kind():
    assert substr(b"hello", 10, 2) == b""
    assert substr(b"hello", 0, 2) == b"he"


def test_substr_stops_at_nul():
    assert substr("ab\0cd", 0, 10) == "ab"


@given(_plain, st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_substr_is_piece_at_start(s, start, length):
    result = substr(s, start, length)
    assert len(result) == min(length, max(0, len(s) - start))
    assert s[start:].startswith(result)


def test_substr_rejects_negative_and_none():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(TypeError):
        substr(None, 0, 1)


# strjoin

@given(_plain, _plain)
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert len(joined) == len(a) + len(b)
    assert joined.startswith(a)
    assert joined.endswith(b)


def test_strjoin_missing_parts():
    assert strjoin(None, "abc") == "abc"
    assert strjoin("abc", None) == "abc"
    assert strjoin(None, None) == ""
    assert strjoin(None, b"xy") == b"xy"


def test_strjoin_mixed_kinds_raise():
    with pytest.raises(TypeError):
        strjoin("abc", b"def")


# strtrim

def test_strtrim_removes_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyx", "xy") == ""
    assert strtrim(b"--a-b--", b"-") == b"a-b"


def test_strtrim_empty_set_keeps_string():
    assert strtrim(" spaced ", "") == " spaced "


@given(_plain, st.text(alphabet="abc ", min_size=1, max_size=4))
def test_strtrim_invariants(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset
    else:
        assert all(ch in charset for ch in s)


def test_strtrim_rejects_none():
    with pytest.raises(TypeError):
        strtrim(None, "x")
    with pytest.raises(TypeError):
        strtrim("abc", None)


# split

def test_split_drops_empty_words():
    assert split("  a  b ", " ") == ["a", "b"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_with_nul_separator_gives_whole_string():
    assert split("one two", "\0") == ["one two"]


def test_split_bytes_with_int_separator():
    assert split(b"a,,b", ord(",")) == [b"a", b"b"]


@given(st.lists(st.text(alphabet="abc", min_size=1, max_size=5), max_size=6))
def test_split_round_trip(words):
    assert split(",".join(words), ",") == words


@given(_plain)
def test_split_words_never_contain_separator(s):
    words = split(s, " ")
    assert all(word and " " not in word for word in words)
    assert "".join(words) == s.replace(" ", "")


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")
    with pytest.raises(TypeError):
        split("a b", b" ")
    with pytest.raises(TypeError):
        split(None, " ")


# itoa

def test_itoa_fixed_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_out_of_range_and_type():
    with pytest.raises(OverflowError):
        itoa(2**31)
    with pytest.raises(OverflowError):
        itoa(-(2**31) - 1)
    with pytest.raises(TypeError):
        itoa("12")


# strmapi

def test_strmapi_with_toupper():
    assert strmapi("abc1", lambda i, c: toupper(c)) == "abc1".upper()


@given(_plain)
def test_strmapi_identity(s):
    assert strmapi(s, lambda i, c: c) == s


def test_strmapi_passes_indices():
    seen = []
    strmapi("abcd", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2, 3]


def test_strmapi_nul_in_result_ends_it():
    assert strmapi("abc", lambda i, c: "\0" if i == 1 else c) == "a"


def test_strmapi_bytes():
    assert strmapi(b"abc", lambda i, b: toupper(b)) == b"ABC"
    assert strmapi(bytearray(b"ab"), lambda i, b: b) == bytearray(b"ab")


def test_strmapi_rejects_none():
    with pytest.raises(TypeError):
        strmapi(None, lambda i, c: c)


# striteri

def test_striteri_changes_bytearray_in_place():
    buf = bytearray(b"abc\0def")
    striteri(buf, lambda i, b: toupper(b))
    assert buf == bytearray(b"ABC\0def")


def test_striteri_list_of_chars_and_none_keeps():
    chars = list("abcd")
    striteri(chars, lambda i, c: toupper(c) if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_striteri_passes_indices_and_values():
    seen = []
    striteri(bytearray(b"xy"), lambda i, b: seen.append((i, b)))
    assert seen == [(0, ord("x")), (1, ord("y"))]


def test_striteri_none_does_nothing_and_str_rejected():
    calls = []
    striteri(None, lambda i, c: calls.append(i))
    assert calls == []
    with pytest.raises(TypeError):
        striteri("abc", lambda i, c: c)