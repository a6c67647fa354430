import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import isalnum, isalpha, isascii, isdigit, isprint, tolower, toupper


@pytest.mark.parametrize("code", range(128))
def test_classification_matches_ascii_tables(code):
    ch = chr(code)
    assert isalpha(code) == (ch in string.ascii_letters)
    assert isdigit(code) == (ch in string.digits)
    assert isalnum(code) == (ch in string.ascii_letters + string.digits)
    assert isprint(code) == (ch in string.printable and ch not in "\t\n\r\x0b\x0c")


@given(st.integers(min_value=-1000, max_value=100000))
def test_isalnum_is_alpha_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@given(st.integers(min_value=-1000, max_value=100000))
def test_isascii_range(code):
    assert isascii(code) == (0 <= code <= 127)


@given(st.integers(min_value=-1000, max_value=100000))
def test_printable_implies_ascii(code):
    if isprint(code):
        assert isascii(code)
    else:
        assert not (32 <= code <= 126)


def test_non_ascii_letters_are_not_alpha():
    assert not isalpha("é")
    assert not isalnum("ß")
    assert not isdigit("٣")


def test_string_and_int_agree():
    for ch in string.printable:
        assert isalpha(ch) == isalpha(ord(ch))
        assert isprint(ch) == isprint(ord(ch))


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_conversion_of_letters(ch):
    assert tolower(ch) == ch.lower()
    assert toupper(ch) == ch.upper()
    assert tolower(ord(ch)) == ord(ch.lower())
    assert toupper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " éÉ")
def test_case_conversion_leaves_others(ch):
    assert tolower(ch) == ch
    assert toupper(ch) == ch


@given(st.integers(min_value=-1000, max_value=100000))
def test_case_round_trip(code):
    assert tolower(toupper(code)) == tolower(code)
    assert toupper(tolower(code)) == toupper(code)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        tolower("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)
    with pytest.raises(TypeError):
        toupper(None)