import string

import pytest

from sigtalk.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", ["A", "z", "G", "m", "Z"])
def test_is_alpha_letters(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", ["9", "#", " "])
def test_is_alpha_non_letters(c):
    assert is_alpha(c) is False


def test_is_alpha_matches_ascii_letters():
    for code in range(256):
        assert is_alpha(code) == (chr(code) in string.ascii_letters)


def test_is_digit_matches_ascii_digits():
    for code in range(256):
        assert is_digit(code) == (chr(code) in string.digits)


def test_is_digit_examples():
    assert is_digit("9") is True
    assert is_digit("f") is False
    assert is_digit(30) is False


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_alnum_examples():
    assert is_alnum(56) is True
    assert is_alnum("f") is True
    assert is_alnum(2) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(31) is False
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(127) is False
    assert is_print(2) is False
    assert is_print(55) is True


def test_to_upper_matches_str_upper_for_lowercase():
    for c in string.ascii_lowercase:
        assert to_upper(c) == c.upper()
        assert to_upper(ord(c)) == ord(c.upper())


def test_to_lower_matches_str_lower_for_uppercase():
    for c in string.ascii_uppercase:
        assert to_lower(c) == c.lower()
        assert to_lower(ord(c)) == ord(c.lower())


@pytest.mark.parametrize("c", ["1", "#", " ", "é"])
def test_converters_leave_other_characters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_round_trip():
    for c in string.ascii_letters:
        assert to_lower(to_upper(c)) == c.lower()
        assert to_upper(to_lower(c)) == c.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")