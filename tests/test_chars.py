import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CHARS = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


def test_is_alpha_rejects_non_ascii_letters():
    assert is_alpha("é") is False
    assert is_alnum("é") is False


def test_is_ascii_boundaries():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii(129) is False


def test_is_print_boundaries():
    assert is_print(31) is False
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False
    assert is_print("!") is True


def test_accepts_int_codes():
    assert is_alpha(ord("A")) is True
    assert is_digit(ord("3")) is True
    assert is_alpha(ord("3")) is False


def test_to_upper_lower_round_trip():
    for ch in string.ascii_lowercase:
        assert to_lower(to_upper(ch)) == ch
        assert to_upper(ch) in string.ascii_uppercase
    for ch in string.ascii_uppercase:
        assert to_upper(to_lower(ch)) == ch
        assert to_lower(ch) in string.ascii_lowercase


def test_case_conversion_leaves_non_letters():
    for ch in string.digits + string.punctuation + " ":
        assert to_lower(ch) == ch
        assert to_upper(ch) == ch
    assert to_upper("é") == "é"


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_lower(200) == 200


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(3.0)