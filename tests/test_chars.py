import string

import pytest

from pushswap.libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_printable(code):
    assert is_print(code) == chr(code).isprintable()


@pytest.mark.parametrize("code", [-1, 128, 200, 1000])
def test_non_ascii_codes_are_rejected(code):
    assert is_ascii(code) is False
    assert is_alpha(code) is False
    assert is_digit(code) is False
    assert is_print(code) is False


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True


def test_print_bounds():
    assert is_print(ord(" ")) is True
    assert is_print(ord("~")) is True
    assert is_print(127) is False


@pytest.mark.parametrize("lower, upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_round_trip(lower, upper):
    assert to_upper(ord(lower)) == ord(upper)
    assert to_lower(ord(upper)) == ord(lower)
    assert to_lower(to_upper(ord(lower))) == ord(lower)


@pytest.mark.parametrize("char", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_other_chars(char):
    assert to_upper(ord(char)) == ord(char)
    assert to_lower(ord(char)) == ord(char)


def test_case_conversion_already_in_case():
    assert to_upper(ord("Q")) == ord("Q")
    assert to_lower(ord("q")) == ord("q")