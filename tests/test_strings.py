import pytest

from pushswap.libft.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("text", ["", "a", "hello world", "12 34 56"])
def test_strlen_matches_character_count(text):
    assert strlen(text) == len(text)


def test_strchr_finds_first_occurrence():
    text = "banana"
    index = strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_strchr_missing_and_terminator():
    assert strchr("banana", "z") is None
    assert strchr("banana", "\0") == len("banana")


def test_strrchr_finds_last_occurrence():
    text = "banana"
    index = strrchr(text, "n")
    assert text[index] == "n"
    assert "n" not in text[index + 1:]


def test_strrchr_missing_and_terminator():
    assert strrchr("abc", "x") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_orders():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_is_antisymmetric():
    pairs = [("apple", "apply"), ("", "a"), ("zz", "z")]
    for first, second in pairs:
        assert strncmp(first, second, 5) == -strncmp(second, first, 5)


def test_strnstr_finds_within_length():
    haystack = "hello world"
    needle = "world"
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle


def test_strnstr_respects_length():
    assert strnstr("hello world", "world", len("hello world") - 1) is None
    assert strnstr("abc", "abcd", 10) is None
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "bc", 1) is None


def test_strdup_copies():
    assert strdup("push swap") == "push swap"


def test_substr_behaviour():
    text = "abcdef"
    assert substr(text, 2, 3) == text[2:5]
    assert substr(text, 4, 100) == text[4:]
    assert substr(text, len(text), 2) == ""
    with pytest.raises(ValueError):
        substr(text, -1, 2)


def test_strjoin_concatenates():
    assert strjoin("push", "_swap") == "push_swap"
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim():
    assert strtrim("  xx hello xx  ", " x") == "hello"
    assert strtrim("aaaa", "a") == ""
    assert strtrim("keep", "") == "keep"


@pytest.mark.parametrize(
    "text",
    ["1 2 3", "  1   2  ", "", "   ", "-5 42 0", "single"],
)
def test_split_matches_whitespace_free_pieces(text):
    pieces = split(text, " ")
    assert pieces == [p for p in text.split(" ") if p]
    assert all(" " not in piece for piece in pieces)


def test_split_other_separator():
    assert split(",,a,,b,", ",") == ["a", "b"]
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strmapi_passes_index_and_char():
    result = strmapi("abc", lambda index, char: char * (index + 1))
    assert result == "a" + "bb" + "ccc"


def test_striteri_mutates_in_place():
    chars = list("abc")

    def upper_even(index, buffer):
        if index % 2 == 0:
            buffer[index] = buffer[index].upper()

    assert striteri(chars, upper_even) is None
    assert chars == ["A", "b", "C"]


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number
    assert itoa(number) == str(number)


def test_itoa_min_value():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)


def test_atoi_leading_whitespace_and_sign():
    assert atoi(" \t\n42") == atoi("42")
    assert atoi("+42") == atoi("42")
    assert atoi("-42") == -atoi("42")


def test_atoi_stops_at_non_digit():
    assert atoi("123abc") == atoi("123")
    assert atoi("12 34") == atoi("12")
    assert atoi("abc") == 0
    assert atoi("--1") == 0
    assert atoi("") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483649") == 2147483647


def test_atoi_beyond_long_limit():
    assert atoi("9223372036854775808") == -1
    assert atoi("-9223372036854775808") == 0