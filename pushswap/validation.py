"""Checks on the command-line arguments before they become a stack."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from pushswap.libft.strings import INT_MAX, INT_MIN, atoi, split

__all__ = [
    "InputError",
    "validate_arguments",
    "check_single_argument",
    "check_multiple_arguments",
    "is_multi_word",
    "has_single_spaces",
    "has_valid_characters",
    "check_integers",
    "within_int_range",
    "within_limits",
    "has_no_repeats",
]

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the program's arguments are not an acceptable list of integers."""


def validate_arguments(argv: Sequence[str]) -> list[str]:
    """Validate the arguments (program name excluded) and return the number tokens.

    One argument is read as a space separated list; several arguments are one
    number each. Raises InputError describing the first problem found.
    """
    if not argv:
        raise InputError("Error(No input provided)")
    if len(argv) == 1:
        return check_single_argument(argv)
    return check_multiple_arguments(argv)


def check_single_argument(argv: Sequence[str]) -> list[str]:
    """Validate a single argument holding several space separated numbers."""
    text = argv[0]
    if not is_multi_word(text):
        raise InputError("Error(There is only one integer)")
    if text == "":
        raise InputError("Error(No input provided)")
    if not has_single_spaces(text):
        raise InputError("Error(There are multiple spaces)")
    tokens = split(text, " ")
    if not tokens:
        raise InputError("Error(ft_split failed)")
    if not has_valid_characters(tokens):
        raise InputError("Error(Forbidden chars!)")
    check_integers(tokens)
    return tokens


def check_multiple_arguments(argv: Sequence[str]) -> list[str]:
    """Validate several arguments, each of which must be one number."""
    if any(is_multi_word(argument) for argument in argv):
        raise InputError("Error(Can't use mixed syntax)")
    tokens = list(argv)
    if not has_valid_characters(tokens):
        raise InputError("Error(There are forbidden chars)")
    check_integers(tokens)
    return tokens


def is_multi_word(text: str) -> bool:
    """Return True unless splitting ``text`` on spaces gives exactly one word."""
    return len(split(text, " ")) != 1


def has_single_spaces(text: str) -> bool:
    """Return True if ``text`` never holds two spaces in a row."""
    return "  " not in text


def _is_valid_token(token: str) -> bool:
    if not token:
        return True
    if any(char != "-" and not char.isascii() or char != "-" and not char.isdigit()
           for char in token):
        return False
    if token == "-":
        return False
    if "-" in token[1:]:
        return False
    return not (token[0] == "0" and len(token) > 1)


def has_valid_characters(tokens: Sequence[str]) -> bool:
    """Return True if every token is digits with at most a leading minus.

    A lone minus and numbers with a leading zero, such as ``003``, are refused.
    """
    return all(_is_valid_token(token) for token in tokens)


def check_integers(tokens: Sequence[str]) -> None:
    """Raise InputError if a token overflows 32 bits or a number repeats."""
    if not within_limits(tokens):
        raise InputError("Error(Integer overflow)")
    if not has_no_repeats(tokens):
        raise InputError("Error(Integer repeats)")


def within_int_range(text: str) -> bool:
    """Return True if the leading number in ``text`` fits a signed 32-bit integer."""
    rest = text.lstrip(_WHITESPACE)
    negative = rest[:1] == "-"
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    limit = -INT_MIN if negative else INT_MAX
    magnitude = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        magnitude = magnitude * 10 + ord(char) - ord("0")
        if magnitude > limit:
            return False
    return True


def within_limits(tokens: Sequence[str]) -> bool:
    """Return True if every token fits a signed 32-bit integer."""
    return all(within_int_range(token) for token in tokens)


def has_no_repeats(tokens: Sequence[str]) -> bool:
    """Return True if no two tokens parse to the same integer."""
    numbers = sorted(atoi(token) for token in tokens)
    return all(a != b for a, b in pairwise(numbers))