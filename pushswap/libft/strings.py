"""String helpers: searching, comparing, slicing, splitting and number conversion."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
    "itoa",
    "atoi",
]

INT_MIN = -2147483648
INT_MAX = 2147483647
_LONG_MAX = 9223372036854775807
_ULONG_MODULUS = 1 << 64
_WHITESPACE = " \t\n\v\f\r"
_TERMINATOR = "\0"


def _to_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping like a C cast."""
    return ((value - INT_MIN) % (1 << 32)) + INT_MIN


def _single_char(char: str, what: str) -> str:
    if len(char) != 1:
        raise ValueError(f"{what}: expected a single character, got {char!r}")
    return char


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(char, "strchr")
    if char == _TERMINATOR:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(char, "strrchr")
    if char == _TERMINATOR:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return -1, 0 or 1."""
    if count < 0:
        raise ValueError("strncmp: count must not be negative")
    left, right = first[:count], second[:count]
    return (left > right) - (left < right)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first lies wholly within ``haystack[:length]``, or None.

    An empty needle is found at index 0 unless the haystack is shorter than it.
    """
    if length < 0:
        raise ValueError("strnstr: length must not be negative")
    if len(haystack) < len(needle):
        return None
    if not needle:
        return 0
    if len(needle) > length:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if first is None or second is None:
        raise TypeError("strjoin: both strings are required")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("strtrim: text and charset are required")
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping the empty pieces."""
    if text is None:
        raise TypeError("split: text is required")
    _single_char(separator, "split")
    if separator == _TERMINATOR:
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: MutableSequence, func: Callable[[int, MutableSequence], None]) -> None:
    """Call ``func(index, text)`` for every position of the mutable ``text``.

    ``func`` may change ``text[index]`` in place.
    """
    for index in range(len(text)):
        func(index, text)


def itoa(number: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"itoa: {number} is outside the 32-bit integer range")
    return str(number)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the lenient C way.

    Leading whitespace and one sign are accepted, parsing stops at the first
    non-digit, and the result wraps to 32 bits. A magnitude beyond the 64-bit
    signed limit gives -1 for positive and 0 for negative input.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    magnitude = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        magnitude = (magnitude * 10 + ord(char) - ord("0")) % _ULONG_MODULUS
        if magnitude > _LONG_MAX:
            return -1 if sign == 1 else 0
    return _to_int32(magnitude * sign)