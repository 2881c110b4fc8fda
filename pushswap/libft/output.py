"""Writing characters, strings and numbers to streams, and printf-style formatting."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from pushswap.libft.strings import INT_MIN, itoa

__all__ = [
    "NULL_STRING",
    "NULL_POINTER",
    "putchar_fd",
    "putstr_fd",
    "putendl_fd",
    "putnbr_fd",
    "format_printf",
    "printf",
]

if sys.platform == "darwin":
    NULL_STRING = "0x0"
    NULL_POINTER = "0x0"
else:
    NULL_STRING = "(null)"
    NULL_POINTER = "(nil)"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def putchar_fd(char: str, stream: TextIO) -> None:
    """Write the single character ``char`` to ``stream``."""
    if len(char) != 1:
        raise ValueError(f"putchar_fd: expected a single character, got {char!r}")
    stream.write(char)


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` to ``stream``."""
    stream.write(text)


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    stream.write(text)
    stream.write("\n")


def putnbr_fd(number: int, stream: TextIO) -> None:
    """Write the decimal form of a 32-bit signed ``number`` to ``stream``."""
    stream.write(itoa(number))


def _to_int32(value: int) -> int:
    return ((value - INT_MIN) % (1 << 32)) + INT_MIN


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    return NULL_STRING if value is None else str(value)


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _POINTER_MASK
    if address == 0:
        return NULL_POINTER
    return "0x" + format(address, "x")


def _format_decimal(value: Any) -> str:
    return itoa(_to_int32(int(value)))


def _format_unsigned(value: Any) -> str:
    return str(int(value) & _UINT_MASK)


def _format_lower_hex(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "x")


def _format_upper_hex(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_decimal,
    "i": _format_decimal,
    "u": _format_unsigned,
    "x": _format_lower_hex,
    "X": _format_upper_hex,
}


def _next_argument(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"printf: missing argument for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with the conversions %c %s %p %d %i %u %x %X and %%.

    Any other character after ``%`` is dropped together with the ``%``.
    Raises TypeError when there are fewer arguments than conversions.
    """
    values = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            parts.append("%")
        elif spec in _CONVERSIONS:
            parts.append(_CONVERSIONS[spec](_next_argument(values, spec)))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)