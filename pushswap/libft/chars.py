"""Character classification and case conversion on integer character codes."""

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_UPPER_FIRST, _UPPER_LAST = ord("A"), ord("Z")
_LOWER_FIRST, _LOWER_LAST = ord("a"), ord("z")
_DIGIT_FIRST, _DIGIT_LAST = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _is_upper(code: int) -> bool:
    return _UPPER_FIRST <= code <= _UPPER_LAST


def _is_lower(code: int) -> bool:
    return _LOWER_FIRST <= code <= _LOWER_LAST


def is_alpha(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter."""
    return _is_upper(code) or _is_lower(code)


def is_digit(code: int) -> bool:
    """Return True if ``code`` is an ASCII decimal digit."""
    return _DIGIT_FIRST <= code <= _DIGIT_LAST


def is_alnum(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """Return True if ``code`` lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """Return True if ``code`` is a printable ASCII character, space included."""
    return 32 <= code <= 126


def to_upper(code: int) -> int:
    """Return the upper-case code for an ASCII lower-case letter, else ``code``."""
    return code - _CASE_OFFSET if _is_lower(code) else code


def to_lower(code: int) -> int:
    """Return the lower-case code for an ASCII upper-case letter, else ``code``."""
    return code + _CASE_OFFSET if _is_upper(code) else code