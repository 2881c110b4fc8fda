"""Byte buffer operations on mutable buffers such as ``bytearray``."""

from __future__ import annotations

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
    "strlcpy",
    "strlcat",
]


def _require(length: int, count: int, what: str) -> None:
    if count < 0:
        raise ValueError(f"{what}: count must not be negative")
    if count > length:
        raise ValueError(f"{what}: count {count} exceeds buffer length {length}")


def _cstrlen(data) -> int:
    """Length of ``data`` up to its first NUL byte, or the whole buffer."""
    raw = bytes(data)
    end = raw.find(0)
    return len(raw) if end < 0 else end


def memset(buffer, value: int, count: int):
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` and return it."""
    _require(len(buffer), count, "memset")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst, src, count: int):
    """Copy ``count`` bytes from ``src`` into ``dst`` and return ``dst``.

    When both buffers are ``None`` nothing is copied and ``None`` is returned.
    """
    if dst is None and src is None:
        return None
    _require(len(src), count, "memcpy")
    _require(len(dst), count, "memcpy")
    dst[:count] = bytes(src[:count])
    return dst


def memmove(dst, src, count: int):
    """Copy ``count`` bytes from ``src`` into ``dst``, safe for overlapping views."""
    if dst is None and src is None:
        return None
    _require(len(src), count, "memmove")
    _require(len(dst), count, "memmove")
    # Taking a snapshot of the source first makes overlap harmless.
    dst[:count] = bytes(src[:count])
    return dst


def memchr(data, value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``count`` bytes."""
    _require(len(data), count, "memchr")
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first unequal pair, or 0."""
    _require(len(first), count, "memcmp")
    _require(len(second), count, "memcmp")
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0


def strlcpy(dst, src, size: int) -> int:
    """Copy the NUL-terminated ``src`` into ``dst`` holding at most ``size`` bytes.

    The result is always NUL-terminated when ``size`` is positive. Returns the
    length of ``src``.
    """
    src_len = _cstrlen(src)
    if size:
        copied = min(src_len, size - 1)
        _require(len(dst), copied + 1, "strlcpy")
        dst[:copied] = bytes(src[:copied])
        dst[copied] = 0
    return src_len


def strlcat(dst, src, size: int) -> int:
    """Append ``src`` to the NUL-terminated ``dst`` within ``size`` bytes in total.

    Returns the length the concatenation would have had, or ``size`` plus the
    length of ``src`` when ``dst`` already fills ``size``.
    """
    dst_len = _cstrlen(dst)
    src_len = _cstrlen(src)
    if size == 0 or size <= dst_len:
        return size + src_len
    copied = min(src_len, size - 1 - dst_len)
    _require(len(dst), dst_len + copied + 1, "strlcat")
    dst[dst_len:dst_len + copied] = bytes(src[:copied])
    dst[dst_len + copied] = 0
    return dst_len + src_len