"""Byte-buffer helpers working on bytearray and bytes objects."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(buffer, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buffer):
        raise IndexError(f"{name} holds {len(buffer)} bytes, {n} requested")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buffer* with the low byte of *value*."""
    _check_length(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buffer*."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of *count* elements of *size* bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > SIZE_MAX // count:
        raise OverflowError("requested allocation exceeds the addressable size")
    return bytearray(count * size)


def memcpy(dest: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy the first *n* bytes of *src* into *dest* and return *dest*."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src are required")
    _check_length(src, n, "src")
    _check_length(dest, n, "dest")
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move *n* bytes inside *buffer* from offset *src* to offset *dest*.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if max(dest, src) + n > len(buffer):
        raise IndexError("move reaches past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data, value: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to *value* within *n* bytes, or None."""
    _check_length(data, n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, n: int) -> int:
    """Compare *n* bytes; return the difference of the first unequal pair, or 0."""
    _check_length(first, n, "first")
    _check_length(second, n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0