"""A small formatter for the conversions %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32 = 2**32
_INT32_MIN = -(2**31)
_ADDRESS_MASK = 2**64 - 1


def _as_int32(value: int) -> int:
    return (value - _INT32_MIN) % _UINT32 + _INT32_MIN


def _as_uint32(value: int) -> int:
    return value % _UINT32


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert_pointer(value: Any) -> str:
    if value is None or value == 0 and isinstance(value, int):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return f"0x{address & _ADDRESS_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    """Render one conversion; an unknown specifier renders nothing and uses no argument."""
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _convert_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_as_int32(int(value)))
    if spec == "u":
        return str(_as_uint32(int(value)))
    if spec == "x":
        return f"{_as_uint32(int(value)):x}"
    if spec == "X":
        return f"{_as_uint32(int(value)):X}"
    return _convert_pointer(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with each conversion replaced by the next argument.

    A ``%`` at the very end of *fmt* is kept as it is.
    """
    remaining = iter(args)
    pieces = []
    position = 0
    while position < len(fmt):
        ch = fmt[position]
        if ch == "%" and position + 1 < len(fmt):
            pieces.append(_convert(fmt[position + 1], remaining))
            position += 2
        else:
            pieces.append(ch)
            position += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to *stream* (stdout by default); return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)