"""Conversions between text and 32-bit integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \n\t\v\f\r"


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped; a single sign is allowed, more than one
    sign gives 0; parsing stops at the first non-digit. The result wraps
    like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    signs = len(rest) - len(rest.lstrip("+-"))
    if signs > 1:
        return 0
    sign = -1 if rest[:signs] == "-" else 1
    digits = rest[signs:]
    end = 0
    while end < len(digits) and "0" <= digits[end] <= "9":
        end += 1
    value = int(digits[:end]) if end else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)