"""Turning command-line words into the ranked values that are to be sorted."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, List

from pushswap.strings import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = " \n\t\v\f\r"
_MAX_DIGITS = 10


class InputError(ValueError):
    """Raised for input that is not a list of distinct 32-bit integers."""


def parse_int(text: str) -> int:
    """Parse *text* strictly as a 32-bit signed integer.

    Leading whitespace and at most one sign are allowed; everything after
    them must be between one and ten decimal digits.
    """
    rest = text.lstrip(_WHITESPACE)
    signs = len(rest) - len(rest.lstrip("+-"))
    if signs > 1:
        raise InputError(f"too many signs in {text!r}")
    negative = rest[:signs] == "-"
    digits = rest[signs:]
    if not digits or len(digits) > _MAX_DIGITS:
        raise InputError(f"not a number: {text!r}")
    if not all("0" <= ch <= "9" for ch in digits):
        raise InputError(f"not a number: {text!r}")
    value = -int(digits) if negative else int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def split_arguments(args: Iterable[str]) -> List[str]:
    """Join the arguments with spaces and split them into space-separated words."""
    return split(" ".join(args), " ")


def parse_numbers(args: Iterable[str]) -> List[int]:
    """Parse every word of *args*; raise InputError on bad or repeated numbers."""
    numbers: List[int] = []
    seen = set()
    for word in split_arguments(args):
        value = parse_int(word)
        if value in seen:
            raise InputError(f"duplicate number: {value}")
        seen.add(value)
        numbers.append(value)
    return numbers


def rank(values: Iterable[int]) -> List[int]:
    """Replace each value by its 1-based position in sorted order."""
    values = list(values)
    ordered = sorted(values)
    return [bisect_left(ordered, value) + 1 for value in values]


def bit_width(values: Iterable[int]) -> int:
    """Return the number of bits needed for the largest non-negative value."""
    return max([0, *values]).bit_length()