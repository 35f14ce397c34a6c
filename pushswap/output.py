"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from pushswap.numbers import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer is taken as a byte-sized character code."""
    if isinstance(c, int):
        ch = chr(c & 0xFF)
    elif isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        ch = c
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _target(stream).write(ch)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write *text* as it is."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write *text* followed by a newline."""
    put_str(text, stream)
    _target(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(stream).write(itoa(n))