"""String helpers with the bounded-copy and search semantics of classic C routines.

Python strings carry their length, so the helpers work on plain ``str`` values.
Positions are returned as indices and a missing match as ``None``. Routines
that write into a destination return the new contents along with the length
they report.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Union

Char = Union[int, str]


def _as_char(c: Char) -> str:
    """Return *c* as a one-character string, truncated to a byte like a C char."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def strlen(text: str) -> int:
    """Return the number of characters in *text*."""
    return len(text)


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* slots, keeping one for the terminator.

    Returns the new buffer contents and the full length of *src*. With a size
    of 0 nothing is written and *dest* comes back unchanged.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* slots.

    Returns the new contents and the length the combined string would have
    had. If *dest* already fills the buffer it is left alone and the reported
    length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dest) >= size:
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the first *c* in *text*, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the last *c* in *text*, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters; return the difference of the first unequal pair.

    The end of a string compares as a NUL character, so a prefix sorts first.
    """
    if n <= 0:
        return 0
    for a, b in zip(first[:n] + "\0", second[:n] + "\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find *little* inside the first *length* characters of *big*.

    An empty *little* matches at index 0. Returns the index of the match or None.
    """
    if not little:
        return 0
    if length <= 0:
        return None
    width = len(little)
    for start in range(len(big)):
        if start + width > length:
            break
        if big[start:start + width] == little:
            return start
    return None


def strdup(text: str) -> str:
    """Return a copy of *text*."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Return up to *length* characters of *text* from *start*.

    A start at or past the end, or a length of zero or less, gives "".
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if len(text) <= start or length <= 0:
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in *charset*."""
    return text.strip(charset)


def split(text: str, sep: Char) -> List[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    ch = _as_char(sep)
    return [word for word in text.split(ch) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of *text*."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: List[str], func: Callable[[int, str], str]) -> None:
    """Replace each entry of the list *chars* in place with ``func(index, char)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)