"""The two stacks of the puzzle and the eleven moves allowed on them."""

from __future__ import annotations

from typing import Iterable, List, Optional, TextIO


def _swap(values: List[int]) -> None:
    values[0], values[1] = values[1], values[0]


def _rotate(values: List[int]) -> None:
    values.append(values.pop(0))


def _reverse_rotate(values: List[int]) -> None:
    values.insert(0, values.pop())


class Stacks:
    """Stacks *a* and *b*, top first, with a log of the moves made.

    Every move that counts is appended to :attr:`operations` and, when a
    stream is given, written to it followed by a newline.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        stream: Optional[TextIO] = None,
    ) -> None:
        self.a: List[int] = list(a)
        self.b: List[int] = list(b)
        self.stream = stream
        self.operations: List[str] = []

    def _record(self, name: str) -> None:
        self.operations.append(name)
        if self.stream is not None:
            self.stream.write(name + "\n")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if len(self.a) > 1:
            _swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        if len(self.b) > 1:
            _swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks; nothing moves while a holds fewer than two."""
        if len(self.a) > 1:
            _swap(self.a)
            if len(self.b) > 1:
                _swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of b onto a; does nothing when b is empty."""
        if self.b:
            self.a.insert(0, self.b.pop(0))
            self._record("pa")

    def pb(self) -> None:
        """Move the top of a onto b; does nothing when a is empty."""
        if self.a:
            self.b.insert(0, self.a.pop(0))
            self._record("pb")

    def ra(self) -> None:
        """Shift a up by one so its top becomes its bottom."""
        if len(self.a) > 1:
            _rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Shift b up by one so its top becomes its bottom."""
        if len(self.b) > 1:
            _rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks up."""
        if len(self.a) > 1:
            _rotate(self.a)
        if len(self.b) > 1:
            _rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Shift a down by one; only counts when a holds two or more."""
        if len(self.a) > 1:
            _reverse_rotate(self.a)
            self._record("rra")

    def rrb(self) -> None:
        """Shift b down by one; only counts when b holds two or more."""
        if len(self.b) > 1:
            _reverse_rotate(self.b)
            self._record("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down."""
        if len(self.a) > 1:
            _reverse_rotate(self.a)
        if len(self.b) > 1:
            _reverse_rotate(self.b)
        self._record("rrr")

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"