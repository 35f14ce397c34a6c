"""Sorting stack a with the allowed moves."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, List

from pushswap.parsing import InputError, bit_width, rank
from pushswap.stacks import Stacks


def _leading(flags: List[bool]) -> int:
    return sum(1 for _ in takewhile(bool, flags))


def _two_runs_cover(values: List[int], step: int) -> bool:
    """True when two runs of neighbours differing by *step* cover all but one pair."""
    pairs = [second - first == step for first, second in zip(values, values[1:])]
    first_run = _leading(pairs)
    second_run = _leading(pairs[first_run + 1:])
    return first_run + second_run >= len(values) - 2


def _rotated_into_order(stacks: Stacks) -> bool:
    a = stacks.a
    if a[0] < a[1]:
        if _two_runs_cover(a, 1):
            while stacks.a[0] != 1:
                stacks.rra()
            return True
    elif _two_runs_cover(a, -1):
        while stacks.a[0] != 1:
            stacks.ra()
        return True
    return False


def _bring_to_top(stacks: Stacks, value: int) -> None:
    if value not in stacks.a:
        raise ValueError(f"stack a does not hold {value}")
    while stacks.a[0] != value:
        stacks.ra()


def sort_three(stacks: Stacks) -> None:
    """Order the top three elements of a by their relative order."""
    if len(stacks.a) < 3:
        raise ValueError("stack a must hold at least three elements")
    a = stacks.a
    if a[0] < a[1] and a[1] > a[2] and a[0] < a[2]:
        stacks.sa()
        stacks.ra()
    if a[0] < a[1] and a[1] > a[2] and a[0] > a[2]:
        stacks.rra()
    if a[0] > a[1] and a[1] < a[2] and a[0] < a[2]:
        stacks.sa()
    if a[0] > a[1] and a[1] > a[2]:
        stacks.sa()
        stacks.rra()
    if a[0] > a[1] and a[1] < a[2] and a[0] < a[2]:
        stacks.ra()


def sort_five(stacks: Stacks) -> None:
    """Sort four or five ranked values (1 to n) in stack a."""
    if len(stacks.a) not in (4, 5):
        raise ValueError("stack a must hold four or five elements")
    if _rotated_into_order(stacks):
        return
    _bring_to_top(stacks, 1)
    stacks.pb()
    if len(stacks.a) > 3:
        _bring_to_top(stacks, 2)
        stacks.pb()
    sort_three(stacks)
    if len(stacks.b) == 2:
        while stacks.b[0] != 1:
            stacks.rb()
        stacks.pa()
        stacks.pa()
    else:
        stacks.pa()


def _handle_small(stacks: Stacks) -> bool:
    """Deal with sorted and short inputs; return True if nothing is left to do."""
    a = stacks.a
    if len(a) < 2 or all(second - first == 1 for first, second in zip(a, a[1:])):
        return True
    if len(a) == 2:
        stacks.ra()
        return True
    if len(a) == 3:
        sort_three(stacks)
        return True
    if len(a) < 6:
        sort_five(stacks)
        return True
    return False


def sort_stacks(stacks: Stacks, bits: int) -> None:
    """Sort ranked values in a, using a binary radix sort over *bits* bits for long inputs."""
    if _handle_small(stacks):
        return
    for bit in range(bits):
        for _ in range(len(stacks.a)):
            if not stacks.a:
                break
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.b:
            stacks.pa()
    stacks.pa()


def solve(values: Iterable[int]) -> List[str]:
    """Return the moves the sorter makes for distinct integers *values*."""
    values = list(values)
    if len(set(values)) != len(values):
        raise InputError("values must be distinct")
    ranked = rank(values)
    stacks = Stacks(ranked)
    sort_stacks(stacks, bit_width(ranked))
    return stacks.operations