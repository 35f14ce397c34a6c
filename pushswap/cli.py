"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.algorithm import sort_stacks
from pushswap.parsing import InputError, bit_width, parse_numbers, rank
from pushswap.stacks import Stacks


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read integers from the arguments and print one move per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if not args:
        out.write("Error")
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError:
        out.write("Error\n")
        return 0
    ranked = rank(numbers)
    sort_stacks(Stacks(ranked, stream=out), bit_width(ranked))
    return 0


if __name__ == "__main__":
    sys.exit(main())