# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations. It prints each operation it performs, one per
line. Applying the printed operations in order to the input leaves the
numbers in stack `a` in ascending order, with the smallest on top.

## Operations

| Name  | Effect                                               |
|-------|------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                     |
| `sb`  | swap the top two elements of `b`                     |
| `ss`  | `sa` and `sb` together                               |
| `pa`  | move the top of `b` onto `a`                         |
| `pb`  | move the top of `a` onto `b`                         |
| `ra`  | rotate `a` up (the top element goes to the bottom)   |
| `rb`  | rotate `b` up                                        |
| `rr`  | `ra` and `rb` together                               |
| `rra` | rotate `a` down (the bottom element goes to the top) |
| `rrb` | rotate `b` down                                      |
| `rrr` | `rra` and `rrb` together                             |

`pa`, `pb`, `rra` and `rrb` are recorded only when they move something.
The other operations are always recorded, even when the stack is too
short for them to have any effect.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3" 87 23
```

You can also run the command as `python -m pushswap.cli`.

You can give the numbers as separate arguments or as one quoted string
separated by spaces. Each number may have leading whitespace and one
sign, followed by one to ten digits. It must fit in a 32-bit signed
integer and may appear only once.

If any number is invalid or repeated, the command prints `Error`
followed by a newline. If no arguments are given, it prints `Error`
without a newline. Both messages go to standard output, and the exit
status is always 0.

An input that is already in order produces no output. Two numbers are
fixed with a single `ra`, and three numbers with a short fixed sequence.
Four or five numbers use a small dedicated routine. Larger inputs use a
binary radix sort over the ranks of the numbers.

## Library use

```python
from pushswap.algorithm import solve
from pushswap.parsing import parse_numbers

values = parse_numbers(["3 1 2"])   # [3, 1, 2]; raises InputError on bad input
moves = solve(values)               # the operations, as a list of strings
```

- `pushswap.parsing` has the following functions:
  - `parse_int` parses one number strictly.
  - `split_arguments` breaks the arguments into words.
  - `parse_numbers` parses the words and rejects duplicates.
  - `rank` maps values to their 1-based sorted positions.
  - `bit_width` gives the number of bits of the largest value.

  Bad input raises `InputError`, a subclass of `ValueError`.
- `pushswap.stacks.Stacks(a, b, stream)` holds the two stacks as lists,
  top first. It has one method per operation and records each operation
  in `operations`. If you pass a `stream`, each operation is also written
  to it, one per line.
- `pushswap.algorithm` has the sorting routines:
  - `sort_three` and `sort_five` sort short stacks.
  - `sort_stacks(stacks, bits)` sorts ranked values of any length.
  - `solve(values)` ranks the values, sorts them and returns the moves.

## Helper modules

The package also has small general-purpose modules:

- `chars`: ASCII character tests (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`) and case conversion (`to_upper`, `to_lower`).
- `memory`: byte-buffer helpers on `bytearray` (`memset`, `bzero`,
  `calloc`, `memcpy`, `memmove`, `memchr`, `memcmp`).
- `numbers`: `atoi` (lenient, wraps to 32 bits) and `itoa`.
- `strings`: bounded copying and searching on `str` (`strlen`,
  `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`). Positions come back as indices, and a missing match as
  `None`.
- `linked`: `Node` and `LinkedList`, a singly linked list with
  `add_front`, `add_back`, `last`, `clear`, `for_each`, `map`, `len()`
  and iteration.
- `output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which write
  to a text stream (standard output by default).
- `printf`: `format_string` and `printf`, which handle `%c %s %d %i %u
  %x %X %p %%`.
- `lines`: `LineReader`, which reads lines from a file descriptor or a
  readable object through a fixed-size buffer of 100 by default.

## What it does not do

The package only produces moves. It has no command that reads a list of
moves and checks whether they sort a given input.

## Tests

```
pip install .[test]
pytest
```