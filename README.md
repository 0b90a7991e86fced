# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations, and verify that a sequence of operations really sorts a
given list.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

An operation that has too few elements to act on leaves the stacks unchanged.

## Installation

```
pip install .
```

## Command line

Print the operations that sort the given numbers, one per line:

```
push-swap 3 2 1 5 4
push-swap "3 2 1 5 4"
```

Numbers may be passed as separate arguments or inside quoted,
space-separated arguments. Each number must start with a digit, or with `+`
or `-` followed by a digit; its magnitude may not exceed 2147483647, and no
number may repeat. An argument that is empty or ends in a space is rejected.
On invalid input `Error` is written to standard error and the exit status
is 1. With no arguments, or with numbers that are already sorted, nothing is
printed and the exit status is 1.

Check a sequence of operations read from standard input:

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

Each line of input must be one operation name followed by a newline. The
checker prints `OK` if the operations leave `a` sorted and `b` empty, `KO` if
they do not, and `Error` on a line that is not an operation. Invalid numbers
write `Error` to standard error with exit status 1; already sorted numbers
end the checker with status 1 without reading any input.

## Library use

```python
from pushswap.sorting import solve
from pushswap.checker import check

ops = solve([3, 2, 1, 5, 4])
print(check([3, 2, 1, 5, 4], [f"{op}\n" for op in ops]))  # True
```

`solve(values)` returns a list of `Operation` members (empty if the values are
already sorted). `check(values, lines)` returns `True` or `False` and raises
`ValueError` on a line that is not an operation.

Lower-level pieces:

- `pushswap.parsing.parse_arguments(args)` turns command-line strings into
  integers and raises `pushswap.parsing.ParseError` on bad input;
  `split_tokens(arg)` and `parse_int(token)` handle a single argument or
  token, and `rank_values(values)` maps each value to its 1-based rank.
- `pushswap.stacks.Stacks(ranks)` holds the two stacks as `a` and `b`, with
  the top on the left; `apply(op)` performs an `Operation` or an operation
  name and records it in `history`, and `is_solved()` tells whether `a` is
  in ascending order and `b` is empty. `Operation.parse(text)` reads an
  operation name.
- `pushswap.sorting` has the strategies for two to five elements
  (`sort_two`, `sort_three`, `sort_four`, `sort_five`) and
  `chunk_sort(stacks, size)` for larger inputs holding the ranks `1..size`.

## Tests

```
pip install ".[test]"
pytest
```