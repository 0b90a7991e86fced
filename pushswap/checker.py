"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import ParseError, parse_arguments
from .stacks import Operation, Stacks


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the operations in ``lines`` to ``values`` and report the result.

    Each line is one operation name ending in a newline, as read from a
    file; an empty string ends the input. Returns True when ``a`` ends up
    sorted and ``b`` empty. Raises ValueError on a line that is not an
    operation.
    """
    stacks = Stacks(values)
    for line in lines:
        if not line:
            break
        if not line.endswith("\n"):
            raise ValueError(f"unterminated instruction: {line!r}")
        stacks.apply(Operation.parse(line[:-1]))
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from stdin and print ``OK``, ``KO`` or ``Error``.

    Without arguments, or when the numbers are already sorted, nothing is
    read and the status is 1. Invalid numbers write ``Error`` to stderr.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    if Stacks(values).is_solved():
        return 1
    try:
        solved = check(values, sys.stdin)
    except ValueError:
        print("Error")
        return 0
    print("OK" if solved else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())