"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ParseError, parse_arguments
from .sorting import solve
from .stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; return the exit status.

    Without arguments, or when the numbers are already sorted, nothing is
    printed and the status is 1. Invalid input writes ``Error`` to stderr.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error")
        return 1
    if Stacks(values).is_solved():
        return 1
    for op in solve(values):
        print(op)
    return 0


if __name__ == "__main__":
    sys.exit(main())