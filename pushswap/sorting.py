"""Strategies that turn a shuffled stack ``a`` into a sorted one."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .parsing import rank_values
from .stacks import Operation, Stacks


def _nearest(stack: Sequence[int], wanted: Callable[[int], bool]) -> tuple[int, bool]:
    """Find the element matching ``wanted`` closest to either end of ``stack``.

    Returns the element and True when it was met from the top, False when it
    was met from the bottom. The top is searched first at each distance.
    """
    for top, bottom in zip(stack, reversed(stack)):
        if wanted(top):
            return top, True
        if wanted(bottom):
            return bottom, False
    raise LookupError("no matching element on the stack")


def sort_two(stacks: Stacks) -> None:
    """Sort two unsorted elements of ``a``."""
    stacks.apply(Operation.SA)


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of ``a``; expects them not to be in order."""
    a = stacks.a
    head, second, tail = a[0], a[1], a[-1]
    if head < second and head < tail:
        stacks.apply(Operation.RRA)
        stacks.apply(Operation.SA)
    elif head > second and head > tail:
        if second < tail:
            stacks.apply(Operation.RA)
        else:
            stacks.apply(Operation.SA)
            stacks.apply(Operation.RRA)
    elif second < tail:
        stacks.apply(Operation.SA)
    else:
        stacks.apply(Operation.RRA)


def sort_four(stacks: Stacks) -> None:
    """Sort four elements of ``a`` using ``b`` for the smallest one."""
    a = stacks.a
    smallest = min(a)
    if a[-1] == smallest:
        stacks.apply(Operation.RRA)
    else:
        while a[0] != smallest:
            stacks.apply(Operation.RA)
    stacks.apply(Operation.PB)
    sort_three(stacks)
    stacks.apply(Operation.PA)


def sort_five(stacks: Stacks) -> None:
    """Sort five elements of ``a``, parking the two smallest on ``b``."""
    a, b = stacks.a, stacks.b
    low = sorted(a)[1]
    count = 0
    while (count == 0 and (a[-1] <= low or a[-2] <= low)) or (
        count == 1 and a[-1] <= low
    ):
        count += 1
        while a[0] > low:
            stacks.apply(Operation.RRA)
        stacks.apply(Operation.PB)
    while count != 2:
        count += 1
        while a[0] > low:
            stacks.apply(Operation.RA)
        stacks.apply(Operation.PB)
    sort_three(stacks)
    if b[0] < b[-1]:
        stacks.apply(Operation.SB)
    stacks.apply(Operation.PA)
    stacks.apply(Operation.PA)


def _move_chunk(stacks: Stacks, low: int, high: int) -> None:
    """Push every rank in ``low..high`` from ``a`` to ``b``.

    Ranks in the lower half of the chunk are rotated to the bottom of ``b``.
    """
    middle = (low + high) // 2
    for _ in range(high - low + 1):
        rank, from_top = _nearest(stacks.a, lambda r: low <= r <= high)
        step = Operation.RA if from_top else Operation.RRA
        while stacks.a[0] != rank:
            stacks.apply(step)
        stacks.apply(Operation.PB)
        if rank <= middle:
            stacks.apply(Operation.RB)


def _bring_back(stacks: Stacks, size: int, backward: bool, pending: int) -> int:
    """Move rank ``size`` from ``b`` to ``a``, picking up its two predecessors.

    ``pending`` counts ranks parked at the bottom of ``a``; the updated count
    is returned.
    """
    a_swap = 0
    if pending:
        pending -= 1
        a_swap = 1
        stacks.apply(Operation.RRA)
    b = stacks.b
    while b[0] != size:
        top = b[0]
        if top == size - 1:
            a_swap += 1
            stacks.apply(Operation.PA)
        elif top == size - 2:
            pending += 1
            stacks.apply(Operation.PA)
            stacks.apply(Operation.RA)
        elif top < size - 2:
            stacks.apply(Operation.RRB if backward else Operation.RB)
        else:
            raise RuntimeError(f"rank {top} is out of place on stack b")
    stacks.apply(Operation.PA)
    if a_swap:
        stacks.apply(Operation.SA)
        if pending:
            pending -= 1
            stacks.apply(Operation.RRA)
    return pending


def _return_all(stacks: Stacks, size: int) -> None:
    pending = 0
    while size > 0:
        _, from_top = _nearest(stacks.b, lambda r: r == size)
        pending = _bring_back(stacks, size, not from_top, pending)
        size = stacks.a[0] - 1


def chunk_sort(stacks: Stacks, size: int) -> None:
    """Sort ``a`` holding the ranks 1..size, for larger inputs.

    Ranks are pushed to ``b`` in chunks, then brought back largest first.
    """
    buckets = size // 100 + 3
    width = size // buckets
    for index in range(buckets):
        _move_chunk(stacks, index * width + 1, (index + 1) * width)
    _move_chunk(stacks, buckets * width + 1, size)
    _return_all(stacks, size)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values``; empty if already sorted.

    Raises ParseError if a value occurs twice.
    """
    ranks = rank_values(values)
    stacks = Stacks(ranks)
    if stacks.is_solved():
        return []
    size = len(ranks)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        chunk_sort(stacks, size)
    return list(stacks.history)