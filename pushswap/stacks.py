"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(Enum):
    """A single instruction that rearranges the stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Operation:
        """Return the operation named exactly by ``text``.

        Raises ValueError for anything that is not one of the eleven names.
        """
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"unknown operation: {text!r}") from None


def _swap(stack: deque) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _push(target: deque, source: deque) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its leftmost element.

    Every operation applied is recorded, in order, in ``history``.
    Operations that cannot act (too few elements) leave the stacks as they are
    but are still recorded.
    """

    def __init__(self, ranks: Iterable[int]) -> None:
        self.a: deque[int] = deque(ranks)
        self.b: deque[int] = deque()
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def apply(self, op: Operation | str) -> None:
        """Carry out ``op`` (an Operation or its name) on the stacks."""
        if not isinstance(op, Operation):
            op = Operation.parse(op)
        a, b = self.a, self.b
        if op is Operation.SA:
            _swap(a)
        elif op is Operation.SB:
            _swap(b)
        elif op is Operation.SS:
            _swap(a)
            _swap(b)
        elif op is Operation.PA:
            _push(a, b)
        elif op is Operation.PB:
            _push(b, a)
        elif op is Operation.RA:
            _rotate(a)
        elif op is Operation.RB:
            _rotate(b)
        elif op is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif op is Operation.RRA:
            _reverse_rotate(a)
        elif op is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)
        self.history.append(op)

    def is_solved(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order from the top."""
        if self.b:
            return False
        items = list(self.a)
        return all(x <= y for x, y in zip(items, items[1:]))