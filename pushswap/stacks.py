"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Op(str, Enum):
    """A move on the stack pair. The value is the move's written name."""

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


def parse_op(text: str) -> Op:
    """Return the move named by one instruction line.

    A single trailing newline is allowed; anything else that is not exactly
    a move's name raises ValueError.
    """
    name = text[:-1] if text.endswith("\n") else text
    try:
        return Op(name)
    except ValueError:
        raise ValueError(f"unknown instruction: {text!r}") from None


def _swap(stack: list[int]) -> None:
    if len(stack) > 1:
        stack[-1], stack[-2] = stack[-2], stack[-1]


def _rotate(stack: list[int]) -> None:
    # The top element moves to the bottom.
    if len(stack) > 1:
        stack.insert(0, stack.pop())


def _reverse_rotate(stack: list[int]) -> None:
    # The bottom element moves to the top.
    if len(stack) > 1:
        stack.append(stack.pop(0))


def _push(source: list[int], target: list[int]) -> None:
    if source:
        target.append(source.pop())


class StackPair:
    """Stacks ``a`` and ``b``, each a list whose last element is the top.

    Every move applied is recorded, in order, in ``history``.
    """

    def __init__(self, a: Iterable[int], b: Iterable[int] = ()) -> None:
        self.a: list[int] = list(a)
        self.b: list[int] = list(b)
        self.history: list[Op] = []

    def __repr__(self) -> str:
        return f"StackPair(a={self.a!r}, b={self.b!r})"

    def apply(self, op: Op | str) -> Op:
        """Perform one move, record it and return it."""
        op = op if isinstance(op, Op) else parse_op(op)
        a, b = self.a, self.b
        if op is Op.SA:
            _swap(a)
        elif op is Op.SB:
            _swap(b)
        elif op is Op.SS:
            _swap(a)
            _swap(b)
        elif op is Op.PA:
            _push(b, a)
        elif op is Op.PB:
            _push(a, b)
        elif op is Op.RA:
            _rotate(a)
        elif op is Op.RB:
            _rotate(b)
        elif op is Op.RR:
            _rotate(a)
            _rotate(b)
        elif op is Op.RRA:
            _reverse_rotate(a)
        elif op is Op.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)
        self.history.append(op)
        return op

    def is_sorted(self) -> bool:
        """True when ``a`` read from the top down never decreases."""
        return all(lower >= upper for lower, upper in zip(self.a, self.a[1:]))