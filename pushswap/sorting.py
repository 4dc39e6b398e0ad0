"""Sorting stack ``a`` with the puzzle's moves and printing the moves used."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, index_values, parse_arguments
from .stacks import Op, StackPair


def _require_size(stacks: StackPair, size: int) -> None:
    if len(stacks.a) != size:
        raise ValueError(f"stack a must hold {size} values, not {len(stacks.a)}")


def three_sort(stacks: StackPair) -> None:
    """Sort a stack ``a`` of exactly three values."""
    _require_size(stacks, 3)
    a = stacks.a
    i_max = a.index(max(a))
    if i_max == 2:
        stacks.apply(Op.RA)
    elif i_max == 1:
        stacks.apply(Op.RRA)
    if a[2] > a[1]:
        stacks.apply(Op.SA)


def _smallest_to_b(stacks: StackPair) -> None:
    smallest = min(stacks.a)
    while stacks.a[-1] != smallest:
        stacks.apply(Op.RA)
    stacks.apply(Op.PB)


def four_sort(stacks: StackPair) -> None:
    """Sort a stack ``a`` of exactly four values, using ``b`` for one."""
    _require_size(stacks, 4)
    _smallest_to_b(stacks)
    three_sort(stacks)
    stacks.apply(Op.PA)


def five_sort(stacks: StackPair) -> None:
    """Sort a stack ``a`` of exactly five values, using ``b`` for two."""
    _require_size(stacks, 5)
    _smallest_to_b(stacks)
    four_sort(stacks)
    stacks.apply(Op.PA)


def chunk_sort(stacks: StackPair, range_end: int) -> None:
    """Move ``a`` to ``b`` in sliding ranges of ranks, then bring it back sorted.

    Values at or below the range go to ``b``; those below it are also rotated
    to the bottom of ``b``. Values above the range are rotated in ``a``.
    """
    range_start = 0
    while stacks.a:
        value = stacks.a[-1]
        if range_start <= value <= range_end:
            stacks.apply(Op.PB)
        elif value < range_start:
            stacks.apply(Op.PB)
            stacks.apply(Op.RB)
        else:
            if min(stacks.a) > range_end:
                raise ValueError("no value in stack a falls within the range")
            stacks.apply(Op.RA)
            continue
        range_start += 1
        range_end += 1
    push_back(stacks)


def push_back(stacks: StackPair) -> None:
    """Move ``b`` onto ``a`` largest first, rotating ``b`` the shorter way.

    ``b`` must hold the ranks 1 to its size.
    """
    b = stacks.b
    for _ in range(len(b)):
        target = len(b)
        try:
            position = b.index(target)
        except ValueError:
            raise ValueError(f"stack b does not hold the rank {target}") from None
        depth = len(b) - 1 - position
        if depth:
            if depth <= (len(b) - 1) // 2:
                for _ in range(depth):
                    stacks.apply(Op.RB)
            else:
                for _ in range(len(b) - depth):
                    stacks.apply(Op.RRB)
        stacks.apply(Op.PA)


def sort_stacks(stacks: StackPair) -> None:
    """Sort ``a``, which holds the ranks 1 to its size, by the fitting method."""
    size = len(stacks.a)
    if size == 3:
        three_sort(stacks)
    elif size == 4:
        four_sort(stacks)
    elif size == 5:
        five_sort(stacks)
    elif size == 100:
        chunk_sort(stacks, 14)
    elif size == 500:
        chunk_sort(stacks, 36)
    else:
        chunk_sort(stacks, size * 100 // 14)


def solve(values: Sequence[int]) -> list[Op]:
    """Return the moves that sort ``values``, given with the top of ``a`` first."""
    stacks = StackPair(reversed(index_values(values)))
    if stacks.is_sorted():
        return []
    sort_stacks(stacks)
    return list(stacks.history)


def main(argv: Sequence[str] | None = None) -> int:
    """Print, one per line, the moves that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else argv
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{op}\n" for op in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())