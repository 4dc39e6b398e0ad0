"""Checking that a list of moves sorts the numbers given as arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, index_values, parse_arguments
from .stacks import StackPair, parse_op

OK = "OK"
KO = "KO"


def _read_op(line: str):
    # Every instruction must be a move's name followed by a newline.
    if not line.endswith("\n"):
        raise InputError(f"instruction without newline: {line!r}")
    try:
        return parse_op(line)
    except ValueError as error:
        raise InputError(str(error)) from None


def check(values: Sequence[int], lines: Iterable[str]) -> str | None:
    """Apply the instruction lines to ``values`` and judge the result.

    ``values`` are given with the top of stack ``a`` first. Returns "OK"
    when ``a`` ends up sorted with ``b`` empty, and "KO" when ``a`` is not
    sorted. When ``a`` is sorted but ``b`` still holds values, no verdict
    is given and None is returned. Input that is already sorted is "OK"
    without reading any line. An unknown instruction raises InputError.
    """
    stacks = StackPair(reversed(index_values(values)))
    if stacks.is_sorted():
        return OK
    for line in lines:
        stacks.apply(_read_op(line))
    if not stacks.is_sorted():
        return KO
    if not stacks.b:
        return OK
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Read moves from standard input and print whether they sort the arguments."""
    args = sys.argv[1:] if argv is None else argv
    try:
        values = parse_arguments(args)
        verdict = check(values, sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if verdict is not None:
        sys.stdout.write(f"{verdict}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())