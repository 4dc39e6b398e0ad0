"""Reading the numbers of the puzzle from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")
_SIGNS = "+-"


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def _words(text: str) -> list[str]:
    return [word for word in text.split(" ") if word]


def count_words(text: str) -> int:
    """Number of space-separated words in ``text``."""
    return len(_words(text))


def is_number(token: str) -> bool:
    """True when ``token`` is an optional sign followed only by ASCII digits."""
    body = token[1:] if len(token) > 1 and token[0] in _SIGNS else token
    return all(char in _DIGITS for char in body)


def _is_space(char: str) -> bool:
    return char == " " or "\t" <= char <= "\r"


def parse_int(token: str) -> int:
    """Read the leading integer of ``token``.

    Leading whitespace is skipped and one sign is allowed. Two signs in a
    row, or a magnitude above the largest 32-bit signed integer, raise
    InputError. Reading stops at the first character that is not a digit.
    """
    length = len(token)
    i = 0
    while i < length and _is_space(token[i]):
        i += 1
    sign = 1
    while i < length and token[i] in _SIGNS:
        if i + 1 < length and token[i + 1] in _SIGNS:
            raise InputError(f"repeated sign in {token!r}")
        if token[i] == "-":
            sign = -sign
        i += 1
    number = 0
    while i < length and token[i] in _DIGITS:
        number = number * 10 + int(token[i])
        if number > INT_MAX:
            raise InputError(f"{token!r} is out of range")
        i += 1
    return sign * number


def _check_distinct(values: Sequence[int]) -> None:
    if len(set(values)) != len(values):
        raise InputError("duplicate value")


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the arguments into integers, in the order given.

    Each argument may hold several space-separated numbers. The first
    number is the one that starts on top of stack ``a``.
    """
    values: list[int] = []
    for arg in args:
        words = _words(arg)
        if not words:
            raise InputError(f"empty argument {arg!r}")
        for word in words:
            number = parse_int(word)
            if not is_number(word):
                raise InputError(f"{word!r} is not a number")
            values.append(number)
    _check_distinct(values)
    return values


def index_values(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank, 1 for the smallest, keeping the order."""
    _check_distinct(values)
    ranks = {value: rank for rank, value in enumerate(sorted(values), start=1)}
    return [ranks[value] for value in values]