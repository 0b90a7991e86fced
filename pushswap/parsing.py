"""Reading the numbers of a puzzle from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MAX = 2**31 - 1

_DIGITS = "0123456789"
_SIGNS = "+-"
_WHITESPACE = "\t\n\v\f\r "


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid list of numbers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_tokens(arg: str) -> list[str]:
    """Split one argument on spaces into number tokens.

    Every token must start with a digit, or with a sign followed by a digit.
    An argument that is empty, holds only spaces or ends in a space is
    rejected.
    """
    if not arg or arg.endswith(" "):
        raise ParseError()
    tokens = [token for token in arg.split(" ") if token]
    if not tokens:
        raise ParseError()
    for token in tokens:
        first = token[0]
        if first in _SIGNS:
            if len(token) < 2 or token[1] not in _DIGITS:
                raise ParseError()
        elif first not in _DIGITS:
            raise ParseError()
    return tokens


def parse_int(token: str) -> int:
    """Read a signed decimal number from the start of ``token``.

    Leading whitespace and one sign are accepted; reading stops at the first
    character that is not a digit. The magnitude may not exceed 2**31 - 1.
    A token with no digits is rejected.
    """
    text = token.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for char in text:
        if char not in _DIGITS:
            break
        digits.append(char)
    if not digits:
        raise ParseError()
    magnitude = int("".join(digits))
    if magnitude > INT_MAX:
        raise ParseError()
    return sign * magnitude


def rank_values(values: Iterable[int]) -> list[int]:
    """Return, for each value in order, its rank (1 for the smallest).

    Raises ParseError if any value occurs twice.
    """
    items = list(values)
    if len(set(items)) != len(items):
        raise ParseError()
    order = {value: rank for rank, value in enumerate(sorted(items), start=1)}
    return [order[value] for value in items]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the list of numbers they hold.

    Each argument may hold several numbers separated by spaces. Duplicates
    and malformed or out-of-range numbers raise ParseError.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        for token in split_tokens(arg):
            value = parse_int(token)
            if value in seen:
                raise ParseError()
            seen.add(value)
            values.append(value)
    return values