"""Reading the integers to sort from command-line arguments."""

from __future__ import annotations

from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_DIGITS = 10

_WHITESPACE = " \t\n\r\v\f"
_DIGITS = "0123456789"


class InputError(ValueError):
    """The arguments do not form a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_long(text: str) -> int:
    """Read an optionally signed decimal number after leading whitespace.

    Reading stops at the first character that is not a digit; text without
    digits reads as 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def digit_count(text: str) -> int:
    """Count the significant digits of the first number in the text.

    Everything before the first non-zero digit, signs and leading zeros
    included, is skipped; the run of digits from there is counted.
    """
    start = next(
        (i for i, ch in enumerate(text) if ch in "123456789"), len(text)
    )
    count = 0
    for ch in text[start:]:
        if ch not in _DIGITS:
            break
        count += 1
    return count


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split the text on a separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def is_malformed(token: str) -> bool:
    """True unless the token is an optional sign followed by digits only."""
    if not token or token[0] not in "+-" + _DIGITS:
        return True
    body = token[1:] if token[0] in "+-" else token
    if not body:
        return True
    return any(ch not in _DIGITS for ch in body)


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the program's arguments into the list of values to sort.

    A single argument is split on spaces. An empty list means there is
    nothing to sort. Malformed tokens, values outside the 32-bit signed
    range and repeated values raise InputError.
    """
    args = list(args)
    if not args:
        return []
    if len(args) == 1:
        tokens = split_words(args[0], " ") if args[0] else []
    else:
        tokens = args

    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if is_malformed(token):
            raise InputError()
        number = parse_long(token)
        if number > INT_MAX or number < INT_MIN or digit_count(token) > MAX_DIGITS:
            raise InputError()
        if number in seen:
            raise InputError()
        seen.add(number)
        values.append(number)
    return values