"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when an argument is not a valid 32-bit integer."""


def count_words(text: str) -> int:
    """Count the space-separated words in ``text``."""
    return sum(1 for word in text.split(" ") if word)


def is_valid_number(text: str) -> bool:
    """Tell whether ``text`` is an optional sign followed by decimal digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(ch in _DIGITS for ch in body)


def safe_atoi(text: str) -> int:
    """Convert a decimal string to an int, rejecting values outside 32 bits."""
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for ch in text:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
        if (sign == 1 and value > INT_MAX) or (sign == -1 and -value < INT_MIN):
            raise ParseError(f"number out of range: {text!r}")
    return sign * value


def _convert(word: str) -> int:
    if not is_valid_number(word):
        raise ParseError(f"not a number: {word!r}")
    return safe_atoi(word)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program arguments into the list of numbers to sort.

    A single argument is split on spaces; several arguments are taken
    one number each.
    """
    if not args:
        return []
    if len(args) == 1:
        return [_convert(word) for word in args[0].split(" ") if word]
    return [_convert(arg) for arg in args]