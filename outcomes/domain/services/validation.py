"""Validation helpers shared by the Maybe- and Either-based constructors."""

import re

from outcomes.domain.monads import Maybe, Some, Nothing

MIN_AGE = 1
MAX_AGE = 120

# Signed 32-bit bounds; larger literals are not treated as integers
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_non_empty_name(name: str) -> bool:
    """A name is valid when it has at least one character. No trimming."""
    return len(name) > 0


def is_age_in_range(age: int) -> bool:
    return MIN_AGE <= age <= MAX_AGE


def parse_int(text: str) -> Maybe[int]:
    """
    Parse a decimal integer literal.

    Accepts an optional sign followed by ASCII digits and nothing else, and
    only values that fit a signed 32-bit integer. Whitespace, underscores,
    decimal points and non-ASCII digits make the text unparsable.

    Args:
        text: Candidate integer literal

    Returns:
        Some(int) when the text is an integer literal, Nothing otherwise
    """
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return Nothing()

    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return Nothing()
    return Some(value)
