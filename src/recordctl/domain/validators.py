"""Validators — pure accept/reject rules for one line of raw input.

Each validator takes the raw text a user typed and returns either
:class:`Accepted` carrying the typed value, or :class:`Rejected` carrying a
human-readable reason.  Validators never raise for bad input and never
perform I/O; the prompt loop owns retrying.

INVARIANT: Every accepted value is derived from the *trimmed* input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import Generic, TypeVar

T = TypeVar("T")

# Optional sign followed by ASCII digits.  ``int()`` alone would also accept
# underscores ("1_990") and non-ASCII digits, which a console user never means.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ValidatorKind(StrEnum):
    """The four fixed validation strategies."""

    NOT_BLANK = "not_blank"
    PATTERN = "pattern"
    RANGED_INT = "ranged_int"
    YES_NO = "yes_no"


@dataclass(frozen=True)
class Accepted(Generic[T]):
    """Verdict for input that passed its rule."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """Verdict for input that failed its rule, with the reason shown to the user."""

    reason: str

    @property
    def ok(self) -> bool:
        return False


Verdict = Accepted[T] | Rejected


@lru_cache(maxsize=64)
def _compile(pattern: str) -> re.Pattern[str]:
    # ASCII: \d and \w must not match fullwidth or other non-Latin digits.
    return re.compile(pattern, re.ASCII)


def not_blank(raw: str) -> Verdict[str]:
    """Accept any input with at least one non-whitespace character.

    Examples:
        >>> not_blank("  Ann ")
        Accepted(value='Ann')
        >>> not_blank("   ")
        Rejected(reason='Input must not be blank.')
    """
    text = raw.strip()
    if not text:
        return Rejected("Input must not be blank.")
    return Accepted(text)


def matches_pattern(raw: str, pattern: str) -> Verdict[str]:
    """Accept the trimmed input iff *pattern* matches its entire span.

    Anchors in *pattern* are allowed but not required: the match is always
    a full match, never a substring search.
    """
    text = raw.strip()
    if _compile(pattern).fullmatch(text) is None:
        return Rejected(f"Invalid input. Does not match the required format ({pattern}).")
    return Accepted(text)


def ranged_int(raw: str, low: int, high: int) -> Verdict[int]:
    """Accept a base-10 integer within ``[low, high]`` inclusive.

    Any syntactically valid integer is range-checked.  Digit strings too long
    for ``int()`` (CPython caps string conversion length) are out of range
    by definition.
    """
    text = raw.strip()
    out_of_range = Rejected(f"Input out of range. Please enter a value between {low} and {high}.")
    if _INTEGER_RE.fullmatch(text) is None:
        return Rejected(f"Invalid input, not an integer: {text!r}. Please enter an integer.")
    try:
        value = int(text)
    except ValueError:
        return out_of_range
    if not low <= value <= high:
        return out_of_range
    return Accepted(value)


def yes_no(raw: str) -> Verdict[bool]:
    """Accept ``Y`` (True) or ``N`` (False), case-insensitively."""
    answer = raw.strip().upper()
    if answer == "Y":
        return Accepted(True)
    if answer == "N":
        return Accepted(False)
    return Rejected("Invalid input. Please enter 'Y' or 'N'.")
