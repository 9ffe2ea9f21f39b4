"""Capitalization schemes of hyphenated words.

A scheme is a 16-bit value: the high byte is the number of hyphen-separated
parts, the low byte holds two bits per part (00 lower case, 01 capitalized,
11 all capitals). A scheme of 0 is illegal.
"""

from __future__ import annotations

from enum import IntEnum


class CharType(IntEnum):
    """Character class used when computing a capitalization scheme."""

    CAPITAL = 0
    REGULAR = 1
    DLMCHAR = 2
    INVALID = 3


_GOOD_MIN2 = frozenset({0x0102, 0x020A, 0x032A})
_GOOD_MIN1 = _GOOD_MIN2 | {0x0101, 0x0205, 0x0311}
_GOOD_MIN0 = _GOOD_MIN1 | {0x0100, 0x0200, 0x0300, 0x0201, 0x0301}


def is_good_scheme_min2(scheme: int) -> bool:
    """True if the scheme is valid for words written in capitals only."""
    return scheme in _GOOD_MIN2


def is_good_scheme_min1(scheme: int) -> bool:
    """True if the scheme is valid for words needing at least a capital letter."""
    return scheme in _GOOD_MIN1


def is_good_scheme_min0(scheme: int) -> bool:
    """True if the scheme is valid for words with no capitalization demand."""
    return scheme in _GOOD_MIN0


def is_good_scheme(scheme: int, min_cap: int) -> bool:
    """Check a scheme against the minimal capitalization 0, 1 or 2."""
    checks = {0: is_good_scheme_min0, 1: is_good_scheme_min1, 2: is_good_scheme_min2}
    check = checks.get(min_cap)
    return check(scheme) if check is not None else False