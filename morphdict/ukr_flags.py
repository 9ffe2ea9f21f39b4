"""Flags, grammatical codes and records of the Ukrainian analyser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Optional

WF_MULTIPLE = 0x40
"""Word class flag: the word exists in plural only."""

AF_ANIMATED = 0x01
"""Flexion flag: the flexion belongs to an animate noun."""

AF_NOT_ALIVE = 0x02
"""Flexion flag: the flexion belongs to an inanimate noun."""

AF_HARD_FORM = 0x04
"""Flexion flag: the form is a hard (rarely used) one."""


class LemmatizeError(Exception):
    """An output buffer or the input word was too large or too small."""

    LEMMBUFF_FAILED = -1
    LIDSBUFF_FAILED = -2
    GRAMBUFF_FAILED = -3
    WORDBUFF_FAILED = -4

    _MESSAGES = {
        LEMMBUFF_FAILED: "not enough room for the built forms",
        LIDSBUFF_FAILED: "not enough room for the lexemes",
        GRAMBUFF_FAILED: "not enough room for the grammatical descriptions",
        WORDBUFF_FAILED: "the word does not fit into the word buffer",
    }

    def __init__(self, code: int) -> None:
        try:
            message = self._MESSAGES[code]
        except KeyError:
            raise ValueError(f"unknown lemmatization error code: {code}") from None
        super().__init__(message)
        self.code = code


class SearchFlags(IntFlag):
    """Options of dictionary searches and normalization."""

    NONE = 0
    STOP_AFTER_FIRST = 0x0001
    IGNORE_CAPITALS = 0x0002
    HARD_FORMS = 0x0004
    DEFIS_WORD_TAILS = 0x0008
    ADJ_VERBS = 0x0100


class GramFlags(IntFlag):
    """Bit fields of the 16-bit grammatical word of a flexion."""

    NONE = 0
    RET_FORMS = 0x8000
    CASE_MASK = 0x7000
    MULTIPLE = 0x0800
    GEND_MASK = 0x0600
    SHORT_ONE = 0x0100
    COMPARED = 0x0080
    VERB_FORM = 0x0060
    ADVERB = 0x0040
    VERB_FACE = 0x0018
    VERB_TIME = 0x0007


class VerbTime(IntEnum):
    """Tense or mood of a verb form."""

    INFINITIV = 0x0001
    IMPERATIV = 0x0002
    FUTURE = 0x0003
    PRESENT = 0x0004
    PAST = 0x0005


class VerbFace(IntEnum):
    """Person of a verb form."""

    FIRST = 0x0008
    SECOND = 0x0010
    THIRD = 0x0018


class VerbForm(IntEnum):
    """Verb, participle or adverbial participle."""

    VERB = 0x0000
    ACTIVE = 0x0020
    PASSIV = 0x0040
    DOING = 0x0060


def _check_range(name: str, value: int, limit: int) -> None:
    if not 0 <= value <= limit:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class GramInfo:
    """Grammatical description of one recognized word form."""

    wd_info: int = 0
    id_form: int = 0
    gr_info: int = 0
    b_flags: int = 0

    def __post_init__(self) -> None:
        _check_range("wd_info", self.wd_info, 0xFFFF)
        _check_range("id_form", self.id_form, 0xFF)
        _check_range("gr_info", self.gr_info, 0xFFFF)
        _check_range("b_flags", self.b_flags, 0xFF)

    @property
    def part_of_speech(self) -> int:
        """Technical part-of-speech code of the word."""
        return self.wd_info & 0x3F

    @property
    def verb_time(self) -> Optional[VerbTime]:
        """Tense of a verb form, or None when the form has none."""
        value = self.gr_info & GramFlags.VERB_TIME
        return VerbTime(value) if value in VerbTime._value2member_map_ else None

    @property
    def verb_face(self) -> Optional[VerbFace]:
        """Person of a verb form, or None when the form has none."""
        value = self.gr_info & GramFlags.VERB_FACE
        return VerbFace(value) if value else None

    @property
    def verb_form(self) -> VerbForm:
        """Verbal form kind."""
        return VerbForm(self.gr_info & GramFlags.VERB_FORM)

    @property
    def case_index(self) -> int:
        """Case number stored in the grammatical word."""
        return (self.gr_info & GramFlags.CASE_MASK) >> 12

    @property
    def gender(self) -> int:
        """Gender number stored in the grammatical word."""
        return (self.gr_info & GramFlags.GEND_MASK) >> 9

    @property
    def is_plural(self) -> bool:
        return bool(self.gr_info & GramFlags.MULTIPLE)

    @property
    def is_short(self) -> bool:
        return bool(self.gr_info & GramFlags.SHORT_ONE)

    @property
    def is_compared(self) -> bool:
        return bool(self.gr_info & GramFlags.COMPARED)

    @property
    def is_reflexive(self) -> bool:
        return bool(self.gr_info & GramFlags.RET_FORMS)

    @property
    def is_animated(self) -> bool:
        return bool(self.b_flags & AF_ANIMATED)

    @property
    def is_hard_form(self) -> bool:
        return bool(self.b_flags & AF_HARD_FORM)