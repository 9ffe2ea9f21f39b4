"""Stem classes of the Ukrainian dictionary and their grammatical helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from morphdict.encoding import read_word16
from morphdict.ukr_flags import (
    GramFlags,
    SearchFlags,
    VerbFace,
    VerbForm,
    VerbTime,
    WF_MULTIPLE,
)

TF_COMPRESSED = 0x80
"""Flexion table flag: the table is compressed."""

FF_NNEXT = 0x80
"""Flexion item flag: the next level is necessary."""

FF_ONEXT = 0x40
"""Flexion item flag: the next level is optional."""

WF_SUFFIX = 0x8000
"""Stem flag: the stem has a pseudo-suffix."""

WF_POSTST = 0x4000
"""Stem flag: the stem has a post-text definition."""

WF_MIXTAB = 0x8000
"""Word class flag: a mix-table reference follows."""

WF_FLEXES = 0x4000
"""Word class flag: a flexion-table reference follows."""

WF_OLDWORD = 0x0080
"""Word class flag: an old word, hardly used now."""

_POS_MASK = 0x3F
_NO_FLEX_CLASS = 51
_MIX_KIND_MASK = 0xC000

_TIME = int(GramFlags.VERB_TIME)
_FORM = int(GramFlags.VERB_FORM)
_FACE = int(GramFlags.VERB_FACE)
_PLURAL = int(GramFlags.MULTIPLE)

_PAST_PASSIVE = int(VerbTime.PAST) | int(VerbForm.PASSIV)
_FIRST_SINGULAR = int(VerbFace.FIRST)
_THIRD_PLURAL = int(VerbFace.THIRD) | _PLURAL

_PRESENT_SWAP_TYPES = frozenset({22, 23, 26, 27})
_ALWAYS_SWAP_TYPES = frozenset({24, 25})


def verb_mix_power_0(verb_type: int, gram_info: int) -> int:
    """Swap level for verbs alternating in 1st singular and past passive participle."""
    verb_type &= _POS_MASK
    if gram_info & (_TIME | _FORM) == _PAST_PASSIVE:
        return 3
    if gram_info & (_FACE | _PLURAL) != _FIRST_SINGULAR:
        return 1
    if verb_type in _ALWAYS_SWAP_TYPES:
        return 2
    if gram_info & _TIME != VerbTime.PRESENT:
        return 1
    return 2 if verb_type in _PRESENT_SWAP_TYPES else 1


def verb_mix_power_1(verb_type: int, gram_info: int) -> int:
    """Swap level for verbs alternating in 1st singular, 3rd plural and present forms."""
    verb_time = gram_info & _TIME
    verb_type &= _POS_MASK
    if gram_info & (_TIME | _FORM) == _PAST_PASSIVE:
        return 3
    if verb_time in (VerbTime.INFINITIV, VerbTime.PAST, VerbTime.IMPERATIV):
        return 1
    if gram_info & _FORM:
        return 2
    if gram_info & (_FACE | _PLURAL) not in (_FIRST_SINGULAR, _THIRD_PLURAL):
        return 1
    if verb_type in _ALWAYS_SWAP_TYPES:
        return 2
    if verb_time != VerbTime.PRESENT:
        return 1
    return 2 if verb_type in _PRESENT_SWAP_TYPES else 1


def verb_mix_power_2(verb_type: int, gram_info: int) -> int:
    """Swap level for verbs alternating in every present (future) form."""
    verb_time = gram_info & _TIME
    verb_type &= _POS_MASK
    if verb_time in (VerbTime.PAST, VerbTime.INFINITIV):
        return 1
    if verb_time == VerbTime.IMPERATIV:
        return 2
    if verb_type in _ALWAYS_SWAP_TYPES:
        return 2
    if verb_type in _PRESENT_SWAP_TYPES and verb_time == VerbTime.PRESENT:
        return 2
    return 1


def verb_mix_power(verb_type: int, gram_info: int, mt_offs: int) -> int:
    """Swap level of a verb form; the alternation kind is in the mix-table offset."""
    kind = mt_offs & _MIX_KIND_MASK
    if kind == 0x0000:
        return verb_mix_power_2(verb_type, gram_info)
    if kind == 0x4000:
        return verb_mix_power_0(verb_type, gram_info)
    return verb_mix_power_1(verb_type, gram_info)


def is_verb(wb_info: int) -> bool:
    """True if the word class is a verb."""
    return wb_info & _POS_MASK in (22, 24, 26)


def is_adjective(wb_info: int) -> bool:
    """True if the word class is an adjective."""
    return wb_info & _POS_MASK in (16, 18, 19, 21)


def is_participle(gr_info: int) -> bool:
    """True if the grammatical word describes an active or passive participle."""
    return gr_info & _FORM in (VerbForm.ACTIVE, VerbForm.PASSIV)


def normal_info(wb_info: int, gr_info: int, flags: int) -> int:
    """Grammatical word of the dictionary form of a word.

    Nouns normalize to the nominative singular, adjectives to the masculine
    nominative, verbs to the infinitive or, with ADJ_VERBS, participles to
    the participle form. Plural-only words stay plural.
    """
    info = 0
    if is_verb(wb_info):
        info = int(VerbTime.INFINITIV)
        if flags & SearchFlags.ADJ_VERBS and is_participle(gr_info):
            info = (gr_info & (_TIME | _FORM)) | (1 << 9)
    elif is_adjective(wb_info):
        info = 1 << 9
    if wb_info & WF_MULTIPLE:
        info |= _PLURAL
    return info & 0xFFFF


@dataclass(frozen=True)
class StemInfo:
    """Word class record: class word, flexion-table and mix-table offsets."""

    wdinfo: int
    tfoffs: int = 0
    mtoffs: int = 0

    @classmethod
    def load(cls, data: bytes, pos: int = 0) -> StemInfo:
        """Read a class record from the class map at ``pos``."""
        wdinfo, pos = read_word16(data, pos)
        tfoffs = mtoffs = 0
        if wdinfo & WF_FLEXES or wdinfo & _POS_MASK == _NO_FLEX_CLASS:
            tfoffs, pos = read_word16(data, pos)
        if wdinfo & WF_MIXTAB:
            mtoffs, pos = read_word16(data, pos)
        return cls(wdinfo, tfoffs, mtoffs)

    @property
    def part_of_speech(self) -> int:
        """Technical part-of-speech code."""
        return self.wdinfo & _POS_MASK

    def min_cap_scheme(self) -> int:
        """Minimal capitalization demanded by the word: 0, 1 or 2."""
        return (self.wdinfo & 0x0180) >> 7

    def flex_table_offset(self) -> Optional[int]:
        """Offset of the flexion table in the flexion tree, or None."""
        return self.tfoffs << 4 if self.tfoffs else None

    def swap_table_offset(self) -> Optional[int]:
        """Offset of the mix table in the mix tables, or None."""
        return self.mtoffs & ~_MIX_KIND_MASK if self.mtoffs else None

    def verb_swap_level(self, gram_info: int) -> int:
        """Swap level of a verb form of this word."""
        return verb_mix_power(self.wdinfo, gram_info, self.mtoffs)