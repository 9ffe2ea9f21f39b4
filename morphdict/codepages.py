"""Codepages accepted by the analyser and conversion to the dictionary encoding.

Dictionaries are stored in Windows-1251. Words arriving in another codepage
are converted to it before a search, and results are converted back.
"""

from __future__ import annotations

from enum import Enum

from morphdict.ukr_flags import LemmatizeError

WORD_LIMIT = 0x100
"""Words of this many bytes or more do not fit into the word buffer."""


class Codepage(Enum):
    """A byte encoding of Cyrillic text, valued by its Python codec name."""

    CP1251 = "cp1251"
    KOI8 = "koi8_u"
    CP866 = "cp866"
    ISO = "iso8859_5"
    MAC = "mac_cyrillic"
    UTF8 = "utf-8"

    @property
    def codec(self) -> str:
        """Name of the Python codec for this codepage."""
        return self.value


DICTIONARY_CODEPAGE = Codepage.CP1251
"""The encoding of the dictionaries themselves."""

_NAMES: dict[str, Codepage] = {
    "windows-1251": Codepage.CP1251,
    "windows": Codepage.CP1251,
    "1251": Codepage.CP1251,
    "win-1251": Codepage.CP1251,
    "win": Codepage.CP1251,
    "windows 1251": Codepage.CP1251,
    "win 1251": Codepage.CP1251,
    "ansi": Codepage.CP1251,
    "koi-8": Codepage.KOI8,
    "koi8": Codepage.KOI8,
    "20866": Codepage.KOI8,
    "dos": Codepage.CP866,
    "oem": Codepage.CP866,
    "866": Codepage.CP866,
    "28595": Codepage.ISO,
    "iso-88595": Codepage.ISO,
    "iso-8859-5": Codepage.ISO,
    "10007": Codepage.MAC,
    "mac": Codepage.ISO,
    "65001": Codepage.UTF8,
    "utf-8": Codepage.UTF8,
    "utf8": Codepage.UTF8,
}


def resolve_codepage(name: str) -> Codepage:
    """Find a codepage by one of its names, ignoring case.

    Raises ValueError for an unknown name.
    """
    try:
        return _NAMES[name.lower()]
    except KeyError:
        raise ValueError(f"unknown codepage: {name!r}") from None


def _as_codepage(codepage: Codepage | str) -> Codepage:
    return codepage if isinstance(codepage, Codepage) else resolve_codepage(codepage)


def encode_word(
    text: str | bytes | bytearray, codepage: Codepage | str = DICTIONARY_CODEPAGE
) -> bytes:
    """Convert a word to the dictionary encoding.

    ``text`` is either a string or bytes in ``codepage``. Raises
    LemmatizeError(WORDBUFF_FAILED) when the word is too long or cannot be
    represented in the dictionary encoding.
    """
    page = _as_codepage(codepage)
    if isinstance(text, str):
        try:
            raw = text.encode(page.codec)
        except UnicodeEncodeError:
            raise LemmatizeError(LemmatizeError.WORDBUFF_FAILED) from None
    else:
        raw = bytes(text)
    if len(raw) >= WORD_LIMIT:
        raise LemmatizeError(LemmatizeError.WORDBUFF_FAILED)
    if page is DICTIONARY_CODEPAGE:
        return raw
    try:
        converted = raw.decode(page.codec).encode(DICTIONARY_CODEPAGE.codec)
    except (UnicodeDecodeError, UnicodeEncodeError):
        raise LemmatizeError(LemmatizeError.WORDBUFF_FAILED) from None
    if len(converted) >= WORD_LIMIT:
        raise LemmatizeError(LemmatizeError.WORDBUFF_FAILED)
    return converted


def decode_word(
    data: bytes | bytearray, codepage: Codepage | str = DICTIONARY_CODEPAGE
) -> bytes:
    """Convert bytes in the dictionary encoding to ``codepage``.

    Raises ValueError when a character has no place in the target codepage.
    """
    page = _as_codepage(codepage)
    raw = bytes(data)
    if page is DICTIONARY_CODEPAGE:
        return raw
    try:
        return raw.decode(DICTIONARY_CODEPAGE.codec).encode(page.codec)
    except UnicodeError as error:
        raise ValueError(f"cannot convert to {page.codec}: {error}") from None