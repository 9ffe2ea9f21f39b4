"""Character classes and case tables of the Windows-1251 Ukrainian alphabet."""

from __future__ import annotations

from morphdict.capscheme import CharType


def _build_char_types() -> tuple[CharType, ...]:
    types = [CharType.INVALID] * 0x100
    for code in (0x00, 0x27, 0x2D):
        types[code] = CharType.DLMCHAR
    types[0x2C] = CharType.REGULAR
    # Latin I/i stand for the Ukrainian і
    types[0x49] = CharType.CAPITAL
    types[0x69] = CharType.REGULAR
    for code in (0xA5, 0xAA, 0xAF, 0xB2):
        types[code] = CharType.CAPITAL
    for code in (0xB3, 0xB4, 0xBA, 0xBF):
        types[code] = CharType.REGULAR
    for code in range(0xC0, 0xE0):
        if code not in (0xDA, 0xDB, 0xDD):
            types[code] = CharType.CAPITAL
    for code in range(0xE0, 0x100):
        if code not in (0xFA, 0xFB, 0xFD):
            types[code] = CharType.REGULAR
    return tuple(types)


def _build_lower() -> bytes:
    table = bytearray(range(0x100))
    table[0x49] = 0xB3
    table[0x69] = 0xB3
    for upper, lower in ((0xA5, 0xB4), (0xA8, 0xB8), (0xAA, 0xBA), (0xAF, 0xBF), (0xB2, 0xB3)):
        table[upper] = lower
    for code in range(0xC0, 0xE0):
        table[code] = code + 0x20
    return bytes(table)


def _build_upper() -> bytes:
    table = bytearray(range(0x100))
    for code in range(0x61, 0x7B):
        table[code] = code - 0x20
    for lower, upper in (
        (0xA8, 0xB8),
        (0xB3, 0xB2),
        (0xB4, 0xA5),
        (0xB8, 0xA8),
        (0xBA, 0xAA),
        (0xBF, 0xAF),
    ):
        table[lower] = upper
    for code in range(0xE0, 0x100):
        table[code] = code - 0x20
    return bytes(table)


_CHAR_TYPES = _build_char_types()
_TO_LOWER = _build_lower()
_TO_UPPER = _build_upper()


def char_type(byte: int) -> CharType:
    """Class of a Windows-1251 byte: capital, regular, delimiter or invalid."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte value out of range: {byte}")
    return _CHAR_TYPES[byte]


def to_lower(data: bytes | bytearray) -> bytes:
    """Lower-case a Windows-1251 string."""
    return bytes(data).translate(_TO_LOWER)


def to_upper(data: bytes | bytearray) -> bytes:
    """Upper-case a Windows-1251 string."""
    return bytes(data).translate(_TO_UPPER)