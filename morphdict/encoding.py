"""Primitive readers for the packed dictionary format."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FlexInfo:
    """Grammatical description of a flexion: a grammar word and a flag byte."""

    gramm: int
    flags: int


def _byte_at(data: bytes, pos: int, what: str) -> int:
    if pos < 0 or pos >= len(data):
        raise ValueError(f"truncated {what} at offset {pos}")
    return data[pos]


def read_serial(data: bytes, pos: int = 0) -> tuple[int, int]:
    """Read a variable-length value (7 bits per byte, low bits first).

    Returns the value and the offset just past it.
    """
    value = 0
    shift = 0
    while True:
        byte = _byte_at(data, pos, "serial value")
        pos += 1
        value |= (byte & 0x7F) << shift
        shift += 7
        if not byte & 0x80:
            return value, pos


def read_word16(data: bytes, pos: int = 0) -> tuple[int, int]:
    """Read a little-endian 16-bit word; returns the value and the next offset."""
    lower = _byte_at(data, pos, "16-bit word")
    upper = _byte_at(data, pos + 1, "16-bit word")
    return lower | (upper << 8), pos + 2


def lexeme_key(nlexid: int) -> bytes:
    """Encode a lexeme id as the shortest big-endian key of one to four bytes."""
    if not 0 <= nlexid <= 0xFFFFFFFF:
        raise ValueError(f"lexeme id out of range: {nlexid}")
    length = max(1, (nlexid.bit_length() + 7) // 8)
    return nlexid.to_bytes(length, "big")