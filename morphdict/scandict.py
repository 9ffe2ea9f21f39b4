"""Scanners for the packed tree dictionaries.

A tree node starts with a counter: one byte, or a little-endian 16-bit word
for wide trees. The top bit of the counter tells that a stem list follows the
node's children; the other bits are the number of children. Every child is a
character byte, a serial length and the child's subtree of that length.

Actions passed to the scanners return ``None`` to go on scanning; any other
value stops the scan and is returned from it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from morphdict.encoding import read_serial, read_word16

STEM_POSTFIX = 0x8000
"""Stem class flag: the stem carries a post-text (suffix) definition."""

_CLASS_MASK = 0x7FFF

TreeAction = Callable[[int, bytes], Any]
StemOutput = Callable[[int, int, bytes, bytes], Any]


def _read_byte(data: bytes, pos: int) -> tuple[int, int]:
    if pos < 0 or pos >= len(data):
        raise ValueError(f"truncated dictionary at offset {pos}")
    return data[pos], pos + 1


def _read_counter(data: bytes, pos: int, wide: bool) -> tuple[int, bool, int]:
    """Read a node counter; returns the child count, the list flag and the next offset."""
    if wide:
        value, pos = read_word16(data, pos)
        top = 0x8000
    else:
        value, pos = _read_byte(data, pos)
        top = 0x80
    return value & ~top, bool(value & top), pos


def _read_child(data: bytes, pos: int) -> tuple[int, int, int]:
    """Read a child entry; returns its character, subtree offset and the next offset."""
    char, pos = _read_byte(data, pos)
    length, pos = read_serial(data, pos)
    if pos + length > len(data):
        raise ValueError(f"truncated subtree at offset {pos}")
    return char, pos, pos + length


@dataclass(frozen=True)
class _Stem:
    chrmin: int
    chrmax: int
    nlexid: int
    oclass: int
    suffix: bytes


def _read_stem(data: bytes, pos: int) -> tuple[_Stem, int]:
    chrmin, pos = _read_byte(data, pos)
    chrmax, pos = _read_byte(data, pos)
    nlexid, pos = read_serial(data, pos)
    oclass, pos = read_word16(data, pos)
    suffix = b""
    if oclass & STEM_POSTFIX:
        length, pos = _read_byte(data, pos)
        if pos + length > len(data):
            raise ValueError(f"truncated stem suffix at offset {pos}")
        suffix = bytes(data[pos:pos + length])
        pos += length
    return _Stem(chrmin, chrmax, nlexid, oclass, suffix), pos


def _iter_stems(data: bytes, pos: int) -> Iterator[tuple[int, _Stem]]:
    """Yield the offset and contents of every entry of a stem list."""
    count, pos = read_serial(data, pos)
    for _ in range(count):
        entry_pos = pos
        stem, pos = _read_stem(data, pos)
        yield entry_pos, stem


@dataclass
class _Level:
    key: bytes
    pos: int
    count: int
    has_list: bool

    @classmethod
    def open(cls, data: bytes, pos: int, key: bytes, wide: bool) -> _Level:
        count, has_list, pos = _read_counter(data, pos, wide)
        return cls(key, pos, count, has_list)

    def find_child(self, data: bytes) -> Optional[int]:
        """Advance to the child matching the key's first character."""
        wanted = self.key[0] if self.key else None
        while self.count > 0:
            self.count -= 1
            char, sub, self.pos = _read_child(data, self.pos)
            if wanted == char:
                return sub
            if wanted is not None and wanted > char and not self.has_list:
                return None
        return None


def scan_tree(action: TreeAction, data: bytes, key: bytes, wide: bool = False) -> Any:
    """Walk the tree along ``key`` and call ``action(list_offset, rest_of_key)``.

    Deeper nodes are offered first, so longer stems come before shorter ones.
    """
    stack = [_Level.open(data, 0, bytes(key), wide)]
    while stack:
        top = stack[-1]
        sub = top.find_child(data)
        if sub is None:
            if top.has_list:
                result = action(top.pos, top.key)
                if result is not None:
                    return result
            stack.pop()
        else:
            stack.append(_Level.open(data, sub, top.key[1:], wide))
    return None


def get_track(
    action: TreeAction, data: bytes, wide: bool = False, dicpos: Optional[int] = None
) -> Any:
    """Visit every node with a list, calling ``action(list_offset, track)``.

    The track is the string of characters leading to the node. Children are
    visited before their parent. With ``dicpos`` given, only the branches that
    contain that offset are entered.
    """

    def walk(pos: int, track: bytes) -> Any:
        count, has_list, pos = _read_counter(data, pos, wide)
        for _ in range(count):
            char, sub, pos = _read_child(data, pos)
            if dicpos is None or sub <= dicpos <= pos:
                result = walk(sub, track + bytes([char]))
                if result is not None:
                    return result
        return action(pos, track) if has_list else None

    return walk(0, b"")


class LookupList:
    """Tree action matching the rest of a word against a stem list.

    The output is called as ``output(nlexid, oclass, flexion, suffix)``.
    """

    def __init__(self, output: StemOutput) -> None:
        self.output = output

    def __call__(self, data: bytes, pos: int, key: bytes) -> Any:
        for _, stem in _iter_stems(data, pos):
            flex_len = len(key)
            if stem.suffix:
                if len(stem.suffix) > flex_len or not key.endswith(stem.suffix):
                    continue
                flex_len -= len(stem.suffix)
            if flex_len > 0:
                if key[0] > stem.chrmax:
                    break
                if key[0] < stem.chrmin:
                    continue
            result = self.output(
                stem.nlexid, stem.oclass & _CLASS_MASK, key[:flex_len], stem.suffix
            )
            if result is not None:
                return result
        return None

    def action(self, data: bytes) -> TreeAction:
        """Bind the action to a dictionary for use with the scanners."""
        return lambda pos, key: self(data, pos, key)


class SelectView:
    """Tree action picking the single stem entry found at ``dicpos``."""

    def __init__(self, output: StemOutput, dicpos: int) -> None:
        self.output = output
        self.dicpos = dicpos

    def __call__(self, data: bytes, pos: int, key: bytes) -> Any:
        for entry_pos, stem in _iter_stems(data, pos):
            if entry_pos == self.dicpos:
                return self.output(
                    stem.nlexid, stem.oclass & _CLASS_MASK, key, stem.suffix
                )
        return None

    def action(self, data: bytes) -> TreeAction:
        """Bind the action to a dictionary for use with the scanners."""
        return lambda pos, key: self(data, pos, key)