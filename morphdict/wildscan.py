"""Dictionary scanning with '?' and '*' wildcards."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from morphdict.scandict import _iter_stems, _read_child, _read_counter

WildTarget = Callable[[int, int, bytes, bytes, bytes], Any]

_WILDCARDS = frozenset(b"*?")
_CLASS_MASK = 0x7FFF


def is_wildcard(value: int | bytes | bytearray) -> bool:
    """True for a wildcard byte, or for a string holding one."""
    if isinstance(value, int):
        return value in _WILDCARDS
    return any(char in _WILDCARDS for char in value)


def is_asterisk(value: bytes | bytearray) -> bool:
    """True for a non-empty string of asterisks only."""
    return len(value) > 0 and all(char == ord("*") for char in value)


def _scan_list(
    target: WildTarget, data: bytes, pos: int, pattern: bytes, match: bytes
) -> Any:
    for _, stem in _iter_stems(data, pos):
        if pattern and not is_wildcard(pattern[0]):
            if pattern[0] > stem.chrmax:
                break
            if pattern[0] < stem.chrmin:
                continue
        result = target(
            stem.nlexid, stem.oclass & _CLASS_MASK, pattern, stem.suffix, match
        )
        if result is not None:
            return result
    return None


def wild_scan_tree(
    target: WildTarget, data: bytes, pattern: bytes, wide: bool = False
) -> Any:
    """Match a wildcard pattern against the tree.

    For every stem list reached, each entry is passed to
    ``target(nlexid, oclass, rest_of_pattern, suffix, matched_track)``.
    The target returns ``None`` to go on; any other value stops the scan.
    """

    def scan(node: int, pattern: bytes, match: bytes) -> Any:
        count, has_list, pos = _read_counter(data, node, wide)
        children = []
        for _ in range(count):
            char, sub, pos = _read_child(data, pos)
            children.append((char, sub))

        if pattern:
            first = pattern[0]
            if first == ord("?"):
                for char, sub in children:
                    result = scan(sub, pattern[1:], match + bytes([char]))
                    if result is not None:
                        return result
            elif first == ord("*"):
                if len(pattern) > 1:
                    result = scan(node, pattern[1:], match)
                    if result is not None:
                        return result
                for char, sub in children:
                    result = scan(sub, pattern, match + bytes([char]))
                    if result is not None:
                        return result
            else:
                for char, sub in children:
                    if char != first:
                        continue
                    result = scan(sub, pattern[1:], match + bytes([char]))
                    if result is not None:
                        return result

        return _scan_list(target, data, pos, pattern, match) if has_list else None

    return scan(0, bytes(pattern), b"")