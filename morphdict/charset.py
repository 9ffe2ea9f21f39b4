"""A set of byte characters kept as a 256-bit mask."""

from __future__ import annotations

from collections.abc import Iterator

from morphdict.collector import Collector


def _as_byte(char: int | bytes | bytearray) -> int:
    if isinstance(char, (bytes, bytearray)):
        if len(char) != 1:
            raise ValueError("expected a single byte")
        return char[0]
    if not 0 <= char <= 0xFF:
        raise ValueError(f"byte value out of range: {char}")
    return char


class Charset:
    """Set of byte values iterated in ascending order."""

    def __init__(self) -> None:
        self._mask = 0

    def add(self, char: int | bytes | bytearray) -> None:
        """Add a byte value or a one-byte string."""
        self._mask |= 1 << _as_byte(char)

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, (int, bytes, bytearray)):
            return False
        try:
            return bool(self._mask >> _as_byte(char) & 1)
        except ValueError:
            return False

    def __iter__(self) -> Iterator[int]:
        return (code for code in range(0x100) if self._mask >> code & 1)

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def collect(self, output: Collector) -> int:
        """Append every character to ``output``; returns how many were appended.

        Raises CollectorOverflow when the output is too small.
        """
        count = 0
        for code in self:
            output.append(code)
            count += 1
        return count