"""Bounded output accumulator for built word forms."""

from __future__ import annotations


class CollectorOverflow(Exception):
    """Raised when data does not fit into a collector."""


class Collector:
    """Accumulates bytes up to a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._buffer = bytearray()

    @property
    def remaining(self) -> int:
        """Number of bytes that still fit."""
        return self.capacity - len(self._buffer)

    def append(self, data: bytes | bytearray | int) -> None:
        """Append a byte value or a byte string, all or nothing."""
        if isinstance(data, int):
            if not 0 <= data <= 0xFF:
                raise ValueError(f"byte value out of range: {data}")
            data = bytes([data])
        if len(data) > self.remaining:
            raise CollectorOverflow(
                f"{len(data)} bytes do not fit, {self.remaining} left"
            )
        self._buffer.extend(data)

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)