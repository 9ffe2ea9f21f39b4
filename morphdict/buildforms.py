"""Building word forms from flexion tables."""

from __future__ import annotations

from typing import Optional

from morphdict.collector import Collector
from morphdict.encoding import FlexInfo, read_word16
from morphdict.scandict import _read_byte, get_track


def get_flex_forms(
    output: Collector,
    table: bytes,
    fxinfo: FlexInfo,
    prefix: bytes,
    suffix: bytes = b"",
) -> int:
    """Append ``prefix + flexion + suffix`` and a zero byte for every matching flexion.

    A flexion matches when one of its grammatical entries has the same grammar
    word as ``fxinfo`` and shares a flag with it. Returns the number of forms
    built; raises CollectorOverflow when the output is too small.
    """
    built = 0

    def on_node(pos: int, flex: bytes) -> Optional[int]:
        nonlocal built
        count, pos = _read_byte(table, pos)
        for _ in range(count):
            gramm, pos = read_word16(table, pos)
            flags, pos = _read_byte(table, pos)
            if gramm == fxinfo.gramm and flags & fxinfo.flags:
                output.append(prefix)
                output.append(flex)
                output.append(suffix)
                output.append(0)
                built += 1
                return None
        return None

    get_track(on_node, table)
    return built