import pytest

from morphdict.buildforms import get_flex_forms
from morphdict.collector import Collector, CollectorOverflow
from morphdict.encoding import FlexInfo


def _node(children=(), tail=None):
    counter = len(children) | (0x80 if tail is not None else 0)
    body = b"".join(bytes([ord(c), len(sub)]) + sub for c, sub in children)
    return bytes([counter]) + body + (tail if tail is not None else b"")


def _grams(*grams):
    return bytes([len(grams)]) + b"".join(
        g.to_bytes(2, "little") + bytes([f]) for g, f in grams
    )


TABLE = _node([("a", _node(tail=_grams((2, 1), (1, 2))))], tail=_grams((1, 1)))


def test_builds_all_matching_forms_with_prefix_and_suffix():
    out = Collector(64)
    assert get_flex_forms(out, TABLE, FlexInfo(1, 3), b"p", b"s") == 2
    assert bytes(out) == b"pas\x00ps\x00"


def test_suffix_defaults_to_empty():
    out = Collector(64)
    assert get_flex_forms(out, TABLE, FlexInfo(1, 3), b"p") == 2
    assert bytes(out) == b"pa\x00p\x00"


def test_flags_must_overlap():
    out = Collector(64)
    assert get_flex_forms(out, TABLE, FlexInfo(1, 4), b"p") == 0
    assert len(out) == 0


def test_only_one_form_per_flexion():
    table = _node(tail=_grams((1, 1), (1, 2)))
    out = Collector(64)
    assert get_flex_forms(out, table, FlexInfo(1, 3), b"w") == 1
    assert bytes(out) == b"w\x00"


def test_overflow_raises():
    with pytest.raises(CollectorOverflow):
        get_flex_forms(Collector(3), TABLE, FlexInfo(1, 3), b"p", b"s")