import pytest

from morphdict.scandict import LookupList, SelectView, get_track, scan_tree


def _serial(value):
    out = bytearray()
    while True:
        low = value & 0x7F
        value >>= 7
        if value:
            out.append(low | 0x80)
        else:
            out.append(low)
            return bytes(out)


def _node(children=(), tail=None, wide=False):
    flag = 0x8000 if wide else 0x80
    counter = len(children) | (flag if tail is not None else 0)
    head = counter.to_bytes(2, "little") if wide else bytes([counter])
    body = b"".join(
        bytes([ord(char)]) + _serial(len(sub)) + sub for char, sub in children
    )
    return head + body + (tail if tail is not None else b"")


def _entry(lo, hi, nlexid, oclass, suffix=b""):
    if suffix:
        oclass |= 0x8000
    out = bytes([ord(lo), ord(hi)]) + _serial(nlexid) + oclass.to_bytes(2, "little")
    if suffix:
        out += bytes([len(suffix)]) + suffix
    return out


def _stems(*entries):
    return _serial(len(entries)) + b"".join(_entry(*e) for e in entries)


def _collect_keys(calls):
    def action(pos, key):
        calls.append(key)
        return None

    return action


def _recorder():
    found = []

    def output(nlexid, oclass, flex, suffix):
        found.append((nlexid, oclass, flex, suffix))
        return None

    return found, output


def _first_hit(nlexid, oclass, flex, suffix):
    return (nlexid, oclass, flex, suffix)


def test_scan_tree_offers_deeper_nodes_first():
    data = _node(
        [("a", _node(tail=_stems(("a", "z", 1, 0))))],
        tail=_stems(("a", "z", 2, 0)),
    )
    calls = []
    assert scan_tree(_collect_keys(calls), data, b"ab") is None
    assert calls == [b"b", b"ab"]


def test_scan_tree_stops_on_first_result():
    data = _node(
        [("a", _node(tail=_stems(("a", "z", 1, 0))))],
        tail=_stems(("a", "z", 2, 0)),
    )
    calls = []

    def action(pos, key):
        calls.append(key)
        return "stop"

    assert scan_tree(action, data, b"ab") == "stop"
    assert calls == [b"b"]


def test_scan_tree_wide_counters():
    data = _node(
        [("a", _node(tail=_stems(("a", "z", 1, 0)), wide=True))],
        tail=_stems(("a", "z", 2, 0)),
        wide=True,
    )
    calls = []
    scan_tree(_collect_keys(calls), data, b"ab", wide=True)
    assert calls == [b"b", b"ab"]


def test_scan_tree_rejects_truncated_data():
    with pytest.raises(ValueError):
        scan_tree(lambda pos, key: None, b"\x81", b"a")


def test_lookup_list_reports_stems_with_flexions():
    data = _node(
        [("a", _node(tail=_stems(("a", "z", 1, 0))))],
        tail=_stems(("a", "z", 2, 0)),
    )
    found, output = _recorder()
    result = scan_tree(LookupList(output).action(data), data, b"ab")
    assert not result
    assert found == [(1, 0, b"b", b""), (2, 0, b"ab", b"")]

    first = scan_tree(LookupList(_first_hit).action(data), data, b"ab")
    assert first == (1, 0, b"b", b"")


def test_lookup_list_strips_matching_suffix():
    data = _node(tail=_stems(("a", "z", 7, 3, b"-x")))

    found, output = _recorder()
    result = scan_tree(LookupList(output).action(data), data, b"ab-x")
    assert not result
    assert found == [(7, 3, b"ab", b"-x")]
    assert scan_tree(LookupList(_first_hit).action(data), data, b"ab-x") == (
        7,
        3,
        b"ab",
        b"-x",
    )

    found, output = _recorder()
    result = scan_tree(LookupList(output).action(data), data, b"abc")
    assert not result
    assert found == []
    assert not scan_tree(LookupList(_first_hit).action(data), data, b"abc")

    found, output = _recorder()
    scan_tree(LookupList(output).action(data), data, b"-x")
    assert found == [(7, 3, b"", b"-x")]
    assert scan_tree(LookupList(_first_hit).action(data), data, b"-x") == (
        7,
        3,
        b"",
        b"-x",
    )


def test_lookup_list_range_checks():
    ordered = _node(
        tail=_stems(("x", "z", 3, 0), ("d", "f", 2, 0), ("a", "c", 1, 0))
    )
    found, output = _recorder()
    scan_tree(LookupList(output).action(ordered), ordered, b"e")
    assert [hit[0] for hit in found] == [2]
    assert scan_tree(LookupList(_first_hit).action(ordered), ordered, b"e") == (
        2,
        0,
        b"e",
        b"",
    )

    breaking = _node(tail=_stems(("a", "c", 1, 0), ("d", "f", 2, 0)))
    found, output = _recorder()
    scan_tree(LookupList(output).action(breaking), breaking, b"e")
    assert found == []
    assert not scan_tree(LookupList(_first_hit).action(breaking), breaking, b"e")


def test_lookup_list_empty_flexion_skips_range():
    data = _node(tail=_stems(("x", "z", 4, 0)))
    found, output = _recorder()
    scan_tree(LookupList(output).action(data), data, b"")
    assert found == [(4, 0, b"", b"")]
    assert scan_tree(LookupList(_first_hit).action(data), data, b"") == (
        4,
        0,
        b"",
        b"",
    )


def test_select_view_picks_entry_at_position():
    first = ("a", "z", 1, 5)
    data = _node(tail=_stems(first, ("a", "z", 2, 6, b"-y")))
    second_pos = 1 + 1 + len(_entry(*first))
    found = []

    def output(nlexid, oclass, flex, suffix):
        found.append((nlexid, oclass, flex, suffix))
        return nlexid

    result = scan_tree(SelectView(output, second_pos).action(data), data, b"")
    assert result == 2
    assert found == [(2, 6, b"", b"-y")]

    found.clear()
    result = scan_tree(SelectView(output, second_pos + 1).action(data), data, b"")
    assert not result
    assert found == []


def test_select_view_returns_output_result():
    data = _node(tail=_stems(("a", "z", 9, 0)))
    view = SelectView(lambda nlexid, oclass, flex, suffix: nlexid, 2)
    assert scan_tree(view.action(data), data, b"") == 9


def test_get_track_visits_children_before_parent():
    data = _node([("a", _node([("b", _node(tail=b"\x00"))], tail=b"\x00"))])
    tracks = []
    get_track(lambda pos, track: tracks.append(track), data)
    assert tracks == [b"ab", b"a"]


def test_get_track_restricted_by_position():
    data = _node(
        [("a", _node(tail=b"\x00")), ("c", _node(tail=b"\x00"))]
    )
    tracks = []
    get_track(lambda pos, track: tracks.append(track), data)
    assert tracks == [b"a", b"c"]

    tracks.clear()
    get_track(lambda pos, track: tracks.append(track), data, dicpos=len(data) - 1)
    assert tracks == [b"c"]