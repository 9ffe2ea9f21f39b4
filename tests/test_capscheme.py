import pytest

from morphdict.capscheme import (
    CharType,
    is_good_scheme,
    is_good_scheme_min0,
    is_good_scheme_min1,
    is_good_scheme_min2,
)

MIN2 = [0x0102, 0x020A, 0x032A]
MIN1_ONLY = [0x0101, 0x0205, 0x0311]
MIN0_ONLY = [0x0100, 0x0200, 0x0300, 0x0201, 0x0301]


def test_char_type_values():
    assert [int(t) for t in CharType] == [0, 1, 2, 3]
    assert CharType(2) is CharType.DLMCHAR


@pytest.mark.parametrize("scheme", MIN2)
def test_min2_schemes_good_everywhere(scheme):
    assert is_good_scheme_min2(scheme)
    assert is_good_scheme_min1(scheme)
    assert is_good_scheme_min0(scheme)


@pytest.mark.parametrize("scheme", MIN1_ONLY)
def test_min1_schemes(scheme):
    assert not is_good_scheme_min2(scheme)
    assert is_good_scheme_min1(scheme)
    assert is_good_scheme_min0(scheme)


@pytest.mark.parametrize("scheme", MIN0_ONLY)
def test_min0_schemes(scheme):
    assert not is_good_scheme_min2(scheme)
    assert not is_good_scheme_min1(scheme)
    assert is_good_scheme_min0(scheme)


@pytest.mark.parametrize("scheme", [0, 0x0103, 0x0202, 0x0400, 0xFFFF])
def test_bad_schemes(scheme):
    assert not is_good_scheme_min0(scheme)
    assert not any(is_good_scheme(scheme, level) for level in range(3))


@pytest.mark.parametrize("scheme", MIN2 + MIN1_ONLY + MIN0_ONLY)
def test_dispatch_matches_level_functions(scheme):
    assert is_good_scheme(scheme, 0) == is_good_scheme_min0(scheme)
    assert is_good_scheme(scheme, 1) == is_good_scheme_min1(scheme)
    assert is_good_scheme(scheme, 2) == is_good_scheme_min2(scheme)


@pytest.mark.parametrize("scheme", MIN2 + MIN1_ONLY + MIN0_ONLY)
def test_unknown_min_cap_is_never_good(scheme):
    assert is_good_scheme(scheme, 3) is False
    assert is_good_scheme(scheme, -1) is False