# 3rd party
import pytest

# local
from display_width import (
    IndexBuildError,
    MalformedRangeError,
    OverlappingRangeError,
    RangeEntry,
    UnicodePropertyData,
    UnknownCategoryError,
    WidthClass,
    build_index,
    default_index,
)


def make_data(east_asian_width=(), general_category=()):
    return UnicodePropertyData('test', list(east_asian_width), list(general_category))


@pytest.fixture
def small_index():
    return build_index(make_data(
        east_asian_width=[
            (0x00a1, 0x00a1, 'A'),
            (0x00ad, 0x00ad, 'A'),
            (0x1100, 0x115f, 'W'),
            (0x2060, 0x2060, 'W'),
            (0xff61, 0xff9f, 'H'),
        ],
        general_category=[
            (0x0041, 0x005a, 'Lu'),
            (0x00ad, 0x00ad, 'Cf'),
            (0x0300, 0x036f, 'Mn'),
            (0x1100, 0x115f, 'Lo'),
        ]))


def test_classify(small_index):
    """Ranges classify by East Asian Width, then category, then special ranges."""
    assert small_index.classify(0x41) is WidthClass.NARROW
    assert small_index.classify(0xa1) is WidthClass.AMBIGUOUS
    assert small_index.classify(0x1100) is WidthClass.WIDE
    assert small_index.classify(0x115f) is WidthClass.WIDE
    assert small_index.classify(0x0301) is WidthClass.ZERO
    assert small_index.classify(0xff70) is WidthClass.NARROW


def test_special_ranges_take_precedence(small_index):
    """Fixed special ranges override property data."""
    # SOFT HYPHEN is ambiguous and Cf, yet narrow.
    assert small_index.classify(0xad) is WidthClass.NARROW
    # WORD JOINER given as wide is still zero width.
    assert small_index.classify(0x2060) is WidthClass.ZERO
    assert small_index.classify(0x1160) is WidthClass.ZERO
    assert small_index.classify(0x00) is WidthClass.ZERO
    assert small_index.classify(0xe0fff) is WidthClass.ZERO


def test_default_narrow(small_index):
    """Codepoints outside of every range are narrow."""
    assert small_index.classify(0x10ffff) is WidthClass.NARROW
    assert small_index.classify(0x50000) is WidthClass.NARROW


def test_special_widths(small_index):
    assert small_index.special_width(0x08) == -1
    assert small_index.special_width(0x2e3b) == 3
    assert small_index.special_width(0x41) is None


def test_entries_sorted_and_merged(small_index):
    """Entries are sorted, disjoint, never narrow, and adjacent classes merge."""
    entries = small_index.entries
    for previous, current in zip(entries, entries[1:]):
        assert previous.end < current.start
        assert not (previous.end + 1 == current.start
                    and previous.width_class is current.width_class)
    assert all(entry.width_class is not WidthClass.NARROW for entry in entries)
    assert RangeEntry(0x1100, 0x115f, WidthClass.WIDE) in entries
    assert len(small_index) == len(entries)


def test_unordered_input():
    """Ranges may be supplied in any order."""
    index = build_index(make_data(
        east_asian_width=[(0x3000, 0x3000, 'F'), (0x1100, 0x115f, 'W')]))
    assert index.classify(0x3000) is WidthClass.WIDE
    assert index.classify(0x1100) is WidthClass.WIDE


def test_empty_property_data():
    """Without property data only the special ranges remain."""
    index = build_index(make_data())
    assert index.classify(0x4e00) is WidthClass.NARROW
    assert index.classify(0x0a) is WidthClass.ZERO
    assert index.unicode_version == 'test'


@pytest.mark.parametrize('entry', [
    (0x20, 0x10, 'W'),
    (-1, 0x10, 'W'),
    (0x10, 0x110000, 'W'),
    ('0x10', 0x20, 'W'),
    (0x10, 0x20),
    None,
])
def test_malformed_range(entry):
    with pytest.raises(MalformedRangeError) as excinfo:
        build_index(make_data(east_asian_width=[entry]))
    assert excinfo.value.entry == entry


def test_overlapping_range():
    # given,
    first, second = (0x1100, 0x115f, 'W'), (0x1150, 0x1160, 'N')

    # exercise,
    with pytest.raises(OverlappingRangeError) as excinfo:
        build_index(make_data(east_asian_width=[second, first]))

    # verify.
    assert excinfo.value.property_name == 'East_Asian_Width'
    assert (excinfo.value.first, excinfo.value.second) == (first, second)


@pytest.mark.parametrize('east_asian_width, general_category, code', [
    ([(0x41, 0x41, 'X')], [], 'X'),
    ([], [(0x41, 0x41, 'Zz')], 'Zz'),
])
def test_unknown_category(east_asian_width, general_category, code):
    with pytest.raises(UnknownCategoryError) as excinfo:
        build_index(make_data(east_asian_width, general_category))
    assert excinfo.value.code == code


def test_build_errors_are_value_errors():
    assert issubclass(MalformedRangeError, IndexBuildError)
    assert issubclass(OverlappingRangeError, IndexBuildError)
    assert issubclass(UnknownCategoryError, IndexBuildError)
    assert issubclass(IndexBuildError, ValueError)


def test_default_index_shared():
    """The default index is built once."""
    assert default_index() is default_index()
    assert default_index().classify(0x4e00) is WidthClass.WIDE
    assert default_index().classify(0x3fffd) is WidthClass.WIDE
    assert default_index().classify(0xb7) is WidthClass.AMBIGUOUS
