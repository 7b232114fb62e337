# std imports
import unicodedata

# 3rd party
import pytest

# local
from display_width import (
    MalformedRangeError, UnicodePropertyData, WidthClass, build_index,
    parse_property_lines, property_data)

EAST_ASIAN_WIDTH_SAMPLE = """\
# EastAsianWidth-15.0.0.txt
# @missing: 0000..10FFFF; N

0000..001F     ; N  # Cc    [32] <control>..<control>
00A1           ; A  # Po         INVERTED EXCLAMATION MARK
1100..115F     ; W  # Lo    [96] HANGUL CHOSEONG KIYEOK..HANGUL CHOSEONG FILLER
3000;F  # Zs       IDEOGRAPHIC SPACE
"""


@pytest.fixture(scope='module')
def latest():
    return property_data('latest')


def test_parse_property_lines():
    """Assignments are parsed, comments and blank lines skipped."""
    # exercise,
    ranges = parse_property_lines(EAST_ASIAN_WIDTH_SAMPLE.splitlines(True))

    # verify.
    assert ranges == [
        (0x0000, 0x001f, 'N'),
        (0x00a1, 0x00a1, 'A'),
        (0x1100, 0x115f, 'W'),
        (0x3000, 0x3000, 'F'),
    ]


def test_parsed_ranges_build_index():
    ranges = parse_property_lines(EAST_ASIAN_WIDTH_SAMPLE.splitlines())
    index = build_index(UnicodePropertyData(None, ranges, []))
    assert index.classify(0x3000) is WidthClass.WIDE
    assert index.classify(0xa1) is WidthClass.AMBIGUOUS
    assert index.unicode_version is None


@pytest.mark.parametrize('line', [
    '11000..; W',
    'XYZ ; W',
    '1100..115F',
])
def test_parse_malformed_line(line):
    with pytest.raises(MalformedRangeError):
        parse_property_lines([line])


def test_property_data_version(latest):
    assert latest.unicode_version == unicodedata.unidata_version


def test_property_data_contiguous(latest):
    """Ranges of each property are sorted and do not overlap."""
    for ranges in (latest.east_asian_width, latest.general_category):
        for previous, current in zip(ranges, ranges[1:]):
            assert previous[1] < current[0]
            assert previous[0] <= previous[1]


def test_property_data_values(latest):
    """Values agree with unicodedata for assigned codepoints."""
    def lookup(ranges, ucs):
        return next(code for start, end, code in ranges if start <= ucs <= end)

    for char in u'A\u4e00\u00b7\u0300\u200b':
        ucs = ord(char)
        assert lookup(latest.east_asian_width, ucs) == unicodedata.east_asian_width(char)
        assert lookup(latest.general_category, ucs) == unicodedata.category(char)


def test_property_data_missing_wide(latest):
    """Unassigned codepoints of ideographic blocks are wide."""
    def lookup(ranges, ucs):
        return next(code for start, end, code in ranges if start <= ucs <= end)

    assert lookup(latest.east_asian_width, 0x3fffd) == 'W'
    assert lookup(latest.general_category, 0x3fffd) == 'Cn'


def test_property_data_3_2_0():
    """The frozen 3.2.0 database builds an index as well."""
    # exercise,
    data = property_data('3.2.0')
    index = build_index(data)

    # verify.
    assert data.unicode_version == '3.2.0'
    assert index.unicode_version == '3.2.0'
    assert index.classify(0x4e00) is WidthClass.WIDE
    assert index.classify(0x3fffd) is WidthClass.WIDE
