"""Unicode property data for building a width index.

Range lists are derived from the interpreter's :mod:`unicodedata` database,
or parsed from UCD property files such as ``EastAsianWidth.txt`` with
:func:`parse_property_lines`.
"""
import re
import unicodedata
from typing import NamedTuple

from .exceptions import MalformedRangeError
from .unicode_versions import _wcmatch_version

# Unassigned codepoints in these blocks default to W, per the @missing lines
# of EastAsianWidth.txt.
MISSING_WIDE = (
    (0x03400, 0x04dbf,),  # CJK Unified Ideographs Extension A
    (0x04e00, 0x09fff,),  # CJK Unified Ideographs
    (0x0f900, 0x0faff,),  # CJK Compatibility Ideographs
    (0x20000, 0x2fffd,),  # Supplementary Ideographic Plane
    (0x30000, 0x3fffd,),  # Tertiary Ideographic Plane
)

# Planes 4 through 13 hold no assigned codepoints.
SCANNED_PLANES = (
    (0x00000, 0x3ffff,),
    (0xe0000, 0x10ffff,),
)

_PROPERTY_LINE = re.compile(
    r'^([0-9A-Fa-f]+)(?:\.\.([0-9A-Fa-f]+))?\s*;\s*([A-Za-z_]+)\s*$')


class UnicodePropertyData(NamedTuple):
    """East Asian Width and General Category ranges of one Unicode version.

    Each list holds ``(start, end, code)`` triples with inclusive bounds.
    """

    unicode_version: str
    east_asian_width: list
    general_category: list


def _database(unicode_version: str):
    if unicode_version == unicodedata.unidata_version:
        return unicodedata
    return unicodedata.ucd_3_2_0


def _missing_wide(ucs: int) -> bool:
    return any(start <= ucs <= end for start, end in MISSING_WIDE)


def _append(runs: list, ucs: int, code: str) -> None:
    last = runs[-1] if runs else None
    if last is not None and last[2] == code and last[1] == ucs - 1:
        last[1] = ucs
    else:
        runs.append([ucs, ucs, code])


def property_data(unicode_version: str = "auto") -> UnicodePropertyData:
    """Derive property ranges from :mod:`unicodedata`.

    Args:
    ----
        unicode_version: A Unicode version string, or ``auto`` to select by
            the ``UNICODE_VERSION`` environment variable or the latest
            available. The nearest supported version is used.

    Returns:
    -------
        :class:`UnicodePropertyData` suitable for
        :func:`display_width.index.build_index`.

    """
    version = _wcmatch_version(unicode_version)
    database = _database(version)
    east_asian_width: list = []
    general_category: list = []
    for start, end in SCANNED_PLANES:
        for ucs in range(start, end + 1):
            char = chr(ucs)
            category = database.category(char)
            if category == 'Cn' and _missing_wide(ucs):
                eaw = 'W'
            else:
                eaw = database.east_asian_width(char)
            _append(east_asian_width, ucs, eaw)
            _append(general_category, ucs, category)
    return UnicodePropertyData(
        version,
        [tuple(run) for run in east_asian_width],
        [tuple(run) for run in general_category],
    )


def parse_property_lines(lines) -> list:
    r"""Parse UCD property file lines into ``(start, end, code)`` triples.

    Blank lines and ``#`` comments are skipped::

        >>> parse_property_lines(['3000;F  # Zs  IDEOGRAPHIC SPACE',
        ...                       '3001..3003;W'])
        [(12288, 12288, 'F'), (12289, 12291, 'W')]

    Raises:
    ------
        MalformedRangeError: a non-comment line is not a property assignment.

    """
    ranges = []
    for lineno, line in enumerate(lines, 1):
        content = line.split('#', 1)[0].strip()
        if not content:
            continue
        match = _PROPERTY_LINE.match(content)
        if match is None:
            raise MalformedRangeError(
                line.rstrip('\n'), f"line {lineno} is not a property assignment")
        start = int(match.group(1), 16)
        end = int(match.group(2) or match.group(1), 16)
        ranges.append((start, end, match.group(3)))
    return ranges
