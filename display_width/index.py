"""Width index: an immutable table of codepoint ranges and their width class.

The index is built once from Unicode property data by painting three layers
onto the codepoint space, each taking precedence over the last:

1. East Asian Width (``F``, ``W`` are wide, ``A`` is ambiguous).
2. General Category ``Mn``, ``Me`` and ``Cf``, which are zero width.
3. The fixed ranges of :mod:`display_width.table_special`.

Codepoints covered by no range are narrow.
"""
import enum
from functools import lru_cache
from types import MappingProxyType
from typing import NamedTuple

from .exceptions import (
    MalformedRangeError, OverlappingRangeError, UnknownCategoryError)
from .table_special import SPECIAL_RANGES, SPECIAL_WIDTHS
from .ucd import property_data
from .unicode_versions import _wcmatch_version

MAX_CODEPOINT = 0x10ffff

EAST_ASIAN_WIDTH_CODES = frozenset(('F', 'W', 'H', 'Na', 'A', 'N'))
GENERAL_CATEGORY_CODES = frozenset((
    'Lu', 'Ll', 'Lt', 'Lm', 'Lo',
    'Mn', 'Mc', 'Me',
    'Nd', 'Nl', 'No',
    'Pc', 'Pd', 'Ps', 'Pe', 'Pi', 'Pf', 'Po',
    'Sm', 'Sc', 'Sk', 'So',
    'Zs', 'Zl', 'Zp',
    'Cc', 'Cf', 'Cs', 'Co', 'Cn',
))
ZERO_WIDTH_CATEGORIES = frozenset(('Mn', 'Me', 'Cf'))


class WidthClass(enum.IntEnum):
    ZERO = 0
    NARROW = 1
    WIDE = 2
    AMBIGUOUS = 3


_EAST_ASIAN_WIDTH_CLASS = {
    'F': WidthClass.WIDE,
    'W': WidthClass.WIDE,
    'A': WidthClass.AMBIGUOUS,
    'H': WidthClass.NARROW,
    'Na': WidthClass.NARROW,
    'N': WidthClass.NARROW,
}


class RangeEntry(NamedTuple):
    start: int
    end: int
    width_class: WidthClass


def _bisearch(ucs: int, table) -> int:
    """Auxiliary function for binary search in interval table.

    Args:
    ----
        ucs: Ordinal value of unicode character.
        table: List of starting and ending ranges of ordinal values.

    Returns:
    -------
        1 if ordinal value ucs is found within lookup table, else 0.

    """
    if not table or ucs < table[0][0] or ucs > table[-1][1]:
        return 0

    lbound = 0
    ubound = len(table) - 1

    while ubound >= lbound:
        mid = (lbound + ubound) // 2
        if ucs > table[mid][1]:
            lbound = mid + 1
        elif ucs < table[mid][0]:
            ubound = mid - 1
        else:
            return 1

    return 0


class WidthIndex:
    """Sorted, non-overlapping :class:`RangeEntry` table.

    Instances are read-only and may be shared between threads.
    """

    __slots__ = ('_entries', '_special_widths', 'unicode_version')

    def __init__(self, entries, special_widths=None, unicode_version=None):
        self._entries = tuple(entries)
        self._special_widths = MappingProxyType(dict(special_widths or {}))
        self.unicode_version = unicode_version

    @property
    def entries(self) -> tuple[RangeEntry, ...]:
        return self._entries

    def classify(self, ucs: int) -> WidthClass:
        """Return the :class:`WidthClass` of codepoint ``ucs``.

        Finds the last range starting at or before ``ucs``; when ``ucs``
        falls past its end, or before the first range, it is narrow.
        """
        table = self._entries
        lbound = 0
        ubound = len(table) - 1
        found = -1

        while ubound >= lbound:
            mid = (lbound + ubound) // 2
            if table[mid].start <= ucs:
                found = mid
                lbound = mid + 1
            else:
                ubound = mid - 1

        if found >= 0 and ucs <= table[found].end:
            return table[found].width_class
        return WidthClass.NARROW

    def special_width(self, ucs: int) -> int | None:
        """Return the width assigned to ``ucs`` outside any class, if any."""
        return self._special_widths.get(ucs)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (f"<{self.__class__.__name__} unicode_version="
                f"{self.unicode_version!r} ranges={len(self._entries)}>")


def _validate(property_name: str, ranges, known_codes) -> list:
    checked = []
    for entry in ranges:
        try:
            start, end, code = entry
        except (TypeError, ValueError):
            raise MalformedRangeError(
                entry, "expected (start, end, code)") from None
        if not isinstance(start, int) or not isinstance(end, int):
            raise MalformedRangeError(entry, "bounds must be integers")
        if start < 0 or end > MAX_CODEPOINT:
            raise MalformedRangeError(entry, "outside of codepoint space")
        if start > end:
            raise MalformedRangeError(entry, "start exceeds end")
        if code not in known_codes:
            raise UnknownCategoryError(property_name, code, entry)
        checked.append((start, end, code))

    checked.sort()
    for previous, current in zip(checked, checked[1:]):
        if current[0] <= previous[1]:
            raise OverlappingRangeError(property_name, previous, current)
    return checked


def _paint(layers) -> list[RangeEntry]:
    """Flatten layers of ``(start, end, width_class)``, later layers winning.

    Every layer must be sorted and free of overlaps.
    """
    boundaries = sorted({
        bound
        for layer in layers
        for start, end, _ in layer
        for bound in (start, end + 1)})
    cursors = [0] * len(layers)
    entries: list[RangeEntry] = []

    for lo, hi in zip(boundaries, boundaries[1:]):
        width_class = WidthClass.NARROW
        for depth, layer in enumerate(layers):
            pos = cursors[depth]
            while pos < len(layer) and layer[pos][1] < lo:
                pos += 1
            cursors[depth] = pos
            if pos < len(layer) and layer[pos][0] <= lo:
                width_class = layer[pos][2]

        if width_class is WidthClass.NARROW:
            continue
        last = entries[-1] if entries else None
        if last is not None and last.end == lo - 1 and last.width_class is width_class:
            entries[-1] = last._replace(end=hi - 1)
        else:
            entries.append(RangeEntry(lo, hi - 1, width_class))

    return entries


def build_index(unicode_property_data,
                special_ranges=SPECIAL_RANGES,
                special_widths=SPECIAL_WIDTHS) -> WidthIndex:
    """Build a :class:`WidthIndex` from Unicode property data.

    Args:
    ----
        unicode_property_data: An object with ``east_asian_width`` and
            ``general_category`` lists of ``(start, end, code)`` triples, and
            optionally ``unicode_version``, such as
            :class:`display_width.ucd.UnicodePropertyData`.
        special_ranges: ``(start, end, class_name)`` ranges applied over the
            property data.
        special_widths: Mapping of codepoint to a width outside of the
            :class:`WidthClass` values, such as ``-1`` for BACKSPACE.

    Returns:
    -------
        An immutable :class:`WidthIndex`.

    Raises:
    ------
        MalformedRangeError: A range is not a valid pair of codepoints.
        OverlappingRangeError: Two ranges of one property overlap.
        UnknownCategoryError: A property code is not defined by Unicode.

    """
    east_asian_width = _validate(
        'East_Asian_Width', unicode_property_data.east_asian_width,
        EAST_ASIAN_WIDTH_CODES)
    general_category = _validate(
        'General_Category', unicode_property_data.general_category,
        GENERAL_CATEGORY_CODES)
    special = _validate(
        'special', special_ranges, WidthClass.__members__)

    layers = [
        [(start, end, _EAST_ASIAN_WIDTH_CLASS[code])
         for start, end, code in east_asian_width
         if _EAST_ASIAN_WIDTH_CLASS[code] is not WidthClass.NARROW],
        [(start, end, WidthClass.ZERO)
         for start, end, code in general_category
         if code in ZERO_WIDTH_CATEGORIES],
        [(start, end, WidthClass[name]) for start, end, name in special],
    ]
    return WidthIndex(
        _paint(layers),
        special_widths,
        getattr(unicode_property_data, 'unicode_version', None))


@lru_cache(maxsize=4)
def _cached_index(unicode_version: str) -> WidthIndex:
    return build_index(property_data(unicode_version))


def default_index(unicode_version: str = "auto") -> WidthIndex:
    """Return the shared index for ``unicode_version``, building it once."""
    return _cached_index(_wcmatch_version(unicode_version))
