"""Monospace display width of Unicode strings.

In fixed-width output devices, Latin characters all occupy a single "cell"
position of equal width, whereas ideographic CJK characters occupy two such
cells. Combining marks, format characters and some control codes occupy no
cell at all, and BACKSPACE moves the cursor one cell back.

For characters in the East Asian Ambiguous (A) class, the width choice
depends purely on the target locale and font: single-width by default,
double-width when ``ambiguous_width=2`` is configured.

Emoji sequences (skin tone modifiers, zero width joiner sequences, flags of
two regional indicators, keycaps) are rendered by modern terminals as one
glyph of two cells. With ``emoji=True`` each such sequence is measured as a
single unit of width 2, instead of the sum of its parts.

The width of a single codepoint is resolved in this order:

1. A caller supplied overwrite of the codepoint.
2. Its :class:`~display_width.index.WidthClass`, with ambiguous characters
   mapped to the configured ``ambiguous_width``.
3. Special widths outside of any class, such as -1 for BACKSPACE.

The width of a string is the sum of its units, clamped to 0 at the end.

http://www.unicode.org/unicode/reports/tr11/
"""
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from .emoji import match_sequence
from .index import WidthClass, WidthIndex, default_index


@dataclass(frozen=True)
class ResolverConfig:
    """Width policy, built once and reused for many measurements.

    Attributes:
    ----------
        ambiguous_width: Width of East Asian Ambiguous characters, 1 or 2.
        overwrites: Read-only mapping of codepoint to an explicit width.
        emoji: Whether emoji sequences are measured as one unit.
        index: The :class:`~display_width.index.WidthIndex` to classify
            codepoints with, the shared default index when not given.

    """

    ambiguous_width: int = 1
    overwrites: Mapping[int, int] = field(default_factory=dict)
    emoji: bool = False
    index: WidthIndex | None = None

    def __post_init__(self):
        if self.ambiguous_width not in (1, 2):
            raise ValueError(
                f"ambiguous_width must be 1 or 2, not {self.ambiguous_width!r}")
        overwrites = {}
        for ucs, width in dict(self.overwrites).items():
            if not isinstance(ucs, int) or not isinstance(width, int):
                raise TypeError(
                    f"overwrites map integer codepoints to integer widths, "
                    f"got {ucs!r}: {width!r}")
            overwrites[ucs] = width
        object.__setattr__(self, 'overwrites', MappingProxyType(overwrites))
        if self.index is None:
            object.__setattr__(self, 'index', default_index())


def new_resolver_config(ambiguous_width: int = 1,
                        overwrites: Mapping[int, int] | None = None,
                        emoji: bool = False,
                        unicode_version: str = "auto") -> ResolverConfig:
    """Create a :class:`ResolverConfig`.

    Args:
    ----
        ambiguous_width: Width of East Asian Ambiguous characters, 1 or 2.
        overwrites: Mapping of codepoint to width, taking precedence over
            every other rule for that codepoint.
        emoji: Measure emoji sequences as one unit of width 2.
        unicode_version: Unicode version of the index, ``auto`` (default)
            uses the ``UNICODE_VERSION`` environment variable, or the latest
            version available.

    Raises:
    ------
        ValueError: ``ambiguous_width`` is neither 1 nor 2.
        TypeError: ``overwrites`` holds non-integer keys or values.

    """
    return ResolverConfig(
        ambiguous_width,
        overwrites or {},
        emoji,
        default_index(unicode_version))


@lru_cache(maxsize=1)
def _default_config() -> ResolverConfig:
    return ResolverConfig()


def resolve(ucs: int, config: ResolverConfig) -> int:
    """Return the width of codepoint ``ucs`` under ``config``.

    Overwritten widths are returned as given, unclamped. Only BACKSPACE
    resolves to a negative width otherwise.
    """
    width = config.overwrites.get(ucs)
    if width is not None:
        return width

    width_class = config.index.classify(ucs)
    if width_class is WidthClass.AMBIGUOUS:
        width = config.ambiguous_width
    else:
        width = int(width_class)

    special = config.index.special_width(ucs)
    if special is not None:
        return special
    return width


def _codepoints(text) -> tuple[int, ...]:
    if isinstance(text, str):
        return tuple(map(ord, text))
    if isinstance(text, (bytes, bytearray, memoryview)):
        raise TypeError(
            "display width is measured on decoded text, decode bytes first")
    codepoints = tuple(text)
    for ucs in codepoints:
        if not isinstance(ucs, int):
            raise TypeError(f"expected integer codepoints, got {ucs!r}")
    return codepoints


def width_of(text, config: ResolverConfig | None = None) -> int:
    """Given a unicode string, return its printable length on a terminal.

    Args:
    ----
        text: A ``str``, or any iterable of integer codepoints.
        config: The :class:`ResolverConfig` to measure with, default policy
            when not given.

    Returns:
    -------
        The number of cells needed to display ``text``, never negative.

    """
    if config is None:
        config = _default_config()
    codepoints = _codepoints(text)

    width = 0
    idx = 0
    end = len(codepoints)
    while idx < end:
        if config.emoji:
            match = match_sequence(codepoints, idx)
            if match is not None:
                consumed, unit_width = match
                width += unit_width
                idx += consumed
                continue

        width += resolve(codepoints[idx], config)
        idx += 1

    return max(width, 0)


def of(text, ambiguous: int = 1, overwrite: Mapping[int, int] | None = None,
       emoji: bool = False) -> int:
    """Return the display width of ``text`` with a one-off policy.

    >>> of('·', 2)
    2
    >>> of('\\t', 1, {0x09: 12})
    12
    """
    return width_of(text, new_resolver_config(ambiguous, overwrite, emoji))


class DisplayWidth:
    """Measure many strings with one stored policy.

    >>> display_width = DisplayWidth(overwrite={ord('A'): 100}, emoji=True)
    >>> display_width.of('A')
    100
    """

    def __init__(self, ambiguous: int = 1,
                 overwrite: Mapping[int, int] | None = None,
                 emoji: bool = False) -> None:
        self.config = new_resolver_config(ambiguous, overwrite, emoji)

    def of(self, text) -> int:
        return width_of(text, self.config)

    def __repr__(self) -> str:
        config = self.config
        return (f"{self.__class__.__name__}(ambiguous={config.ambiguous_width}, "
                f"overwrite={dict(config.overwrites)!r}, emoji={config.emoji})")
