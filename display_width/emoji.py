"""Recognize emoji sequences that render as a single two-cell glyph.

Grammar, matched greedily from the cursor::

    element  := RI RI
              | keycap_base FE0F? 20E3
              | pictographic tag_spec+ cancel_tag
              | pictographic (modifier | FE0F)?
    sequence := element (ZWJ element)*

A lone pictographic codepoint only matches when it has default emoji
presentation; text-default pictographs need FE0F, a modifier, or a ZWJ join.
"""
from .index import _bisearch
from .table_emoji import (
    CANCEL_TAG,
    COMBINING_ENCLOSING_KEYCAP,
    EMOJI_MODIFIER,
    EMOJI_PRESENTATION,
    EXTENDED_PICTOGRAPHIC,
    KEYCAP_BASE,
    REGIONAL_INDICATOR,
    TAG_SPEC,
    VARIATION_SELECTOR_15,
    VARIATION_SELECTOR_16,
    ZERO_WIDTH_JOINER,
)

EMOJI_WIDTH = 2


def _element(codepoints, pos: int):
    """Match one element at ``pos``.

    Returns:
    -------
        ``(end, qualified)`` where ``end`` is the position after the element
        and ``qualified`` tells whether it is an emoji on its own, or
        ``None`` when no element starts at ``pos``.

    """
    length = len(codepoints)
    ucs = codepoints[pos]
    following = codepoints[pos + 1] if pos + 1 < length else None

    if _bisearch(ucs, REGIONAL_INDICATOR):
        if following is not None and _bisearch(following, REGIONAL_INDICATOR):
            return pos + 2, True
        return None

    if _bisearch(ucs, KEYCAP_BASE):
        nxt = pos + 1
        if nxt < length and codepoints[nxt] == VARIATION_SELECTOR_16:
            nxt += 1
        if nxt < length and codepoints[nxt] == COMBINING_ENCLOSING_KEYCAP:
            return nxt + 1, True
        return None

    presentation = bool(_bisearch(ucs, EMOJI_PRESENTATION))
    if not presentation and not _bisearch(ucs, EXTENDED_PICTOGRAPHIC):
        return None
    if following is None:
        return pos + 1, presentation
    if following == VARIATION_SELECTOR_15:
        # text presentation explicitly requested
        return None
    if following == VARIATION_SELECTOR_16 or _bisearch(following, EMOJI_MODIFIER):
        return pos + 2, True
    if _bisearch(following, TAG_SPEC):
        nxt = pos + 1
        while nxt < length and _bisearch(codepoints[nxt], TAG_SPEC):
            nxt += 1
        if nxt < length and codepoints[nxt] == CANCEL_TAG:
            return nxt + 1, True
    return pos + 1, presentation


def match_sequence(codepoints, cursor: int):
    """Match the longest emoji sequence starting at ``cursor``.

    Args:
    ----
        codepoints: Sequence of integer codepoints.
        cursor: Position in ``codepoints`` to match at.

    Returns:
    -------
        ``(consumed, width)`` of the matched sequence, or ``None`` when no
        emoji sequence starts at ``cursor``.

    """
    if cursor >= len(codepoints):
        return None
    element = _element(codepoints, cursor)
    if element is None:
        return None

    pos, qualified = element
    joined = False
    while pos + 1 < len(codepoints) and codepoints[pos] == ZERO_WIDTH_JOINER:
        joined_element = _element(codepoints, pos + 1)
        if joined_element is None:
            break
        pos = joined_element[0]
        joined = True

    if not (qualified or joined):
        return None
    return pos - cursor, EMOJI_WIDTH
