"""
display_width module.

Monospace display width of Unicode text.
"""
# re-export the public API from the top-level module path, flattening
# 'from display_width.display_width import width_of' into
# 'from display_width import width_of'.

# local
from .display_width import (
    DisplayWidth,
    ResolverConfig,
    new_resolver_config,
    of,
    resolve,
    width_of)
from .emoji import match_sequence
from .exceptions import (
    IndexBuildError,
    MalformedRangeError,
    OverlappingRangeError,
    UnknownCategoryError)
from .index import RangeEntry, WidthClass, WidthIndex, build_index, default_index
from .ucd import UnicodePropertyData, parse_property_lines, property_data
from .unicode_versions import list_versions

__all__ = (
    'DisplayWidth', 'ResolverConfig', 'new_resolver_config', 'of', 'resolve',
    'width_of', 'match_sequence', 'IndexBuildError', 'MalformedRangeError',
    'OverlappingRangeError', 'UnknownCategoryError', 'RangeEntry',
    'WidthClass', 'WidthIndex', 'build_index', 'default_index',
    'UnicodePropertyData', 'parse_property_lines', 'property_data',
    'list_versions')
__version__ = '2.0.0'
