"""Fixed special ranges, folded into every index after the UCD layers."""
# Each entry is (start, end, width_class_name), inclusive, applied with
# higher precedence than East Asian Width and General Category data.
SPECIAL_RANGES = (
    (0x0000, 0x0000, 'ZERO'),    # Null
    (0x0005, 0x0005, 'ZERO'),    # Enquiry
    (0x0007, 0x0007, 'ZERO'),    # Bell
    (0x000a, 0x000f, 'ZERO'),    # Line Feed               ..Shift In
    (0x00ad, 0x00ad, 'NARROW'),  # Soft Hyphen
    (0x1160, 0x11ff, 'ZERO'),    # Hangul Jungseong Filler ..Hangul Jongseong Ssangnieun
    (0x2060, 0x206f, 'ZERO'),    # Word Joiner             ..Nominal Digit Shapes
    (0xd7b0, 0xd7ff, 'ZERO'),    # Hangul Jungseong O-yeo  ..(nil)
    (0xfff0, 0xfff8, 'ZERO'),    # (nil)
    (0xe0000, 0xe0fff, 'ZERO'),  # (nil)                   ..(nil)
)

# Widths outside of the WidthClass set, resolved after class mapping.
SPECIAL_WIDTHS = {
    0x0008: -1,  # Backspace
    0x2e3a: 2,   # Two-em Dash
    0x2e3b: 3,   # Three-em Dash
}
