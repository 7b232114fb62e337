"""Emoji property tables. Source: emoji-data.txt, emoji-sequences.txt."""
EXTENDED_PICTOGRAPHIC = (
    (0x000a9, 0x000a9,),  # Copyright Sign
    (0x000ae, 0x000ae,),  # Registered Sign
    (0x0203c, 0x0203c,),  # Double Exclamation Mark
    (0x02049, 0x02049,),  # Exclamation Question Mark
    (0x02122, 0x02122,),  # Trade Mark Sign
    (0x02139, 0x02139,),  # Information Source
    (0x02194, 0x02199,),  # Left Right Arrow        ..South West Arrow
    (0x021a9, 0x021aa,),  # Leftwards Arrow With Hoo..Rightwards Arrow With Ho
    (0x0231a, 0x0231b,),  # Watch                   ..Hourglass
    (0x02328, 0x02328,),  # Keyboard
    (0x02388, 0x02388,),  # Helm Symbol
    (0x023cf, 0x023cf,),  # Eject Symbol
    (0x023e9, 0x023f3,),  # Black Right-pointing Dou..Hourglass With Flowing S
    (0x023f8, 0x023fa,),  # Double Vertical Bar     ..Black Circle For Record
    (0x024c2, 0x024c2,),  # Circled Latin Capital Letter M
    (0x025aa, 0x025ab,),  # Black Small Square      ..White Small Square
    (0x025b6, 0x025b6,),  # Black Right-pointing Triangle
    (0x025c0, 0x025c0,),  # Black Left-pointing Triangle
    (0x025fb, 0x025fe,),  # White Medium Square     ..Black Medium Small Squar
    (0x02600, 0x02605,),  # Black Sun With Rays     ..Black Star
    (0x02607, 0x02612,),  # Lightning               ..Ballot Box With X
    (0x02614, 0x02685,),  # Umbrella With Rain Drops..Die Face-6
    (0x02690, 0x02705,),  # White Flag              ..White Heavy Check Mark
    (0x02708, 0x02712,),  # Airplane                ..Black Nib
    (0x02714, 0x02714,),  # Heavy Check Mark
    (0x02716, 0x02716,),  # Heavy Multiplication X
    (0x0271d, 0x0271d,),  # Latin Cross
    (0x02721, 0x02721,),  # Star Of David
    (0x02728, 0x02728,),  # Sparkles
    (0x02733, 0x02734,),  # Eight Spoked Asterisk   ..Eight Pointed Black Star
    (0x02744, 0x02744,),  # Snowflake
    (0x02747, 0x02747,),  # Sparkle
    (0x0274c, 0x0274c,),  # Cross Mark
    (0x0274e, 0x0274e,),  # Negative Squared Cross Mark
    (0x02753, 0x02755,),  # Black Question Mark Orna..White Exclamation Mark O
    (0x02757, 0x02757,),  # Heavy Exclamation Mark Symbol
    (0x02763, 0x02767,),  # Heavy Heart Exclamation ..Rotated Floral Heart Bul
    (0x02795, 0x02797,),  # Heavy Plus Sign         ..Heavy Division Sign
    (0x027a1, 0x027a1,),  # Black Rightwards Arrow
    (0x027b0, 0x027b0,),  # Curly Loop
    (0x027bf, 0x027bf,),  # Double Curly Loop
    (0x02934, 0x02935,),  # Arrow Pointing Rightward..Arrow Pointing Rightward
    (0x02b05, 0x02b07,),  # Leftwards Black Arrow   ..Downwards Black Arrow
    (0x02b1b, 0x02b1c,),  # Black Large Square      ..White Large Square
    (0x02b50, 0x02b50,),  # White Medium Star
    (0x02b55, 0x02b55,),  # Heavy Large Circle
    (0x03030, 0x03030,),  # Wavy Dash
    (0x0303d, 0x0303d,),  # Part Alternation Mark
    (0x03297, 0x03297,),  # Circled Ideograph Congratulation
    (0x03299, 0x03299,),  # Circled Ideograph Secret
    (0x1f000, 0x1f0ff,),  # Mahjong Tile East Wind  ..(nil)
    (0x1f10d, 0x1f10f,),  # Circled Zero With Slash ..Circled Dollar Sign With
    (0x1f12f, 0x1f12f,),  # Copyleft Symbol
    (0x1f16c, 0x1f171,),  # Raised Mr Sign          ..Negative Squared Latin C
    (0x1f17e, 0x1f17f,),  # Negative Squared Latin C..Negative Squared Latin C
    (0x1f18e, 0x1f18e,),  # Negative Squared Ab
    (0x1f191, 0x1f19a,),  # Squared Cl              ..Squared Vs
    (0x1f1ad, 0x1f1e5,),  # Mask Work Symbol        ..(nil)
    (0x1f201, 0x1f20f,),  # Squared Katakana Koko   ..(nil)
    (0x1f21a, 0x1f21a,),  # Squared Cjk Unified Ideograph-7121
    (0x1f22f, 0x1f22f,),  # Squared Cjk Unified Ideograph-6307
    (0x1f232, 0x1f23a,),  # Squared Cjk Unified Ideo..Squared Cjk Unified Ideo
    (0x1f23c, 0x1f23f,),  # (nil)
    (0x1f249, 0x1f3fa,),  # (nil)                   ..Amphora
    (0x1f400, 0x1f53d,),  # Rat                     ..Down-pointing Small Red
    (0x1f546, 0x1f64f,),  # White Latin Cross       ..Person With Folded Hands
    (0x1f680, 0x1f6ff,),  # Rocket                  ..(nil)
    (0x1f774, 0x1f77f,),  # Lot Of Fortune          ..Orcus
    (0x1f7d5, 0x1f7ff,),  # Circled Triangle        ..(nil)
    (0x1f80c, 0x1f80f,),  # (nil)
    (0x1f848, 0x1f84f,),  # (nil)
    (0x1f85a, 0x1f85f,),  # (nil)
    (0x1f888, 0x1f88f,),  # (nil)
    (0x1f8ae, 0x1f8ff,),  # (nil)
    (0x1f90c, 0x1f93a,),  # Pinched Fingers         ..Fencer
    (0x1f93c, 0x1f945,),  # Wrestlers               ..Goal Net
    (0x1f947, 0x1faff,),  # First Place Medal       ..(nil)
    (0x1fc00, 0x1fffd,),  # (nil)
)

EMOJI_PRESENTATION = (
    (0x0231a, 0x0231b,),  # Watch                   ..Hourglass
    (0x023e9, 0x023ec,),  # Black Right-pointing Dou..Black Down-pointing Doub
    (0x023f0, 0x023f0,),  # Alarm Clock
    (0x023f3, 0x023f3,),  # Hourglass With Flowing Sand
    (0x025fd, 0x025fe,),  # White Medium Small Squar..Black Medium Small Squar
    (0x02614, 0x02615,),  # Umbrella With Rain Drops..Hot Beverage
    (0x02648, 0x02653,),  # Aries                   ..Pisces
    (0x0267f, 0x0267f,),  # Wheelchair Symbol
    (0x02693, 0x02693,),  # Anchor
    (0x026a1, 0x026a1,),  # High Voltage Sign
    (0x026aa, 0x026ab,),  # Medium White Circle     ..Medium Black Circle
    (0x026bd, 0x026be,),  # Soccer Ball             ..Baseball
    (0x026c4, 0x026c5,),  # Snowman Without Snow    ..Sun Behind Cloud
    (0x026ce, 0x026ce,),  # Ophiuchus
    (0x026d4, 0x026d4,),  # No Entry
    (0x026ea, 0x026ea,),  # Church
    (0x026f2, 0x026f3,),  # Fountain                ..Flag In Hole
    (0x026f5, 0x026f5,),  # Sailboat
    (0x026fa, 0x026fa,),  # Tent
    (0x026fd, 0x026fd,),  # Fuel Pump
    (0x02705, 0x02705,),  # White Heavy Check Mark
    (0x0270a, 0x0270b,),  # Raised Fist             ..Raised Hand
    (0x02728, 0x02728,),  # Sparkles
    (0x0274c, 0x0274c,),  # Cross Mark
    (0x0274e, 0x0274e,),  # Negative Squared Cross Mark
    (0x02753, 0x02755,),  # Black Question Mark Orna..White Exclamation Mark O
    (0x02757, 0x02757,),  # Heavy Exclamation Mark Symbol
    (0x02795, 0x02797,),  # Heavy Plus Sign         ..Heavy Division Sign
    (0x027b0, 0x027b0,),  # Curly Loop
    (0x027bf, 0x027bf,),  # Double Curly Loop
    (0x02b1b, 0x02b1c,),  # Black Large Square      ..White Large Square
    (0x02b50, 0x02b50,),  # White Medium Star
    (0x02b55, 0x02b55,),  # Heavy Large Circle
    (0x1f004, 0x1f004,),  # Mahjong Tile Red Dragon
    (0x1f0cf, 0x1f0cf,),  # Playing Card Black Joker
    (0x1f18e, 0x1f18e,),  # Negative Squared Ab
    (0x1f191, 0x1f19a,),  # Squared Cl              ..Squared Vs
    (0x1f1e6, 0x1f1ff,),  # Regional Indicator Symbo..Regional Indicator Symbo
    (0x1f201, 0x1f201,),  # Squared Katakana Koko
    (0x1f21a, 0x1f21a,),  # Squared Cjk Unified Ideograph-7121
    (0x1f22f, 0x1f22f,),  # Squared Cjk Unified Ideograph-6307
    (0x1f232, 0x1f236,),  # Squared Cjk Unified Ideo..Squared Cjk Unified Ideo
    (0x1f238, 0x1f23a,),  # Squared Cjk Unified Ideo..Squared Cjk Unified Ideo
    (0x1f250, 0x1f251,),  # Circled Ideograph Advant..Circled Ideograph Accept
    (0x1f300, 0x1f320,),  # Cyclone                 ..Shooting Star
    (0x1f32d, 0x1f335,),  # Hot Dog                 ..Cactus
    (0x1f337, 0x1f37c,),  # Tulip                   ..Baby Bottle
    (0x1f37e, 0x1f393,),  # Bottle With Popping Cork..Graduation Cap
    (0x1f3a0, 0x1f3ca,),  # Carousel Horse          ..Swimmer
    (0x1f3cf, 0x1f3d3,),  # Cricket Bat And Ball    ..Table Tennis Paddle And
    (0x1f3e0, 0x1f3f0,),  # House Building          ..European Castle
    (0x1f3f4, 0x1f3f4,),  # Waving Black Flag
    (0x1f3f8, 0x1f43e,),  # Badminton Racquet And Sh..Paw Prints
    (0x1f440, 0x1f440,),  # Eyes
    (0x1f442, 0x1f4fc,),  # Ear                     ..Videocassette
    (0x1f4ff, 0x1f53d,),  # Prayer Beads            ..Down-pointing Small Red
    (0x1f54b, 0x1f54e,),  # Kaaba                   ..Menorah With Nine Branch
    (0x1f550, 0x1f567,),  # Clock Face One Oclock   ..Clock Face Twelve-thirty
    (0x1f57a, 0x1f57a,),  # Man Dancing
    (0x1f595, 0x1f596,),  # Reversed Hand With Middl..Raised Hand With Part Be
    (0x1f5a4, 0x1f5a4,),  # Black Heart
    (0x1f5fb, 0x1f64f,),  # Mount Fuji              ..Person With Folded Hands
    (0x1f680, 0x1f6c5,),  # Rocket                  ..Left Luggage
    (0x1f6cc, 0x1f6cc,),  # Sleeping Accommodation
    (0x1f6d0, 0x1f6d2,),  # Place Of Worship        ..Shopping Trolley
    (0x1f6d5, 0x1f6d7,),  # Hindu Temple            ..Elevator
    (0x1f6dc, 0x1f6df,),  # Wireless                ..Ring Buoy
    (0x1f6eb, 0x1f6ec,),  # Airplane Departure      ..Airplane Arriving
    (0x1f6f4, 0x1f6fc,),  # Scooter                 ..Roller Skate
    (0x1f7e0, 0x1f7eb,),  # Large Orange Circle     ..Large Brown Square
    (0x1f7f0, 0x1f7f0,),  # Heavy Equals Sign
    (0x1f90c, 0x1f93a,),  # Pinched Fingers         ..Fencer
    (0x1f93c, 0x1f945,),  # Wrestlers               ..Goal Net
    (0x1f947, 0x1f9ff,),  # First Place Medal       ..Nazar Amulet
    (0x1fa70, 0x1fa7c,),  # Ballet Shoes            ..Crutch
    (0x1fa80, 0x1fa88,),  # Yo-yo                   ..Flute
    (0x1fa90, 0x1fabd,),  # Ringed Planet           ..Wing
    (0x1fabf, 0x1fac5,),  # Goose                   ..Person With Crown
    (0x1face, 0x1fadb,),  # Moose                   ..Pea Pod
    (0x1fae0, 0x1fae8,),  # Melting Face            ..Shaking Face
    (0x1faf0, 0x1faf8,),  # Hand With Index Finger A..Rightwards Pushing Hand
)

EMOJI_MODIFIER = (
    (0x1f3fb, 0x1f3ff,),  # Emoji Modifier Fitzpatri..Emoji Modifier Fitzpatri
)

REGIONAL_INDICATOR = (
    (0x1f1e6, 0x1f1ff,),  # Regional Indicator Symbo..Regional Indicator Symbo
)

KEYCAP_BASE = (
    (0x00023, 0x00023,),  # Number Sign
    (0x0002a, 0x0002a,),  # Asterisk
    (0x00030, 0x00039,),  # Digit Zero              ..Digit Nine
)

TAG_SPEC = (
    (0xe0020, 0xe007e,),  # Tag Space               ..Tag Tilde
)

ZERO_WIDTH_JOINER = 0x200d
VARIATION_SELECTOR_15 = 0xfe0e
VARIATION_SELECTOR_16 = 0xfe0f
COMBINING_ENCLOSING_KEYCAP = 0x20e3
CANCEL_TAG = 0xe007f
