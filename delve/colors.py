"""Palette used for tiles, entities and interface text."""

BLACK = 0x000000
WHITE = 0xFFFFFF
GREY = 0x999999

# wood floor
BROWN1 = 0x833E20
BROWN2 = 0x8F4C28
BROWN3 = 0x965A31
BROWN4 = 0xA67C51
BROWN5 = 0xB99D67

# forest green
GREEN1 = 0x003101
GREEN2 = 0x053800
GREEN3 = 0x024000
GREEN4 = 0x064900
GREEN5 = 0x00510A
GREEN6 = 0x008800

# rock gray
GRAY1 = 0x2D2C2C
GRAY2 = 0x3A3232
GRAY3 = 0x493C3C
GRAY4 = 0x5C4949
GRAY5 = 0x655353
GRAY6 = 0x858893

# reds
RED1 = 0xB62020
RED2 = 0xCB2424
RED3 = 0xFE2E2E
RED4 = 0xFE5757
RED5 = 0xFE8181

# yellows
YELLOW1 = 0xF9E909
YELLOW2 = 0xFDF25D
YELLOW3 = 0xFCFF83
YELLOW4 = 0xFBFD9E
YELLOW5 = 0xFEFFC3

# blues
BLUE1 = 0x001EFF
BLUE2 = 0x001BE7
BLUE3 = 0x0119CB
BLUE4 = 0x021496
BLUE5 = 0x000B5E

DEEPSEA1 = 0x0200C5
DEEPSEA2 = 0x0100AF
DEEPSEA3 = 0x0100A0
DEEPSEA4 = 0x010090
DEEPSEA5 = 0x010088

SHALLOWWATERS1 = 0x77D9D9
SHALLOWWATERS2 = 0x77C5D9
SHALLOWWATERS3 = 0x77B2D9
SHALLOWWATERS4 = 0x779ED9
SHALLOWWATERS5 = 0x778BD9


def rgb(color: int) -> tuple[int, int, int]:
    """Split a ``0xRRGGBB`` value into its red, green and blue parts.

    Any bits above the low 24 are ignored.
    """
    if not 0 <= color < 2**32:
        raise ValueError(f"colour value out of range: {color!r}")
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)