"""Text histograms drawn with code page 437 block characters."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from .basic import max_ints
from .binning import BinningConfig

# IBM glyphs shown for the control range 0x01-0x1F.
_LOW_GLYPHS = "☺☻♥♦♣♠•◘○◙♂♀♪♫☼►◄↕‼¶§▬↨↑↓→←∟↔▲▼"


class Cp437(IntEnum):
    """Named code page 437 characters."""

    NULL = 0x00
    SMILING_FACE = 0x01
    INVERSE_SMILING_FACE = 0x02
    HEART = 0x03
    DIAMOND = 0x04
    CLUB = 0x05
    SPADE = 0x06
    BULLET = 0x07
    INVERSE_BULLET = 0x08
    WHITE_CIRCLE = 0x09
    INVERSE_WHITE_CIRCLE = 0x0A
    MALE_SYMBOL = 0x0B
    FEMALE_SYMBOL = 0x0C
    MUSICAL_NOTE = 0x0D
    DOUBLE_NOTE = 0x0E
    SUN = 0x0F
    RIGHT_ARROW = 0x10
    LEFT_ARROW = 0x11
    UP_DOWN_ARROW = 0x12
    DOUBLE_EXCLAMATION = 0x13
    PARAGRAPH = 0x14
    SECTION_SIGN = 0x15
    RECTANGLE = 0x16
    UP_DOWN_ARROW_BASE = 0x17
    UP_ARROW = 0x18
    DOWN_ARROW = 0x19
    RIGHT_ARROW_IBM = 0x1A
    LEFT_ARROW_IBM = 0x1B
    RIGHT_ANGLE = 0x1C
    LEFT_RIGHT_ARROW = 0x1D
    UP_TRIANGLE = 0x1E
    DOWN_TRIANGLE = 0x1F
    SPACE = 0x20
    EXCLAMATION = 0x21
    TILDE = 0x7E
    HOUSE_SYMBOL = 0x7F
    LATIN_C_CEDILLA = 0x80
    LATIN_U_UMLAUT = 0x81
    LATIN_E_ACUTE = 0x82
    LATIN_A_CIRCUMFLEX = 0x83
    LATIN_A_UMLAUT = 0x84
    LATIN_A_GRAVE = 0x85
    LATIN_A_RING = 0x86
    LATIN_C_CEDILLA_SMALL = 0x87
    LATIN_E_CIRCUMFLEX = 0x88
    LATIN_E_UMLAUT = 0x89
    LATIN_E_GRAVE = 0x8A
    LATIN_I_UMLAUT = 0x8B
    LATIN_I_CIRCUMFLEX = 0x8C
    LATIN_I_GRAVE = 0x8D
    LATIN_A_UMLAUT_CAP = 0x8E
    LATIN_A_RING_CAP = 0x8F
    LATIN_E_ACUTE_CAP = 0x90
    LATIN_AE_SMALL = 0x91
    LATIN_AE_CAP = 0x92
    LATIN_O_CIRCUMFLEX = 0x93
    LATIN_O_UMLAUT = 0x94
    LATIN_O_GRAVE = 0x95
    LATIN_U_CIRCUMFLEX = 0x96
    LATIN_U_GRAVE = 0x97
    LATIN_Y_UMLAUT = 0x98
    LATIN_O_UMLAUT_CAP = 0x99
    LATIN_U_UMLAUT_CAP = 0x9A
    CENT_SIGN = 0x9B
    POUND_SIGN = 0x9C
    YEN_SIGN = 0x9D
    PESETA_SIGN = 0x9E
    LATIN_F_HOOK = 0x9F
    LATIN_A_ACUTE = 0xA0
    LATIN_I_ACUTE = 0xA1
    LATIN_O_ACUTE = 0xA2
    LATIN_U_ACUTE = 0xA3
    LATIN_N_TILDE = 0xA4
    LATIN_N_TILDE_CAP = 0xA5
    FEMININE_ORDINAL = 0xA6
    MASCULINE_ORDINAL = 0xA7
    INVERTED_QUESTION = 0xA8
    REVERSED_NOT_SIGN = 0xA9
    NOT_SIGN = 0xAA
    FRACTION_ONE_HALF = 0xAB
    FRACTION_ONE_QUARTER = 0xAC
    INVERTED_EXCLAMATION = 0xAD
    LEFT_DOUBLE_ANGLE = 0xAE
    RIGHT_DOUBLE_ANGLE = 0xAF
    LIGHT_SHADE = 0xB0
    MEDIUM_SHADE = 0xB1
    DARK_SHADE = 0xB2
    BOX_VERTICAL = 0xB3
    BOX_VERTICAL_LEFT = 0xB4
    BOX_V_SINGLE_LEFT_DBL = 0xB5
    BOX_V_DOUBLE_LEFT_SGL = 0xB6
    BOX_DOWN_DBL_LEFT_SGL = 0xB7
    BOX_DOWN_SGL_LEFT_DBL = 0xB8
    BOX_DOUBLE_V_LEFT = 0xB9
    BOX_DOUBLE_VERTICAL = 0xBA
    BOX_DOUBLE_DOWN_LEFT = 0xBB
    BOX_DOUBLE_UP_LEFT = 0xBC
    BOX_UP_DBL_LEFT_SGL = 0xBD
    BOX_UP_SGL_LEFT_DBL = 0xBE
    BOX_DOWN_LEFT = 0xBF
    BOX_UP_RIGHT = 0xC0
    BOX_UP_HORIZONTAL = 0xC1
    BOX_DOWN_HORIZONTAL = 0xC2
    BOX_VERTICAL_RIGHT = 0xC3
    BOX_HORIZONTAL = 0xC4
    BOX_VERTICAL_HORIZONTAL = 0xC5
    BOX_V_SINGLE_RIGHT_DBL = 0xC6
    BOX_V_DOUBLE_RIGHT_SGL = 0xC7
    BOX_DOUBLE_UP_RIGHT = 0xC8
    BOX_DOUBLE_DOWN_RIGHT = 0xC9
    BOX_DOUBLE_UP_HORIZ = 0xCA
    BOX_DOUBLE_DOWN_HORIZ = 0xCB
    BOX_DOUBLE_V_RIGHT = 0xCC
    BOX_DOUBLE_HORIZONTAL = 0xCD
    BOX_DOUBLE_V_HORIZ = 0xCE
    BOX_UP_SGL_HORIZ_DBL = 0xCF
    BOX_UP_DBL_HORIZ_SGL = 0xD0
    BOX_DOWN_SGL_HORIZ_DBL = 0xD1
    BOX_DOWN_DBL_HORIZ_SGL = 0xD2
    BOX_UP_DBL_RIGHT_SGL = 0xD3
    BOX_UP_SGL_RIGHT_DBL = 0xD4
    BOX_DOWN_SGL_RIGHT_DBL = 0xD5
    BOX_DOWN_DBL_RIGHT_SGL = 0xD6
    BOX_DOUBLE_V_HORIZ_ALT = 0xD7
    BOX_V_DBL_HORIZ_SGL = 0xD8
    BOX_UP_LEFT = 0xD9
    BOX_DOWN_RIGHT = 0xDA
    FULL_BLOCK = 0xDB
    LOWER_HALF_BLOCK = 0xDC
    LEFT_HALF_BLOCK = 0xDD
    RIGHT_HALF_BLOCK = 0xDE
    UPPER_HALF_BLOCK = 0xDF
    GREEK_ALPHA = 0xE0
    LATIN_SHARP_S = 0xE1
    GREEK_GAMMA = 0xE2
    GREEK_PI = 0xE3
    GREEK_SIGMA = 0xE4
    GREEK_SIGMA_SMALL = 0xE5
    MICRO_SIGN = 0xE6
    GREEK_TAU = 0xE7
    GREEK_PHI_CAP = 0xE8
    GREEK_THETA_CAP = 0xE9
    GREEK_OMEGA_CAP = 0xEA
    GREEK_DELTA = 0xEB
    INFINITY = 0xEC
    GREEK_PHI = 0xED
    GREEK_EPSILON = 0xEE
    INTERSECTION = 0xEF
    IDENTICAL_TO = 0xF0
    PLUS_MINUS = 0xF1
    GREATER_THAN_OR_EQUAL = 0xF2
    LESS_THAN_OR_EQUAL = 0xF3
    TOP_HALF_INTEGRAL = 0xF4
    BOTTOM_HALF_INTEGRAL = 0xF5
    DIVISION_SIGN = 0xF6
    ALMOST_EQUAL = 0xF7
    DEGREE_SIGN = 0xF8
    BULLET_OPERATOR = 0xF9
    MIDDLE_DOT = 0xFA
    SQUARE_ROOT = 0xFB
    SUPERSCRIPT_N = 0xFC
    SUPERSCRIPT_TWO = 0xFD
    BLACK_SQUARE = 0xFE
    NO_BREAK_SPACE = 0xFF

    def char(self) -> str:
        """Return the Unicode character this code point displays as."""
        code = int(self)
        if 0x01 <= code <= 0x1F:
            return _LOW_GLYPHS[code - 1]
        if code == 0x7F:
            return "⌂"
        return bytes([code]).decode("cp437")


def smooth_histogram(
    bins: Sequence[int],
    config: BinningConfig,
    max_height: int = 20,
    show_bin_info: bool = False,
) -> str:
    """Render bin counts as horizontal bars, one line per bin.

    Bars use full blocks with a trailing half block, giving twice the
    resolution; the largest bin is max_height blocks long. With
    show_bin_info each line is labelled by its edges, otherwise by its index.
    """
    if len(bins) < config.count:
        raise ValueError(f"expected {config.count} bin counts, got {len(bins)}")
    counts = list(bins[: config.count])
    max_count = max_ints(counts)
    scale = (2.0 * max_height) / max_count if max_count else 0.0
    full_block = Cp437.FULL_BLOCK.char()
    half_block = Cp437.LEFT_HALF_BLOCK.char()

    lines = []
    for index, count in enumerate(counts):
        if show_bin_info:
            label = f"[{config.edges[index]:6.2f}-{config.edges[index + 1]:6.2f}] "
        else:
            label = f"{index:3d} "
        scaled = count * scale
        full = int(scaled / 2)
        bar = full_block * full
        if scaled - full * 2 >= 1.0:
            bar += half_block
        lines.append(f"{label}{bar} {count}\n")
    return "".join(lines)