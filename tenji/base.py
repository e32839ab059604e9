from enum import Enum
from typing import Final

CELL_COLS: Final[int] = 2
CELL_ROWS: Final[int] = 3

BRAILLE_RANGE_START: Final[int] = 0x2800

RAISED_DOT: Final[str] = "o"
FLAT_DOT: Final[str] = "-"


class Core(str, Enum):
    """The vowel or special marker that closes every mora."""

    A = "A"
    I = "I"  # noqa: E741
    U = "U"
    E = "E"
    O = "O"  # noqa: E741
    N = "N"
    LONG = "-"


class Consonant(str, Enum):
    K = "K"
    S = "S"
    T = "T"
    N = "N"
    H = "H"
    M = "M"
    R = "R"
    G = "G"
    Z = "Z"
    D = "D"
    B = "B"
    P = "P"
    Y = "Y"
    W = "W"


# Cells are written in output order, i.e. dots (1)(4)_(2)(5)_(3)(6):
#  1 4
#  2 5
#  3 6
BASE_CELLS: Final[dict[Core, int]] = {
    Core.A: 0b10_00_00,
    Core.I: 0b10_10_00,
    Core.U: 0b11_00_00,
    Core.E: 0b11_10_00,
    Core.O: 0b01_10_00,
    Core.N: 0b00_01_11,
    Core.LONG: 0b00_11_00,
}

CONSONANT_ROWS: Final[dict[Consonant, int]] = {
    Consonant.K: 0b00_00_01,
    Consonant.S: 0b00_01_01,
    Consonant.T: 0b00_01_10,
    Consonant.N: 0b00_00_10,
    Consonant.H: 0b00_00_11,
    Consonant.M: 0b00_01_11,
    Consonant.R: 0b00_01_00,
}

GLIDE_BITS: Final[dict[Consonant, int]] = {
    Consonant.Y: 0b01_00_00,
    Consonant.W: 0b00_00_00,
}

# Voiced and semi-voiced consonants borrow the row of their unvoiced pair.
VOICED_PAIRS: Final[dict[Consonant, Consonant]] = {
    Consonant.G: Consonant.K,
    Consonant.Z: Consonant.S,
    Consonant.D: Consonant.T,
    Consonant.B: Consonant.H,
}
SEMI_VOICED_PAIRS: Final[dict[Consonant, Consonant]] = {
    Consonant.P: Consonant.H,
}

VOICED_PREFIX: Final[int] = 0b00_01_00
SEMI_VOICED_PREFIX: Final[int] = 0b00_00_01
PALATAL_BIT: Final[int] = 0b01_00_00
GEMINATION_PREFIX: Final[int] = 0b00_10_00

MIDDLE_ROW_MASK: Final[int] = 0b00_11_00
CELL_MASK: Final[int] = 0b11_11_11

# Dot number for each bit of a cell, most significant bit first.
CELL_BIT_DOTS: Final[tuple[int, ...]] = (1, 4, 2, 5, 3, 6)


def _unicode_offset(cell: int) -> int:
    """Reorder the bits of a cell into the Unicode braille layout (dot n on bit n - 1)."""
    offset = 0
    for i, dot in enumerate(CELL_BIT_DOTS):
        if cell >> (len(CELL_BIT_DOTS) - 1 - i) & 1:
            offset |= 1 << (dot - 1)
    return offset


#   This doesn't change, so instead of building the character every time
#   we keep one for each of the 64 possible cells.
braille_table_str: Final[str] = "".join(
    chr(BRAILLE_RANGE_START + _unicode_offset(cell)) for cell in range(CELL_MASK + 1)
)

__all__ = (
    "BASE_CELLS",
    "BRAILLE_RANGE_START",
    "CELL_BIT_DOTS",
    "CELL_COLS",
    "CELL_MASK",
    "CELL_ROWS",
    "CONSONANT_ROWS",
    "Consonant",
    "Core",
    "FLAT_DOT",
    "GEMINATION_PREFIX",
    "GLIDE_BITS",
    "MIDDLE_ROW_MASK",
    "PALATAL_BIT",
    "RAISED_DOT",
    "SEMI_VOICED_PAIRS",
    "SEMI_VOICED_PREFIX",
    "VOICED_PAIRS",
    "VOICED_PREFIX",
    "braille_table_str",
)
