from __future__ import annotations

from typing import Iterable

from bitarray import bitarray
from bitarray.util import ba2int

from tenji.base import (
    CELL_BIT_DOTS,
    CELL_COLS,
    CELL_MASK,
    CELL_ROWS,
    FLAT_DOT,
    RAISED_DOT,
    braille_table_str,
)


def _check_cell(cell: int) -> None:
    if not 0 <= cell <= CELL_MASK:
        raise ValueError(f"Cell must be in the range [0, {CELL_MASK}], got {cell}")


def check_glyphs(raised: str, flat: str) -> None:
    """Make sure the dot glyphs can be told apart once rendered."""
    if len(raised) != 1 or len(flat) != 1:
        raise ValueError(f"Dot glyphs must be single characters, got {raised!r} and {flat!r}")
    if raised == flat:
        raise ValueError(f"Raised and flat glyphs must differ, both are {raised!r}")
    if raised.isspace() or flat.isspace():
        raise ValueError("Dot glyphs cannot be whitespace")


def dot_table(raised: str, flat: str) -> dict[int, str]:
    """Return the translation table from bits to dot glyphs."""
    check_glyphs(raised, flat)
    return str.maketrans({"1": raised, "0": flat})


def cell_to_bitarray(cell: int) -> bitarray:
    _check_cell(cell)
    return bitarray(format(cell, f"0{CELL_ROWS * CELL_COLS}b"))


def _cell_rows(cell: int, table: dict[int, str]) -> tuple[str, ...]:
    bits = cell_to_bitarray(cell)
    return tuple(
        bits[row * CELL_COLS : (row + 1) * CELL_COLS].to01().translate(table)
        for row in range(CELL_ROWS)
    )


def render_cell(cell: int, raised: str = RAISED_DOT, flat: str = FLAT_DOT) -> tuple[str, ...]:
    """Render a cell as its three rows of dots, top row first.

    Args:
        cell: The cell, in the range [0, 63].
        raised: The glyph for a raised dot.
        flat: The glyph for a flat dot.

    Returns:
        One two-character string per row: dots 1 4, dots 2 5 and dots 3 6.

    Examples:
        >>> render_cell(0b10_00_01)
        ('o-', '--', '-o')
    """
    return _cell_rows(cell, dot_table(raised, flat))


def render_cells(
    cells: Iterable[int], raised: str = RAISED_DOT, flat: str = FLAT_DOT
) -> list[tuple[str, ...]]:
    """Render every cell with the same glyphs, see `render_cell`."""
    table = dot_table(raised, flat)
    return [_cell_rows(cell, table) for cell in cells]


def parse_cell(rows: Iterable[str], raised: str = RAISED_DOT, flat: str = FLAT_DOT) -> int:
    """Read a cell back from its rendered rows."""
    check_glyphs(raised, flat)
    return _read_rows(rows, raised, flat)


def parse_cells(
    columns: Iterable[Iterable[str]], raised: str = RAISED_DOT, flat: str = FLAT_DOT
) -> list[int]:
    """Read back every cell drawn with the same glyphs, see `parse_cell`."""
    check_glyphs(raised, flat)
    return [_read_rows(rows, raised, flat) for rows in columns]


def _read_rows(rows: Iterable[str], raised: str, flat: str) -> int:
    rows = tuple(rows)
    if len(rows) != CELL_ROWS or any(len(row) != CELL_COLS for row in rows):
        raise ValueError(f"Expected {CELL_ROWS} rows of {CELL_COLS} dots, got {rows!r}")

    dots = "".join(rows)
    if invalid := set(dots) - {raised, flat}:
        raise ValueError(f"Unexpected dot glyphs {''.join(sorted(invalid))!r} in {rows!r}")
    return ba2int(bitarray(dots.translate(str.maketrans({raised: "1", flat: "0"}))))


def cell_to_dots(cell: int) -> tuple[int, ...]:
    """Return the numbers of the raised dots of a cell, in ascending order."""
    bits = cell_to_bitarray(cell)
    return tuple(sorted(dot for dot, bit in zip(CELL_BIT_DOTS, bits) if bit))


def cell_to_unicode(cell: int) -> str:
    """Return the Unicode braille character for a cell.

    Examples:
        >>> cell_to_unicode(0b10_00_01)
        '⠡'
    """
    _check_cell(cell)
    return braille_table_str[cell]


__all__ = (
    "cell_to_dots",
    "cell_to_unicode",
    "dot_table",
    "parse_cell",
    "parse_cells",
    "render_cell",
    "render_cells",
)
