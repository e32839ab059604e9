"""Conversion of space separated romanized mora into six dot Japanese braille."""
from __future__ import annotations

from itertools import chain
from typing import Iterable

from tenji.base import CELL_COLS, CELL_ROWS, FLAT_DOT, RAISED_DOT
from tenji.compose import token_to_cells
from tenji.render import cell_to_unicode, parse_cells, render_cells


def text_to_cells(text: str) -> list[int]:
    """Return the cells for every token of the text, in order.

    Tokens are separated by single spaces. The first token that is not a
    valid mora aborts the conversion with a DecompositionError.
    """
    return list(chain.from_iterable(token_to_cells(token) for token in text.split(" ")))


def cells_to_grid(
    cells: Iterable[int],
    raised: str = RAISED_DOT,
    flat: str = FLAT_DOT,
) -> str:
    """Lay out rendered cells side by side as three lines of text."""
    rendered = render_cells(cells, raised=raised, flat=flat)
    if not rendered:
        return "\n" * (CELL_ROWS - 1)

    # Transpose from rows per cell to cells per row
    return "\n".join(" ".join(row) for row in zip(*rendered))


def convert(text: str, raised: str = RAISED_DOT, flat: str = FLAT_DOT) -> str:
    """Convert romanized mora into braille, drawn as three lines of dots.

    Args:
        text: Mora separated by single spaces, e.g. ``"KYO -"``.
        raised: The glyph for a raised dot.
        flat: The glyph for a flat dot.

    Returns:
        Three lines joined by newlines, each holding one two-character group
        per cell.

    Raises:
        DecompositionError: If any token is not a valid mora.

    Examples:
        >>> print(convert("KA SI"))
        o- o-
        -- oo
        -o -o
    """
    return cells_to_grid(text_to_cells(text), raised=raised, flat=flat)


def convert_to_unicode(text: str) -> str:
    """Convert romanized mora into a line of Unicode braille characters.

    Examples:
        >>> convert_to_unicode("KA SI")
        '⠡⠳'
    """
    return "".join(cell_to_unicode(cell) for cell in text_to_cells(text))


def grid_to_cells(grid: str, raised: str = RAISED_DOT, flat: str = FLAT_DOT) -> list[int]:
    """Read the cells back from a grid produced by `convert`."""
    lines = grid.split("\n")
    if len(lines) != CELL_ROWS:
        raise ValueError(f"Expected {CELL_ROWS} lines, got {len(lines)}")

    rows = [line.split(" ") if line else [] for line in lines]
    if len({len(row) for row in rows}) != 1:
        raise ValueError("All lines must hold the same number of cells")
    for row in rows:
        for group in row:
            if len(group) != CELL_COLS:
                raise ValueError(f"Invalid dot group {group!r}")

    return parse_cells(zip(*rows), raised=raised, flat=flat)


__all__ = ("cells_to_grid", "convert", "convert_to_unicode", "grid_to_cells", "text_to_cells")
