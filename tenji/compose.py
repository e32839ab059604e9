from __future__ import annotations

from tenji.base import (
    BASE_CELLS,
    CONSONANT_ROWS,
    GEMINATION_PREFIX,
    GLIDE_BITS,
    MIDDLE_ROW_MASK,
    PALATAL_BIT,
    SEMI_VOICED_PAIRS,
    SEMI_VOICED_PREFIX,
    VOICED_PAIRS,
    VOICED_PREFIX,
    Consonant,
    Core,
)
from tenji.decompose import Decomposition, decompose


def base_cell(core: Core) -> int:
    """Return the cell of a bare vowel or special marker."""
    return BASE_CELLS[core]


def _shift_for_glide(cell: int) -> int:
    # Vowels with a middle row only lose their top row, the others lose two.
    return cell >> (2 if cell & MIDDLE_ROW_MASK else 4)


def apply_consonant(consonant: Consonant | None, cell: int) -> tuple[int, ...]:
    """Combine a consonant with a base cell, returning the cells to emit for it.

    Voiced (G, Z, D, B) and semi-voiced (P) consonants are written as their
    unvoiced counterpart preceded by a marker cell.
    """
    if consonant is None:
        return (cell,)
    if consonant in CONSONANT_ROWS:
        return (cell | CONSONANT_ROWS[consonant],)
    if consonant in GLIDE_BITS:
        return (_shift_for_glide(cell) | GLIDE_BITS[consonant],)
    if consonant in VOICED_PAIRS:
        return (VOICED_PREFIX, *apply_consonant(VOICED_PAIRS[consonant], cell))
    if consonant in SEMI_VOICED_PAIRS:
        return (SEMI_VOICED_PREFIX, *apply_consonant(SEMI_VOICED_PAIRS[consonant], cell))
    raise ValueError(f"Invalid consonant: {consonant!r}")


def apply_palatalization(cells: tuple[int, ...]) -> tuple[int, ...]:
    """Mark a sequence as palatalized.

    A voicing marker already in front absorbs the palatal bit, otherwise a
    new marker cell is added.
    """
    if len(cells) > 1:
        return (cells[0] | PALATAL_BIT, *cells[1:])
    return (PALATAL_BIT, *cells)


def apply_gemination(cells: tuple[int, ...]) -> tuple[int, ...]:
    return (GEMINATION_PREFIX, *cells)


def compose(decomposition: Decomposition) -> tuple[int, ...]:
    """Return the cells for a decomposed mora, in output order.

    Examples:
        >>> compose(decompose("KA"))
        (33,)

        >>> [f"{cell:06b}" for cell in compose(decompose("GGYA"))]
        ['001000', '010100', '100001']
    """
    cells = apply_consonant(decomposition.consonant, base_cell(decomposition.core))
    if decomposition.palatalized:
        cells = apply_palatalization(cells)
    if decomposition.geminated:
        cells = apply_gemination(cells)
    return cells


def token_to_cells(token: str) -> tuple[int, ...]:
    return compose(decompose(token))


__all__ = (
    "apply_consonant",
    "apply_gemination",
    "apply_palatalization",
    "base_cell",
    "compose",
    "token_to_cells",
)
