from tenji.base import *
from tenji.decompose import Decomposition, DecompositionError, decompose
from tenji.compose import compose, token_to_cells
from tenji.render import (
    cell_to_dots,
    cell_to_unicode,
    parse_cell,
    parse_cells,
    render_cell,
    render_cells,
)
from tenji.converter import (
    cells_to_grid,
    convert,
    convert_to_unicode,
    grid_to_cells,
    text_to_cells,
)
