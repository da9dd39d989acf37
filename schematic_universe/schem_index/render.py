"""
Boolean masks over the schematic grid.

Mask index [r, c] addresses cell Point(c + 1, r + 1), since schematic
coordinates are 1-indexed.
"""

import numpy as np

from .schematic import Schematic


def part_mask(schematic: Schematic) -> np.ndarray:
    """
    Bool mask of cells occupied by part numbers.

    Returns:
        rows×cols bool array over schematic.extent (0×0 when empty)

    Raises:
        ValueError: If a part number occupies a cell with col or row below 1
    """
    cells = [cell for number in schematic.part_number_entities() for cell in number.cells]
    for cell in cells:
        if cell.row < 1 or cell.col < 1:
            raise ValueError(f"Cell {cell} is outside the 1-indexed grid")

    rows, cols = schematic.extent
    mask = np.zeros((max(rows, 0), max(cols, 0)), dtype=bool)
    for cell in cells:
        mask[cell.row - 1, cell.col - 1] = True
    return mask


def render_mask(mask: np.ndarray) -> str:
    """'#' for True, '.' for False, one line per row."""
    return "\n".join("".join("#" if v else "." for v in row) for row in mask)
