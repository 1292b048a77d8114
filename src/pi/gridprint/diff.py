"""Cell-level difference between two grids of the same dimensions."""

from __future__ import annotations

from dataclasses import dataclass

import grapheme

from pi.gridprint.grid import ROW_SEPARATOR, grid_cells


@dataclass(frozen=True)
class PixelDifference:
    """A contiguous run of changed cells in row-major order.

    ``pixels`` holds the replacement cells.  Where the run wraps onto the
    next grid row a ``\\n`` marker precedes the first cell of that row, so
    ``pixels`` can be longer than the number of cells it replaces.
    ``index`` is the flat index of the first cell.
    """

    pixels: str
    index: int

    @property
    def cell_count(self) -> int:
        """Number of grid cells this run replaces."""
        return grapheme.length(self.pixels.replace(ROW_SEPARATOR, ""))


def pixel_difference(
    previous_grid: str,
    grid: str,
    width: int,
) -> list[PixelDifference]:
    """Return the runs of cells in *grid* that differ from *previous_grid*.

    Both grids must already be validated and have the same dimensions.
    A changed cell joins the current run when it directly follows the last
    changed cell; otherwise it starts a new run.  When a run continues onto
    a new row a ``\\n`` marker is inserted, except before the grid's very
    last cell.  Identical grids produce an empty list.
    """
    old_cells = grid_cells(previous_grid)
    new_cells = grid_cells(grid)
    grid_size = len(new_cells)

    # (first index, payload parts) per run
    runs: list[tuple[int, list[str]]] = []
    last_changed = -2

    for index, (old_cell, new_cell) in enumerate(zip(old_cells, new_cells)):
        if old_cell == new_cell:
            continue

        if runs and last_changed == index - 1:
            parts = runs[-1][1]
            if index % width == 0 and index != grid_size - 1:
                parts.append(ROW_SEPARATOR)
            parts.append(new_cell)
        else:
            runs.append((index, [new_cell]))

        last_changed = index

    return [PixelDifference("".join(parts), start) for start, parts in runs]
