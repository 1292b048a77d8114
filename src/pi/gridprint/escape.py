"""ANSI escape-sequence serialization of grids and grid differences.

All cursor movement uses absolute positioning (``CSI row ; col H``) so a
grid drawn away from the left edge of the screen keeps its left edge on
every row.  A plain newline would return the cursor to column 1.
"""

from __future__ import annotations

from typing import Iterable

import grapheme

from pi.gridprint.diff import PixelDifference
from pi.gridprint.grid import ROW_SEPARATOR

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_CURSOR_TO_FMT = "\x1b[{};{}H"

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def cursor_to(x: int, y: int) -> str:
    """Return the sequence moving the cursor to 1-based column *x*, row *y*."""
    return _CURSOR_TO_FMT.format(y, x)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def serialize_full(grid: str, origin: tuple[int, int]) -> str:
    """Serialize every row of *grid* with its top-left cell at *origin*.

    The empty grid, including one made only of empty rows, serializes to
    the empty string.
    """
    rows = grid.split(ROW_SEPARATOR)
    if not any(rows):
        return ""

    origin_x, origin_y = origin
    out: list[str] = []
    for row_index, row in enumerate(rows):
        out.append(cursor_to(origin_x, origin_y + row_index))
        out.append(row)
    return "".join(out)


def serialize_diff(
    runs: Iterable[PixelDifference],
    origin: tuple[int, int],
    width: int,
) -> str:
    """Serialize changed-cell runs for a grid of *width* drawn at *origin*.

    Each run starts with a move to its first cell.  A row-break marker in
    the payload becomes a move to the grid's left edge on the next row.  A
    run that reaches the grid's right edge without a marker continues on
    the next row the same way.
    """
    origin_x, origin_y = origin
    out: list[str] = []

    for run in runs:
        col = run.index % width
        row = run.index // width
        out.append(cursor_to(origin_x + col, origin_y + row))

        for segment_index, segment in enumerate(run.pixels.split(ROW_SEPARATOR)):
            if segment_index > 0:
                col = 0
                row += 1
                out.append(cursor_to(origin_x, origin_y + row))

            for cell in grapheme.graphemes(segment):
                if col == width:
                    col = 0
                    row += 1
                    out.append(cursor_to(origin_x, origin_y + row))
                out.append(cell)
                col += 1

    return "".join(out)
