"""Grid text helpers: shape validation, cell segmentation, construction.

A grid is a single string whose rows are separated by ``\\n``.  Each cell is
one grapheme cluster, so ``"e\\u0301"`` (an ``e`` with a combining acute
accent) occupies one cell just like ``"é"`` does.
"""

from __future__ import annotations

from typing import Sequence

import grapheme

from pi.gridprint.errors import (
    NonRectangularGrid,
    TooFewCharacters,
    TooManyCharacters,
)

ROW_SEPARATOR = "\n"

EMPTY_GRID = ""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def grid_dimensions(grid: str) -> tuple[int, int]:
    """Return ``(width, height)`` of *grid*.

    The empty string is the empty grid and measures ``(0, 0)``, as does any
    grid whose rows are all empty, such as ``"\\n"``.  Leading and trailing
    separators are not trimmed, so ``"ab\\n"`` has a second, empty row and
    is rejected.

    Raises:
        NonRectangularGrid: if the rows do not all have the same number of
            cells.
    """
    if not grid:
        return 0, 0

    rows = grid.split(ROW_SEPARATOR)
    width = grapheme.length(rows[0])

    for row_index, row in enumerate(rows):
        row_width = grapheme.length(row)
        if row_width != width:
            raise NonRectangularGrid(
                f"Row {row_index} has {row_width} cells, expected {width}",
                {"row": row_index, "expected": width, "actual": row_width},
            )

    if width == 0:
        return 0, 0
    return width, len(rows)


def is_rectangular(grid: str) -> bool:
    """Return ``True`` if *grid* passes :func:`grid_dimensions`."""
    try:
        grid_dimensions(grid)
    except NonRectangularGrid:
        return False
    return True


def grid_cells(grid: str) -> list[str]:
    """Flatten *grid* into its cells in row-major order.

    Rows are segmented separately so a combining mark at the start of a
    row never merges into the previous row's last cell.
    """
    if not grid:
        return []
    cells: list[str] = []
    for row in grid.split(ROW_SEPARATOR):
        cells.extend(grapheme.graphemes(row))
    return cells


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def grid_from_character(character: str, width: int, height: int) -> str:
    """Build a *width* x *height* grid filled with *character*.

    >>> grid_from_character("a", 3, 2)
    'aaa\\naaa'
    """
    if width <= 0 or height <= 0:
        return EMPTY_GRID
    row = character * width
    return ROW_SEPARATOR.join([row] * height)


def grid_from_rows(rows: Sequence[str]) -> str:
    """Join *rows* into a grid, checking that they form a rectangle."""
    grid = ROW_SEPARATOR.join(rows)
    grid_dimensions(grid)
    return grid


def grid_from_characters(
    characters: Sequence[object], width: int, height: int
) -> str:
    """Build a grid from a flat, row-major list of cells.

    Each item is formatted with :func:`str`, so numbers can be passed in
    directly.

    Raises:
        TooFewCharacters: if ``len(characters) < width * height``.
        TooManyCharacters: if ``len(characters) > width * height``.
    """
    expected = width * height
    actual = len(characters)

    if actual < expected:
        raise TooFewCharacters(
            f"Grid of {width}x{height} needs {expected} characters, got {actual}",
            expected,
            actual,
        )
    if actual > expected:
        raise TooManyCharacters(
            f"Grid of {width}x{height} needs {expected} characters, got {actual}",
            expected,
            actual,
        )
    if expected == 0:
        return EMPTY_GRID

    return ROW_SEPARATOR.join(
        "".join(str(cell) for cell in characters[start : start + width])
        for start in range(0, actual, width)
    )
