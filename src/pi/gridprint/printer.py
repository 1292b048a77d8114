"""Dynamic grid printer with differential rendering.

The :class:`Printer` remembers the last grid it drew, where it drew it, and
the terminal size at the time.  Each :meth:`Printer.print` call then writes
only the cells that changed, falling back to a full redraw when the grid
dimensions, the terminal size, or the printing position changed.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from pi.gridprint.diff import pixel_difference
from pi.gridprint.errors import (
    GridDimensionsNotDefined,
    GridLargerThanTerminal,
    MissingPrintingPosition,
    OriginNotDefined,
)
from pi.gridprint.escape import (
    HIDE_CURSOR,
    SHOW_CURSOR,
    serialize_diff,
    serialize_full,
)
from pi.gridprint.grid import grid_dimensions, grid_from_character
from pi.gridprint.position import (
    PrintingPosition,
    XPosition,
    YPosition,
    resolve_origin,
)
from pi.gridprint.terminal import ProcessTerminal

if TYPE_CHECKING:
    from pi.gridprint.terminal import Terminal

__all__ = ["Printer"]

logger = logging.getLogger(__name__)


class Printer:
    """Draws grids to a terminal, rewriting only what changed.

    * With a :class:`PrintingPosition` the grid is anchored to the screen
      and re-anchored whenever its size or the terminal size changes.
    * Without one, the cursor position at the first print marks the grid's
      bottom-right corner and the grid stays at that spot afterwards.

    A printer is not thread-safe; use one instance per thread.
    """

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def __init__(
        self,
        terminal: Terminal | None = None,
        position: PrintingPosition | None = None,
        hide_cursor: bool | None = None,
    ) -> None:
        if terminal is None:
            terminal = ProcessTerminal()
        self.terminal: Terminal = terminal

        self._position: PrintingPosition | None = position

        # Hide the hardware cursor while a frame is painted
        self._hide_cursor: bool = (
            hide_cursor
            if hide_cursor is not None
            else os.environ.get("PI_GRIDPRINT_HIDE_CURSOR") == "1"
        )

        # Previous render state (for differential updates)
        self._previous_grid: str | None = None
        self._dimensions: tuple[int, int] | None = None
        self._terminal_dimensions: tuple[int, int] | None = None
        self._origin: tuple[int, int] | None = None
        self._placement_invalidated: bool = False

        # Metrics
        self._full_redraw_count: int = 0

    # ------------------------------------------------------------------
    # Properties / accessors
    # ------------------------------------------------------------------

    @property
    def full_redraws(self) -> int:
        """Number of full (non-differential) redraws performed."""
        return self._full_redraw_count

    @property
    def position(self) -> PrintingPosition | None:
        return self._position

    @property
    def previous_grid(self) -> str | None:
        """The last grid drawn, or ``None`` before the first print."""
        return self._previous_grid

    def grid_dimensions(self) -> tuple[int, int]:
        """Return the stored ``(width, height)`` of the printed grid.

        Raises:
            GridDimensionsNotDefined: if nothing has been printed yet.
        """
        if self._dimensions is None:
            raise GridDimensionsNotDefined("No grid has been printed yet")
        return self._dimensions

    def origin(self) -> tuple[int, int]:
        """Return the stored 1-based ``(x, y)`` of the printed grid.

        Raises:
            OriginNotDefined: if nothing has been printed yet.
        """
        if self._origin is None:
            raise OriginNotDefined("No origin has been resolved yet")
        return self._origin

    # ------------------------------------------------------------------
    # Printing position
    # ------------------------------------------------------------------

    def replace_position(self, position: PrintingPosition) -> None:
        """Use *position* from the next print on, forcing a full redraw."""
        self._position = position
        self._placement_invalidated = True

    def replace_x_position(self, x: XPosition) -> None:
        """Replace the x anchor of the current printing position.

        Raises:
            MissingPrintingPosition: if no printing position is set.
        """
        if self._position is None:
            raise MissingPrintingPosition("No printing position to update")
        self._position = self._position.with_x(x)
        self._placement_invalidated = True

    def replace_y_position(self, y: YPosition) -> None:
        """Replace the y anchor of the current printing position.

        Raises:
            MissingPrintingPosition: if no printing position is set.
        """
        if self._position is None:
            raise MissingPrintingPosition("No printing position to update")
        self._position = self._position.with_y(y)
        self._placement_invalidated = True

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Forget the printed grid and the printing position."""
        self.reset_retaining_position()
        self._position = None

    def reset_retaining_position(self) -> None:
        """Forget the printed grid but keep the printing position."""
        self._previous_grid = None
        self._dimensions = None
        self._terminal_dimensions = None
        self._origin = None
        self._placement_invalidated = False

    def reset_with_position(self, position: PrintingPosition) -> None:
        """Forget the printed grid and use *position* from now on."""
        self.reset_retaining_position()
        self._position = position

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print(self, grid: str) -> None:
        """Draw *grid*, writing only the cells that changed since last time.

        Raises:
            NonRectangularGrid: if *grid* is not a rectangle.
            GeometryError: if the terminal size or cursor position cannot
                be read.
            GridLargerThanTerminal: if *grid* does not fit the terminal.
            OutputError: if writing or flushing fails.  A flush failure is
                raised after the new grid has been recorded.

        Nothing is written and the printer state is unchanged when any
        error other than a flush failure is raised.
        """
        dimensions = grid_dimensions(grid)
        terminal_dimensions = self.terminal.terminal_size()

        width, height = dimensions
        term_width, term_height = terminal_dimensions
        if width > term_width or height > term_height:
            raise GridLargerThanTerminal(
                f"Grid of {width}x{height} does not fit terminal of "
                f"{term_width}x{term_height}",
                {"grid": dimensions, "terminal": terminal_dimensions},
            )

        invalidated = (
            self._placement_invalidated
            or dimensions != self._dimensions
            or terminal_dimensions != self._terminal_dimensions
        )

        if self._previous_grid is None or invalidated:
            origin = self._resolve_new_origin(dimensions, terminal_dimensions)
            output = self._clear_previous_rectangle(terminal_dimensions)
            output += serialize_full(grid, origin)
            full_redraw = True
        else:
            origin = self._origin
            assert origin is not None
            runs = pixel_difference(self._previous_grid, grid, width)
            output = serialize_diff(runs, origin, width)
            full_redraw = False

        logger.debug(
            "Printing %dx%d grid at %s (%s, %d chars)",
            width,
            height,
            origin,
            "full" if full_redraw else "diff",
            len(output),
        )

        self._write(output)

        if full_redraw:
            self._full_redraw_count += 1
        self._previous_grid = grid
        self._dimensions = dimensions
        self._terminal_dimensions = terminal_dimensions
        self._origin = origin
        self._placement_invalidated = False

        self.terminal.flush()

    def clear_grid(self) -> None:
        """Overwrite the printed grid with whitespace.

        The blank grid becomes the previous grid, so the next print redraws
        every non-blank cell.

        When the terminal has shrunk so that the stored rectangle is no
        longer on screen, nothing is written and the next print performs a
        full redraw.

        Raises:
            GridDimensionsNotDefined: if nothing has been printed yet.
            OriginNotDefined: if no origin has been resolved yet.
            TerminalSizeError: if the terminal size cannot be read.
        """
        dimensions = self.grid_dimensions()
        origin = self.origin()
        terminal_dimensions = self.terminal.terminal_size()

        blank = grid_from_character(" ", *dimensions)
        if _fits(origin, dimensions, terminal_dimensions):
            self._write(serialize_full(blank, origin))
        else:
            logger.debug("Grid at %s is off screen; not clearing", origin)
            self._placement_invalidated = True
        self._previous_grid = blank
        self.terminal.flush()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve_new_origin(
        self,
        dimensions: tuple[int, int],
        terminal_dimensions: tuple[int, int],
    ) -> tuple[int, int]:
        """Resolve the origin for a full redraw.

        Cursor-derived placement keeps the stored origin while the grid
        still fits there, so the grid does not chase the cursor it leaves
        behind after each frame.
        """
        if self._position is None and self._origin is not None:
            if _fits(self._origin, dimensions, terminal_dimensions):
                return self._origin

        return resolve_origin(
            dimensions,
            terminal_dimensions,
            self._position,
            self.terminal.cursor_position,
        )

    def _clear_previous_rectangle(self, terminal_dimensions: tuple[int, int]) -> str:
        """Return the output blanking the previously drawn grid.

        Returns ``""`` when nothing was drawn yet or the old rectangle no
        longer lies within the terminal.
        """
        if self._dimensions is None or self._origin is None:
            return ""

        if not _fits(self._origin, self._dimensions, terminal_dimensions):
            logger.debug("Previous grid at %s is off screen; not clearing", self._origin)
            return ""

        blank = grid_from_character(" ", *self._dimensions)
        return serialize_full(blank, self._origin)

    def _write(self, output: str) -> None:
        if not output:
            return
        if self._hide_cursor:
            output = HIDE_CURSOR + output + SHOW_CURSOR
        self.terminal.write(output)


def _fits(
    origin: tuple[int, int],
    dimensions: tuple[int, int],
    terminal_dimensions: tuple[int, int],
) -> bool:
    """Return ``True`` if a grid of *dimensions* at *origin* is on screen."""
    x, y = origin
    width, height = dimensions
    term_width, term_height = terminal_dimensions
    return x + width - 1 <= term_width and y + height - 1 <= term_height
