"""pi-gridprint: flicker-free terminal grid printing with differential updates."""

# Differences between grids
from pi.gridprint.diff import PixelDifference, pixel_difference

# Errors
from pi.gridprint.errors import (
    CursorPositionError,
    GeometryError,
    GridDimensionsNotDefined,
    GridLargerThanTerminal,
    MissingPrintingPosition,
    NonRectangularGrid,
    OriginNotDefined,
    OutputError,
    PlacementError,
    PolicyError,
    PrintingError,
    ShapeError,
    TerminalSizeError,
    TooFewCharacters,
    TooManyCharacters,
)

# Escape sequences
from pi.gridprint.escape import cursor_to, serialize_diff, serialize_full

# Grid helpers
from pi.gridprint.grid import (
    grid_cells,
    grid_dimensions,
    grid_from_character,
    grid_from_characters,
    grid_from_rows,
    is_rectangular,
)

# Printing positions
from pi.gridprint.position import (
    PrintingPosition,
    XPosition,
    YPosition,
    resolve_origin,
)

# Printer
from pi.gridprint.printer import Printer

# Terminal interface and implementations
from pi.gridprint.terminal import ProcessTerminal, Terminal

__all__ = [
    # Diff
    "PixelDifference",
    "pixel_difference",
    # Errors
    "CursorPositionError",
    "GeometryError",
    "GridDimensionsNotDefined",
    "GridLargerThanTerminal",
    "MissingPrintingPosition",
    "NonRectangularGrid",
    "OriginNotDefined",
    "OutputError",
    "PlacementError",
    "PolicyError",
    "PrintingError",
    "ShapeError",
    "TerminalSizeError",
    "TooFewCharacters",
    "TooManyCharacters",
    # Escape
    "cursor_to",
    "serialize_diff",
    "serialize_full",
    # Grid
    "grid_cells",
    "grid_dimensions",
    "grid_from_character",
    "grid_from_characters",
    "grid_from_rows",
    "is_rectangular",
    # Position
    "PrintingPosition",
    "XPosition",
    "YPosition",
    "resolve_origin",
    # Printer
    "Printer",
    # Terminal
    "ProcessTerminal",
    "Terminal",
]
