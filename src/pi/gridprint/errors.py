"""Exception hierarchy for grid printing.

Every error raised by :mod:`pi.gridprint` derives from
:class:`PrintingError`.  The four middle classes group failures by kind so
callers can catch, for example, every :class:`GeometryError` and retry the
print themselves.
"""

from __future__ import annotations

from typing import Any


class PrintingError(Exception):
    """Base exception for all grid printing failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize the error.

        Args:
            message: Error description
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.details = details or {}


# ---------------------------------------------------------------------------
# Shape errors
# ---------------------------------------------------------------------------


class ShapeError(PrintingError):
    """The grid text or cell list does not describe a rectangle."""


class NonRectangularGrid(ShapeError):
    """Rows of the grid have differing cell counts."""


class _CharacterCountError(ShapeError):
    def __init__(self, message: str, expected: int, actual: int) -> None:
        super().__init__(message, {"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual


class TooManyCharacters(_CharacterCountError):
    """More cells were supplied than ``width * height``."""


class TooFewCharacters(_CharacterCountError):
    """Fewer cells were supplied than ``width * height``."""


# ---------------------------------------------------------------------------
# Geometry errors
# ---------------------------------------------------------------------------


class GeometryError(PrintingError):
    """The terminal could not report its size or cursor position."""


class TerminalSizeError(GeometryError):
    """Reading the terminal dimensions failed."""


class CursorPositionError(GeometryError):
    """Reading the cursor position failed."""


# ---------------------------------------------------------------------------
# Placement errors
# ---------------------------------------------------------------------------


class PlacementError(PrintingError):
    """The grid cannot be placed on the terminal."""


class GridLargerThanTerminal(PlacementError):
    """The grid is wider or taller than the terminal."""


class GridDimensionsNotDefined(PlacementError):
    """No grid dimensions are stored yet."""


class OriginNotDefined(PlacementError):
    """No origin is stored yet."""


# ---------------------------------------------------------------------------
# Policy / output errors
# ---------------------------------------------------------------------------


class PolicyError(PrintingError):
    """The operation needs a printing position that is not configured."""


class MissingPrintingPosition(PolicyError):
    """The printer has no :class:`~pi.gridprint.position.PrintingPosition`."""


class OutputError(PrintingError):
    """Writing to or flushing the terminal failed."""
