"""Printing positions and origin resolution.

A :class:`PrintingPosition` pins a grid to one of nine anchors on the
screen, or to a custom 1-based column/row.  Without a position the grid is
placed relative to wherever the terminal cursor is when it is first
printed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Literal, Union

__all__ = [
    "XPosition",
    "YPosition",
    "PrintingPosition",
    "resolve_origin",
    "origin_from_cursor",
    "origin_from_position",
]

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

# str  ->  named anchor
# int  ->  custom 1-based column/row
XPosition = Union[Literal["left", "middle", "right"], int]
YPosition = Union[Literal["top", "middle", "bottom"], int]

_X_ANCHORS = ("left", "middle", "right")
_Y_ANCHORS = ("top", "middle", "bottom")


@dataclass(frozen=True)
class PrintingPosition:
    """Where on the terminal a grid is printed."""

    x: XPosition = "left"
    y: YPosition = "bottom"

    def __post_init__(self) -> None:
        _check_axis(self.x, _X_ANCHORS, "x")
        _check_axis(self.y, _Y_ANCHORS, "y")

    def with_x(self, x: XPosition) -> PrintingPosition:
        return replace(self, x=x)

    def with_y(self, y: YPosition) -> PrintingPosition:
        return replace(self, y=y)


def _check_axis(value: object, anchors: tuple[str, ...], axis: str) -> None:
    # bool is an int subclass but never a meaningful column
    if isinstance(value, bool) or not (isinstance(value, int) or value in anchors):
        raise ValueError(
            f"Invalid {axis} position {value!r}; expected one of {anchors} or an int"
        )


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve_origin(
    grid_dimensions: tuple[int, int],
    terminal_dimensions: tuple[int, int],
    position: PrintingPosition | None,
    cursor_position: Callable[[], tuple[int, int]],
) -> tuple[int, int]:
    """Compute the 1-based ``(x, y)`` of the grid's top-left cell.

    *cursor_position* is only called when *position* is ``None``; any
    error it raises propagates unchanged.  The caller guarantees that the
    grid fits inside the terminal.
    """
    if position is None:
        return origin_from_cursor(grid_dimensions, cursor_position())
    return origin_from_position(grid_dimensions, terminal_dimensions, position)


def origin_from_cursor(
    grid_dimensions: tuple[int, int],
    cursor: tuple[int, int],
) -> tuple[int, int]:
    """Place the grid above and to the left of *cursor*.

    The cursor marks the grid's bottom-right corner; the result is clamped
    to the top-left edge of the terminal.
    """
    grid_width, grid_height = grid_dimensions
    cursor_x, cursor_y = cursor
    return max(1, cursor_x - grid_width), max(1, cursor_y - grid_height)


def origin_from_position(
    grid_dimensions: tuple[int, int],
    terminal_dimensions: tuple[int, int],
    position: PrintingPosition,
) -> tuple[int, int]:
    grid_width, grid_height = grid_dimensions
    term_width, term_height = terminal_dimensions
    return (
        _resolve_axis(position.x, "left", "right", term_width, grid_width),
        _resolve_axis(position.y, "top", "bottom", term_height, grid_height),
    )


def _resolve_axis(
    anchor: XPosition | YPosition,
    start: str,
    end: str,
    term_length: int,
    grid_length: int,
) -> int:
    """Resolve one axis of a printing position to a 1-based coordinate."""
    if isinstance(anchor, int):
        coordinate = max(anchor, 1)
        overflow = coordinate + grid_length - term_length
        if overflow > 0:
            coordinate -= overflow
        return max(coordinate, 1)
    if anchor == start:
        return 1
    if anchor == end:
        return max(1, term_length - grid_length + 1)
    # middle
    return max(1, term_length // 2 - grid_length // 2)
