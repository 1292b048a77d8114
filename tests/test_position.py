"""Tests for pi.gridprint.position -- anchors and origin resolution."""

from __future__ import annotations

import pytest

from pi.gridprint.errors import CursorPositionError
from pi.gridprint.position import (
    PrintingPosition,
    origin_from_cursor,
    resolve_origin,
)

GRID = (5, 3)
TERMINAL = (80, 24)


def _no_cursor() -> tuple[int, int]:
    raise AssertionError("cursor must not be queried when a position is set")


def _origin(position: PrintingPosition, grid=GRID, terminal=TERMINAL) -> tuple[int, int]:
    return resolve_origin(grid, terminal, position, _no_cursor)


# ---------------------------------------------------------------------------
# PrintingPosition
# ---------------------------------------------------------------------------


class TestPrintingPosition:
    def test_defaults_to_left_bottom(self) -> None:
        position = PrintingPosition()
        assert position.x == "left"
        assert position.y == "bottom"

    def test_with_x_keeps_y(self) -> None:
        position = PrintingPosition("left", "top").with_x("right")
        assert position == PrintingPosition("right", "top")

    def test_with_y_keeps_x(self) -> None:
        position = PrintingPosition("middle", "top").with_y(7)
        assert position == PrintingPosition("middle", 7)

    def test_invalid_anchor_rejected(self) -> None:
        with pytest.raises(ValueError):
            PrintingPosition("top", "top")  # type: ignore[arg-type]

    def test_bool_is_not_a_custom_position(self) -> None:
        with pytest.raises(ValueError):
            PrintingPosition(True, "top")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Named anchors
# ---------------------------------------------------------------------------


class TestNamedAnchors:
    """The nine anchor combinations for a 5x3 grid on an 80x24 terminal."""

    def test_left_top(self) -> None:
        assert _origin(PrintingPosition("left", "top")) == (1, 1)

    def test_middle_middle_uses_floor_division(self) -> None:
        # 80 // 2 - 5 // 2 = 38, 24 // 2 - 3 // 2 = 11
        assert _origin(PrintingPosition("middle", "middle")) == (38, 11)

    def test_right_bottom(self) -> None:
        assert _origin(PrintingPosition("right", "bottom")) == (76, 22)

    def test_right_top(self) -> None:
        assert _origin(PrintingPosition("right", "top")) == (76, 1)

    def test_left_bottom(self) -> None:
        assert _origin(PrintingPosition("left", "bottom")) == (1, 22)

    def test_middle_on_odd_terminal(self) -> None:
        assert _origin(PrintingPosition("middle", "top"), (4, 1), (81, 24)) == (38, 1)

    def test_right_when_grid_fills_terminal(self) -> None:
        assert _origin(PrintingPosition("right", "bottom"), (80, 24)) == (1, 1)

    def test_middle_never_below_one(self) -> None:
        assert _origin(PrintingPosition("middle", "middle"), (80, 24)) == (1, 1)

    def test_right_never_below_one_when_grid_is_larger(self) -> None:
        assert _origin(PrintingPosition("right", "bottom"), (100, 50)) == (1, 1)


# ---------------------------------------------------------------------------
# Custom positions
# ---------------------------------------------------------------------------


class TestCustomPositions:
    def test_custom_within_bounds(self) -> None:
        assert _origin(PrintingPosition(10, 4)) == (10, 4)

    def test_custom_below_one_clamped(self) -> None:
        assert _origin(PrintingPosition(0, -3)) == (1, 1)

    def test_overflow_shifts_back(self) -> None:
        # 78 + 5 overflows 80 by 3
        assert _origin(PrintingPosition(78, "top")) == (75, 1)

    def test_grid_as_wide_as_terminal_shifted_fully_left(self) -> None:
        assert _origin(PrintingPosition(5, "top"), (10, 1), (10, 24)) == (1, 1)

    def test_overflow_on_y_axis(self) -> None:
        assert _origin(PrintingPosition("left", 23)) == (1, 21)


# ---------------------------------------------------------------------------
# Cursor-derived placement
# ---------------------------------------------------------------------------


class TestCursorPlacement:
    def test_cursor_marks_bottom_right(self) -> None:
        origin = resolve_origin(GRID, TERMINAL, None, lambda: (40, 20))
        assert origin == (35, 17)

    def test_clamped_to_top_left(self) -> None:
        assert origin_from_cursor(GRID, (2, 1)) == (1, 1)

    def test_cursor_error_propagates(self) -> None:
        def failing() -> tuple[int, int]:
            raise CursorPositionError("no tty")

        with pytest.raises(CursorPositionError):
            resolve_origin(GRID, TERMINAL, None, failing)
