"""Tests for pi.gridprint.grid -- shape validation and grid construction."""

from __future__ import annotations

import pytest

from pi.gridprint.errors import (
    NonRectangularGrid,
    ShapeError,
    TooFewCharacters,
    TooManyCharacters,
)
from pi.gridprint.grid import (
    grid_cells,
    grid_dimensions,
    grid_from_character,
    grid_from_characters,
    grid_from_rows,
    is_rectangular,
)


# ---------------------------------------------------------------------------
# grid_dimensions
# ---------------------------------------------------------------------------


class TestGridDimensions:
    """Validate grids and measure their width and height."""

    def test_rectangular_grid(self) -> None:
        assert grid_dimensions("abcde\n12345\nvwxyz") == (5, 3)

    def test_single_row(self) -> None:
        assert grid_dimensions("abc") == (3, 1)

    def test_single_column(self) -> None:
        assert grid_dimensions("a\nb\nc\nd") == (1, 4)

    def test_empty_grid_is_zero_by_zero(self) -> None:
        assert grid_dimensions("") == (0, 0)

    def test_empty_rows_are_the_empty_grid(self) -> None:
        assert grid_dimensions("\n") == (0, 0)
        assert grid_dimensions("\n\n") == (0, 0)

    def test_ragged_rows_rejected(self) -> None:
        with pytest.raises(NonRectangularGrid):
            grid_dimensions("abc\nab\nabc")

    def test_trailing_separator_not_trimmed(self) -> None:
        with pytest.raises(NonRectangularGrid):
            grid_dimensions("ab\ncd\n")

    def test_leading_separator_not_trimmed(self) -> None:
        with pytest.raises(NonRectangularGrid):
            grid_dimensions("\nab\ncd")

    def test_error_is_a_shape_error(self) -> None:
        with pytest.raises(ShapeError) as exc_info:
            grid_dimensions("aaa\na")
        assert exc_info.value.details == {"row": 1, "expected": 3, "actual": 1}

    def test_multibyte_characters_count_once(self) -> None:
        # U+00E9 is two bytes in UTF-8 but one cell.
        assert grid_dimensions("éé\nab") == (2, 2)

    def test_combining_sequence_counts_as_one_cell(self) -> None:
        # "e" + COMBINING ACUTE ACCENT renders as a single character.
        assert grid_dimensions("e\u0301x\nab") == (2, 2)

    def test_is_rectangular(self) -> None:
        assert is_rectangular("ab\ncd") is True
        assert is_rectangular("") is True
        assert is_rectangular("ab\nc") is False


# ---------------------------------------------------------------------------
# grid_cells
# ---------------------------------------------------------------------------


class TestGridCells:
    """Flatten grids into row-major cells."""

    def test_separators_removed(self) -> None:
        assert grid_cells("ab\ncd") == ["a", "b", "c", "d"]

    def test_empty_grid_has_no_cells(self) -> None:
        assert grid_cells("") == []

    def test_combining_mark_does_not_join_previous_row(self) -> None:
        cells = grid_cells("ab\n\u0301c")
        assert len(cells) == 4
        assert cells[1] == "b"


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------


class TestGridFromCharacter:
    def test_fills_rectangle(self) -> None:
        assert grid_from_character("a", 3, 3) == "aaa\naaa\naaa"

    def test_result_validates(self) -> None:
        assert grid_dimensions(grid_from_character("#", 7, 2)) == (7, 2)

    def test_zero_size_is_empty_grid(self) -> None:
        assert grid_from_character("a", 0, 4) == ""
        assert grid_from_character("a", 4, 0) == ""


class TestGridFromRows:
    def test_joins_rows(self) -> None:
        assert grid_from_rows(["aaa", "bbb", "ccc"]) == "aaa\nbbb\nccc"

    def test_mismatched_rows_rejected(self) -> None:
        with pytest.raises(NonRectangularGrid):
            grid_from_rows(["aaa", "bb"])


class TestGridFromCharacters:
    def test_chunks_into_rows(self) -> None:
        characters = ["a", "b", "c", "d", "e", "f", "g", "h", "i"]
        assert grid_from_characters(characters, 3, 3) == "abc\ndef\nghi"

    def test_non_string_cells_are_formatted(self) -> None:
        assert grid_from_characters([1, 2, 3, 4], 2, 2) == "12\n34"

    def test_too_few_characters(self) -> None:
        with pytest.raises(TooFewCharacters) as exc_info:
            grid_from_characters(["a", "b", "c"], 2, 2)
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3

    def test_too_many_characters(self) -> None:
        with pytest.raises(TooManyCharacters) as exc_info:
            grid_from_characters(["a"] * 5, 2, 2)
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 5

    def test_no_characters_for_empty_grid(self) -> None:
        assert grid_from_characters([], 0, 0) == ""
