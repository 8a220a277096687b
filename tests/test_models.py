"""Tests for the grid layout constants and value objects (core/models.py)."""

from __future__ import annotations

import pytest

from lukkari.core.models import (
    COLUMN_COUNT,
    DAY_COLUMNS,
    HEADER_ROW,
    ROW_COUNT,
    TIME_LABELS,
    WEEKDAYS,
    Entry,
    blank_grid,
)

EXPECTED_HEADER = [
    "",
    "Maanantai",
    "Tiistai",
    "Keskiviikko",
    "Torstai",
    "Perjantai",
    "Lauantai",
    "Sunnuntai",
]


class TestWeekdays:
    def test_day_codes_map_to_columns(self) -> None:
        assert DAY_COLUMNS == {
            "ma": 1, "ti": 2, "ke": 3, "to": 4, "pe": 5, "la": 6, "su": 7,
        }

    def test_columns_match_header(self) -> None:
        for day in WEEKDAYS:
            assert HEADER_ROW[day.column] == day.name

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            WEEKDAYS[0].code = "mo"  # type: ignore[misc]


class TestTimeLabels:
    def test_hours_eight_to_twenty(self) -> None:
        assert TIME_LABELS[0] == "8:00"
        assert TIME_LABELS[-1] == "20:00"
        assert len(TIME_LABELS) == 13

    def test_no_leading_zero(self) -> None:
        assert "9:00" in TIME_LABELS
        assert "09:00" not in TIME_LABELS


class TestBlankGrid:
    def test_shape(self) -> None:
        grid = blank_grid()
        assert ROW_COUNT == 14
        assert COLUMN_COUNT == 8
        assert len(grid) == ROW_COUNT
        assert all(len(row) == COLUMN_COUNT for row in grid)

    def test_header_row(self) -> None:
        assert blank_grid()[0] == EXPECTED_HEADER

    def test_time_column(self) -> None:
        column = [row[0] for row in blank_grid()]
        assert column == ["", *TIME_LABELS]

    def test_body_is_empty(self) -> None:
        grid = blank_grid()
        assert all(cell == "" for row in grid[1:] for cell in row[1:])

    def test_fresh_copy_each_call(self) -> None:
        first = blank_grid()
        first[1][1] = "Changed"
        assert blank_grid()[1][1] == ""


class TestEntry:
    def test_fields(self) -> None:
        entry = Entry("ma", "9:00", "Matematiikka")
        assert entry.day_code == "ma"
        assert entry.time_key == "9:00"
        assert entry.subject == "Matematiikka"

    def test_equality(self) -> None:
        assert Entry("ma", "9:00", "A") == Entry("ma", "9:00", "A")
