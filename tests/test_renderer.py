"""Tests for the plain table renderer (core/renderer.py)."""

from __future__ import annotations

from lukkari.core.models import blank_grid
from lukkari.core.renderer import border_line, column_widths, format_row, render_table


class TestColumnWidths:
    def test_longest_cell_per_column(self) -> None:
        assert column_widths([["a", "bb"], ["c", "d"]]) == [1, 2]

    def test_empty_cells(self) -> None:
        assert column_widths([["", ""], ["", "x"]]) == [0, 1]

    def test_blank_grid(self) -> None:
        widths = column_widths(blank_grid())
        assert widths[0] == len("20:00")
        assert widths[3] == len("Keskiviikko")


class TestPieces:
    def test_border(self) -> None:
        assert border_line([1, 2]) == "----------"

    def test_row_padding(self) -> None:
        assert format_row(["c", "d"], [1, 2]) == "| c | d  |"


class TestRenderTable:
    def test_two_by_two(self) -> None:
        assert render_table([["a", "bb"], ["c", "d"]]) == [
            "----------",
            "| a | bb |",
            "----------",
            "| c | d  |",
            "----------",
        ]

    def test_single_row(self) -> None:
        assert render_table([["x"]]) == ["-----", "| x |", "-----", "-----"]

    def test_all_lines_same_width(self) -> None:
        lines = render_table(blank_grid())
        assert len({len(line) for line in lines}) == 1

    def test_line_count(self) -> None:
        # border + header + border + 13 rows + border
        assert len(render_table(blank_grid())) == 17

    def test_header_line(self) -> None:
        header = render_table(blank_grid())[1]
        assert header.startswith("|       | Maanantai |")
        assert header.endswith("| Sunnuntai |")
