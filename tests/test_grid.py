"""Tests for the cell grid adapter."""

import pytest
import sys
import os
from dataclasses import FrozenInstanceError
from datetime import date, datetime, time

import openpyxl

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from timetable.grid import Cell, CellKind, Grid, cell_from_value, open_grid


class TestCellRendering:
    """Test the single string-rendering rule of cells."""

    def test_text_renders_as_is(self):
        assert cell_from_value("  Mon ").render() == "  Mon "

    def test_integer_number(self):
        assert cell_from_value(204).render() == "204"

    def test_float_is_truncated(self):
        assert cell_from_value(12.7).render() == "12"

    def test_negative_float_truncates_toward_zero(self):
        assert cell_from_value(-3.7).render() == "-3"

    def test_blank_renders_empty(self):
        assert cell_from_value(None).render() == ""

    def test_bool_is_not_a_number(self):
        cell = cell_from_value(True)
        assert cell.kind is CellKind.OTHER
        assert cell.render() == ""

    def test_time_is_a_number_cell(self):
        """Excel times are day fractions: 9:00 is 0.375."""
        cell = cell_from_value(time(9, 0))
        assert cell.kind is CellKind.NUMBER
        assert cell.render() == "0"

    def test_date_renders_excel_serial(self):
        assert cell_from_value(date(2024, 9, 2)).render() == "45537"
        assert cell_from_value(datetime(2024, 9, 2, 18, 0)).render() == "45537"

    def test_cell_is_immutable(self):
        cell = cell_from_value("Mon")
        with pytest.raises(FrozenInstanceError):
            cell.value = "Tue"

    def test_equality(self):
        assert cell_from_value("a") == Cell(CellKind.TEXT, "a")
        assert cell_from_value(1) != cell_from_value("1")


class TestGrid:
    """Test row access and iteration."""

    def test_trailing_blanks_are_dropped(self):
        grid = Grid.from_rows([["a", None, "b", None, None]])
        assert [c.render() for c in grid.row(0)] == ["a", "", "b"]

    def test_empty_text_is_kept(self):
        grid = Grid.from_rows([["a", ""]])
        assert len(grid.row(0)) == 2

    def test_row_out_of_range_is_empty(self):
        grid = Grid.from_rows([["a"]])
        assert grid.row(5) == []
        assert grid.row(-1) == []

    def test_last_row_index_skips_trailing_empty_rows(self):
        grid = Grid.from_rows([["a"], [], ["b"], [None, None], []])
        assert grid.last_row_index == 2

    def test_last_row_index_of_empty_grid(self):
        assert Grid.from_rows([]).last_row_index == -1
        assert Grid.from_rows([[None]]).last_row_index == -1

    def test_first_used_column_skips_left_margin(self):
        grid = Grid.from_rows([
            ["Факультет"],
            [None, None, "Понеділок", "9:00"],
            [None, "", None, "10:10"],
            [],
        ])
        assert grid.first_used_column(1, 3) == 1
        assert grid.first_used_column(1, 1) == 2
        assert grid.first_used_column(0, 3) == 0

    def test_first_used_column_of_empty_region(self):
        grid = Grid.from_rows([[], [None]])
        assert grid.first_used_column(0, 1) == 0

    def test_iter_cells_is_row_major(self):
        grid = Grid.from_rows([["a", "b"], [], ["c"]])
        assert [(i, c.render()) for i, c in grid.iter_cells()] == [(0, "a"), (0, "b"), (2, "c")]


class TestOpenGrid:
    """Test reading real workbooks."""

    def test_reads_first_sheet(self, tmp_path):
        path = tmp_path / "sheet.xlsx"
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.cell(row=1, column=1, value="Факультет Інформатики")
        ws.cell(row=3, column=2, value=12)
        wb.create_sheet("Other").cell(row=1, column=1, value="ignored")
        wb.save(path)

        with open_grid(path) as grid:
            assert grid.row(0)[0].render() == "Факультет Інформатики"
            assert grid.row(1) == []
            assert [c.render() for c in grid.row(2)] == ["", "12"]
            assert grid.last_row_index == 2

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            with open_grid(tmp_path / "missing.xlsx"):
                pass
