"""Tests for data row normalization and day/time carry-forward."""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from timetable.grid import Grid
from timetable.models import Discipline
from timetable.row_normalizer import CarryForward, normalize_row, normalize_rows


def _row(*values):
    return Grid.from_rows([list(values)]).row(0)


class TestNormalizeRow:
    """Test the single-row step function."""

    def test_six_fields_in_order(self):
        discipline, _ = normalize_row(_row("Mon", "9:00", "Algorithms", 12, "1-15", 204), CarryForward())
        assert discipline == Discipline(
            name="Algorithms", day="Mon", time="9:00", group="12", weeks="1-15", auditorium="204"
        )

    def test_empty_day_and_time_are_carried(self):
        _, state = normalize_row(_row("Mon", "9:00", "Algorithms"), CarryForward())
        discipline, _ = normalize_row(_row("", "", "Networks", "13"), state)
        assert discipline.day == "Mon"
        assert discipline.time == "9:00"

    def test_empty_row_keeps_state(self):
        discipline, state = normalize_row(_row(), CarryForward("Mon", "9:00"))
        assert discipline is None
        assert state == CarryForward("Mon", "9:00")

    def test_new_values_replace_carried_ones(self):
        discipline, state = normalize_row(_row("Tue", "", "Networks"), CarryForward("Mon", "9:00"))
        assert (discipline.day, discipline.time) == ("Tue", "9:00")
        assert state == CarryForward("Tue", "9:00")

    def test_blank_name_drops_row(self):
        discipline, _ = normalize_row(_row("Mon", "9:00", "", "12"), CarryForward())
        assert discipline is None

    def test_exhausted_name_drops_row(self):
        discipline, _ = normalize_row(_row("Mon", "9:00"), CarryForward())
        assert discipline is None

    def test_dropped_row_still_advances_state(self):
        _, state = normalize_row(_row("Понеділок"), CarryForward())
        assert state == CarryForward("Понеділок", None)

    def test_exhausted_fields_are_none(self):
        discipline, _ = normalize_row(_row("Mon", "9:00", "Algorithms"), CarryForward())
        assert discipline.group is None
        assert discipline.weeks is None
        assert discipline.auditorium is None

    def test_no_context_leaves_day_and_time_none(self):
        discipline, _ = normalize_row(_row("", "", "Algorithms"), CarryForward())
        assert discipline.day is None
        assert discipline.time is None


class TestNormalizeRows:
    """Test folding over a sheet's data region."""

    def test_starts_at_start_row_inclusive(self):
        grid = Grid.from_rows([
            ["Факультет Інформатики"],
            ["Понеділок", "8:30", "Algorithms", "12", "1-15", "204"],
            ["", "10:10", "Networks", "13", "1-8", "305"],
        ])
        disciplines = normalize_rows(grid, 1)
        assert [d.name for d in disciplines] == ["Algorithms", "Networks"]
        assert disciplines[1].day == "Понеділок"
        assert disciplines[1].time == "10:10"

    def test_reads_through_last_row_and_skips_blank_rows(self):
        grid = Grid.from_rows([
            ["Mon", "9:00", "Algorithms"],
            [],
            ["", "", ""],
            ["", "", "Databases"],
        ])
        disciplines = normalize_rows(grid, 0)
        assert [d.name for d in disciplines] == ["Algorithms", "Databases"]
        assert disciplines[1].day == "Mon"

    def test_missing_start_row_gives_no_disciplines(self):
        grid = Grid.from_rows([["Mon", "9:00", "Algorithms"]])
        assert normalize_rows(grid, -1) == []

    def test_state_does_not_leak_between_calls(self):
        first = Grid.from_rows([["Mon", "9:00", "Algorithms"]])
        second = Grid.from_rows([["", "", "Databases"]])
        normalize_rows(first, 0)
        (discipline,) = normalize_rows(second, 0)
        assert discipline.day is None
        assert discipline.time is None

    def test_table_may_start_right_of_column_a(self):
        """An empty left margin does not shift the six fields."""
        grid = Grid.from_rows([
            ["Факультет Інформатики"],
            [None, "Понеділок", "9:00", "Algorithms", 12, "1-15", 204],
            [None, None, None, "Networks", 13],
        ])
        first, second = normalize_rows(grid, 1)
        assert first == Discipline(
            name="Algorithms", day="Понеділок", time="9:00", group="12", weeks="1-15", auditorium="204"
        )
        assert (second.name, second.day, second.time, second.group) == ("Networks", "Понеділок", "9:00", "13")
