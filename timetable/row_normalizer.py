"""
Data row normalization.

Each data row holds up to six positional fields:

    day | time | discipline | group | weeks | auditorium

Day and time are usually merged cells spanning several rows, which read back
as blank cells below the first one. The last seen day/time is carried forward
through a CarryForward accumulator threaded from row to row, so the state
lives exactly as long as one pass over one sheet.
"""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Tuple

from .models import Discipline


class CarryForward(NamedTuple):
    """Last non-empty day/time seen in the current sheet."""

    day: Optional[str] = None
    time: Optional[str] = None


def _next_value(cells: Iterator) -> Optional[str]:
    cell = next(cells, None)
    return cell.render() if cell is not None else None


def _carried(value: Optional[str], last: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    # Returns (field value, new carried value)
    if value:
        return value, value
    return last, last


def normalize_row(cells, state: CarryForward) -> Tuple[Optional[Discipline], CarryForward]:
    """
    Turn one row of cells into a Discipline.

    Args:
        cells: The row's cells, left to right
        state: Carry-forward state left by the previous row

    Returns:
        tuple: (discipline, new_state). discipline is None when the row has no
        discipline name; the state is still advanced for such rows so a
        weekday opening a block is remembered.

    Examples:
        Rows ["Mon", "9:00", "Algo"] then ["", "", "Nets"]: the second row
        yields a Discipline with day "Mon" and time "9:00".
    """
    it = iter(cells)
    day, last_day = _carried(_next_value(it), state.day)
    time, last_time = _carried(_next_value(it), state.time)
    name = _next_value(it)
    group = _next_value(it)
    weeks = _next_value(it)
    auditorium = _next_value(it)

    new_state = CarryForward(last_day, last_time)
    if not name:
        return None, new_state

    return Discipline(
        name=name,
        day=day,
        time=time,
        group=group,
        weeks=weeks,
        auditorium=auditorium,
    ), new_state


def normalize_rows(grid, start_row: int) -> List[Discipline]:
    """
    Convert the data region of a sheet into Disciplines.

    Rows from start_row through the last populated row are processed with a
    fresh carry-forward state. Columns left of the region's first used column
    are an empty margin and are skipped, so a table may start in any column.
    A negative start_row (data-start marker not found) means there is no data
    region.
    """
    if start_row < 0:
        return []

    disciplines: List[Discipline] = []
    last_row = grid.last_row_index
    margin = grid.first_used_column(start_row, last_row)
    state = CarryForward()
    for row_index in range(start_row, last_row + 1):
        discipline, state = normalize_row(grid.row(row_index)[margin:], state)
        if discipline is not None:
            disciplines.append(discipline)

    return disciplines
