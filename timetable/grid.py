"""
Cell grid adapter over openpyxl worksheets.

The normalization pipeline never touches openpyxl directly. It sees a sheet as
rows of typed cells, each with a single string-rendering rule:

    text cell    -> the string itself
    number cell  -> the integer-truncated value ("12.7" -> "12")
    anything else (blank, bool) -> ""

Excel stores dates and times as numbers, so they are number cells holding
their Excel serial value: a 9:00 time cell (0.375) renders as "0".

Rows are sparse: trailing blank cells are not stored, so a row "runs out of
cells" exactly where the sheet stops holding values.
"""

import datetime
import warnings
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any

import openpyxl
from openpyxl.utils.datetime import to_excel

# Suppress openpyxl warnings about styles/formatting (we only read data values)
warnings.filterwarnings('ignore', category=UserWarning, module='openpyxl')

_TEMPORAL_TYPES = (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)


class CellKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    OTHER = "other"


@dataclass(frozen=True)
class Cell:
    """One typed cell value."""

    kind: CellKind
    value: Any = None

    @property
    def is_blank(self):
        return self.kind is CellKind.OTHER and self.value is None

    def render(self):
        if self.kind is CellKind.TEXT:
            return self.value
        if self.kind is CellKind.NUMBER:
            return str(int(self.value))
        return ""


def cell_from_value(value):
    """
    Classify a raw worksheet value into a Cell.

    Examples:
        >>> cell_from_value("Mon").render()
        'Mon'
        >>> cell_from_value(204.0).render()
        '204'
        >>> cell_from_value(True).render()
        ''
        >>> cell_from_value(datetime.time(9, 0)).render()
        '0'
    """
    if isinstance(value, str):
        return Cell(CellKind.TEXT, value)
    # bool is an int subclass but is not a numeric cell
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Cell(CellKind.NUMBER, value)
    if isinstance(value, _TEMPORAL_TYPES):
        return Cell(CellKind.NUMBER, to_excel(value))
    return Cell(CellKind.OTHER, value)


def _trim_trailing_blanks(cells):
    end = len(cells)
    while end and cells[end - 1].is_blank:
        end -= 1
    return cells[:end]


class Grid:
    """
    Sheet abstraction: rows of Cells addressed by 0-based row index.

    Examples:
        >>> grid = Grid.from_rows([["Понеділок", "9:00", "Algorithms"]])
        >>> [c.render() for c in grid.row(0)]
        ['Понеділок', '9:00', 'Algorithms']
    """

    def __init__(self, rows):
        self._rows = [list(cells) for cells in rows]

    @classmethod
    def from_rows(cls, rows):
        """Build a grid from nested lists of raw values (None = blank cell)."""
        return cls(
            _trim_trailing_blanks([cell_from_value(value) for value in row])
            for row in rows
        )

    @classmethod
    def from_worksheet(cls, worksheet):
        """Build a grid from an openpyxl worksheet, starting at sheet row 1."""
        return cls.from_rows(worksheet.iter_rows(values_only=True))

    @property
    def last_row_index(self):
        """Index of the last row holding at least one cell, -1 for an empty sheet."""
        for index in range(len(self._rows) - 1, -1, -1):
            if self._rows[index]:
                return index
        return -1

    def row(self, index):
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return []

    def first_used_column(self, first_row, last_row):
        """
        Leftmost column holding a non-blank cell in rows first_row..last_row.

        Columns left of it are an empty margin of that region. Returns 0 when
        the region holds no cells.
        """
        used = [
            next(col for col, cell in enumerate(cells) if not cell.is_blank)
            for cells in (self.row(i) for i in range(first_row, last_row + 1))
            if cells
        ]
        return min(used, default=0)

    def iter_rows(self):
        """Yield (row_index, cells) pairs top to bottom."""
        for index, cells in enumerate(self._rows):
            yield index, cells

    def iter_cells(self):
        """Yield (row_index, cell) pairs in row-major order."""
        for index, cells in self.iter_rows():
            for cell in cells:
                yield index, cell


@contextmanager
def open_grid(path):
    """
    Open a workbook and yield the Grid of its first sheet.

    The workbook is closed on every exit path, including parse failures
    inside the with-block.
    """
    workbook = openpyxl.load_workbook(path, data_only=True)
    try:
        yield Grid.from_worksheet(workbook.worksheets[0])
    finally:
        workbook.close()
