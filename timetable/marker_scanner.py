"""
Marker scanning over an unstructured cell grid.

Timetable sheets carry no fixed layout for their header fields. Labels such as
the faculty name or the dean line live somewhere in the top rows, and the data
region begins at the row holding the first weekday:

    Row 1:  ...  Факультет Інформатики  ...
    Row 2:  ...  Спеціальність "122"    ...
    Row 5:  Понеділок | 9:00 | Algorithms | 12 | 1-15 | 204   <- DATA START

Functions:
    find_label: Text of the first cell containing a marker, from the marker on
    find_all_cells: Texts of every cell containing a marker
    find_first_row: Row index of the first cell equal to a marker
"""


def _strip(text, strip_chars):
    for char in strip_chars:
        text = text.replace(char, "")
    return text


def find_label(grid, marker, strip_chars=""):
    """
    Extract a labeled field from the first cell whose text contains the marker.

    Cells are scanned in row-major order. The returned text starts at the
    marker's position and runs to the end of the cell.

    Args:
        grid: Grid to scan
        marker: Substring to look for
        strip_chars: Characters removed from the result (e.g. "_" for the
            underscore fill of signature lines)

    Returns:
        str: Label text, or "" if no cell contains the marker

    Examples:
        A cell reading "Затверджую. Декан факультету ____ І. Петренко" with
        marker "Декан факультету" and strip_chars "_" gives
        "Декан факультету  І. Петренко".
    """
    for _, cell in grid.iter_cells():
        text = cell.render()
        position = text.find(marker)
        if position != -1:
            return _strip(text[position:], strip_chars)
    return ""


def find_all_cells(grid, marker):
    """Return the text of every cell containing the marker, row-major."""
    return [
        cell.render()
        for _, cell in grid.iter_cells()
        if marker in cell.render()
    ]


def find_first_row(grid, marker):
    """
    Find the row whose cell text equals the marker after trimming.

    Unlike find_label this is an exact match, so "Понеділок" does not match a
    cell reading "Понеділок - Пʼятниця".

    Returns:
        int: 0-based row index, or -1 if not found
    """
    for row_index, cell in grid.iter_cells():
        if cell.render().strip() == marker:
            return row_index
    return -1
