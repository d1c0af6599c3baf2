"""
Main orchestration: timetable workbooks -> Department records -> JSON.

This module coordinates the whole pipeline for each workbook:
    1. Open the workbook and adapt its first sheet to a Grid
    2. Classify the dialect from the dean line
    3. Extract faculty and speciality names, locate the data start row
    4. Normalize data rows into Disciplines
    5. Assemble the Department (IPZ: one speciality gets everything,
       FEN: disciplines are routed by their speciality tags)

Functions:
    process_all: Main entry point, one Department per workbook path
    collect_workbooks: Expand directories into workbook paths
    dump_schedule / write_schedule: JSON serialization of the result
"""

import json
import re
from pathlib import Path

from .config import (
    DATA_START_MARKER,
    FACULTY_MARKER,
    FEN_SPECIALITY_PATTERN,
    OUTPUT_FILE,
    SPECIALITY_MARKER,
    WORKBOOK_PATTERNS,
)
from .dialects import Dialect, classify
from .grid import open_grid
from .marker_scanner import find_all_cells, find_first_row, find_label
from .models import Department, Speciality
from .row_normalizer import normalize_rows
from .speciality_router import route_disciplines

_fen_speciality_re = re.compile(FEN_SPECIALITY_PATTERN)


class ScheduleProcessingError(RuntimeError):
    """A workbook could not be opened or processed; the batch is aborted."""

    def __init__(self, path, cause):
        super().__init__(f"An error occurred while processing workbook '{path}': {cause}")
        self.path = path


def extract_faculty(grid):
    return find_label(grid, FACULTY_MARKER, "_")


def extract_speciality_name(grid):
    """
    Extract the single speciality name of an IPZ workbook.

    Examples:
        'Спеціальність "122"' -> '122'
    """
    label = find_label(grid, SPECIALITY_MARKER, '"')
    return label[len(SPECIALITY_MARKER):].strip()


def extract_fen_speciality_names(grid):
    """
    Extract every «quoted» speciality name from the speciality cells of a FEN
    workbook, in sheet order.

    Examples:
        "Спеціальність «122 Комп. науки», «125 Кібербезпека»"
            -> ['122 Комп. науки', '125 Кібербезпека']
    """
    names = []
    for text in find_all_cells(grid, SPECIALITY_MARKER):
        names.extend(match.group(1) for match in _fen_speciality_re.finditer(text))
    return names


def _warn_missing(label, value, source):
    if not value:
        print(f"  Warning: {label} not found in '{source}'")


def build_ipz_department(grid, source="<grid>"):
    """One speciality receiving every discipline, unfiltered."""
    faculty = extract_faculty(grid)
    speciality_name = extract_speciality_name(grid)
    first_row = find_first_row(grid, DATA_START_MARKER)

    _warn_missing("Faculty label", faculty, source)
    _warn_missing("Speciality label", speciality_name, source)
    if first_row == -1:
        print(f"  Warning: Data start row '{DATA_START_MARKER}' not found in '{source}'")

    speciality = Speciality(speciality_name, normalize_rows(grid, first_row))
    return Department(faculty, [speciality])


def build_fen_department(grid, source="<grid>"):
    """
    One speciality per «quoted» name, disciplines routed by their tags.

    A sheet without any «quoted» name yields a Department with no
    specialities; a warning is printed and every discipline is dropped.
    """
    faculty = extract_faculty(grid)
    speciality_names = extract_fen_speciality_names(grid)
    first_row = find_first_row(grid, DATA_START_MARKER)

    _warn_missing("Faculty label", faculty, source)
    _warn_missing("Speciality names", speciality_names, source)
    if first_row == -1:
        print(f"  Warning: Data start row '{DATA_START_MARKER}' not found in '{source}'")

    department = Department(faculty, [Speciality(name) for name in speciality_names])
    return route_disciplines(department, normalize_rows(grid, first_row))


def build_department(grid, source="<grid>", dean_fragment=None):
    """
    Build the Department of one sheet, dispatching on its dialect.

    Args:
        grid: Grid of the workbook's first sheet
        source: Name used in warning messages
        dean_fragment: FEN dean surname fragment (config default if None)

    Returns:
        Department
    """
    dialect = classify(grid, dean_fragment)
    print(f"  Dialect: {dialect.name}")
    if dialect is Dialect.FEN:
        return build_fen_department(grid, source)
    return build_ipz_department(grid, source)


def process_workbook(path, dean_fragment=None):
    """
    Open one workbook and build its Department.

    Raises:
        ScheduleProcessingError: If the workbook cannot be opened or processed
    """
    try:
        with open_grid(path) as grid:
            return build_department(grid, str(path), dean_fragment)
    except Exception as e:
        raise ScheduleProcessingError(path, e) from e


def process_all(paths, dean_fragment=None):
    """
    Process workbooks into Departments, one per path, in input order.

    Each workbook is processed independently with its own carry-forward
    state. The first failing workbook aborts the whole batch.

    Args:
        paths: Iterable of workbook paths
        dean_fragment: FEN dean surname fragment (config default if None)

    Returns:
        list: Department records
    """
    departments = []
    for path in paths:
        print(f"Processing workbook: {path}")
        department = process_workbook(path, dean_fragment)
        total = sum(len(s.disciplines) for s in department.specialities)
        print(f"  Loaded {len(department.specialities)} specialities, {total} discipline entries")
        departments.append(department)
    return departments


def collect_workbooks(paths, patterns=None):
    """
    Expand directory arguments into the workbooks they contain.

    Files are kept as given. Directories contribute their files matching the
    workbook patterns, sorted by name, without Office lock files (~$*).
    """
    if patterns is None:
        patterns = WORKBOOK_PATTERNS

    workbooks = []
    for raw_path in paths:
        path = Path(raw_path)
        if not path.is_dir():
            workbooks.append(path)
            continue

        found = set()
        for pattern in patterns:
            found.update(p for p in path.glob(pattern) if not p.name.startswith("~$"))
        workbooks.extend(sorted(found))

    return workbooks


def dump_schedule(departments):
    """Serialize Departments to pretty-printed JSON text (non-ASCII kept as is)."""
    return json.dumps([d.to_dict() for d in departments], ensure_ascii=False, indent=2)


def write_schedule(departments, output_path=OUTPUT_FILE):
    """Write the JSON document in UTF-8. Serializes fully before touching the file."""
    text = dump_schedule(departments)
    output_path = Path(output_path)
    output_path.write_text(text, encoding="utf-8")
    return output_path
