"""
Timetable spreadsheet normalizer.

This package turns university timetable workbooks into a hierarchical record
tree (Department -> Speciality -> Discipline) serialized as one JSON document.

Architecture:
    Excel → grid → marker_scanner/dialects → row_normalizer
          → speciality_router (FEN only) → excel_loader → JSON

Modules:
    config: Marker strings, patterns and labels
    grid: openpyxl adapter exposing a sheet as rows of typed cells
    marker_scanner: Locating labeled fields and the data start row
    dialects: IPZ/FEN detection from the dean line
    row_normalizer: Data rows → Disciplines with day/time carry-forward
    speciality_router: Tag parsing, FEN discipline filter and routing
    models: Department/Speciality/Discipline records
    excel_loader: Main orchestration and JSON output
"""

from .excel_loader import ScheduleProcessingError, process_all, write_schedule
from .models import Department, Discipline, Speciality

__all__ = [
    'process_all',
    'write_schedule',
    'ScheduleProcessingError',
    'Department',
    'Speciality',
    'Discipline',
]
