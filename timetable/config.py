"""
Configuration constants for timetable spreadsheet normalization.

This module centralizes every marker string and pattern used to locate fields
inside a timetable sheet and to tell the two layout dialects apart, so the
detection rules can be adjusted without touching core logic.
"""

# Label markers searched for inside sheet cells
FACULTY_MARKER = "Факультет"
SPECIALITY_MARKER = "Спеціальність"
DEAN_MARKER = "Декан факультету"

# A cell whose trimmed text equals this marker opens the data region
DATA_START_MARKER = "Понеділок"

# Dean surname fragment that switches a workbook to the FEN dialect
FEN_DEAN_FRAGMENT = "Глущенко"

# FEN speciality names are quoted with angled quotes: «122 Computer science»
FEN_SPECIALITY_PATTERN = r"«(.*?)»"

# Speciality tags inside a discipline name: "Math (122+125)"
PARENTHESES_PATTERN = r"\(([^)]+)\)"
NO_PARENTHESES_PATTERN = r"[^()]*"

# Tag delimiters in priority order - the first one present wins
TAG_DELIMITERS = ("+", ".", ",")

# Discipline filter labels (FEN dialect only)
LECTURE_TOKEN = "лекція"
LECTURE_LABEL = "Лекція"
REMOTE_MARKER = "д"
REMOTE_LABEL = "Дистанційно"

# Positional order of the fields of a data row
ROW_FIELDS = ("day", "time", "name", "group", "weeks", "auditorium")

# Batch input/output
WORKBOOK_PATTERNS = ("*.xlsx", "*.xlsm")
DEFAULT_SCHEDULES_DIR = "schedules"
OUTPUT_FILE = "normalized_schedule.json"
