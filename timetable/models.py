"""
Record tree produced from timetable workbooks.

    Department (one per workbook)
      └── Speciality (one per extracted speciality name)
            └── Discipline (one per data row)

A Discipline routed to several specialities is shared by reference, not
copied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


def _without_none(pairs):
    # Absent (None) fields are omitted from the JSON output
    return {key: value for key, value in pairs if value is not None}


@dataclass
class Discipline:
    """One scheduled course session taken from one data row."""

    name: str
    day: Optional[str] = None
    time: Optional[str] = None
    group: Optional[str] = None
    weeks: Optional[str] = None
    auditorium: Optional[str] = None

    def to_dict(self) -> dict:
        return _without_none([
            ('name', self.name),
            ('day', self.day),
            ('time', self.time),
            ('group', self.group),
            ('weeks', self.weeks),
            ('auditorium', self.auditorium),
        ])


@dataclass
class Speciality:
    name: str
    disciplines: List[Discipline] = field(default_factory=list)

    def to_dict(self) -> dict:
        return _without_none([
            ('name', self.name),
            ('disciplines', [d.to_dict() for d in self.disciplines]),
        ])


@dataclass
class Department:
    faculty: str
    specialities: List[Speciality] = field(default_factory=list)

    def to_dict(self) -> dict:
        return _without_none([
            ('faculty', self.faculty),
            ('specialities', [s.to_dict() for s in self.specialities]),
        ])
