"""
Workbook dialect detection.

Two timetable layouts are in circulation:

    IPZ: one speciality per workbook, every data row belongs to it
    FEN: several «quoted» specialities per workbook, each discipline names
         its specialities in parentheses: "Math (122+125)"

The only thing telling them apart is who signs the sheet: FEN workbooks are
signed by a specific dean, so the dean line is checked for that surname.
"""

from enum import Enum

from .config import DEAN_MARKER, FEN_DEAN_FRAGMENT
from .marker_scanner import find_label


class Dialect(Enum):
    IPZ = "ipz"
    FEN = "fen"


def extract_dean(grid):
    """Return the dean signature line with its underscore fill removed."""
    return find_label(grid, DEAN_MARKER, "_")


def classify(grid, dean_fragment=None):
    """
    Determine the dialect of a workbook from its dean line.

    Args:
        grid: Grid of the workbook's first sheet
        dean_fragment: Surname fragment marking FEN workbooks (config default
            if None). Matched as an exact, case-sensitive substring.

    Returns:
        Dialect: FEN if the dean line contains the fragment, IPZ otherwise
        (including when the sheet has no dean line at all)
    """
    if dean_fragment is None:
        dean_fragment = FEN_DEAN_FRAGMENT

    if dean_fragment in extract_dean(grid):
        return Dialect.FEN
    return Dialect.IPZ
