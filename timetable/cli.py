"""
Batch entry point.

    timetable-normalize                      # every workbook in schedules/
    timetable-normalize a.xlsx b.xlsx dir/   # explicit files and directories

All workbooks are processed in memory first; normalized_schedule.json is
written only if every one of them succeeds.
"""

from __future__ import annotations

import argparse
import sys

from .config import DEFAULT_SCHEDULES_DIR, OUTPUT_FILE
from .excel_loader import (
    ScheduleProcessingError,
    collect_workbooks,
    process_all,
    write_schedule,
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="timetable-normalize",
        description=f"Convert timetable workbooks into {OUTPUT_FILE}",
    )
    p.add_argument(
        "paths",
        nargs="*",
        default=[DEFAULT_SCHEDULES_DIR],
        help="Workbook files or directories of workbooks",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    workbooks = collect_workbooks(args.paths)
    if not workbooks:
        print(f"No workbooks found in {', '.join(args.paths)}", file=sys.stderr)
        return 1

    try:
        departments = process_all(workbooks)
    except ScheduleProcessingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = write_schedule(departments, OUTPUT_FILE)
    print(f"Normalized {len(departments)} workbook(s). JSON written to {output.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
