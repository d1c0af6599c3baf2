"""
Package entry point.

Allows running the normalizer via:

    python -m timetable [paths...]
"""

import sys

from timetable.cli import main

if __name__ == "__main__":
    sys.exit(main())
