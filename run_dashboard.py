#!/usr/bin/env python3
"""
Tutor lesson dashboard script.

Usage:
    python run_dashboard.py [--month INDEX | --from YYYY-MM-DD --to YYYY-MM-DD]
                            [--take LESSON_ID] [--mock] [--export-dir DIR]
"""

import sys

from lesson_dashboard.cli import main


if __name__ == "__main__":
    sys.exit(main())
