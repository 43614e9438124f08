"""
Tutor lesson dashboard (command line).

Fetches lessons, optionally claims one, and prints the Today, Available,
Upcoming and Historic buckets with the month picker.

Usage:
    lesson-dashboard [--month INDEX | --from YYYY-MM-DD --to YYYY-MM-DD]
                     [--take LESSON_ID] [--mock] [--export-dir DIR]

Examples:
    # Show everything
    lesson-dashboard --mock

    # Only next month (window slot 6)
    lesson-dashboard --month 6

    # Explicit range
    lesson-dashboard --from 2025-11-01 --to 2025-11-15

    # Take an available class, then export the buckets
    lesson-dashboard --take L007 --export-dir output/exports
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .auth import AuthSession
from .dashboard.month_window import CLEAR_MONTH_INDEX, TOTAL_MONTHS, MonthSlot
from .dashboard.view import DashboardBuckets, DashboardView
from .models.filter_selection import FilterSelection, SelectionKind
from .models.lesson import Lesson, User
from .models.schema_version import SchemaVersion, VersionedData
from .services.interfaces import LessonService
from .store.lesson_store import LessonStore
from .utils.config import config
from .utils.dates import end_of_day, ensure_aware, format_date, format_time, start_of_day
from .utils.di_container import DIContainer, configure_default_services
from .utils.file_utils import generate_filename, save_csv, save_json
from .utils.logger import setup_logger


logger = logging.getLogger(__name__)


BUCKET_TITLES = {
    "today": ("Today's Lessons", "No lessons today"),
    "available": ("Available Lessons", "No available lessons"),
    "upcoming": ("Upcoming Lessons", "No upcoming lessons"),
    "historic": ("Historic Lessons", "No historic lessons"),
}


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="lesson-dashboard",
        description="Tutor lesson dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--month",
        type=int,
        help=f"Month window slot 0-{TOTAL_MONTHS - 1} "
             f"(0 = five months back, 5 = this month, 11 = six ahead; "
             f"{CLEAR_MONTH_INDEX} clears)"
    )
    selection.add_argument(
        "--from",
        dest="date_from",
        help="Start of an explicit date range (YYYY-MM-DD, requires --to)"
    )

    parser.add_argument(
        "--to",
        dest="date_to",
        help="End of an explicit date range (YYYY-MM-DD, requires --from)"
    )

    parser.add_argument(
        "--take",
        metavar="LESSON_ID",
        help="Take (claim) an available lesson before showing the dashboard"
    )

    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the built-in mock lesson service"
    )

    parser.add_argument(
        "--export-dir",
        type=Path,
        help="Write the buckets as JSON and CSV into this directory"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)"
    )

    args = parser.parse_args(argv)

    if bool(args.date_from) != bool(args.date_to):
        parser.error("--from and --to must be given together")

    return args


def parse_day(value: str) -> datetime:
    """
    Parse a YYYY-MM-DD string as local midnight.

    Raises:
        ValueError: If the format is invalid
    """
    try:
        return ensure_aware(datetime.strptime(value, "%Y-%m-%d"))
    except ValueError as e:
        raise ValueError(f"Invalid date '{value}' (expected YYYY-MM-DD): {e}") from e


def apply_selection(view: DashboardView, args: argparse.Namespace):
    """Apply --month or --from/--to to the view."""
    if args.month is not None:
        view.select_month(args.month)
    elif args.date_from and args.date_to:
        view.select_date_range(
            start_of_day(parse_day(args.date_from)),
            end_of_day(parse_day(args.date_to))
        )


def describe_selection(selection: FilterSelection, slots: List[MonthSlot]) -> str:
    """Human-readable summary of the active filter."""
    if selection.kind == SelectionKind.MONTH:
        return f"Month: {slots[selection.month_index].label}"
    if selection.kind == SelectionKind.RANGE:
        date_range = selection.date_range
        return f"Range: {format_date(date_range.start)} - {format_date(date_range.end)}"
    return "No filter"


def format_lesson(lesson: Lesson) -> str:
    """One display line for a lesson."""
    students = ", ".join(lesson.students) if lesson.students else "-"
    tutor = lesson.tutor or "-"
    return (
        f"{lesson.id:6s} {format_date(lesson.date)} {format_time(lesson.date)} | "
        f"{lesson.subject} | students: {students} | tutor: {tutor} | {lesson.status.value}"
    )


def render_month_picker(slots: List[MonthSlot], selection: FilterSelection) -> str:
    """Render the month picker, marking the selected slot and empty months."""
    cells = []
    for slot in slots:
        label = slot.short_label
        if selection.kind == SelectionKind.MONTH and selection.month_index == slot.index:
            label = f"[{label}]"
        elif not slot.has_data:
            label = f"({label})"
        cells.append(f"{slot.index}:{label}")
    return "Filter by Month: " + "  ".join(cells)


def render_dashboard(
    buckets: DashboardBuckets,
    slots: List[MonthSlot],
    selection: FilterSelection,
    user_name: str
) -> str:
    """Render the full dashboard as text."""
    lines = [
        "=" * 60,
        f"LESSON DASHBOARD - Welcome, {user_name}",
        "=" * 60,
        render_month_picker(slots, selection),
        describe_selection(selection, slots),
    ]

    for name, lessons in buckets.as_dict().items():
        title, empty_message = BUCKET_TITLES[name]
        lines.append("")
        lines.append(f"{title} ({len(lessons)})")
        lines.append("-" * 60)
        if not lessons:
            lines.append(f"  {empty_message}")
        for lesson in lessons:
            lines.append(f"  {format_lesson(lesson)}")

    return "\n".join(lines)


def build_export(buckets: DashboardBuckets, selection: FilterSelection) -> Dict[str, Any]:
    """Versioned JSON document for the buckets."""
    data = {
        "generated_at": datetime.now().astimezone().isoformat(),
        "selection": {
            "kind": selection.kind.value,
            "month_index": selection.month_index,
            "start": selection.date_range.start.isoformat() if selection.date_range else None,
            "end": selection.date_range.end.isoformat() if selection.date_range else None,
        },
        "buckets": {
            name: [lesson.to_dict() for lesson in lessons]
            for name, lessons in buckets.as_dict().items()
        },
    }
    return VersionedData(SchemaVersion.latest().value, data).to_dict()


def buckets_to_dataframe(buckets: DashboardBuckets) -> pd.DataFrame:
    """One row per lesson per bucket; a lesson can appear in Today and another bucket."""
    rows = []
    for name, lessons in buckets.as_dict().items():
        for lesson in lessons:
            row = lesson.to_dict()
            row["students"] = ", ".join(lesson.students)
            row["bucket"] = name
            rows.append(row)

    columns = ["bucket", "id", "date", "type", "subject", "students", "tutor", "status"]
    return pd.DataFrame(rows, columns=columns)


def export_dashboard(
    buckets: DashboardBuckets,
    selection: FilterSelection,
    export_dir: Path
) -> List[Path]:
    """
    Write the buckets as JSON and CSV.

    Returns:
        Paths written successfully
    """
    written = []

    json_path = export_dir / generate_filename("dashboard", "json")
    if save_json(build_export(buckets, selection), json_path):
        written.append(json_path)

    csv_path = export_dir / generate_filename("dashboard", "csv")
    if save_csv(buckets_to_dataframe(buckets), csv_path):
        written.append(csv_path)

    return written


def log_in_configured_tutor(auth: AuthSession):
    """Log in the tutor named by TUTOR_EMAIL / TUTOR_NAME, if configured."""
    if not config.tutor_email:
        return

    email = config.tutor_email
    name = config.tutor_name or email.split("@", 1)[0]
    auth.mark_logged_in(User(id=email.lower(), name=name, email=email))


async def run(args: argparse.Namespace, container: DIContainer) -> int:
    """Run the dashboard against the configured services."""
    store: LessonStore = container.resolve(LessonStore)
    auth: AuthSession = container.resolve(AuthSession)
    service: LessonService = container.resolve(LessonService)

    log_in_configured_tutor(auth)
    view = DashboardView(store)

    try:
        print("\nLoading lessons...")
        result = await view.refresh()
        if result.is_failure:
            print(f"ERROR: {store.error}")
            return 1
        print(f"✓ Loaded {len(result.unwrap())} lessons")

        if args.take:
            notification = await view.take_class(args.take)
            marker = "✗" if notification.is_error else "✓"
            print(f"{marker} {notification.message}")

        apply_selection(view, args)

        buckets = view.buckets()
        slots = view.month_slots()
        print()
        print(render_dashboard(buckets, slots, view.selection, auth.display_name))

        if args.export_dir:
            for path in export_dashboard(buckets, view.selection, args.export_dir):
                print(f"Exported: {path}")

        return 0

    finally:
        await service.aclose()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main execution function."""
    args = parse_arguments(argv)

    try:
        config.validate()

        setup_logger(
            level=args.log_level or config.log_level,
            log_file=str(config.output_dir / "logs" / "dashboard.log")
        )
        config.create_output_directories()

        container = DIContainer()
        configure_default_services(container, use_mock=args.mock)

        return asyncio.run(run(args, container))

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        logger.info("Interrupted by user")
        return 130

    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        print(f"\nERROR: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
