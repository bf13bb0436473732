# File: day_planner/cli.py
"""
Command-line surface for the Day Planner.

Two views: the month grid (pick a day) and the events of one day
(search, add, edit, delete).
"""

import argparse
import sys
from typing import List, Optional

from day_planner.core.calendar_grid import (
    WEEKDAY_LABELS,
    CalendarGrid,
    parse_date_key,
)
from day_planner.core.config_manager import Config
from day_planner.core.event_store import EventStore
from day_planner.models.errors import PlannerError
from day_planner.models.event import Event
from day_planner.services.service_factory import ServiceFactory
from day_planner.utils.logger import setup_logger

logger = setup_logger(__name__)


def render_month(grid: CalendarGrid) -> str:
    """Text rendering of the displayed month; today is marked with '*'."""
    lines = [grid.title().center(7 * 5).rstrip()]
    lines.append("".join(label.rjust(5) for label in WEEKDAY_LABELS))
    for week in grid.weeks():
        cells = []
        for day in week:
            if day is None:
                cells.append(" " * 5)
            elif grid.is_today(day):
                cells.append(f"{day}*".rjust(5))
            else:
                cells.append(str(day).rjust(5))
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def render_events(date_key: str, events: List[Event], keyword: str = "") -> str:
    """Text rendering of one day's events."""
    lines = [f"Events for {date_key}"]
    if not events:
        lines.append("No events found for this search." if keyword else "No events.")
        return "\n".join(lines)
    for event in events:
        line = f"{event.start_time}-{event.end_time}  {event.name}  [{event.id}]"
        if event.description:
            line += f"\n    {event.description}"
        lines.append(line)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="day-planner",
        description="Pick a day on the month grid and manage its time-blocked events.",
    )
    ap.add_argument("--storage", default=None,
                    help=f"Events storage file (default: {Config.STORAGE_FILE})")
    sub = ap.add_subparsers(dest="command", required=True)

    month = sub.add_parser("month", help="Show a month grid")
    month.add_argument("--year", type=int, default=None, help="Year (default: current)")
    month.add_argument("--month", type=int, default=None, help="Month 1-12 (default: current)")
    month.add_argument("--offset", type=int, default=None,
                       help=f"UTC offset in minutes for day boundaries (default: {Config.UTC_OFFSET_MINUTES})")

    events = sub.add_parser("events", help="List events for a day")
    events.add_argument("date", help="Day as YYYY-MM-DD")
    events.add_argument("--search", default="", help="Keyword to filter by name or description")

    add = sub.add_parser("add", help="Add an event")
    add.add_argument("date", help="Day as YYYY-MM-DD")
    add.add_argument("name")
    add.add_argument("start", help="Start time HH:MM")
    add.add_argument("end", help="End time HH:MM")
    add.add_argument("--description", default="")

    edit = sub.add_parser("edit", help="Replace an event's fields")
    edit.add_argument("date", help="Day as YYYY-MM-DD")
    edit.add_argument("id", help="Event id")
    edit.add_argument("name")
    edit.add_argument("start", help="Start time HH:MM")
    edit.add_argument("end", help="End time HH:MM")
    edit.add_argument("--description", default="")

    delete = sub.add_parser("delete", help="Delete an event")
    delete.add_argument("date", help="Day as YYYY-MM-DD")
    delete.add_argument("id", help="Event id")

    return ap


def _show_month(args: argparse.Namespace) -> None:
    grid = ServiceFactory.create_calendar(offset_minutes=args.offset)
    if args.year is not None or args.month is not None:
        year = args.year if args.year is not None else grid.year
        month = (args.month - 1) if args.month is not None else grid.month
        if not 0 <= month <= 11:
            raise ValueError(f"Month must be between 1 and 12, got {args.month}")
        grid.year, grid.month = year, month
    print(render_month(grid))


def _open_store(args: argparse.Namespace) -> EventStore:
    parse_date_key(args.date)
    store = ServiceFactory.create_event_store(ServiceFactory.create_storage(args.storage))
    store.load(args.date)
    return store


def _run(args: argparse.Namespace) -> None:
    if args.command == "month":
        _show_month(args)
        return

    store = _open_store(args)

    if args.command == "events":
        print(render_events(args.date, store.search(args.search), args.search))
    elif args.command == "add":
        event = store.add(Event(args.name, args.start, args.end, args.description))
        print(f"Added event {event.id}")
    elif args.command == "edit":
        event = store.update(args.id, Event(args.name, args.start, args.end, args.description))
        print(f"Updated event {event.id}")
    elif args.command == "delete":
        event = store.remove(args.id)
        print(f"Deleted event {event.id}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)

    if not Config.validate():
        logger.error("Configuration validation failed")
        return 1

    try:
        _run(args)
        return 0

    except PlannerError as e:
        logger.error(str(e))
        print(f"Error: {e}")
        return 1

    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        print(f"Error: {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
