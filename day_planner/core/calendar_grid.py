# File: day_planner/core/calendar_grid.py
"""
Month grid and date-key logic for the Day Planner.

Months are 0-indexed (0 = January) and weekdays start at 0 = Sunday, matching
the column order of the displayed grid. All day boundaries are computed at a
single fixed UTC offset so that "today" and the generated date keys agree no
matter which timezone the host runs in.
"""

import calendar
import datetime
import re
from typing import List, Optional, Tuple

import pytz

from day_planner.core.clock import Clock, SystemClock
from day_planner.core.config_manager import Config
from day_planner.utils.logger import setup_logger

logger = setup_logger(__name__)

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValueError(f"Month must be in 0..11, got {month}")


def fixed_offset(offset_minutes: int) -> datetime.tzinfo:
    """tzinfo for a constant UTC offset given in minutes."""
    return pytz.FixedOffset(offset_minutes)


def normalize_to_fixed_offset(instant: datetime.datetime, offset_minutes: int) -> datetime.datetime:
    """
    Wall-clock view of an instant as observed at a fixed UTC offset.

    Args:
        instant: Aware datetime (naive values are treated as UTC)
        offset_minutes: Offset from UTC in minutes, e.g. 330 for UTC+05:30

    Returns:
        Aware datetime in the fixed offset
    """
    if instant.tzinfo is None:
        instant = pytz.utc.localize(instant)
    return instant.astimezone(fixed_offset(offset_minutes))


def days_in_month(year: int, month: int) -> int:
    """Number of days in a 0-indexed month, leap years included."""
    _check_month(month)
    return calendar.monthrange(year, month + 1)[1]


def first_weekday_of_month(year: int, month: int) -> int:
    """Weekday of the 1st of the month, 0 = Sunday."""
    _check_month(month)
    # date.weekday() is 0 = Monday
    return (datetime.date(year, month + 1, 1).weekday() + 1) % 7


def build_grid(year: int, month: int) -> List[Optional[int]]:
    """Leading empty cells so day 1 lands in its weekday column, then 1..N."""
    padding: List[Optional[int]] = [None] * first_weekday_of_month(year, month)
    return padding + list(range(1, days_in_month(year, month) + 1))


def build_weeks(year: int, month: int) -> List[List[Optional[int]]]:
    """The grid split into rows of seven cells; the last row may be short."""
    cells = build_grid(year, month)
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Add delta months, rolling the year over in either direction."""
    _check_month(month)
    new_year, new_month = divmod(year * 12 + month + delta, 12)
    return new_year, new_month


def date_key_for(year: int, month: int, day: int,
                 offset_minutes: int = Config.UTC_OFFSET_MINUTES) -> str:
    """Canonical YYYY-MM-DD key for a day, built at local midnight in the fixed offset."""
    _check_month(month)
    if not 1 <= day <= days_in_month(year, month):
        raise ValueError(f"Day {day} does not exist in {month_label(year, month)}")
    local_midnight = fixed_offset(offset_minutes).localize(
        datetime.datetime(year, month + 1, day)
    )
    moment = normalize_to_fixed_offset(local_midnight, offset_minutes)
    return moment.strftime(Config.DATE_KEY_FORMAT)


def parse_date_key(date_key: str) -> Tuple[int, int, int]:
    """
    Split a date key into (year, 0-indexed month, day).

    Raises:
        ValueError: if the key is not an existing calendar date in YYYY-MM-DD form
    """
    if not isinstance(date_key, str) or not DATE_KEY_PATTERN.match(date_key):
        raise ValueError(f"Date key must be in YYYY-MM-DD format: {date_key!r}")
    parsed = datetime.datetime.strptime(date_key, Config.DATE_KEY_FORMAT)
    return parsed.year, parsed.month - 1, parsed.day


def month_label(year: int, month: int) -> str:
    """Human-readable month title, e.g. 'March 2024'."""
    _check_month(month)
    return f"{calendar.month_name[month + 1]} {year}"


class CalendarGrid:
    """
    Navigable month view.

    Holds the displayed (year, month), initialized to the current month at the
    fixed offset. previous_month/next_month are the only navigation actions.
    """

    def __init__(self, clock: Optional[Clock] = None,
                 offset_minutes: int = Config.UTC_OFFSET_MINUTES):
        self.clock = clock or SystemClock()
        self.offset_minutes = offset_minutes
        today = self.today()
        self.year = today.year
        self.month = today.month - 1
        self.selected_day: Optional[int] = None

    def today(self) -> datetime.datetime:
        """Current moment at the fixed offset."""
        return normalize_to_fixed_offset(self.clock.now(), self.offset_minutes)

    def today_key(self) -> str:
        today = self.today()
        return date_key_for(today.year, today.month - 1, today.day, self.offset_minutes)

    def _move(self, delta: int) -> Tuple[int, int]:
        self.year, self.month = shift_month(self.year, self.month, delta)
        self.selected_day = None
        logger.debug(f"Displaying {self.title()}")
        return self.year, self.month

    def previous_month(self) -> Tuple[int, int]:
        return self._move(-1)

    def next_month(self) -> Tuple[int, int]:
        return self._move(1)

    def show_month_of(self, date_key: str) -> Tuple[int, int]:
        """Display the month containing date_key."""
        year, month, _ = parse_date_key(date_key)
        self.year, self.month = year, month
        self.selected_day = None
        return self.year, self.month

    def title(self) -> str:
        return month_label(self.year, self.month)

    def grid(self) -> List[Optional[int]]:
        return build_grid(self.year, self.month)

    def weeks(self) -> List[List[Optional[int]]]:
        return build_weeks(self.year, self.month)

    def is_today(self, day: Optional[int]) -> bool:
        """True if day of the displayed month is today at the fixed offset."""
        if day is None:
            return False
        today = self.today()
        return (day == today.day
                and self.month == today.month - 1
                and self.year == today.year)

    @staticmethod
    def is_weekend_column(index: int) -> bool:
        """Sunday and Saturday columns of the grid."""
        return index % 7 in (0, 6)

    def select_day(self, day: Optional[int]) -> str:
        """Select a day of the displayed month and return its date key."""
        if day is None:
            raise ValueError("Cannot select an empty grid cell")
        key = date_key_for(self.year, self.month, day, self.offset_minutes)
        self.selected_day = day
        logger.info(f"Selected {key}")
        return key
