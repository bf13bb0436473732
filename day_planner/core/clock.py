# File: day_planner/core/clock.py

import datetime
import pytz


class Clock:
    """Source of the current instant."""

    def now(self) -> datetime.datetime:
        raise NotImplementedError


class SystemClock(Clock):
    """Reads the host clock as an aware UTC datetime."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(pytz.utc)


class FixedClock(Clock):
    """Always returns the same instant. Naive instants are taken as UTC."""

    def __init__(self, instant: datetime.datetime):
        if instant.tzinfo is None:
            instant = pytz.utc.localize(instant)
        self.instant = instant

    def now(self) -> datetime.datetime:
        return self.instant
