# File: day_planner/models/errors.py
"""
Exception taxonomy for the Day Planner.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .event import Event


class PlannerError(Exception):
    """Base class for all planner errors."""


class InvalidEvent(PlannerError, ValueError):
    """An event record is missing a required field or has a bad time value."""


class InvalidRange(PlannerError, ValueError):
    """End time is not strictly after start time."""

    def __init__(self, start_time: str, end_time: str):
        self.start_time = start_time
        self.end_time = end_time
        super().__init__(f"End time must be after start time: {start_time}-{end_time}")


class OverlapConflict(PlannerError):
    """The candidate time range intersects an existing event."""

    def __init__(self, start_time: str, end_time: str, conflicts: List['Event']):
        self.start_time = start_time
        self.end_time = end_time
        self.conflicts = list(conflicts)
        names = ", ".join(
            f"'{e.name}' ({e.start_time}-{e.end_time})" for e in self.conflicts
        )
        super().__init__(
            f"This event overlaps with an existing event: {start_time}-{end_time} conflicts with {names}"
        )


class EventNotFound(PlannerError, KeyError):
    """No event with the given id exists for the selected date."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(event_id)

    def __str__(self) -> str:
        return f"Event not found: {self.event_id}"


class MalformedPersistedData(PlannerError):
    """The stored payload for a date key could not be parsed."""


class StorageError(PlannerError):
    """The storage medium itself could not be read or written."""
