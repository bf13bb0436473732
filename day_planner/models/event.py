# File: day_planner/models/event.py

import json
import re
from dataclasses import dataclass
from typing import List, Optional

from .errors import InvalidEvent, MalformedPersistedData

TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")

# Stored record keys, in the order they are written
RECORD_FIELDS = ('id', 'name', 'startTime', 'endTime', 'description')


def normalize_time(value: str) -> str:
    """Validate a time of day and return it zero-padded as HH:MM."""
    if not isinstance(value, str):
        raise InvalidEvent(f"Time must be a string in HH:MM format: {value!r}")
    match = TIME_PATTERN.match(value.strip())
    if not match:
        raise InvalidEvent(f"Time must be in HH:MM format: {value!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidEvent(f"Time out of range: {value!r}")
    return f"{hour:02d}:{minute:02d}"


def time_to_minutes(value: str) -> int:
    """Minutes since midnight for an HH:MM time."""
    hours, minutes = normalize_time(value).split(':')
    return int(hours) * 60 + int(minutes)


def ranges_overlap(start1: str, end1: str, start2: str, end2: str) -> bool:
    """Half-open overlap: [s1, e1) and [s2, e2) share at least one minute."""
    return start1 < end2 and start2 < end1


@dataclass
class Event:
    """A time-blocked event on a single day."""
    name: str
    start_time: str  # "HH:MM" format
    end_time: str    # "HH:MM" format
    description: str = ""
    id: Optional[str] = None

    def __post_init__(self):
        """Validate event data and normalize times."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidEvent("Event name is required")
        self.start_time = normalize_time(self.start_time)
        self.end_time = normalize_time(self.end_time)
        if self.description is None:
            self.description = ""

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return time_to_minutes(self.end_time) - time_to_minutes(self.start_time)

    def overlaps_range(self, start_time: str, end_time: str) -> bool:
        """Check if this event overlaps the half-open range [start_time, end_time)."""
        return ranges_overlap(self.start_time, self.end_time, start_time, end_time)

    def overlaps_with(self, other: 'Event') -> bool:
        """Check if this event overlaps with another."""
        return self.overlaps_range(other.start_time, other.end_time)

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = keyword.lower()
        return needle in self.name.lower() or needle in self.description.lower()

    def to_dict(self) -> dict:
        """Convert to the stored record format."""
        return {
            'id': self.id,
            'name': self.name,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'description': self.description,
        }


def event_from_dict(data: dict) -> Event:
    """Create Event from a stored record."""
    missing = [f for f in RECORD_FIELDS if f not in data]
    if missing:
        raise InvalidEvent(f"Event record missing fields: {', '.join(missing)}")

    event_id = data['id']
    if event_id is not None and not isinstance(event_id, str):
        raise InvalidEvent(f"Event id must be a string: {event_id!r}")
    description = data['description']
    if description is not None and not isinstance(description, str):
        raise InvalidEvent(f"Event description must be a string: {description!r}")

    return Event(
        name=data['name'],
        start_time=data['startTime'],
        end_time=data['endTime'],
        description=description or "",
        id=event_id,
    )


def serialize_events(events: List[Event]) -> str:
    """Serialize an event collection to its stored JSON form."""
    return json.dumps([e.to_dict() for e in events], ensure_ascii=False)


def deserialize_events(payload: str) -> List[Event]:
    """
    Parse a stored event collection.

    Raises:
        MalformedPersistedData: payload is not a JSON list of valid event records
    """
    try:
        records = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise MalformedPersistedData(f"Stored events are not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise MalformedPersistedData(
            f"Stored events must be a list, got {type(records).__name__}"
        )

    events = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise MalformedPersistedData(f"Record {index} is not an object")
        try:
            events.append(event_from_dict(record))
        except InvalidEvent as e:
            raise MalformedPersistedData(f"Record {index} is invalid: {e}") from e
    return events
