from .errors import (
    PlannerError,
    InvalidEvent,
    InvalidRange,
    OverlapConflict,
    EventNotFound,
    MalformedPersistedData,
    StorageError,
)
from .event import (
    Event,
    event_from_dict,
    normalize_time,
    time_to_minutes,
    ranges_overlap,
    serialize_events,
    deserialize_events,
)

__all__ = [
    "PlannerError",
    "InvalidEvent",
    "InvalidRange",
    "OverlapConflict",
    "EventNotFound",
    "MalformedPersistedData",
    "StorageError",
    "Event",
    "event_from_dict",
    "normalize_time",
    "time_to_minutes",
    "ranges_overlap",
    "serialize_events",
    "deserialize_events",
]
