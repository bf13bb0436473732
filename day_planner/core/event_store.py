# File: day_planner/core/event_store.py
"""
Event store for a single selected day.

Holds the events of the currently loaded date key and enforces, on every
mutation, that each event ends after it starts and that no two events share
any part of their half-open [start, end) ranges. Every accepted mutation is
written back to storage; rejected ones leave both memory and storage untouched.
"""

import uuid
from dataclasses import replace
from typing import Callable, List, Optional

from day_planner.core.calendar_grid import parse_date_key
from day_planner.core.config_manager import Config
from day_planner.models.errors import (
    EventNotFound,
    InvalidEvent,
    InvalidRange,
    MalformedPersistedData,
    OverlapConflict,
)
from day_planner.models.event import (
    Event,
    deserialize_events,
    normalize_time,
    serialize_events,
)
from day_planner.services.storage import KeyValueStorage
from day_planner.utils.logger import setup_logger

logger = setup_logger(__name__)


def _new_event_id() -> str:
    return str(uuid.uuid4())


class EventStore:
    """CRUD and search over one day's events, backed by a key-value storage."""

    def __init__(
        self,
        storage: KeyValueStorage,
        require_description: bool = Config.REQUIRE_DESCRIPTION,
        id_factory: Callable[[], str] = _new_event_id,
    ):
        """
        Initialize the store.

        Args:
            storage: Key-value storage holding serialized collections by date key
            require_description: Reject events with an empty description
            id_factory: Produces a fresh unique id for each added event
        """
        self.storage = storage
        self.require_description = require_description
        self.id_factory = id_factory
        self._date_key: Optional[str] = None
        self._events: List[Event] = []

    # ==================== Loading & Persistence ====================

    @property
    def date_key(self) -> Optional[str]:
        return self._date_key

    @property
    def events(self) -> List[Event]:
        """Copy of the loaded collection, in insertion order."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def load(self, date_key: str) -> List[Event]:
        """
        Select a day and read its events from storage.

        Absent or unparsable stored data yields an empty collection. Loading
        never writes to storage, so a bad payload stays in place until the
        next successful mutation replaces it.
        """
        parse_date_key(date_key)
        self._date_key = date_key
        self._events = []

        payload = self.storage.get(date_key)
        if payload is None:
            logger.debug(f"No stored events for {date_key}")
            return self.events

        try:
            self._events = deserialize_events(payload)
        except MalformedPersistedData as e:
            logger.warning(f"Ignoring malformed stored events for {date_key}: {e}")
            self._events = []
        else:
            logger.info(f"Loaded {len(self._events)} events for {date_key}")
        return self.events

    def persist(self, date_key: str, collection: List[Event]) -> None:
        """Serialize the full collection and overwrite storage under date_key."""
        parse_date_key(date_key)
        self.storage.set(date_key, serialize_events(collection))
        logger.debug(f"Persisted {len(collection)} events for {date_key}")

    def _require_loaded(self) -> str:
        if self._date_key is None:
            raise RuntimeError("No date selected; call load() first")
        return self._date_key

    def _commit(self, updated: List[Event]) -> None:
        date_key = self._require_loaded()
        self.persist(date_key, updated)
        self._events = updated

    # ==================== Validation ====================

    def validate_range(self, start_time: str, end_time: str) -> bool:
        """True if end_time is strictly after start_time, else raise InvalidRange."""
        start_time, end_time = normalize_time(start_time), normalize_time(end_time)
        if not start_time < end_time:
            raise InvalidRange(start_time, end_time)
        return True

    def find_conflicts(self, start_time: str, end_time: str,
                       exclude_id: Optional[str] = None) -> List[Event]:
        """Events other than exclude_id whose range overlaps [start_time, end_time)."""
        start_time, end_time = normalize_time(start_time), normalize_time(end_time)
        return [
            e for e in self._events
            if e.id != exclude_id and e.overlaps_range(start_time, end_time)
        ]

    def overlaps(self, start_time: str, end_time: str,
                 exclude_id: Optional[str] = None) -> bool:
        return bool(self.find_conflicts(start_time, end_time, exclude_id))

    def _validate_candidate(self, event: Event, exclude_id: Optional[str]) -> None:
        if self.require_description and not event.description.strip():
            raise InvalidEvent("Event description is required")
        self.validate_range(event.start_time, event.end_time)
        conflicts = self.find_conflicts(event.start_time, event.end_time, exclude_id)
        if conflicts:
            raise OverlapConflict(event.start_time, event.end_time, conflicts)

    # ==================== Mutations ====================

    def add(self, event: Event) -> Event:
        """
        Append a new event with a freshly assigned id.

        Raises:
            InvalidEvent: description required but empty
            InvalidRange: end time not after start time
            OverlapConflict: range intersects an existing event
        """
        date_key = self._require_loaded()
        try:
            self._validate_candidate(event, exclude_id=None)
        except (InvalidEvent, InvalidRange, OverlapConflict) as e:
            logger.warning(f"Rejected new event '{event.name}' on {date_key}: {e}")
            raise

        created = replace(event, id=self.id_factory())
        self._commit(self._events + [created])
        logger.info(f"Added '{created.name}' ({created.start_time}-{created.end_time}) on {date_key}")
        return created

    def _index_of(self, event_id: str) -> int:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        raise EventNotFound(event_id)

    def get(self, event_id: str) -> Event:
        return self._events[self._index_of(event_id)]

    def update(self, event_id: str, changes: Event) -> Event:
        """
        Replace every field of an event except its id, keeping its position.

        The event being edited is excluded from the overlap check.

        Raises:
            EventNotFound: no event with event_id
            InvalidEvent, InvalidRange, OverlapConflict: as for add()
        """
        date_key = self._require_loaded()
        index = self._index_of(event_id)
        try:
            self._validate_candidate(changes, exclude_id=event_id)
        except (InvalidEvent, InvalidRange, OverlapConflict) as e:
            logger.warning(f"Rejected edit of {event_id} on {date_key}: {e}")
            raise

        updated_event = replace(changes, id=event_id)
        updated = list(self._events)
        updated[index] = updated_event
        self._commit(updated)
        logger.info(f"Updated '{updated_event.name}' on {date_key}")
        return updated_event

    def remove(self, event_id: str) -> Event:
        """
        Delete an event and return it.

        Raises:
            EventNotFound: no event with event_id
        """
        date_key = self._require_loaded()
        index = self._index_of(event_id)
        removed = self._events[index]
        self._commit(self._events[:index] + self._events[index + 1:])
        logger.info(f"Removed '{removed.name}' from {date_key}")
        return removed

    # ==================== Queries ====================

    def search(self, keyword: str = "") -> List[Event]:
        """Events whose name or description contains keyword, case-insensitively."""
        keyword = keyword or ""
        # Whitespace-only counts as empty; otherwise the keyword is matched as typed
        if not keyword.strip():
            return self.events
        return [e for e in self._events if e.matches(keyword)]
