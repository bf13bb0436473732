# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable test data and in-memory collaborators for all tests.
"""

import pytest
from datetime import datetime, timezone
from pathlib import Path
import itertools
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from day_planner.core.clock import FixedClock
from day_planner.core.event_store import EventStore
from day_planner.models.event import Event
from day_planner.services.storage import InMemoryStorage


DATE_KEY = "2024-03-15"


# ==================== Clock Fixtures ====================

@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-03-15 10:00 UTC (15:30 at UTC+05:30)."""
    return FixedClock(datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def late_evening_clock():
    """Clock pinned to 2024-03-31 20:00 UTC, already April 1st at UTC+05:30."""
    return FixedClock(datetime(2024, 3, 31, 20, 0, tzinfo=timezone.utc))


# ==================== Storage Fixtures ====================

@pytest.fixture
def storage():
    """Empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def id_factory():
    """Deterministic ids: evt-1, evt-2, ..."""
    counter = itertools.count(1)
    return lambda: f"evt-{next(counter)}"


# ==================== Event Fixtures ====================

@pytest.fixture
def standup():
    return Event(name="Team Standup", start_time="09:00", end_time="10:00",
                 description="Daily sync with the team")


@pytest.fixture
def lunch():
    return Event(name="Lunch", start_time="12:30", end_time="13:30",
                 description="With Priya at the cafe")


@pytest.fixture
def review():
    return Event(name="Code Review", start_time="15:00", end_time="16:00",
                 description="")


# ==================== Store Fixtures ====================

@pytest.fixture
def store(storage, id_factory):
    """Store with DATE_KEY loaded and no events."""
    event_store = EventStore(storage, require_description=False, id_factory=id_factory)
    event_store.load(DATE_KEY)
    return event_store


@pytest.fixture
def seeded_store(store, standup, lunch, review):
    """Store with three non-overlapping events added in order."""
    store.add(standup)
    store.add(lunch)
    store.add(review)
    return store
