# File: day_planner/services/service_factory.py

from pathlib import Path
from typing import Optional, Union

from day_planner.core.calendar_grid import CalendarGrid
from day_planner.core.clock import Clock
from day_planner.core.config_manager import Config
from day_planner.core.event_store import EventStore
from day_planner.services.storage import JsonFileStorage, KeyValueStorage
from day_planner.utils.logger import setup_logger

logger = setup_logger(__name__)


class ServiceFactory:
    """Factory for creating configured planner components."""

    @staticmethod
    def create_storage(path: Optional[Union[str, Path]] = None) -> KeyValueStorage:
        """
        Create the file-backed storage.

        Args:
            path: Storage file (default: Config.STORAGE_FILE)

        Returns:
            JsonFileStorage instance
        """
        storage_path = Path(path) if path else Config.STORAGE_FILE
        logger.debug(f"Using storage file {storage_path}")
        return JsonFileStorage(storage_path)

    @staticmethod
    def create_event_store(storage: KeyValueStorage) -> EventStore:
        return EventStore(storage, require_description=Config.REQUIRE_DESCRIPTION)

    @staticmethod
    def create_calendar(clock: Optional[Clock] = None,
                        offset_minutes: Optional[int] = None) -> CalendarGrid:
        if offset_minutes is None:
            offset_minutes = Config.UTC_OFFSET_MINUTES
        return CalendarGrid(clock=clock, offset_minutes=offset_minutes)
