# File: day_planner/core/config_manager.py
"""
Centralized configuration management for the Day Planner.
Loads settings from environment variables and an optional .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a yes/no style environment variable."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ['yes', 'true', '1', 'on', 'y', 't']


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from day_planner/core/

    # Subdirectories
    DATA_DIR = Path(os.getenv("PLANNER_DATA_DIR", str(BASE_DIR / "data")))
    LOGS_DIR = Path(os.getenv("PLANNER_LOGS_DIR", str(BASE_DIR / "logs")))

    # Files
    STORAGE_FILE = Path(os.getenv("PLANNER_STORAGE_FILE", str(DATA_DIR / "events.json")))

    # Calendar Settings
    # Day boundaries are computed at this fixed offset from UTC (IST, UTC+05:30)
    UTC_OFFSET_MINUTES = int(os.getenv("PLANNER_UTC_OFFSET_MINUTES", "330"))
    MAX_OFFSET_MINUTES = 14 * 60

    # Event form settings
    REQUIRE_DESCRIPTION = _env_flag("PLANNER_REQUIRE_DESCRIPTION", False)
    DATE_KEY_FORMAT = "%Y-%m-%d"

    # Logging
    LOG_LEVEL = os.getenv("PLANNER_LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = _env_flag("PLANNER_LOG_TO_FILE", False)

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        errors = []

        if abs(cls.UTC_OFFSET_MINUTES) > cls.MAX_OFFSET_MINUTES:
            errors.append(
                f"PLANNER_UTC_OFFSET_MINUTES out of range: {cls.UTC_OFFSET_MINUTES}"
            )

        storage_parent = cls.STORAGE_FILE.parent
        if storage_parent.exists() and not storage_parent.is_dir():
            errors.append(f"Storage directory is not a directory: {storage_parent}")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
