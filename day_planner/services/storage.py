# File: day_planner/services/storage.py

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from day_planner.models.errors import StorageError
from day_planner.utils.logger import LoggerMixin


class KeyValueStorage(ABC):
    """Synchronous string key-value store, keyed by date key."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, overwriting any prior value."""


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self):
        return list(self._data.keys())


class JsonFileStorage(KeyValueStorage, LoggerMixin):
    """
    Storage backed by a single JSON object file mapping key -> string value.

    Each set() rewrites the whole file through a temp file and os.replace,
    so a crash mid-write leaves the previous file intact.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open('r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Could not read storage file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} does not contain a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            # Non-string values are handed back as JSON text
            return json.dumps(value)
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            with tmp.open('w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except OSError as e:
            raise StorageError(f"Could not write storage file {self.path}: {e}") from e
        self.logger.debug(f"Wrote key {key} to {self.path}")

    def keys(self):
        return list(self._read_all().keys())
