from __future__ import annotations

from abc import ABC, abstractmethod
from threading import RLock
from typing import Dict, Optional

from .settings import get_settings


# PUBLIC_INTERFACE
class KeyValueStorage(ABC):
    """Abstract key-value contract for list persistence backends."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the string stored under key, or None if nothing is stored."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""


class InMemoryStorage(KeyValueStorage):
    """
    Thread-safe in-memory storage suitable for testing and default runtime.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._lock = RLock()
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value


# PUBLIC_INTERFACE
def get_storage() -> KeyValueStorage:
    """
    Factory to return the configured storage based on settings.
    - memory: InMemoryStorage
    - sqlite: SQLiteStorage
    """
    settings = get_settings()
    if settings.persistence_backend == "sqlite":
        from .db import SQLiteStorage

        return SQLiteStorage(settings.sqlite_db_path)
    return InMemoryStorage()
