"""Key-value storage backends for the planner namespace."""
from __future__ import annotations

import logging
from typing import Dict, Protocol

from sqlalchemy.orm import Session

from workout_planner.models.database_models import StorageEntry


logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal string key-value interface the planner logic depends on."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore:
    """Dict-backed store used by tests and one-off scripts."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class SqlAlchemyStore:
    """Store persisting entries in the ``storage_entries`` table.

    Writes are flushed immediately but committed by whoever owns the session
    (``get_db`` commits at the end of each request).
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def get(self, key: str) -> str | None:
        entry = self._db.get(StorageEntry, key)
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        entry = self._db.get(StorageEntry, key)
        if entry is None:
            self._db.add(StorageEntry(key=key, value=value))
            logger.debug("Created storage entry %s", key)
        else:
            entry.value = value
        self._db.flush()
