"""Per-day workout persistence on top of a key-value store."""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, List

from pydantic import ValidationError

from workout_planner.models.schemas import WorkoutRecord
from workout_planner.models.workout_library import DEFAULT_WEEK_PLAN
from workout_planner.services.storage import KeyValueStore
from workout_planner.services.week_calculator import DayDescriptor, format_date


logger = logging.getLogger(__name__)

STORAGE_KEY_PREFIX = "workout_"


def storage_key(day: date) -> str:
    """Key for a calendar day; identical whichever week view loaded it."""

    if isinstance(day, datetime):
        day = day.date()
    return f"{STORAGE_KEY_PREFIX}{format_date(day)}"


def default_workout(day_name: str) -> WorkoutRecord:
    """Seed record for a weekday name, or an empty record for unknown names."""

    preset = DEFAULT_WEEK_PLAN.get(day_name)
    if preset is None:
        return WorkoutRecord()
    return WorkoutRecord(**preset)


class WorkoutStore:
    """Load, save and seed workout records keyed by calendar day."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def ensure_seeded(self, days: Iterable[DayDescriptor]) -> List[str]:
        """Write defaults for every day with no stored value; return the seeded keys."""

        seeded: List[str] = []
        for day in days:
            key = storage_key(day.date)
            if self._store.get(key):
                continue
            self._store.set(key, default_workout(day.name).model_dump_json())
            seeded.append(key)

        if seeded:
            logger.info("Seeded %d default workouts: %s", len(seeded), ", ".join(seeded))
        return seeded

    def load(self, day: date) -> WorkoutRecord:
        """Return the stored record, or an empty one when absent or unreadable."""

        key = storage_key(day)
        payload = self._store.get(key)
        if not payload:
            return WorkoutRecord()

        try:
            return WorkoutRecord.model_validate_json(payload)
        except ValidationError:
            logger.warning("Ignoring unreadable workout payload at %s", key)
            return WorkoutRecord()

    def save(self, day: date, record: WorkoutRecord) -> None:
        """Overwrite the record for ``day`` unconditionally."""

        key = storage_key(day)
        self._store.set(key, record.model_dump_json())
        logger.info("Saved workout %s (empty=%s)", key, record.is_empty)
