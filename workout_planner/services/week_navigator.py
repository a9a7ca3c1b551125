"""Persisted "current week" selection and week-by-week navigation."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable

from workout_planner.services.storage import KeyValueStore
from workout_planner.services.week_calculator import week_range


logger = logging.getLogger(__name__)

CURRENT_WEEK_KEY = "currentWeekDate"


@dataclass(frozen=True)
class PlannerState:
    """Application state threaded through every render call."""

    reference: datetime
    edit_mode: bool = False

    @property
    def timestamp_ms(self) -> int:
        return to_timestamp_ms(self.reference)

    @property
    def range_label(self) -> str:
        return week_range(self.reference)


def to_timestamp_ms(value: datetime) -> int:
    return int(round(value.timestamp() * 1000))


def from_timestamp_ms(value: int, tz: tzinfo) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=tz)


class WeekNavigator:
    """Owns the reference date of the displayed week."""

    def __init__(
        self,
        store: KeyValueStore,
        tz: tzinfo = timezone.utc,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._tz = tz
        self._clock = clock or (lambda: datetime.now(self._tz))

    def load_current_week(self, edit_mode: bool = False) -> PlannerState:
        """Restore the persisted reference date, defaulting to now."""

        stored = self._store.get(CURRENT_WEEK_KEY)
        if stored:
            try:
                reference = from_timestamp_ms(int(stored), self._tz)
            except (ValueError, OverflowError, OSError):
                logger.warning("Ignoring unreadable %s value %r", CURRENT_WEEK_KEY, stored)
            else:
                return PlannerState(reference=reference, edit_mode=edit_mode)

        return PlannerState(reference=self._clock().astimezone(self._tz), edit_mode=edit_mode)

    def save_current_week(self, reference: datetime) -> None:
        self._store.set(CURRENT_WEEK_KEY, str(to_timestamp_ms(reference)))

    def advance(self, state: PlannerState, delta_weeks: int) -> PlannerState:
        """Shift the reference date by whole weeks and persist it."""

        reference = state.reference + timedelta(days=7 * delta_weeks)
        self.save_current_week(reference)
        logger.info("Moved planner %+d week(s) to %s", delta_weeks, week_range(reference))
        return replace(state, reference=reference)

    def previous(self, state: PlannerState) -> PlannerState:
        return self.advance(state, -1)

    def next(self, state: PlannerState) -> PlannerState:
        return self.advance(state, 1)
