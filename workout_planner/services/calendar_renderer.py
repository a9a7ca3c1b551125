"""Project a week of workout records into the view model the page renders."""
from __future__ import annotations

import logging
from datetime import date, datetime, time

from workout_planner.models.schemas import DayCard, WeekView, WorkoutRecord, WorkoutUpdate
from workout_planner.services.week_calculator import week_days
from workout_planner.services.week_navigator import PlannerState, to_timestamp_ms
from workout_planner.services.workout_store import WorkoutStore


logger = logging.getLogger(__name__)

EMPTY_PLACEHOLDER = "—"
WORKOUT_FIELDS = ("distance", "pace", "notes")


def parse_card_inputs(raw: WorkoutUpdate) -> WorkoutRecord:
    """Turn raw card inputs into a record, trimming surrounding whitespace."""

    return WorkoutRecord(
        distance=raw.distance.strip(),
        pace=raw.pace.strip(),
        notes=raw.notes.strip(),
    )


def _day_timestamp(day: date, state: PlannerState) -> int:
    # Midnight of the day in the reference's timezone.
    return to_timestamp_ms(datetime.combine(day, time.min, tzinfo=state.reference.tzinfo))


def build_day_card(name: str, day: date, key: str, record: WorkoutRecord, state: PlannerState) -> DayCard:
    return DayCard(
        name=name,
        date=day,
        key=key,
        timestamp=_day_timestamp(day, state),
        record=record,
        is_empty=record.is_empty,
        display={field: getattr(record, field) or EMPTY_PLACEHOLDER for field in WORKOUT_FIELDS},
    )


def build_week_view(workouts: WorkoutStore, state: PlannerState) -> WeekView:
    """Seed the displayed week, load its seven records and build the grid."""

    days = week_days(state.reference)
    workouts.ensure_seeded(days)

    cards = [
        build_day_card(day.name, day.date, day.key, workouts.load(day.date), state)
        for day in days
    ]

    return WeekView(
        range_label=state.range_label,
        title=f"Week of {state.range_label}",
        reference_timestamp=state.timestamp_ms,
        edit_mode=state.edit_mode,
        days=cards,
    )


def save_card(workouts: WorkoutStore, state: PlannerState, day: date, raw: WorkoutUpdate) -> WeekView:
    """Persist one card's inputs and re-render the whole week."""

    record = parse_card_inputs(raw)
    workouts.save(day, record)
    return build_week_view(workouts, state)
