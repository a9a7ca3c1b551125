"""JSON API driving the weekly planner page."""
from __future__ import annotations

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from workout_planner.config import get_settings
from workout_planner.database import get_db
from workout_planner.models.schemas import NavigateRequest, WeekView, WorkoutRecord, WorkoutUpdate
from workout_planner.services.calendar_renderer import build_week_view, save_card
from workout_planner.services.storage import SqlAlchemyStore
from workout_planner.services.week_navigator import WeekNavigator, from_timestamp_ms
from workout_planner.services.workout_store import WorkoutStore


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/planner", tags=["planner"])


def get_navigator(db: Annotated[Session, Depends(get_db)]) -> WeekNavigator:
    return WeekNavigator(SqlAlchemyStore(db), tz=get_settings().tzinfo)


def get_workout_store(db: Annotated[Session, Depends(get_db)]) -> WorkoutStore:
    return WorkoutStore(SqlAlchemyStore(db))


def _day_from_timestamp(timestamp: int) -> date:
    try:
        return from_timestamp_ms(timestamp, get_settings().tzinfo).date()
    except (ValueError, OverflowError, OSError):
        raise HTTPException(status_code=400, detail=f"Invalid day timestamp: {timestamp}")


@router.get("/week", response_model=WeekView)
async def get_week(
    navigator: Annotated[WeekNavigator, Depends(get_navigator)],
    workouts: Annotated[WorkoutStore, Depends(get_workout_store)],
    edit: bool = False,
):
    """Return the persisted current week, seeding any day seen for the first time."""
    state = navigator.load_current_week(edit_mode=edit)
    return build_week_view(workouts, state)


@router.post("/week/navigate", response_model=WeekView)
async def navigate_week(
    body: NavigateRequest,
    navigator: Annotated[WeekNavigator, Depends(get_navigator)],
    workouts: Annotated[WorkoutStore, Depends(get_workout_store)],
    edit: bool = False,
):
    """
    Move the displayed week by ``delta_weeks`` (-1 previous, +1 next).

    Returns:
        WeekView: the newly displayed week, fully re-rendered
    """
    if body.delta_weeks == 0:
        raise HTTPException(status_code=400, detail="delta_weeks must be non-zero")

    state = navigator.load_current_week(edit_mode=edit)
    state = navigator.advance(state, body.delta_weeks)
    return build_week_view(workouts, state)


@router.get("/workouts/{timestamp}", response_model=WorkoutRecord)
async def get_workout(
    timestamp: int,
    workouts: Annotated[WorkoutStore, Depends(get_workout_store)],
):
    """Return the workout stored for the day containing ``timestamp`` (ms)."""
    return workouts.load(_day_from_timestamp(timestamp))


@router.put("/workouts/{timestamp}", response_model=WeekView)
async def update_workout(
    timestamp: int,
    body: WorkoutUpdate,
    navigator: Annotated[WeekNavigator, Depends(get_navigator)],
    workouts: Annotated[WorkoutStore, Depends(get_workout_store)],
    edit: bool = False,
):
    """Save one day card and return the re-rendered current week."""
    day = _day_from_timestamp(timestamp)
    state = navigator.load_current_week(edit_mode=edit)
    return save_card(workouts, state, day, body)
