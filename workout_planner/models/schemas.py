"""Pydantic models describing stored records and API payloads."""
from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator


class WorkoutRecord(BaseModel):
    """Distance/pace/notes for one calendar day, stored as plain strings."""

    distance: str = ""
    pace: str = ""
    notes: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.distance and not self.pace and not self.notes


class WorkoutUpdate(BaseModel):
    """Raw card inputs submitted by the planner page."""

    distance: str = ""
    pace: str = ""
    notes: str = ""

    @field_validator("distance", "pace", "notes", mode="before")
    @classmethod
    def none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value


class NavigateRequest(BaseModel):
    """Schema for moving the displayed week backwards or forwards."""

    delta_weeks: int = Field(ge=-52, le=52)


class DayCard(BaseModel):
    """View model for one day card in the weekly grid."""

    name: str
    date: date
    key: str
    timestamp: int
    record: WorkoutRecord
    is_empty: bool
    display: dict[str, str]


class WeekView(BaseModel):
    """Fully rendered week: label, edit flag and seven Monday-first cards."""

    range_label: str
    title: str
    reference_timestamp: int
    edit_mode: bool = False
    days: list[DayCard] = []


class TokenExchangeResult(BaseModel):
    """Token payload relayed back to the browser after a successful exchange.

    Values are passed through exactly as Strava sent them.
    """

    access_token: Any = None
    expires_in: Any = None
    refresh_token: Any = None
    athlete: Any = None
