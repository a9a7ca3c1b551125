"""Monday-start week arithmetic.

All helpers accept either a ``date`` or a ``datetime``. A ``datetime`` keeps
its time of day through the arithmetic, so callers should treat the results as
calendar days rather than precise instants.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, TypeVar

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

DateLike = TypeVar("DateLike", date, datetime)


@dataclass(frozen=True)
class DayDescriptor:
    """One day of a displayed week."""

    name: str
    date: date
    key: str


def format_date(value: date) -> str:
    """Format a day the way it is keyed and labelled, e.g. ``Oct 19, 2026``."""

    return f"{value:%b} {value.day}, {value.year}"


def week_start(value: DateLike) -> DateLike:
    """Return the Monday on or before ``value`` (Sunday maps six days back)."""

    return value - timedelta(days=value.weekday())


def week_end(value: DateLike) -> DateLike:
    return week_start(value) + timedelta(days=6)


def week_range(value: date) -> str:
    """Human-readable ``start - end`` label of the week containing ``value``."""

    return f"{format_date(week_start(value))} - {format_date(week_end(value))}"


def week_days(value: date) -> List[DayDescriptor]:
    """Seven Monday-first descriptors for the week containing ``value``."""

    start = week_start(value)
    days: List[DayDescriptor] = []
    for offset, name in enumerate(DAY_NAMES):
        current = start + timedelta(days=offset)
        day = current.date() if isinstance(current, datetime) else current
        days.append(DayDescriptor(name=name, date=day, key=format_date(day)))
    return days
