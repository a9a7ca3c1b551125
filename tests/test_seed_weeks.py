"""Tests for the seed_weeks maintenance script."""
from datetime import date

import pytest

from scripts.seed_weeks import main, parse_args, seed_weeks
from workout_planner.database import session_scope
from workout_planner.services.storage import SqlAlchemyStore
from workout_planner.services.workout_store import WorkoutStore


def test_seed_weeks_seeds_consecutive_weeks(workouts: WorkoutStore):
    summary = seed_weeks(workouts, date(2026, 12, 30), 2)

    assert [label for label, _ in summary] == [
        "Dec 28, 2026 - Jan 3, 2027",
        "Jan 4, 2027 - Jan 10, 2027",
    ]
    assert all(len(keys) == 7 for _, keys in summary)
    assert workouts.load(date(2027, 1, 9)).distance == "22"


def test_seed_weeks_is_idempotent(workouts: WorkoutStore):
    seed_weeks(workouts, date(2026, 10, 19), 1)
    (label, keys), = seed_weeks(workouts, date(2026, 10, 25), 1)

    assert label == "Oct 19, 2026 - Oct 25, 2026"
    assert keys == []


def test_parse_args():
    args = parse_args(["--start", "2026-11-02", "--weeks", "4"])
    assert args.start == date(2026, 11, 2)
    assert args.weeks == 4


def test_main_seeds_database_and_prints_summary(capsys):
    main(["--start", "2026-10-21", "--weeks", "2"])

    output = capsys.readouterr().out
    assert "Week of Oct 19, 2026 - Oct 25, 2026: 7 new" in output
    assert "Week of Oct 26, 2026 - Nov 1, 2026: 7 new" in output

    with session_scope() as db:
        stored = WorkoutStore(SqlAlchemyStore(db)).load(date(2026, 10, 27))
    assert stored.distance == "8"

    main(["--start", "2026-10-21"])
    assert "already seeded" in capsys.readouterr().out


def test_main_rejects_non_positive_week_count():
    with pytest.raises(SystemExit):
        main(["--weeks", "0"])
