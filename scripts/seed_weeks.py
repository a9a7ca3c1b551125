"""Seed the default marathon-block workouts for upcoming weeks."""
import argparse
import sys
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import List, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from workout_planner.services.week_calculator import week_days, week_range
from workout_planner.services.workout_store import WorkoutStore


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed default workouts for one or more weeks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Seed the current week
  python scripts/seed_weeks.py

  # Seed the next 4 weeks starting at a given date
  python scripts/seed_weeks.py --start 2026-11-02 --weeks 4
        """
    )
    parser.add_argument(
        "--start",
        type=date.fromisoformat,
        default=date.today(),
        help="Any date inside the first week to seed (YYYY-MM-DD, default: today)",
    )
    parser.add_argument("--weeks", type=int, default=1, help="How many consecutive weeks to seed (default: 1)")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser.parse_args(argv)


def seed_weeks(workouts: WorkoutStore, start: date, weeks: int) -> List[Tuple[str, List[str]]]:
    """Seed ``weeks`` consecutive weeks and return (range label, seeded keys) per week."""
    summary: List[Tuple[str, List[str]]] = []
    for offset in range(weeks):
        reference = start + timedelta(days=7 * offset)
        seeded = workouts.ensure_seeded(week_days(reference))
        summary.append((week_range(reference), seeded))
    return summary


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    if args.weeks < 1:
        print("--weeks must be at least 1")
        sys.exit(1)

    from workout_planner.database import session_scope
    from workout_planner.logging_config import configure_logging
    from workout_planner.services.storage import SqlAlchemyStore

    configure_logging("DEBUG" if args.verbose else None)

    with session_scope() as db:
        summary = seed_weeks(WorkoutStore(SqlAlchemyStore(db)), args.start, args.weeks)

    print(f"Seeded {args.weeks} week(s) at {datetime.now().isoformat(timespec='seconds')}")
    for label, keys in summary:
        status = f"{len(keys)} new" if keys else "already seeded"
        print(f"  Week of {label}: {status}")


if __name__ == "__main__":
    main()
