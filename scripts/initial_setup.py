"""Create the data directory and apply database migrations."""
from pathlib import Path

from workout_planner.database import run_migrations


def main() -> None:
    data_dir = Path("data")
    data_dir.mkdir(exist_ok=True)
    run_migrations()
    print("Workout planner database initialised at", data_dir)


if __name__ == "__main__":
    main()
