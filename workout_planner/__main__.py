"""Run the planner with uvicorn: ``python -m workout_planner``."""
import uvicorn

from workout_planner.config import get_settings
from workout_planner.logging_config import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging()
    uvicorn.run(
        "workout_planner.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
