"""Logging setup shared by the web app and the maintenance scripts."""
from __future__ import annotations

import logging
from logging.config import dictConfig
from pathlib import Path

from pydantic import ValidationError

from workout_planner.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILE_NAME = "workout_planner.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

# Third-party loggers that are noisy at INFO/DEBUG.
QUIET_LOGGERS = ("urllib3", "sqlalchemy.engine", "alembic.runtime.migration")

_configured = False


def build_logging_config(log_dir: Path, level: str, debug: bool = False) -> dict:
    """dictConfig payload: console plus a size-rotated file under ``log_dir``."""

    quiet_level = level if debug else "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": str(log_dir / LOG_FILE_NAME),
                "maxBytes": LOG_FILE_MAX_BYTES,
                "backupCount": LOG_FILE_BACKUPS,
                "encoding": "utf-8",
                "formatter": "standard",
                "level": level,
            },
        },
        "loggers": {
            "workout_planner": {"level": level},
            "uvicorn.access": {"level": level},
            **{name: {"level": quiet_level} for name in QUIET_LOGGERS},
        },
        "root": {
            "level": level,
            "handlers": ["console", "file"],
        },
    }


def configure_logging(level: str | None = None) -> None:
    """Configure logging once per process; ``level`` overrides LOG_LEVEL."""

    global _configured
    if _configured:
        return

    try:
        settings = get_settings()
        log_dir, configured_level, debug = settings.log_dir, settings.log_level, settings.debug
    except ValidationError:
        # Scripts that only touch the planner can run without Strava credentials.
        log_dir, configured_level, debug = Path("logs"), "INFO", False
    log_dir.mkdir(parents=True, exist_ok=True)

    effective = (level or configured_level).upper()
    dictConfig(build_logging_config(log_dir, effective, debug))
    logging.getLogger(__name__).debug("Logging configured at %s in %s", effective, log_dir)
    _configured = True
