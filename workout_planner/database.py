"""Database engine, sessions and migrations for the planner namespace."""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from workout_planner.config import get_settings


PROJECT_ROOT = Path(__file__).resolve().parent.parent


def sqlite_file_path(database_url: str) -> Path | None:
    """Return the database file for file-backed SQLite URLs, else ``None``."""

    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return None
    return Path(url.database)


def engine_options(database_url: str) -> dict[str, Any]:
    """Extra ``create_engine`` arguments for the configured backend."""

    if make_url(database_url).get_backend_name() == "sqlite":
        # Request handlers and their session dependency may run on different worker threads.
        return {"connect_args": {"check_same_thread": False}}
    return {}


settings = get_settings()

_db_file = sqlite_file_path(settings.database_url)
if _db_file is not None:
    _db_file.parent.mkdir(parents=True, exist_ok=True)

engine = create_engine(
    settings.database_url,
    echo=settings.debug,
    future=True,
    **engine_options(settings.database_url),
)


class Base(DeclarativeBase):
    """Declarative base for SQLAlchemy models."""


SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@contextmanager
def session_scope() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on any error."""

    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_db() -> Iterator[Session]:
    """FastAPI dependency: one transactional session per request."""
    with session_scope() as db:
        yield db


def _alembic_config() -> Config:
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", settings.database_url)
    return cfg


def run_migrations(target_revision: str = "head") -> None:
    """Bring the ``storage_entries`` schema up to ``target_revision``."""

    command.upgrade(_alembic_config(), target_revision)
