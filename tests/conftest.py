"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

_TMP_DIR = Path(tempfile.mkdtemp(prefix="workout-planner-tests-"))

os.environ["STRAVA_CLIENT_ID"] = os.environ.get("STRAVA_CLIENT_ID") or "test-client-id"
os.environ["STRAVA_CLIENT_SECRET"] = os.environ.get("STRAVA_CLIENT_SECRET") or "test-client-secret"
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'planner.db'}"
os.environ["LOG_DIR"] = str(_TMP_DIR / "logs")
os.environ["TIMEZONE"] = "UTC"

from workout_planner.logging_config import configure_logging

configure_logging()

from workout_planner.database import Base, engine, session_scope
from workout_planner.main import app
from workout_planner.models.database_models import StorageEntry
from workout_planner.services.storage import InMemoryStore
from workout_planner.services.workout_store import WorkoutStore

Base.metadata.create_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_storage():
    """Start every test with an empty planner namespace."""

    with session_scope() as db:
        db.query(StorageEntry).delete()
    yield


@pytest.fixture(scope="session")
def test_client() -> TestClient:
    """Provide a FastAPI test client."""

    return TestClient(app)


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def workouts(memory_store: InMemoryStore) -> WorkoutStore:
    return WorkoutStore(memory_store)


@pytest.fixture
def fixed_now() -> datetime:
    """Tuesday, Oct 20 2026 09:30 UTC."""

    return datetime(2026, 10, 20, 9, 30, tzinfo=timezone.utc)
