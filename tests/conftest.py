"""Pytest configuration and shared fixtures for ArcTrack tests.

This module provides database fixtures, test data factories, and a Flask
client for testing the scoring core, repositories and routes without
touching the real app database.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from arctrack.models import DailyEntry, Profile, WeeklyReview  # noqa: F401
from arctrack import config as app_config
from arctrack.infra.repositories import SQLModelDailyEntryRepository, SQLModelProfileRepository
from helpers import ARC_START


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one repositories receive in the app."""

    def factory() -> Session:
        return Session(db_engine, expire_on_commit=False)

    return factory


@pytest.fixture
def entry_repo(session_factory) -> SQLModelDailyEntryRepository:
    return SQLModelDailyEntryRepository(session_factory)


@pytest.fixture
def profile_repo(session_factory) -> SQLModelProfileRepository:
    return SQLModelProfileRepository(session_factory, default_timezone="UTC")


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def profile_factory(profile_repo):
    """Factory for creating persisted profiles."""

    def _create_profile(
        external_id: str = "user-1",
        timezone: str = "UTC",
        arc_start_date: date = ARC_START,
    ) -> Profile:
        return profile_repo.get_or_create(
            external_id,
            f"{external_id}@example.com",
            timezone=timezone,
            arc_start_date=arc_start_date,
        )

    return _create_profile


@pytest.fixture
def profile(profile_factory) -> Profile:
    return profile_factory()


@pytest.fixture
def entry_factory(entry_repo):
    """Factory for creating persisted daily entries.

    Returns:
        Callable: Function that upserts a DailyEntry built from a habit payload
    """

    def _create_entry(owner: Profile, entry_date: date, payload: dict[str, Any] | None = None) -> DailyEntry:
        entry = DailyEntry.new_default(owner.id, entry_date)
        for key, value in (payload or {}).items():
            setattr(entry, key, value)
        return entry_repo.upsert(entry)

    return _create_entry


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Flask app backed by a temporary SQLite database."""

    from arctrack import create_app

    monkeypatch.setenv("ARCTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ARCTRACK_DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("ARCTRACK_DEFAULT_TIMEZONE", "UTC")
    monkeypatch.setenv("ARCTRACK_DEV_MODE", "true")

    flask_app = create_app(config=app_config.TestConfig())
    yield flask_app

    flask_app.extensions["arctrack"]["engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-User-Id": "user-1", "X-User-Email": "user-1@example.com"}
