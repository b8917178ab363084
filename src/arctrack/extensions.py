"""Database and repository wiring for the Flask application."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .errors import ConfigurationError
from .infra.database import bootstrap_database
from .infra.repositories import (
    SQLModelDailyEntryRepository,
    SQLModelProfileRepository,
    SQLModelWeeklyReviewRepository,
)

EXTENSION_KEY = "arctrack"


def init_db(app: Flask) -> None:
    """Initialize the SQLModel engine and session factory for the app."""

    config: BaseConfig = app.config["ARCTRACK_CONFIG"]
    engine, session_factory = bootstrap_database(config)
    app.extensions[EXTENSION_KEY] = {
        "engine": engine,
        "session_factory": session_factory,
    }


def _state() -> dict:
    state = current_app.extensions.get(EXTENSION_KEY)
    if state is None:
        raise ConfigurationError("Database engine not initialized")
    return state


def get_engine():
    """Return the initialized SQLModel engine."""

    return _state()["engine"]


def get_session_factory():
    return _state()["session_factory"]


def entry_repository() -> SQLModelDailyEntryRepository:
    return SQLModelDailyEntryRepository(get_session_factory())


def profile_repository() -> SQLModelProfileRepository:
    config: BaseConfig = current_app.config["ARCTRACK_CONFIG"]
    return SQLModelProfileRepository(
        get_session_factory(), default_timezone=config.DEFAULT_TIMEZONE
    )


def review_repository() -> SQLModelWeeklyReviewRepository:
    return SQLModelWeeklyReviewRepository(get_session_factory())
