"""SQLModel implementation of the daily entry repository."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.daily_entry import HABIT_COLUMNS, DailyEntry

logger = logging.getLogger("arctrack.infra.daily_entry")


class SQLModelDailyEntryRepository:
    """SQLModel-based daily entry repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_date(self, user_id: int, entry_date: date) -> Optional[DailyEntry]:
        """Retrieve the entry for one date."""
        with self.session_factory() as session:
            obj = session.exec(
                select(DailyEntry)
                .where(DailyEntry.user_id == user_id)
                .where(DailyEntry.entry_date == entry_date)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_range(self, user_id: int, start: date, end: date) -> list[DailyEntry]:
        """List entries between two dates inclusive, oldest first."""
        with self.session_factory() as session:
            statement = (
                select(DailyEntry)
                .where(DailyEntry.user_id == user_id)
                .where(DailyEntry.entry_date >= start)
                .where(DailyEntry.entry_date <= end)
                .order_by(DailyEntry.entry_date)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def list_since(self, user_id: int, start: date) -> list[DailyEntry]:
        """List entries on or after ``start``, oldest first."""
        with self.session_factory() as session:
            statement = (
                select(DailyEntry)
                .where(DailyEntry.user_id == user_id)
                .where(DailyEntry.entry_date >= start)
                .order_by(DailyEntry.entry_date)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def list_all(self, user_id: int) -> list[DailyEntry]:
        """List every entry of a user, oldest first."""
        with self.session_factory() as session:
            statement = (
                select(DailyEntry)
                .where(DailyEntry.user_id == user_id)
                .order_by(DailyEntry.entry_date)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def upsert(self, entry: DailyEntry) -> DailyEntry:
        """Insert or update the entry for its (user, date), recomputing the score."""
        with self.session_factory() as session:
            existing = session.exec(
                select(DailyEntry)
                .where(DailyEntry.user_id == entry.user_id)
                .where(DailyEntry.entry_date == entry.entry_date)
            ).first()

            target = existing or entry
            if existing is not None:
                for column in HABIT_COLUMNS:
                    setattr(existing, column, getattr(entry, column))
            target.refresh_score()
            target.updated_at = datetime.now(timezone.utc)

            session.add(target)
            session.commit()
            session.refresh(target)
            session.expunge(target)
            logger.info(
                "Saved daily entry",
                extra={
                    "user_id": target.user_id,
                    "entry_date": target.entry_date.isoformat(),
                    "daily_score": target.daily_score,
                    "was_created": existing is None,
                },
            )
            return target

    def score_map(self, user_id: int, start: date, end: date) -> dict[str, int]:
        """Map ``YYYY-MM-DD`` to cached score for entries in the range."""
        return {
            entry.entry_date.isoformat(): entry.daily_score
            for entry in self.list_range(user_id, start, end)
        }
