"""SQLModel implementation of the weekly review repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.review import WeeklyReview

_EDITABLE_FIELDS = ("review_date", "days_hit_all", "what_helped", "what_blocked", "next_week_change")


class SQLModelWeeklyReviewRepository:
    """SQLModel-based weekly review repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def list_for_user(self, user_id: int) -> list[WeeklyReview]:
        """List reviews ordered by week number."""
        with self.session_factory() as session:
            statement = (
                select(WeeklyReview)
                .where(WeeklyReview.user_id == user_id)
                .order_by(WeeklyReview.week_number)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def get_for_week(self, user_id: int, week_number: int) -> Optional[WeeklyReview]:
        """Retrieve the review for one arc week."""
        with self.session_factory() as session:
            obj = session.exec(
                select(WeeklyReview)
                .where(WeeklyReview.user_id == user_id)
                .where(WeeklyReview.week_number == week_number)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def upsert(self, review: WeeklyReview) -> tuple[WeeklyReview, bool]:
        """Create or update the review for its week; the flag is True on create."""
        with self.session_factory() as session:
            existing = session.exec(
                select(WeeklyReview)
                .where(WeeklyReview.user_id == review.user_id)
                .where(WeeklyReview.week_number == review.week_number)
            ).first()

            if existing is not None:
                for name in _EDITABLE_FIELDS:
                    setattr(existing, name, getattr(review, name))
                target = existing
            else:
                target = review

            session.add(target)
            session.commit()
            session.refresh(target)
            session.expunge(target)
            return target, existing is None
