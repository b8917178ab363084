"""Weekly review repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.review import WeeklyReview


class WeeklyReviewRepository(Protocol):
    """Repository for weekly reviews."""

    def list_for_user(self, user_id: int) -> list[WeeklyReview]:
        """List reviews ordered by week number."""
        ...

    def get_for_week(self, user_id: int, week_number: int) -> Optional[WeeklyReview]:
        """Retrieve the review for one arc week."""
        ...

    def upsert(self, review: WeeklyReview) -> tuple[WeeklyReview, bool]:
        """Create or update the review for its week; the flag is True on create."""
        ...
