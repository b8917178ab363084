"""Daily entry repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.daily_entry import DailyEntry


class DailyEntryRepository(Protocol):
    """Repository for daily entries keyed by (user, calendar date)."""

    def get_by_date(self, user_id: int, entry_date: date) -> Optional[DailyEntry]:
        """Retrieve the entry for one date."""
        ...

    def list_range(self, user_id: int, start: date, end: date) -> list[DailyEntry]:
        """List entries between two dates inclusive, oldest first."""
        ...

    def list_since(self, user_id: int, start: date) -> list[DailyEntry]:
        """List entries on or after ``start``, oldest first."""
        ...

    def list_all(self, user_id: int) -> list[DailyEntry]:
        """List every entry of a user, oldest first."""
        ...

    def upsert(self, entry: DailyEntry) -> DailyEntry:
        """Insert or update the entry for its (user, date), recomputing the score."""
        ...

    def score_map(self, user_id: int, start: date, end: date) -> dict[str, int]:
        """Map ``YYYY-MM-DD`` to cached score for entries in the range."""
        ...
