"""Daily habit entry: one row per user per calendar date."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, ClassVar, Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel

from ..constants import STUDY_BLOCKS_COUNT, WATER_BOTTLES_COUNT
from ..services.scoring import calculate_daily_score

HABIT_COLUMNS = ("study_blocks", "reading", "pushups", "meditation", "water_bottles", "notes")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def default_entry_payload() -> dict[str, Any]:
    """Habit fields of a fresh, all-unchecked day."""

    return {
        "study_blocks": [{"checked": False, "topic": ""} for _ in range(STUDY_BLOCKS_COUNT)],
        "reading": {"checked": False, "bookName": "", "pages": 0},
        "pushups": {"set1": False, "set2": False, "set3": False, "extras": 0},
        "meditation": {"checked": False, "method": "", "duration": 0},
        "water_bottles": [False] * WATER_BOTTLES_COUNT,
        "notes": {"morning": "", "evening": "", "general": ""},
    }


class DailyEntry(SQLModel, table=True):
    """Habit record for a single calendar date.

    ``daily_score`` and ``is_complete`` are a cache of the habit columns and
    must be refreshed via ``refresh_score`` before every write.
    """

    __tablename__: ClassVar[str] = "daily_entry"
    __table_args__ = (UniqueConstraint("user_id", "entry_date", name="uq_daily_entry_user_date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="profile.id", nullable=False, index=True)
    entry_date: date = Field(nullable=False, index=True)

    study_blocks: list[dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    reading: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    pushups: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    meditation: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    water_bottles: list[bool] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    notes: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    daily_score: int = Field(default=0, nullable=False)
    is_complete: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=_utcnow, nullable=False)

    @classmethod
    def new_default(cls, user_id: int, entry_date: date) -> DailyEntry:
        """Create the unsaved default entry for ``entry_date``."""

        entry = cls(user_id=user_id, entry_date=entry_date, **default_entry_payload())
        entry.refresh_score()
        return entry

    def refresh_score(self) -> int:
        """Recompute the cached score from the habit columns."""

        self.daily_score = calculate_daily_score(self)
        self.is_complete = self.daily_score == 5
        return self.daily_score

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "user_id": self.user_id,
            "entry_date": self.entry_date.isoformat(),
            "daily_score": self.daily_score,
            "is_complete": self.is_complete,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        for column in HABIT_COLUMNS:
            payload[column] = getattr(self, column)
        return payload
