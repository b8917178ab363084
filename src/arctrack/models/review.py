"""Weekly reflection recorded at the end of each arc week."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, ClassVar, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class WeeklyReview(SQLModel, table=True):
    """One review per user per arc week."""

    __tablename__: ClassVar[str] = "weekly_review"
    __table_args__ = (UniqueConstraint("user_id", "week_number", name="uq_weekly_review_user_week"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="profile.id", nullable=False, index=True)
    week_number: int = Field(nullable=False, ge=1, le=13)
    review_date: date = Field(nullable=False)
    days_hit_all: int = Field(default=0, nullable=False, ge=0, le=7)
    what_helped: Optional[str] = Field(default=None, max_length=5000)
    what_blocked: Optional[str] = Field(default=None, max_length=5000)
    next_week_change: Optional[str] = Field(default=None, max_length=5000)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "week_number": self.week_number,
            "review_date": self.review_date.isoformat(),
            "days_hit_all": self.days_hit_all,
            "what_helped": self.what_helped,
            "what_blocked": self.what_blocked,
            "next_week_change": self.next_week_change,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
