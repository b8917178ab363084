"""Weekly review form definitions."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DAYS_PER_WEEK, TOTAL_WEEKS
from ..forms import sanitize_text

REVIEW_TEXT_MAX_LENGTH = 5000


class WeeklyReviewForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    week_number: int = Field(ge=1, le=TOTAL_WEEKS)
    review_date: date
    days_hit_all: int = Field(default=0, ge=0, le=DAYS_PER_WEEK)
    what_helped: Optional[str] = None
    what_blocked: Optional[str] = None
    next_week_change: Optional[str] = None

    @field_validator("what_helped", "what_blocked", "next_week_change")
    @classmethod
    def clean_text(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return sanitize_text(value, REVIEW_TEXT_MAX_LENGTH) or None


__all__ = ["WeeklyReviewForm"]
