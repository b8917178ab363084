"""User profile: timezone and arc anchor."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..constants import DEFAULT_TIMEZONE, TOTAL_DAYS


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Profile(SQLModel, table=True):
    """Per-user settings supplied at onboarding."""

    __tablename__: ClassVar[str] = "profile"

    id: Optional[int] = Field(default=None, primary_key=True)
    external_id: str = Field(nullable=False, unique=True, index=True, max_length=128)
    email: str = Field(default="", max_length=255)
    timezone: str = Field(default=DEFAULT_TIMEZONE, nullable=False, max_length=64)
    arc_start_date: date = Field(default_factory=date.today, nullable=False)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=_utcnow, nullable=False)

    @property
    def arc_end_date(self) -> date:
        """Exclusive end of the arc."""

        return self.arc_start_date + timedelta(days=TOTAL_DAYS)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "external_id": self.external_id,
            "email": self.email,
            "timezone": self.timezone,
            "arc_start_date": self.arc_start_date.isoformat(),
            "arc_end_date": self.arc_end_date.isoformat(),
        }
