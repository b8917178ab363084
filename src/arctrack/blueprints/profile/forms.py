"""Profile form definitions."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ...services.dates import resolve_timezone


class ProfileUpdateForm(BaseModel):
    """Editable profile settings."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    timezone: Optional[str] = None
    arc_start_date: Optional[date] = None

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        """Ensure the timezone exists in the tz database."""

        if value is None:
            return value
        resolve_timezone(value)
        return value


__all__ = ["ProfileUpdateForm"]
