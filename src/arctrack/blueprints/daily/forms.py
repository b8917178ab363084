"""Daily entry form definitions."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..forms import sanitize_text

NOTE_MAX_LENGTH = 2000


class StudyBlockForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    checked: bool = False
    topic: str = Field(default="", max_length=100)


class ReadingForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    checked: bool = False
    bookName: str = Field(default="", max_length=100)
    pages: int = Field(default=0, ge=0, le=1000)


class PushupsForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    set1: bool = False
    set2: bool = False
    set3: bool = False
    extras: int = Field(default=0, ge=0, le=100)


class MeditationForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    checked: bool = False
    method: str = Field(default="", max_length=50)
    duration: int = Field(default=0, ge=0, le=120)


class NotesForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    morning: Optional[str] = None
    evening: Optional[str] = None
    general: Optional[str] = None

    @field_validator("morning", "evening", "general")
    @classmethod
    def clean_text(cls, value: Optional[str]) -> Optional[str]:
        """Strip markup and cap note length."""

        if value is None:
            return value
        return sanitize_text(value, NOTE_MAX_LENGTH)


class DailyEntryUpdateForm(BaseModel):
    """Partial update of a day's habit fields.

    Cached score fields sent by clients are ignored; the score is always
    recomputed server-side.
    """

    model_config = ConfigDict(extra="ignore")

    study_blocks: Optional[list[StudyBlockForm]] = None
    reading: Optional[ReadingForm] = None
    pushups: Optional[PushupsForm] = None
    meditation: Optional[MeditationForm] = None
    water_bottles: Optional[list[bool]] = None
    notes: Optional[NotesForm] = None

    def updates(self) -> dict[str, Any]:
        """Return only the categories present in the request, as JSON-ready data."""

        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


__all__ = ["DailyEntryUpdateForm"]
