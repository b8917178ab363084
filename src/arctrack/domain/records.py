"""Normalised habit records.

Habit fields arrive as loosely-typed JSON blobs (request bodies, JSON columns).
``HabitRecord.from_mapping`` converts them into explicit per-category structs.
A category whose payload has the wrong shape becomes ``None`` and is treated
as incomplete downstream; normalisation itself never raises.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

HABIT_FIELDS = ("study_blocks", "reading", "pushups", "meditation", "water_bottles")


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    if isinstance(value, (int, float)):
        return max(int(value), 0)
    if isinstance(value, str):
        try:
            return max(int(value.strip()), 0)
        except ValueError:
            return 0
    return 0


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


@dataclass(frozen=True, slots=True)
class StudyBlock:
    checked: bool = False
    topic: str = ""

    @classmethod
    def from_raw(cls, raw: Any) -> StudyBlock:
        if isinstance(raw, StudyBlock):
            return raw
        if isinstance(raw, Mapping):
            return cls(checked=bool(raw.get("checked")), topic=_as_str(raw.get("topic")))
        # Anything else is a malformed block: present, but never checked.
        return cls()

    def to_dict(self) -> dict[str, Any]:
        return {"checked": self.checked, "topic": self.topic}


@dataclass(frozen=True, slots=True)
class Reading:
    checked: bool = False
    book_name: str = ""
    pages: int = 0

    @classmethod
    def from_raw(cls, raw: Any) -> Optional[Reading]:
        if isinstance(raw, Reading):
            return raw
        if not isinstance(raw, Mapping):
            return None
        return cls(
            checked=bool(raw.get("checked")),
            book_name=_as_str(raw.get("bookName")),
            pages=_as_int(raw.get("pages")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"checked": self.checked, "bookName": self.book_name, "pages": self.pages}


@dataclass(frozen=True, slots=True)
class Pushups:
    set1: bool = False
    set2: bool = False
    set3: bool = False
    extras: int = 0

    @classmethod
    def from_raw(cls, raw: Any) -> Optional[Pushups]:
        if isinstance(raw, Pushups):
            return raw
        if not isinstance(raw, Mapping):
            return None
        return cls(
            set1=bool(raw.get("set1")),
            set2=bool(raw.get("set2")),
            set3=bool(raw.get("set3")),
            extras=_as_int(raw.get("extras")),
        )

    @property
    def completed_sets(self) -> int:
        return sum(1 for flag in (self.set1, self.set2, self.set3) if flag)

    def to_dict(self) -> dict[str, Any]:
        return {"set1": self.set1, "set2": self.set2, "set3": self.set3, "extras": self.extras}


@dataclass(frozen=True, slots=True)
class Meditation:
    checked: bool = False
    method: str = ""
    duration: int = 0

    @classmethod
    def from_raw(cls, raw: Any) -> Optional[Meditation]:
        if isinstance(raw, Meditation):
            return raw
        if not isinstance(raw, Mapping):
            return None
        return cls(
            checked=bool(raw.get("checked")),
            method=_as_str(raw.get("method")),
            duration=_as_int(raw.get("duration")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"checked": self.checked, "method": self.method, "duration": self.duration}


@dataclass(frozen=True, slots=True)
class HabitRecord:
    """The five scored habit categories of one day."""

    study_blocks: Optional[tuple[StudyBlock, ...]] = None
    reading: Optional[Reading] = None
    pushups: Optional[Pushups] = None
    meditation: Optional[Meditation] = None
    water_bottles: Optional[tuple[bool, ...]] = None

    @classmethod
    def from_mapping(cls, source: Any) -> HabitRecord:
        """Build a record from a mapping or any object exposing the habit attributes."""

        if isinstance(source, HabitRecord):
            return source
        if source is None:
            return cls()

        if isinstance(source, Mapping):
            raw = {name: source.get(name) for name in HABIT_FIELDS}
        else:
            raw = {name: getattr(source, name, None) for name in HABIT_FIELDS}

        study_raw = raw["study_blocks"]
        study = (
            tuple(StudyBlock.from_raw(block) for block in study_raw)
            if _is_sequence(study_raw)
            else None
        )
        water_raw = raw["water_bottles"]
        water = tuple(bool(bottle) for bottle in water_raw) if _is_sequence(water_raw) else None

        return cls(
            study_blocks=study,
            reading=Reading.from_raw(raw["reading"]),
            pushups=Pushups.from_raw(raw["pushups"]),
            meditation=Meditation.from_raw(raw["meditation"]),
            water_bottles=water,
        )


__all__ = [
    "HABIT_FIELDS",
    "HabitRecord",
    "Meditation",
    "Pushups",
    "Reading",
    "StudyBlock",
]
