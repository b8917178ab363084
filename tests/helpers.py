"""Shared habit payloads and history builders for the test-suite."""

from __future__ import annotations

from datetime import date
from typing import Any

ARC_START = date(2024, 1, 3)  # a Wednesday


def perfect_payload() -> dict[str, Any]:
    """Habit fields of a day where every target was hit."""

    return {
        "study_blocks": [{"checked": True, "topic": f"Topic {i}"} for i in range(4)],
        "reading": {"checked": True, "bookName": "Deep Work", "pages": 20},
        "pushups": {"set1": True, "set2": True, "set3": True, "extras": 0},
        "meditation": {"checked": True, "method": "breath", "duration": 10},
        "water_bottles": [True] * 8,
    }


def empty_payload() -> dict[str, Any]:
    """Habit fields of a fresh, all-unchecked day."""

    return {
        "study_blocks": [{"checked": False, "topic": ""} for _ in range(4)],
        "reading": {"checked": False, "bookName": "", "pages": 0},
        "pushups": {"set1": False, "set2": False, "set3": False, "extras": 0},
        "meditation": {"checked": False, "method": "", "duration": 0},
        "water_bottles": [False] * 8,
    }


def scored(entry_date: date, score: int, **extra: Any) -> dict[str, Any]:
    """Minimal history record as consumed by the streak calculator."""

    return {"entry_date": entry_date, "daily_score": score, **extra}

