"""Incomplete-task analysis consumed by reminder notifications.

A category is reported as incomplete exactly when its scoring predicate fails,
so reminders never disagree with the daily score.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ..constants import PUSHUP_SETS, STUDY_BLOCKS_COUNT, WATER_BOTTLES_COUNT
from ..domain.records import HabitRecord
from .scoring import (
    meditation_complete,
    pushups_complete,
    reading_complete,
    study_complete,
    water_complete,
)

TOTAL_TASKS = 5

TASK_PRIORITY = {
    "Study Blocks": 5,
    "Reading": 4,
    "Meditation": 3,
    "Pushups": 2,
    "Water Intake": 1,
}


@dataclass(frozen=True, slots=True)
class IncompleteTask:
    name: str
    details: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "details": self.details}


def _study_task(record: HabitRecord) -> IncompleteTask:
    blocks = record.study_blocks
    if blocks is None:
        return IncompleteTask("Study Blocks", f"{STUDY_BLOCKS_COUNT} study blocks need to be completed")
    unchecked = sum(1 for block in blocks if not block.checked)
    if unchecked:
        return IncompleteTask(
            "Study Blocks", f"{unchecked} of {STUDY_BLOCKS_COUNT} study blocks remaining"
        )
    return IncompleteTask(
        "Study Blocks",
        f"{len(blocks)} study blocks logged, exactly {STUDY_BLOCKS_COUNT} are required",
    )


def _pushups_task(record: HabitRecord) -> IncompleteTask:
    pushups = record.pushups
    if pushups is None:
        return IncompleteTask("Pushups", f"{len(PUSHUP_SETS)} pushup sets need to be completed")
    missing = [
        f"Set {index}"
        for index, name in enumerate(PUSHUP_SETS, start=1)
        if not getattr(pushups, name)
    ]
    return IncompleteTask(
        "Pushups",
        f"{', '.join(missing)} not completed ({len(missing)} of {len(PUSHUP_SETS)} sets remaining)",
    )


def _water_task(record: HabitRecord) -> IncompleteTask:
    bottles = record.water_bottles
    if bottles is None:
        return IncompleteTask("Water Intake", f"{WATER_BOTTLES_COUNT} water bottles need to be consumed")
    empty = sum(1 for bottle in bottles if not bottle)
    if empty:
        return IncompleteTask(
            "Water Intake",
            f"{empty} of {WATER_BOTTLES_COUNT} water bottles remaining "
            f"({len(bottles) - empty}/{WATER_BOTTLES_COUNT} completed)",
        )
    return IncompleteTask(
        "Water Intake",
        f"{len(bottles)} water bottles logged, exactly {WATER_BOTTLES_COUNT} are required",
    )


def get_incomplete_tasks(entry: Any) -> list[IncompleteTask]:
    """Describe every category of ``entry`` that does not earn its point."""

    record = HabitRecord.from_mapping(entry)
    tasks: list[IncompleteTask] = []
    if not study_complete(record):
        tasks.append(_study_task(record))
    if not reading_complete(record):
        tasks.append(IncompleteTask("Reading", "Daily reading session not completed"))
    if not pushups_complete(record):
        tasks.append(_pushups_task(record))
    if not meditation_complete(record):
        tasks.append(IncompleteTask("Meditation", "Daily meditation session not completed"))
    if not water_complete(record):
        tasks.append(_water_task(record))
    return tasks


def has_incomplete_tasks(entry: Any) -> bool:
    return bool(get_incomplete_tasks(entry))


def incomplete_tasks_summary(entry: Any) -> dict[str, int]:
    incomplete = len(get_incomplete_tasks(entry))
    completed = TOTAL_TASKS - incomplete
    return {
        "total_tasks": TOTAL_TASKS,
        "completed_tasks": completed,
        "incomplete_tasks": incomplete,
        "completion_rate": (200 * completed + TOTAL_TASKS) // (2 * TOTAL_TASKS),
    }


def should_skip_reminder(entry: Any, threshold: float = 0.8) -> bool:
    """Skip the reminder when the completion rate already meets ``threshold``."""

    return incomplete_tasks_summary(entry)["completion_rate"] >= threshold * 100


def task_completion_details(entry: Any) -> dict[str, Any]:
    """Per-category progress counts, for analytics payloads."""

    record = HabitRecord.from_mapping(entry)
    return {
        "study_blocks": {
            "completed": sum(1 for block in record.study_blocks or () if block.checked),
            "total": STUDY_BLOCKS_COUNT,
        },
        "reading": bool(record.reading and record.reading.checked),
        "pushups": {
            "completed": record.pushups.completed_sets if record.pushups else 0,
            "total": len(PUSHUP_SETS),
        },
        "meditation": bool(record.meditation and record.meditation.checked),
        "water_bottles": {
            "completed": sum(1 for bottle in record.water_bottles or () if bottle),
            "total": WATER_BOTTLES_COUNT,
        },
    }


def format_tasks_for_email(tasks: Iterable[IncompleteTask]) -> str:
    names = [task.name for task in tasks]
    if not names:
        return "All tasks completed!"
    if len(names) == 1:
        return f"You have 1 incomplete task: {names[0]}"
    return f"You have {len(names)} incomplete tasks: {', '.join(names[:-1])} and {names[-1]}"


def prioritize_incomplete_tasks(tasks: Iterable[IncompleteTask]) -> list[IncompleteTask]:
    """Order tasks by reminder priority, highest first (stable for ties)."""

    return sorted(tasks, key=lambda task: TASK_PRIORITY.get(task.name, 0), reverse=True)


__all__ = [
    "IncompleteTask",
    "TASK_PRIORITY",
    "format_tasks_for_email",
    "get_incomplete_tasks",
    "has_incomplete_tasks",
    "incomplete_tasks_summary",
    "prioritize_incomplete_tasks",
    "should_skip_reminder",
    "task_completion_details",
]
