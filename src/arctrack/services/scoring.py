"""Daily scoring and per-category completion aggregation.

Each of the five categories is worth exactly one point with no partial
credit. The same predicates back the daily score, the completion percentages
and the incomplete-task analysis, so the server update path and any local
recomputation always agree on a record's score.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from ..constants import CATEGORIES, DAILY_MAX_SCORE, STUDY_BLOCKS_COUNT, WATER_BOTTLES_COUNT
from ..domain.records import HabitRecord

logger = logging.getLogger("arctrack.services.scoring")


def study_complete(record: HabitRecord) -> bool:
    """All study blocks checked, and exactly four of them."""

    blocks = record.study_blocks
    if blocks is None or len(blocks) != STUDY_BLOCKS_COUNT:
        return False
    return all(block.checked for block in blocks)


def reading_complete(record: HabitRecord) -> bool:
    return record.reading is not None and record.reading.checked


def pushups_complete(record: HabitRecord) -> bool:
    # extras never count towards the point
    pushups = record.pushups
    return pushups is not None and pushups.set1 and pushups.set2 and pushups.set3


def meditation_complete(record: HabitRecord) -> bool:
    return record.meditation is not None and record.meditation.checked


def water_complete(record: HabitRecord) -> bool:
    """All bottles drunk, and exactly eight of them."""

    bottles = record.water_bottles
    if bottles is None or len(bottles) != WATER_BOTTLES_COUNT:
        return False
    return all(bottles)


CATEGORY_PREDICATES: dict[str, Callable[[HabitRecord], bool]] = {
    "study": study_complete,
    "reading": reading_complete,
    "pushups": pushups_complete,
    "meditation": meditation_complete,
    "water": water_complete,
}


def category_results(entry: Any) -> dict[str, bool]:
    """Return the completion flag of every category for one entry."""

    record = HabitRecord.from_mapping(entry)
    return {name: CATEGORY_PREDICATES[name](record) for name in CATEGORIES}


def calculate_daily_score(entry: Any) -> int:
    """Return the 0-5 score for a (possibly partial) day record."""

    record = HabitRecord.from_mapping(entry)
    return sum(1 for predicate in CATEGORY_PREDICATES.values() if predicate(record))


def is_day_complete(entry: Any) -> bool:
    """A perfect day hits all five targets."""

    return calculate_daily_score(entry) == DAILY_MAX_SCORE


def _round_half_up_percent(part: int, whole: int) -> int:
    # Integer arithmetic keeps .5 boundaries exact.
    return (200 * part + whole) // (2 * whole)


def calculate_target_completion(entries: Iterable[Any], category: str) -> int:
    """Percentage (0-100) of entries where ``category`` was fully satisfied.

    Unknown category keys yield 0, matching the behaviour for an empty range.
    """

    rows = list(entries)
    if not rows:
        return 0

    predicate = CATEGORY_PREDICATES.get(category)
    if predicate is None:
        logger.warning("Unknown completion category requested", extra={"category": category})
        return 0

    completed = sum(1 for row in rows if predicate(HabitRecord.from_mapping(row)))
    return _round_half_up_percent(completed, len(rows))


def calculate_all_target_completions(entries: Iterable[Any]) -> dict[str, int]:
    """Completion percentage for every category over the same entries."""

    rows = list(entries)
    return {name: calculate_target_completion(rows, name) for name in CATEGORIES}


__all__ = [
    "CATEGORY_PREDICATES",
    "calculate_all_target_completions",
    "calculate_daily_score",
    "calculate_target_completion",
    "category_results",
    "is_day_complete",
    "meditation_complete",
    "pushups_complete",
    "reading_complete",
    "study_complete",
    "water_complete",
]
