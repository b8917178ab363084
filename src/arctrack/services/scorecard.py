"""Week-aligned scorecard grid for the whole arc.

The grid starts on the Sunday of the arc's first week: leading weekday columns
before the arc start are padding cells, as are the trailing columns after the
90th day. Depending on the start weekday the 90 real days span 13 or 14 weeks;
the grid is not capped.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Mapping, Optional

from ..constants import DAYS_PER_WEEK, TOTAL_DAYS
from .dates import DateLike, format_date, resolve_timezone, to_date, today_in_timezone

logger = logging.getLogger("arctrack.services.scorecard")


@dataclass(frozen=True, slots=True)
class ScorecardDay:
    date: str
    score: int
    is_future: bool
    is_empty: bool = False

    @classmethod
    def padding(cls) -> ScorecardDay:
        return cls(date="", score=0, is_future=False, is_empty=True)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "date": self.date,
            "score": self.score,
            "isFuture": self.is_future,
        }
        if self.is_empty:
            payload["isEmpty"] = True
        return payload


@dataclass(slots=True)
class ScorecardWeek:
    week_number: int
    days: list[ScorecardDay] = field(default_factory=list)

    @property
    def week_total(self) -> int:
        """Sum of scores for days that are real, already reached and scored."""

        return sum(
            day.score
            for day in self.days
            if not day.is_empty and not day.is_future and day.score > 0
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "weekNumber": self.week_number,
            "days": [day.to_dict() for day in self.days],
            "weekTotal": self.week_total,
        }


@dataclass(slots=True)
class Scorecard:
    weeks: list[ScorecardWeek] = field(default_factory=list)

    @property
    def real_days(self) -> list[ScorecardDay]:
        return [day for week in self.weeks for day in week.days if not day.is_empty]

    def to_dict(self) -> dict[str, Any]:
        return {"weeks": [week.to_dict() for week in self.weeks]}


def sunday_based_weekday(value: DateLike) -> int:
    """Day of week with 0=Sunday .. 6=Saturday."""

    return (to_date(value).weekday() + 1) % DAYS_PER_WEEK


def _normalise_scores(scores: Optional[Mapping[Any, Any]]) -> dict[str, int]:
    normalised: dict[str, int] = {}
    for key, value in (scores or {}).items():
        try:
            day = format_date(key)
        except (TypeError, ValueError):
            continue
        normalised[day] = value if isinstance(value, int) and not isinstance(value, bool) else 0
    return normalised


def build_scorecard(
    arc_start_date: DateLike,
    timezone: str,
    scores: Optional[Mapping[Any, Any]] = None,
    *,
    today: Optional[DateLike] = None,
) -> Scorecard:
    """Build the padded week grid for the arc starting at ``arc_start_date``.

    ``today`` defaults to the current date in ``timezone``; dates after it are
    flagged ``isFuture``. Missing scores default to 0.

    Raises:
        InvalidTimezoneError: if ``timezone`` is not a known IANA identifier.
    """

    resolve_timezone(timezone)
    today_str = format_date(today) if today is not None else today_in_timezone(timezone)
    arc_start = to_date(arc_start_date)
    score_by_date = _normalise_scores(scores)

    leading = sunday_based_weekday(arc_start)
    total_weeks = math.ceil((leading + TOTAL_DAYS) / DAYS_PER_WEEK)

    cells: list[ScorecardDay] = [ScorecardDay.padding() for _ in range(leading)]
    for offset in range(TOTAL_DAYS):
        day_str = (arc_start + timedelta(days=offset)).isoformat()
        cells.append(
            ScorecardDay(
                date=day_str,
                score=score_by_date.get(day_str, 0),
                # ISO strings order the same way as the dates they encode
                is_future=day_str > today_str,
            )
        )
    trailing = total_weeks * DAYS_PER_WEEK - len(cells)
    cells.extend(ScorecardDay.padding() for _ in range(trailing))

    weeks = [
        ScorecardWeek(
            week_number=index + 1,
            days=cells[index * DAYS_PER_WEEK : (index + 1) * DAYS_PER_WEEK],
        )
        for index in range(total_weeks)
    ]
    logger.debug(
        "Built scorecard",
        extra={"arc_start": arc_start.isoformat(), "weeks": total_weeks, "today": today_str},
    )
    return Scorecard(weeks=weeks)


__all__ = ["Scorecard", "ScorecardDay", "ScorecardWeek", "build_scorecard", "sunday_based_weekday"]
