"""Date and timezone resolution for the 90-day arc.

Every consumer that needs "today" for a user goes through
``today_in_timezone`` so that streaks, scorecards and dashboards rendered in
the same response agree on the calendar date. Calendar dates (arc start,
entry dates) are timezone-agnostic and are handled as plain ``date`` values;
only "now" is interpreted in the user's zone.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..constants import DAYS_PER_WEEK, TOTAL_DAYS, TOTAL_WEEKS
from ..errors import InvalidTimezoneError

DateLike = Union[str, date, datetime]

_SECONDS_PER_DAY = 24 * 60 * 60


def resolve_timezone(tz: object) -> ZoneInfo:
    """Return the ``ZoneInfo`` for an IANA identifier or raise ``InvalidTimezoneError``."""

    if not isinstance(tz, str) or not tz.strip():
        raise InvalidTimezoneError(tz)
    try:
        return ZoneInfo(tz.strip())
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidTimezoneError(tz) from exc


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _localize(tz: object, now: Optional[datetime]) -> datetime:
    zone = resolve_timezone(tz)
    moment = now or _utc_now()
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(zone)


def today_in_timezone(tz: object, *, now: Optional[datetime] = None) -> str:
    """Return the current calendar date (``YYYY-MM-DD``) in the given IANA timezone.

    ``now`` may be supplied to pin the instant; naive values are read as UTC.
    """

    return _localize(tz, now).date().isoformat()


def local_hour(tz: object, *, now: Optional[datetime] = None) -> int:
    """Return the wall-clock hour (0-23) in the given timezone."""

    return _localize(tz, now).hour


def is_local_hour(tz: object, hour: int, *, now: Optional[datetime] = None) -> bool:
    """Return True when the wall-clock hour in ``tz`` equals ``hour``."""

    return local_hour(tz, now=now) == hour


def to_date(value: DateLike) -> date:
    """Coerce a ``YYYY-MM-DD`` string, ``date`` or ``datetime`` into a ``date``."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported date value: {value!r}")


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, raising ``ValueError`` when malformed."""

    return date.fromisoformat(value)


def format_date(value: DateLike) -> str:
    """Format a date-like value as ``YYYY-MM-DD``."""

    return to_date(value).isoformat()


def add_days(value: DateLike, days: int) -> str:
    return (to_date(value) + timedelta(days=days)).isoformat()


def arc_end_date(arc_start: DateLike) -> date:
    """Exclusive upper bound of the arc (``arc_start + 90 days``)."""

    return to_date(arc_start) + timedelta(days=TOTAL_DAYS)


def _as_moment(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    return datetime.combine(to_date(value), time.min, tzinfo=timezone.utc)


def _elapsed_days(arc_start: DateLike, current: DateLike) -> int:
    delta = _as_moment(current) - _as_moment(arc_start)
    return math.ceil(abs(delta.total_seconds()) / _SECONDS_PER_DAY)


def day_number(arc_start: DateLike, current: DateLike) -> int:
    """Return ``ceil(|current - arc_start|)`` in days, clamped to ``[0, 90]``.

    Day 0 only occurs when ``current`` equals ``arc_start`` exactly, i.e. the
    arc has not yet completed its first full day.
    """

    return min(_elapsed_days(arc_start, current), TOTAL_DAYS)


def week_number(arc_start: DateLike, current: DateLike) -> int:
    """Return ``ceil(days / 7)`` clamped to ``[1, 13]``; day 0 counts as week 1."""

    weeks = math.ceil(_elapsed_days(arc_start, current) / DAYS_PER_WEEK)
    return max(1, min(weeks, TOTAL_WEEKS))


def is_future_date(value: DateLike, reference_today: DateLike) -> bool:
    """Return True when ``value`` falls strictly after ``reference_today`` (day granularity)."""

    return to_date(value) > to_date(reference_today)


def week_date_range(arc_start: DateLike, week: int) -> tuple[date, date]:
    """Return the first and last calendar dates of the arc's ``week`` (1-based)."""

    start = to_date(arc_start) + timedelta(days=(week - 1) * DAYS_PER_WEEK)
    return start, start + timedelta(days=DAYS_PER_WEEK - 1)


def date_range(start: DateLike, end: DateLike) -> list[date]:
    """Return every date from ``start`` to ``end`` inclusive (empty if reversed)."""

    first, last = to_date(start), to_date(end)
    return [first + timedelta(days=offset) for offset in range((last - first).days + 1)]


__all__ = [
    "add_days",
    "arc_end_date",
    "date_range",
    "day_number",
    "format_date",
    "is_future_date",
    "is_local_hour",
    "local_hour",
    "parse_date",
    "resolve_timezone",
    "to_date",
    "today_in_timezone",
    "week_date_range",
    "week_number",
]
