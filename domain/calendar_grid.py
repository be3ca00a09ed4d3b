"""Calendar grid bucketing — pure functions, zero external dependencies.

Only stdlib and domain.models imports allowed.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from domain.models import Day


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    return value


def week_start(reference_date):
    """Return the Monday on or before *reference_date*."""
    day = _as_date(reference_date)
    return day - timedelta(days=day.weekday())


def batches_on(day, batches):
    """Batches whose inclusive [start_date, end_date] range contains *day*.

    A batch with start_date after end_date matches no day.
    """
    return tuple(
        b for b in batches
        if _as_date(b.start_date) <= day <= _as_date(b.end_date)
    )


def build_weeks(reference_date: date, batches, week_count: int = 4) -> list[list[Day]]:
    """Build *week_count* Monday-first weeks of Day cells from *reference_date*."""
    today = _as_date(reference_date)
    if week_count <= 0:
        return []
    batches = list(batches)
    first = week_start(today)
    weeks = []
    for i in range(week_count):
        week = []
        for j in range(7):
            day = first + timedelta(days=i * 7 + j)
            week.append(Day(date=day, batches=batches_on(day, batches), is_today=day == today))
        weeks.append(week)
    return weeks
