from __future__ import annotations

from datetime import date, datetime, time, timedelta


def slot_bounds(day: date, start: time, duration_minutes: int) -> tuple[datetime, datetime]:
    begin = datetime.combine(day, start)
    return begin, begin + timedelta(minutes=duration_minutes)


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """Half-open interval overlap: touching slots do not overlap."""
    return not (a_end <= b_start or a_start >= b_end)
