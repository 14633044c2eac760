from __future__ import annotations

import re
from datetime import date, datetime, time

from app.application.exceptions import InvalidArgumentError

DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%d.%m.%Y")

TIME_PATTERNS = [
    r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\s*(am|pm)?$",
    r"^(\d{1,2})\s*(am|pm)$",
]


def parse_booking_date(value: date | str, field: str = "booking_date") -> date:
    """Parse a calendar date. Accepts date objects, ISO strings and a few common forms."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    normalized = (value or "").strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(normalized, fmt).date()
        except ValueError:
            continue
    raise InvalidArgumentError(field, value)


def parse_booking_time(value: time | str, field: str = "booking_time") -> time:
    """Parse a time of day such as "14:00", "09:30:00", "9:30 am" or "2pm"."""
    if isinstance(value, time):
        return value
    normalized = (value or "").lower().strip()

    for pattern in TIME_PATTERNS:
        match = re.match(pattern, normalized)
        if not match:
            continue
        groups = match.groups()
        hour = int(groups[0])
        am_pm = groups[-1] if groups[-1] in ("am", "pm") else None
        minute = int(groups[1]) if len(groups) > 2 and groups[1] else 0
        second = int(groups[2]) if len(groups) > 3 and groups[2] else 0

        if am_pm:
            if not 1 <= hour <= 12:
                break
            if am_pm == "pm" and hour != 12:
                hour += 12
            elif am_pm == "am" and hour == 12:
                hour = 0

        if 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59:
            return time(hour, minute, second)
        break

    raise InvalidArgumentError(field, value)
