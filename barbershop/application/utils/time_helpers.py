from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta


def minutes_of_day(instant: datetime) -> int:
    """Minutes elapsed since local midnight (seconds are ignored)."""
    return instant.hour * 60 + instant.minute


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """First and last representable instant of `day`."""
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def week_bounds(first_day: date) -> tuple[datetime, datetime]:
    start, _ = day_bounds(first_day)
    _, end = day_bounds(first_day + timedelta(days=6))
    return start, end


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    last_day = calendar.monthrange(year, month)[1]
    start, _ = day_bounds(date(year, month, 1))
    _, end = day_bounds(date(year, month, last_day))
    return start, end
