"""Date manipulation utilities"""

import calendar
from datetime import date
from typing import List, Sequence


def day_span(dates: Sequence[date]) -> int:
    """Days between the earliest and latest date (0 for fewer than two dates)"""
    if len(dates) < 2:
        return 0
    return (max(dates) - min(dates)).days


def day_gaps(sorted_dates: Sequence[date]) -> List[int]:
    """Consecutive day gaps of an ascending date sequence"""
    return [(later - earlier).days for earlier, later in zip(sorted_dates, sorted_dates[1:])]


def subtract_months(from_date: date, months: int) -> date:
    """Go back N calendar months, clamping the day to the target month's length"""
    month_index = from_date.year * 12 + (from_date.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(from_date.day, last_day))


def month_key(day: date) -> str:
    """YYYY-MM bucket for a date"""
    return f"{day.year:04d}-{day.month:02d}"
