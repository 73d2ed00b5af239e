"""Date manipulation utilities"""

from datetime import date, datetime, timedelta


def as_date(value: date) -> date:
    """Drop any time-of-day component (datetime -> date), leaving plain dates untouched"""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative when end is earlier)"""
    return (as_date(end) - as_date(start)).days


def add_days(from_date: date, days: int) -> date:
    """Add calendar days to a date"""
    return as_date(from_date) + timedelta(days=days)
