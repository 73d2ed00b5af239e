"""Calendar month arithmetic"""

from calendar import monthrange
from datetime import date
from billday.domain.models import CalendarMonth
from billday.domain.exceptions import DateOutOfRangeError


def normalize_month(year: int, month: int) -> CalendarMonth:
    """
    Carry months outside 1..12 into the year component.

    Month 13 of 2026 is January 2027, month 0 of 2026 is December 2025.
    """
    carry, offset = divmod(month - 1, 12)
    return CalendarMonth(year=year + carry, month=offset + 1)


def shift_month(period: CalendarMonth, months: int) -> CalendarMonth:
    """Move a calendar month forward (or backward for negative counts)"""
    return normalize_month(period.year, period.month + months)


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in a month under the proleptic Gregorian calendar.

    February has 29 days in leap years: divisible by 4, and not by 100
    unless also by 400. Works for any integer year.
    """
    period = normalize_month(year, month)
    return monthrange(period.year, period.month)[1]


def make_date(year: int, month: int, day: int) -> date:
    """Build a date, reporting years the date type cannot hold as a domain error"""
    try:
        return date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise DateOutOfRangeError(f"{year:04d}-{month:02d}-{day:02d} is outside the supported calendar") from e
