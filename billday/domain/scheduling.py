"""Recurring due-date resolution for monthly bills"""

from datetime import date
from billday.domain.models import CalendarMonth
from billday.domain.months import days_in_month, make_date, normalize_month, shift_month
from billday.utils.date_utils import as_date


def due_date_for_month(year: int, month: int, recurring_day: int) -> date:
    """
    Resolve the due date of a recurring bill within one calendar month.

    Rules:
    - recurring_day <= 0 means "no specific day": due on the month's last day
    - otherwise the configured day, clamped to the month's last valid day

    Args:
        year: Calendar year
        month: 1-based month (values outside 1..12 carry into the year)
        recurring_day: Configured day of month, any integer

    Returns:
        Concrete due date inside the requested month

    Example:
        (2026, 2, 31) -> 2026-02-28
        (2026, 4, 31) -> 2026-04-30
        (2026, 2, 0)  -> 2026-02-28
    """
    period = normalize_month(year, month)
    last_day = days_in_month(period.year, period.month)

    if recurring_day <= 0:
        return make_date(period.year, period.month, last_day)

    return make_date(period.year, period.month, min(recurring_day, last_day))


def next_due_date(reference: date, recurring_day: int) -> date:
    """
    Find the next due date on or after the reference date.

    Stays in the reference month while its due date has not passed (the due
    day itself counts as not passed), otherwise advances exactly one month,
    rolling December over to January of the following year. Meant to be
    called once per billing period, so it never looks further ahead.

    Args:
        reference: "As of" date; a datetime is reduced to its calendar date
        recurring_day: Configured day of month, any integer

    Returns:
        The due date in the reference month or the month after it
    """
    today = as_date(reference)
    current = CalendarMonth.of(today)

    due_this_month = due_date_for_month(current.year, current.month, recurring_day)
    if due_this_month >= today:
        return due_this_month

    following = shift_month(current, 1)
    return due_date_for_month(following.year, following.month, recurring_day)
