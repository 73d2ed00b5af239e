"""Billing cadence policy layered on top of monthly due-date resolution"""

from datetime import date
from typing import List, Optional
from billday.domain.models import CalendarMonth
from billday.domain.months import shift_month
from billday.domain.scheduling import due_date_for_month, next_due_date
from billday.domain.exceptions import InvalidBillCycleError

ON_DEMAND = 0


def validate_bill_cycle(bill_cycle: int) -> int:
    """Return the cycle unchanged, rejecting negative month counts"""
    if bill_cycle < 0:
        raise InvalidBillCycleError(f"Bill cycle must be 0 or greater, got {bill_cycle}")
    return bill_cycle


def is_cycle_month(anchor: CalendarMonth, period: CalendarMonth, bill_cycle: int) -> bool:
    """
    Whether a month is a billing month for a cadence anchored at `anchor`.

    On-demand bills (cycle 0) are never scheduled, and nothing is due before
    the anchor month.
    """
    if validate_bill_cycle(bill_cycle) == ON_DEMAND:
        return False
    if period < anchor:
        return False
    return (period.index - anchor.index) % bill_cycle == 0


def next_billing_month(
    last_paid: Optional[CalendarMonth],
    bill_cycle: int,
    current: CalendarMonth,
) -> CalendarMonth:
    """Billing month following the last paid one, or the current month if nothing was paid"""
    validate_bill_cycle(bill_cycle)
    if last_paid is None:
        return current
    return shift_month(last_paid, bill_cycle)


def due_date_after_payment(
    bill_day: int,
    bill_cycle: int,
    last_paid: Optional[CalendarMonth],
    current: CalendarMonth,
) -> date:
    """
    Next due date of a cyclic bill given its last paid month.

    Example:
        bill_day=31, bill_cycle=3, last paid 2025-11 -> 2026-02-28
    """
    period = next_billing_month(last_paid, bill_cycle, current)
    return due_date_for_month(period.year, period.month, bill_day)


def upcoming_due_dates(
    start: date,
    recurring_day: int,
    bill_cycle: int = 1,
    count: int = 12,
    anchor: Optional[CalendarMonth] = None,
) -> List[date]:
    """
    Successive due dates from the next one on or after `start`.

    Steps `bill_cycle` months between entries; on-demand bills (cycle 0)
    are listed monthly. With an `anchor` (e.g. the last paid month) the
    first entry moves forward to the next month on that cadence.

    Example:
        start=2026-04-10, day 15, cycle 3, anchor 2026-02 -> 2026-05-15, 2026-08-15, ...
    """
    step = validate_bill_cycle(bill_cycle) or 1
    if count <= 0:
        return []

    period = CalendarMonth.of(next_due_date(start, recurring_day))
    if anchor is not None and bill_cycle > ON_DEMAND:
        period = max(period, anchor)
        if not is_cycle_month(anchor, period, bill_cycle):
            period = shift_month(period, bill_cycle - (period.index - anchor.index) % bill_cycle)

    due_dates = []
    for i in range(count):
        billing_month = shift_month(period, i * step)
        due_dates.append(due_date_for_month(billing_month.year, billing_month.month, recurring_day))

    return due_dates
