"""Due bill classification - joins bill types with their payment records"""

from datetime import date
from typing import Iterable, List, Optional
from billday.domain.models import BillPayment, BillType, CalendarMonth, DueBill, DueStatus
from billday.domain.cycles import ON_DEMAND, due_date_after_payment
from billday.utils.date_utils import days_between

_STATUS_PRIORITY = {DueStatus.OVERDUE: 0, DueStatus.DUE_SOON: 1, DueStatus.UPCOMING: 2}


def latest_payment(bill_type_id: int, payments: Iterable[BillPayment]) -> Optional[BillPayment]:
    """Most recent payment for a bill type by (year, month)"""
    matching = [p for p in payments if p.bill_type_id == bill_type_id]
    if not matching:
        return None
    return max(matching, key=lambda p: p.period)


def has_payment_for(bill_type_id: int, period: CalendarMonth, payments: Iterable[BillPayment]) -> bool:
    return any(p.bill_type_id == bill_type_id and p.period == period for p in payments)


def classify_due_status(days_until_due: int, is_settled: bool, due_soon_days: int) -> DueStatus:
    """
    Map a bill's position relative to today onto a status.

    Settled bills (paid for the period, or not due until a later month)
    are always upcoming.
    """
    if is_settled:
        return DueStatus.UPCOMING
    if days_until_due < 0:
        return DueStatus.OVERDUE
    if days_until_due <= due_soon_days:
        return DueStatus.DUE_SOON
    return DueStatus.UPCOMING


def assess_bill(
    bill: BillType,
    payments: List[BillPayment],
    period: CalendarMonth,
    today: date,
    due_soon_days: int = 7,
) -> DueBill:
    """Resolve the next due date and status of one cyclic bill for the selected month"""
    last_payment = latest_payment(bill.id, payments)
    last_paid = last_payment.period if last_payment else None

    next_due = due_date_after_payment(bill.bill_day, bill.bill_cycle, last_paid, period)
    days_until_due = days_between(today, next_due)

    has_current_payment = has_payment_for(bill.id, period, payments)
    # Due in or before the selected month means it still needs paying
    due_in_period = CalendarMonth.of(next_due) <= period
    is_settled = has_current_payment or not due_in_period

    return DueBill(
        bill_type=bill,
        next_due_date=next_due,
        days_until_due=days_until_due,
        status=classify_due_status(days_until_due, is_settled, due_soon_days),
        has_current_payment=has_current_payment,
        is_settled=is_settled,
        last_payment=last_payment,
    )


def collect_due_bills(
    bills: List[BillType],
    payments: List[BillPayment],
    period: CalendarMonth,
    today: date,
    due_soon_days: int = 7,
) -> List[DueBill]:
    """
    Assess every active cyclic bill for a month.

    Stopped and on-demand bills are skipped. Results are ordered overdue
    first, then due soon, then upcoming, each by days until due.
    """
    due_bills = [
        assess_bill(bill, payments, period, today, due_soon_days)
        for bill in bills
        if not bill.stopped and bill.bill_cycle > ON_DEMAND
    ]
    due_bills.sort(key=lambda b: (_STATUS_PRIORITY[b.status], b.days_until_due))
    return due_bills


def upcoming_bills(due_bills: List[DueBill], limit: int = 5) -> List[DueBill]:
    """Unsettled bills that are not yet overdue, soonest first"""
    pending = [b for b in due_bills if not b.is_settled and b.days_until_due >= 0]
    pending.sort(key=lambda b: b.days_until_due)
    return pending[:limit]


def on_demand_bills(bills: List[BillType]) -> List[BillType]:
    return [b for b in bills if b.bill_cycle == ON_DEMAND and not b.stopped]
