"""Reminder selection and message formatting for unpaid bills"""

from datetime import date
from decimal import Decimal
from typing import List
from billday.domain.models import BillDue, BillPayment, BillType, CalendarMonth, Reminder
from billday.domain.scheduling import due_date_for_month
from billday.domain.due_bills import has_payment_for
from billday.domain.exceptions import DateOutOfRangeError
from billday.utils.date_utils import add_days

REMINDER_TITLE = "📋 Bills Due Reminder"


def reminder_target(today: date, days_before: int) -> date:
    """Date the reminder looks ahead to"""
    try:
        return add_days(today, days_before)
    except OverflowError as e:
        raise DateOutOfRangeError(f"{today} + {days_before} days is outside the supported calendar") from e


def bills_due_for_reminder(
    bills: List[BillType],
    payments: List[BillPayment],
    target: date,
) -> List[BillDue]:
    """
    Active bills with a fixed day and no payment for the target's month.

    Due dates are clamped to the target month, so a day-31 bill reminds
    for February 28th rather than spilling into March.
    """
    period = CalendarMonth.of(target)
    return [
        BillDue(bill_type=bill, due_date=due_date_for_month(period.year, period.month, bill.bill_day))
        for bill in bills
        if not bill.stopped and bill.bill_day > 0 and not has_payment_for(bill.id, period, payments)
    ]


def _format_day(day: date) -> str:
    return f"{day.day} {day.strftime('%b')}"


def _format_line(bill: BillDue) -> str:
    line = f"• {bill.bill_type.name}"
    if bill.amount is not None and bill.amount != Decimal("0"):
        line += f" - ${bill.amount}"
    return line


def build_reminder(bills_due: List[BillDue]) -> Reminder:
    """
    Compose the push notification for bills coming due.

    Example:
        one bill     -> "You have 1 bill due on 15 Apr:\\n\\n• Rent - $1200.00"
        three bills  -> "You have 3 bills due soon:\\n\\n• ...\\n• ...\\n• ..."
    """
    if len(bills_due) == 1:
        bill = bills_due[0]
        body = f"You have 1 bill due on {_format_day(bill.due_date)}:\n\n{_format_line(bill)}"
    else:
        ordered = sorted(bills_due, key=lambda b: b.due_date)
        lines = "\n".join(_format_line(b) for b in ordered)
        body = f"You have {len(bills_due)} bills due soon:\n\n{lines}"

    return Reminder(title=REMINDER_TITLE, body=body, bills_due=list(bills_due))
