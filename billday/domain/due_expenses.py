"""Due expense classification - joins recurring expense types with recorded expenses"""

from datetime import date
from typing import Iterable, List, Optional
from billday.domain.models import CalendarMonth, DueExpense, DueStatus, ExpenseItem, ExpenseType
from billday.domain.cycles import ON_DEMAND, next_billing_month
from billday.domain.scheduling import due_date_for_month
from billday.domain.due_bills import classify_due_status
from billday.utils.date_utils import days_between

_STATUS_PRIORITY = {DueStatus.OVERDUE: 0, DueStatus.DUE_SOON: 1, DueStatus.UPCOMING: 2}


def latest_expense(expense_type_id: int, items: Iterable[ExpenseItem]) -> Optional[ExpenseItem]:
    """Most recent expense for an expense type by (year, month)"""
    matching = [i for i in items if i.expense_type_id == expense_type_id]
    if not matching:
        return None
    return max(matching, key=lambda i: i.period)


def expense_due_date(
    bill_day: int,
    bill_cycle: int,
    last_expense: Optional[CalendarMonth],
    current: CalendarMonth,
) -> date:
    """
    Next due date of a recurring expense.

    Unlike bills, an expense with no specific day falls due on the 1st of
    its month. Days the month does not have are clamped to month end.

    Example:
        bill_day=31, bill_cycle=1, last expense 2026-03 -> 2026-04-30
        bill_day=0,  bill_cycle=2, last expense 2026-03 -> 2026-05-01
    """
    period = next_billing_month(last_expense, bill_cycle, current)
    return due_date_for_month(period.year, period.month, bill_day if bill_day > 0 else 1)


def assess_expense(
    expense_type: ExpenseType,
    items: List[ExpenseItem],
    period: CalendarMonth,
    today: date,
    due_soon_days: int = 7,
) -> DueExpense:
    last = latest_expense(expense_type.id, items)
    next_due = expense_due_date(
        expense_type.bill_day,
        expense_type.bill_cycle,
        last.period if last else None,
        period,
    )
    days_until_due = days_between(today, next_due)

    has_current_expense = any(i.expense_type_id == expense_type.id and i.period == period for i in items)
    is_settled = has_current_expense or CalendarMonth.of(next_due) > period

    return DueExpense(
        expense_type=expense_type,
        next_due_date=next_due,
        days_until_due=days_until_due,
        status=classify_due_status(days_until_due, is_settled, due_soon_days),
        has_current_expense=has_current_expense,
        is_settled=is_settled,
        last_expense=last,
    )


def collect_due_expenses(
    expense_types: List[ExpenseType],
    items: List[ExpenseItem],
    period: CalendarMonth,
    today: date,
    due_soon_days: int = 7,
) -> List[DueExpense]:
    """
    Assess every recurring expense type for a month.

    On-demand types are skipped; ordering matches the due bill list.
    """
    due_expenses = [
        assess_expense(et, items, period, today, due_soon_days)
        for et in expense_types
        if et.bill_cycle > ON_DEMAND
    ]
    due_expenses.sort(key=lambda e: (_STATUS_PRIORITY[e.status], e.days_until_due))
    return due_expenses


def upcoming_expenses(due_expenses: List[DueExpense], limit: int = 5) -> List[DueExpense]:
    """Expenses not yet recorded for the period and not overdue, soonest first"""
    pending = [e for e in due_expenses if not e.is_settled and e.days_until_due >= 0]
    pending.sort(key=lambda e: e.days_until_due)
    return pending[:limit]
