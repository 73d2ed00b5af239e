"""Monthly dashboard summary across bills and expenses"""

from datetime import date
from decimal import Decimal
from typing import List
from billday.domain.models import BillPayment, BillType, CalendarMonth, DashboardSummary, ExpenseItem, ExpenseType
from billday.domain.due_bills import collect_due_bills, on_demand_bills, upcoming_bills
from billday.domain.due_expenses import collect_due_expenses, upcoming_expenses


def month_spending(payments: List[BillPayment], items: List[ExpenseItem], period: CalendarMonth) -> Decimal:
    """
    Total spent in a month.

    Expense items linked to a bill payment mirror that payment and are not
    counted twice.
    """
    bills_total = sum((p.amount for p in payments if p.period == period), Decimal("0"))
    expenses_total = sum(
        (i.amount for i in items if i.period == period and i.bill_payment_id is None),
        Decimal("0"),
    )
    return bills_total + expenses_total


def summarize_dashboard(
    bill_types: List[BillType],
    payments: List[BillPayment],
    expense_types: List[ExpenseType],
    expense_items: List[ExpenseItem],
    period: CalendarMonth,
    today: date,
    due_soon_days: int = 7,
    limit: int = 5,
) -> DashboardSummary:
    """
    Build the month overview.

    Pending counts cover every unsettled, not yet overdue bill or expense;
    the upcoming lists show at most `limit` of them, soonest first.
    """
    pending_bills = upcoming_bills(
        collect_due_bills(bill_types, payments, period, today, due_soon_days),
        limit=len(bill_types),
    )
    pending_expenses = upcoming_expenses(
        collect_due_expenses(expense_types, expense_items, period, today, due_soon_days),
        limit=len(expense_types),
    )

    return DashboardSummary(
        total_expenses=month_spending(payments, expense_items, period),
        bills_paid=sum(1 for p in payments if p.period == period),
        pending_bills=len(pending_bills),
        pending_expenses=len(pending_expenses),
        categories=len(expense_types),
        upcoming_bills=pending_bills[:limit],
        upcoming_expenses=pending_expenses[:limit],
        on_demand_bills=on_demand_bills(bill_types),
    )
