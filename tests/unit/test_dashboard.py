"""Unit tests for the monthly dashboard summary"""

from decimal import Decimal
from billday.domain.models import BillPayment, CalendarMonth, ExpenseItem
from billday.domain.dashboard import month_spending, summarize_dashboard

APRIL = CalendarMonth(2026, 4)


def test_month_spending_skips_expenses_mirroring_bill_payments(sample_payments, sample_expense_items):
    """Test rent is counted once although it exists as payment and expense"""
    assert month_spending(sample_payments, sample_expense_items, APRIL) == Decimal("1294.20")


def test_month_spending_only_counts_selected_month():
    payments = [BillPayment(bill_type_id=1, year=2026, month=3, amount=Decimal("50.00"))]
    items = [ExpenseItem(expense_type_id=1, year=2025, month=4, amount=Decimal("10.00"))]
    assert month_spending(payments, items, APRIL) == Decimal("0")


def test_summarize_dashboard(sample_bill_types, sample_payments, sample_expense_types, sample_expense_items, today):
    summary = summarize_dashboard(
        sample_bill_types, sample_payments, sample_expense_types, sample_expense_items, APRIL, today
    )

    assert summary.total_expenses == Decimal("1294.20")
    assert summary.bills_paid == 1
    assert summary.categories == 5
    assert summary.pending_expenses == 2
    assert [e.expense_type.name for e in summary.upcoming_expenses] == ["Gas", "Streaming"]
    assert summary.pending_bills == len(summary.upcoming_bills)
    assert [b.name for b in summary.on_demand_bills] == ["Doctor"]


def test_summarize_dashboard_counts_beyond_upcoming_limit(
    sample_bill_types, sample_payments, sample_expense_types, sample_expense_items, today
):
    """Test pending counts are not capped by the length of the upcoming lists"""
    summary = summarize_dashboard(
        sample_bill_types, sample_payments, sample_expense_types, sample_expense_items, APRIL, today, limit=1
    )

    assert summary.pending_expenses == 2
    assert len(summary.upcoming_expenses) == 1
    assert summary.upcoming_expenses[0].expense_type.name == "Gas"


def test_summarize_dashboard_empty_month(today):
    summary = summarize_dashboard([], [], [], [], APRIL, today)

    assert summary.total_expenses == Decimal("0")
    assert summary.bills_paid == 0
    assert summary.pending_bills == 0
    assert summary.upcoming_bills == []
