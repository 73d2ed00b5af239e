"""Unit tests for recurring expense classification"""

from datetime import date
from decimal import Decimal
from billday.domain.models import CalendarMonth, DueStatus, ExpenseItem, ExpenseType
from billday.domain.due_expenses import (
    assess_expense,
    collect_due_expenses,
    expense_due_date,
    latest_expense,
    upcoming_expenses,
)

APRIL = CalendarMonth(2026, 4)


def test_latest_expense_picks_most_recent_month(sample_expense_items):
    latest = latest_expense(12, sample_expense_items)
    assert latest.period == APRIL


def test_latest_expense_none_without_history(sample_expense_items):
    assert latest_expense(14, sample_expense_items) is None


def test_expense_due_date_clamps_month_end():
    """Test day 31 monthly expense lands on April 30th"""
    assert expense_due_date(31, 1, CalendarMonth(2026, 3), APRIL) == date(2026, 4, 30)


def test_expense_due_date_no_specific_day_is_first_of_month():
    """Test expenses without a day fall due on the 1st, unlike bills"""
    assert expense_due_date(0, 2, CalendarMonth(2026, 3), APRIL) == date(2026, 5, 1)
    assert expense_due_date(0, 1, None, APRIL) == date(2026, 4, 1)


def test_expense_due_date_year_rollover():
    assert expense_due_date(15, 3, CalendarMonth(2026, 11), APRIL) == date(2027, 2, 15)


def test_assess_expense_recorded_this_month_is_settled(sample_expense_types, sample_expense_items, today):
    phone = next(et for et in sample_expense_types if et.name == "Phone")
    due = assess_expense(phone, sample_expense_items, APRIL, today)

    assert due.next_due_date == date(2026, 5, 31)
    assert due.has_current_expense is True
    assert due.is_settled is True
    assert due.status == DueStatus.UPCOMING
    assert due.last_expense.amount == Decimal("30.00")


def test_assess_expense_missed_cycle_is_overdue(sample_expense_types, sample_expense_items, today):
    """Test a six-monthly expense last recorded in October is overdue since April 1st"""
    car = next(et for et in sample_expense_types if et.name == "Car service")
    due = assess_expense(car, sample_expense_items, APRIL, today)

    assert due.next_due_date == date(2026, 4, 1)
    assert due.days_until_due == -9
    assert due.status == DueStatus.OVERDUE


def test_collect_due_expenses_orders_and_skips_on_demand(sample_expense_types, sample_expense_items, today):
    due_expenses = collect_due_expenses(sample_expense_types, sample_expense_items, APRIL, today)

    assert [e.expense_type.name for e in due_expenses] == ["Car service", "Gas", "Streaming", "Phone"]
    assert [e.status for e in due_expenses] == [
        DueStatus.OVERDUE,
        DueStatus.DUE_SOON,
        DueStatus.UPCOMING,
        DueStatus.UPCOMING,
    ]


def test_upcoming_expenses_excludes_settled_and_overdue(sample_expense_types, sample_expense_items, today):
    due_expenses = collect_due_expenses(sample_expense_types, sample_expense_items, APRIL, today)

    assert [e.expense_type.name for e in upcoming_expenses(due_expenses)] == ["Gas", "Streaming"]
    assert [e.expense_type.name for e in upcoming_expenses(due_expenses, limit=1)] == ["Gas"]


def test_collect_due_expenses_empty_when_nothing_recurs():
    types = [ExpenseType(id=1, name="Gifts")]
    items = [ExpenseItem(expense_type_id=1, year=2026, month=4, amount=Decimal("25.00"))]
    assert collect_due_expenses(types, items, APRIL, date(2026, 4, 10)) == []
