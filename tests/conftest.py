"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from billday.api.main import create_app
from billday.domain.models import BillPayment, BillType, ExpenseItem, ExpenseType


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def today() -> date:
    return date(2026, 4, 10)


@pytest.fixture
def sample_bill_types() -> list[BillType]:
    """Household bills covering every status a month can produce"""
    return [
        BillType(id=1, name="Rent", bill_day=1, bill_cycle=1, fixed_amount=Decimal("1200.00")),
        BillType(id=2, name="Electricity", bill_day=15, bill_cycle=1),
        BillType(id=3, name="Water", bill_day=5, bill_cycle=1, fixed_amount=Decimal("35.50")),
        BillType(id=4, name="Insurance", bill_day=31, bill_cycle=3, fixed_amount=Decimal("410.00")),
        BillType(id=5, name="Internet", bill_day=28, bill_cycle=1, fixed_amount=Decimal("0")),
        BillType(id=6, name="Gym", bill_day=3, bill_cycle=1, stopped=True),
        BillType(id=7, name="Doctor", bill_day=0, bill_cycle=0),
    ]


@pytest.fixture
def sample_payments() -> list[BillPayment]:
    """Payment history as of early April 2026"""
    return [
        BillPayment(bill_type_id=1, year=2026, month=3, amount=Decimal("1200.00")),
        BillPayment(bill_type_id=1, year=2026, month=4, amount=Decimal("1200.00")),
        BillPayment(bill_type_id=2, year=2026, month=2, amount=Decimal("80.10")),
        BillPayment(bill_type_id=2, year=2026, month=3, amount=Decimal("92.40")),
        BillPayment(bill_type_id=3, year=2026, month=3, amount=Decimal("35.50")),
        BillPayment(bill_type_id=4, year=2026, month=2, amount=Decimal("410.00")),
    ]


@pytest.fixture
def sample_expense_types() -> list[ExpenseType]:
    """Expense categories, recurring and on demand"""
    return [
        ExpenseType(id=10, name="Streaming", bill_day=20, bill_cycle=1, fixed_amount=Decimal("12.99")),
        ExpenseType(id=11, name="Car service", bill_day=0, bill_cycle=6),
        ExpenseType(id=12, name="Groceries"),
        ExpenseType(id=13, name="Phone", bill_day=31, bill_cycle=1),
        ExpenseType(id=14, name="Gas", bill_day=15, bill_cycle=1),
    ]


@pytest.fixture
def sample_expense_items() -> list[ExpenseItem]:
    return [
        ExpenseItem(expense_type_id=10, year=2026, month=3, amount=Decimal("12.99")),
        ExpenseItem(expense_type_id=11, year=2025, month=10, amount=Decimal("180.00")),
        ExpenseItem(expense_type_id=12, year=2026, month=4, amount=Decimal("64.20")),
        ExpenseItem(expense_type_id=12, year=2026, month=3, amount=Decimal("58.75")),
        ExpenseItem(expense_type_id=13, year=2026, month=4, amount=Decimal("30.00")),
        # Mirrors the April rent payment
        ExpenseItem(expense_type_id=12, year=2026, month=4, amount=Decimal("1200.00"), bill_payment_id=1),
    ]
