"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True, order=True)
class CalendarMonth:
    """A (year, month) pair; month is 1-based once normalized"""

    year: int
    month: int

    @property
    def index(self) -> int:
        """Months since year 0, used for period arithmetic and comparison"""
        return self.year * 12 + (self.month - 1)

    @classmethod
    def of(cls, day: date) -> "CalendarMonth":
        return cls(year=day.year, month=day.month)


class DueStatus(str, Enum):
    """Payment urgency of a recurring bill for a selected month"""

    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    UPCOMING = "upcoming"


@dataclass
class BillType:
    """Recurring bill configuration supplied by the bill-tracking service"""

    id: int
    name: str
    bill_day: int  # day of month, 0 means no specific day
    bill_cycle: int = 1  # in months, 0 means one-time / on demand
    stopped: bool = False
    fixed_amount: Optional[Decimal] = None


@dataclass
class BillPayment:
    """Payment recorded against a bill type for one billing month"""

    bill_type_id: int
    year: int
    month: int
    amount: Decimal = Decimal("0")

    @property
    def period(self) -> CalendarMonth:
        return CalendarMonth(year=self.year, month=self.month)


@dataclass
class DueBill:
    """A bill type with its next due date and status for a selected month"""

    bill_type: BillType
    next_due_date: date
    days_until_due: int
    status: DueStatus
    has_current_payment: bool
    is_settled: bool
    last_payment: Optional[BillPayment] = None


@dataclass
class BillDue:
    """Unpaid bill included in a reminder"""

    bill_type: BillType
    due_date: date

    @property
    def amount(self) -> Optional[Decimal]:
        return self.bill_type.fixed_amount


@dataclass
class Reminder:
    """Push notification content for bills coming due"""

    title: str
    body: str
    bills_due: List[BillDue] = field(default_factory=list)


@dataclass
class ExpenseType:
    """Expense category, optionally recurring on a fixed day"""

    id: int
    name: str
    bill_day: int = 0  # day of month, 0 means no specific day
    bill_cycle: int = 0  # in months, 0 means on demand
    fixed_amount: Optional[Decimal] = None


@dataclass
class ExpenseItem:
    """Expense recorded against an expense type for one month"""

    expense_type_id: int
    year: int
    month: int
    amount: Decimal = Decimal("0")
    bill_payment_id: Optional[int] = None  # set when the expense mirrors a bill payment

    @property
    def period(self) -> CalendarMonth:
        return CalendarMonth(year=self.year, month=self.month)


@dataclass
class DueExpense:
    """A recurring expense type with its next due date and status for a selected month"""

    expense_type: ExpenseType
    next_due_date: date
    days_until_due: int
    status: DueStatus
    has_current_expense: bool
    is_settled: bool
    last_expense: Optional[ExpenseItem] = None


@dataclass
class DashboardSummary:
    """Month overview across bills and expenses"""

    total_expenses: Decimal
    bills_paid: int
    pending_bills: int
    pending_expenses: int
    categories: int
    upcoming_bills: List[DueBill] = field(default_factory=list)
    upcoming_expenses: List[DueExpense] = field(default_factory=list)
    on_demand_bills: List[BillType] = field(default_factory=list)
