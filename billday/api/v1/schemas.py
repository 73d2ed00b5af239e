"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from billday.domain.models import BillPayment, BillType, ExpenseItem, ExpenseType


class DueDateResponse(BaseModel):
    """Response for GET /v1/due-date and GET /v1/next-due-date"""

    due_date: date
    recurring_day: int


class ScheduleResponse(BaseModel):
    """Response for GET /v1/schedule"""

    recurring_day: int
    bill_cycle: int
    due_dates: List[date]


class BillTypeSchema(BaseModel):
    """Bill type record as stored by the bill-tracking service"""

    id: int
    name: str = Field(..., min_length=1)
    bill_day: int = Field(0, ge=0, le=31, description="Day of month, 0 means no specific day")
    bill_cycle: int = Field(1, ge=0, description="Cycle in months, 0 means one-time")
    stopped: bool = False
    fixed_amount: Optional[Decimal] = None

    def to_domain(self) -> BillType:
        return BillType(**self.model_dump())


class BillPaymentSchema(BaseModel):
    """Bill payment record keyed by billing month"""

    bill_type_id: int
    year: int
    month: int = Field(..., ge=1, le=12)
    amount: Decimal = Decimal("0")

    def to_domain(self) -> BillPayment:
        return BillPayment(**self.model_dump())


class DueBillsRequest(BaseModel):
    """Request body for POST /v1/due-bills"""

    year: int
    month: int = Field(..., ge=1, le=12)
    today: Optional[date] = Field(None, description="Reference date, defaults to the server's date")
    bill_types: List[BillTypeSchema] = Field(default_factory=list)
    payments: List[BillPaymentSchema] = Field(default_factory=list)


class DueBillSchema(BaseModel):
    """Single bill in the due list"""

    id: int
    name: str
    fixed_amount: Optional[Decimal] = None
    bill_day: int
    bill_cycle: int
    next_due_date: date
    days_until_due: int
    status: str
    has_current_payment: bool
    last_payment_year: Optional[int] = None
    last_payment_month: Optional[int] = None
    last_payment_amount: Optional[Decimal] = None


class OnDemandBillSchema(BaseModel):
    id: int
    name: str
    fixed_amount: Optional[Decimal] = None


class DueBillsResponse(BaseModel):
    """Response for POST /v1/due-bills"""

    year: int
    month: int
    due_bills: List[DueBillSchema]
    upcoming_bills: List[DueBillSchema]
    on_demand_bills: List[OnDemandBillSchema]


class ExpenseTypeSchema(BaseModel):
    """Expense type record as stored by the bill-tracking service"""

    id: int
    name: str = Field(..., min_length=1)
    bill_day: int = Field(0, ge=0, le=31, description="Day of month, 0 means no specific day")
    bill_cycle: int = Field(0, ge=0, description="Cycle in months, 0 means on demand")
    fixed_amount: Optional[Decimal] = None

    def to_domain(self) -> ExpenseType:
        return ExpenseType(**self.model_dump())


class ExpenseItemSchema(BaseModel):
    """Expense item record keyed by month"""

    expense_type_id: int
    year: int
    month: int = Field(..., ge=1, le=12)
    amount: Decimal = Decimal("0")
    bill_payment_id: Optional[int] = None

    def to_domain(self) -> ExpenseItem:
        return ExpenseItem(**self.model_dump())


class DueExpensesRequest(BaseModel):
    """Request body for POST /v1/due-expenses"""

    year: int
    month: int = Field(..., ge=1, le=12)
    today: Optional[date] = None
    expense_types: List[ExpenseTypeSchema] = Field(default_factory=list)
    expense_items: List[ExpenseItemSchema] = Field(default_factory=list)


class DueExpenseSchema(BaseModel):
    """Single expense in the due list"""

    id: int
    name: str
    fixed_amount: Optional[Decimal] = None
    bill_day: int
    bill_cycle: int
    next_due_date: date
    days_until_due: int
    status: str
    has_current_expense: bool
    last_expense_year: Optional[int] = None
    last_expense_month: Optional[int] = None
    last_expense_amount: Optional[Decimal] = None


class DueExpensesResponse(BaseModel):
    """Response for POST /v1/due-expenses"""

    year: int
    month: int
    due_expenses: List[DueExpenseSchema]
    upcoming_expenses: List[DueExpenseSchema]


class DashboardRequest(BaseModel):
    """Request body for POST /v1/dashboard"""

    year: Optional[int] = None
    month: Optional[int] = Field(None, ge=1, le=12)
    today: Optional[date] = None
    bill_types: List[BillTypeSchema] = Field(default_factory=list)
    payments: List[BillPaymentSchema] = Field(default_factory=list)
    expense_types: List[ExpenseTypeSchema] = Field(default_factory=list)
    expense_items: List[ExpenseItemSchema] = Field(default_factory=list)


class DashboardResponse(BaseModel):
    """Response for POST /v1/dashboard"""

    year: int
    month: int
    total_expenses: Decimal
    bills_paid: int
    pending_bills: int
    pending_expenses: int
    categories: int
    upcoming_bills: List[DueBillSchema]
    upcoming_expenses: List[DueExpenseSchema]
    on_demand_bills: List[OnDemandBillSchema]


class ReminderRequest(BaseModel):
    """Request body for POST /v1/reminders"""

    bark_api_url: str = ""
    bark_enabled: bool = False
    remind_days_before: int = Field(0, ge=0, le=30)
    days_before: Optional[int] = Field(None, ge=0, le=30, description="Overrides remind_days_before")
    today: Optional[date] = None
    bill_types: List[BillTypeSchema] = Field(default_factory=list)
    payments: List[BillPaymentSchema] = Field(default_factory=list)


class ReminderResponse(BaseModel):
    """Response for POST /v1/reminders"""

    bills_due_count: int
    days_before: int
    target_date: str
    sent: bool
    message: str
    title: Optional[str] = None
    body: Optional[str] = None
