"""POST /v1/due-expenses - Classify recurring expense types for a selected month"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException

from billday.api.dependencies import get_request_id
from billday.api.v1.schemas import DueExpensesRequest, DueExpensesResponse, DueExpenseSchema
from billday.config import settings
from billday.domain.models import CalendarMonth, DueExpense
from billday.domain.exceptions import DateOutOfRangeError
from billday.domain.due_expenses import collect_due_expenses, upcoming_expenses
from billday.infrastructure.observability.metrics import record_due_expenses

router = APIRouter()


def to_due_expense_schema(expense: DueExpense) -> DueExpenseSchema:
    last = expense.last_expense
    return DueExpenseSchema(
        id=expense.expense_type.id,
        name=expense.expense_type.name,
        fixed_amount=expense.expense_type.fixed_amount,
        bill_day=expense.expense_type.bill_day,
        bill_cycle=expense.expense_type.bill_cycle,
        next_due_date=expense.next_due_date,
        days_until_due=expense.days_until_due,
        status=expense.status.value,
        has_current_expense=expense.is_settled,
        last_expense_year=last.year if last else None,
        last_expense_month=last.month if last else None,
        last_expense_amount=last.amount if last else None,
    )


@router.post("/due-expenses", response_model=DueExpensesResponse)
def get_due_expenses(request_body: DueExpensesRequest, request_id: str = Depends(get_request_id)):
    """
    Resolve next due dates and statuses of recurring expenses.

    Expenses with no specific day fall due on the 1st of their month.
    """
    expense_types = [et.to_domain() for et in request_body.expense_types]
    items = [i.to_domain() for i in request_body.expense_items]
    period = CalendarMonth(year=request_body.year, month=request_body.month)
    today = request_body.today or date.today()

    try:
        due_expenses = collect_due_expenses(expense_types, items, period, today, settings.due_soon_days)
    except DateOutOfRangeError as e:
        logging.warning(f"Due expenses out of range: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_due_expenses(due_expenses)

    return DueExpensesResponse(
        year=period.year,
        month=period.month,
        due_expenses=[to_due_expense_schema(e) for e in due_expenses],
        upcoming_expenses=[
            to_due_expense_schema(e) for e in upcoming_expenses(due_expenses, settings.upcoming_bills_limit)
        ],
    )
