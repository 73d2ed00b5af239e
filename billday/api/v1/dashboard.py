"""POST /v1/dashboard - Month overview of bills and expenses"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException

from billday.api.dependencies import get_request_id
from billday.api.v1.schemas import DashboardRequest, DashboardResponse, OnDemandBillSchema
from billday.api.v1.due_bills import to_due_bill_schema
from billday.api.v1.due_expenses import to_due_expense_schema
from billday.config import settings
from billday.domain.models import CalendarMonth
from billday.domain.exceptions import DateOutOfRangeError
from billday.domain.dashboard import summarize_dashboard

router = APIRouter()


@router.post("/dashboard", response_model=DashboardResponse)
def get_dashboard(request_body: DashboardRequest, request_id: str = Depends(get_request_id)):
    """
    Summarize spending and pending items for a month.

    Defaults to the month of `today` when no year/month is given.
    """
    today = request_body.today or date.today()
    if (request_body.year is None) != (request_body.month is None):
        raise HTTPException(status_code=422, detail="year and month must be given together")
    period = (
        CalendarMonth(year=request_body.year, month=request_body.month)
        if request_body.year is not None
        else CalendarMonth.of(today)
    )

    try:
        summary = summarize_dashboard(
            [b.to_domain() for b in request_body.bill_types],
            [p.to_domain() for p in request_body.payments],
            [et.to_domain() for et in request_body.expense_types],
            [i.to_domain() for i in request_body.expense_items],
            period,
            today,
            settings.due_soon_days,
            settings.upcoming_bills_limit,
        )
    except DateOutOfRangeError as e:
        logging.warning(f"Dashboard out of range: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    return DashboardResponse(
        year=period.year,
        month=period.month,
        total_expenses=summary.total_expenses,
        bills_paid=summary.bills_paid,
        pending_bills=summary.pending_bills,
        pending_expenses=summary.pending_expenses,
        categories=summary.categories,
        upcoming_bills=[to_due_bill_schema(b) for b in summary.upcoming_bills],
        upcoming_expenses=[to_due_expense_schema(e) for e in summary.upcoming_expenses],
        on_demand_bills=[
            OnDemandBillSchema(id=b.id, name=b.name, fixed_amount=b.fixed_amount)
            for b in summary.on_demand_bills
        ],
    )
