"""POST /v1/due-bills - Classify recurring bills for a selected month"""

import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException

from billday.api.dependencies import get_request_id
from billday.api.v1.schemas import DueBillsRequest, DueBillsResponse, DueBillSchema, OnDemandBillSchema
from billday.config import settings
from billday.domain.models import CalendarMonth, DueBill
from billday.domain.exceptions import DateOutOfRangeError
from billday.domain.due_bills import collect_due_bills, on_demand_bills, upcoming_bills
from billday.infrastructure.observability.metrics import record_due_bills

router = APIRouter()


def to_due_bill_schema(bill: DueBill) -> DueBillSchema:
    last = bill.last_payment
    return DueBillSchema(
        id=bill.bill_type.id,
        name=bill.bill_type.name,
        fixed_amount=bill.bill_type.fixed_amount,
        bill_day=bill.bill_type.bill_day,
        bill_cycle=bill.bill_type.bill_cycle,
        next_due_date=bill.next_due_date,
        days_until_due=bill.days_until_due,
        status=bill.status.value,
        has_current_payment=bill.is_settled,
        last_payment_year=last.year if last else None,
        last_payment_month=last.month if last else None,
        last_payment_amount=last.amount if last else None,
    )


@router.post("/due-bills", response_model=DueBillsResponse)
def get_due_bills(request_body: DueBillsRequest, request_id: str = Depends(get_request_id)):
    """
    Resolve next due dates and statuses of cyclic bills.

    Flow:
    1. Skip stopped and on-demand bills
    2. Find each bill's latest payment and next billing month
    3. Classify as overdue / due_soon / upcoming relative to `today`
    4. Order by urgency
    """
    bills = [b.to_domain() for b in request_body.bill_types]
    payments = [p.to_domain() for p in request_body.payments]
    period = CalendarMonth(year=request_body.year, month=request_body.month)
    today = request_body.today or date.today()

    try:
        due_bills: List[DueBill] = collect_due_bills(bills, payments, period, today, settings.due_soon_days)
    except DateOutOfRangeError as e:
        logging.warning(f"Due bills out of range: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_due_bills(due_bills)

    return DueBillsResponse(
        year=period.year,
        month=period.month,
        due_bills=[to_due_bill_schema(b) for b in due_bills],
        upcoming_bills=[to_due_bill_schema(b) for b in upcoming_bills(due_bills, settings.upcoming_bills_limit)],
        on_demand_bills=[
            OnDemandBillSchema(id=b.id, name=b.name, fixed_amount=b.fixed_amount)
            for b in on_demand_bills(bills)
        ],
    )
