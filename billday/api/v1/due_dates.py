"""GET /v1/due-date, /v1/next-due-date, /v1/schedule - Recurring due-date resolution"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query

from billday.api.v1.schemas import DueDateResponse, ScheduleResponse
from billday.api.dependencies import get_request_id
from billday.domain.models import CalendarMonth
from billday.domain.scheduling import due_date_for_month, next_due_date
from billday.domain.cycles import upcoming_due_dates
from billday.domain.exceptions import DateOutOfRangeError, InvalidBillCycleError
from billday.infrastructure.observability.metrics import resolution_counter

router = APIRouter()


@router.get("/due-date", response_model=DueDateResponse)
def get_due_date(
    year: int = Query(..., description="Calendar year"),
    month: int = Query(..., ge=1, le=12, description="1-based month"),
    recurring_day: int = Query(0, description="Day of month, 0 or less means month-end"),
    request_id: str = Depends(get_request_id),
):
    """
    Resolve the due date of a recurring bill within one month.

    Days the month does not have are clamped to its last day.
    """
    try:
        due_date = due_date_for_month(year, month, recurring_day)
    except DateOutOfRangeError as e:
        logging.warning(f"Due date out of range: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    resolution_counter.labels(operation="due_date").inc()
    return DueDateResponse(due_date=due_date, recurring_day=recurring_day)


@router.get("/next-due-date", response_model=DueDateResponse)
def get_next_due_date(
    reference_date: date | None = Query(None, description="As-of date, defaults to today"),
    recurring_day: int = Query(0, description="Day of month, 0 or less means month-end"),
    request_id: str = Depends(get_request_id),
):
    """Next due date on or after the reference date"""
    reference = reference_date or date.today()
    try:
        due_date = next_due_date(reference, recurring_day)
    except DateOutOfRangeError as e:
        logging.warning(f"Due date out of range: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    resolution_counter.labels(operation="next_due_date").inc()
    return DueDateResponse(due_date=due_date, recurring_day=recurring_day)


@router.get("/schedule", response_model=ScheduleResponse)
def get_schedule(
    start: date | None = Query(None, description="First date to consider, defaults to today"),
    recurring_day: int = Query(0),
    bill_cycle: int = Query(1, ge=0, description="Cycle in months, 0 means one-time"),
    count: int = Query(12, ge=1, le=120),
    anchor_year: int | None = Query(None, description="Year of a known billing month, e.g. the last paid one"),
    anchor_month: int | None = Query(None, ge=1, le=12),
    request_id: str = Depends(get_request_id),
):
    """
    List successive due dates for a bill.

    Returns:
        `count` due dates, `bill_cycle` months apart, aligned to the anchor month when given
    """
    if (anchor_year is None) != (anchor_month is None):
        raise HTTPException(status_code=422, detail="anchor_year and anchor_month must be given together")
    anchor = CalendarMonth(year=anchor_year, month=anchor_month) if anchor_year is not None else None

    try:
        due_dates = upcoming_due_dates(start or date.today(), recurring_day, bill_cycle, count, anchor)
    except (DateOutOfRangeError, InvalidBillCycleError) as e:
        logging.warning(f"Schedule rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    resolution_counter.labels(operation="schedule").inc()
    return ScheduleResponse(recurring_day=recurring_day, bill_cycle=bill_cycle, due_dates=due_dates)
