"""POST /v1/reminders - Find unpaid bills and push a Bark reminder"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException

from billday.api.v1.schemas import ReminderRequest, ReminderResponse
from billday.api.dependencies import get_bark_client, get_request_id
from billday.infrastructure.clients.bark import BarkClient
from billday.domain.reminders import bills_due_for_reminder, build_reminder, reminder_target
from billday.domain.exceptions import DateOutOfRangeError, NotificationError
from billday.infrastructure.observability.metrics import reminder_counter
from billday.infrastructure.observability.logging import log_reminder

router = APIRouter()


@router.post("/reminders", response_model=ReminderResponse)
async def send_reminder(
    request_body: ReminderRequest,
    request_id: str = Depends(get_request_id),
    bark_client: BarkClient = Depends(get_bark_client),
):
    """
    Remind about bills due in the target month.

    Flow:
    1. Target date = today + days_before (explicit override or setting)
    2. Collect active fixed-day bills with no payment for the target month
    3. Push a Bark notification when enabled and something is due
    """
    start_time = time.time()
    days_before = request_body.days_before if request_body.days_before is not None else request_body.remind_days_before
    today = request_body.today or date.today()

    try:
        target = reminder_target(today, days_before)
        bills = [b.to_domain() for b in request_body.bill_types]
        payments = [p.to_domain() for p in request_body.payments]
        bills_due = bills_due_for_reminder(bills, payments, target)
    except DateOutOfRangeError as e:
        logging.warning(f"Reminder target out of range: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    target_month = f"{target.year}-{target.month:02d}"
    response = ReminderResponse(
        bills_due_count=len(bills_due),
        days_before=days_before,
        target_date=target_month,
        sent=False,
        message="No bills due in the specified time period",
    )

    if not bills_due:
        reminder_counter.labels(outcome="skipped").inc()
        log_reminder(request_id, 0, target_month, False, (time.time() - start_time) * 1000)
        return response

    reminder = build_reminder(bills_due)
    response.title = reminder.title
    response.body = reminder.body

    if not request_body.bark_enabled or not (request_body.bark_api_url or bark_client.api_url):
        reminder_counter.labels(outcome="skipped").inc()
        response.message = "Bark notifications are not enabled or API URL is not configured"
        log_reminder(request_id, len(bills_due), target_month, False, (time.time() - start_time) * 1000)
        return response

    try:
        await bark_client.send(reminder.title, reminder.body, api_url=request_body.bark_api_url or None)
    except NotificationError as e:
        reminder_counter.labels(outcome="failed").inc()
        logging.error(f"Bark notification failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Notification service unavailable")

    reminder_counter.labels(outcome="sent").inc()
    response.sent = True
    response.message = f"Sent reminder for {len(bills_due)} bills due"
    log_reminder(request_id, len(bills_due), target_month, True, (time.time() - start_time) * 1000)
    return response
