"""Prometheus metrics for monitoring due-date resolution, bill statuses, and reminder delivery"""

from typing import List
from prometheus_client import Counter, Histogram

from billday.domain.models import DueBill, DueExpense

# Resolution metrics
resolution_counter = Counter(
    "billday_resolutions_total",
    "Due dates resolved",
    ["operation"],  # due_date | next_due_date | schedule
)

due_bill_status_counter = Counter(
    "billday_due_bill_status_total",
    "Bills classified by due status",
    ["status"],  # overdue | due_soon | upcoming
)

due_expense_status_counter = Counter(
    "billday_due_expense_status_total",
    "Recurring expenses classified by due status",
    ["status"],
)

# Notification metrics
reminder_counter = Counter(
    "billday_reminders_total",
    "Reminder requests by outcome",
    ["outcome"],  # sent | skipped | failed
)

notify_latency_histogram = Histogram(
    "notify_latency_seconds",
    "Bark push response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

notify_failure_counter = Counter(
    "notify_failures_total",
    "Failed Bark delivery attempts",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_due_bills(due_bills: List[DueBill]) -> None:
    """Count classified bills per status"""
    for bill in due_bills:
        due_bill_status_counter.labels(status=bill.status.value).inc()


def record_due_expenses(due_expenses: List[DueExpense]) -> None:
    """Count classified recurring expenses per status"""
    for expense in due_expenses:
        due_expense_status_counter.labels(status=expense.status.value).inc()
