"""Unit tests for recurring due-date resolution"""

import pytest
from datetime import date, datetime
from billday.domain.scheduling import due_date_for_month, next_due_date
from billday.domain.months import days_in_month
from billday.domain.exceptions import DateOutOfRangeError


def test_due_date_clamps_to_february_month_end():
    """Test bill recurring day 31 clamps to February 28th"""
    assert due_date_for_month(2026, 2, 31) == date(2026, 2, 28)


def test_due_date_clamps_to_leap_february():
    assert due_date_for_month(2024, 2, 31) == date(2024, 2, 29)
    assert due_date_for_month(2024, 2, 30) == date(2024, 2, 29)


def test_due_date_clamps_to_thirty_day_month_end():
    """Test expense recurring day 31 clamps to April 30th"""
    assert due_date_for_month(2026, 4, 31) == date(2026, 4, 30)


@pytest.mark.parametrize("month", [4, 6, 9, 11])
def test_due_date_day_31_in_every_thirty_day_month(month):
    assert due_date_for_month(2026, month, 31) == date(2026, month, 30)


def test_due_date_keeps_day_that_exists_in_month():
    """Test recurring day unchanged when month has it"""
    assert due_date_for_month(2026, 3, 15) == date(2026, 3, 15)


def test_due_date_day_zero_uses_end_of_requested_month():
    """Test day 0 (no specific day) means end of the requested month, not the previous one"""
    assert due_date_for_month(2026, 2, 0) == date(2026, 2, 28)
    assert due_date_for_month(2026, 1, 0) == date(2026, 1, 31)


def test_due_date_negative_day_uses_month_end():
    assert due_date_for_month(2026, 4, -5) == date(2026, 4, 30)


def test_due_date_oversized_day_is_clamped_not_rejected():
    assert due_date_for_month(2026, 12, 400) == date(2026, 12, 31)


def test_due_date_always_real_day_of_requested_month():
    """Test resolved day never leaves the requested month"""
    for month in range(1, 13):
        for day in range(-2, 40):
            due = due_date_for_month(2028, month, day)
            assert (due.year, due.month) == (2028, month)
            assert 1 <= due.day <= days_in_month(2028, month)


def test_next_due_date_clamps_within_current_month():
    """Test overflowing day stays in the same month when the clamped date has not passed"""
    assert next_due_date(date(2026, 4, 15), 31) == date(2026, 4, 30)


def test_next_due_date_moves_to_next_month_when_passed():
    """Test current month due date already passed rolls to next month"""
    assert next_due_date(date(2026, 4, 30), 15) == date(2026, 5, 15)


def test_next_due_date_same_day_is_not_passed():
    assert next_due_date(date(2026, 4, 15), 15) == date(2026, 4, 15)


def test_next_due_date_rolls_december_into_january():
    """Test year rollover produces January of the next year"""
    assert next_due_date(date(2026, 12, 20), 10) == date(2027, 1, 10)


@pytest.mark.parametrize("day", range(1, 32))
def test_next_due_date_december_rollover_never_month_13(day):
    due = next_due_date(date(2026, 12, 31), day)
    if day == 31:
        assert due == date(2026, 12, 31)
    else:
        assert (due.year, due.month) == (2027, 1)


def test_next_due_date_rollover_clamps_next_month():
    """Test day 31 rolling from January into February clamps"""
    assert next_due_date(date(2026, 1, 31), 30) == date(2026, 2, 28)


def test_next_due_date_day_zero_is_month_end():
    assert next_due_date(date(2026, 2, 10), 0) == date(2026, 2, 28)
    assert next_due_date(date(2026, 2, 28), 0) == date(2026, 2, 28)


def test_next_due_date_ignores_time_of_day():
    """Test a late-evening datetime compares as its calendar date"""
    reference = datetime(2026, 4, 15, 23, 59, 59)
    due = next_due_date(reference, 15)
    assert due == date(2026, 4, 15)
    assert not isinstance(due, datetime)


def test_resolution_is_idempotent_and_does_not_mutate_inputs():
    reference = date(2026, 4, 30)
    first = next_due_date(reference, 15)
    second = next_due_date(reference, 15)
    assert first == second
    assert reference == date(2026, 4, 30)
    assert due_date_for_month(2026, 2, 31) == due_date_for_month(2026, 2, 31)


def test_due_date_for_month_far_beyond_calendar():
    """Test a year too large for the platform integer is a domain error, not an overflow"""
    with pytest.raises(DateOutOfRangeError):
        due_date_for_month(10**20, 1, 5)
