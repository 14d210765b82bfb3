"""
Business-day arithmetic.

A business day is a weekday that is not an observed federal holiday. All
stepping functions walk one calendar day at a time and only count business
days, so they are exact across weekends, holidays and year boundaries.
"""

from datetime import date, timedelta

from .holidays import is_federal_holiday

_ONE_DAY = timedelta(days=1)


def is_business_day(d: date) -> bool:
    """Check whether a date is a weekday and not a federal holiday."""
    return d.weekday() < 5 and not is_federal_holiday(d)


def add_business_days(d: date, n: int) -> date:
    """
    Add ``n`` business days to a date.

    Args:
        d: Starting date (need not be a business day)
        n: Number of business days to add; negative values subtract

    Returns:
        The date reached after consuming ``n`` business days
    """
    if n < 0:
        return sub_business_days(d, -n)
    current = d
    added = 0
    while added < n:
        current += _ONE_DAY
        if is_business_day(current):
            added += 1
    return current


def sub_business_days(d: date, n: int) -> date:
    """Subtract ``n`` business days from a date."""
    if n < 0:
        return add_business_days(d, -n)
    current = d
    subtracted = 0
    while subtracted < n:
        current -= _ONE_DAY
        if is_business_day(current):
            subtracted += 1
    return current


def count_business_days(start: date, end: date) -> int:
    """
    Count business days in the half-open range (start, end].

    Returns 0 when ``end`` is on or before ``start``.
    """
    count = 0
    current = start
    while current < end:
        current += _ONE_DAY
        if is_business_day(current):
            count += 1
    return count


def next_business_day(d: date) -> date:
    """First business day strictly after ``d``."""
    current = d + _ONE_DAY
    while not is_business_day(current):
        current += _ONE_DAY
    return current


def previous_business_day(d: date) -> date:
    """Last business day strictly before ``d``."""
    current = d - _ONE_DAY
    while not is_business_day(current):
        current -= _ONE_DAY
    return current
