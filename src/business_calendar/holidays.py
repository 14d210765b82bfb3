"""
US federal holidays observed by the SEC.

Eleven holidays per year: the ten long-standing federal holidays plus
Juneteenth (June 19), which the SEC has observed since 2021.

Fixed-date holidays falling on a Saturday are observed the Friday before and
those falling on a Sunday the Monday after. Floating holidays are computed as
the nth (or last) weekday of their month.
"""

import calendar
from datetime import date, timedelta
from functools import lru_cache
from typing import FrozenSet

MONDAY = 0
THURSDAY = 3
SATURDAY = 5
SUNDAY = 6


def _nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """The nth occurrence (1-based) of ``weekday`` in the month."""
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return first + timedelta(days=offset + 7 * (n - 1))


def _last_weekday(year: int, month: int, weekday: int) -> date:
    """The last occurrence of ``weekday`` in the month."""
    last = date(year, month, calendar.monthrange(year, month)[1])
    offset = (last.weekday() - weekday) % 7
    return last - timedelta(days=offset)


def _observed(holiday: date) -> date:
    if holiday.weekday() == SATURDAY:
        return holiday - timedelta(days=1)
    if holiday.weekday() == SUNDAY:
        return holiday + timedelta(days=1)
    return holiday


@lru_cache(maxsize=64)
def federal_holidays(year: int) -> FrozenSet[date]:
    """
    Observed federal holidays for a calendar year.

    Args:
        year: Calendar year

    Returns:
        Frozen set of observed holiday dates, all of which fall on weekdays
    """
    fixed = [
        date(year, 1, 1),    # New Year's Day
        date(year, 6, 19),   # Juneteenth
        date(year, 7, 4),    # Independence Day
        date(year, 11, 11),  # Veterans Day
        date(year, 12, 25),  # Christmas Day
    ]
    floating = [
        _nth_weekday(year, 1, MONDAY, 3),     # Martin Luther King Jr. Day
        _nth_weekday(year, 2, MONDAY, 3),     # Presidents' Day
        _last_weekday(year, 5, MONDAY),       # Memorial Day
        _nth_weekday(year, 9, MONDAY, 1),     # Labor Day
        _nth_weekday(year, 10, MONDAY, 2),    # Columbus Day
        _nth_weekday(year, 11, THURSDAY, 4),  # Thanksgiving
    ]
    return frozenset([_observed(d) for d in fixed] + floating)


def is_federal_holiday(d: date) -> bool:
    """Check whether a date is an observed federal holiday."""
    # New Year's Day on a Saturday is observed on Dec 31 of the prior year
    return d in federal_holidays(d.year) or (
        d.month == 12 and d.day == 31 and d in federal_holidays(d.year + 1)
    )
