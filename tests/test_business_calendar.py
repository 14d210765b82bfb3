"""
Tests for the business calendar.

These tests verify:
1. Observed federal holidays, including weekend observance
2. Business-day stepping across weekends, holidays and year ends
3. Business-day counting over (start, end]
"""

import pytest
import os
import sys
from datetime import date, timedelta

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from business_calendar import (
    add_business_days,
    count_business_days,
    federal_holidays,
    is_business_day,
    is_federal_holiday,
    next_business_day,
    previous_business_day,
    sub_business_days,
)


class TestFederalHolidays:
    """Tests for the observed holiday set."""

    def test_2025_holidays(self):
        """Test the full 2025 holiday calendar."""
        assert federal_holidays(2025) == frozenset({
            date(2025, 1, 1),
            date(2025, 1, 20),
            date(2025, 2, 17),
            date(2025, 5, 26),
            date(2025, 6, 19),
            date(2025, 7, 4),
            date(2025, 9, 1),
            date(2025, 10, 13),
            date(2025, 11, 11),
            date(2025, 11, 27),
            date(2025, 12, 25),
        })

    def test_holidays_fall_on_weekdays(self):
        """Observed holidays never land on a weekend."""
        for year in range(2020, 2036):
            for holiday in federal_holidays(year):
                assert holiday.weekday() < 5, f"{holiday} falls on a weekend"

    def test_saturday_holiday_observed_friday(self):
        """July 4, 2026 is a Saturday and is observed on Friday July 3."""
        assert date(2026, 7, 3) in federal_holidays(2026)
        assert date(2026, 7, 4) not in federal_holidays(2026)

    def test_sunday_holiday_observed_monday(self):
        """Christmas 2022 is a Sunday and is observed on Monday Dec 26."""
        assert is_federal_holiday(date(2022, 12, 26))
        assert not is_federal_holiday(date(2022, 12, 25))

    def test_saturday_new_year_observed_prior_year(self):
        """New Year's Day 2022 is a Saturday; Dec 31, 2021 is the holiday."""
        assert is_federal_holiday(date(2021, 12, 31))
        assert not is_business_day(date(2021, 12, 31))

    def test_ordinary_day_is_not_holiday(self):
        assert not is_federal_holiday(date(2025, 3, 12))


class TestBusinessDays:
    """Tests for business-day arithmetic."""

    def test_weekend_is_not_business_day(self):
        assert not is_business_day(date(2025, 2, 1))  # Saturday
        assert not is_business_day(date(2025, 2, 2))  # Sunday
        assert is_business_day(date(2025, 2, 3))

    def test_add_within_week(self):
        """Test 4 business days from a Monday lands on Friday."""
        assert add_business_days(date(2024, 6, 10), 4) == date(2024, 6, 14)

    def test_add_skips_weekend(self):
        assert add_business_days(date(2025, 2, 7), 1) == date(2025, 2, 10)

    def test_add_skips_holiday_across_year_end(self):
        assert add_business_days(date(2024, 12, 31), 1) == date(2025, 1, 2)

    def test_add_skips_thanksgiving(self):
        assert add_business_days(date(2024, 11, 27), 1) == date(2024, 11, 29)

    def test_add_zero_returns_same_date(self):
        assert add_business_days(date(2025, 2, 1), 0) == date(2025, 2, 1)

    def test_add_negative_subtracts(self):
        assert add_business_days(date(2025, 2, 18), -1) == date(2025, 2, 14)

    def test_sub_skips_holiday(self):
        """Presidents' Day 2025 is skipped when stepping back."""
        assert sub_business_days(date(2025, 2, 18), 1) == date(2025, 2, 14)

    def test_sub_from_weekend(self):
        assert sub_business_days(date(2025, 3, 1), 3) == date(2025, 2, 26)

    def test_count_over_february_2025(self):
        """February 2025 has 19 business days after Presidents' Day."""
        assert count_business_days(date(2025, 2, 1), date(2025, 3, 1)) == 19

    def test_count_empty_range(self):
        assert count_business_days(date(2025, 2, 3), date(2025, 2, 3)) == 0
        assert count_business_days(date(2025, 2, 10), date(2025, 2, 3)) == 0

    def test_count_inverts_add(self):
        """Counting from d to add(d, n) gives back n."""
        start = date(2024, 11, 20)
        for offset in range(0, 60, 3):
            d = start + timedelta(days=offset)
            for n in (0, 1, 4, 10, 20):
                assert count_business_days(d, add_business_days(d, n)) == n

    def test_add_result_is_business_day(self):
        start = date(2025, 12, 20)
        for offset in range(30):
            assert is_business_day(add_business_days(start + timedelta(days=offset), 1))

    def test_next_business_day_over_holiday_weekend(self):
        assert next_business_day(date(2025, 1, 17)) == date(2025, 1, 21)

    def test_previous_business_day_over_holiday_weekend(self):
        assert previous_business_day(date(2025, 1, 21)) == date(2025, 1, 17)

    def test_next_business_day_always_moves(self):
        assert next_business_day(date(2025, 2, 3)) == date(2025, 2, 4)
