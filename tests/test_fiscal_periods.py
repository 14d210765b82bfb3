"""
Tests for fiscal period helpers.
"""

import pytest
import os
import sys
from datetime import date

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from business_calendar import (
    current_fiscal_quarter,
    fiscal_quarter_end,
    fiscal_year_end,
    fiscal_year_start,
)
from domain.exceptions import InvalidInputError


class TestFiscalYear:
    """Tests for fiscal year boundaries."""

    def test_calendar_year_end(self):
        assert fiscal_year_end(2024) == date(2024, 12, 31)

    def test_june_year_end(self):
        assert fiscal_year_end(2024, 6) == date(2024, 6, 30)

    def test_february_year_end_in_leap_year(self):
        assert fiscal_year_end(2024, 2) == date(2024, 2, 29)
        assert fiscal_year_end(2025, 2) == date(2025, 2, 28)

    def test_year_start(self):
        assert fiscal_year_start(2025) == date(2025, 1, 1)
        assert fiscal_year_start(2025, 6) == date(2024, 7, 1)

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month_rejected(self, month):
        with pytest.raises(InvalidInputError):
            fiscal_year_end(2025, month)


class TestFiscalQuarter:
    """Tests for fiscal quarter ends."""

    def test_calendar_quarters(self):
        assert fiscal_quarter_end(2025, 1) == date(2025, 3, 31)
        assert fiscal_quarter_end(2025, 2) == date(2025, 6, 30)
        assert fiscal_quarter_end(2025, 3) == date(2025, 9, 30)
        assert fiscal_quarter_end(2025, 4) == date(2025, 12, 31)

    def test_june_fiscal_year_quarters(self):
        """Quarters of a June fiscal year start in the prior calendar year."""
        assert fiscal_quarter_end(2025, 1, 6) == date(2024, 9, 30)
        assert fiscal_quarter_end(2025, 2, 6) == date(2024, 12, 31)
        assert fiscal_quarter_end(2025, 3, 6) == date(2025, 3, 31)
        assert fiscal_quarter_end(2025, 4, 6) == fiscal_year_end(2025, 6)

    def test_invalid_quarter_rejected(self):
        with pytest.raises(InvalidInputError):
            fiscal_quarter_end(2025, 5)

    def test_current_quarter_calendar_year(self):
        assert current_fiscal_quarter(date(2025, 5, 15)) == (2025, 2)
        assert current_fiscal_quarter(date(2025, 12, 31)) == (2025, 4)

    def test_current_quarter_after_year_end_month(self):
        """A date after the fiscal year end month belongs to the next fiscal year."""
        assert current_fiscal_quarter(date(2025, 8, 15), 6) == (2026, 1)
        assert current_fiscal_quarter(date(2025, 6, 30), 6) == (2025, 4)
