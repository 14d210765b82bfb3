"""
Tests for event-driven deadline helpers and SPAC term dates.
"""

import pytest
import os
import sys
from datetime import date

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from deadlines import (
    calculate_8k_deadline,
    calculate_comment_response_deadline,
    calculate_form4_deadline,
    calculate_schedule_13d_deadline,
    calculate_spac_deadlines,
    calculate_super_8k_deadline,
)
from deadlines.event_deadlines import extended_term_months
from domain.exceptions import InvalidInputError
from rules.rule_types import FilingType


class TestEventBasedDeadlines:
    """Tests for single-event filings."""

    def test_8k(self):
        result = calculate_8k_deadline(date(2024, 6, 10))
        assert result.deadline == date(2024, 6, 14)
        assert result.filing_type == FilingType.FORM_8K
        assert result.id == "8k-2024-06-10"
        assert result.is_business_days is True

    def test_super_8k(self):
        result = calculate_super_8k_deadline(date(2024, 6, 10))
        assert result.deadline == date(2024, 6, 14)
        assert result.filing_type == FilingType.SUPER_8K

    def test_form4_over_holiday(self):
        assert calculate_form4_deadline(date(2025, 7, 3)).deadline == date(2025, 7, 8)

    def test_schedule_13d_calendar_days(self):
        result = calculate_schedule_13d_deadline(date(2025, 3, 5))
        assert result.deadline == date(2025, 3, 15)
        assert result.is_business_days is False
        assert result.days_allowed == 10

    def test_rejects_malformed_date(self):
        with pytest.raises(InvalidInputError):
            calculate_8k_deadline("June 10")


class TestCommentResponse:
    """Tests for SEC comment letter response windows."""

    def test_default_ten_business_days(self):
        result = calculate_comment_response_deadline(date(2025, 2, 10), today=date(2025, 2, 21))
        assert result.response_deadline == date(2025, 2, 25)
        assert result.days_remaining == 4
        assert result.business_days_remaining == 2
        assert result.can_request_extension is True
        assert result.is_overdue is False

    def test_no_extension_with_one_day_left(self):
        result = calculate_comment_response_deadline(date(2025, 2, 10), today=date(2025, 2, 24))
        assert result.business_days_remaining == 1
        assert result.can_request_extension is False

    def test_overdue(self):
        result = calculate_comment_response_deadline(date(2025, 2, 10), today=date(2025, 2, 26))
        assert result.is_overdue is True
        assert result.can_request_extension is False

    def test_custom_response_days(self):
        result = calculate_comment_response_deadline(date(2025, 2, 10), response_days=5, today=date(2025, 2, 10))
        assert result.response_deadline == date(2025, 2, 18)


class TestSpacTermDeadlines:
    """Tests for dates derived from the IPO."""

    def test_default_term(self):
        result = calculate_spac_deadlines(date(2023, 1, 10))
        assert result.liquidation_deadline == date(2025, 1, 10)
        assert result.extension_deadline == date(2024, 12, 11)
        assert result.proxy_filing_deadline is None
        assert result.redemption_deadline is None

    def test_with_extensions(self):
        result = calculate_spac_deadlines(date(2023, 1, 10), extension_months=extended_term_months(2))
        assert result.liquidation_deadline == date(2025, 7, 10)

    def test_month_end_clamped(self):
        result = calculate_spac_deadlines(date(2023, 8, 31), term_months=24, extension_months=6)
        assert result.liquidation_deadline == date(2026, 2, 28)

    def test_vote_derived_dates(self):
        result = calculate_spac_deadlines(date(2023, 1, 10), term_months=24, vote_date=date(2024, 9, 20))
        assert result.redemption_deadline == date(2024, 9, 18)
        assert result.proxy_filing_deadline == date(2024, 8, 22)
        assert result.vote_deadline == date(2024, 9, 20)

    def test_extended_term_months(self):
        assert extended_term_months(0) == 0
        assert extended_term_months(3) == 9
