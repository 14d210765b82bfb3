"""
Tests for the deadline calculator.

These tests verify:
1. Tier-specific 10-K and 10-Q deadlines
2. Business-day and calendar-day event filings
3. Snapping to the previous business day
4. Urgency classification at the exact threshold boundaries
5. Display status and formatting helpers
"""

import logging
import pytest
import os
import sys
from datetime import date, datetime, timedelta

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from business_calendar import is_business_day
from deadlines import (
    calculate_deadline,
    classify_urgency,
    evaluate_deadline,
    format_deadline,
    get_deadline_status,
    warning_thresholds,
)
from deadlines.calculator import coerce_date, snap_to_business_day
from domain.exceptions import InvalidInputError
from rules.rule_types import DeadlineStatus, FilerStatus, FilingType, Urgency


class TestPeriodicDeadlines:
    """Tests for 10-K and 10-Q deadlines by filer tier."""

    def test_10k_non_accelerated(self):
        calc = calculate_deadline(FilingType.FORM_10K, date(2024, 12, 31), today=date(2025, 1, 2))
        assert calc.deadline == date(2025, 3, 31)
        assert calc.days_allowed == 90
        assert calc.is_business_days is False

    def test_10k_large_accelerated_snaps_back(self):
        """60 days after Dec 31, 2024 is Saturday Mar 1; the deadline is Friday."""
        calc = calculate_deadline(
            "FORM_10K", date(2024, 12, 31), "LARGE_ACCELERATED", today=date(2025, 1, 2)
        )
        assert calc.deadline == date(2025, 2, 28)
        assert calc.days_allowed == 60

    def test_10k_accelerated_snaps_back_from_sunday(self):
        calc = calculate_deadline(
            FilingType.FORM_10K, date(2024, 12, 31), FilerStatus.ACCELERATED, today=date(2025, 1, 2)
        )
        assert calc.deadline == date(2025, 3, 14)

    def test_10q_large_accelerated(self):
        calc = calculate_deadline(
            FilingType.FORM_10Q, date(2025, 3, 31), FilerStatus.LARGE_ACCELERATED, today=date(2025, 4, 1)
        )
        assert calc.deadline == date(2025, 5, 9)

    def test_configured_default_filer_status(self, monkeypatch):
        monkeypatch.setenv("COMPLIANCE_DEFAULT_FILER_STATUS", "LARGE_ACCELERATED")
        calc = calculate_deadline(FilingType.FORM_10K, date(2024, 12, 31), today=date(2025, 1, 2))
        assert calc.days_allowed == 60
        assert calc.deadline == date(2025, 2, 28)


class TestEventDeadlines:
    """Tests for event-triggered filings."""

    def test_8k_four_business_days(self):
        calc = calculate_deadline(FilingType.FORM_8K, date(2024, 6, 10), today=date(2024, 6, 10))
        assert calc.deadline == date(2024, 6, 14)
        assert calc.is_business_days is True
        assert calc.days_allowed == 4
        assert calc.business_days_remaining == 4

    def test_form4_skips_independence_day(self):
        calc = calculate_deadline(FilingType.FORM_4, date(2025, 7, 3), today=date(2025, 7, 3))
        assert calc.deadline == date(2025, 7, 8)

    def test_13d_calendar_days_snapped(self):
        """Ten calendar days lands on a Saturday and moves back to Friday."""
        calc = calculate_deadline(FilingType.SC_13D, date(2025, 3, 5), today=date(2025, 3, 5))
        assert calc.deadline == date(2025, 3, 14)
        assert calc.is_business_days is False

    def test_business_day_filings_land_on_business_days(self):
        for day in range(1, 29):
            base = date(2025, 11, day)
            for filing_type in (FilingType.FORM_8K, FilingType.FORM_4, FilingType.SUPER_8K):
                calc = calculate_deadline(filing_type, base, today=base)
                assert is_business_day(calc.deadline)

    def test_filing_without_day_count_due_on_base(self):
        calc = calculate_deadline(FilingType.S1, date(2025, 3, 12), today=date(2025, 3, 1))
        assert calc.deadline == date(2025, 3, 12)
        assert calc.days_allowed == 0

    def test_other_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="deadlines.calculator"):
            calc = calculate_deadline(FilingType.OTHER, date(2025, 3, 12), today=date(2025, 3, 1))
        assert calc.deadline == date(2025, 3, 12)
        assert calc.days_allowed == 0
        assert any("No deadline rule" in r.getMessage() for r in caplog.records)

    def test_later_base_never_earlier_deadline(self):
        previous = None
        for day in range(1, 31):
            calc = calculate_deadline(FilingType.FORM_8K, date(2025, 6, day), today=date(2025, 6, 1))
            if previous is not None:
                assert calc.deadline >= previous
            previous = calc.deadline


class TestInvalidInput:
    """Invalid input fails fast."""

    def test_unknown_filing_type(self):
        with pytest.raises(InvalidInputError):
            calculate_deadline("FORM_99", date(2025, 1, 1))

    def test_unknown_filer_status(self):
        with pytest.raises(InvalidInputError):
            calculate_deadline(FilingType.FORM_10K, date(2024, 12, 31), "HUGE")

    def test_malformed_date(self):
        with pytest.raises(InvalidInputError) as exc_info:
            calculate_deadline(FilingType.FORM_8K, "2025-13-01")
        assert exc_info.value.details["field"] == "base_date"

    def test_iso_string_accepted(self):
        calc = calculate_deadline(FilingType.FORM_8K, "2024-06-10", today=date(2024, 6, 1))
        assert calc.base_date == date(2024, 6, 10)

    def test_coerce_datetime(self):
        assert coerce_date(datetime(2025, 2, 1, 15, 30), "today") == date(2025, 2, 1)

    def test_coerce_rejects_other_types(self):
        with pytest.raises(InvalidInputError):
            coerce_date(20250201, "today")


class TestUrgency:
    """Urgency tiers against the default 3/7/14 business-day thresholds."""

    DEADLINE = date(2025, 3, 1)

    def test_thresholds(self):
        thresholds = warning_thresholds(self.DEADLINE)
        assert thresholds.critical == date(2025, 2, 26)
        assert thresholds.high == date(2025, 2, 20)
        assert thresholds.medium == date(2025, 2, 10)

    @pytest.mark.parametrize("today,expected", [
        (date(2025, 3, 2), Urgency.CRITICAL),
        (date(2025, 2, 26), Urgency.CRITICAL),
        (date(2025, 2, 25), Urgency.HIGH),
        (date(2025, 2, 20), Urgency.HIGH),
        (date(2025, 2, 19), Urgency.MEDIUM),
        (date(2025, 2, 10), Urgency.MEDIUM),
        (date(2025, 2, 9), Urgency.LOW),
        (date(2025, 2, 1), Urgency.LOW),
    ])
    def test_boundaries(self, today, expected):
        calc = evaluate_deadline(FilingType.OTHER, self.DEADLINE, self.DEADLINE, today=today)
        assert calc.urgency == expected

    def test_overdue(self):
        calc = evaluate_deadline(FilingType.OTHER, self.DEADLINE, self.DEADLINE, today=date(2025, 3, 2))
        assert calc.is_overdue is True
        assert calc.days_remaining == -1
        assert calc.business_days_remaining == 0

    def test_urgency_never_decreases_as_today_advances(self):
        order = [Urgency.LOW, Urgency.MEDIUM, Urgency.HIGH, Urgency.CRITICAL]
        thresholds = warning_thresholds(self.DEADLINE)
        previous = 0
        for day in range(1, 29):
            rank = order.index(classify_urgency(date(2025, 2, day), self.DEADLINE, thresholds))
            assert rank >= previous
            previous = rank

    def test_remaining_days_never_decrease_as_today_moves_back(self):
        previous_days = previous_business_days = None
        for offset in range(0, 60):
            today = date(2025, 3, 15) - timedelta(days=offset)
            calc = evaluate_deadline(FilingType.OTHER, self.DEADLINE, self.DEADLINE, today=today)
            if previous_days is not None:
                assert calc.days_remaining >= previous_days
                assert calc.business_days_remaining >= previous_business_days
            previous_days = calc.days_remaining
            previous_business_days = calc.business_days_remaining

    def test_evaluate_does_not_snap(self):
        calc = evaluate_deadline(FilingType.DEF14A, date(2024, 9, 20), date(2024, 8, 31), today=date(2024, 8, 1))
        assert calc.deadline == date(2024, 8, 31)

    def test_custom_thresholds(self):
        from config.settings import ComplianceSettings
        settings = ComplianceSettings(
            critical_threshold_business_days=1,
            high_threshold_business_days=2,
            medium_threshold_business_days=3,
        )
        calc = evaluate_deadline(
            FilingType.OTHER, self.DEADLINE, self.DEADLINE, today=date(2025, 2, 26), settings=settings
        )
        assert calc.urgency == Urgency.MEDIUM


class TestDisplayHelpers:
    """Tests for deadline status and formatting."""

    DEADLINE = date(2025, 3, 1)

    @pytest.mark.parametrize("today,expected", [
        (date(2025, 3, 2), DeadlineStatus.OVERDUE),
        (date(2025, 3, 1), DeadlineStatus.DUE_TODAY),
        (date(2025, 2, 22), DeadlineStatus.DUE_SOON),
        (date(2025, 2, 21), DeadlineStatus.UPCOMING),
        (date(2025, 1, 30), DeadlineStatus.UPCOMING),
        (date(2025, 1, 29), DeadlineStatus.FUTURE),
    ])
    def test_deadline_status(self, today, expected):
        assert get_deadline_status(self.DEADLINE, today) == expected

    def test_format_deadline(self):
        assert format_deadline(date(2025, 3, 1)) == "Mar 1, 2025"
        assert format_deadline(date(2024, 12, 25)) == "Dec 25, 2024"

    def test_snap_to_business_day(self):
        assert snap_to_business_day(date(2025, 3, 1)) == date(2025, 2, 28)
        assert snap_to_business_day(date(2025, 2, 17)) == date(2025, 2, 14)
        assert snap_to_business_day(date(2025, 2, 18)) == date(2025, 2, 18)
