"""
Tests for the alert classifier.
"""

import pytest
import os
import sys
from datetime import date, datetime, timezone

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from alerts import AlertSeverity, classify_severity, summarize_alerts, to_alert, to_alerts
from deadlines import evaluate_deadline, generate_deadlines
from rules.rule_types import FilingType

NOW = datetime(2025, 2, 1, 12, 0, tzinfo=timezone.utc)
DEADLINE = date(2025, 3, 1)


def _calc(today, filing_type=FilingType.FORM_8K, deadline=DEADLINE):
    return evaluate_deadline(filing_type, deadline, deadline, today=today)


class TestSeverity:
    """Tests for urgency to severity mapping."""

    @pytest.mark.parametrize("today,expected", [
        (date(2025, 3, 3), AlertSeverity.CRITICAL),
        (date(2025, 2, 27), AlertSeverity.CRITICAL),
        (date(2025, 2, 21), AlertSeverity.WARNING),
        (date(2025, 2, 12), AlertSeverity.INFO),
        (date(2025, 2, 1), AlertSeverity.INFO),
    ])
    def test_classify(self, today, expected):
        assert classify_severity(_calc(today)) == expected


class TestAlertText:
    """Tests for alert titles and messages."""

    def test_overdue(self):
        alert = to_alert(_calc(date(2025, 3, 3)), NOW)
        assert alert.title == "OVERDUE: 8-K Filing"
        assert alert.message == "Filing was due Mar 1, 2025. Immediate action required."

    def test_critical(self):
        alert = to_alert(_calc(date(2025, 2, 27)), NOW)
        assert alert.title == "URGENT: 8-K Deadline Approaching"
        assert alert.message == "Filing due in 1 business days (Mar 1, 2025)."

    def test_warning(self):
        alert = to_alert(_calc(date(2025, 2, 21)), NOW)
        assert alert.severity == AlertSeverity.WARNING
        assert alert.title == "8-K Deadline Approaching"

    def test_info(self):
        alert = to_alert(_calc(date(2025, 2, 1)), NOW)
        assert alert.title == "Upcoming 8-K Filing"
        assert alert.message == "Filing due Mar 1, 2025 (28 days)."

    def test_calculation_alert_id(self):
        alert = to_alert(_calc(date(2025, 2, 1)), NOW)
        assert alert.id == "alert-FORM_8K-2025-03-01"
        assert alert.entity_id is None
        assert alert.created_at == NOW


class TestAlertList:
    """Tests for alert lists built from deadline items."""

    def test_sorted_by_severity_then_deadline(self):
        alerts = to_alerts([
            _calc(date(2025, 2, 1), FilingType.FORM_4, date(2025, 2, 20)),
            _calc(date(2025, 2, 1), FilingType.FORM_8K, date(2025, 2, 4)),
            _calc(date(2025, 2, 1), FilingType.SC_13D, date(2025, 2, 10)),
        ], now=NOW)
        assert [a.severity for a in alerts] == [
            AlertSeverity.CRITICAL,
            AlertSeverity.WARNING,
            AlertSeverity.INFO,
        ]

    def test_equal_severity_by_deadline(self):
        alerts = to_alerts([
            _calc(date(2025, 2, 1), deadline=date(2025, 6, 1)),
            _calc(date(2025, 2, 1), deadline=date(2025, 4, 1)),
        ], now=NOW)
        assert [a.deadline for a in alerts] == [date(2025, 4, 1), date(2025, 6, 1)]

    def test_items_carry_entity(self, searching_spac, today):
        alerts = to_alerts(generate_deadlines(searching_spac, today), now=NOW)
        assert len(alerts) == 5
        assert all(a.entity_id == "spac-001" for a in alerts)
        assert "alert-spac-001-OTHER-2025-03-01" in {a.id for a in alerts}

    def test_summary(self):
        alerts = to_alerts([
            _calc(date(2025, 3, 3)),
            _calc(date(2025, 2, 27)),
            _calc(date(2025, 2, 1)),
        ], now=NOW)
        assert summarize_alerts(alerts) == {
            "CRITICAL": 2,
            "WARNING": 0,
            "INFO": 1,
            "total": 3,
        }

    def test_empty_summary(self):
        assert summarize_alerts([])["total"] == 0
