"""
Alert Classifier.

Projects deadline calculations onto alerts:
- Overdue or CRITICAL urgency -> CRITICAL
- HIGH urgency -> WARNING
- Anything else -> INFO

Alerts are sorted by severity, then deadline.
"""

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Union

from deadlines.calculator import format_deadline
from deadlines.models import DeadlineCalculation, FilingDeadlineItem
from rules.catalog import get_filing_definition
from rules.rule_types import Urgency

from .models import AlertSeverity, DeadlineAlert

AlertSource = Union[DeadlineCalculation, FilingDeadlineItem]


def classify_severity(calc: DeadlineCalculation) -> AlertSeverity:
    if calc.is_overdue or calc.urgency == Urgency.CRITICAL:
        return AlertSeverity.CRITICAL
    if calc.urgency == Urgency.HIGH:
        return AlertSeverity.WARNING
    return AlertSeverity.INFO


def _title_and_message(calc: DeadlineCalculation, short_name: str) -> tuple:
    due = format_deadline(calc.deadline)
    if calc.is_overdue:
        return (
            f"OVERDUE: {short_name} Filing",
            f"Filing was due {due}. Immediate action required.",
        )
    if calc.urgency == Urgency.CRITICAL:
        return (
            f"URGENT: {short_name} Deadline Approaching",
            f"Filing due in {calc.business_days_remaining} business days ({due}).",
        )
    if calc.urgency == Urgency.HIGH:
        return (
            f"{short_name} Deadline Approaching",
            f"Filing due in {calc.business_days_remaining} business days ({due}).",
        )
    return (
        f"Upcoming {short_name} Filing",
        f"Filing due {due} ({calc.days_remaining} days).",
    )


def to_alert(calc: AlertSource, now: datetime) -> DeadlineAlert:
    """Build the alert for a single calculation or deadline item."""
    short_name = get_filing_definition(calc.filing_type).short_name
    title, message = _title_and_message(calc, short_name)

    if isinstance(calc, FilingDeadlineItem):
        alert_id = f"alert-{calc.id}"
        entity_id, entity_name = calc.entity_id, calc.entity_name
    else:
        alert_id = f"alert-{calc.filing_type.value}-{calc.deadline.isoformat()}"
        entity_id = entity_name = None

    return DeadlineAlert(
        id=alert_id,
        entity_id=entity_id,
        entity_name=entity_name,
        filing_type=calc.filing_type,
        severity=classify_severity(calc),
        title=title,
        message=message,
        deadline=calc.deadline,
        days_remaining=calc.days_remaining,
        business_days_remaining=calc.business_days_remaining,
        created_at=now,
    )


def to_alerts(deadlines: Iterable[AlertSource], now: Optional[datetime] = None) -> List[DeadlineAlert]:
    """
    Convert deadlines to alerts.

    Args:
        deadlines: DeadlineCalculation or FilingDeadlineItem values
        now: Creation timestamp shared by every alert (defaults to now, UTC)

    Returns:
        Alerts sorted by severity rank, then deadline ascending
    """
    now = now or datetime.now(timezone.utc)
    alerts = [to_alert(calc, now) for calc in deadlines]
    alerts.sort(key=lambda a: (a.severity.rank, a.deadline))
    return alerts


def summarize_alerts(alerts: Iterable[DeadlineAlert]) -> Dict[str, int]:
    """Count alerts per severity; every severity is present in the result."""
    summary = {severity.value: 0 for severity in AlertSeverity}
    for alert in alerts:
        summary[alert.severity.value] += 1
    summary["total"] = sum(summary.values())
    return summary
