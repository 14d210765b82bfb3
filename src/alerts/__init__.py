"""Deadline alerts."""

from .classifier import classify_severity, summarize_alerts, to_alert, to_alerts
from .models import AlertSeverity, DeadlineAlert

__all__ = [
    "AlertSeverity",
    "DeadlineAlert",
    "classify_severity",
    "summarize_alerts",
    "to_alert",
    "to_alerts",
]
