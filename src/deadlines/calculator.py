"""
Deadline Calculator.

Computes the filing deadline for a (filing type, base date, filer status)
triple and classifies its urgency relative to today.

Rules:
- 10-K and 10-Q use the filer tier's day count, in calendar days
- Filings flagged ``deadline_business_days`` add business days
- Other filings with a day count add calendar days
- Filings without a day count are due on the base date itself
- The result is moved back to the previous business day until it lands on one
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Optional, Union

from business_calendar import (
    add_business_days,
    count_business_days,
    is_business_day,
    previous_business_day,
    sub_business_days,
)
from config.settings import ComplianceSettings, get_compliance_settings
from domain.exceptions import InvalidInputError
from rules.catalog import get_filer_deadline_days, get_filing_definition
from rules.rule_types import DeadlineStatus, FilerStatus, FilingType, Urgency, coerce_enum

from .models import DeadlineCalculation, WarningThresholds

logger = logging.getLogger(__name__)

DateLike = Union[date, str]


def coerce_date(value: Any, field_name: str) -> date:
    """
    Convert a date, datetime or ISO-8601 string to a date.

    Raises:
        InvalidInputError: If the value is not a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise InvalidInputError(
        f"Invalid {field_name}: {value!r}",
        {"field": field_name, "value": str(value)},
    )


def snap_to_business_day(d: date) -> date:
    """Move a date back to the nearest business day on or before it."""
    while not is_business_day(d):
        d = previous_business_day(d)
    return d


def warning_thresholds(
    deadline: date,
    settings: Optional[ComplianceSettings] = None,
) -> WarningThresholds:
    """Escalation dates for a deadline, counted back in business days."""
    settings = settings or get_compliance_settings()
    return WarningThresholds(
        critical=sub_business_days(deadline, settings.critical_threshold_business_days),
        high=sub_business_days(deadline, settings.high_threshold_business_days),
        medium=sub_business_days(deadline, settings.medium_threshold_business_days),
    )


def classify_urgency(today: date, deadline: date, thresholds: WarningThresholds) -> Urgency:
    """
    Urgency tier of a deadline on a given day.

    Thresholds are inclusive: reaching the critical date is already CRITICAL.
    """
    if deadline < today or today >= thresholds.critical:
        return Urgency.CRITICAL
    if today >= thresholds.high:
        return Urgency.HIGH
    if today >= thresholds.medium:
        return Urgency.MEDIUM
    return Urgency.LOW


def evaluate_deadline(
    filing_type: Union[str, FilingType],
    base_date: DateLike,
    deadline: DateLike,
    days_allowed: int = 0,
    is_business_days: bool = False,
    today: Optional[date] = None,
    settings: Optional[ComplianceSettings] = None,
) -> DeadlineCalculation:
    """
    Evaluate an already-known deadline date against today.

    The deadline is used as given, without snapping to a business day.

    Args:
        filing_type: Filing the deadline belongs to
        base_date: Event or period end the deadline counts from
        deadline: The due date
        days_allowed: Days between base date and deadline, for display
        is_business_days: Whether days_allowed counts business days
        today: Evaluation date (defaults to the system date)
        settings: Compliance settings override

    Returns:
        DeadlineCalculation for the given dates
    """
    ft = coerce_enum(FilingType, filing_type, "filing_type")
    base = coerce_date(base_date, "base_date")
    due = coerce_date(deadline, "deadline")
    today = coerce_date(today, "today") if today is not None else date.today()

    thresholds = warning_thresholds(due, settings)
    return DeadlineCalculation(
        filing_type=ft,
        base_date=base,
        deadline=due,
        is_business_days=is_business_days,
        days_allowed=max(days_allowed, 0),
        days_remaining=(due - today).days,
        business_days_remaining=count_business_days(today, due),
        is_overdue=due < today,
        urgency=classify_urgency(today, due, thresholds),
        warning_thresholds=thresholds,
    )


def calculate_deadline(
    filing_type: Union[str, FilingType],
    base_date: DateLike,
    filer_status: Optional[Union[str, FilerStatus]] = None,
    today: Optional[date] = None,
    settings: Optional[ComplianceSettings] = None,
) -> DeadlineCalculation:
    """
    Calculate a filing deadline.

    Args:
        filing_type: Filing type (enum member or value)
        base_date: Period end or triggering event date
        filer_status: Filer tier; only affects 10-K and 10-Q. Defaults to
            the configured default_filer_status
        today: Evaluation date (defaults to the system date)
        settings: Compliance settings override

    Returns:
        DeadlineCalculation with urgency and warning thresholds

    Raises:
        InvalidInputError: For an unknown filing type or filer status, or a
            malformed date
    """
    settings = settings or get_compliance_settings()
    definition = get_filing_definition(filing_type)
    days = get_filer_deadline_days(definition.type, filer_status or settings.default_filer_status)
    base = coerce_date(base_date, "base_date")

    is_business_days = False
    if days is None:
        if definition.type == FilingType.OTHER:
            logger.warning(
                f"No deadline rule for {definition.type.value}; "
                f"using base date {base.isoformat()} as the deadline"
            )
        else:
            logger.debug(f"{definition.short_name} has no fixed deadline; due on base date")
        deadline = base
        days = 0
    elif definition.type in (FilingType.FORM_10K, FilingType.FORM_10Q):
        deadline = base + timedelta(days=days)
    elif definition.deadline_business_days:
        deadline = add_business_days(base, days)
        is_business_days = True
    else:
        deadline = base + timedelta(days=days)

    deadline = snap_to_business_day(deadline)

    return evaluate_deadline(
        definition.type,
        base,
        deadline,
        days_allowed=days,
        is_business_days=is_business_days,
        today=today,
        settings=settings,
    )


def get_deadline_status(
    deadline: date,
    today: Optional[date] = None,
    settings: Optional[ComplianceSettings] = None,
) -> DeadlineStatus:
    """Display status of a deadline relative to today."""
    settings = settings or get_compliance_settings()
    today = today or date.today()
    days = (deadline - today).days

    if days < 0:
        return DeadlineStatus.OVERDUE
    if days == 0:
        return DeadlineStatus.DUE_TODAY
    if days <= settings.due_soon_days:
        return DeadlineStatus.DUE_SOON
    if days <= settings.upcoming_days:
        return DeadlineStatus.UPCOMING
    return DeadlineStatus.FUTURE


def format_deadline(d: date) -> str:
    """Format a deadline as e.g. 'Mar 1, 2025'."""
    return f"{d.strftime('%b')} {d.day}, {d.year}"
