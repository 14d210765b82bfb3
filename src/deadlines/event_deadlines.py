"""
Event-driven deadline helpers.

Standalone calculators for filings triggered by a single event, plus the
SPAC term dates derived from the IPO. These do not consult lifecycle stage.
"""

from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from business_calendar import add_business_days, count_business_days, sub_business_days
from config.settings import ComplianceSettings, get_compliance_settings
from rules.rule_types import FilingType

from .calculator import coerce_date
from .models import CommentResponseDeadline, EventBasedDeadline, SpacTermDeadlines

# Business days that must remain to ask the SEC staff for more time
EXTENSION_REQUEST_MIN_BUSINESS_DAYS = 2


def _event_deadline(
    prefix: str,
    filing_type: FilingType,
    event_type: str,
    event_date: date,
    days: int,
    is_business_days: bool,
    description: str,
) -> EventBasedDeadline:
    event_date = coerce_date(event_date, "event_date")
    if is_business_days:
        deadline = add_business_days(event_date, days)
    else:
        deadline = event_date + timedelta(days=days)
    return EventBasedDeadline(
        id=f"{prefix}-{event_date.isoformat()}",
        filing_type=filing_type,
        event_type=event_type,
        event_date=event_date,
        deadline=deadline,
        is_business_days=is_business_days,
        days_allowed=days,
        description=description,
    )


def calculate_8k_deadline(event_date: date) -> EventBasedDeadline:
    return _event_deadline(
        "8k", FilingType.FORM_8K, "Material Event", event_date, 4, True,
        "Form 8-K must be filed within 4 business days of triggering event",
    )


def calculate_super_8k_deadline(closing_date: date) -> EventBasedDeadline:
    return _event_deadline(
        "super8k", FilingType.SUPER_8K, "De-SPAC Transaction Closing", closing_date, 4, True,
        "Super 8-K must be filed within 4 business days of transaction closing",
    )


def calculate_form4_deadline(transaction_date: date) -> EventBasedDeadline:
    return _event_deadline(
        "form4", FilingType.FORM_4, "Insider Transaction", transaction_date, 2, True,
        "Form 4 must be filed within 2 business days of insider transaction",
    )


def calculate_schedule_13d_deadline(acquisition_date: date) -> EventBasedDeadline:
    return _event_deadline(
        "13d", FilingType.SC_13D, "5% Beneficial Ownership Acquired", acquisition_date, 10, False,
        "Schedule 13D must be filed within 10 calendar days of crossing 5% threshold",
    )


def calculate_comment_response_deadline(
    comment_received_date: date,
    response_days: Optional[int] = None,
    today: Optional[date] = None,
    settings: Optional[ComplianceSettings] = None,
) -> CommentResponseDeadline:
    """
    Response window for an SEC comment letter.

    Args:
        comment_received_date: Date the comment letter arrived
        response_days: Business days allowed; defaults to the configured
            comment response window
        today: Evaluation date (defaults to the system date)

    Returns:
        CommentResponseDeadline; an extension can be requested while at
        least two business days remain
    """
    settings = settings or get_compliance_settings()
    received = coerce_date(comment_received_date, "comment_received_date")
    today = today or date.today()
    if response_days is None:
        response_days = settings.comment_response_business_days

    response_deadline = add_business_days(received, response_days)
    business_days_remaining = count_business_days(today, response_deadline)
    return CommentResponseDeadline(
        comment_received_date=received,
        response_deadline=response_deadline,
        days_remaining=(response_deadline - today).days,
        business_days_remaining=business_days_remaining,
        is_overdue=response_deadline < today,
        can_request_extension=business_days_remaining >= EXTENSION_REQUEST_MIN_BUSINESS_DAYS,
    )


def calculate_spac_deadlines(
    ipo_date: date,
    term_months: Optional[int] = None,
    extension_months: int = 0,
    vote_date: Optional[date] = None,
    settings: Optional[ComplianceSettings] = None,
) -> SpacTermDeadlines:
    """
    Term dates for a SPAC.

    Args:
        ipo_date: IPO closing date
        term_months: Term before liquidation; defaults to the configured term
        extension_months: Total months of extensions granted
        vote_date: Scheduled shareholder vote, if any

    Returns:
        SpacTermDeadlines. Proxy and redemption dates are only set when a
        vote date is known.
    """
    settings = settings or get_compliance_settings()
    ipo = coerce_date(ipo_date, "ipo_date")
    if term_months is None:
        term_months = settings.default_term_months

    liquidation = ipo + relativedelta(months=term_months + extension_months)
    vote = coerce_date(vote_date, "vote_date") if vote_date is not None else None

    return SpacTermDeadlines(
        liquidation_deadline=liquidation,
        extension_deadline=liquidation - timedelta(days=settings.extension_notice_days),
        proxy_filing_deadline=(
            sub_business_days(vote, settings.preliminary_proxy_business_days) if vote else None
        ),
        redemption_deadline=(
            sub_business_days(vote, settings.redemption_business_days) if vote else None
        ),
        vote_deadline=vote,
    )


def extended_term_months(extension_count: int, settings: Optional[ComplianceSettings] = None) -> int:
    """Total extension months for a number of extensions taken."""
    settings = settings or get_compliance_settings()
    return extension_count * settings.extension_months
