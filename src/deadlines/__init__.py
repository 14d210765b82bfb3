"""
Filing deadline computation.

- ``calculator``: single filing deadline with urgency classification
- ``lifecycle``: all deadlines for a SPAC snapshot
- ``periodic_schedule``: rolling 10-K / 10-Q schedule
- ``event_deadlines``: event-triggered filings and SPAC term dates
"""

from .aggregation import deduplicate_deadlines, filter_deadlines
from .calculator import (
    calculate_deadline,
    classify_urgency,
    evaluate_deadline,
    format_deadline,
    get_deadline_status,
    warning_thresholds,
)
from .event_deadlines import (
    calculate_8k_deadline,
    calculate_comment_response_deadline,
    calculate_form4_deadline,
    calculate_schedule_13d_deadline,
    calculate_spac_deadlines,
    calculate_super_8k_deadline,
)
from .lifecycle import generate_deadlines, generate_deadlines_for_many, sort_deadlines
from .models import (
    CommentResponseDeadline,
    DeadlineCalculation,
    EventBasedDeadline,
    FilingDeadlineItem,
    PeriodicFilingScheduleEntry,
    ScheduleStatus,
    SpacTermDeadlines,
    WarningThresholds,
)
from .periodic_schedule import generate_periodic_filing_schedule

__all__ = [
    "CommentResponseDeadline",
    "DeadlineCalculation",
    "EventBasedDeadline",
    "FilingDeadlineItem",
    "PeriodicFilingScheduleEntry",
    "ScheduleStatus",
    "SpacTermDeadlines",
    "WarningThresholds",
    "calculate_8k_deadline",
    "calculate_comment_response_deadline",
    "calculate_deadline",
    "calculate_form4_deadline",
    "calculate_schedule_13d_deadline",
    "calculate_spac_deadlines",
    "calculate_super_8k_deadline",
    "classify_urgency",
    "deduplicate_deadlines",
    "evaluate_deadline",
    "filter_deadlines",
    "format_deadline",
    "generate_deadlines",
    "generate_deadlines_for_many",
    "generate_periodic_filing_schedule",
    "get_deadline_status",
    "sort_deadlines",
    "warning_thresholds",
]
