"""
Deadline data models.

All models are frozen; the engine builds new values rather than updating
existing ones.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rules.rule_types import (
    DeadlineCategory,
    DeadlineStatus,
    FilingType,
    Urgency,
    UrgencyLevel,
)


class WarningThresholds(BaseModel):
    """Dates on which a deadline escalates to each urgency tier."""
    model_config = ConfigDict(frozen=True)

    critical: date = Field(description="Deadline minus the critical window")
    high: date = Field(description="Deadline minus the high window")
    medium: date = Field(description="Deadline minus the medium window")


class DeadlineCalculation(BaseModel):
    """Result of computing a single filing deadline relative to today."""
    model_config = ConfigDict(frozen=True)

    filing_type: FilingType
    base_date: date = Field(description="Event or period end the deadline counts from")
    deadline: date
    is_business_days: bool = Field(description="Whether days_allowed counts business days")
    days_allowed: int = Field(ge=0)
    days_remaining: int = Field(description="Calendar days from today; negative when overdue")
    business_days_remaining: int = Field(ge=0)
    is_overdue: bool
    urgency: Urgency
    warning_thresholds: WarningThresholds


class FilingDeadlineItem(DeadlineCalculation):
    """A deadline generated for a specific SPAC."""

    id: str = Field(description="'{entity_id}-{filing_type}-{deadline ISO date}'")
    entity_id: str
    entity_name: str
    filing_short_name: str
    description: str
    category: DeadlineCategory
    event_date: Optional[date] = None
    status: DeadlineStatus
    urgency_level: UrgencyLevel


class EventBasedDeadline(BaseModel):
    """Deadline triggered by a discrete corporate event."""
    model_config = ConfigDict(frozen=True)

    id: str
    filing_type: FilingType
    event_type: str
    event_date: date
    deadline: date
    is_business_days: bool
    days_allowed: int
    description: str


class CommentResponseDeadline(BaseModel):
    """Response window for an SEC staff comment letter."""
    model_config = ConfigDict(frozen=True)

    comment_received_date: date
    response_deadline: date
    days_remaining: int
    business_days_remaining: int
    is_overdue: bool
    can_request_extension: bool


class SpacTermDeadlines(BaseModel):
    """Key dates derived from a SPAC's IPO and term."""
    model_config = ConfigDict(frozen=True)

    liquidation_deadline: date
    extension_deadline: date
    proxy_filing_deadline: Optional[date] = None
    redemption_deadline: Optional[date] = None
    vote_deadline: Optional[date] = None


class ScheduleStatus(str, Enum):
    UPCOMING = "UPCOMING"  # period has not ended
    DUE = "DUE"            # period ended, deadline not passed
    OVERDUE = "OVERDUE"


class PeriodicFilingScheduleEntry(BaseModel):
    """One periodic report in a rolling filing schedule."""
    model_config = ConfigDict(frozen=True)

    filing_type: FilingType
    period_type: str = Field(description="YEAR or QUARTER")
    fiscal_year: int
    quarter: Optional[int] = None
    period_start: date
    period_end: date
    filing_deadline: date
    status: ScheduleStatus
