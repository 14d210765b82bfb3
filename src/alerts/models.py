"""Alert data models."""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from rules.rule_types import FilingType


class AlertSeverity(str, Enum):
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    INFO = "INFO"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    AlertSeverity.CRITICAL: 0,
    AlertSeverity.WARNING: 1,
    AlertSeverity.INFO: 2,
}


class DeadlineAlert(BaseModel):
    """A user-facing alert for one deadline."""
    model_config = ConfigDict(frozen=True)

    id: str
    entity_id: Optional[str] = None
    entity_name: Optional[str] = None
    filing_type: FilingType
    severity: AlertSeverity
    title: str
    message: str
    deadline: date
    days_remaining: int
    business_days_remaining: int
    created_at: datetime
