"""Insider trading blackout periods.

Blackout periods are loaded from ``blackout_periods.yaml``. Their start and
end rules are descriptive text; the engine only evaluates whether a date
falls inside a concrete window.
"""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum
from functools import lru_cache
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config.compliance_config_loader import get_config_loader
from domain.exceptions import ComplianceConfigError, InvalidInputError


class BlackoutType(str, Enum):
    QUARTERLY_EARNINGS = "QUARTERLY_EARNINGS"
    ANNUAL_EARNINGS = "ANNUAL_EARNINGS"
    MATERIAL_EVENT = "MATERIAL_EVENT"
    CUSTOM = "CUSTOM"


class AffectedParty(str, Enum):
    DIRECTORS = "DIRECTORS"
    OFFICERS = "OFFICERS"
    EMPLOYEES = "EMPLOYEES"
    TEN_PERCENT_HOLDERS = "TEN_PERCENT_HOLDERS"


class BlackoutPeriod(BaseModel):
    """A standard blackout policy."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: BlackoutType
    start_rule: str
    end_rule: str
    default_duration_days: int = Field(ge=0)
    affected_parties: Tuple[AffectedParty, ...]
    description: str = ""

    def affects(self, party: AffectedParty) -> bool:
        return party in self.affected_parties


@lru_cache(maxsize=1)
def get_blackout_periods() -> Tuple[BlackoutPeriod, ...]:
    """
    Standard blackout periods, loaded once per process.

    Raises:
        ComplianceConfigError: If a record fails validation
    """
    records = get_config_loader().get_blackout_periods()
    try:
        return tuple(BlackoutPeriod.model_validate(r) for r in records)
    except ValidationError as e:
        raise ComplianceConfigError(f"Invalid blackout period: {e}", {"file": "blackout_periods.yaml"}) from e


def get_blackout_period(period_id: str) -> Optional[BlackoutPeriod]:
    for period in get_blackout_periods():
        if period.id == period_id:
            return period
    return None


def blackout_window(period: BlackoutPeriod, anchor: date) -> Tuple[date, date]:
    """
    Concrete window for a blackout period starting on ``anchor``.

    The window spans ``default_duration_days`` calendar days after the
    anchor, inclusive of both ends. A zero-day period covers the anchor only.
    """
    return anchor, anchor + timedelta(days=period.default_duration_days)


def is_in_blackout(d: date, window_start: date, window_end: date) -> bool:
    """
    Check whether a date falls inside a blackout window (inclusive).

    Raises:
        InvalidInputError: If the window ends before it starts
    """
    if window_end < window_start:
        raise InvalidInputError(
            "Blackout window ends before it starts",
            {"window_start": window_start.isoformat(), "window_end": window_end.isoformat()},
        )
    return window_start <= d <= window_end


def active_blackouts(
    d: date,
    anchors: List[Tuple[BlackoutPeriod, date]],
    party: Optional[AffectedParty] = None,
) -> List[BlackoutPeriod]:
    """
    Periods whose window, started at the paired anchor, contains ``d``.

    When ``party`` is given, only periods that restrict that party count.
    """
    return [
        period for period, anchor in anchors
        if (party is None or period.affects(party))
        and is_in_blackout(d, *blackout_window(period, anchor))
    ]
