"""
SPAC entity snapshot and lifecycle stages.

A snapshot is the read-only view of a SPAC that the deadline engine consumes.
The engine never mutates it; stage changes happen in the caller's persistence
layer after ``validate_transition`` approves them.

Lifecycle:
    SEARCHING -> LOI_SIGNED -> DA_ANNOUNCED -> SEC_REVIEW -> SHAREHOLDER_VOTE
    -> CLOSING -> COMPLETED, with LIQUIDATING -> LIQUIDATED and TERMINATED as
    the exits.
"""

import logging
from datetime import date
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config.settings import get_compliance_settings
from domain.exceptions import InvalidInputError, StageTransitionError
from rules.rule_types import FilerStatus, coerce_enum

logger = logging.getLogger(__name__)


class LifecycleStage(str, Enum):
    """SPAC lifecycle stages."""
    SEARCHING = "SEARCHING"
    LOI_SIGNED = "LOI_SIGNED"
    DA_ANNOUNCED = "DA_ANNOUNCED"
    SEC_REVIEW = "SEC_REVIEW"
    SHAREHOLDER_VOTE = "SHAREHOLDER_VOTE"
    CLOSING = "CLOSING"
    COMPLETED = "COMPLETED"
    LIQUIDATING = "LIQUIDATING"
    LIQUIDATED = "LIQUIDATED"
    TERMINATED = "TERMINATED"


TERMINAL_STAGES: FrozenSet[LifecycleStage] = frozenset({
    LifecycleStage.COMPLETED,
    LifecycleStage.LIQUIDATED,
    LifecycleStage.TERMINATED,
})

STAGE_LABELS: Dict[LifecycleStage, str] = {
    LifecycleStage.SEARCHING: "Searching for Target",
    LifecycleStage.LOI_SIGNED: "LOI Signed",
    LifecycleStage.DA_ANNOUNCED: "Definitive Agreement Announced",
    LifecycleStage.SEC_REVIEW: "SEC Review",
    LifecycleStage.SHAREHOLDER_VOTE: "Shareholder Vote",
    LifecycleStage.CLOSING: "Closing",
    LifecycleStage.COMPLETED: "Completed",
    LifecycleStage.LIQUIDATING: "Liquidating",
    LifecycleStage.LIQUIDATED: "Liquidated",
    LifecycleStage.TERMINATED: "Terminated",
}

# Valid stage transitions
VALID_TRANSITIONS: Dict[LifecycleStage, List[LifecycleStage]] = {
    LifecycleStage.SEARCHING: [
        LifecycleStage.LOI_SIGNED,
        LifecycleStage.LIQUIDATING,
        LifecycleStage.TERMINATED,
    ],
    LifecycleStage.LOI_SIGNED: [
        LifecycleStage.DA_ANNOUNCED,
        LifecycleStage.SEARCHING,  # LOI fell through
        LifecycleStage.TERMINATED,
    ],
    LifecycleStage.DA_ANNOUNCED: [LifecycleStage.SEC_REVIEW, LifecycleStage.TERMINATED],
    LifecycleStage.SEC_REVIEW: [LifecycleStage.SHAREHOLDER_VOTE, LifecycleStage.TERMINATED],
    LifecycleStage.SHAREHOLDER_VOTE: [LifecycleStage.CLOSING, LifecycleStage.TERMINATED],
    LifecycleStage.CLOSING: [LifecycleStage.COMPLETED, LifecycleStage.TERMINATED],
    LifecycleStage.COMPLETED: [],
    LifecycleStage.LIQUIDATING: [LifecycleStage.LIQUIDATED],
    LifecycleStage.LIQUIDATED: [],
    LifecycleStage.TERMINATED: [],
}

for _table_name, _table in (("STAGE_LABELS", STAGE_LABELS), ("VALID_TRANSITIONS", VALID_TRANSITIONS)):
    _missing = set(LifecycleStage) - set(_table)
    if _missing:
        raise RuntimeError(f"{_table_name} is missing stages: {sorted(s.value for s in _missing)}")


def can_transition(current: LifecycleStage, target: LifecycleStage) -> bool:
    """Check whether moving from ``current`` to ``target`` is allowed."""
    return target in VALID_TRANSITIONS[current]


def validate_transition(current: Any, target: Any) -> LifecycleStage:
    """
    Validate a lifecycle stage transition.

    Args:
        current: Current stage (enum member or its string value)
        target: Requested stage (enum member or its string value)

    Returns:
        The target stage as a LifecycleStage

    Raises:
        InvalidInputError: If either value is not a lifecycle stage
        StageTransitionError: If the transition is not allowed
    """
    current_stage = coerce_enum(LifecycleStage, current, "status")
    target_stage = coerce_enum(LifecycleStage, target, "status")

    if not can_transition(current_stage, target_stage):
        allowed = [s.value for s in VALID_TRANSITIONS[current_stage]]
        logger.warning(
            f"Rejected stage transition {current_stage.value} -> {target_stage.value}"
        )
        raise StageTransitionError(
            f"Cannot transition from {current_stage.value} to {target_stage.value}. "
            f"Allowed: {allowed}",
            current_status=current_stage.value,
            target_status=target_stage.value,
        )
    return target_stage


class SpacSnapshot(BaseModel):
    """
    Immutable view of a SPAC consumed by the deadline generator.

    Missing milestone dates are normal and simply suppress the deadlines
    that depend on them.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1, description="Entity identifier")
    name: str = Field(description="SPAC name")
    ticker: Optional[str] = Field(default=None, description="Exchange ticker")
    status: LifecycleStage = Field(description="Current lifecycle stage")

    # Milestone dates
    ipo_date: Optional[date] = Field(default=None, description="IPO closing date")
    deadline: Optional[date] = Field(default=None, description="Business combination deadline")
    da_announced_date: Optional[date] = Field(default=None, description="Definitive agreement announcement")
    proxy_filed_date: Optional[date] = Field(default=None, description="Definitive proxy filing date")
    vote_date: Optional[date] = Field(default=None, description="Shareholder vote date")
    closing_date: Optional[date] = Field(default=None, description="Business combination closing date")
    sec_comment_date: Optional[date] = Field(default=None, description="Most recent SEC comment letter date")
    sec_response_due_date: Optional[date] = Field(
        default=None, description="Negotiated comment response due date override"
    )

    extension_count: int = Field(default=0, ge=0, description="Number of term extensions taken")
    fiscal_year_end_month: int = Field(default=12, ge=1, le=12, description="Fiscal year end month (1-12)")
    filer_status: FilerStatus = Field(
        default_factory=lambda: get_compliance_settings().default_filer_status,
        description="SEC filer status",
    )

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STAGES

    @property
    def stage_label(self) -> str:
        return STAGE_LABELS[self.status]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SpacSnapshot":
        """
        Build a snapshot from untrusted input.

        Raises:
            InvalidInputError: If any field fails validation, e.g. an unknown
                status, a malformed date or a fiscal month outside 1-12.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            errors = [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]
            raise InvalidInputError(
                f"Invalid SPAC snapshot: {len(errors)} validation error(s)",
                {"errors": errors},
            ) from e
