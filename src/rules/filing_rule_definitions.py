"""
Filing Rule Type Definitions.

This module provides the FilingDefinition and FilerStatusDefinition dataclasses
used by the filing rule catalog. Keeping the definitions separate from the
catalog tables avoids circular imports with the deadline calculator.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .rule_types import DeadlineType, FilerStatus, FilingCategory, FilingType


@dataclass(frozen=True)
class FilingDefinition:
    """Static definition of a single SEC filing type."""
    type: FilingType
    name: str
    short_name: str
    category: FilingCategory
    description: str
    deadline_type: DeadlineType

    # Deadline parameters
    deadline_days: Optional[int] = None
    deadline_business_days: bool = False

    # Filer status specific day counts
    accelerated_filer_days: Optional[int] = None
    large_accelerated_filer_days: Optional[int] = None
    non_accelerated_filer_days: Optional[int] = None
    periodic_deadline: Optional[str] = None

    # Applicability
    required_for_spac: bool = False
    required_for_despac: bool = False

    triggers: Tuple[str, ...] = ()
    checklist: Tuple[str, ...] = ()
    sec_guidance: Optional[str] = None

    def __post_init__(self):
        for field_name in (
            "deadline_days",
            "accelerated_filer_days",
            "large_accelerated_filer_days",
            "non_accelerated_filer_days",
        ):
            value = getattr(self, field_name)
            if value is not None and value < 0:
                raise ValueError(f"{self.type.value}.{field_name} must be non-negative, got {value}")


@dataclass(frozen=True)
class ThresholdBand:
    """Dollar band used to classify a filer. Descriptive only."""
    min: Optional[int] = None
    max: Optional[int] = None


@dataclass(frozen=True)
class FilerStatusDefinition:
    """Filer status tier with its periodic report day counts."""
    status: FilerStatus
    name: str
    description: str
    ten_k_deadline_days: int
    ten_q_deadline_days: int
    float_threshold: Optional[ThresholdBand] = None
    revenue_threshold: Optional[ThresholdBand] = None
    benefits: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.ten_k_deadline_days < 0 or self.ten_q_deadline_days < 0:
            raise ValueError(f"{self.status.value} day counts must be non-negative")
