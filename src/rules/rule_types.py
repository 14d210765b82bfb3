"""
Compliance rule type definitions.

Provides the closed enums shared by the filing rule catalog, the deadline
calculator and the alert classifier.
"""

from enum import Enum
from typing import Type, TypeVar, Union

from domain.exceptions import InvalidInputError

E = TypeVar("E", bound=Enum)


class FilingType(str, Enum):
    """SEC filing types tracked by the engine."""
    FORM_10K = "FORM_10K"
    FORM_10Q = "FORM_10Q"
    FORM_8K = "FORM_8K"
    SUPER_8K = "SUPER_8K"
    S1 = "S1"
    S4 = "S4"
    DEF14A = "DEF14A"
    PREM14A = "PREM14A"
    DEFA14A = "DEFA14A"
    FORM_425 = "FORM_425"
    SC_13D = "SC_13D"
    SC_13G = "SC_13G"
    FORM_3 = "FORM_3"
    FORM_4 = "FORM_4"
    FORM_5 = "FORM_5"
    OTHER = "OTHER"


class FilingCategory(str, Enum):
    """Classification of a filing type for filtering and reporting."""
    PERIODIC = "PERIODIC"          # 10-K, 10-Q
    CURRENT = "CURRENT"            # 8-K, Super 8-K
    REGISTRATION = "REGISTRATION"  # S-1, S-4
    PROXY = "PROXY"                # DEF14A, PREM14A, DEFA14A
    BENEFICIAL = "BENEFICIAL"      # 13D, 13G
    INSIDER = "INSIDER"            # Forms 3, 4, 5
    OTHER = "OTHER"


class DeadlineCategory(str, Enum):
    """Category carried by a generated deadline item."""
    PERIODIC = "PERIODIC"
    CURRENT = "CURRENT"
    REGISTRATION = "REGISTRATION"
    PROXY = "PROXY"
    BENEFICIAL = "BENEFICIAL"
    INSIDER = "INSIDER"
    OTHER = "OTHER"
    BUSINESS_COMBINATION = "BUSINESS_COMBINATION"
    SEC_RESPONSE = "SEC_RESPONSE"


class DeadlineType(str, Enum):
    """How a filing's deadline is anchored."""
    FIXED = "FIXED"
    EVENT_BASED = "EVENT_BASED"
    PERIODIC = "PERIODIC"


class FilerStatus(str, Enum):
    """SEC filer status tiers."""
    LARGE_ACCELERATED = "LARGE_ACCELERATED"  # Float >= $700M
    ACCELERATED = "ACCELERATED"              # Float >= $75M but < $700M
    NON_ACCELERATED = "NON_ACCELERATED"      # Float < $75M
    SMALLER_REPORTING = "SMALLER_REPORTING"  # Float < $250M or revenues < $100M
    EMERGING_GROWTH = "EMERGING_GROWTH"      # IPO within 5 years, revenues < $1.235B


class Urgency(str, Enum):
    """Urgency of a single deadline calculation."""
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class UrgencyLevel(str, Enum):
    """Coarse urgency tier used to order deadline items."""
    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"

    @classmethod
    def from_urgency(cls, urgency: Urgency) -> "UrgencyLevel":
        if urgency == Urgency.CRITICAL:
            return cls.CRITICAL
        if urgency == Urgency.HIGH:
            return cls.WARNING
        return cls.NORMAL

    @property
    def rank(self) -> int:
        return _URGENCY_LEVEL_RANK[self]


_URGENCY_LEVEL_RANK = {
    UrgencyLevel.CRITICAL: 0,
    UrgencyLevel.WARNING: 1,
    UrgencyLevel.NORMAL: 2,
}


class DeadlineStatus(str, Enum):
    """Display status of a deadline relative to today."""
    OVERDUE = "OVERDUE"
    DUE_TODAY = "DUE_TODAY"
    DUE_SOON = "DUE_SOON"
    UPCOMING = "UPCOMING"
    FUTURE = "FUTURE"


def coerce_enum(enum_cls: Type[E], value: Union[str, E], field_name: str) -> E:
    """
    Convert a raw value to a member of ``enum_cls``.

    Unlike a lenient parser this never falls back to a default member.

    Raises:
        InvalidInputError: If the value is not a member of the enum.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        raise InvalidInputError(
            f"Unknown {field_name}: {value!r}",
            {"field": field_name, "value": str(value), "allowed": allowed},
        ) from None
