"""
SEC Filing Rules Module.

Static, read-only rule tables for the compliance engine:
- Filing definitions for every FilingType
- Filer status tiers and their periodic report day counts
- Blackout periods and SEC comment letter types (``rules.blackout``,
  ``rules.comment_letters``), loaded from YAML on first use
"""

from .catalog import (
    FILER_STATUS_DEFINITIONS,
    FILING_DEFINITIONS,
    filing_types_by_category,
    get_filer_deadline_days,
    get_filer_status_definition,
    get_filing_definition,
    is_filing_required_for_despac,
    is_filing_required_for_spac,
)
from .filing_rule_definitions import FilerStatusDefinition, FilingDefinition
from .rule_types import (
    DeadlineCategory,
    DeadlineStatus,
    DeadlineType,
    FilerStatus,
    FilingCategory,
    FilingType,
    Urgency,
    UrgencyLevel,
    coerce_enum,
)

__all__ = [
    'FILING_DEFINITIONS',
    'FILER_STATUS_DEFINITIONS',
    'FilingDefinition',
    'FilerStatusDefinition',
    'get_filing_definition',
    'get_filer_status_definition',
    'get_filer_deadline_days',
    'is_filing_required_for_spac',
    'is_filing_required_for_despac',
    'filing_types_by_category',
    'DeadlineCategory',
    'DeadlineStatus',
    'DeadlineType',
    'FilerStatus',
    'FilingCategory',
    'FilingType',
    'Urgency',
    'UrgencyLevel',
    'coerce_enum',
]
