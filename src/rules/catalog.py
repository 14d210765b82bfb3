"""Filing rule catalog.

Read-only lookup tables built once at import from FILING_RULES and
FILER_STATUS_RULES. Import fails if any filing type or filer status lacks
exactly one definition.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, TypeVar, Union

from .filer_status_rules import FILER_STATUS_RULES
from .filing_rule_definitions import FilerStatusDefinition, FilingDefinition
from .filing_rules import FILING_RULES
from .rule_types import FilerStatus, FilingCategory, FilingType, coerce_enum

V = TypeVar("V")


def _build_table(items: Iterable[V], key_attr: str, enum_cls: Any) -> Mapping[Any, V]:
    table = {}
    for item in items:
        key = getattr(item, key_attr)
        if key in table:
            raise RuntimeError(f"Duplicate definition for {key.value}")
        table[key] = item
    missing = set(enum_cls) - set(table)
    if missing:
        raise RuntimeError(
            f"Missing {enum_cls.__name__} definitions: {sorted(m.value for m in missing)}"
        )
    return MappingProxyType(table)


FILING_DEFINITIONS: Mapping[FilingType, FilingDefinition] = _build_table(
    FILING_RULES, "type", FilingType
)
FILER_STATUS_DEFINITIONS: Mapping[FilerStatus, FilerStatusDefinition] = _build_table(
    FILER_STATUS_RULES, "status", FilerStatus
)


def get_filing_definition(filing_type: Union[str, FilingType]) -> FilingDefinition:
    """
    Look up the definition of a filing type.

    Raises:
        InvalidInputError: If the filing type is unknown
    """
    return FILING_DEFINITIONS[coerce_enum(FilingType, filing_type, "filing_type")]


def get_filer_status_definition(filer_status: Union[str, FilerStatus]) -> FilerStatusDefinition:
    """
    Look up a filer status tier.

    Raises:
        InvalidInputError: If the filer status is unknown
    """
    return FILER_STATUS_DEFINITIONS[coerce_enum(FilerStatus, filer_status, "filer_status")]


def get_filer_deadline_days(
    filing_type: Union[str, FilingType],
    filer_status: Union[str, FilerStatus],
) -> Optional[int]:
    """
    Number of days allowed for a filing given the filer's tier.

    10-K and 10-Q use the tier's day counts; every other filing uses its own
    ``deadline_days``, which may be None.
    """
    definition = get_filing_definition(filing_type)
    status = get_filer_status_definition(filer_status)

    if definition.type == FilingType.FORM_10K:
        return status.ten_k_deadline_days
    if definition.type == FilingType.FORM_10Q:
        return status.ten_q_deadline_days
    return definition.deadline_days


def is_filing_required_for_spac(filing_type: Union[str, FilingType]) -> bool:
    return get_filing_definition(filing_type).required_for_spac


def is_filing_required_for_despac(filing_type: Union[str, FilingType]) -> bool:
    return get_filing_definition(filing_type).required_for_despac


def filing_types_by_category(category: Union[str, FilingCategory]) -> List[FilingType]:
    """All filing types in a category, in declaration order."""
    cat = coerce_enum(FilingCategory, category, "category")
    return [ft for ft, definition in FILING_DEFINITIONS.items() if definition.category == cat]


def short_name(filing_type: Union[str, FilingType]) -> str:
    return get_filing_definition(filing_type).short_name


__all__ = [
    "FILING_DEFINITIONS",
    "FILER_STATUS_DEFINITIONS",
    "get_filing_definition",
    "get_filer_status_definition",
    "get_filer_deadline_days",
    "is_filing_required_for_spac",
    "is_filing_required_for_despac",
    "filing_types_by_category",
    "short_name",
]
