"""Filtering and de-duplication over generated deadline items."""

from typing import Iterable, List, Optional, Union

from rules.rule_types import DeadlineCategory, coerce_enum

from .models import FilingDeadlineItem


def filter_deadlines(
    items: Iterable[FilingDeadlineItem],
    category: Optional[Union[str, DeadlineCategory]] = None,
    entity_id: Optional[str] = None,
) -> List[FilingDeadlineItem]:
    """
    Keep items matching every filter that is given.

    Raises:
        InvalidInputError: If ``category`` is not a deadline category
    """
    cat = coerce_enum(DeadlineCategory, category, "category") if category is not None else None
    return [
        item for item in items
        if (cat is None or item.category == cat)
        and (entity_id is None or item.entity_id == entity_id)
    ]


def deduplicate_deadlines(items: Iterable[FilingDeadlineItem]) -> List[FilingDeadlineItem]:
    """Drop items whose id was already seen, keeping the first occurrence."""
    seen = set()
    unique = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique
