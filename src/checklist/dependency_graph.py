"""
Checklist dependency graph.

Each template's ``dependencies`` relation must form a DAG over the template's
own item ids. Templates are validated once at load; every query below assumes
a validated template and takes the caller's set of completed item ids.
"""

import heapq
import logging
from typing import AbstractSet, Dict, List

from domain.exceptions import ChecklistConfigurationError

from .models import ChecklistItem, ChecklistProgress, ChecklistTemplate

logger = logging.getLogger(__name__)


def validate_template(template: ChecklistTemplate) -> None:
    """
    Validate a template's item ids and dependency graph.

    Raises:
        ChecklistConfigurationError: On duplicate ids, dangling dependency
            ids or a dependency cycle
    """
    filing_type = template.filing_type.value
    seen = set()
    duplicates = []
    for item in template.items:
        if item.id in seen:
            duplicates.append(item.id)
        seen.add(item.id)
    if duplicates:
        raise ChecklistConfigurationError(
            f"Duplicate checklist item ids in {filing_type}: {duplicates}",
            filing_type=filing_type,
            item_ids=duplicates,
        )

    dangling = sorted({
        dep for item in template.items for dep in item.dependencies if dep not in seen
    })
    if dangling:
        raise ChecklistConfigurationError(
            f"Unknown dependency ids in {filing_type}: {dangling}",
            filing_type=filing_type,
            item_ids=dangling,
        )

    # Raises on cycles
    topological_order(template)


def topological_order(template: ChecklistTemplate) -> List[ChecklistItem]:
    """
    Items ordered so that every item follows its dependencies.

    Uses Kahn's algorithm; among items that are ready at the same time the
    lower ``order`` comes first.

    Raises:
        ChecklistConfigurationError: If the dependency relation has a cycle
    """
    by_id: Dict[str, ChecklistItem] = {item.id: item for item in template.items}
    in_degree: Dict[str, int] = {item.id: 0 for item in template.items}
    dependents: Dict[str, List[str]] = {item.id: [] for item in template.items}
    for item in template.items:
        for dep in set(item.dependencies):
            if dep in dependents:
                dependents[dep].append(item.id)
                in_degree[item.id] += 1

    ready = [(by_id[item_id].order, item_id) for item_id, degree in in_degree.items() if degree == 0]
    heapq.heapify(ready)
    ordered: List[ChecklistItem] = []
    while ready:
        _, item_id = heapq.heappop(ready)
        ordered.append(by_id[item_id])
        for child in dependents[item_id]:
            in_degree[child] -= 1
            if in_degree[child] == 0:
                heapq.heappush(ready, (by_id[child].order, child))

    if len(ordered) != len(by_id):
        cyclic = sorted(item_id for item_id, degree in in_degree.items() if degree > 0)
        raise ChecklistConfigurationError(
            f"Dependency cycle in {template.filing_type.value} checklist: {cyclic}",
            filing_type=template.filing_type.value,
            item_ids=cyclic,
        )
    return ordered


def is_unlocked(item: ChecklistItem, completed_ids: AbstractSet[str]) -> bool:
    """An item is unlocked once all of its dependencies are completed."""
    return all(dep in completed_ids for dep in item.dependencies)


def blocking_dependencies(item: ChecklistItem, completed_ids: AbstractSet[str]) -> List[str]:
    """Dependency ids of ``item`` that are not yet completed."""
    return [dep for dep in item.dependencies if dep not in completed_ids]


def available_items(template: ChecklistTemplate, completed_ids: AbstractSet[str]) -> List[ChecklistItem]:
    """Unlocked items that are not yet completed, in template order."""
    return [
        item for item in sorted(template.items, key=lambda i: i.order)
        if item.id not in completed_ids and is_unlocked(item, completed_ids)
    ]


def progress(template: ChecklistTemplate, completed_ids: AbstractSet[str]) -> ChecklistProgress:
    """
    Completion counts for a template.

    Completed ids that do not belong to the template are ignored.
    """
    unknown = set(completed_ids) - set(template.item_ids)
    if unknown:
        logger.debug(f"Ignoring {len(unknown)} completed ids not in {template.filing_type.value} checklist")

    required = [item for item in template.items if item.required]
    return ChecklistProgress(
        completed=sum(1 for item in template.items if item.id in completed_ids),
        total=len(template.items),
        required_completed=sum(1 for item in required if item.id in completed_ids),
        required_total=len(required),
    )
