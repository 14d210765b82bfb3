"""
Compliance checklists.

Checklist templates per filing type, their dependency graph and progress
tracking over a caller-supplied set of completed item ids.
"""

from .dependency_graph import (
    available_items,
    blocking_dependencies,
    is_unlocked,
    progress,
    topological_order,
    validate_template,
)
from .models import ChecklistItem, ChecklistProgress, ChecklistTemplate
from .template_registry import (
    ChecklistTemplateRegistry,
    build_template,
    get_checklist_template,
    get_template_registry,
)

__all__ = [
    "ChecklistItem",
    "ChecklistProgress",
    "ChecklistTemplate",
    "ChecklistTemplateRegistry",
    "available_items",
    "blocking_dependencies",
    "build_template",
    "get_checklist_template",
    "get_template_registry",
    "is_unlocked",
    "progress",
    "topological_order",
    "validate_template",
]
