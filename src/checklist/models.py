"""Checklist data models."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from rules.rule_types import FilingType


class ChecklistItem(BaseModel):
    """A single step of a filing checklist."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    category: str
    required: bool = True
    order: int = Field(ge=0, description="Display order within the template")
    dependencies: Tuple[str, ...] = Field(default=(), description="Item ids that must complete first")
    description: Optional[str] = None
    responsible_party: Optional[str] = None


class ChecklistTemplate(BaseModel):
    """Ordered checklist for one filing type."""
    model_config = ConfigDict(frozen=True)

    filing_type: FilingType
    name: str
    items: Tuple[ChecklistItem, ...]

    def get_item(self, item_id: str) -> Optional[ChecklistItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    @property
    def item_ids(self) -> Tuple[str, ...]:
        return tuple(item.id for item in self.items)


@dataclass(frozen=True)
class ChecklistProgress:
    """Completion counts for a checklist."""
    completed: int
    total: int
    required_completed: int
    required_total: int

    @property
    def percentage(self) -> float:
        """Completed share of all items, 0-100."""
        if self.total == 0:
            return 0.0
        return round(self.completed / self.total * 100, 1)

    @property
    def required_percentage(self) -> float:
        if self.required_total == 0:
            return 0.0
        return round(self.required_completed / self.required_total * 100, 1)

    @property
    def is_complete(self) -> bool:
        """All required items are done."""
        return self.required_completed == self.required_total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "completed": self.completed,
            "total": self.total,
            "required_completed": self.required_completed,
            "required_total": self.required_total,
            "percentage": self.percentage,
            "required_percentage": self.required_percentage,
            "is_complete": self.is_complete,
        }
