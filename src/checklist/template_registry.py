"""
Checklist template registry.

Templates are read from ``checklist_templates.yaml`` and validated once per
process. A malformed or cyclic template makes the whole registry refuse to
load.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from config.compliance_config_loader import get_config_loader
from domain.exceptions import ChecklistConfigurationError
from rules.rule_types import FilingType, coerce_enum

from .dependency_graph import validate_template
from .models import ChecklistItem, ChecklistTemplate

logger = logging.getLogger(__name__)


def build_template(filing_type: Union[str, FilingType], raw: Dict[str, Any]) -> ChecklistTemplate:
    """
    Build and validate one template from its raw mapping.

    Raises:
        ChecklistConfigurationError: If the mapping is malformed or its
            dependency graph is invalid
    """
    ft = coerce_enum(FilingType, filing_type, "filing_type")
    try:
        template = ChecklistTemplate(
            filing_type=ft,
            name=raw["name"],
            items=tuple(ChecklistItem.model_validate(item) for item in raw.get("items") or []),
        )
    except (KeyError, TypeError, ValidationError) as e:
        raise ChecklistConfigurationError(
            f"Malformed checklist template for {ft.value}: {e}", filing_type=ft.value
        ) from e
    validate_template(template)
    return template


class ChecklistTemplateRegistry:
    """
    Read-only registry of checklist templates keyed by filing type.

    Not every filing type has a template; lookups for those return None.
    """

    def __init__(self, templates: Mapping[FilingType, ChecklistTemplate]):
        self._templates = MappingProxyType(dict(templates))

    @classmethod
    def from_config(cls, raw_templates: Dict[str, Any]) -> "ChecklistTemplateRegistry":
        templates = {}
        for key, raw in raw_templates.items():
            template = build_template(key, raw)
            templates[template.filing_type] = template
        logger.info(f"Loaded {len(templates)} checklist templates")
        return cls(templates)

    def get(self, filing_type: Union[str, FilingType]) -> Optional[ChecklistTemplate]:
        """
        Template for a filing type, or None if the type has no checklist.

        Raises:
            InvalidInputError: If the filing type is unknown
        """
        return self._templates.get(coerce_enum(FilingType, filing_type, "filing_type"))

    def filing_types(self) -> List[FilingType]:
        return list(self._templates.keys())

    def __len__(self) -> int:
        return len(self._templates)


@lru_cache(maxsize=1)
def get_template_registry() -> ChecklistTemplateRegistry:
    """Get the process-wide template registry."""
    return ChecklistTemplateRegistry.from_config(get_config_loader().get_checklist_templates())


def get_checklist_template(filing_type: Union[str, FilingType]) -> Optional[ChecklistTemplate]:
    """Convenience lookup against the process-wide registry."""
    return get_template_registry().get(filing_type)
