"""SEC staff comment letter types."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config.compliance_config_loader import get_config_loader
from domain.exceptions import ComplianceConfigError


class CommentCategory(str, Enum):
    ACCOUNTING = "ACCOUNTING"
    LEGAL = "LEGAL"
    BUSINESS = "BUSINESS"
    DISCLOSURE = "DISCLOSURE"
    PROCEDURAL = "PROCEDURAL"


class CommentLetterType(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    description: str
    typical_response_days: int = Field(ge=0, description="Typical response window in business days")
    category: CommentCategory


@lru_cache(maxsize=1)
def get_comment_letter_types() -> Tuple[CommentLetterType, ...]:
    """Comment letter types, loaded once per process."""
    records = get_config_loader().get_comment_letter_types()
    try:
        return tuple(CommentLetterType.model_validate(r) for r in records)
    except ValidationError as e:
        raise ComplianceConfigError(
            f"Invalid comment letter type: {e}", {"file": "comment_letter_types.yaml"}
        ) from e


def get_comment_letter_type(code: str) -> Optional[CommentLetterType]:
    code = code.upper()
    for letter_type in get_comment_letter_types():
        if letter_type.code == code:
            return letter_type
    return None
