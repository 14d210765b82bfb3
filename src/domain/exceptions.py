"""
Exception hierarchy for the compliance engine.

Invalid input fails fast: an unknown filing type or filer status must never be
replaced with a default, because a silent default could under-report a
deadline. Missing milestone dates are not errors and never raise.
"""

from typing import Any, Dict, Optional


class ComplianceError(Exception):
    """Base exception for all compliance engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidInputError(ComplianceError):
    """Raised for unknown enum values, malformed dates or out-of-range fields."""
    pass


class ComplianceConfigError(ComplianceError):
    """Raised when a static configuration file is malformed."""
    pass


class ChecklistConfigurationError(ComplianceConfigError):
    """Raised when a checklist template has a dangling or cyclic dependency."""

    def __init__(self, message: str, filing_type: str, item_ids: Optional[list] = None):
        super().__init__(message, {"filing_type": filing_type, "item_ids": item_ids or []})
        self.filing_type = filing_type
        self.item_ids = item_ids or []


class StageTransitionError(ComplianceError):
    """Raised when an invalid lifecycle stage transition is attempted."""

    def __init__(self, message: str, current_status: str, target_status: str):
        super().__init__(
            message,
            {"current_status": current_status, "target_status": target_status},
        )
        self.current_status = current_status
        self.target_status = target_status
