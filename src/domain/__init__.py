"""
Domain layer for the SPAC compliance engine.

Contains the exception hierarchy shared by every layer. The entity snapshot
and lifecycle stage model live in ``domain.entity``.
"""

from .exceptions import (
    ChecklistConfigurationError,
    ComplianceConfigError,
    ComplianceError,
    InvalidInputError,
    StageTransitionError,
)

__all__ = [
    "ComplianceError",
    "InvalidInputError",
    "ComplianceConfigError",
    "ChecklistConfigurationError",
    "StageTransitionError",
]
