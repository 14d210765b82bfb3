"""Configuration module for the compliance engine."""

from .settings import ComplianceSettings, Settings, get_compliance_settings, get_settings

__all__ = [
    "ComplianceSettings",
    "get_compliance_settings",
    "Settings",
    "get_settings",
]
