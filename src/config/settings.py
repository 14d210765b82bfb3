"""Application settings using Pydantic Settings.

Centralized configuration for the compliance engine.

Compliance tunables are read from ``COMPLIANCE_*`` environment variables and
application/runtime settings from ``APP_*`` variables, e.g.:

- COMPLIANCE_CRITICAL_THRESHOLD_BUSINESS_DAYS=3
- COMPLIANCE_PERIODIC_HORIZON_YEARS=1
- APP_LOG_LEVEL=DEBUG
"""

import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rules.rule_types import FilerStatus

logger = logging.getLogger(__name__)


class ComplianceSettings(BaseSettings):
    """Deadline and alert tunables."""

    model_config = SettingsConfigDict(
        env_prefix="COMPLIANCE_",
        extra="ignore",
    )

    default_filer_status: FilerStatus = Field(
        default=FilerStatus.NON_ACCELERATED,
        description="Filer status assumed when none is supplied",
    )

    # Warning thresholds, in business days before the deadline
    critical_threshold_business_days: int = Field(default=3, ge=0, description="CRITICAL window")
    high_threshold_business_days: int = Field(default=7, ge=0, description="HIGH window")
    medium_threshold_business_days: int = Field(default=14, ge=0, description="MEDIUM window")

    # Lifecycle generator
    comment_response_business_days: int = Field(
        default=10, ge=0, description="Business days allowed to answer an SEC comment letter"
    )
    periodic_horizon_years: int = Field(
        default=1, ge=0, description="How far ahead periodic report deadlines are generated"
    )
    s4_target_months: int = Field(
        default=2, ge=0, description="Months after DA announcement to target the S-4 filing"
    )
    proxy_mailing_calendar_days: int = Field(
        default=20, ge=0, description="Calendar days before the vote the DEF14A must be mailed"
    )
    preliminary_proxy_business_days: int = Field(
        default=20, ge=0, description="Business days before the vote to file the PREM14A"
    )
    redemption_business_days: int = Field(
        default=2, ge=0, description="Business days before the vote redemption requests close"
    )

    # SPAC term
    default_term_months: int = Field(default=24, ge=1, description="Default SPAC term in months")
    extension_months: int = Field(default=3, ge=0, description="Months added per extension")
    extension_notice_days: int = Field(
        default=30, ge=0, description="Calendar days before liquidation to file an extension"
    )

    # Deadline status windows, in calendar days
    due_soon_days: int = Field(default=7, ge=0, description="DUE_SOON window")
    upcoming_days: int = Field(default=30, ge=0, description="UPCOMING window")

    @model_validator(mode="after")
    def _check_threshold_order(self) -> "ComplianceSettings":
        if not (
            self.critical_threshold_business_days
            <= self.high_threshold_business_days
            <= self.medium_threshold_business_days
        ):
            raise ValueError("warning thresholds must satisfy critical <= high <= medium")
        if self.due_soon_days > self.upcoming_days:
            raise ValueError("due_soon_days must not exceed upcoming_days")
        return self


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application info
    name: str = Field(default="SPAC Compliance Engine", description="Application name")
    version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Environment name")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=False, description="Emit JSON log lines")
    log_file: str = Field(default="", description="Optional log file path")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    cors_origins: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {value}")
        return level

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Returns:
        Settings: Cached settings loaded from environment.
    """
    return Settings()


@lru_cache
def get_compliance_settings() -> ComplianceSettings:
    """
    Get cached compliance settings instance.

    Returns:
        ComplianceSettings: Cached settings loaded from environment.
    """
    settings = ComplianceSettings()
    logger.debug(
        f"Compliance thresholds: critical={settings.critical_threshold_business_days} "
        f"high={settings.high_threshold_business_days} "
        f"medium={settings.medium_threshold_business_days}"
    )
    return settings
