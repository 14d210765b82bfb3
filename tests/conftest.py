"""Pytest configuration and fixtures for test suite."""

import os
import sys
from datetime import date
from pathlib import Path

import pytest

# Set test environment BEFORE any other imports
os.environ.setdefault("APP_ENVIRONMENT", "test")

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def reset_cached_settings():
    """Clear cached settings so environment overrides in one test do not leak."""
    from config.settings import get_compliance_settings, get_settings

    get_settings.cache_clear()
    get_compliance_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_compliance_settings.cache_clear()


@pytest.fixture
def compliance_settings():
    """Default compliance settings, independent of the environment."""
    from config.settings import ComplianceSettings
    return ComplianceSettings()


@pytest.fixture
def today():
    """Fixed evaluation date (a Saturday)."""
    return date(2025, 2, 1)


# =============================================================================
# SPAC SNAPSHOT FIXTURES
# =============================================================================

@pytest.fixture
def searching_spac():
    """Public SPAC still searching for a target."""
    from domain.entity import LifecycleStage, SpacSnapshot
    return SpacSnapshot(
        id="spac-001",
        name="Horizon Acquisition Corp",
        ticker="HZON",
        status=LifecycleStage.SEARCHING,
        ipo_date=date(2023, 1, 10),
        deadline=date(2025, 3, 1),
    )


@pytest.fixture
def announced_spac():
    """SPAC that announced a definitive agreement on a Monday."""
    from domain.entity import LifecycleStage, SpacSnapshot
    return SpacSnapshot(
        id="spac-002",
        name="Meridian Growth Partners",
        status=LifecycleStage.DA_ANNOUNCED,
        da_announced_date=date(2024, 6, 10),
    )


@pytest.fixture
def voting_spac():
    """SPAC with a shareholder vote scheduled and no proxy filed yet."""
    from domain.entity import LifecycleStage, SpacSnapshot
    return SpacSnapshot(
        id="spac-003",
        name="Atlas Capital Holdings",
        status=LifecycleStage.SHAREHOLDER_VOTE,
        vote_date=date(2024, 9, 20),
    )
