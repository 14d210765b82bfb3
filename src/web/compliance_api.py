"""
Compliance API.

REST endpoints over the SPAC compliance engine:
- GET  /api/compliance/filing-types : List filing definitions
- GET  /api/compliance/filing-types/{filing_type} : Get one filing definition
- GET  /api/compliance/filer-statuses : List filer status tiers
- GET  /api/compliance/checklists/{filing_type} : Get a checklist template
- POST /api/compliance/checklists/{filing_type}/progress : Checklist progress
- GET  /api/compliance/blackout-periods : List standard blackout periods
- GET  /api/compliance/comment-letter-types : List SEC comment letter types
- POST /api/compliance/deadlines/calculate : Calculate a single deadline
- POST /api/compliance/deadlines : Generate deadlines for SPAC snapshots
- POST /api/compliance/alerts : Generate alerts for SPAC snapshots
- POST /api/compliance/stage-transitions/validate : Validate a stage change

Engine errors are not caught here; the application maps InvalidInputError
to 400 and StageTransitionError to 409.
"""

import logging
from dataclasses import asdict
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from alerts import summarize_alerts, to_alerts
from checklist import available_items, get_checklist_template, progress, topological_order
from deadlines import (
    calculate_deadline,
    filter_deadlines,
    format_deadline,
    generate_deadlines_for_many,
    get_deadline_status,
)
from deadlines.calculator import coerce_date
from domain.entity import STAGE_LABELS, SpacSnapshot, validate_transition
from rules import (
    FILER_STATUS_DEFINITIONS,
    FILING_DEFINITIONS,
    FilingCategory,
    filing_types_by_category,
    get_filing_definition,
)
from rules.blackout import get_blackout_periods
from rules.comment_letters import get_comment_letter_types

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/compliance", tags=["Compliance"])


# =============================================================================
# REQUEST/RESPONSE MODELS
# =============================================================================

class DeadlineCalculationRequest(BaseModel):
    """Request for a single deadline calculation."""
    filing_type: str = Field(description="Filing type (FORM_10K, FORM_8K, ...)")
    base_date: str = Field(description="Period end or event date (YYYY-MM-DD)")
    filer_status: Optional[str] = Field(default=None, description="SEC filer status; defaults to the configured tier")
    today: Optional[str] = Field(default=None, description="Evaluation date; defaults to the server date")


class DeadlineGenerationRequest(BaseModel):
    """Request for deadline or alert generation over several SPACs."""
    entities: List[Dict[str, Any]] = Field(description="SPAC snapshots")
    today: Optional[str] = Field(default=None, description="Evaluation date; defaults to the server date")
    category: Optional[str] = Field(default=None, description="Only return this deadline category")
    entity_id: Optional[str] = Field(default=None, description="Only return this entity's deadlines")


class ChecklistProgressRequest(BaseModel):
    """Completed checklist item ids."""
    completed_ids: List[str] = Field(default_factory=list)


class StageTransitionRequest(BaseModel):
    """Request to validate a lifecycle stage change."""
    current_status: str
    target_status: str


class StageTransitionResponse(BaseModel):
    """A permitted lifecycle stage change."""
    valid: bool
    current_status: str
    target_status: str
    target_label: str


# =============================================================================
# HELPERS
# =============================================================================

def _today(value: Optional[str]) -> date:
    return coerce_date(value, "today") if value is not None else date.today()


def _snapshots(records: List[Dict[str, Any]]) -> List[SpacSnapshot]:
    return [SpacSnapshot.from_mapping(record) for record in records]


def _generate(request: DeadlineGenerationRequest):
    today = _today(request.today)
    items = generate_deadlines_for_many(_snapshots(request.entities), today)
    return today, filter_deadlines(items, category=request.category, entity_id=request.entity_id)


# =============================================================================
# RULE CATALOG ENDPOINTS
# =============================================================================

@router.get("/filing-types", response_model=Dict[str, Any])
async def list_filing_types(
    category: Optional[str] = Query(default=None, description="Filter by filing category")
):
    """
    List SEC filing definitions.

    Args:
        category: Optional filing category filter (PERIODIC, CURRENT, ...)

    Returns:
        Filing definitions in catalog order
    """
    if category:
        types = filing_types_by_category(category)
    else:
        types = list(FILING_DEFINITIONS)

    filings = [asdict(FILING_DEFINITIONS[t]) for t in types]
    return {
        "success": True,
        "filing_count": len(filings),
        "filings": filings,
    }


@router.get("/filing-types/{filing_type}", response_model=Dict[str, Any])
async def get_filing_type(filing_type: str):
    """Get the definition of a single filing type."""
    return asdict(get_filing_definition(filing_type))


@router.get("/filer-statuses", response_model=Dict[str, Any])
async def list_filer_statuses():
    """List filer status tiers with their 10-K and 10-Q day counts."""
    statuses = [asdict(definition) for definition in FILER_STATUS_DEFINITIONS.values()]
    return {
        "success": True,
        "status_count": len(statuses),
        "statuses": statuses,
    }


@router.get("/filing-categories", response_model=List[str])
async def list_filing_categories():
    """List valid filing category values for filtering."""
    return [c.value for c in FilingCategory]


# =============================================================================
# CHECKLIST ENDPOINTS
# =============================================================================

@router.get("/checklists/{filing_type}", response_model=Dict[str, Any])
async def get_checklist(filing_type: str):
    """
    Get the checklist template for a filing type.

    Items are returned in dependency order.
    """
    template = get_checklist_template(filing_type)
    if template is None:
        raise HTTPException(
            status_code=404,
            detail=f"No checklist template for {filing_type}"
        )
    return {
        "filing_type": template.filing_type.value,
        "name": template.name,
        "item_count": len(template.items),
        "items": [item.model_dump() for item in topological_order(template)],
    }


@router.post("/checklists/{filing_type}/progress", response_model=Dict[str, Any])
async def get_checklist_progress(filing_type: str, request: ChecklistProgressRequest):
    """
    Compute checklist progress from a set of completed item ids.

    Args:
        filing_type: Filing type of the checklist
        request: Completed item ids; ids not in the template are ignored

    Returns:
        Progress counts and the items that can be worked on next
    """
    template = get_checklist_template(filing_type)
    if template is None:
        raise HTTPException(
            status_code=404,
            detail=f"No checklist template for {filing_type}"
        )
    completed = set(request.completed_ids)
    return {
        "filing_type": template.filing_type.value,
        "progress": progress(template, completed).to_dict(),
        "available_items": [item.model_dump() for item in available_items(template, completed)],
    }


# =============================================================================
# REFERENCE TABLE ENDPOINTS
# =============================================================================

@router.get("/blackout-periods", response_model=Dict[str, Any])
async def list_blackout_periods():
    """List standard insider trading blackout periods."""
    periods = [period.model_dump() for period in get_blackout_periods()]
    return {"period_count": len(periods), "periods": periods}


@router.get("/comment-letter-types", response_model=Dict[str, Any])
async def list_comment_letter_types():
    """List SEC staff comment letter types."""
    types = [letter_type.model_dump() for letter_type in get_comment_letter_types()]
    return {"type_count": len(types), "types": types}


# =============================================================================
# DEADLINE ENDPOINTS
# =============================================================================

@router.post("/deadlines/calculate", response_model=Dict[str, Any])
async def calculate_filing_deadline(request: DeadlineCalculationRequest):
    """
    Calculate one filing deadline.

    Returns:
        The calculation with its display status and formatted deadline
    """
    today = _today(request.today)
    calc = calculate_deadline(
        request.filing_type,
        request.base_date,
        request.filer_status,
        today=today,
    )
    return {
        **calc.model_dump(mode="json"),
        "status": get_deadline_status(calc.deadline, today).value,
        "formatted_deadline": format_deadline(calc.deadline),
    }


@router.post("/deadlines", response_model=Dict[str, Any])
async def generate_filing_deadlines(request: DeadlineGenerationRequest):
    """
    Generate every applicable deadline for a set of SPACs.

    Args:
        request: Snapshots, evaluation date and optional filters

    Returns:
        Deadline items sorted by urgency level, then deadline
    """
    today, items = _generate(request)
    logger.info(f"Generated {len(items)} deadline(s) for {len(request.entities)} entities")
    return {
        "today": today.isoformat(),
        "deadline_count": len(items),
        "deadlines": [item.model_dump(mode="json") for item in items],
    }


@router.post("/alerts", response_model=Dict[str, Any])
async def generate_alerts(request: DeadlineGenerationRequest):
    """Generate deadlines for a set of SPACs and project them onto alerts."""
    today, items = _generate(request)
    alerts = to_alerts(items)
    return {
        "today": today.isoformat(),
        "summary": summarize_alerts(alerts),
        "alerts": [alert.model_dump(mode="json") for alert in alerts],
    }


# =============================================================================
# LIFECYCLE ENDPOINTS
# =============================================================================

@router.post("/stage-transitions/validate", response_model=StageTransitionResponse)
async def validate_stage_transition(request: StageTransitionRequest):
    """Check that a SPAC may move from its current stage to the target stage."""
    target = validate_transition(request.current_status, request.target_status)
    return StageTransitionResponse(
        valid=True,
        current_status=request.current_status,
        target_status=target.value,
        target_label=STAGE_LABELS[target],
    )
