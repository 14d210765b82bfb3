"""
Lifecycle Deadline Generator.

Produces every filing deadline that applies to a SPAC given its lifecycle
stage and milestone dates. Generation draws on three sources:

1. The outer business combination deadline, at its exact date
2. The rolling periodic report schedule (10-K, 10-Q), once the SPAC is public
3. Stage rules keyed by lifecycle stage

Fixed target dates (the outer deadline, S-4 target, proxy dates) are used as
given; filing deadlines computed by the calculator are snapped to business
days. Results are ordered by urgency level, then deadline.
"""

import logging
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from business_calendar import add_business_days, count_business_days, sub_business_days
from config.settings import ComplianceSettings, get_compliance_settings
from domain.entity import LifecycleStage, SpacSnapshot
from rules.catalog import short_name
from rules.rule_types import DeadlineCategory, FilingType, UrgencyLevel
from services.logging_config import DeadlineRunLogger, entity_id_var, log_performance

from .calculator import calculate_deadline, evaluate_deadline, get_deadline_status
from .models import DeadlineCalculation, FilingDeadlineItem
from .periodic_schedule import periodic_reports

logger = logging.getLogger(__name__)


class _Context:
    """Per-entity state shared by the stage rules of one run."""

    def __init__(
        self,
        entity: SpacSnapshot,
        today: date,
        settings: ComplianceSettings,
        run_logger: DeadlineRunLogger,
    ):
        self.entity = entity
        self.today = today
        self.settings = settings
        self.run_logger = run_logger

    def item(
        self,
        calc: DeadlineCalculation,
        category: DeadlineCategory,
        description: str,
        event_date: Optional[date] = None,
        id_suffix: Optional[str] = None,
    ) -> FilingDeadlineItem:
        return build_item(
            self.entity, calc, category, description, event_date, self.today, self.settings,
            id_suffix=id_suffix,
        )

    def fixed(
        self,
        filing_type: FilingType,
        base_date: date,
        deadline: date,
        days_allowed: int = 0,
        is_business_days: bool = False,
    ) -> DeadlineCalculation:
        return evaluate_deadline(
            filing_type, base_date, deadline,
            days_allowed=days_allowed,
            is_business_days=is_business_days,
            today=self.today,
            settings=self.settings,
        )

    def calculated(self, filing_type: FilingType, base_date: date) -> DeadlineCalculation:
        return calculate_deadline(
            filing_type, base_date, self.entity.filer_status, self.today, self.settings
        )


def build_item(
    entity: SpacSnapshot,
    calc: DeadlineCalculation,
    category: DeadlineCategory,
    description: str,
    event_date: Optional[date],
    today: date,
    settings: ComplianceSettings,
    id_suffix: Optional[str] = None,
) -> FilingDeadlineItem:
    """
    Attach entity context and display fields to a calculation.

    The id is "{entity}-{filing type}-{deadline}". Items that share a filing
    type with another source (the redemption deadline and the outer deadline
    are both OTHER) pass an id_suffix to stay distinct.
    """
    item_id = f"{entity.id}-{calc.filing_type.value}-{calc.deadline.isoformat()}"
    if id_suffix:
        item_id = f"{item_id}-{id_suffix}"
    return FilingDeadlineItem(
        **calc.model_dump(),
        id=item_id,
        entity_id=entity.id,
        entity_name=entity.name,
        filing_short_name=short_name(calc.filing_type),
        description=description,
        category=category,
        event_date=event_date,
        status=get_deadline_status(calc.deadline, today, settings),
        urgency_level=UrgencyLevel.from_urgency(calc.urgency),
    )


# =============================================================================
# STAGE RULES
# =============================================================================

def _no_stage_deadlines(ctx: _Context) -> List[FilingDeadlineItem]:
    return []


def _da_announced(ctx: _Context) -> List[FilingDeadlineItem]:
    entity = ctx.entity
    if entity.da_announced_date is None:
        ctx.run_logger.log_skipped("definitive agreement filings", "da_announced_date")
        return []

    announced = entity.da_announced_date
    s4_target = announced + relativedelta(months=ctx.settings.s4_target_months)
    return [
        ctx.item(
            ctx.calculated(FilingType.FORM_8K, announced),
            DeadlineCategory.CURRENT,
            "8-K for definitive agreement announcement",
            event_date=announced,
        ),
        ctx.item(
            ctx.fixed(FilingType.S4, announced, s4_target, days_allowed=(s4_target - announced).days),
            DeadlineCategory.REGISTRATION,
            "Target S-4 registration statement filing",
            event_date=announced,
        ),
    ]


def _sec_review(ctx: _Context) -> List[FilingDeadlineItem]:
    entity = ctx.entity
    items = []

    comment_date = entity.sec_comment_date
    response_due = entity.sec_response_due_date
    if response_due is None and comment_date is not None:
        response_due = add_business_days(comment_date, ctx.settings.comment_response_business_days)

    if response_due is not None:
        base = comment_date or response_due
        items.append(ctx.item(
            ctx.fixed(
                FilingType.S4, base, response_due,
                days_allowed=count_business_days(base, response_due),
                is_business_days=True,
            ),
            DeadlineCategory.SEC_RESPONSE,
            "Response to SEC comment letter",
            event_date=comment_date,
        ))
    else:
        ctx.run_logger.log_skipped("SEC comment response", "sec_comment_date")

    if entity.vote_date is not None:
        days = ctx.settings.preliminary_proxy_business_days
        items.append(ctx.item(
            ctx.fixed(
                FilingType.PREM14A, entity.vote_date, sub_business_days(entity.vote_date, days),
                days_allowed=days,
                is_business_days=True,
            ),
            DeadlineCategory.PROXY,
            "Preliminary proxy statement filing",
            event_date=entity.vote_date,
        ))

    return items


def _shareholder_vote(ctx: _Context) -> List[FilingDeadlineItem]:
    entity = ctx.entity
    vote = entity.vote_date
    if vote is None:
        ctx.run_logger.log_skipped("shareholder vote filings", "vote_date")
        return []

    items = []
    if entity.proxy_filed_date is None:
        days = ctx.settings.proxy_mailing_calendar_days
        items.append(ctx.item(
            ctx.fixed(FilingType.DEF14A, vote, vote - timedelta(days=days), days_allowed=days),
            DeadlineCategory.PROXY,
            "Definitive proxy statement mailing",
            event_date=vote,
        ))

    redemption_days = ctx.settings.redemption_business_days
    items.extend([
        ctx.item(
            ctx.fixed(FilingType.DEFA14A, vote, vote),
            DeadlineCategory.PROXY,
            "Additional proxy soliciting materials",
            event_date=vote,
        ),
        ctx.item(
            ctx.fixed(
                FilingType.OTHER, vote, sub_business_days(vote, redemption_days),
                days_allowed=redemption_days,
                is_business_days=True,
            ),
            DeadlineCategory.BUSINESS_COMBINATION,
            "Shareholder redemption deadline",
            event_date=vote,
            id_suffix="REDEMPTION",
        ),
    ])
    return items


def _closing(ctx: _Context) -> List[FilingDeadlineItem]:
    closing = ctx.entity.closing_date
    if closing is None:
        ctx.run_logger.log_skipped("Super 8-K", "closing_date")
        return []
    return [ctx.item(
        ctx.calculated(FilingType.SUPER_8K, closing),
        DeadlineCategory.CURRENT,
        "Super 8-K following business combination closing",
        event_date=closing,
    )]


def _liquidating(ctx: _Context) -> List[FilingDeadlineItem]:
    deadline = ctx.entity.deadline
    if deadline is None:
        ctx.run_logger.log_skipped("liquidation 8-K", "deadline")
        return []
    return [ctx.item(
        ctx.calculated(FilingType.FORM_8K, deadline),
        DeadlineCategory.CURRENT,
        "8-K announcing liquidation",
        event_date=deadline,
    )]


STAGE_RULES: Dict[LifecycleStage, Callable[[_Context], List[FilingDeadlineItem]]] = {
    LifecycleStage.SEARCHING: _no_stage_deadlines,
    LifecycleStage.LOI_SIGNED: _no_stage_deadlines,
    LifecycleStage.DA_ANNOUNCED: _da_announced,
    LifecycleStage.SEC_REVIEW: _sec_review,
    LifecycleStage.SHAREHOLDER_VOTE: _shareholder_vote,
    LifecycleStage.CLOSING: _closing,
    LifecycleStage.COMPLETED: _no_stage_deadlines,
    LifecycleStage.LIQUIDATING: _liquidating,
    LifecycleStage.LIQUIDATED: _no_stage_deadlines,
    LifecycleStage.TERMINATED: _no_stage_deadlines,
}

_missing_rules = set(LifecycleStage) - set(STAGE_RULES)
if _missing_rules:
    raise RuntimeError(f"STAGE_RULES is missing stages: {sorted(s.value for s in _missing_rules)}")


# =============================================================================
# GENERATION
# =============================================================================

def _outer_deadline(ctx: _Context) -> List[FilingDeadlineItem]:
    entity = ctx.entity
    if entity.deadline is None or entity.is_terminal:
        return []
    return [ctx.item(
        ctx.fixed(FilingType.OTHER, entity.deadline, entity.deadline),
        DeadlineCategory.BUSINESS_COMBINATION,
        "Business combination deadline",
    )]


def _periodic(ctx: _Context) -> List[FilingDeadlineItem]:
    entity = ctx.entity
    if entity.ipo_date is None or entity.is_terminal:
        return []

    today = ctx.today
    horizon = today + relativedelta(years=ctx.settings.periodic_horizon_years)
    items = []
    for period, calc in periodic_reports(
        today.year - 1,
        # Non-December fiscal years end in the following calendar year
        today.year + ctx.settings.periodic_horizon_years + 1,
        entity.fiscal_year_end_month,
        entity.filer_status,
        today,
        ctx.settings,
    ):
        if not today <= calc.deadline <= horizon:
            continue
        if period.quarter is None:
            description = f"Annual report for fiscal year {period.year}"
        else:
            description = f"Quarterly report for Q{period.quarter} of fiscal year {period.year}"
        items.append(ctx.item(calc, DeadlineCategory.PERIODIC, description, event_date=period.end_date))
    return items


def sort_deadlines(items: Iterable[FilingDeadlineItem]) -> List[FilingDeadlineItem]:
    """Order by urgency level (critical first), then by deadline."""
    return sorted(items, key=lambda i: (i.urgency_level.rank, i.deadline))


def generate_deadlines(
    entity: SpacSnapshot,
    today: Optional[date] = None,
    settings: Optional[ComplianceSettings] = None,
) -> List[FilingDeadlineItem]:
    """
    Generate all deadlines for one SPAC.

    Args:
        entity: Snapshot of the SPAC; never modified
        today: Evaluation date (defaults to the system date)
        settings: Compliance settings override

    Returns:
        Deadline items sorted by urgency level, then deadline
    """
    today = today or date.today()
    settings = settings or get_compliance_settings()
    run_logger = DeadlineRunLogger(entity.id, entity.name)
    ctx = _Context(entity, today, settings, run_logger)

    token = entity_id_var.set(entity.id)
    try:
        run_logger.start(entity.status.value, today)
        items: List[FilingDeadlineItem] = []
        for source, produce in (
            ("outer_deadline", _outer_deadline),
            ("periodic", _periodic),
            ("stage_rules", STAGE_RULES[entity.status]),
        ):
            produced = produce(ctx)
            run_logger.log_source(source, len(produced))
            items.extend(produced)
        run_logger.complete(len(items))
    finally:
        entity_id_var.reset(token)

    return sort_deadlines(items)


@log_performance("generate_deadlines_for_many")
def generate_deadlines_for_many(
    entities: Iterable[SpacSnapshot],
    today: Optional[date] = None,
    settings: Optional[ComplianceSettings] = None,
) -> List[FilingDeadlineItem]:
    """
    Generate deadlines for several SPACs against a single "today".

    Returns:
        All items, sorted globally by urgency level, then deadline
    """
    today = today or date.today()
    settings = settings or get_compliance_settings()
    items: List[FilingDeadlineItem] = []
    for entity in entities:
        items.extend(generate_deadlines(entity, today, settings))
    return sort_deadlines(items)
