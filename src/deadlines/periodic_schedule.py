"""
Periodic report schedule.

Builds the 10-K and Q1-Q3 10-Q deadlines for a range of fiscal years. The
fourth quarter is covered by the 10-K. Deadlines are snapped to business days
by the deadline calculator.
"""

from datetime import date, timedelta
from typing import List, Optional, Tuple, Union

from business_calendar import FiscalPeriod, fiscal_quarter_end, fiscal_year_end, fiscal_year_start
from config.settings import ComplianceSettings
from rules.rule_types import FilerStatus, FilingType

from .calculator import calculate_deadline
from .models import DeadlineCalculation, PeriodicFilingScheduleEntry, ScheduleStatus

PeriodicReport = Tuple[FiscalPeriod, DeadlineCalculation]


def periodic_reports(
    first_year: int,
    last_year: int,
    fye_month: int = 12,
    filer_status: Optional[Union[str, FilerStatus]] = None,
    today: Optional[date] = None,
    settings: Optional[ComplianceSettings] = None,
) -> List[PeriodicReport]:
    """
    Periodic report deadlines for fiscal years ``first_year``..``last_year``.

    Returns:
        (period, calculation) pairs in fiscal order
    """
    today = today or date.today()
    reports: List[PeriodicReport] = []

    for year in range(first_year, last_year + 1):
        year_start = fiscal_year_start(year, fye_month)
        quarter_start = year_start
        for quarter in (1, 2, 3):
            quarter_end = fiscal_quarter_end(year, quarter, fye_month)
            calc = calculate_deadline(FilingType.FORM_10Q, quarter_end, filer_status, today, settings)
            reports.append((
                FiscalPeriod(
                    period_type="QUARTER",
                    year=year,
                    quarter=quarter,
                    start_date=quarter_start,
                    end_date=quarter_end,
                    filing_deadline=calc.deadline,
                ),
                calc,
            ))
            quarter_start = quarter_end + timedelta(days=1)

        year_end = fiscal_year_end(year, fye_month)
        calc = calculate_deadline(FilingType.FORM_10K, year_end, filer_status, today, settings)
        reports.append((
            FiscalPeriod(
                period_type="YEAR",
                year=year,
                start_date=year_start,
                end_date=year_end,
                filing_deadline=calc.deadline,
            ),
            calc,
        ))

    return reports


def schedule_status(period: FiscalPeriod, today: date) -> ScheduleStatus:
    if period.filing_deadline < today:
        return ScheduleStatus.OVERDUE
    if today < period.end_date:
        return ScheduleStatus.UPCOMING
    return ScheduleStatus.DUE


def generate_periodic_filing_schedule(
    fye_month: int = 12,
    filer_status: Optional[Union[str, FilerStatus]] = None,
    years_ahead: int = 2,
    today: Optional[date] = None,
    settings: Optional[ComplianceSettings] = None,
) -> List[PeriodicFilingScheduleEntry]:
    """
    Rolling schedule of periodic reports, sorted by filing deadline.

    Covers the fiscal year ending last calendar year (whose 10-K may still be
    open) through ``years_ahead`` years after the current one.
    """
    today = today or date.today()
    entries = [
        PeriodicFilingScheduleEntry(
            filing_type=calc.filing_type,
            period_type=period.period_type,
            fiscal_year=period.year,
            quarter=period.quarter,
            period_start=period.start_date,
            period_end=period.end_date,
            filing_deadline=period.filing_deadline,
            status=schedule_status(period, today),
        )
        for period, calc in periodic_reports(
            today.year - 1, today.year + years_ahead, fye_month, filer_status, today, settings
        )
    ]
    entries.sort(key=lambda e: e.filing_deadline)
    return entries
