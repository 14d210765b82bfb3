"""
Fiscal period helpers.

A fiscal year is labelled by the calendar year in which it ends. Quarter ends
fall on the last day of every third month counting back from the fiscal year
end month.
"""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from domain.exceptions import InvalidInputError


@dataclass(frozen=True)
class FiscalPeriod:
    """A fiscal year or quarter and its filing deadline."""
    period_type: str  # "YEAR" or "QUARTER"
    year: int
    start_date: date
    end_date: date
    filing_deadline: date
    quarter: Optional[int] = None


def _check_month(fye_month: int) -> None:
    if not 1 <= fye_month <= 12:
        raise InvalidInputError(
            f"fiscal_year_end_month must be between 1 and 12, got {fye_month}",
            {"field": "fiscal_year_end_month", "value": fye_month},
        )


def _month_end(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def fiscal_year_end(year: int, fye_month: int = 12) -> date:
    """Last day of the fiscal year ending in ``year``."""
    _check_month(fye_month)
    return _month_end(year, fye_month)


def fiscal_quarter_end(fiscal_year: int, quarter: int, fye_month: int = 12) -> date:
    """
    Last day of a fiscal quarter.

    Args:
        fiscal_year: Calendar year in which the fiscal year ends
        quarter: Fiscal quarter, 1-4
        fye_month: Fiscal year end month, 1-12

    Returns:
        The quarter end date. Quarter 4 equals the fiscal year end.
    """
    _check_month(fye_month)
    if quarter not in (1, 2, 3, 4):
        raise InvalidInputError(
            f"quarter must be between 1 and 4, got {quarter}",
            {"field": "quarter", "value": quarter},
        )
    anchor = date(fiscal_year, fye_month, 1) - relativedelta(months=3 * (4 - quarter))
    return _month_end(anchor.year, anchor.month)


def fiscal_year_start(fiscal_year: int, fye_month: int = 12) -> date:
    """First day of the fiscal year ending in ``fiscal_year``."""
    return date(fiscal_year, fye_month, 1) - relativedelta(months=11)


def current_fiscal_quarter(d: date, fye_month: int = 12) -> Tuple[int, int]:
    """
    Fiscal year and quarter containing a date.

    Returns:
        (fiscal_year, quarter)
    """
    _check_month(fye_month)
    fiscal_year = d.year + 1 if d.month > fye_month else d.year
    start_month = fye_month % 12 + 1
    months_in = (d.month - start_month) % 12
    return fiscal_year, months_in // 3 + 1
