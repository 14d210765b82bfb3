"""
Business calendar for SEC filing deadlines.

US federal holidays with weekend observance, business-day arithmetic and
fiscal period helpers.
"""

from .business_days import (
    add_business_days,
    count_business_days,
    is_business_day,
    next_business_day,
    previous_business_day,
    sub_business_days,
)
from .fiscal_periods import (
    FiscalPeriod,
    current_fiscal_quarter,
    fiscal_quarter_end,
    fiscal_year_end,
    fiscal_year_start,
)
from .holidays import federal_holidays, is_federal_holiday

__all__ = [
    "federal_holidays",
    "is_federal_holiday",
    "is_business_day",
    "add_business_days",
    "sub_business_days",
    "count_business_days",
    "next_business_day",
    "previous_business_day",
    "FiscalPeriod",
    "fiscal_year_end",
    "fiscal_year_start",
    "fiscal_quarter_end",
    "current_fiscal_quarter",
]
