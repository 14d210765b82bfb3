"""Filer Status Rules.

Filer status tiers and the periodic report day counts each tier is allowed.
Float and revenue bands are descriptive; classification of an entity into a
tier happens outside the engine.
"""

from __future__ import annotations

from .filing_rule_definitions import FilerStatusDefinition, ThresholdBand
from .rule_types import FilerStatus


FILER_STATUS_RULES = [
    FilerStatusDefinition(
        status=FilerStatus.LARGE_ACCELERATED,
        name="Large Accelerated Filer",
        description="Public float of $700 million or more",
        float_threshold=ThresholdBand(min=700_000_000),
        ten_k_deadline_days=60,
        ten_q_deadline_days=40,
    ),
    FilerStatusDefinition(
        status=FilerStatus.ACCELERATED,
        name="Accelerated Filer",
        description="Public float of $75 million to $700 million",
        float_threshold=ThresholdBand(min=75_000_000, max=700_000_000),
        ten_k_deadline_days=75,
        ten_q_deadline_days=40,
    ),
    FilerStatusDefinition(
        status=FilerStatus.NON_ACCELERATED,
        name="Non-Accelerated Filer",
        description="Public float less than $75 million",
        float_threshold=ThresholdBand(max=75_000_000),
        ten_k_deadline_days=90,
        ten_q_deadline_days=45,
        benefits=("Extended filing deadlines",),
    ),
    FilerStatusDefinition(
        status=FilerStatus.SMALLER_REPORTING,
        name="Smaller Reporting Company",
        description="Public float less than $250 million or revenues less than $100 million",
        float_threshold=ThresholdBand(max=250_000_000),
        revenue_threshold=ThresholdBand(max=100_000_000),
        ten_k_deadline_days=90,
        ten_q_deadline_days=45,
        benefits=(
            "Scaled disclosure requirements",
            "Two years of audited financials (vs three)",
            "Simplified executive compensation disclosure",
            "No CD&A required",
        ),
    ),
    FilerStatusDefinition(
        status=FilerStatus.EMERGING_GROWTH,
        name="Emerging Growth Company",
        description="IPO within 5 years with revenues less than $1.235 billion",
        revenue_threshold=ThresholdBand(max=1_235_000_000),
        ten_k_deadline_days=90,
        ten_q_deadline_days=45,
        benefits=(
            "Two years of audited financials",
            "Reduced executive compensation disclosure",
            "No auditor attestation on internal controls",
            "Extended transition period for new accounting standards",
            "Confidential SEC submission of draft registration statements",
        ),
    ),
]
