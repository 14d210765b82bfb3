"""SEC Filing Rules.

Static definitions for every filing type a SPAC encounters between IPO and
de-SPAC closing or liquidation.

Rules cover:
- Periodic reports (10-K, 10-Q) with filer-status tiered deadlines
- Current reports (8-K, Super 8-K)
- Registration statements (S-1, S-4)
- Proxy materials (PREM14A, DEF14A, DEFA14A, Rule 425)
- Beneficial ownership (13D, 13G) and insider reports (Forms 3, 4, 5)
"""

from __future__ import annotations

from .filing_rule_definitions import FilingDefinition
from .rule_types import DeadlineType, FilingCategory, FilingType


# =============================================================================
# FILING DEFINITIONS (16 filing types)
# =============================================================================

FILING_RULES = [
    # =========================================================================
    # Periodic Reports
    # =========================================================================
    FilingDefinition(
        type=FilingType.FORM_10K,
        name="Annual Report",
        short_name="10-K",
        category=FilingCategory.PERIODIC,
        description="Annual report providing comprehensive overview of business and financial condition",
        deadline_type=DeadlineType.PERIODIC,
        deadline_days=60,  # Large accelerated filers
        accelerated_filer_days=75,
        large_accelerated_filer_days=60,
        non_accelerated_filer_days=90,
        periodic_deadline="Within 60/75/90 days after fiscal year end",
        required_for_spac=True,
        required_for_despac=True,
        triggers=("Fiscal year end",),
        checklist=(
            "Financial statements audited by independent CPA",
            "Management Discussion & Analysis (MD&A)",
            "Executive compensation disclosure",
            "Risk factors updated",
            "Certifications (SOX 302, 906)",
            "Internal control assessment (SOX 404)",
        ),
    ),
    FilingDefinition(
        type=FilingType.FORM_10Q,
        name="Quarterly Report",
        short_name="10-Q",
        category=FilingCategory.PERIODIC,
        description="Quarterly report on financial condition and results of operations",
        deadline_type=DeadlineType.PERIODIC,
        deadline_days=40,  # Large accelerated filers
        accelerated_filer_days=40,
        large_accelerated_filer_days=40,
        non_accelerated_filer_days=45,
        periodic_deadline="Within 40/45 days after quarter end",
        required_for_spac=True,
        required_for_despac=True,
        triggers=("Quarter end (Q1, Q2, Q3)",),
        checklist=(
            "Unaudited financial statements",
            "Management Discussion & Analysis (MD&A)",
            "Certifications (SOX 302, 906)",
            "Update on legal proceedings",
            "Risk factor updates (if material)",
        ),
    ),

    # =========================================================================
    # Current Reports
    # =========================================================================
    FilingDefinition(
        type=FilingType.FORM_8K,
        name="Current Report",
        short_name="8-K",
        category=FilingCategory.CURRENT,
        description="Report of unscheduled material events or corporate changes",
        deadline_type=DeadlineType.EVENT_BASED,
        deadline_days=4,
        deadline_business_days=True,
        required_for_spac=True,
        required_for_despac=True,
        triggers=(
            "Entry into material definitive agreement",
            "Completion of acquisition/disposition",
            "Results of operations and financial condition",
            "Creation of direct financial obligation",
            "Events triggering acceleration of obligation",
            "Changes in control",
            "Departure of directors/officers",
            "Amendments to articles/bylaws",
            "Changes in fiscal year",
            "Regulation FD disclosure",
            "Delisting or transfer of listing",
        ),
        checklist=(
            "Identify triggering event and applicable Item",
            "Prepare required exhibits",
            "Legal review of disclosure",
            "Officer certification",
            "File within 4 business days",
        ),
    ),
    FilingDefinition(
        type=FilingType.SUPER_8K,
        name="Super 8-K (De-SPAC)",
        short_name="Super 8-K",
        category=FilingCategory.CURRENT,
        description="Enhanced 8-K filed upon completion of de-SPAC transaction with expanded disclosure",
        deadline_type=DeadlineType.EVENT_BASED,
        deadline_days=4,
        deadline_business_days=True,
        required_for_spac=False,
        required_for_despac=True,
        triggers=("Completion of de-SPAC transaction",),
        checklist=(
            "Business description of combined company",
            "Risk factors",
            "Financial information (target company)",
            "Management Discussion & Analysis",
            "Directors and executive officers",
            "Executive compensation",
            "Related party transactions",
            "Principal stockholders",
            "Description of securities",
            "Audited financial statements of acquired company",
            "Pro forma financial information",
            "Exhibits (material agreements)",
        ),
        sec_guidance=(
            "Must be filed within 4 business days of transaction closing. "
            "Includes shell company disclosure requirements."
        ),
    ),

    # =========================================================================
    # Registration Statements
    # =========================================================================
    FilingDefinition(
        type=FilingType.S1,
        name="Registration Statement",
        short_name="S-1",
        category=FilingCategory.REGISTRATION,
        description="Registration statement for initial public offering",
        deadline_type=DeadlineType.EVENT_BASED,
        required_for_spac=True,
        required_for_despac=False,
        triggers=("Prior to IPO",),
        checklist=(
            "Prospectus with complete business description",
            "Use of proceeds",
            "Risk factors",
            "Management Discussion & Analysis",
            "Business description",
            "Management and compensation",
            "Related party transactions",
            "Principal stockholders",
            "Audited financial statements",
            "Underwriting agreement",
            "Legal opinion on securities",
            "Consent of independent accountants",
        ),
    ),
    FilingDefinition(
        type=FilingType.S4,
        name="Registration Statement (Business Combination)",
        short_name="S-4",
        category=FilingCategory.REGISTRATION,
        description="Registration statement for securities issued in business combination",
        deadline_type=DeadlineType.EVENT_BASED,
        required_for_spac=False,
        required_for_despac=True,
        triggers=("Business combination requiring shareholder vote",),
        checklist=(
            "Summary of transaction",
            "Risk factors (SPAC and target)",
            "Comparative per share data",
            "Market price data",
            "Target company business description",
            "Target company MD&A",
            "Target company audited financials",
            "SPAC audited financials",
            "Pro forma financial statements",
            "Material agreements",
            "Fairness opinion",
            "Background of transaction",
            "Reasons for transaction",
            "Interests of SPAC insiders",
        ),
    ),

    # =========================================================================
    # Proxy Materials
    # =========================================================================
    FilingDefinition(
        type=FilingType.DEF14A,
        name="Definitive Proxy Statement",
        short_name="DEF14A",
        category=FilingCategory.PROXY,
        description="Definitive proxy statement for shareholder meeting",
        deadline_type=DeadlineType.EVENT_BASED,
        required_for_spac=True,
        required_for_despac=True,
        triggers=("Shareholder meeting/vote required",),
        checklist=(
            "Meeting information and agenda",
            "Voting procedures and record date",
            "Proposal descriptions",
            "Board recommendations",
            "Director information and compensation",
            "Executive compensation tables",
            "Related party transactions",
            "Security ownership table",
            "Audit committee report",
            "Independent auditor fees",
        ),
    ),
    FilingDefinition(
        type=FilingType.PREM14A,
        name="Preliminary Proxy Statement",
        short_name="PREM14A",
        category=FilingCategory.PROXY,
        description="Preliminary proxy statement filed for SEC review before distribution",
        deadline_type=DeadlineType.EVENT_BASED,
        required_for_spac=False,
        required_for_despac=True,
        triggers=("Prior to definitive proxy for business combination",),
        checklist=(
            "All DEF14A content in draft form",
            "Placeholder for meeting date",
            "SEC staff review period",
        ),
    ),
    FilingDefinition(
        type=FilingType.DEFA14A,
        name="Additional Proxy Soliciting Materials",
        short_name="DEFA14A",
        category=FilingCategory.PROXY,
        description="Additional definitive proxy soliciting materials",
        deadline_type=DeadlineType.EVENT_BASED,
        required_for_spac=False,
        required_for_despac=True,
        triggers=("Distribution of additional soliciting materials",),
        checklist=(
            "Supplemental disclosure",
            "Press releases related to proxy",
            "Investor presentations",
            "Filed no later than date of first use",
        ),
    ),
    FilingDefinition(
        type=FilingType.FORM_425,
        name="Prospectus Communications",
        short_name="425",
        category=FilingCategory.OTHER,
        description="Written communications under Rule 425 related to business combination",
        deadline_type=DeadlineType.EVENT_BASED,
        required_for_spac=False,
        required_for_despac=True,
        triggers=("Any written communication relating to business combination",),
        checklist=(
            "Filed no later than date of first use",
            "Include required legend",
            "Reference to registration statement",
        ),
    ),

    # =========================================================================
    # Beneficial Ownership
    # =========================================================================
    FilingDefinition(
        type=FilingType.SC_13D,
        name="Schedule 13D",
        short_name="13D",
        category=FilingCategory.BENEFICIAL,
        description="Beneficial ownership report for holders of more than 5% with activist intent",
        deadline_type=DeadlineType.EVENT_BASED,
        deadline_days=10,
        required_for_spac=True,
        required_for_despac=True,
        triggers=("Acquisition of more than 5% beneficial ownership with intent to influence",),
        checklist=(
            "Identify reporting person",
            "Source of funds",
            "Purpose of transaction",
            "Interest in securities",
            "Contracts/arrangements with respect to securities",
        ),
    ),
    FilingDefinition(
        type=FilingType.SC_13G,
        name="Schedule 13G",
        short_name="13G",
        category=FilingCategory.BENEFICIAL,
        description="Beneficial ownership report for passive investors owning more than 5%",
        deadline_type=DeadlineType.EVENT_BASED,
        deadline_days=45,
        required_for_spac=True,
        required_for_despac=True,
        triggers=("Passive acquisition of more than 5% beneficial ownership",),
        checklist=(
            "Confirm passive investor status",
            "Identity of reporting person",
            "Securities beneficially owned",
            "Certify no control intent",
        ),
    ),

    # =========================================================================
    # Insider Reports
    # =========================================================================
    FilingDefinition(
        type=FilingType.FORM_3,
        name="Initial Statement of Beneficial Ownership",
        short_name="Form 3",
        category=FilingCategory.INSIDER,
        description="Initial statement of beneficial ownership for insiders",
        deadline_type=DeadlineType.EVENT_BASED,
        deadline_days=10,
        required_for_spac=True,
        required_for_despac=True,
        triggers=("Becoming an officer, director, or 10% beneficial owner",),
        checklist=(
            "Securities directly owned",
            "Securities indirectly owned",
            "Nature of indirect ownership",
        ),
    ),
    FilingDefinition(
        type=FilingType.FORM_4,
        name="Statement of Changes in Beneficial Ownership",
        short_name="Form 4",
        category=FilingCategory.INSIDER,
        description="Report changes in beneficial ownership of securities",
        deadline_type=DeadlineType.EVENT_BASED,
        deadline_days=2,
        deadline_business_days=True,
        required_for_spac=True,
        required_for_despac=True,
        triggers=("Change in beneficial ownership by insider",),
        checklist=(
            "Transaction date",
            "Transaction code",
            "Securities acquired/disposed",
            "Price per share",
            "Amount of securities owned after transaction",
        ),
    ),
    FilingDefinition(
        type=FilingType.FORM_5,
        name="Annual Statement of Changes in Beneficial Ownership",
        short_name="Form 5",
        category=FilingCategory.INSIDER,
        description="Annual report of insider transactions not previously reported",
        deadline_type=DeadlineType.PERIODIC,
        deadline_days=45,
        periodic_deadline="Within 45 days after fiscal year end",
        required_for_spac=True,
        required_for_despac=True,
        triggers=("Fiscal year end (if unreported transactions exist)",),
        checklist=(
            "All transactions not reported on Form 4",
            "Exempt transactions",
            "Small acquisitions",
        ),
    ),

    # =========================================================================
    # Catch-all
    # =========================================================================
    FilingDefinition(
        type=FilingType.OTHER,
        name="Other Filing",
        short_name="Other",
        category=FilingCategory.OTHER,
        description="Other SEC filing type",
        deadline_type=DeadlineType.EVENT_BASED,
        required_for_spac=False,
        required_for_despac=False,
    ),
]
