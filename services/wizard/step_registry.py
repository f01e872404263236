# -*- coding: utf-8 -*-
"""
Step Registry - static catalog of every wizard step.

Each step is one of:
- lead: always present, positions 0-2
- tail: always present, the last two positions
- optional: present only when its selection token is chosen

The canonical income and relief orders make the position of optional
steps independent of the order in which the user ticked the options.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from services.exceptions import StepRegistryError


class StepKind:
    LEAD = "lead"
    TAIL = "tail"
    OPTIONAL = "optional"


class Category:
    INCOME = "income"
    RELIEF = "relief"


@dataclass(frozen=True)
class StepDefinition:
    """One screen of the wizard."""
    id: str
    title: str
    renderable: str                    # Widget class name in the UI step table
    kind: str = StepKind.OPTIONAL
    category: Optional[str] = None     # Category.INCOME / Category.RELIEF for optional steps
    token: Optional[str] = None        # Selection token that includes this step
    section_id: Optional[str] = None   # Completion flag set on successful submission

    @property
    def is_optional(self) -> bool:
        return self.kind == StepKind.OPTIONAL


@dataclass(frozen=True)
class SelectionOption:
    """A choice offered on a selection screen."""
    token: str
    label: str
    description: str = ""


# Step ids
PERSONAL_INFO = "personal_info"
INCOME_SELECTION = "income_selection"
TAX_RELIEF_SELECTION = "tax_relief_selection"
SUMMARY = "summary"
SUBMISSION = "submission"

INCOME_ORDER: Tuple[str, ...] = (
    "employment",
    "selfEmployment",
    "property",
    "partnership",
    "foreignIncome",
    "capitalGains",
    "otherIncome",
)

RELIEF_ORDER: Tuple[str, ...] = (
    "pension",
    "charity",
    "investmentSchemes",
)

ALL_STEPS: Tuple[StepDefinition, ...] = (
    # Fixed initial steps
    StepDefinition(PERSONAL_INFO, "Personal Information", "PersonalInfoStep",
                   StepKind.LEAD, section_id="personalInfo"),
    StepDefinition(INCOME_SELECTION, "Income Sources Selection", "IncomeSelectionStep",
                   StepKind.LEAD, section_id="incomeSelection"),
    StepDefinition(TAX_RELIEF_SELECTION, "Tax Relief Selection", "TaxReliefSelectionStep",
                   StepKind.LEAD, section_id="taxReliefSelection"),

    # Optional income detail steps
    StepDefinition("employment_details", "Employment Details", "EmploymentStep",
                   category=Category.INCOME, token="employment", section_id="employment"),
    StepDefinition("self_employment_details", "Self-Employment Details", "SelfEmploymentStep",
                   category=Category.INCOME, token="selfEmployment", section_id="selfEmployment"),
    StepDefinition("property_details", "Property Income Details", "PropertyStep",
                   category=Category.INCOME, token="property", section_id="ukProperty"),
    StepDefinition("partnership_details", "Partnership Income Details", "PartnershipStep",
                   category=Category.INCOME, token="partnership", section_id="partnership"),
    StepDefinition("foreign_income_details", "Foreign Income Details", "ForeignIncomeStep",
                   category=Category.INCOME, token="foreignIncome", section_id="foreignIncome"),
    StepDefinition("capital_gains_details", "Capital Gains Details", "CapitalGainsStep",
                   category=Category.INCOME, token="capitalGains", section_id="capitalGains"),
    StepDefinition("other_income_details", "Other Income Details", "OtherIncomeStep",
                   category=Category.INCOME, token="otherIncome", section_id="otherIncome"),

    # Optional tax relief detail steps
    StepDefinition("pension_details", "Pension Contributions", "PensionStep",
                   category=Category.RELIEF, token="pension", section_id="pension"),
    StepDefinition("charity_details", "Charitable Donations", "CharitableDonationsStep",
                   category=Category.RELIEF, token="charity", section_id="charity"),
    StepDefinition("investment_details", "Investment Schemes", "InvestmentSchemeStep",
                   category=Category.RELIEF, token="investmentSchemes", section_id="investmentSchemes"),

    # Fixed final steps
    StepDefinition(SUMMARY, "Summary & Review", "SummaryStep", StepKind.TAIL),
    StepDefinition(SUBMISSION, "Submission", "SubmissionStep", StepKind.TAIL),
)

INCOME_OPTIONS: Tuple[SelectionOption, ...] = (
    SelectionOption("employment", "Employment Income",
                    "Salary, wages, bonuses, and benefits from employment"),
    SelectionOption("selfEmployment", "Self-Employment",
                    "Income from your business or freelance work"),
    SelectionOption("property", "Property Income",
                    "Rental income from properties in the UK"),
    SelectionOption("partnership", "Partnership",
                    "Income from being a partner in a business partnership"),
    SelectionOption("foreignIncome", "Foreign Income",
                    "Income from sources outside the UK"),
    SelectionOption("capitalGains", "Capital Gains",
                    "Profit from selling assets like property or shares"),
    SelectionOption("otherIncome", "Other Income",
                    "Dividends, interest, state benefits, etc."),
)

# loanInterest and marriageAllowance are recorded but have no detail step
RELIEF_OPTIONS: Tuple[SelectionOption, ...] = (
    SelectionOption("pension", "Pension Contributions",
                    "Personal contributions to registered pension schemes"),
    SelectionOption("charity", "Charitable Donations",
                    "Gift Aid donations to UK charities"),
    SelectionOption("investmentSchemes", "Investment Schemes",
                    "EIS, SEIS, VCT and similar tax-advantaged investments"),
    SelectionOption("loanInterest", "Loan Interest Relief",
                    "Interest on qualifying loans"),
    SelectionOption("marriageAllowance", "Marriage Allowance",
                    "Transfer of personal allowance to a spouse or civil partner"),
)


class StepRegistry:
    """Lookup over the static step catalog."""

    LEAD_STEP_IDS: Tuple[str, ...] = (PERSONAL_INFO, INCOME_SELECTION, TAX_RELIEF_SELECTION)
    TAIL_STEP_IDS: Tuple[str, ...] = (SUMMARY, SUBMISSION)

    def __init__(self, steps: Tuple[StepDefinition, ...] = ALL_STEPS):
        self._steps: Dict[str, StepDefinition] = {step.id: step for step in steps}
        self._by_token: Dict[Tuple[str, str], StepDefinition] = {
            (step.category, step.token): step
            for step in steps if step.is_optional
        }

    def all_steps(self) -> List[StepDefinition]:
        """Every possible step in catalog order."""
        return list(self._steps.values())

    def get(self, step_id: str) -> StepDefinition:
        try:
            return self._steps[step_id]
        except KeyError:
            raise StepRegistryError(step_id) from None

    def lead_steps(self) -> List[StepDefinition]:
        return [self.get(step_id) for step_id in self.LEAD_STEP_IDS]

    def tail_steps(self) -> List[StepDefinition]:
        return [self.get(step_id) for step_id in self.TAIL_STEP_IDS]

    def income_order(self) -> Tuple[str, ...]:
        return INCOME_ORDER

    def relief_order(self) -> Tuple[str, ...]:
        return RELIEF_ORDER

    def step_for_token(self, category: str, token: str) -> Optional[StepDefinition]:
        """Detail step keyed by a selection token, or None when it has none."""
        return self._by_token.get((category, token))

    def options(self, category: str) -> Tuple[SelectionOption, ...]:
        return INCOME_OPTIONS if category == Category.INCOME else RELIEF_OPTIONS

    def label_for(self, category: str, token: str) -> str:
        """Display label for a selection token; unknown tokens echo back."""
        for option in self.options(category):
            if option.token == token:
                return option.label
        return token


# Default shared catalog (immutable)
STEP_REGISTRY = StepRegistry()
