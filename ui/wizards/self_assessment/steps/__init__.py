# -*- coding: utf-8 -*-
"""
Self-Assessment Steps Package.

Contains the steps of the self-assessment wizard:
- Personal Information
- Income and Tax Relief selection
- Income detail steps (one per income source)
- Tax relief detail steps
- Summary & Review
- Submission
"""

from .personal_info_step import PersonalInfoStep
from .selection_steps import IncomeSelectionStep, TaxReliefSelectionStep
from .income_steps import (
    EmploymentStep,
    SelfEmploymentStep,
    PropertyStep,
    PartnershipStep,
    ForeignIncomeStep,
    CapitalGainsStep,
    OtherIncomeStep,
)
from .relief_steps import PensionStep, CharitableDonationsStep, InvestmentSchemeStep
from .summary_step import SummaryStep
from .submission_step import SubmissionStep

__all__ = [
    'PersonalInfoStep',
    'IncomeSelectionStep',
    'TaxReliefSelectionStep',
    'EmploymentStep',
    'SelfEmploymentStep',
    'PropertyStep',
    'PartnershipStep',
    'ForeignIncomeStep',
    'CapitalGainsStep',
    'OtherIncomeStep',
    'PensionStep',
    'CharitableDonationsStep',
    'InvestmentSchemeStep',
    'SummaryStep',
    'SubmissionStep'
]
