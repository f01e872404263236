# -*- coding: utf-8 -*-
"""
Self-Assessment Wizard.

Multi-step questionnaire for a UK self-assessment tax return intake.

Steps:
1. Personal Information
2. Income Sources Selection
3. Tax Relief Selection
4. One detail step per selected income source (canonical order)
5. One detail step per selected tax relief (canonical order)
6. Summary & Review
7. Submission
"""

from typing import Dict, Optional, Tuple, Type

from services.form_data_store import FormDataStore
from services.wizard.step_registry import SUMMARY, StepDefinition
from ui.wizards.framework import BaseStep, BaseWizard
from ui.wizards.self_assessment.steps import (
    PersonalInfoStep,
    IncomeSelectionStep,
    TaxReliefSelectionStep,
    EmploymentStep,
    SelfEmploymentStep,
    PropertyStep,
    PartnershipStep,
    ForeignIncomeStep,
    CapitalGainsStep,
    OtherIncomeStep,
    PensionStep,
    CharitableDonationsStep,
    InvestmentSchemeStep,
    SummaryStep,
    SubmissionStep,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class SelfAssessmentWizard(BaseWizard):
    """
    Self-assessment questionnaire.

    Step widgets are looked up by the renderable name of each catalog
    entry and built the first time the step is mounted.
    """

    STEP_WIDGETS: Dict[str, Type[BaseStep]] = {
        "PersonalInfoStep": PersonalInfoStep,
        "IncomeSelectionStep": IncomeSelectionStep,
        "TaxReliefSelectionStep": TaxReliefSelectionStep,
        "EmploymentStep": EmploymentStep,
        "SelfEmploymentStep": SelfEmploymentStep,
        "PropertyStep": PropertyStep,
        "PartnershipStep": PartnershipStep,
        "ForeignIncomeStep": ForeignIncomeStep,
        "CapitalGainsStep": CapitalGainsStep,
        "OtherIncomeStep": OtherIncomeStep,
        "PensionStep": PensionStep,
        "CharitableDonationsStep": CharitableDonationsStep,
        "InvestmentSchemeStep": InvestmentSchemeStep,
        "SummaryStep": SummaryStep,
        "SubmissionStep": SubmissionStep,
    }

    def create_store(self) -> FormDataStore:
        """Create the store over the configured data directory."""
        return FormDataStore()

    def create_step_widget(self, step: StepDefinition) -> Optional[BaseStep]:
        widget_class = self.STEP_WIDGETS.get(step.renderable)
        if widget_class is None:
            logger.warning(f"No widget registered for step {step.id} ({step.renderable})")
            return None
        return widget_class(self.store, step, self)

    def get_next_button(self, step: StepDefinition) -> Tuple[str, str]:
        if step.id == SUMMARY:
            return "Confirm & Submit", "success"
        return super().get_next_button(step)

    def get_completion_message(self) -> str:
        return (
            "Your self-assessment information has been saved and is ready "
            "for submission. We'll process your tax return promptly."
        )
