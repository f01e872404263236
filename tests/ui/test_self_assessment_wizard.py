# -*- coding: utf-8 -*-
"""
Tests for the Self-Assessment Wizard.

Tests cover:
- Wizard initialization
- Inline validation and gating
- Selection-driven step list
- Button labels on the summary and submission steps
- Finalization and the completion page
"""

import pytest
from PyQt5.QtCore import Qt

from app.config import Config
from ui.wizards.framework import FormStep, NoValidationStep, SelectionStep
from ui.wizards.self_assessment import SelfAssessmentWizard
from ui.wizards.self_assessment.steps import (
    IncomeSelectionStep,
    SubmissionStep,
    SummaryStep,
    TaxReliefSelectionStep,
)


PERSONAL_INFO = {
    "fullName": "Jane Doe",
    "dateOfBirth": "1985-04-12",
    "nationalInsuranceNumber": "AB123456C",
    "utr": "1234567890",
    "addressLine1": "1 High Street",
    "city": "Leeds",
    "postcode": "LS1 1AA",
    "contactNumber": "0113 000 0000",
    "email": "jane@example.com",
}


@pytest.fixture
def wizard(qtbot, store):
    """Create wizard instance for testing."""
    wizard = SelfAssessmentWizard(store=store, double_activation_enabled=False)
    qtbot.addWidget(wizard)
    wizard.show()
    return wizard


def _click_next(qtbot, wizard):
    qtbot.mouseClick(wizard.footer.btn_next, Qt.LeftButton)


def _fill(step: FormStep, values: dict):
    for name, value in values.items():
        step.set_field_value(name, value)


class TestWizardInitialization:
    """Test wizard initialization and setup."""

    def test_wizard_starts_at_personal_info(self, wizard):
        assert wizard.navigator.current_index == 0
        assert wizard.navigator.get_current_step().id == "personal_info"
        assert wizard.header.step_counter_label.text() == "Step 1 of 5"
        assert wizard.header.completion_label.text() == "0% complete"

    def test_previous_disabled_on_first_step(self, wizard):
        assert wizard.footer.btn_previous.isEnabled() is False

    def test_every_catalog_step_has_a_widget(self, wizard):
        for step in wizard.navigator.registry.all_steps():
            assert step.renderable in wizard.STEP_WIDGETS

    def test_submission_step_is_tagged_non_validating(self):
        assert SubmissionStep.requires_validation is False
        assert issubclass(SubmissionStep, NoValidationStep)
        assert SummaryStep.requires_validation is True

    @pytest.mark.parametrize("step_class", [IncomeSelectionStep, TaxReliefSelectionStep])
    def test_selection_steps_are_tagged_non_validating(self, step_class):
        assert step_class.requires_validation is False
        assert issubclass(step_class, NoValidationStep)


class TestValidationGating:
    """Test that invalid steps block Next."""

    def test_empty_personal_info_is_rejected(self, qtbot, wizard, store):
        _click_next(qtbot, wizard)

        step = wizard.current_step_widget()
        assert wizard.navigator.current_index == 0
        assert step.field_error("fullName") == "Full name is required"
        assert not wizard.warning_banner.isHidden()
        assert store.is_section_completed("personalInfo") is False

    def test_valid_personal_info_advances_and_commits(self, qtbot, wizard, store):
        _fill(wizard.current_step_widget(), PERSONAL_INFO)
        _click_next(qtbot, wizard)

        assert wizard.navigator.get_current_step().id == "income_selection"
        assert store.get_value("fullName") == "Jane Doe"
        assert store.is_section_completed("personalInfo") is True
        assert wizard.warning_banner.isHidden()
        assert wizard.header.completion_label.text() == f"{round(100 / Config.TOTAL_STEPS)}% complete"

    def test_previous_restores_answers(self, qtbot, wizard):
        _fill(wizard.current_step_widget(), PERSONAL_INFO)
        _click_next(qtbot, wizard)
        qtbot.mouseClick(wizard.footer.btn_previous, Qt.LeftButton)

        step = wizard.current_step_widget()
        assert wizard.navigator.current_index == 0
        assert step.get_field_value("fullName") == "Jane Doe"


class TestSelectionFlow:
    """Test that selections reshape the step list."""

    def _to_income_selection(self, qtbot, wizard):
        _fill(wizard.current_step_widget(), PERSONAL_INFO)
        _click_next(qtbot, wizard)

    def test_selection_adds_detail_steps(self, qtbot, wizard, store):
        self._to_income_selection(qtbot, wizard)
        selection = wizard.current_step_widget()
        assert isinstance(selection, SelectionStep)

        selection.toggle("property")
        selection.toggle("employment")
        _click_next(qtbot, wizard)

        assert store.get_value("selectedIncomeTypes") == ["property", "employment"]
        assert wizard.navigator.get_step_ids()[3:5] == ["employment_details", "property_details"]
        assert wizard.header.step_counter_label.text() == "Step 3 of 7"

    def test_selection_restored_from_store(self, qtbot, wizard):
        self._to_income_selection(qtbot, wizard)
        wizard.current_step_widget().toggle("capitalGains")
        _click_next(qtbot, wizard)
        qtbot.mouseClick(wizard.footer.btn_previous, Qt.LeftButton)

        assert wizard.current_step_widget().selected_tokens() == ["capitalGains"]


class TestCompleteFlow:
    """Walk the whole questionnaire."""

    def _walk_to_summary(self, qtbot, wizard):
        _fill(wizard.current_step_widget(), PERSONAL_INFO)
        _click_next(qtbot, wizard)

        wizard.current_step_widget().toggle("employment")
        _click_next(qtbot, wizard)

        # No reliefs
        _click_next(qtbot, wizard)

        assert wizard.navigator.get_current_step().id == "employment_details"
        _fill(wizard.current_step_widget(), {
            "isEmployed": True,
            "employerName": "Acme Ltd",
            "employerPayeReference": "123/AB456",
            "totalPayFromP60": "32000",
            "taxDeducted": "4200.50",
        })
        _click_next(qtbot, wizard)
        assert wizard.navigator.get_current_step().id == "summary"

    def test_summary_button_label(self, qtbot, wizard):
        self._walk_to_summary(qtbot, wizard)
        assert wizard.footer.btn_next.text() == "Confirm & Submit"

    def test_summary_rejects_missing_identifiers(self, qtbot, wizard, store):
        self._walk_to_summary(qtbot, wizard)
        store.update({"utr": ""})

        _click_next(qtbot, wizard)

        assert wizard.navigator.get_current_step().id == "summary"
        assert "Personal information is incomplete: UTR" in wizard.warning_banner.text()

    def test_finish_finalizes_and_resets(self, qtbot, wizard, store):
        self._walk_to_summary(qtbot, wizard)
        _click_next(qtbot, wizard)
        assert wizard.navigator.get_current_step().id == "submission"
        assert wizard.footer.btn_next.text() == "Finish"

        with qtbot.waitSignal(wizard.wizard_completed) as blocker:
            _click_next(qtbot, wizard)

        record = blocker.args[0]
        assert record["form_data"]["employerName"] == "Acme Ltd"
        assert record["sections_completed"]["employment"] is True

        assert wizard.pages.currentIndex() == wizard.COMPLETION_PAGE
        assert store.get_value("fullName") == ""
        assert wizard.navigator.current_index == 0
        assert wizard.navigator.get_step_count() == 5

        qtbot.mouseClick(wizard.btn_start_again, Qt.LeftButton)
        assert wizard.pages.currentIndex() == wizard.WIZARD_PAGE
        assert wizard.current_step_widget().get_field_value("fullName") == ""
