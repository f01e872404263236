# -*- coding: utf-8 -*-
"""
Steps 2 and 3: income source and tax relief selection.

The chosen tokens decide which detail steps follow.
"""

from models.form_data import INCOME_SELECTION_KEY, RELIEF_SELECTION_KEY
from services.wizard.step_registry import Category
from ui.wizards.framework.selection_step import SelectionStep


class IncomeSelectionStep(SelectionStep):
    CATEGORY = Category.INCOME
    SELECTION_KEY = INCOME_SELECTION_KEY
    DESCRIPTION = (
        "Select every source of income you received during the tax year. "
        "We will ask for details of each one."
    )


class TaxReliefSelectionStep(SelectionStep):
    CATEGORY = Category.RELIEF
    SELECTION_KEY = RELIEF_SELECTION_KEY
    DESCRIPTION = (
        "Select any tax reliefs or allowances you want to claim. "
        "You can leave this empty."
    )
