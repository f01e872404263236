# -*- coding: utf-8 -*-
"""
Wizard Framework - multi-step wizard shell for the questionnaire.

Provides base classes for steps (validating, non-validating, form and
selection steps), the navigator that owns the position over the active
step list, and the wizard shell that mounts one step at a time.
"""

from .base_wizard import BaseWizard
from .base_step import BaseStep, NoValidationStep
from .form_step import FieldKind, FieldSpec, FormStep
from .selection_step import SelectionStep
from .step_navigator import StepNavigator

__all__ = [
    'BaseWizard',
    'BaseStep',
    'NoValidationStep',
    'FieldKind',
    'FieldSpec',
    'FormStep',
    'SelectionStep',
    'StepNavigator'
]
