# -*- coding: utf-8 -*-
"""
Self-Assessment Wizard UI Components
"""

from .action_button import ActionButton
from .wizard_footer import WizardFooter
from .wizard_header import WizardHeader

__all__ = [
    "ActionButton",
    "WizardFooter",
    "WizardHeader",
]
