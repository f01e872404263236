# -*- coding: utf-8 -*-
"""
Self-Assessment Wizard Package.

This package contains:
- SelfAssessmentWizard: Main wizard class
- Steps: Individual wizard steps (personal info, selections, details, summary)
"""

from .self_assessment_wizard import SelfAssessmentWizard

__all__ = [
    'SelfAssessmentWizard'
]
