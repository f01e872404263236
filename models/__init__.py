# -*- coding: utf-8 -*-
"""
Self-Assessment Wizard Data Models
"""

from .form_data import (
    FormSnapshot,
    INCOME_SELECTION_KEY,
    RELIEF_SELECTION_KEY,
    SELECTION_KEYS,
    default_form_data,
    default_sections_completed,
)

__all__ = [
    "FormSnapshot",
    "INCOME_SELECTION_KEY",
    "RELIEF_SELECTION_KEY",
    "SELECTION_KEYS",
    "default_form_data",
    "default_sections_completed",
]
