# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy,
    FieldRule,
    FieldRuleSet,
    RequiredRule,
    RequiredWhenRule,
    PatternRule,
    AmountRule,
    EmailRule,
    DateRule,
)
from .validation_factory import SUMMARY_VALIDATOR, ValidationFactory, validation_factory

__all__ = [
    'ValidationStrategy',
    'FieldRule',
    'FieldRuleSet',
    'RequiredRule',
    'RequiredWhenRule',
    'PatternRule',
    'AmountRule',
    'EmailRule',
    'DateRule',
    'SUMMARY_VALIDATOR',
    'ValidationFactory',
    'validation_factory',
]
