# -*- coding: utf-8 -*-
"""
Step validation service for the self-assessment wizard.

Validates a step's answers without UI coupling, so the same rules back
the widgets and the tests.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from services.validation import ValidationFactory, validation_factory
from services.wizard.step_registry import StepDefinition


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    field_errors: Dict[str, str] = field(default_factory=dict)

    def add_error(self, message: str, field_name: Optional[str] = None):
        """Add an error message, optionally tied to a field."""
        self.errors.append(message)
        if field_name and field_name not in self.field_errors:
            self.field_errors[field_name] = message
        self.is_valid = False


class StepValidator:
    """Validates wizard step data against its section's rule set."""

    def __init__(self, factory: Optional[ValidationFactory] = None):
        self.factory = factory or validation_factory

    def validate_section(self, section_id: Optional[str], record: Dict[str, Any]) -> StepValidationResult:
        """
        Validate a record against a section's rules.

        Args:
            section_id: Validator key; None means no constraints
            record: Answers to check

        Returns:
            StepValidationResult with per-field messages
        """
        result = StepValidationResult(is_valid=True, errors=[])
        if not section_id:
            return result

        for field_name, message in self.factory.field_errors(record, section_id).items():
            result.add_error(message, field_name)
        return result

    def validate_step(self, step: StepDefinition, record: Dict[str, Any]) -> StepValidationResult:
        """Validate a step's answers using the step's own section id."""
        return self.validate_section(step.section_id, record)
