# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - field rules for wizard sections.

A section's answers are validated by a FieldRuleSet: an ordered list of
single-field rules. Each rule reports at most one message for its field;
the rule set keeps the first message per field so the step can show it
next to the input.
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Pattern, Union

# Shared patterns
AMOUNT_PATTERN = r"^[0-9]+(\.[0-9]{1,2})?$"
UTR_PATTERN = r"^[0-9]{10}$"
NI_NUMBER_PATTERN = r"^[A-CEGHJ-PR-TW-Z][A-CEGHJ-NPR-TW-Z][0-9]{6}[A-D\s]$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
WHOLE_NUMBER_PATTERN = r"^[0-9]+$"


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy implements specific validation rules for a section.
    """

    @abstractmethod
    def validate(self, record: Dict[str, Any]) -> List[str]:
        """
        Validate a record and return list of error messages.

        Args:
            record: Dictionary containing section data to validate

        Returns:
            List of error messages (empty list if valid)
        """
        pass

    def is_valid(self, record: Dict[str, Any]) -> bool:
        """Check if record is valid."""
        return len(self.validate(record)) == 0


class FieldRule(ABC):
    """Check applied to one field of a record."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message

    @abstractmethod
    def check(self, record: Dict[str, Any]) -> Optional[str]:
        """Return the error message, or None when the field passes."""
        pass


class RequiredRule(FieldRule):
    """Field must be present and not blank."""

    def check(self, record):
        if is_blank(record.get(self.field)):
            return self.message
        return None


class RequiredWhenRule(FieldRule):
    """Field is required only while a flag field is truthy."""

    def __init__(self, field: str, flag_field: str, message: str):
        super().__init__(field, message)
        self.flag_field = flag_field

    def check(self, record):
        if record.get(self.flag_field) and is_blank(record.get(self.field)):
            return self.message
        return None


class PatternRule(FieldRule):
    """Non-blank value must match a regular expression."""

    def __init__(self, field: str, pattern: Union[str, Pattern], message: str):
        super().__init__(field, message)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def check(self, record):
        value = record.get(self.field)
        if is_blank(value):
            return None
        if not self.pattern.match(str(value).strip()):
            return self.message
        return None


class AmountRule(PatternRule):
    """Money amount with at most two decimals."""

    def __init__(self, field: str, message: str = "Enter a valid amount"):
        super().__init__(field, AMOUNT_PATTERN, message)


class EmailRule(PatternRule):
    def __init__(self, field: str, message: str = "Invalid email address"):
        super().__init__(field, EMAIL_PATTERN, message)


class DateRule(FieldRule):
    """Non-blank value must parse as an ISO date (YYYY-MM-DD)."""

    def __init__(self, field: str, message: str = "Invalid date format", date_format: str = "%Y-%m-%d"):
        super().__init__(field, message)
        self.date_format = date_format

    def check(self, record):
        value = record.get(self.field)
        if is_blank(value):
            return None
        try:
            datetime.strptime(str(value).strip(), self.date_format)
        except ValueError:
            return self.message
        return None


class FieldRuleSet(ValidationStrategy):
    """
    Ordered collection of field rules for one section.

    Rules for the same field run in order; the first failure wins.
    """

    def __init__(self, rules: Optional[List[FieldRule]] = None):
        self.rules: List[FieldRule] = list(rules or [])

    def field_errors(self, record: Dict[str, Any]) -> Dict[str, str]:
        """First error message per failing field, in rule order."""
        errors: Dict[str, str] = {}
        for rule in self.rules:
            if rule.field in errors:
                continue
            message = rule.check(record)
            if message:
                errors[rule.field] = message
        return errors

    def validate(self, record: Dict[str, Any]) -> List[str]:
        return list(self.field_errors(record).values())
