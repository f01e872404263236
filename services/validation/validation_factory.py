# -*- coding: utf-8 -*-
"""
Validation Factory - field rule sets for each wizard section.

Provides a central point for creating and looking up the validator of a
section id (the same id the section marks complete in the store).
"""

from typing import Dict, List, Optional

from .validation_strategy import (
    UTR_PATTERN,
    NI_NUMBER_PATTERN,
    WHOLE_NUMBER_PATTERN,
    AmountRule,
    DateRule,
    EmailRule,
    FieldRuleSet,
    PatternRule,
    RequiredRule,
    RequiredWhenRule,
    ValidationStrategy,
)

SIGNED_AMOUNT_PATTERN = r"^-?[0-9]+(\.[0-9]{1,2})?$"
RATE_PATTERN = r"^[0-9]+(\.[0-9]+)?$"

# Review screen id (the summary does not set a completion flag)
SUMMARY_VALIDATOR = "summary"


def _personal_info() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("fullName", "Full name is required"),
        PatternRule("nationalInsuranceNumber", NI_NUMBER_PATTERN,
                    "Invalid National Insurance number format"),
        PatternRule("utr", UTR_PATTERN, "UTR must be 10 digits"),
        RequiredRule("dateOfBirth", "Date of birth is required"),
        DateRule("dateOfBirth"),
        RequiredRule("addressLine1", "Address Line 1 is required"),
        RequiredRule("city", "City is required"),
        RequiredRule("postcode", "Postcode is required"),
        RequiredRule("contactNumber", "Contact number is required"),
        RequiredRule("email", "Invalid email address"),
        EmailRule("email"),
    ])


def _employment() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredWhenRule("employerName", "isEmployed", "Employer name is required"),
        RequiredWhenRule("employerPayeReference", "isEmployed", "PAYE reference is required"),
        RequiredWhenRule("totalPayFromP60", "isEmployed", "Total pay is required"),
        AmountRule("totalPayFromP60"),
        RequiredWhenRule("taxDeducted", "isEmployed", "Tax deducted is required"),
        AmountRule("taxDeducted"),
        AmountRule("benefitsFromP11D"),
    ])


def _self_employment() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("businessName", "Business name is required"),
        DateRule("businessStartDate"),
        RequiredRule("accountingMethod", "Accounting method is required"),
        RequiredRule("turnover", "Turnover is required"),
        AmountRule("turnover"),
        AmountRule("allowableBusinessExpenses"),
    ])


def _property() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("numberOfProperties", "Number of properties is required"),
        PatternRule("numberOfProperties", WHOLE_NUMBER_PATTERN, "Enter a valid number"),
        RequiredRule("propertyAddress", "Property address is required"),
        RequiredRule("rentalIncomeReceived", "Rental income is required"),
        AmountRule("rentalIncomeReceived"),
        AmountRule("propertyAllowableExpenses"),
    ])


def _partnership() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("partnershipName", "Partnership name is required"),
        RequiredRule("partnershipUTR", "Partnership UTR is required"),
        PatternRule("partnershipUTR", UTR_PATTERN, "UTR must be 10 digits"),
        RequiredRule("partnershipAddress", "Partnership address is required"),
        RequiredRule("shareOfProfitOrLoss", "Share of profit/loss is required"),
        PatternRule("shareOfProfitOrLoss", SIGNED_AMOUNT_PATTERN, "Enter a valid amount"),
    ])


def _foreign_income() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("typeOfIncome", "Type of income is required"),
        RequiredRule("countryOfOrigin", "Country is required"),
        RequiredRule("amountBeforeForeignTax", "Amount is required"),
        AmountRule("amountBeforeForeignTax"),
        AmountRule("foreignTaxPaid"),
        PatternRule("exchangeRateUsed", RATE_PATTERN, "Enter a valid exchange rate"),
    ])


def _capital_gains() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("assetDescription", "Asset description is required"),
        RequiredRule("assetType", "Asset type is required"),
        RequiredRule("acquisitionDate", "Acquisition date is required"),
        DateRule("acquisitionDate"),
        RequiredRule("dateOfDisposal", "Disposal date is required"),
        DateRule("dateOfDisposal"),
        RequiredRule("proceedsFromDisposal", "Proceeds amount is required"),
        AmountRule("proceedsFromDisposal"),
        RequiredRule("costOrValueWhenAcquired", "Acquisition cost is required"),
        AmountRule("costOrValueWhenAcquired"),
        AmountRule("reliefsClaimed"),
    ])


def _other_income() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("otherIncomeType", "Type of income is required"),
        RequiredRule("otherIncomeAmount", "Amount is required"),
        AmountRule("otherIncomeAmount"),
        AmountRule("otherIncomeTaxDeducted"),
    ])


def _pension() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("pensionContributionAmount", "Contribution amount is required"),
        AmountRule("pensionContributionAmount"),
    ])


def _charity() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("charityName", "Charity name is required"),
        RequiredRule("donationAmount", "Amount is required"),
        AmountRule("donationAmount"),
    ])


def _investment_schemes() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("schemeType", "Please select the scheme type"),
        RequiredRule("amountInvested", "Amount invested is required"),
        AmountRule("amountInvested"),
        RequiredRule("investmentDate", "Date of investment is required"),
        DateRule("investmentDate"),
    ])


def _summary() -> FieldRuleSet:
    return FieldRuleSet([
        RequiredRule("fullName", "Personal information is incomplete: full name"),
        RequiredRule("nationalInsuranceNumber",
                     "Personal information is incomplete: National Insurance number"),
        RequiredRule("utr", "Personal information is incomplete: UTR"),
        RequiredRule("selectedIncomeTypes", "Select at least one income source"),
    ])


class ValidationFactory:
    """
    Registry of validation strategies keyed by section id.
    """

    def __init__(self):
        """Initialize the validation factory."""
        self._validators: Dict[str, ValidationStrategy] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        """Register the built-in section validators."""
        self.register_validator("personalInfo", _personal_info())
        self.register_validator("employment", _employment())
        self.register_validator("selfEmployment", _self_employment())
        self.register_validator("ukProperty", _property())
        self.register_validator("partnership", _partnership())
        self.register_validator("foreignIncome", _foreign_income())
        self.register_validator("capitalGains", _capital_gains())
        self.register_validator("otherIncome", _other_income())
        self.register_validator("pension", _pension())
        self.register_validator("charity", _charity())
        self.register_validator("investmentSchemes", _investment_schemes())
        self.register_validator(SUMMARY_VALIDATOR, _summary())

    def register_validator(self, section_id: str, validator: ValidationStrategy):
        """
        Register a validation strategy for a section.

        Args:
            section_id: Section identifier (e.g., 'personalInfo', 'pension')
            validator: ValidationStrategy instance
        """
        self._validators[section_id] = validator

    def get_validator(self, section_id: str) -> Optional[ValidationStrategy]:
        """Registered validator for a section, or None."""
        return self._validators.get(section_id)

    def validate(self, record: Dict, section_id: str) -> List[str]:
        """
        Validate section data.

        Sections without a registered validator have no constraints.
        """
        validator = self.get_validator(section_id)
        if not validator:
            return []
        return validator.validate(record)

    def field_errors(self, record: Dict, section_id: str) -> Dict[str, str]:
        """First error per field for a section, empty when valid."""
        validator = self.get_validator(section_id)
        if isinstance(validator, FieldRuleSet):
            return validator.field_errors(record)
        if validator:
            # Strategies without per-field reporting: messages are form-level
            return {f"__form_{i}": message for i, message in enumerate(validator.validate(record))}
        return {}

    def is_valid(self, record: Dict, section_id: str) -> bool:
        return len(self.validate(record, section_id)) == 0

    def get_registered_sections(self) -> List[str]:
        return list(self._validators.keys())


# Shared factory instance (validators are stateless)
validation_factory = ValidationFactory()
