# -*- coding: utf-8 -*-
"""
Answer snapshot model.

The snapshot is a free-form mapping of field name to value; any step may
read or write any key. FormSnapshot pairs it with the section-completion
map and owns the persisted (versioned) record layout.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Selection fields that drive which optional steps exist
INCOME_SELECTION_KEY = "selectedIncomeTypes"
RELIEF_SELECTION_KEY = "selectedTaxReliefs"
SELECTION_KEYS = (INCOME_SELECTION_KEY, RELIEF_SELECTION_KEY)

SCHEMA_VERSION = 2

INITIAL_FORM_DATA: Dict[str, Any] = {
    # Personal Information
    "fullName": "",
    "nationalInsuranceNumber": "",
    "utr": "",
    "dateOfBirth": "",
    "addressLine1": "",
    "city": "",
    "postcode": "",
    "contactNumber": "",
    "email": "",

    # Income flags
    "isEmployed": False,
    "isSelfEmployed": False,
    "isPartner": False,
    "hasUKPropertyIncome": False,
    "hasForeignIncome": False,
    "hasCapitalGains": False,
    "isNonResident": False,
    "isTrusteeOrPersonalRep": False,
    "hasOtherIncome": False,

    # Reliefs and allowances
    "hasPensionContributions": False,
    "hasCharitableDonations": False,
    "charityDonationDetails": "",
    "hasStudentLoan": False,
    "receivesChildBenefit": False,
    "transfersMarriageAllowance": False,

    # Multi-select flow
    INCOME_SELECTION_KEY: [],
    RELIEF_SELECTION_KEY: [],

    # Expenses and allowances with supporting documents
    "hasEmploymentExpenses": False,
    "employmentExpenses": {"details": "", "hasDocuments": False},
    "usePropertyAllowance": False,
    "propertyExpenses": {"details": "", "hasDocuments": False},
    "usedGiftAid": False,
    "charitableDonations": {"details": "", "hasDocuments": False},
}

# Completion flags present from the start; steps may add further keys
DEFAULT_SECTIONS_COMPLETED: Dict[str, bool] = {
    "personalInfo": False,
    "employment": False,
    "selfEmployment": False,
    "partnership": False,
    "ukProperty": False,
    "foreignIncome": False,
    "capitalGains": False,
    "residence": False,
    "trusts": False,
    "otherIncome": False,
    "taxReliefs": False,
    "studentLoan": False,
    "childBenefit": False,
    "marriageAllowance": False,
}


def default_form_data() -> Dict[str, Any]:
    """Fresh copy of the hard-coded answer defaults."""
    return copy.deepcopy(INITIAL_FORM_DATA)


def default_sections_completed() -> Dict[str, bool]:
    """Fresh copy of the hard-coded completion flags."""
    return dict(DEFAULT_SECTIONS_COMPLETED)


@dataclass
class FormSnapshot:
    """Answers plus section-completion flags."""

    form_data: Dict[str, Any] = field(default_factory=default_form_data)
    sections_completed: Dict[str, bool] = field(default_factory=default_sections_completed)

    @property
    def income_selections(self) -> List[str]:
        return list(self.form_data.get(INCOME_SELECTION_KEY) or [])

    @property
    def relief_selections(self) -> List[str]:
        return list(self.form_data.get(RELIEF_SELECTION_KEY) or [])

    def completed_count(self) -> int:
        """Number of sections flagged complete."""
        return sum(1 for done in self.sections_completed.values() if done)

    def copy(self) -> "FormSnapshot":
        return FormSnapshot(
            form_data=copy.deepcopy(self.form_data),
            sections_completed=dict(self.sections_completed),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted record layout."""
        return {
            "schema_version": SCHEMA_VERSION,
            "form_data": copy.deepcopy(self.form_data),
            "sections_completed": dict(self.sections_completed),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["FormSnapshot"]:
        """
        Restore from a persisted record.

        A record without "schema_version" is the legacy bare answer
        mapping. Returns None for a record written by a newer schema.
        """
        if not isinstance(data, dict):
            return None

        version = data.get("schema_version")
        if version is None:
            return cls(form_data=copy.deepcopy(data))
        if version != SCHEMA_VERSION:
            return None

        form_data = data.get("form_data")
        sections = data.get("sections_completed")
        if not isinstance(form_data, dict):
            return None

        snapshot = cls(form_data=copy.deepcopy(form_data))
        if isinstance(sections, dict):
            snapshot.sections_completed.update(
                {str(k): bool(v) for k, v in sections.items()}
            )
        return snapshot
