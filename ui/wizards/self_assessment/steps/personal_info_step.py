# -*- coding: utf-8 -*-
"""
Step 1: Personal Information.
"""

from ui.wizards.framework.form_step import FieldKind, FieldSpec, FormStep


class PersonalInfoStep(FormStep):
    """Taxpayer identity, address and contact details."""

    DESCRIPTION = (
        "Tell us who you are. Your National Insurance number and UTR are "
        "optional here but needed before you can submit."
    )

    FIELDS = (
        FieldSpec("fullName", "Full Name", required=True),
        FieldSpec("dateOfBirth", "Date of Birth", FieldKind.DATE, required=True),
        FieldSpec("nationalInsuranceNumber", "National Insurance Number",
                  placeholder="e.g., AB123456C"),
        FieldSpec("utr", "Unique Taxpayer Reference (UTR)",
                  placeholder="10 digits", tooltip="Found on letters from HMRC"),
        FieldSpec("addressLine1", "Address Line 1", required=True),
        FieldSpec("addressLine2", "Address Line 2"),
        FieldSpec("city", "City", required=True),
        FieldSpec("postcode", "Postcode", required=True),
        FieldSpec("contactNumber", "Contact Number", required=True),
        FieldSpec("email", "Email Address", required=True),
    )
