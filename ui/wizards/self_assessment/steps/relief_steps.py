# -*- coding: utf-8 -*-
"""
Tax relief detail steps.
"""

from app.config import Vocabularies
from ui.wizards.framework.form_step import FieldKind, FieldSpec, FormStep


class PensionStep(FormStep):
    DESCRIPTION = "Personal contributions to registered pension schemes, not employer contributions."

    FIELDS = (
        FieldSpec("pensionContributionAmount", "Total Personal Pension Contributions (£)",
                  FieldKind.AMOUNT, required=True),
        FieldSpec("pensionSchemeType", "Pension Scheme Type/Provider",
                  placeholder="e.g., SIPP, Personal Pension with Aviva"),
    )


class CharitableDonationsStep(FormStep):
    FIELDS = (
        FieldSpec("charityName", "Charity Name", required=True),
        FieldSpec("donationAmount", "Amount (£)", FieldKind.AMOUNT, required=True),
        FieldSpec("usedGiftAid", "I made these donations using Gift Aid", FieldKind.CHECKBOX),
    )


class InvestmentSchemeStep(FormStep):
    DESCRIPTION = "Investments made under a tax-advantaged scheme."

    FIELDS = (
        FieldSpec("schemeType", "Scheme", FieldKind.SELECT, required=True,
                  options=tuple(Vocabularies.INVESTMENT_SCHEMES)),
        FieldSpec("amountInvested", "Amount Invested (£)", FieldKind.AMOUNT, required=True),
        FieldSpec("investmentDate", "Date of Investment", FieldKind.DATE, required=True),
        FieldSpec("companyName", "Company Name"),
    )
