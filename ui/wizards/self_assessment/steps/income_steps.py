# -*- coding: utf-8 -*-
"""
Income detail steps.

One step per income token; each appears only when its token is
selected, in the canonical income order.
"""

from app.config import Vocabularies
from ui.wizards.framework.form_step import FieldKind, FieldSpec, FormStep


class EmploymentStep(FormStep):
    """P60 figures for the main employment."""

    DESCRIPTION = "Use the figures from your P60 and, if you had one, your P11D."

    FIELDS = (
        FieldSpec("isEmployed", "I was employed during the tax year", FieldKind.CHECKBOX),
        FieldSpec("employerName", "Employer Name", required_when="isEmployed"),
        FieldSpec("employerPayeReference", "Employer PAYE Reference",
                  required_when="isEmployed", placeholder="e.g., 123/AB456"),
        FieldSpec("totalPayFromP60", "Total Pay from P60 (£)", FieldKind.AMOUNT, required_when="isEmployed"),
        FieldSpec("taxDeducted", "Tax Deducted (£)", FieldKind.AMOUNT, required_when="isEmployed"),
        FieldSpec("benefitsFromP11D", "Benefits from P11D (£)", FieldKind.AMOUNT),
    )


class SelfEmploymentStep(FormStep):
    DESCRIPTION = "Details of your business for the tax year."

    FIELDS = (
        FieldSpec("businessName", "Business Name", required=True),
        FieldSpec("businessStartDate", "Business Start Date", FieldKind.DATE),
        FieldSpec("accountingMethod", "Accounting Method", FieldKind.SELECT, required=True,
                  options=tuple(Vocabularies.ACCOUNTING_METHODS)),
        FieldSpec("turnover", "Turnover (£)", FieldKind.AMOUNT, required=True),
        FieldSpec("allowableBusinessExpenses", "Allowable Expenses (£)", FieldKind.AMOUNT),
    )


class PropertyStep(FormStep):
    DESCRIPTION = "Rental income from UK property."

    FIELDS = (
        FieldSpec("numberOfProperties", "Number of Properties", required=True),
        FieldSpec("propertyAddress", "Property Address", FieldKind.TEXTAREA, required=True),
        FieldSpec("rentalIncomeReceived", "Rental Income Received (£)", FieldKind.AMOUNT, required=True),
        FieldSpec("propertyAllowableExpenses", "Allowable Expenses (£)", FieldKind.AMOUNT),
        FieldSpec("usePropertyAllowance", "Use the £1,000 property allowance", FieldKind.CHECKBOX),
    )


class PartnershipStep(FormStep):
    FIELDS = (
        FieldSpec("partnershipName", "Partnership Name", required=True),
        FieldSpec("partnershipUTR", "Partnership UTR", required=True, placeholder="10 digits"),
        FieldSpec("partnershipAddress", "Partnership Address", FieldKind.TEXTAREA, required=True),
        FieldSpec("shareOfProfitOrLoss", "Your Share of Profit or Loss (£)", required=True,
                  placeholder="Use a minus sign for a loss"),
    )


class ForeignIncomeStep(FormStep):
    DESCRIPTION = "Income arising outside the UK, before any foreign tax."

    FIELDS = (
        FieldSpec("typeOfIncome", "Type of Income", FieldKind.SELECT, required=True,
                  options=tuple(Vocabularies.FOREIGN_INCOME_TYPES)),
        FieldSpec("countryOfOrigin", "Country", required=True),
        FieldSpec("amountBeforeForeignTax", "Amount Before Foreign Tax (£)", FieldKind.AMOUNT, required=True),
        FieldSpec("foreignTaxPaid", "Foreign Tax Paid (£)", FieldKind.AMOUNT),
        FieldSpec("exchangeRateUsed", "Exchange Rate Used", placeholder="e.g., 1.17"),
    )


class CapitalGainsStep(FormStep):
    DESCRIPTION = "One disposal of an asset during the tax year."

    FIELDS = (
        FieldSpec("assetDescription", "Asset Description", required=True),
        FieldSpec("assetType", "Asset Type", FieldKind.SELECT, required=True,
                  options=tuple(Vocabularies.ASSET_TYPES)),
        FieldSpec("acquisitionDate", "Acquisition Date", FieldKind.DATE, required=True),
        FieldSpec("dateOfDisposal", "Disposal Date", FieldKind.DATE, required=True),
        FieldSpec("proceedsFromDisposal", "Disposal Proceeds (£)", FieldKind.AMOUNT, required=True),
        FieldSpec("costOrValueWhenAcquired", "Cost When Acquired (£)", FieldKind.AMOUNT, required=True),
        FieldSpec("reliefsClaimed", "Reliefs Claimed (£)", FieldKind.AMOUNT),
    )


class OtherIncomeStep(FormStep):
    FIELDS = (
        FieldSpec("otherIncomeType", "Type of Income", FieldKind.SELECT, required=True,
                  options=tuple(Vocabularies.OTHER_INCOME_TYPES)),
        FieldSpec("otherIncomeAmount", "Amount (£)", FieldKind.AMOUNT, required=True),
        FieldSpec("otherIncomeTaxDeducted", "Tax Already Deducted (£)", FieldKind.AMOUNT),
    )
