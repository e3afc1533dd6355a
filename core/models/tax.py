# =============================================================================
# core/models/tax.py - Tax Tool Schemas
# =============================================================================
# Request/response models for the federal tax tools (2024 tax year):
# - Federal tax estimate by filing status
# - Refund estimator
# - Quarterly estimated payments for the self-employed
# - Paycheck withholding
# - Itemized vs standard deduction finder
# - Self-employment tax savings from business deductions
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field

from .common import LenientFloat


class FilingStatus(str, Enum):
    SINGLE = "single"
    MARRIED = "married"
    HEAD = "head"


# =============================================================================
# Federal Tax Estimate
# =============================================================================

class FederalTaxInput(BaseModel):
    income: LenientFloat = 0.0
    filing_status: FilingStatus = FilingStatus.SINGLE
    state: str = ""


class FederalTaxResult(BaseModel):
    gross_income: float
    standard_deduction: float
    taxable_income: float
    estimated_tax: float
    effective_rate: float
    marginal_rate: float
    state: str


# =============================================================================
# Refund Estimator
# =============================================================================

class TaxRefundInput(BaseModel):
    income: LenientFloat = 0.0
    withheld: LenientFloat = 0.0
    credits: LenientFloat = 0.0
    state: str = ""


class TaxRefundResult(BaseModel):
    tax_liability: float
    withheld: float
    credits: float
    refund: float = Field(..., description="Negative when the filer owes")
    owes: bool
    state: str


# =============================================================================
# Quarterly Estimated Payments
# =============================================================================

class QuarterlyTaxInput(BaseModel):
    net_income: LenientFloat = 0.0
    state: str = ""


class QuarterlyTaxResult(BaseModel):
    net_income: float
    self_employment_tax: float
    income_tax: float
    total_tax: float
    quarterly_payment: float
    state: str


# =============================================================================
# Withholding
# =============================================================================

class WithholdingInput(BaseModel):
    income: LenientFloat = 0.0
    pay_periods: LenientFloat = Field(default=26.0, description="0 or blank means 26")
    allowances: LenientFloat = 0.0
    state: str = ""


class WithholdingResult(BaseModel):
    annual_tax: float
    per_paycheck: float
    monthly_withholding: float
    pay_periods: float
    allowances: float
    state: str


# =============================================================================
# Deduction Finder
# =============================================================================

class DeductionItem(BaseModel):
    """A deduction the filer believes applies to them."""
    category: str = ""
    name: str = Field(..., min_length=1)
    amount: LenientFloat = Field(default=0.0, description="0 or blank means 1000")


class DeductionFinderInput(BaseModel):
    items: list[DeductionItem] = Field(default_factory=list)
    filing_status: FilingStatus = FilingStatus.SINGLE
    state: str = ""


class DeductionFinderResult(BaseModel):
    total_itemized: float
    standard_deduction: float
    should_itemize: bool
    savings: float
    selected_count: int
    selected_items: list[str]
    state: str


# =============================================================================
# Self-Employment Tax Savings
# =============================================================================

class TaxSavingsInput(BaseModel):
    business_income: LenientFloat = 0.0
    business_expenses: LenientFloat = 0.0
    home_office: LenientFloat = 0.0
    vehicle_expenses: LenientFloat = 0.0
    equipment: LenientFloat = 0.0


class TaxSavingsResult(BaseModel):
    income: float
    total_deductions: float
    taxable_income: float
    federal_tax: float
    self_employment_tax: float
    total_tax: float
    tax_savings: float
    effective_tax_rate: float
