# =============================================================================
# core/calculators/tax.py - Federal Tax Tools (2024 tax year)
# =============================================================================
# Estimates only: federal income tax from the 2024 brackets and standard
# deduction, self-employment tax, refunds, quarterly payments, withholding
# and the itemize-or-not decision. State taxes are not modeled; the state
# field is echoed back for display.
# =============================================================================

from core.models.tax import (
    DeductionFinderInput,
    DeductionFinderResult,
    FederalTaxInput,
    FederalTaxResult,
    FilingStatus,
    QuarterlyTaxInput,
    QuarterlyTaxResult,
    TaxRefundInput,
    TaxRefundResult,
    TaxSavingsInput,
    TaxSavingsResult,
    WithholdingInput,
    WithholdingResult,
)
from lib.utils import safe_divide

# Upper bound of each bracket and its rate; the last bracket is unbounded
TAX_BRACKETS_2024: dict[FilingStatus, list[tuple[float, float]]] = {
    FilingStatus.SINGLE: [
        (11600, 0.10),
        (47150, 0.12),
        (100525, 0.22),
        (191950, 0.24),
        (243725, 0.32),
        (609350, 0.35),
        (float("inf"), 0.37),
    ],
    FilingStatus.MARRIED: [
        (23200, 0.10),
        (94300, 0.12),
        (201050, 0.22),
        (383900, 0.24),
        (487450, 0.32),
        (731200, 0.35),
        (float("inf"), 0.37),
    ],
    FilingStatus.HEAD: [
        (16550, 0.10),
        (63100, 0.12),
        (100500, 0.22),
        (191950, 0.24),
        (243700, 0.32),
        (609350, 0.35),
        (float("inf"), 0.37),
    ],
}

STANDARD_DEDUCTION_2024: dict[FilingStatus, float] = {
    FilingStatus.SINGLE: 14600,
    FilingStatus.MARRIED: 29200,
    FilingStatus.HEAD: 21900,
}

# Self-employment tax: 15.3% on 92.35% of net earnings, half deductible
SE_EARNINGS_FACTOR = 0.9235
SE_TAX_RATE = 0.153

# Flat SE rate used by the quick deduction-savings estimate
SIMPLIFIED_SE_RATE = 0.1413

WITHHOLDING_ALLOWANCE_VALUE = 5150
WITHHOLDING_ALLOWANCE_RATE = 0.12

DEFAULT_DEDUCTION_AMOUNT = 1000.0
DEFAULT_PAY_PERIODS = 26.0


# =============================================================================
# Bracket Math
# =============================================================================

def bracket_tax(taxable_income: float, filing_status: FilingStatus = FilingStatus.SINGLE) -> tuple[float, float]:
    """
    Progressive federal income tax on taxable income.

    Args:
        taxable_income: Income after deductions (negative is treated as 0)
        filing_status: Which bracket table to use

    Returns:
        (tax, marginal_rate_percent)

    Example:
        bracket_tax(50000)  # (6053.0, 22.0)
    """
    brackets = TAX_BRACKETS_2024[filing_status]
    tax = 0.0
    lower = 0.0
    marginal_rate = brackets[0][1] * 100

    for upper, rate in brackets:
        if taxable_income <= lower:
            break
        tax += (min(taxable_income, upper) - lower) * rate
        marginal_rate = rate * 100
        lower = upper

    return tax, marginal_rate


def taxable_after_standard_deduction(income: float, filing_status: FilingStatus) -> tuple[float, float]:
    """Return (standard_deduction, taxable_income), never negative."""
    deduction = STANDARD_DEDUCTION_2024[filing_status]
    return deduction, max(0.0, income - deduction)


# =============================================================================
# Calculators
# =============================================================================

def federal_tax(data: FederalTaxInput) -> FederalTaxResult:
    deduction, taxable = taxable_after_standard_deduction(data.income, data.filing_status)
    tax, marginal_rate = bracket_tax(taxable, data.filing_status)

    return FederalTaxResult(
        gross_income=data.income,
        standard_deduction=deduction,
        taxable_income=taxable,
        estimated_tax=tax,
        effective_rate=safe_divide(tax, data.income) * 100 if data.income > 0 else 0.0,
        marginal_rate=marginal_rate,
        state=data.state,
    )


def tax_refund(data: TaxRefundInput) -> TaxRefundResult:
    """Refund (or balance due) for a single filer taking the standard deduction."""
    _, taxable = taxable_after_standard_deduction(data.income, FilingStatus.SINGLE)
    tax, _ = bracket_tax(taxable)

    liability = max(0.0, tax - data.credits)
    refund = data.withheld - liability

    return TaxRefundResult(
        tax_liability=liability,
        withheld=data.withheld,
        credits=data.credits,
        refund=refund,
        owes=refund < 0,
        state=data.state,
    )


def self_employment_tax(net_income: float) -> float:
    return max(0.0, net_income) * SE_EARNINGS_FACTOR * SE_TAX_RATE


def quarterly_tax(data: QuarterlyTaxInput) -> QuarterlyTaxResult:
    """
    Estimated quarterly payments for a single self-employed filer.

    Half of the self-employment tax is deducted before income tax.
    """
    se_tax = self_employment_tax(data.net_income)
    adjusted_income = data.net_income - se_tax / 2
    _, taxable = taxable_after_standard_deduction(adjusted_income, FilingStatus.SINGLE)
    income_tax, _ = bracket_tax(taxable)

    total = income_tax + se_tax

    return QuarterlyTaxResult(
        net_income=data.net_income,
        self_employment_tax=se_tax,
        income_tax=income_tax,
        total_tax=total,
        quarterly_payment=total / 4,
        state=data.state,
    )


def withholding(data: WithholdingInput) -> WithholdingResult:
    """Federal withholding per paycheck; each allowance lowers annual tax."""
    pay_periods = data.pay_periods if data.pay_periods > 0 else DEFAULT_PAY_PERIODS

    _, taxable = taxable_after_standard_deduction(data.income, FilingStatus.SINGLE)
    annual_tax, _ = bracket_tax(taxable)
    allowance_credit = data.allowances * WITHHOLDING_ALLOWANCE_VALUE * WITHHOLDING_ALLOWANCE_RATE
    adjusted = max(0.0, annual_tax - allowance_credit)

    return WithholdingResult(
        annual_tax=adjusted,
        per_paycheck=adjusted / pay_periods,
        monthly_withholding=adjusted / 12,
        pay_periods=pay_periods,
        allowances=data.allowances,
        state=data.state,
    )


def deduction_finder(data: DeductionFinderInput) -> DeductionFinderResult:
    """Compare selected itemized deductions with the standard deduction."""
    total = sum(item.amount or DEFAULT_DEDUCTION_AMOUNT for item in data.items)
    standard = STANDARD_DEDUCTION_2024[data.filing_status]
    should_itemize = total > standard

    return DeductionFinderResult(
        total_itemized=total,
        standard_deduction=standard,
        should_itemize=should_itemize,
        savings=total - standard if should_itemize else 0.0,
        selected_count=len(data.items),
        selected_items=[item.name for item in data.items],
        state=data.state,
    )


def _simplified_federal_rate(income: float) -> float:
    if income > 100000:
        return 0.24
    if income > 50000:
        return 0.22
    return 0.12


def tax_savings(data: TaxSavingsInput) -> TaxSavingsResult:
    """
    Quick estimate of how much business deductions save a sole proprietor.

    Uses one flat federal rate picked from gross income and a flat 14.13%
    self-employment rate, so the savings are the deductions times that rate.
    """
    income = data.business_income
    total_deductions = (
        data.business_expenses + data.home_office + data.vehicle_expenses + data.equipment
    )
    taxable = max(0.0, income - total_deductions)

    se_tax = income * SIMPLIFIED_SE_RATE
    rate = _simplified_federal_rate(income)
    fed_tax = taxable * rate

    total_without_deductions = income * rate + se_tax
    total_with_deductions = fed_tax + se_tax

    return TaxSavingsResult(
        income=income,
        total_deductions=total_deductions,
        taxable_income=taxable,
        federal_tax=fed_tax,
        self_employment_tax=se_tax,
        total_tax=total_with_deductions,
        tax_savings=total_without_deductions - total_with_deductions,
        effective_tax_rate=safe_divide(total_with_deductions, income) * 100,
    )
