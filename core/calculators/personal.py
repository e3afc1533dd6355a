# =============================================================================
# core/calculators/personal.py - Personal Finance Calculators
# =============================================================================
# - emergency_fund: target size, progress and time to reach it
# - return_on_investment: simple/annualized ROI with dividends, tax, inflation
# =============================================================================

import math

from app.exceptions import InvalidCalculatorInputError
from core.models.calculators import (
    EmergencyFundInput,
    EmergencyFundResult,
    EmergencyTargetType,
    ROICalculationType,
    ROIInput,
    ROIResult,
)
from lib.utils import safe_divide


def months_to_goal(still_needed: float, monthly_contribution: float, annual_rate: float) -> float:
    """
    Months of contributions needed to save `still_needed`.

    With interest this solves the future value of an annuity for n:
        n = ln(1 + FV * r / PMT) / ln(1 + r)
    where r is the monthly rate. Without interest it is FV / PMT.
    Returns 0 when nothing is needed or nothing is contributed.
    """
    if monthly_contribution <= 0 or still_needed <= 0:
        return 0.0

    monthly_rate = annual_rate / 100 / 12
    if monthly_rate > 0:
        return math.log(1 + still_needed * monthly_rate / monthly_contribution) / math.log(1 + monthly_rate)
    return still_needed / monthly_contribution


def emergency_fund(data: EmergencyFundInput) -> EmergencyFundResult:
    """
    Size an emergency fund and estimate how long it takes to fill.

    target_value is a number of months of expenses when target_type is
    "months", otherwise a dollar amount.
    """
    expenses = data.monthly_expenses
    savings = data.current_savings
    rate = data.interest_rate

    if data.target_type == EmergencyTargetType.MONTHS:
        target_amount = expenses * data.target_value
        target_months = data.target_value
    else:
        target_amount = data.target_value
        target_months = safe_divide(target_amount, expenses)

    still_needed = max(0.0, target_amount - savings)
    percent_complete = safe_divide(savings, target_amount) * 100 if savings > 0 else 0.0
    time_to_goal = months_to_goal(still_needed, data.monthly_contribution, rate)

    return EmergencyFundResult(
        target_amount=target_amount,
        still_needed=still_needed,
        percent_complete=min(100.0, percent_complete),
        months_of_expenses_covered=safe_divide(savings, expenses) if savings > 0 else 0.0,
        time_to_goal=math.ceil(time_to_goal),
        monthly_contribution=data.monthly_contribution,
        projected_interest=still_needed * (rate / 100) * (time_to_goal / 12),
        target_months=target_months,
    )


def return_on_investment(data: ROIInput) -> ROIResult:
    """
    ROI with dividend income, a flat tax on gains and dividends, and an
    inflation-adjusted real return.

    Raises:
        InvalidCalculatorInputError: If the initial investment is not positive
    """
    initial = data.initial_investment
    final = data.final_value
    years = data.time_horizon or 1.0

    if initial <= 0:
        raise InvalidCalculatorInputError("roi", "Initial investment must be greater than 0")

    total_return = final - initial
    roi_percentage = total_return / initial * 100

    if data.calculation_type == ROICalculationType.ANNUALIZED and years > 0 and final >= 0:
        annualized_roi = ((final / initial) ** (1 / years) - 1) * 100
    else:
        annualized_roi = roi_percentage / years

    total_dividend_income = initial * (data.dividend_yield / 100) * years

    tax_rate = data.tax_rate / 100
    capital_gains_tax = total_return * tax_rate if total_return > 0 else 0.0
    dividend_tax = total_dividend_income * tax_rate
    after_tax_return = total_return + total_dividend_income - capital_gains_tax - dividend_tax

    real_roi = annualized_roi - data.inflation_rate
    growth = 1 + real_roi / 100
    real_value = initial * growth ** years if growth > 0 else 0.0

    return ROIResult(
        total_return=total_return,
        roi_percentage=roi_percentage,
        annualized_roi=annualized_roi,
        initial=initial,
        final=final,
        time=years,
        dividend_income=total_dividend_income,
        after_tax_return=after_tax_return,
        real_roi=real_roi,
        real_value=real_value,
        total_taxes=capital_gains_tax + dividend_tax,
    )
