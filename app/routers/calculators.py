# =============================================================================
# app/routers/calculators.py - Calculator Endpoints
# =============================================================================
# One POST endpoint per calculator. Bodies are the raw form fields; numeric
# fields accept strings, and anything unparseable counts as 0.
#
# 400 INVALID_INPUT is returned when the inputs cannot produce a result
# (e.g. price below variable cost, revenue of 0).
# =============================================================================

import logging
from typing import Callable, TypeVar

from fastapi import APIRouter
from pydantic import BaseModel

from app.exceptions import InvalidCalculatorInputError
from core import calculators
from core.models.budget import BudgetInput, BudgetResult
from core.models.calculators import (
    BreakEvenInput,
    BreakEvenResult,
    CashFlowInput,
    CashFlowResult,
    EmergencyFundInput,
    EmergencyFundResult,
    EmployeeContractorInput,
    EmployeeContractorResult,
    PricingInput,
    ProductPricingResult,
    ProfitMarginInput,
    ProfitMarginResult,
    ROIInput,
    ROIResult,
    ServicePricingResult,
    StartupCostInput,
    StartupCostResult,
)
from core.models.loan import LoanInput, LoanResult
from core.models.tax import (
    DeductionFinderInput,
    DeductionFinderResult,
    FederalTaxInput,
    FederalTaxResult,
    QuarterlyTaxInput,
    QuarterlyTaxResult,
    TaxRefundInput,
    TaxRefundResult,
    TaxSavingsInput,
    TaxSavingsResult,
    WithholdingInput,
    WithholdingResult,
)

logger = logging.getLogger(__name__)

router = APIRouter()

InputT = TypeVar("InputT", bound=BaseModel)
ResultT = TypeVar("ResultT")


# =============================================================================
# Catalog
# =============================================================================

class CalculatorInfo(BaseModel):
    id: str
    title: str
    description: str
    category: str


CALCULATORS: list[CalculatorInfo] = [
    CalculatorInfo(id="cash-flow", title="Cash Flow Calculator", category="business",
                   description="Project monthly cash flow with revenue growth"),
    CalculatorInfo(id="break-even", title="Break-Even Calculator", category="business",
                   description="Units and revenue needed to cover fixed costs"),
    CalculatorInfo(id="profit-margin", title="Profit Margin Calculator", category="business",
                   description="Gross, operating and net margins"),
    CalculatorInfo(id="pricing", title="Pricing Calculator", category="business",
                   description="Service rates and product prices for a target margin"),
    CalculatorInfo(id="startup-cost", title="Startup Cost Calculator", category="business",
                   description="Total launch costs with a contingency buffer"),
    CalculatorInfo(id="employee-contractor", title="Employee vs Contractor", category="business",
                   description="Compare the full cost of hiring with contracting"),
    CalculatorInfo(id="emergency-fund", title="Emergency Fund Calculator", category="personal",
                   description="Size your safety net and time to reach it"),
    CalculatorInfo(id="roi", title="ROI Calculator", category="investing",
                   description="Return on investment after dividends, tax and inflation"),
    CalculatorInfo(id="loan", title="Loan Calculator", category="personal",
                   description="Payments, APR, affordable amount and remaining balance"),
    CalculatorInfo(id="budget", title="Budget Planner", category="personal",
                   description="Monthly budget summary with savings recommendations"),
    CalculatorInfo(id="federal-tax", title="Tax Calculator", category="tax",
                   description="Estimate your federal tax liability"),
    CalculatorInfo(id="tax-refund", title="Refund Estimator", category="tax",
                   description="See your potential federal refund"),
    CalculatorInfo(id="deductions", title="Deduction Finder", category="tax",
                   description="Itemize or take the standard deduction"),
    CalculatorInfo(id="quarterly-tax", title="Quarterly Payments", category="tax",
                   description="Calculate estimated federal tax payments"),
    CalculatorInfo(id="withholding", title="Withholding Calculator", category="tax",
                   description="Adjust federal paycheck withholdings"),
    CalculatorInfo(id="tax-savings", title="Small Business Tax Savings", category="tax",
                   description="Tax saved by business deductions"),
]


@router.get("", response_model=list[CalculatorInfo])
async def list_calculators():
    """List every available calculator."""
    return CALCULATORS


def _run(name: str, calculator: Callable[[InputT], ResultT], data: InputT) -> ResultT:
    """Run a calculator, turning float overflow from extreme inputs into a 400."""
    try:
        return calculator(data)
    except OverflowError as e:
        logger.info(f"{name} calculator overflowed: {e}")
        raise InvalidCalculatorInputError(name, "Inputs are too large to calculate") from e


# =============================================================================
# Business
# =============================================================================

@router.post("/cash-flow", response_model=CashFlowResult)
async def cash_flow(data: CashFlowInput):
    """
    Month-by-month cash flow projection.

    Revenue grows by growth_rate percent each month, expenses stay flat and
    cumulative cash carries forward from starting_cash.
    """
    return _run("cash-flow", calculators.project_cash_flow, data)


@router.post("/break-even", response_model=BreakEvenResult)
async def break_even(data: BreakEvenInput):
    return _run("break-even", calculators.break_even, data)


@router.post("/profit-margin", response_model=ProfitMarginResult)
async def profit_margin(data: ProfitMarginInput):
    return _run("profit-margin", calculators.profit_margin, data)


@router.post("/pricing", response_model=ServicePricingResult | ProductPricingResult)
async def pricing(data: PricingInput):
    """Service pricing (mode="service") or product pricing (mode="product")."""
    return _run("pricing", calculators.pricing, data)


@router.post("/startup-cost", response_model=StartupCostResult)
async def startup_cost(data: StartupCostInput):
    return _run("startup-cost", calculators.startup_costs, data)


@router.post("/employee-contractor", response_model=EmployeeContractorResult)
async def employee_contractor(data: EmployeeContractorInput):
    return _run("employee-contractor", calculators.employee_vs_contractor, data)


# =============================================================================
# Personal & Investing
# =============================================================================

@router.post("/emergency-fund", response_model=EmergencyFundResult)
async def emergency_fund(data: EmergencyFundInput):
    return _run("emergency-fund", calculators.emergency_fund, data)


@router.post("/roi", response_model=ROIResult)
async def roi(data: ROIInput):
    return _run("roi", calculators.return_on_investment, data)


@router.post("/loan", response_model=LoanResult)
async def loan(data: LoanInput):
    """Loan payment, APR, affordable amount or remaining balance, by calculation_type."""
    return _run("loan", calculators.calculate_loan, data)


@router.post("/budget", response_model=BudgetResult)
async def budget(data: BudgetInput):
    return _run("budget", calculators.plan_budget, data)


# =============================================================================
# Tax
# =============================================================================

@router.post("/federal-tax", response_model=FederalTaxResult)
async def federal_tax(data: FederalTaxInput):
    return _run("federal-tax", calculators.federal_tax, data)


@router.post("/tax-refund", response_model=TaxRefundResult)
async def tax_refund(data: TaxRefundInput):
    return _run("tax-refund", calculators.tax_refund, data)


@router.post("/quarterly-tax", response_model=QuarterlyTaxResult)
async def quarterly_tax(data: QuarterlyTaxInput):
    return _run("quarterly-tax", calculators.quarterly_tax, data)


@router.post("/withholding", response_model=WithholdingResult)
async def withholding(data: WithholdingInput):
    return _run("withholding", calculators.withholding, data)


@router.post("/deductions", response_model=DeductionFinderResult)
async def deductions(data: DeductionFinderInput):
    return _run("deductions", calculators.deduction_finder, data)


@router.post("/tax-savings", response_model=TaxSavingsResult)
async def tax_savings(data: TaxSavingsInput):
    return _run("tax-savings", calculators.tax_savings, data)
