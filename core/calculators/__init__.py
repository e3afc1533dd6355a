# =============================================================================
# core/calculators/ - Financial Calculators
# =============================================================================
# Pure functions: a Pydantic input model goes in, a result model comes out.
# - cashflow.py: monthly cash flow projection
# - business.py: break-even, profit margin, pricing, startup costs, hiring
# - personal.py: emergency fund, ROI
# - loan.py: payment, APR, affordable amount, remaining balance
# - tax.py: 2024 federal tax tools
# - budget.py: monthly budget planner
#
# Invalid combinations raise InvalidCalculatorInputError (HTTP 400).
# =============================================================================

from .budget import plan_budget
from .business import (
    break_even,
    employee_vs_contractor,
    pricing,
    profit_margin,
    startup_costs,
)
from .cashflow import project_cash_flow
from .loan import calculate_loan
from .personal import emergency_fund, return_on_investment
from .tax import (
    deduction_finder,
    federal_tax,
    quarterly_tax,
    tax_refund,
    tax_savings,
    withholding,
)

__all__ = [
    "break_even",
    "calculate_loan",
    "deduction_finder",
    "emergency_fund",
    "employee_vs_contractor",
    "federal_tax",
    "plan_budget",
    "pricing",
    "profit_margin",
    "project_cash_flow",
    "quarterly_tax",
    "return_on_investment",
    "startup_costs",
    "tax_refund",
    "tax_savings",
    "withholding",
]
