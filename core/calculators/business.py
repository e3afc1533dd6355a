# =============================================================================
# core/calculators/business.py - Small Business Calculators
# =============================================================================
# Closed-form calculators for business owners:
# - break_even: units and revenue needed to cover fixed costs
# - profit_margin: gross, operating and net margins
# - service_pricing / product_pricing: rates that hit a target margin
# - startup_costs: one-off costs plus a 20% contingency buffer
# - employee_vs_contractor: fully loaded employee cost vs contractor spend
#
# Divisions by zero resolve to 0 so results always serialize to JSON.
# =============================================================================

import math

from app.exceptions import InvalidCalculatorInputError
from core.models.calculators import (
    BreakEvenInput,
    BreakEvenResult,
    ContractorCost,
    CostComparison,
    EmployeeContractorInput,
    EmployeeContractorResult,
    EmployeeCost,
    HiringRecommendation,
    PricingInput,
    PricingMode,
    ProductPricingResult,
    ProfitMarginInput,
    ProfitMarginResult,
    ServicePricingResult,
    StartupCostInput,
    StartupCostResult,
)
from lib.utils import safe_divide

# Employer overhead on top of salary
BENEFITS_RATE = 0.25
EMPLOYER_PAYROLL_TAX_RATE = 0.0765
WORKERS_COMP_RATE = 0.02
FUTA_RATE = 0.006
FUTA_CAP = 420.0

STARTUP_BUFFER_RATE = 0.2

STARTUP_COST_FIELDS = (
    "equipment",
    "inventory",
    "marketing",
    "legal",
    "rent",
    "utilities",
    "insurance",
    "other",
)


# =============================================================================
# Break-Even
# =============================================================================

def break_even(data: BreakEvenInput) -> BreakEvenResult:
    """
    Compute break-even volume and target-profit volume.

    Target profit is a percentage of fixed costs. Seasonality inflates both
    unit counts by the given percentage.

    Raises:
        InvalidCalculatorInputError: If price does not exceed variable cost
    """
    price = data.price_per_unit
    variable_cost = data.variable_cost_per_unit

    if price <= variable_cost:
        raise InvalidCalculatorInputError(
            "break-even",
            "Price per unit must be greater than variable cost per unit",
        )

    contribution_margin = price - variable_cost
    break_even_units = data.fixed_costs / contribution_margin
    break_even_revenue = break_even_units * price
    contribution_margin_ratio = safe_divide(contribution_margin, price) * 100

    target_profit_amount = data.fixed_costs * (data.target_profit / 100)
    units_for_target_profit = (data.fixed_costs + target_profit_amount) / contribution_margin

    seasonal_factor = 1 + data.seasonality_factor / 100
    seasonal_break_even = break_even_units * seasonal_factor
    seasonal_target_units = units_for_target_profit * seasonal_factor

    margin_of_safety = 0.0
    if break_even_units > 0:
        margin_of_safety = safe_divide(
            units_for_target_profit - break_even_units, units_for_target_profit
        ) * 100

    return BreakEvenResult(
        break_even_units=math.ceil(break_even_units),
        break_even_revenue=break_even_revenue,
        contribution_margin=contribution_margin,
        contribution_margin_ratio=contribution_margin_ratio,
        units_for_target_profit=math.ceil(units_for_target_profit),
        seasonal_break_even=math.ceil(seasonal_break_even),
        seasonal_target_units=math.ceil(seasonal_target_units),
        margin_of_safety=margin_of_safety,
    )


# =============================================================================
# Profit Margin
# =============================================================================

def profit_margin(data: ProfitMarginInput) -> ProfitMarginResult:
    """
    Gross, operating and net margin as percentages of revenue.

    Raises:
        InvalidCalculatorInputError: If revenue is not positive
    """
    revenue = data.revenue
    if revenue <= 0:
        raise InvalidCalculatorInputError("profit-margin", "Revenue must be greater than 0")

    cogs = data.cost_of_goods_sold
    opex = data.operating_expenses

    gross_profit = revenue - cogs
    net_profit = gross_profit - opex

    return ProfitMarginResult(
        total_revenue=revenue,
        gross_profit=gross_profit,
        net_profit=net_profit,
        gross_margin=gross_profit / revenue * 100,
        net_margin=net_profit / revenue * 100,
        operating_margin=(revenue - cogs - opex) / revenue * 100,
        cogs=cogs,
        opex=opex,
    )


# =============================================================================
# Pricing
# =============================================================================

def service_pricing(data: PricingInput) -> ServicePricingResult:
    """Revenue at the current hourly rate, and the rate that covers expenses at the target margin."""
    weeks = data.weeks_per_year or 50.0
    margin = data.profit_margin or 20.0
    _check_margin(margin)

    total_hours = data.hours_per_week * weeks
    annual_revenue = data.hourly_rate * total_hours
    required_revenue = data.annual_expenses / (1 - margin / 100)

    return ServicePricingResult(
        annual_revenue=annual_revenue,
        net_income=annual_revenue - data.annual_expenses,
        required_hourly_rate=safe_divide(required_revenue, total_hours),
        current_rate=data.hourly_rate,
        total_hours=total_hours,
    )


def product_pricing(data: PricingInput) -> ProductPricingResult:
    """Selling price that yields the target margin on a unit cost."""
    cost = data.product_cost
    margin = data.product_margin or 50.0
    _check_margin(margin)

    selling_price = cost / (1 - margin / 100)
    profit = selling_price - cost

    return ProductPricingResult(
        cost=cost,
        selling_price=selling_price,
        profit=profit,
        markup_percentage=safe_divide(profit, cost) * 100,
        margin_percentage=margin,
    )


def pricing(data: PricingInput) -> ServicePricingResult | ProductPricingResult:
    if data.mode == PricingMode.PRODUCT:
        return product_pricing(data)
    return service_pricing(data)


def _check_margin(margin: float) -> None:
    if margin >= 100:
        raise InvalidCalculatorInputError("pricing", "Profit margin must be less than 100%")


# =============================================================================
# Startup Costs
# =============================================================================

def startup_costs(data: StartupCostInput) -> StartupCostResult:
    costs = {field: getattr(data, field) for field in STARTUP_COST_FIELDS}
    total = sum(costs.values())
    buffer = total * STARTUP_BUFFER_RATE

    return StartupCostResult(
        costs=costs,
        total_costs=total,
        recommended_buffer=buffer,
        total_with_buffer=total + buffer,
        business_type=data.business_type,
    )


# =============================================================================
# Employee vs Contractor
# =============================================================================

def employee_vs_contractor(data: EmployeeContractorInput) -> EmployeeContractorResult:
    """
    Compare the fully loaded cost of an employee with a contractor.

    Employee cost adds benefits (25%), employer payroll tax (7.65%),
    workers' comp (2%) and FUTA (0.6%, capped at $420) to salary.
    """
    salary = data.salary
    hours = data.hours_per_week or 40.0
    weeks = data.weeks_per_year or 50.0
    annual_hours = hours * weeks

    benefits = salary * BENEFITS_RATE
    payroll_taxes = salary * EMPLOYER_PAYROLL_TAX_RATE
    workers_comp = salary * WORKERS_COMP_RATE
    unemployment = min(salary * FUTA_RATE, FUTA_CAP)
    total_employee_cost = salary + benefits + payroll_taxes + workers_comp + unemployment

    contractor_annual_cost = data.contractor_rate * annual_hours
    savings = total_employee_cost - contractor_annual_cost

    return EmployeeContractorResult(
        employee=EmployeeCost(
            salary=salary,
            benefits=benefits,
            payroll_taxes=payroll_taxes,
            workers_comp=workers_comp,
            unemployment=unemployment,
            total_cost=total_employee_cost,
        ),
        contractor=ContractorCost(
            hourly_rate=data.contractor_rate,
            annual_cost=contractor_annual_cost,
            equivalent_hourly_rate=safe_divide(total_employee_cost, annual_hours),
        ),
        comparison=CostComparison(
            savings=savings,
            savings_percentage=safe_divide(savings, total_employee_cost) * 100,
            recommendation=(
                HiringRecommendation.CONTRACTOR if savings > 0 else HiringRecommendation.EMPLOYEE
            ),
        ),
    )
