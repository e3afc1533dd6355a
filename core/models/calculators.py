# =============================================================================
# core/models/calculators.py - Business & Personal Calculator Schemas
# =============================================================================
# Request/response models for the closed-form calculators:
# - Cash flow projection
# - Break-even, profit margin, pricing, startup cost
# - Employee vs contractor comparison
# - Emergency fund and ROI
#
# Every numeric input is lenient (see core.models.common): empty or malformed
# values arrive as 0 and the calculator applies its own fallbacks.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field

from .common import LenientFloat, LenientInt


# =============================================================================
# Cash Flow Projection
# =============================================================================

class CashFlowInput(BaseModel):
    """
    Inputs for the monthly cash flow projection.

    Example:
        {
            "monthly_revenue": "25000",
            "monthly_expenses": "20000",
            "starting_cash": "50000",
            "growth_rate": "5",
            "months": "12"
        }
    """
    monthly_revenue: LenientFloat = Field(default=0.0, description="Revenue in month 1")
    monthly_expenses: LenientFloat = Field(default=0.0, description="Flat monthly expenses")
    starting_cash: LenientFloat = Field(default=0.0, description="Cash on hand before month 1")
    growth_rate: LenientFloat = Field(default=0.0, description="Monthly revenue growth in percent")
    months: LenientInt = Field(default=12, description="Projection length (0 or blank means 12)")


class MonthlyProjection(BaseModel):
    """One month of the cash flow projection."""
    month: int
    revenue: float
    expenses: float
    net_cash_flow: float
    cumulative_cash: float


class CashFlowResult(BaseModel):
    """Full projection plus totals."""
    projections: list[MonthlyProjection] = Field(default_factory=list)
    total_revenue: float
    total_expenses: float
    net_cash_flow: float
    final_cash: float


# =============================================================================
# Break-Even
# =============================================================================

class BreakEvenInput(BaseModel):
    """Inputs for the break-even calculator."""
    fixed_costs: LenientFloat = 0.0
    variable_cost_per_unit: LenientFloat = 0.0
    price_per_unit: LenientFloat = 0.0
    seasonality_factor: LenientFloat = Field(default=0.0, description="Extra units needed in percent")
    target_profit: LenientFloat = Field(default=0.0, description="Target profit as percent of fixed costs")


class BreakEvenResult(BaseModel):
    break_even_units: int
    break_even_revenue: float
    contribution_margin: float
    contribution_margin_ratio: float
    units_for_target_profit: int
    seasonal_break_even: int
    seasonal_target_units: int
    margin_of_safety: float


# =============================================================================
# Profit Margin
# =============================================================================

class ProfitMarginInput(BaseModel):
    """Inputs for the profit margin calculator."""
    revenue: LenientFloat = 0.0
    cost_of_goods_sold: LenientFloat = 0.0
    operating_expenses: LenientFloat = 0.0


class ProfitMarginResult(BaseModel):
    total_revenue: float
    gross_profit: float
    net_profit: float
    gross_margin: float
    net_margin: float
    operating_margin: float
    cogs: float
    opex: float


# =============================================================================
# Pricing
# =============================================================================

class PricingMode(str, Enum):
    """Which pricing model to compute."""
    SERVICE = "service"
    PRODUCT = "product"


class PricingInput(BaseModel):
    """
    Inputs for the pricing calculator.

    Service mode uses the hourly fields; product mode uses product_cost and
    product_margin.
    """
    mode: PricingMode = PricingMode.SERVICE
    hourly_rate: LenientFloat = 0.0
    hours_per_week: LenientFloat = 0.0
    weeks_per_year: LenientFloat = Field(default=50.0, description="0 or blank means 50")
    annual_expenses: LenientFloat = 0.0
    profit_margin: LenientFloat = Field(default=20.0, description="0 or blank means 20")
    product_cost: LenientFloat = 0.0
    product_margin: LenientFloat = Field(default=50.0, description="0 or blank means 50")


class ServicePricingResult(BaseModel):
    type: PricingMode = PricingMode.SERVICE
    annual_revenue: float
    net_income: float
    required_hourly_rate: float
    current_rate: float
    total_hours: float


class ProductPricingResult(BaseModel):
    type: PricingMode = PricingMode.PRODUCT
    cost: float
    selling_price: float
    profit: float
    markup_percentage: float
    margin_percentage: float


# =============================================================================
# Startup Costs
# =============================================================================

class StartupCostInput(BaseModel):
    """One-off costs of opening a business."""
    business_type: str = ""
    equipment: LenientFloat = 0.0
    inventory: LenientFloat = 0.0
    marketing: LenientFloat = 0.0
    legal: LenientFloat = 0.0
    rent: LenientFloat = 0.0
    utilities: LenientFloat = 0.0
    insurance: LenientFloat = 0.0
    other: LenientFloat = 0.0


class StartupCostResult(BaseModel):
    costs: dict[str, float]
    total_costs: float
    recommended_buffer: float
    total_with_buffer: float
    business_type: str


# =============================================================================
# Employee vs Contractor
# =============================================================================

class EmployeeContractorInput(BaseModel):
    """Compare a salaried hire with an hourly contractor."""
    salary: LenientFloat = 0.0
    contractor_rate: LenientFloat = 0.0
    hours_per_week: LenientFloat = Field(default=40.0, description="0 or blank means 40")
    weeks_per_year: LenientFloat = Field(default=50.0, description="0 or blank means 50")


class EmployeeCost(BaseModel):
    salary: float
    benefits: float
    payroll_taxes: float
    workers_comp: float
    unemployment: float
    total_cost: float


class ContractorCost(BaseModel):
    hourly_rate: float
    annual_cost: float
    equivalent_hourly_rate: float


class HiringRecommendation(str, Enum):
    EMPLOYEE = "employee"
    CONTRACTOR = "contractor"


class CostComparison(BaseModel):
    savings: float
    savings_percentage: float
    recommendation: HiringRecommendation


class EmployeeContractorResult(BaseModel):
    employee: EmployeeCost
    contractor: ContractorCost
    comparison: CostComparison


# =============================================================================
# Emergency Fund
# =============================================================================

class EmergencyTargetType(str, Enum):
    """How target_value is interpreted."""
    MONTHS = "months"
    AMOUNT = "amount"


class EmergencyFundInput(BaseModel):
    """Inputs for the emergency fund calculator."""
    monthly_expenses: LenientFloat = 0.0
    current_savings: LenientFloat = 0.0
    target_type: EmergencyTargetType = EmergencyTargetType.MONTHS
    target_value: LenientFloat = Field(default=6.0, description="Months of expenses or a dollar amount")
    monthly_contribution: LenientFloat = 0.0
    interest_rate: LenientFloat = Field(default=0.0, description="Annual savings rate in percent")


class EmergencyFundResult(BaseModel):
    target_amount: float
    still_needed: float
    percent_complete: float
    months_of_expenses_covered: float
    time_to_goal: int
    monthly_contribution: float
    projected_interest: float
    target_months: float


# =============================================================================
# Return on Investment
# =============================================================================

class ROICalculationType(str, Enum):
    SIMPLE = "simple"
    ANNUALIZED = "annualized"


class ROIInput(BaseModel):
    """Inputs for the ROI calculator."""
    initial_investment: LenientFloat = 0.0
    final_value: LenientFloat = 0.0
    time_horizon: LenientFloat = Field(default=1.0, description="Years held (0 or blank means 1)")
    calculation_type: ROICalculationType = ROICalculationType.SIMPLE
    dividend_yield: LenientFloat = 0.0
    inflation_rate: LenientFloat = 0.0
    tax_rate: LenientFloat = 0.0


class ROIResult(BaseModel):
    total_return: float
    roi_percentage: float
    annualized_roi: float
    initial: float
    final: float
    time: float
    dividend_income: float
    after_tax_return: float
    real_roi: float
    real_value: float
    total_taxes: float
