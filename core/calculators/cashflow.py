# =============================================================================
# core/calculators/cashflow.py - Cash Flow Projection
# =============================================================================
# Month-by-month projection for a small business:
# - revenue compounds by a fixed monthly growth rate
# - expenses stay flat
# - cash accumulates the net of the two
#
# Month N's revenue is monthly_revenue * (1 + growth/100) ** (N - 1).
# =============================================================================

import logging
import math

from app.exceptions import InvalidCalculatorInputError
from core.models.calculators import CashFlowInput, CashFlowResult, MonthlyProjection

logger = logging.getLogger(__name__)

DEFAULT_PROJECTION_MONTHS = 12
MAX_PROJECTION_MONTHS = 600


def project_cash_flow(data: CashFlowInput) -> CashFlowResult:
    """
    Project monthly revenue, expenses and cumulative cash.

    Args:
        data: Parsed calculator input (malformed fields are already 0)

    Returns:
        CashFlowResult with one MonthlyProjection per month and totals

    Raises:
        InvalidCalculatorInputError: If more than MAX_PROJECTION_MONTHS are requested

    Example:
        result = project_cash_flow(CashFlowInput(
            monthly_revenue=25000, monthly_expenses=20000,
            starting_cash=50000, growth_rate=5, months=2,
        ))
        result.projections[1].cumulative_cash  # 61250.0
    """
    period = data.months or DEFAULT_PROJECTION_MONTHS
    if period > MAX_PROJECTION_MONTHS:
        raise InvalidCalculatorInputError(
            "cash-flow",
            f"Projection period cannot exceed {MAX_PROJECTION_MONTHS} months",
        )

    expenses = data.monthly_expenses
    growth_factor = 1 + data.growth_rate / 100

    projections: list[MonthlyProjection] = []
    current_cash = data.starting_cash
    current_revenue = data.monthly_revenue

    for month in range(1, period + 1):
        net_cash_flow = current_revenue - expenses
        current_cash += net_cash_flow

        projections.append(MonthlyProjection(
            month=month,
            revenue=current_revenue,
            expenses=expenses,
            net_cash_flow=net_cash_flow,
            cumulative_cash=current_cash,
        ))

        # Growth applies from the following month
        current_revenue *= growth_factor

    total_revenue = sum(p.revenue for p in projections)
    total_expenses = sum(p.expenses for p in projections)
    final_cash = projections[-1].cumulative_cash if projections else 0.0

    if not (math.isfinite(total_revenue) and math.isfinite(final_cash)):
        raise InvalidCalculatorInputError(
            "cash-flow",
            "Growth rate is too large to project over this period",
        )

    logger.debug(f"Projected {len(projections)} months, final cash {final_cash:.2f}")

    return CashFlowResult(
        projections=projections,
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_cash_flow=total_revenue - total_expenses,
        final_cash=final_cash,
    )
