# =============================================================================
# tests/test_personal_calculators.py - Emergency Fund and ROI Tests
# =============================================================================
# Run with: pytest tests/test_personal_calculators.py -v
# =============================================================================

import math

import pytest

from app.exceptions import InvalidCalculatorInputError
from core.calculators import emergency_fund, return_on_investment
from core.calculators.personal import months_to_goal
from core.models import (
    EmergencyFundInput,
    EmergencyTargetType,
    ROICalculationType,
    ROIInput,
)


# =============================================================================
# Emergency Fund
# =============================================================================

class TestMonthsToGoal:

    def test_without_interest_is_linear(self):
        assert months_to_goal(12000, 1000, 0) == 12

    def test_interest_shortens_the_wait(self):
        months = months_to_goal(12000, 1000, 6)
        expected = math.log(1 + 12000 * 0.005 / 1000) / math.log(1.005)
        assert months == pytest.approx(expected)
        assert months < 12

    @pytest.mark.parametrize("needed, contribution", [(0, 100), (-5, 100), (1000, 0)])
    def test_nothing_to_do(self, needed, contribution):
        assert months_to_goal(needed, contribution, 5) == 0


class TestEmergencyFund:

    def test_months_target(self):
        result = emergency_fund(EmergencyFundInput(
            monthly_expenses=3000,
            current_savings=6000,
            target_type=EmergencyTargetType.MONTHS,
            target_value=6,
            monthly_contribution=1000,
        ))

        assert result.target_amount == 18000
        assert result.still_needed == 12000
        assert result.percent_complete == pytest.approx(33.333, abs=0.001)
        assert result.months_of_expenses_covered == 2
        assert result.time_to_goal == 12
        assert result.projected_interest == 0
        assert result.target_months == 6

    def test_interest_bearing_savings(self):
        result = emergency_fund(EmergencyFundInput(
            monthly_expenses=3000,
            current_savings=6000,
            target_value=6,
            monthly_contribution=1000,
            interest_rate=6,
        ))

        months = months_to_goal(12000, 1000, 6)
        assert result.time_to_goal == 12
        assert result.projected_interest == pytest.approx(12000 * 0.06 * months / 12)

    def test_amount_target_already_reached(self):
        result = emergency_fund(EmergencyFundInput.model_validate({
            "monthly_expenses": "3,000",
            "current_savings": "10000",
            "target_type": "amount",
            "target_value": "9000",
            "monthly_contribution": "500",
        }))

        assert result.target_months == 3
        assert result.still_needed == 0
        assert result.percent_complete == 100
        assert result.time_to_goal == 0

    def test_empty_form(self):
        result = emergency_fund(EmergencyFundInput.model_validate({
            "monthly_expenses": "", "current_savings": "", "target_value": "",
        }))
        assert result.target_amount == 0
        assert result.percent_complete == 0
        assert result.months_of_expenses_covered == 0


# =============================================================================
# Return on Investment
# =============================================================================

class TestReturnOnInvestment:

    def test_simple_roi(self):
        result = return_on_investment(ROIInput(
            initial_investment=10000, final_value=15000, time_horizon=5,
        ))

        assert result.total_return == 5000
        assert result.roi_percentage == pytest.approx(50)
        assert result.annualized_roi == pytest.approx(10)

    def test_annualized_roi_compounds(self):
        result = return_on_investment(ROIInput(
            initial_investment=10000,
            final_value=15000,
            time_horizon=5,
            calculation_type=ROICalculationType.ANNUALIZED,
        ))
        assert result.annualized_roi == pytest.approx((1.5 ** 0.2 - 1) * 100)

    def test_dividends_taxes_and_inflation(self):
        result = return_on_investment(ROIInput(
            initial_investment=10000,
            final_value=15000,
            time_horizon=5,
            dividend_yield=2,
            tax_rate=15,
            inflation_rate=3,
        ))

        assert result.dividend_income == pytest.approx(1000)
        assert result.total_taxes == pytest.approx(900)
        assert result.after_tax_return == pytest.approx(5100)
        assert result.real_roi == pytest.approx(7)
        assert result.real_value == pytest.approx(10000 * 1.07 ** 5)

    def test_losses_are_not_taxed(self):
        result = return_on_investment(ROIInput(
            initial_investment=10000, final_value=6000, tax_rate=20,
        ))
        assert result.total_return == -4000
        assert result.total_taxes == 0
        assert result.time == 1

    def test_real_value_floors_at_zero(self):
        result = return_on_investment(ROIInput(
            initial_investment=100, final_value=0, inflation_rate=10,
        ))
        assert result.real_value == 0

    def test_initial_investment_required(self):
        with pytest.raises(InvalidCalculatorInputError):
            return_on_investment(ROIInput(final_value=1000))
