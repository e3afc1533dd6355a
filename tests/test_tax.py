# =============================================================================
# tests/test_tax.py - Federal Tax Tool Tests (2024)
# =============================================================================
# Run with: pytest tests/test_tax.py -v
# =============================================================================

import pytest

from core.calculators import (
    deduction_finder,
    federal_tax,
    quarterly_tax,
    tax_refund,
    tax_savings,
    withholding,
)
from core.calculators.tax import bracket_tax, self_employment_tax
from core.models import (
    DeductionFinderInput,
    FederalTaxInput,
    FilingStatus,
    QuarterlyTaxInput,
    TaxRefundInput,
    TaxSavingsInput,
    WithholdingInput,
)


# =============================================================================
# Bracket Math
# =============================================================================

class TestBracketTax:

    def test_single_filer(self):
        tax, marginal = bracket_tax(50000)
        assert tax == pytest.approx(6053)
        assert marginal == 22

    def test_married_filer_first_bracket(self):
        tax, marginal = bracket_tax(23200, FilingStatus.MARRIED)
        assert tax == pytest.approx(2320)
        assert marginal == 10

    def test_top_bracket(self):
        tax, marginal = bracket_tax(1_000_000)
        assert marginal == 37
        # Tax through 609,350 plus 37% of the rest
        below_top, _ = bracket_tax(609350)
        assert tax == pytest.approx(below_top + (1_000_000 - 609350) * 0.37)

    def test_zero_income(self):
        assert bracket_tax(0) == (0.0, 10.0)
        assert bracket_tax(-100)[0] == 0


# =============================================================================
# Calculators
# =============================================================================

class TestFederalTax:

    def test_standard_deduction_applied(self):
        result = federal_tax(FederalTaxInput(income=64600, state="TX"))

        assert result.standard_deduction == 14600
        assert result.taxable_income == 50000
        assert result.estimated_tax == pytest.approx(6053)
        assert result.effective_rate == pytest.approx(6053 / 64600 * 100)
        assert result.marginal_rate == 22
        assert result.state == "TX"

    def test_head_of_household(self):
        result = federal_tax(FederalTaxInput(income=21900, filing_status="head"))
        assert result.standard_deduction == 21900
        assert result.taxable_income == 0
        assert result.estimated_tax == 0
        assert result.effective_rate == 0

    def test_empty_income(self):
        result = federal_tax(FederalTaxInput.model_validate({"income": "", "filing_status": "single"}))
        assert result.estimated_tax == 0
        assert result.effective_rate == 0


class TestTaxRefund:

    def test_refund(self):
        result = tax_refund(TaxRefundInput(income=64600, withheld=7000))
        assert result.tax_liability == pytest.approx(6053)
        assert result.refund == pytest.approx(947)
        assert result.owes is False

    def test_balance_due_is_negative(self):
        result = tax_refund(TaxRefundInput(income=64600, withheld=5000))
        assert result.refund == pytest.approx(-1053)
        assert result.owes is True

    def test_credits_cannot_push_liability_below_zero(self):
        result = tax_refund(TaxRefundInput(income=64600, withheld=1000, credits=10000))
        assert result.tax_liability == 0
        assert result.refund == 1000


class TestQuarterlyTax:

    def test_self_employment_tax(self):
        assert self_employment_tax(100000) == pytest.approx(14129.55)
        assert self_employment_tax(-500) == 0

    def test_quarterly_payment(self):
        result = quarterly_tax(QuarterlyTaxInput(net_income=60000))

        se_tax = 60000 * 0.9235 * 0.153
        income_tax, _ = bracket_tax(60000 - se_tax / 2 - 14600)

        assert result.self_employment_tax == pytest.approx(se_tax)
        assert result.income_tax == pytest.approx(income_tax)
        assert result.total_tax == pytest.approx(se_tax + income_tax)
        assert result.quarterly_payment == pytest.approx((se_tax + income_tax) / 4)


class TestWithholding:

    def test_allowances_reduce_withholding(self):
        result = withholding(WithholdingInput(income=64600, pay_periods=26, allowances=2))

        expected_annual = 6053 - 2 * 5150 * 0.12
        assert result.annual_tax == pytest.approx(expected_annual)
        assert result.per_paycheck == pytest.approx(expected_annual / 26)
        assert result.monthly_withholding == pytest.approx(expected_annual / 12)

    def test_blank_pay_periods_default_to_biweekly(self):
        result = withholding(WithholdingInput.model_validate({"income": "64600", "pay_periods": ""}))
        assert result.pay_periods == 26

    def test_withholding_never_negative(self):
        result = withholding(WithholdingInput(income=20000, allowances=10))
        assert result.annual_tax == 0


class TestDeductionFinder:

    ITEMS = [
        {"category": "Home", "name": "Mortgage interest", "amount": "12,000"},
        {"category": "Giving", "name": "Charitable donations", "amount": ""},
        {"category": "Taxes", "name": "State and local taxes", "amount": 5000},
    ]

    def test_itemizing_beats_standard(self):
        result = deduction_finder(DeductionFinderInput.model_validate({"items": self.ITEMS}))

        assert result.total_itemized == 18000
        assert result.should_itemize is True
        assert result.savings == 3400
        assert result.selected_count == 3
        assert result.selected_items[1] == "Charitable donations"

    def test_standard_deduction_wins_for_married(self):
        result = deduction_finder(DeductionFinderInput.model_validate({
            "items": self.ITEMS, "filing_status": "married",
        }))
        assert result.standard_deduction == 29200
        assert result.should_itemize is False
        assert result.savings == 0

    def test_no_items(self):
        result = deduction_finder(DeductionFinderInput())
        assert result.total_itemized == 0
        assert result.selected_items == []


class TestTaxSavings:

    def test_deductions_save_at_flat_rate(self):
        result = tax_savings(TaxSavingsInput(
            business_income=80000, business_expenses=10000, home_office=5000,
        ))

        assert result.total_deductions == 15000
        assert result.taxable_income == 65000
        assert result.federal_tax == pytest.approx(65000 * 0.22)
        assert result.self_employment_tax == pytest.approx(80000 * 0.1413)
        assert result.tax_savings == pytest.approx(15000 * 0.22)

    @pytest.mark.parametrize("income, rate", [(40000, 0.12), (50001, 0.22), (150000, 0.24)])
    def test_rate_by_income(self, income, rate):
        result = tax_savings(TaxSavingsInput(business_income=income))
        assert result.federal_tax == pytest.approx(income * rate)

    def test_no_income(self):
        result = tax_savings(TaxSavingsInput())
        assert result.effective_tax_rate == 0
        assert result.tax_savings == 0
