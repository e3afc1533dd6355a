# =============================================================================
# core/calculators/loan.py - Loan Calculator
# =============================================================================
# Standard amortization formulas. With periodic rate r and n periods:
#   payment   = P * r * (1 + r)^n / ((1 + r)^n - 1)
#   principal = PMT * (1 - (1 + r)^-n) / r
#   balance_k = P * (1 + r)^k - PMT * ((1 + r)^k - 1) / r
# A zero rate falls back to straight-line repayment in every mode.
# =============================================================================

import math

from app.exceptions import InvalidCalculatorInputError
from core.models.loan import (
    LoanAmountResult,
    LoanAPRResult,
    LoanCalculationType,
    LoanInput,
    LoanPaymentResult,
    LoanResult,
    PaymentFrequency,
    RemainingBalanceResult,
)

# (payments per year, payment periods per month of term)
FREQUENCIES: dict[PaymentFrequency, tuple[int, float]] = {
    PaymentFrequency.MONTHLY: (12, 1.0),
    PaymentFrequency.BIWEEKLY: (26, 2.17),
    PaymentFrequency.WEEKLY: (52, 4.33),
    PaymentFrequency.QUARTERLY: (4, 1 / 3),
    PaymentFrequency.ANNUALLY: (1, 1 / 12),
}

_INVALID = "Please enter valid positive numbers"


def amortized_payment(principal: float, rate: float, periods: float) -> float:
    """Level payment per period; principal / periods when the rate is zero."""
    if periods <= 0:
        return 0.0
    if rate == 0:
        return principal / periods
    growth = (1 + rate) ** periods
    if growth == 1:
        return principal / periods
    return principal * rate * growth / (growth - 1)


def loan_payment(data: LoanInput) -> LoanPaymentResult:
    """
    Periodic payment after the down payment, at the chosen frequency.

    The term is entered in months and converted to payment periods.
    """
    principal = data.loan_amount - data.down_payment
    payments_per_year, periods_per_month = FREQUENCIES[data.payment_frequency]
    rate = data.interest_rate / 100 / payments_per_year
    term = data.loan_term * periods_per_month

    if principal < 0 or term <= 0:
        raise InvalidCalculatorInputError(
            "loan", "Please enter valid positive numbers for Loan Amount and Term."
        )

    base_payment = amortized_payment(principal, rate, term)
    if not math.isfinite(base_payment):
        base_payment = 0.0

    total_payment = base_payment * term

    return LoanPaymentResult(
        base_payment=base_payment,
        total_payment=total_payment,
        total_interest=total_payment - principal,
        principal=principal,
        payment_frequency=data.payment_frequency,
        down_payment=data.down_payment,
    )


def loan_apr(data: LoanInput) -> LoanAPRResult:
    """Approximate APR: total finance charges spread evenly over the term in years."""
    principal = data.loan_amount
    term = data.term_years

    if principal <= 0 or term <= 0:
        raise InvalidCalculatorInputError("loan", _INVALID)

    total_cost = data.total_interest + data.fees

    return LoanAPRResult(
        apr=total_cost / principal / term * 100,
        total_cost=total_cost,
        principal=principal,
        term=term,
    )


def max_loan_amount(data: LoanInput) -> LoanAmountResult:
    """Largest principal a monthly payment can repay over the term."""
    payment = data.monthly_payment
    rate = data.interest_rate / 100 / 12
    term = data.loan_term

    if payment <= 0 or rate < 0 or term <= 0:
        raise InvalidCalculatorInputError("loan", _INVALID)

    if rate == 0:
        amount = payment * term
    else:
        amount = payment * (1 - (1 + rate) ** -term) / rate

    return LoanAmountResult(
        max_loan_amount=amount,
        payment=payment,
        rate=data.interest_rate,
        term=term,
    )


def remaining_balance(data: LoanInput) -> RemainingBalanceResult:
    """Balance outstanding after `payments_made` monthly payments."""
    principal = data.loan_amount
    rate = data.interest_rate / 100 / 12
    term = data.loan_term
    payments = data.payments_made

    if principal <= 0 or rate < 0 or term <= 0 or payments < 0:
        raise InvalidCalculatorInputError("loan", _INVALID)

    monthly_payment = amortized_payment(principal, rate, term)
    if rate == 0:
        balance = principal - monthly_payment * payments
    else:
        growth = (1 + rate) ** payments
        balance = principal * growth - monthly_payment * (growth - 1) / rate

    return RemainingBalanceResult(
        remaining_balance=max(0.0, balance),
        remaining_payments=max(0.0, term - payments),
        monthly_payment=monthly_payment,
        total_paid=monthly_payment * payments,
    )


_HANDLERS = {
    LoanCalculationType.PAYMENT: loan_payment,
    LoanCalculationType.APR: loan_apr,
    LoanCalculationType.LOAN_AMOUNT: max_loan_amount,
    LoanCalculationType.REMAINING: remaining_balance,
}


def calculate_loan(data: LoanInput) -> LoanResult:
    """Dispatch to the calculator for data.calculation_type."""
    return _HANDLERS[data.calculation_type](data)
