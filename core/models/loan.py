# =============================================================================
# core/models/loan.py - Loan Calculator Schemas
# =============================================================================
# The loan calculator has four modes, each with its own inputs:
# - payment: periodic payment for a loan at a given frequency
# - apr: approximate APR from total interest and fees
# - loan_amount: largest principal a monthly payment can support
# - remaining: balance left after some monthly payments
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field

from .common import LenientFloat


class LoanCalculationType(str, Enum):
    PAYMENT = "payment"
    APR = "apr"
    LOAN_AMOUNT = "loan_amount"
    REMAINING = "remaining"


class PaymentFrequency(str, Enum):
    MONTHLY = "monthly"
    BIWEEKLY = "biweekly"
    WEEKLY = "weekly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class LoanInput(BaseModel):
    """
    Inputs for every loan mode. Only the fields of the chosen mode are read.

    Rates are annual percentages; terms are in months except for APR mode,
    whose term is in years.
    """
    calculation_type: LoanCalculationType = LoanCalculationType.PAYMENT

    # payment
    loan_amount: LenientFloat = 0.0
    down_payment: LenientFloat = 0.0
    interest_rate: LenientFloat = 0.0
    loan_term: LenientFloat = Field(default=0.0, description="Term in months")
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    # apr
    total_interest: LenientFloat = 0.0
    fees: LenientFloat = 0.0
    term_years: LenientFloat = 0.0

    # loan_amount
    monthly_payment: LenientFloat = 0.0

    # remaining
    payments_made: LenientFloat = 0.0


class LoanPaymentResult(BaseModel):
    type: LoanCalculationType = LoanCalculationType.PAYMENT
    base_payment: float
    total_payment: float
    total_interest: float
    principal: float
    payment_frequency: PaymentFrequency
    down_payment: float


class LoanAPRResult(BaseModel):
    type: LoanCalculationType = LoanCalculationType.APR
    apr: float
    total_cost: float
    principal: float
    term: float


class LoanAmountResult(BaseModel):
    type: LoanCalculationType = LoanCalculationType.LOAN_AMOUNT
    max_loan_amount: float
    payment: float
    rate: float
    term: float


class RemainingBalanceResult(BaseModel):
    type: LoanCalculationType = LoanCalculationType.REMAINING
    remaining_balance: float
    remaining_payments: float
    monthly_payment: float
    total_paid: float


LoanResult = LoanPaymentResult | LoanAPRResult | LoanAmountResult | RemainingBalanceResult
