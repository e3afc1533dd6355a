# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - common.py: lenient numeric field types shared by calculator inputs
# - calculators.py: cash flow, business and personal calculator schemas
# - loan.py: loan calculator schemas
# - tax.py: 2024 federal tax tool schemas
# - budget.py: budget planner schemas
# - market.py: stock data envelopes
# - email.py: early access signup schemas
# - chat.py: FinnaBot request/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Common field types
# -----------------------------------------------------------------------------
from .common import LenientFloat, LenientInt

# -----------------------------------------------------------------------------
# Calculator Models - Business, personal and investing
# -----------------------------------------------------------------------------
from .calculators import (
    BreakEvenInput,
    BreakEvenResult,
    CashFlowInput,
    CashFlowResult,
    ContractorCost,
    CostComparison,
    EmergencyFundInput,
    EmergencyFundResult,
    EmergencyTargetType,
    EmployeeContractorInput,
    EmployeeContractorResult,
    EmployeeCost,
    HiringRecommendation,
    MonthlyProjection,
    PricingInput,
    PricingMode,
    ProductPricingResult,
    ProfitMarginInput,
    ProfitMarginResult,
    ROICalculationType,
    ROIInput,
    ROIResult,
    ServicePricingResult,
    StartupCostInput,
    StartupCostResult,
)

# -----------------------------------------------------------------------------
# Loan Models
# -----------------------------------------------------------------------------
from .loan import (
    LoanAmountResult,
    LoanAPRResult,
    LoanCalculationType,
    LoanInput,
    LoanPaymentResult,
    LoanResult,
    PaymentFrequency,
    RemainingBalanceResult,
)

# -----------------------------------------------------------------------------
# Tax Models
# -----------------------------------------------------------------------------
from .tax import (
    DeductionFinderInput,
    DeductionFinderResult,
    DeductionItem,
    FederalTaxInput,
    FederalTaxResult,
    FilingStatus,
    QuarterlyTaxInput,
    QuarterlyTaxResult,
    TaxRefundInput,
    TaxRefundResult,
    TaxSavingsInput,
    TaxSavingsResult,
    WithholdingInput,
    WithholdingResult,
)

# -----------------------------------------------------------------------------
# Budget Models
# -----------------------------------------------------------------------------
from .budget import (
    BudgetFrequency,
    BudgetInput,
    BudgetItem,
    BudgetItemType,
    BudgetRecommendation,
    BudgetResult,
    GoalProgress,
    RecommendationType,
    SavingsGoal,
)

# -----------------------------------------------------------------------------
# Proxy Models - Market data, email, chat
# -----------------------------------------------------------------------------
from .market import StockData, StockMover, TopMovers
from .email import EmailSignupRequest, EmailSignupResponse
from .chat import ChatPart, ChatRequest, ChatResponse, ChatTurn, MessageRole

__all__ = [
    # Common
    "LenientFloat",
    "LenientInt",
    # Calculators
    "BreakEvenInput",
    "BreakEvenResult",
    "CashFlowInput",
    "CashFlowResult",
    "ContractorCost",
    "CostComparison",
    "EmergencyFundInput",
    "EmergencyFundResult",
    "EmergencyTargetType",
    "EmployeeContractorInput",
    "EmployeeContractorResult",
    "EmployeeCost",
    "HiringRecommendation",
    "MonthlyProjection",
    "PricingInput",
    "PricingMode",
    "ProductPricingResult",
    "ProfitMarginInput",
    "ProfitMarginResult",
    "ROICalculationType",
    "ROIInput",
    "ROIResult",
    "ServicePricingResult",
    "StartupCostInput",
    "StartupCostResult",
    # Loan
    "LoanAmountResult",
    "LoanAPRResult",
    "LoanCalculationType",
    "LoanInput",
    "LoanPaymentResult",
    "LoanResult",
    "PaymentFrequency",
    "RemainingBalanceResult",
    # Tax
    "DeductionFinderInput",
    "DeductionFinderResult",
    "DeductionItem",
    "FederalTaxInput",
    "FederalTaxResult",
    "FilingStatus",
    "QuarterlyTaxInput",
    "QuarterlyTaxResult",
    "TaxRefundInput",
    "TaxRefundResult",
    "TaxSavingsInput",
    "TaxSavingsResult",
    "WithholdingInput",
    "WithholdingResult",
    # Budget
    "BudgetFrequency",
    "BudgetInput",
    "BudgetItem",
    "BudgetItemType",
    "BudgetRecommendation",
    "BudgetResult",
    "GoalProgress",
    "RecommendationType",
    "SavingsGoal",
    # Market / Email / Chat
    "StockData",
    "StockMover",
    "TopMovers",
    "EmailSignupRequest",
    "EmailSignupResponse",
    "ChatPart",
    "ChatRequest",
    "ChatResponse",
    "ChatTurn",
    "MessageRole",
]
