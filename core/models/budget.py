# =============================================================================
# core/models/budget.py - Budget Planner Schemas
# =============================================================================
# A budget is a list of income/expense items at mixed frequencies plus
# savings goals. The planner normalizes everything to monthly amounts.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field

from .common import LenientFloat


class BudgetFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class BudgetItemType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class BudgetItem(BaseModel):
    """
    One line of the budget.

    Example:
        {"category": "Housing", "amount": "1500", "frequency": "monthly", "type": "expense"}
    """
    category: str = Field(..., min_length=1)
    subcategory: str = ""
    amount: LenientFloat = 0.0
    frequency: BudgetFrequency = BudgetFrequency.MONTHLY
    type: BudgetItemType = BudgetItemType.EXPENSE
    is_fixed: bool = False


class SavingsGoal(BaseModel):
    name: str = Field(..., min_length=1)
    target_amount: LenientFloat = 0.0
    current_amount: LenientFloat = 0.0
    target_date: str = ""
    monthly_contribution: LenientFloat = 0.0


class BudgetInput(BaseModel):
    items: list[BudgetItem] = Field(default_factory=list)
    goals: list[SavingsGoal] = Field(default_factory=list)


class RecommendationType(str, Enum):
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class BudgetRecommendation(BaseModel):
    type: RecommendationType
    title: str
    message: str


class GoalProgress(BaseModel):
    name: str
    target_amount: float
    current_amount: float
    remaining: float
    progress: float = Field(..., description="Percent complete, capped at 100")
    months_to_goal: int


class BudgetResult(BaseModel):
    monthly_income: float
    monthly_expenses: float
    monthly_net: float
    savings_rate: float
    expense_categories: dict[str, float]
    recommendations: list[BudgetRecommendation]
    goals: list[GoalProgress]
