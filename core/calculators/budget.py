# =============================================================================
# core/calculators/budget.py - Budget Planner
# =============================================================================
# Normalizes budget items to monthly amounts, totals them by category and
# produces rule-of-thumb recommendations:
# - housing under 30% of income
# - food and transportation under 15% each
# - entertainment under 10%
# - save at least 20%
# =============================================================================

import math

from core.models.budget import (
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
from lib.utils import safe_divide

MONTHLY_MULTIPLIERS: dict[BudgetFrequency, float] = {
    BudgetFrequency.DAILY: 30,
    BudgetFrequency.WEEKLY: 4.33,
    BudgetFrequency.MONTHLY: 1,
    BudgetFrequency.YEARLY: 1 / 12,
}

TARGET_SAVINGS_RATE = 0.2

# (category, share of income that triggers advice, type, title, message)
CATEGORY_LIMITS: list[tuple[str, float, RecommendationType, str, str]] = [
    (
        "Housing", 0.30, RecommendationType.WARNING, "High Housing Costs",
        "Housing costs should ideally be under 30% of income. Yours is {pct:.1f}%. "
        "Consider downsizing or finding additional income sources.",
    ),
    (
        "Food", 0.15, RecommendationType.INFO, "Food Spending Analysis",
        "Your food expenses are {pct:.1f}% of income. Consider meal planning, cooking at home "
        "more often, or using grocery budgeting apps to reduce costs.",
    ),
    (
        "Entertainment", 0.10, RecommendationType.INFO, "Entertainment Spending",
        "Entertainment costs are {pct:.1f}% of income. Look for free activities, use streaming "
        "services instead of cable, or set a monthly entertainment budget.",
    ),
    (
        "Transportation", 0.15, RecommendationType.INFO, "Transportation Costs",
        "Transportation is {pct:.1f}% of income. Consider carpooling, public transit, or "
        "working from home to reduce these expenses.",
    ),
]


def to_monthly(amount: float, frequency: BudgetFrequency) -> float:
    """Convert an amount at the given frequency to a monthly amount."""
    return amount * MONTHLY_MULTIPLIERS.get(frequency, 1)


def _monthly_total(items: list[BudgetItem], item_type: BudgetItemType) -> float:
    return sum(to_monthly(item.amount, item.frequency) for item in items if item.type == item_type)


def expense_categories(items: list[BudgetItem]) -> dict[str, float]:
    """Monthly expense total per category, in first-seen order."""
    totals: dict[str, float] = {}
    for item in items:
        if item.type != BudgetItemType.EXPENSE:
            continue
        totals[item.category] = totals.get(item.category, 0.0) + to_monthly(item.amount, item.frequency)
    return totals


def recommendations(
    monthly_income: float,
    monthly_net: float,
    categories: dict[str, float],
) -> list[BudgetRecommendation]:
    """Rule-of-thumb advice for the budget, warnings first."""
    advice: list[BudgetRecommendation] = []
    savings_pct = safe_divide(monthly_net, monthly_income) * 100

    if monthly_net < 0:
        advice.append(BudgetRecommendation(
            type=RecommendationType.WARNING,
            title="Budget Deficit Alert",
            message=(
                f"You're spending ${abs(monthly_net):.2f} more than you earn monthly. Consider "
                "reducing expenses or increasing income to avoid debt accumulation."
            ),
        ))

    if 0 < monthly_net < monthly_income * TARGET_SAVINGS_RATE:
        advice.append(BudgetRecommendation(
            type=RecommendationType.INFO,
            title="Low Savings Rate",
            message=(
                f"Try to save at least 20% of your income for financial security. You're currently "
                f"saving {savings_pct:.1f}%. Consider reducing discretionary spending."
            ),
        ))

    for category, limit, kind, title, template in CATEGORY_LIMITS:
        cost = categories.get(category, 0.0)
        if monthly_income > 0 and cost > monthly_income * limit:
            pct = safe_divide(cost, monthly_income) * 100
            advice.append(BudgetRecommendation(type=kind, title=title, message=template.format(pct=pct)))

    if monthly_income > 0 and monthly_net >= monthly_income * TARGET_SAVINGS_RATE:
        advice.append(BudgetRecommendation(
            type=RecommendationType.SUCCESS,
            title="Excellent Savings Rate!",
            message=(
                f"You're saving {savings_pct:.1f}% of your income. Consider investing this surplus "
                "in retirement accounts or building an emergency fund."
            ),
        ))

    return advice


def goal_progress(goal: SavingsGoal) -> GoalProgress:
    remaining = max(0.0, goal.target_amount - goal.current_amount)
    progress = safe_divide(goal.current_amount, goal.target_amount) * 100
    months = math.ceil(remaining / goal.monthly_contribution) if goal.monthly_contribution > 0 else 0

    return GoalProgress(
        name=goal.name,
        target_amount=goal.target_amount,
        current_amount=goal.current_amount,
        remaining=remaining,
        progress=min(100.0, progress),
        months_to_goal=months,
    )


def plan_budget(data: BudgetInput) -> BudgetResult:
    """Summarize a budget: monthly totals, category breakdown, advice and goals."""
    monthly_income = _monthly_total(data.items, BudgetItemType.INCOME)
    monthly_expenses = _monthly_total(data.items, BudgetItemType.EXPENSE)
    monthly_net = monthly_income - monthly_expenses
    categories = expense_categories(data.items)

    return BudgetResult(
        monthly_income=monthly_income,
        monthly_expenses=monthly_expenses,
        monthly_net=monthly_net,
        savings_rate=safe_divide(monthly_net, monthly_income) * 100,
        expense_categories=categories,
        recommendations=recommendations(monthly_income, monthly_net, categories),
        goals=[goal_progress(goal) for goal in data.goals],
    )
