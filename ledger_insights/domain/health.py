"""Cash flow health scoring - 0-100 composite of income, buffer and stability"""

import math
from typing import Tuple

from ledger_insights.domain.income import income_month_span
from ledger_insights.domain.models import CashFlowHealth, IncomeAnalysis
from ledger_insights.utils.statistics import round_half_up

HEALTHY = "healthy"
WARNING = "warning"
CRITICAL = "critical"

BASE_SCORE = 50
NEGATIVE_BALANCE_CEILING = 35

HEALTHY_MESSAGE = "Your finances are in good shape. Keep up the good habits!"
WARNING_MESSAGE = "Your cash flow needs attention. Consider building a buffer and reducing expenses."
CRITICAL_MESSAGE = "Your finances need immediate attention. Focus on increasing income and reducing expenses."


def _safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator; a positive amount over zero is unbounded, 0/0 is 0"""
    if denominator > 0:
        return numerator / denominator
    return math.inf if numerator > 0 else 0.0


def income_ratio_points(ratio: float) -> int:
    """Up to 40 points for income covering spending"""
    if ratio >= 1.5:
        return 40
    elif ratio >= 1.2:
        return 30
    elif ratio >= 1.0:
        return 20
    elif ratio >= 0.8:
        return 10
    return 0


def balance_buffer_points(months_covered: float) -> int:
    """Up to 30 points for balance relative to monthly spending"""
    if months_covered >= 2:
        return 30
    elif months_covered >= 1:
        return 20
    elif months_covered >= 0.5:
        return 10
    return 0


def stability_points(income: IncomeAnalysis) -> int:
    """Up to 20 points, fewer the more variable the income"""
    if not income.is_variable:
        return 20
    elif income.variability < 0.3:
        return 15
    elif income.variability < 0.5:
        return 10
    return 5


def status_for_score(score: int) -> Tuple[str, str]:
    """Map score to (status, message)"""
    if score >= 75:
        return HEALTHY, HEALTHY_MESSAGE
    elif score >= 50:
        return WARNING, WARNING_MESSAGE
    return CRITICAL, CRITICAL_MESSAGE


def score_cash_flow_health(income: IncomeAnalysis, total_spending: float, balance: float) -> CashFlowHealth:
    """
    Score cash flow health from income, total spending and the computed balance.

    The balance passed in must be income minus spending from the same
    transaction snapshot, never a provider-reported balance.

    Scoring:
    - Negative balance: forced critical, score = clamp(0, 35, 35 - |balance| / 100)
    - Otherwise 50 base + income ratio (40) + balance buffer (30) + stability (20),
      clamped to [0, 100]
    """
    monthly_income = income.average_monthly
    monthly_spending = total_spending / max(1.0, income_month_span(income.income_transactions))

    income_to_spending_ratio = _safe_ratio(monthly_income, monthly_spending) if monthly_income > 0 else 0.0

    if balance < 0:
        deficit = abs(balance)
        score = round_half_up(max(0.0, min(float(NEGATIVE_BALANCE_CEILING), NEGATIVE_BALANCE_CEILING - deficit / 100)))
        return CashFlowHealth(
            score=score,
            status=CRITICAL,
            message=(
                f"You're currently in the red with a negative balance of ${deficit:.2f}. "
                "Focus on reducing spending and increasing income immediately."
            ),
            income_to_spending_ratio=income_to_spending_ratio,
        )

    score = BASE_SCORE
    score += income_ratio_points(income_to_spending_ratio)
    score += balance_buffer_points(_safe_ratio(balance, monthly_spending))
    score += stability_points(income)
    score = min(100, max(0, score))

    status, message = status_for_score(score)

    return CashFlowHealth(
        score=score,
        status=status,
        message=message,
        income_to_spending_ratio=income_to_spending_ratio,
    )
