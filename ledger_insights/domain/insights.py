"""Rule-based insight generation"""

from datetime import date
from typing import List, Optional

from ledger_insights.domain.models import CategorySpending, IncomeAnalysis, SpendingInsight, Transaction
from ledger_insights.domain.spending import total_spending
from ledger_insights.utils.statistics import round_half_up

HIGH_SPENDING_SHARE = 30
HIGH_SPENDING_REDUCTION = 0.2
LOW_BALANCE_SHARE = 0.5
PAYCHECK_GRACE_DAYS = 7
GOOD_SAVINGS_RATE = 10


def savings_rate(total_income: float, total_spent: float) -> float:
    """Percent of income not spent, 0 when there is no income"""
    if total_income <= 0:
        return 0.0
    return ((total_income - total_spent) / total_income) * 100


def _high_spending_insight(categories: List[CategorySpending]) -> Optional[SpendingInsight]:
    if not categories or categories[0].percentage <= HIGH_SPENDING_SHARE:
        return None

    top = categories[0]
    return SpendingInsight(
        type="high_spending",
        title=f"High {top.category} Spending",
        description=(
            f"You spent ${top.total:.2f} on {top.category} "
            f"({round_half_up(top.percentage)}% of total spending)."
        ),
        impact=f"Reducing this by 20% could save you ${top.total * HIGH_SPENDING_REDUCTION:.2f} per month.",
        actionable=[
            "Review recent transactions in this category",
            "Look for patterns or unnecessary expenses",
            "Set a monthly budget for this category",
        ],
        severity="warning",
    )


def _cash_flow_timing_insight(income: IncomeAnalysis, balance: float, as_of: date) -> Optional[SpendingInsight]:
    paycheck = income.last_paycheck
    if paycheck is None or balance >= income.average_monthly * LOW_BALANCE_SHARE:
        return None

    if (as_of - paycheck.date).days <= PAYCHECK_GRACE_DAYS:
        return None

    return SpendingInsight(
        type="cash_flow",
        title="Cash Flow Timing Gap",
        description="Your balance is low relative to your monthly income pattern.",
        impact=(
            f"Building a buffer equal to one paycheck (${paycheck.amount:.2f}) "
            "would eliminate timing stress."
        ),
        actionable=[
            "Transfer a small amount each week to a buffer account",
            "Adjust bill due dates if possible",
            "Consider income-based spending tracking",
        ],
        severity="warning",
    )


def _savings_insight(transactions: List[Transaction], income: IncomeAnalysis) -> Optional[SpendingInsight]:
    if income.average_monthly <= 0:
        return None

    rate = savings_rate(income.total_income, total_spending(transactions))
    if rate <= GOOD_SAVINGS_RATE:
        return None

    projected = income.average_monthly * (rate / 100) * 12
    return SpendingInsight(
        type="positive",
        title="Great Savings Rate!",
        description=f"You're saving {round_half_up(rate)}% of your income. That's excellent!",
        impact=f"At this rate, you'll save ${projected:.2f} this year.",
        actionable=[
            "Keep up this momentum",
            "Consider automating savings",
            "Set a specific savings goal to stay motivated",
        ],
        severity="info",
    )


def generate_insights(
    transactions: List[Transaction],
    income: IncomeAnalysis,
    categories: List[CategorySpending],
    balance: float,
    as_of: Optional[date] = None,
) -> List[SpendingInsight]:
    """
    Evaluate each insight rule once, in a fixed order:
    high spending category, cash flow timing gap, positive savings rate.

    as_of anchors "days since last paycheck" and defaults to the latest
    transaction date, keeping the output a pure function of the data.
    """
    if as_of is None and transactions:
        as_of = max(t.date for t in transactions)

    candidates = [_high_spending_insight(categories)]
    if as_of is not None:
        candidates.append(_cash_flow_timing_insight(income, balance, as_of))
    candidates.append(_savings_insight(transactions, income))

    return [insight for insight in candidates if insight is not None]
