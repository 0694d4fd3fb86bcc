"""Financial analysis entry point - composes income, spending, health and insights"""

import logging
from datetime import date
from typing import List, Optional, Sequence

from ledger_insights.domain.charts import assign_category_colors
from ledger_insights.domain.health import score_cash_flow_health
from ledger_insights.domain.income import detect_income
from ledger_insights.domain.insights import generate_insights, savings_rate
from ledger_insights.domain.models import (
    Account,
    BalanceSummary,
    FinancialAnalysis,
    SpendingSummary,
    Transaction,
)
from ledger_insights.domain.spending import aggregate_category_spending, total_spending
from ledger_insights.utils.date_utils import day_span

logger = logging.getLogger(__name__)

TOP_CATEGORY_COUNT = 7


def analyze_finances(
    transactions: List[Transaction],
    accounts: Sequence[Account] = (),
    as_of: Optional[date] = None,
    top_category_count: int = TOP_CATEGORY_COUNT,
) -> FinancialAnalysis:
    """
    Run the full analysis over one transaction snapshot.

    Flow:
    1. Detect income and aggregate category spending (independent)
    2. Balance = total income - total spending (provider balances ignored)
    3. Score cash flow health
    4. Generate insights
    5. Rank categories, assign chart colors

    Accounts contribute metadata only.
    """
    income = detect_income(transactions)
    categories = aggregate_category_spending(transactions)

    spent = total_spending(transactions)
    current_balance = income.total_income - spent

    cash_flow_health = score_cash_flow_health(income, spent, current_balance)
    insights = generate_insights(transactions, income, categories, current_balance, as_of=as_of)

    top_categories = categories[:top_category_count]
    daily_average = spent / max(1, day_span([t.date for t in transactions]))

    logger.debug(
        "Analyzed %d transactions: income=%.2f spending=%.2f health=%s",
        len(transactions),
        income.total_income,
        spent,
        cash_flow_health.status,
    )

    return FinancialAnalysis(
        income=income,
        spending=SpendingSummary(
            total=spent,
            by_category=categories,
            top_categories=top_categories,
            daily_average=daily_average,
        ),
        balance=BalanceSummary(current=current_balance, trend="stable"),
        cash_flow_health=cash_flow_health,
        insights=insights,
        savings_rate=savings_rate(income.total_income, spent),
        category_colors=assign_category_colors([c.category for c in top_categories]),
        account_count=len(accounts),
    )
