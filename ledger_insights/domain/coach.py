"""Sanitized financial context for the external coaching text generator"""

from typing import Any, Dict, List, Mapping, Optional

from ledger_insights.domain.categories import friendly_category
from ledger_insights.domain.charts import monthly_breakdown
from ledger_insights.domain.models import FinancialAnalysis, PeriodSpending, SubscriptionPattern, Transaction

CLOSE_TO_GOAL_PERCENT = 90
MONTHS_OF_HISTORY = 12


def mask_account_number(account_number: Optional[str]) -> str:
    """Mask an account number down to its last four digits for logging"""
    if not account_number:
        return "N/A"
    if len(account_number) <= 4:
        return "****"
    return "****" + account_number[-4:]


def sanitize_transaction(txn: Transaction) -> Dict[str, Any]:
    """
    Only date, amount, merchant text and friendly category label.

    Transaction and account identifiers and owner names are never included.
    """
    return {
        "date": txn.date.isoformat(),
        "amount": txn.amount,
        "merchant": txn.merchant,
        "category": friendly_category(txn.category),
    }


def goal_progress(target: float, current: float) -> Dict[str, Any]:
    percent_complete = (current / target) * 100 if target > 0 else 0.0
    return {
        "target": target,
        "current": current,
        "remaining": max(0.0, target - current),
        "percent_complete": round(percent_complete, 1),
        "is_close_to_goal": percent_complete >= CLOSE_TO_GOAL_PERCENT,
    }


def build_coach_context(
    analysis: FinancialAnalysis,
    subscriptions: List[SubscriptionPattern],
    transactions: List[Transaction],
    periods: Mapping[str, PeriodSpending],
    savings_goal_target: float,
    user_type: str = "unknown",
    goal_type: str = "general savings",
    transaction_limit: int = 15,
    subscription_limit: int = 10,
) -> Dict[str, Any]:
    """JSON-ready summary of an analysis with all personal identifiers removed"""
    current_balance = analysis.balance.current

    return {
        "user_profile": {
            "type": user_type,
            "savings_goal": {"type": goal_type, "target_amount": savings_goal_target},
        },
        "balance": {"current": current_balance, "trend": analysis.balance.trend},
        "goal_progress": goal_progress(savings_goal_target, current_balance),
        "income": {
            "total": analysis.income.total_income,
            "monthly": analysis.income.average_monthly,
            "pattern": analysis.income.pattern,
            "is_variable": analysis.income.is_variable,
        },
        "spending": {
            "total": analysis.spending.total,
            "top_categories": [
                {"category": c.category, "total": c.total, "percentage": c.percentage}
                for c in analysis.spending.top_categories
            ],
            "daily_average": analysis.spending.daily_average,
        },
        "spending_by_period": {
            key: {
                "period_label": period.period_label,
                "total_spending": period.total,
                "categories": [
                    {"category": c.category, "amount": c.total, "percentage": round(c.percentage, 1)}
                    for c in period.categories[:5]
                ],
            }
            for key, period in periods.items()
        },
        "monthly_breakdown": [
            {
                "month": bucket.month,
                "income": round(bucket.income),
                "spending": round(bucket.spending),
                "net": round(bucket.net),
            }
            for bucket in monthly_breakdown(transactions)[-MONTHS_OF_HISTORY:]
        ],
        "cash_flow_health": {
            "score": analysis.cash_flow_health.score,
            "status": analysis.cash_flow_health.status,
            "message": analysis.cash_flow_health.message,
        },
        "savings_rate": analysis.savings_rate,
        "subscriptions": [
            {
                "merchant_name": sub.merchant_name,
                "amount": sub.amount,
                "frequency": sub.frequency,
                "last_charge": sub.last_charge.isoformat(),
                "estimated_annual_cost": sub.estimated_annual_cost,
                "drift_score": sub.drift_score,
            }
            for sub in subscriptions[:subscription_limit]
        ],
        "recent_transactions": [sanitize_transaction(t) for t in transactions[:transaction_limit]],
    }
