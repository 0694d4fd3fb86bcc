"""Chart series derived from the transaction snapshot"""

from typing import Dict, List, Sequence

from ledger_insights.domain.categories import friendly_category
from ledger_insights.domain.models import MonthlyCashFlow, SavingsPoint, Transaction
from ledger_insights.utils.date_utils import month_key

CATEGORY_PALETTE = ("#00FF88", "#00E5FF", "#B24BF3", "#FFD93D", "#FF4757", "#8E8E93", "#48484A")


def assign_category_colors(ranked_categories: Sequence[str]) -> Dict[str, str]:
    """Color per category by spending rank, cycling the palette"""
    return {
        category: CATEGORY_PALETTE[index % len(CATEGORY_PALETTE)]
        for index, category in enumerate(ranked_categories)
    }


def monthly_breakdown(transactions: List[Transaction]) -> List[MonthlyCashFlow]:
    """Income and spending per calendar month, oldest first"""
    months: Dict[str, MonthlyCashFlow] = {}

    for txn in transactions:
        if txn.amount == 0:
            continue

        key = month_key(txn.date)
        bucket = months.get(key)
        if bucket is None:
            bucket = months[key] = MonthlyCashFlow(
                month=key, income=0.0, spending=0.0, net=0.0, income_count=0, spending_by_category={}
            )

        if txn.is_income:
            bucket.income += abs(txn.amount)
            bucket.income_count += 1
        else:
            label = friendly_category(txn.category)
            bucket.spending += txn.amount
            bucket.spending_by_category[label] = bucket.spending_by_category.get(label, 0.0) + txn.amount

    breakdown = [months[key] for key in sorted(months)]
    for bucket in breakdown:
        bucket.net = bucket.income - bucket.spending
    return breakdown


def savings_trend(breakdown: List[MonthlyCashFlow]) -> List[SavingsPoint]:
    """Cumulative net savings per month, floored at zero for display"""
    cumulative = 0.0
    points = []
    for bucket in breakdown:
        cumulative += bucket.income - bucket.spending
        points.append(SavingsPoint(month=bucket.month, savings=max(0.0, cumulative)))
    return points
