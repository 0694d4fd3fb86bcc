"""Category spending aggregation"""

from typing import Dict, List

from ledger_insights.domain.categories import friendly_category
from ledger_insights.domain.models import CategorySpending, Transaction


def spending_transactions(transactions: List[Transaction]) -> List[Transaction]:
    """All money spent (strictly positive amounts), in input order"""
    return [t for t in transactions if t.is_spending]


def total_spending(transactions: List[Transaction]) -> float:
    return sum(t.amount for t in spending_transactions(transactions))


def aggregate_category_spending(transactions: List[Transaction]) -> List[CategorySpending]:
    """
    Group outgoing transactions by friendly category.

    Sorted by total descending; equal totals keep first-seen category order.
    """
    outgoing = spending_transactions(transactions)

    groups: Dict[str, List[Transaction]] = {}
    for txn in outgoing:
        groups.setdefault(friendly_category(txn.category), []).append(txn)

    grand_total = sum(t.amount for t in outgoing)

    categories = []
    for label, members in groups.items():
        total = sum(t.amount for t in members)
        count = len(members)
        categories.append(
            CategorySpending(
                category=label,
                total=total,
                count=count,
                average=total / count,
                percentage=(total / grand_total) * 100 if grand_total > 0 else 0.0,
                trend="stable",
                transactions=members,
            )
        )

    return sorted(categories, key=lambda c: c.total, reverse=True)
