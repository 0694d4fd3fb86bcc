"""Trailing-window (horizon) spending views"""

from datetime import date
from typing import Dict, List, Optional, Sequence

from ledger_insights.domain.models import PeriodSpending, Transaction
from ledger_insights.domain.spending import aggregate_category_spending
from ledger_insights.domain.subscriptions import detect_subscriptions
from ledger_insights.utils.date_utils import subtract_months

DEFAULT_HORIZONS = (3, 6, 12)


def period_label(months: int) -> str:
    return f"Last {months} month{'s' if months > 1 else ''}"


def horizon_key(months: int) -> str:
    return f"{months}M"


def resolve_as_of(transactions: List[Transaction], as_of: Optional[date] = None) -> Optional[date]:
    """Explicit reference date, else the latest transaction date"""
    if as_of is not None:
        return as_of
    return max((t.date for t in transactions), default=None)


def transactions_between(transactions: List[Transaction], start: date, end: date) -> List[Transaction]:
    """Transactions dated within [start, end], both ends inclusive"""
    return [t for t in transactions if start <= t.date <= end]


def period_spending(
    transactions: List[Transaction],
    months: int,
    as_of: Optional[date] = None,
    limit: Optional[int] = None,
    subscription_ids: Optional[frozenset] = None,
) -> PeriodSpending:
    """
    Recompute category spending for the trailing `months` window ending at as_of.

    Transactions dated after as_of are outside every window.

    subscription_total sums in-window charges that belong to subscriptions
    detected over the full history; pass subscription_ids to reuse a detection
    already run by the caller.
    """
    if months < 1:
        raise ValueError(f"months must be a positive integer, got {months}")

    reference = resolve_as_of(transactions, as_of)
    window = transactions_between(transactions, subtract_months(reference, months), reference) if reference else []

    categories = aggregate_category_spending(window)
    total = sum(c.total for c in categories)

    if subscription_ids is None:
        subscription_ids = frozenset(
            txn_id for pattern in detect_subscriptions(transactions) for txn_id in pattern.transaction_ids
        )
    subscription_total = sum(t.amount for t in window if t.is_spending and t.transaction_id in subscription_ids)

    return PeriodSpending(
        months=months,
        period_label=period_label(months),
        total=total,
        categories=categories[:limit] if limit is not None else categories,
        subscription_total=subscription_total,
    )


def spending_by_period(
    transactions: List[Transaction],
    horizons: Sequence[int] = DEFAULT_HORIZONS,
    as_of: Optional[date] = None,
    limit: Optional[int] = None,
) -> Dict[str, PeriodSpending]:
    """Period views keyed "3M", "6M", "12M" in horizon order"""
    reference = resolve_as_of(transactions, as_of)
    subscription_ids = frozenset(
        txn_id for pattern in detect_subscriptions(transactions) for txn_id in pattern.transaction_ids
    )
    return {
        horizon_key(months): period_spending(
            transactions, months, as_of=reference, limit=limit, subscription_ids=subscription_ids
        )
        for months in horizons
    }
