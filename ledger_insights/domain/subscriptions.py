"""Subscription detection and price drift scoring"""

import logging
from typing import Dict, List, Optional

from ledger_insights.domain.cadence import ANNUAL, IRREGULAR, MONTHLY, WEEKLY, classify_charge_cadence
from ledger_insights.domain.categories import is_non_subscription_category, is_subscription_category
from ledger_insights.domain.merchants import is_blocklisted_merchant, normalize_merchant_name
from ledger_insights.domain.models import SubscriptionPattern, Transaction
from ledger_insights.domain.spending import spending_transactions
from ledger_insights.utils.statistics import mean_and_std, round_half_up_cents

logger = logging.getLogger(__name__)

MIN_CHARGES = 2
MAX_DRIFT_SCORE = 30.0

ANNUALIZATION_FACTORS = {
    WEEKLY: 52,
    MONTHLY: 12,
    ANNUAL: 1,
    IRREGULAR: 0,
}


def group_by_merchant(transactions: List[Transaction]) -> Dict[str, List[Transaction]]:
    """Outgoing transactions keyed by normalized merchant name"""
    groups: Dict[str, List[Transaction]] = {}
    for txn in spending_transactions(transactions):
        groups.setdefault(normalize_merchant_name(txn.merchant), []).append(txn)
    return groups


def estimate_annual_cost(average_amount: float, frequency: str) -> float:
    return average_amount * ANNUALIZATION_FACTORS[frequency]


def _analyze_merchant(merchant: str, charges: List[Transaction]) -> Optional[SubscriptionPattern]:
    """Return a pattern when a merchant's charges qualify as a subscription"""
    if len(charges) < MIN_CHARGES:
        return None

    ordered = sorted(charges, key=lambda t: t.date)
    first = ordered[0]

    if is_non_subscription_category(first.category):
        logger.debug("Skipping %s: excluded category %s", merchant, first.category.primary)
        return None

    if is_blocklisted_merchant(merchant):
        logger.debug("Skipping %s: non-subscription merchant", merchant)
        return None

    frequency = classify_charge_cadence([t.date for t in ordered])
    if frequency == IRREGULAR:
        return None

    # Weekly cadence alone is routine spending; it needs a flag or category
    if not (
        frequency in (MONTHLY, ANNUAL)
        or first.recurring is True
        or is_subscription_category(first.category)
    ):
        return None

    average_amount, std_dev = mean_and_std([t.amount for t in ordered])
    drift_score = (std_dev / average_amount) * 100 if average_amount > 0 else 0.0

    if drift_score > MAX_DRIFT_SCORE:
        logger.debug("Skipping %s: drift %.2f exceeds %.0f", merchant, drift_score, MAX_DRIFT_SCORE)
        return None

    return SubscriptionPattern(
        merchant_name=merchant,
        amount=average_amount,
        frequency=frequency,
        transaction_ids=[t.transaction_id for t in ordered],
        last_charge=ordered[-1].date,
        estimated_annual_cost=estimate_annual_cost(average_amount, frequency),
        drift_score=round_half_up_cents(drift_score),
        average_amount=average_amount,
        standard_deviation=std_dev,
    )


def detect_subscriptions(transactions: List[Transaction]) -> List[SubscriptionPattern]:
    """
    Detect recurring charges and score their price drift.

    Algorithm:
    1. Group outgoing transactions by normalized merchant (2+ charges required)
    2. Drop groups whose earliest charge is in a non-subscription category
       (groceries, dining, transport, retail, travel, medical, personal care)
    3. Drop well-known non-subscription brands (fast food, big box, fuel, pharmacy)
    4. Classify cadence; keep monthly/annual, or weekly with a recurring flag
       or subscription category
    5. drift = stddev / mean x 100; anything above 30 is variable spending

    Returns patterns ordered by drift score, least stable first.
    """
    patterns = []
    for merchant, charges in group_by_merchant(transactions).items():
        pattern = _analyze_merchant(merchant, charges)
        if pattern is not None:
            patterns.append(pattern)

    return sorted(patterns, key=lambda p: p.drift_score, reverse=True)
