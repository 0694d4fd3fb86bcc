"""Unit tests for subscription detection and drift scoring"""

from datetime import date, timedelta
from typing import List, Optional

import pytest

from ledger_insights.domain.models import PersonalFinanceCategory, Transaction
from ledger_insights.domain.subscriptions import detect_subscriptions, estimate_annual_cost


def charges(
    prefix: str,
    merchant: str,
    amounts: List[float],
    gaps: List[int],
    primary: Optional[str] = None,
    recurring: Optional[bool] = None,
    start: date = date(2024, 1, 5),
) -> List[Transaction]:
    """Build a merchant's charge history from amounts and day gaps"""
    category = PersonalFinanceCategory(primary) if primary else None
    days = [start]
    for gap in gaps:
        days.append(days[-1] + timedelta(days=gap))
    return [
        Transaction(f"{prefix}_{i}", day, amount, merchant, category=category, recurring=recurring)
        for i, (day, amount) in enumerate(zip(days, amounts))
    ]


def test_monthly_netflix_subscription():
    """Six identical $15 monthly charges -> one stable subscription"""
    transactions = charges("nf", "Netflix", [15.0] * 6, [30] * 5, primary="ENTERTAINMENT")
    subscriptions = detect_subscriptions(transactions)

    assert len(subscriptions) == 1
    netflix = subscriptions[0]
    assert netflix.merchant_name == "netflix"
    assert netflix.frequency == "monthly"
    assert netflix.drift_score == 0
    assert netflix.estimated_annual_cost == 180
    assert netflix.amount == 15
    assert netflix.standard_deviation == 0
    assert netflix.transaction_ids == [f"nf_{i}" for i in range(6)]
    assert netflix.last_charge == date(2024, 1, 5) + timedelta(days=150)


def test_excluded_category_wins_over_drift():
    """Grocery charges are never subscriptions"""
    transactions = charges("g", "Corner Grocer", [50.0, 52.0, 48.0], [10, 40], primary="FOOD_RETAIL")
    assert detect_subscriptions(transactions) == []


def test_excluded_category_checked_on_earliest_charge():
    history = charges("x", "Local Club", [20.0] * 3, [30, 30], primary="ENTERTAINMENT")
    earliest = Transaction(
        "x_first", date(2023, 12, 6), 20.0, "Local Club", category=PersonalFinanceCategory("DINING")
    )
    assert detect_subscriptions(history + [earliest]) == []


def test_single_charge_is_never_a_subscription():
    assert detect_subscriptions(charges("one", "Hulu", [7.99], [], primary="ENTERTAINMENT")) == []


def test_blocklisted_merchant_is_skipped():
    transactions = charges("u", "Uber Trip", [25.0] * 4, [30] * 3)
    assert detect_subscriptions(transactions) == []


def test_weekly_needs_flag_or_category():
    plain = charges("w", "Meal Kit Co", [60.0] * 4, [7] * 3)
    assert detect_subscriptions(plain) == []

    flagged = charges("w", "Meal Kit Co", [60.0] * 4, [7] * 3, recurring=True)
    subscriptions = detect_subscriptions(flagged)
    assert len(subscriptions) == 1
    assert subscriptions[0].frequency == "weekly"
    assert subscriptions[0].estimated_annual_cost == 60 * 52


def test_biweekly_charges_are_irregular():
    transactions = charges("b", "Cleaning Service", [80.0] * 4, [14] * 3, primary="GENERAL_SERVICES")
    assert detect_subscriptions(transactions) == []


def test_annual_subscription():
    transactions = charges("a", "Adobe Creative Cloud", [99.0, 99.0], [365])
    subscriptions = detect_subscriptions(transactions)

    assert len(subscriptions) == 1
    assert subscriptions[0].merchant_name == "adobe creative"
    assert subscriptions[0].frequency == "annual"
    assert subscriptions[0].estimated_annual_cost == 99


def test_high_drift_is_variable_spending():
    transactions = charges("v", "Power Company", [10.0, 30.0, 50.0], [30, 30], primary="RENT_AND_UTILITIES")
    assert detect_subscriptions(transactions) == []


def test_sorted_by_drift_highest_first():
    transactions = charges("nf", "Netflix", [15.0] * 3, [30, 30], primary="ENTERTAINMENT") + charges(
        "gym", "Gym Membership", [40.0, 40.0, 44.0], [31, 30], primary="GENERAL_SERVICES"
    )
    subscriptions = detect_subscriptions(transactions)

    assert [s.merchant_name for s in subscriptions] == ["gym membership", "netflix"]
    assert subscriptions[0].drift_score == pytest.approx(4.56, abs=0.01)
    assert subscriptions[0].drift_score == round(subscriptions[0].drift_score, 2)


def test_merchant_variants_group_together():
    transactions = [
        Transaction("1", date(2024, 1, 3), 9.99, "SPOTIFY USA"),
        Transaction("2", date(2024, 2, 3), 9.99, "Spotify USA *Premium"),
        Transaction("3", date(2024, 3, 3), 9.99, "spotify   usa"),
    ]
    subscriptions = detect_subscriptions(transactions)
    assert len(subscriptions) == 1
    assert subscriptions[0].transaction_ids == ["1", "2", "3"]


def test_income_and_zero_amounts_ignored():
    transactions = charges("r", "Refund Center", [-15.0] * 3, [30, 30]) + charges(
        "z", "Zero Charge", [0.0] * 3, [30, 30]
    )
    assert detect_subscriptions(transactions) == []


@pytest.mark.parametrize("merchants", [1, 3, 8])
def test_invariants_hold(merchants):
    transactions = []
    for m in range(merchants):
        amounts = [20.0 + m * k for k in range(4)]
        transactions += charges(f"m{m}", f"Service {m}", amounts, [30] * 3, primary="GENERAL_SERVICES")

    for subscription in detect_subscriptions(transactions):
        assert len(subscription.transaction_ids) >= 2
        assert subscription.drift_score <= 30


def test_estimate_annual_cost():
    assert estimate_annual_cost(10, "weekly") == 520
    assert estimate_annual_cost(10, "monthly") == 120
    assert estimate_annual_cost(10, "annual") == 10
    assert estimate_annual_cost(10, "irregular") == 0


def test_drift_rounds_half_cents_up():
    """$799 and $801 give a raw drift of 0.125, reported as 0.13"""
    transactions = charges("tv", "Streaming Plus", [799.0, 801.0], [30], primary="ENTERTAINMENT")

    [subscription] = detect_subscriptions(transactions)

    assert subscription.drift_score == 0.13
