"""Unit tests for the composed financial analysis"""

import random
from dataclasses import asdict
from datetime import date, timedelta

import pytest

from ledger_insights.domain.analysis import analyze_finances
from ledger_insights.domain.models import Account, PersonalFinanceCategory, Transaction
from ledger_insights.domain.subscriptions import detect_subscriptions


def test_reference_example():
    """Two $2000 deposits a month apart and one $500 dinner"""
    transactions = [
        Transaction("1", date(2024, 1, 1), -2000.0, "Employer"),
        Transaction("2", date(2024, 2, 1), -2000.0, "Employer"),
        Transaction("3", date(2024, 1, 15), 500.0, "Bistro", category=PersonalFinanceCategory("DINING")),
    ]
    analysis = analyze_finances(transactions)

    assert analysis.income.total_income == 4000
    assert analysis.income.average_monthly == pytest.approx(3870.97, abs=0.01)
    assert analysis.spending.total == 500
    assert analysis.balance.current == 3500
    assert analysis.cash_flow_health.score >= 75
    assert analysis.cash_flow_health.status == "healthy"
    assert analysis.savings_rate == pytest.approx(87.5)
    assert detect_subscriptions(transactions) == []


def test_provider_balance_is_ignored(sample_transactions):
    rich = [Account("acc_1", "Checking", current_balance=1_000_000.0)]
    broke = [Account("acc_1", "Checking", current_balance=-50.0)]

    with_rich = analyze_finances(sample_transactions, rich)
    with_broke = analyze_finances(sample_transactions, broke)

    assert with_rich.balance.current == with_broke.balance.current
    assert with_rich.balance.current == pytest.approx(9000 - 3 * 1200 - 3 * 15.49 - 12 * 85)
    assert with_rich.account_count == 1


def test_top_categories_and_colors(sample_transactions):
    analysis = analyze_finances(sample_transactions)

    ranked = [c.category for c in analysis.spending.by_category]
    assert ranked == ["Bills & Utilities", "Groceries", "Entertainment"]
    assert [c.category for c in analysis.spending.top_categories] == ranked
    assert list(analysis.category_colors) == ranked


def test_daily_average_uses_full_date_span(sample_transactions):
    analysis = analyze_finances(sample_transactions)
    dates = [t.date for t in sample_transactions]
    span = (max(dates) - min(dates)).days

    assert analysis.spending.daily_average == pytest.approx(analysis.spending.total / span)


def test_empty_snapshot():
    analysis = analyze_finances([])

    assert analysis.income.total_income == 0
    assert analysis.spending.total == 0
    assert analysis.balance.current == 0
    assert analysis.insights == []
    assert analysis.savings_rate == 0


def test_income_and_spending_partition_transactions():
    rng = random.Random(7)
    start = date(2024, 1, 1)
    transactions = [
        Transaction(str(i), start + timedelta(days=rng.randint(0, 200)), rng.choice([-1, 0, 1]) * rng.uniform(1, 900), "M")
        for i in range(300)
    ]
    analysis = analyze_finances(transactions)

    income_ids = {t.transaction_id for t in analysis.income.income_transactions}
    spending_ids = {t.transaction_id for c in analysis.spending.by_category for t in c.transactions}
    zero_ids = {t.transaction_id for t in transactions if t.amount == 0}

    assert income_ids.isdisjoint(spending_ids)
    assert income_ids | spending_ids | zero_ids == {t.transaction_id for t in transactions}
    assert analysis.income.total_income == pytest.approx(sum(-t.amount for t in transactions if t.amount < 0))
    assert sum(c.total for c in analysis.spending.by_category) == pytest.approx(
        sum(t.amount for t in transactions if t.amount > 0)
    )


def test_analysis_is_idempotent(sample_transactions):
    first = analyze_finances(sample_transactions)
    second = analyze_finances(list(sample_transactions))

    assert asdict(first) == asdict(second)


def test_negative_balance_is_critical():
    transactions = [
        Transaction("pay", date(2024, 1, 1), -1000.0, "Employer"),
        Transaction("rent", date(2024, 1, 2), 1800.0, "Landlord", category=PersonalFinanceCategory("RENT_AND_UTILITIES")),
    ]
    health = analyze_finances(transactions).cash_flow_health

    assert health.status == "critical"
    assert health.score == 27
