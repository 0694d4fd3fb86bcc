"""Pytest fixtures for testing"""

from datetime import date, timedelta
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from ledger_insights.api.main import create_app
from ledger_insights.domain.models import PersonalFinanceCategory, Transaction


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def sample_transactions() -> List[Transaction]:
    """Three months of salary, rent, streaming and weekly groceries"""
    base_date = date(2024, 1, 1)
    transactions = []

    # Monthly salary deposits
    for month in range(3):
        transactions.append(
            Transaction(
                transaction_id=f"salary_{month}",
                date=base_date + timedelta(days=month * 30),
                amount=-3000.0,
                merchant="ACME Payroll",
                category=PersonalFinanceCategory("INCOME", "INCOME_WAGES"),
            )
        )

    # Rent and streaming, monthly
    for month in range(3):
        transactions.append(
            Transaction(
                transaction_id=f"rent_{month}",
                date=base_date + timedelta(days=month * 30 + 2),
                amount=1200.0,
                merchant="Parkside Apartments",
                category=PersonalFinanceCategory("RENT_AND_UTILITIES", "RENT_AND_UTILITIES_RENT"),
            )
        )
        transactions.append(
            Transaction(
                transaction_id=f"netflix_{month}",
                date=base_date + timedelta(days=month * 30 + 5),
                amount=15.49,
                merchant="Netflix.com",
                category=PersonalFinanceCategory("ENTERTAINMENT", "ENTERTAINMENT_TV_AND_MOVIES"),
            )
        )

    # Weekly groceries
    for day in range(0, 84, 7):
        transactions.append(
            Transaction(
                transaction_id=f"grocery_{day}",
                date=base_date + timedelta(days=day + 1),
                amount=85.0,
                merchant="Fresh Market",
                category=PersonalFinanceCategory("FOOD_RETAIL", "FOOD_RETAIL_GROCERIES"),
            )
        )

    return transactions


@pytest.fixture
def provider_payload() -> Dict[str, Any]:
    """Provider-shaped request body for the analysis endpoints"""
    base_date = date(2024, 1, 1)
    transactions = []

    for month in range(6):
        transactions.append(
            {
                "transaction_id": f"pay_{month}",
                "date": (base_date + timedelta(days=month * 30)).isoformat(),
                "amount": -2500.0,
                "name": "Employer Direct Deposit",
                "personal_finance_category": {"primary": "INCOME", "detailed": "INCOME_WAGES"},
                "account_id": "acc_secret_123",
            }
        )
        transactions.append(
            {
                "transaction_id": f"spotify_{month}",
                "date": (base_date + timedelta(days=month * 30 + 3)).isoformat(),
                "amount": 10.99,
                "name": "Spotify USA",
                "personal_finance_category": {"primary": "ENTERTAINMENT", "detailed": "ENTERTAINMENT_MUSIC"},
                "account_id": "acc_secret_123",
            }
        )
        transactions.append(
            {
                "transaction_id": f"dinner_{month}",
                "date": (base_date + timedelta(days=month * 30 + 10)).isoformat(),
                "amount": 64.0 + month,
                "name": "Luigi's Trattoria",
                "personal_finance_category": {"primary": "DINING", "detailed": "DINING_RESTAURANT"},
                "account_id": "acc_secret_123",
            }
        )

    return {
        "transactions": transactions,
        "accounts": [
            {
                "account_id": "acc_secret_123",
                "name": "Everyday Checking",
                "type": "depository",
                "subtype": "checking",
                "mask": "0000",
                "balances": {"current": 99999.0, "available": 99999.0, "iso_currency_code": "USD"},
            }
        ],
    }
