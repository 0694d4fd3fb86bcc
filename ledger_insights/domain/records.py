"""Conversion of raw provider records into domain objects"""

from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional

from ledger_insights.domain.exceptions import InvalidAccountDataError, InvalidTransactionDataError
from ledger_insights.domain.models import Account, PersonalFinanceCategory, Transaction


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _parse_category(raw: Optional[Mapping[str, Any]]) -> Optional[PersonalFinanceCategory]:
    if not raw or not raw.get("primary"):
        return None
    return PersonalFinanceCategory(
        primary=raw["primary"],
        detailed=raw.get("detailed") or "",
        confidence_level=raw.get("confidence_level"),
    )


def transaction_from_provider(raw: Mapping[str, Any], index: Optional[int] = None) -> Transaction:
    """
    Build a Transaction from a provider record.

    Expected keys: transaction_id, date (YYYY-MM-DD), amount, name; optional
    personal_finance_category {primary, detailed, confidence_level},
    recurring and account_id.

    Raises:
        InvalidTransactionDataError: naming the offending record
    """
    record = raw.get("transaction_id") if isinstance(raw, Mapping) else None
    label = record or (f"#{index}" if index is not None else "<unknown>")

    try:
        amount = raw["amount"]
        if isinstance(amount, str):
            amount = float(amount)
        return Transaction(
            transaction_id=raw["transaction_id"],
            date=_parse_date(raw["date"]),
            amount=amount,
            merchant=raw["name"],
            category=_parse_category(raw.get("personal_finance_category")),
            recurring=raw.get("recurring"),
            account_id=raw.get("account_id"),
        )
    except InvalidTransactionDataError:
        raise
    except KeyError as e:
        raise InvalidTransactionDataError(f"Transaction {label}: missing required field {e}") from e
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidTransactionDataError(f"Transaction {label}: {e}") from e


def transactions_from_provider(records: List[Mapping[str, Any]]) -> List[Transaction]:
    return [transaction_from_provider(raw, index=i) for i, raw in enumerate(records)]


def account_from_provider(raw: Mapping[str, Any]) -> Account:
    """Build an Account from a provider record (balances nested under "balances")"""
    try:
        balances: Dict[str, Any] = raw.get("balances") or {}
        return Account(
            account_id=raw["account_id"],
            name=raw.get("name") or "",
            type=raw.get("type") or "depository",
            subtype=raw.get("subtype"),
            mask=raw.get("mask"),
            current_balance=balances.get("current"),
            available_balance=balances.get("available"),
            iso_currency_code=balances.get("iso_currency_code"),
        )
    except KeyError as e:
        raise InvalidAccountDataError(f"Account record missing required field {e}") from e
    except (TypeError, AttributeError) as e:
        raise InvalidAccountDataError(f"Invalid account record: {e}") from e
