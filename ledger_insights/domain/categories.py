"""Provider category codes mapped to user-facing spending labels"""

from types import MappingProxyType
from typing import Mapping, Optional

from ledger_insights.domain.models import PersonalFinanceCategory

OTHER_CATEGORY = "Other"

FRIENDLY_CATEGORY_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "FOOD_RETAIL": "Groceries",
        "FOOD_AND_DRINK": "Food & Drink",
        "DINING": "Dining",
        "ENTERTAINMENT": "Entertainment",
        "TRANSPORTATION": "Transportation",
        "GENERAL_MERCHANDISE": "Shopping",
        "GENERAL_SERVICES": "Services",
        "RENT_AND_UTILITIES": "Bills & Utilities",
        "MEDICAL": "Healthcare",
        "PERSONAL_CARE": "Personal Care",
        "BANK_FEES": "Fees",
        "TRANSFER_IN": "Income",
        "TRANSFER_OUT": "Transfers",
        "LOAN_PAYMENTS": "Loan Payments",
        "HOME_IMPROVEMENT": "Home & Garden",
        "GOVERNMENT_AND_NON_PROFIT": "Government & Non-Profit",
        "TRAVEL": "Travel",
        "INCOME": "Income",
    }
)

# Streaming services, internet/phone bills, memberships
SUBSCRIPTION_CATEGORIES = frozenset({"ENTERTAINMENT", "RENT_AND_UTILITIES", "GENERAL_SERVICES"})

# Recurring but never a subscription: groceries, restaurants, fuel, retail
NON_SUBSCRIPTION_CATEGORIES = frozenset(
    {
        "FOOD_RETAIL",
        "FOOD_AND_DRINK",
        "DINING",
        "TRANSPORTATION",
        "GENERAL_MERCHANDISE",
        "TRAVEL",
        "MEDICAL",
        "PERSONAL_CARE",
    }
)


def friendly_category(category: Optional[PersonalFinanceCategory]) -> str:
    """
    Map a provider classification to a friendly label.

    Unclassified transactions map to "Other"; unknown primary codes fall back
    to the code itself with underscores replaced by spaces.
    """
    if category is None or not category.primary:
        return OTHER_CATEGORY
    return FRIENDLY_CATEGORY_LABELS.get(category.primary, category.primary.replace("_", " "))


def is_subscription_category(category: Optional[PersonalFinanceCategory]) -> bool:
    if category is None or not category.primary:
        return False
    return category.primary in SUBSCRIPTION_CATEGORIES


def is_non_subscription_category(category: Optional[PersonalFinanceCategory]) -> bool:
    if category is None or not category.primary:
        return False
    return category.primary in NON_SUBSCRIPTION_CATEGORIES
