"""Domain models - pure Python dataclasses representing financial entities"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from ledger_insights.domain.exceptions import InvalidTransactionDataError


@dataclass(frozen=True)
class PersonalFinanceCategory:
    """Provider classification attached to a transaction"""

    primary: str
    detailed: str = ""
    confidence_level: Optional[str] = None


@dataclass(frozen=True)
class Transaction:
    """
    Normalized bank transaction.

    Sign convention: negative amount = money received, positive = money spent.
    """

    transaction_id: str
    date: date
    amount: float
    merchant: str
    category: Optional[PersonalFinanceCategory] = None
    recurring: Optional[bool] = None
    account_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.transaction_id:
            raise InvalidTransactionDataError("Transaction is missing an identifier")
        if not isinstance(self.date, date):
            raise InvalidTransactionDataError(
                f"Transaction {self.transaction_id}: date must be a calendar day, got {self.date!r}"
            )
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise InvalidTransactionDataError(
                f"Transaction {self.transaction_id}: amount must be numeric, got {self.amount!r}"
            )
        if not isinstance(self.merchant, str):
            raise InvalidTransactionDataError(f"Transaction {self.transaction_id}: merchant must be text")
        if math.isnan(self.amount) or math.isinf(self.amount):
            raise InvalidTransactionDataError(
                f"Transaction {self.transaction_id}: amount must be finite"
            )

    @property
    def is_income(self) -> bool:
        return self.amount < 0

    @property
    def is_spending(self) -> bool:
        return self.amount > 0


@dataclass(frozen=True)
class Account:
    """Bank account metadata. The reported balance is never used for analysis."""

    account_id: str
    name: str
    type: str = "depository"
    subtype: Optional[str] = None
    mask: Optional[str] = None
    current_balance: Optional[float] = None
    available_balance: Optional[float] = None
    iso_currency_code: Optional[str] = None


@dataclass(frozen=True)
class LastPaycheck:
    amount: float
    date: date


@dataclass
class IncomeAnalysis:
    """Income totals, stability and pay cadence"""

    total_income: float
    average_monthly: float
    is_variable: bool
    variability: float
    pattern: str  # weekly | biweekly | monthly | irregular
    last_paycheck: Optional[LastPaycheck]
    income_transactions: List[Transaction]


@dataclass
class CategorySpending:
    """Spending rolled up under one friendly category"""

    category: str
    total: float
    count: int
    average: float
    percentage: float
    trend: str  # increasing | decreasing | stable
    transactions: List[Transaction]


@dataclass
class CashFlowHealth:
    score: int  # 0-100
    status: str  # healthy | warning | critical
    message: str
    income_to_spending_ratio: float


@dataclass
class SubscriptionPattern:
    """Recurring charge inferred from a merchant's history"""

    merchant_name: str
    amount: float
    frequency: str  # weekly | monthly | annual | irregular
    transaction_ids: List[str]
    last_charge: date
    estimated_annual_cost: float
    drift_score: float  # coefficient of variation x 100
    average_amount: float
    standard_deviation: float


@dataclass
class SpendingInsight:
    type: str  # high_spending | subscription | cash_flow | positive | goal
    title: str
    description: str
    impact: str
    actionable: List[str]
    severity: str  # info | warning | critical


@dataclass
class SpendingSummary:
    total: float
    by_category: List[CategorySpending]
    top_categories: List[CategorySpending]
    daily_average: float


@dataclass
class BalanceSummary:
    current: float
    trend: str = "stable"


@dataclass
class FinancialAnalysis:
    """Output of a full analysis run"""

    income: IncomeAnalysis
    spending: SpendingSummary
    balance: BalanceSummary
    cash_flow_health: CashFlowHealth
    insights: List[SpendingInsight]
    savings_rate: float
    category_colors: Dict[str, str] = field(default_factory=dict)
    account_count: int = 0


@dataclass
class PeriodSpending:
    """Spending restricted to a trailing window of N months"""

    months: int
    period_label: str
    total: float
    categories: List[CategorySpending]
    subscription_total: float


@dataclass
class MonthlyCashFlow:
    month: str  # YYYY-MM
    income: float
    spending: float
    net: float
    income_count: int
    spending_by_category: Dict[str, float]


@dataclass
class SavingsPoint:
    month: str
    savings: float
