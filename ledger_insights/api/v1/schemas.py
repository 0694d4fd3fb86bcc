"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ledger_insights.domain.models import Account, Transaction
from ledger_insights.domain.records import account_from_provider, transactions_from_provider

# ---------------------------------------------------------------------------
# Requests (provider-shaped records)
# ---------------------------------------------------------------------------


class CategorySchema(BaseModel):
    """Provider personal finance category"""

    primary: str
    detailed: str = ""
    confidence_level: Optional[str] = None


class TransactionSchema(BaseModel):
    """Transaction as delivered by the banking data provider"""

    transaction_id: str = Field(..., min_length=1)
    date: date
    amount: float = Field(..., description="Negative = money in, positive = money out")
    name: str
    personal_finance_category: Optional[CategorySchema] = None
    recurring: Optional[bool] = None
    account_id: Optional[str] = None


class BalancesSchema(BaseModel):
    current: Optional[float] = None
    available: Optional[float] = None
    iso_currency_code: Optional[str] = None


class AccountSchema(BaseModel):
    account_id: str = Field(..., min_length=1)
    name: str = ""
    type: str = "depository"
    subtype: Optional[str] = None
    mask: Optional[str] = None
    balances: Optional[BalancesSchema] = None

    def to_domain(self) -> Account:
        return account_from_provider(self.model_dump())


class TransactionsRequest(BaseModel):
    """Request body carrying a transaction snapshot"""

    transactions: List[TransactionSchema]

    def domain_transactions(self) -> List[Transaction]:
        return transactions_from_provider([txn.model_dump() for txn in self.transactions])


class AnalysisRequest(TransactionsRequest):
    """Request body for POST /v1/analysis"""

    accounts: List[AccountSchema] = []
    as_of: Optional[date] = Field(None, description="Reference date, defaults to the latest transaction")
    horizons: Optional[List[int]] = Field(None, description="Trailing windows in months")

    def domain_accounts(self) -> List[Account]:
        return [account.to_domain() for account in self.accounts]


class CoachContextRequest(AnalysisRequest):
    """Request body for POST /v1/coach/context"""

    user_type: str = "unknown"
    goal_type: str = "general savings"
    savings_goal_target: Optional[float] = Field(None, gt=0)


# ---------------------------------------------------------------------------
# Responses (built from domain dataclasses)
# ---------------------------------------------------------------------------


class DomainModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class CategoryOut(DomainModel):
    primary: str
    detailed: str
    confidence_level: Optional[str] = None


class TransactionOut(DomainModel):
    """Transaction echo without account identifiers"""

    transaction_id: str
    date: date
    amount: float
    merchant: str
    category: Optional[CategoryOut] = None
    recurring: Optional[bool] = None


class SanitizedTransactionOut(BaseModel):
    date: str
    amount: float
    merchant: str
    category: str


class LastPaycheckOut(DomainModel):
    amount: float
    date: date


class IncomeAnalysisOut(DomainModel):
    total_income: float
    average_monthly: float
    is_variable: bool
    variability: float
    pattern: str
    last_paycheck: Optional[LastPaycheckOut] = None
    income_transactions: List[TransactionOut]


class CategorySpendingOut(DomainModel):
    category: str
    total: float
    count: int
    average: float
    percentage: float
    trend: str
    transactions: List[TransactionOut]


class SpendingSummaryOut(DomainModel):
    total: float
    by_category: List[CategorySpendingOut]
    top_categories: List[CategorySpendingOut]
    daily_average: float


class BalanceOut(DomainModel):
    current: float
    trend: str


class CashFlowHealthOut(DomainModel):
    score: int
    status: str
    message: str
    income_to_spending_ratio: float  # unbounded ratios serialize as null


class InsightOut(DomainModel):
    type: str
    title: str
    description: str
    impact: str
    actionable: List[str]
    severity: str


class FinancialAnalysisOut(DomainModel):
    income: IncomeAnalysisOut
    spending: SpendingSummaryOut
    balance: BalanceOut
    cash_flow_health: CashFlowHealthOut
    insights: List[InsightOut]
    savings_rate: float
    category_colors: Dict[str, str]
    account_count: int


class SubscriptionOut(DomainModel):
    merchant_name: str
    amount: float
    frequency: str
    transaction_ids: List[str]
    last_charge: date
    estimated_annual_cost: float
    drift_score: float
    average_amount: float
    standard_deviation: float


class PeriodSpendingOut(DomainModel):
    months: int
    period_label: str
    total: float
    categories: List[CategorySpendingOut]
    subscription_total: float


class MonthlyCashFlowOut(DomainModel):
    month: str
    income: float
    spending: float
    net: float
    income_count: int
    spending_by_category: Dict[str, float]


class SavingsPointOut(DomainModel):
    month: str
    savings: float


class ChartDataOut(BaseModel):
    income_spending: List[MonthlyCashFlowOut]
    savings_trend: List[SavingsPointOut]
    category_colors: Dict[str, str]


class AnalysisResponse(BaseModel):
    """Response for POST /v1/analysis"""

    analysis: FinancialAnalysisOut
    subscriptions: List[SubscriptionOut]
    spending_by_period: Dict[str, PeriodSpendingOut]
    chart_data: ChartDataOut
    recent_transactions: List[SanitizedTransactionOut]
