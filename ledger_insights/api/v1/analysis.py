"""POST /v1/analysis - full financial analysis of a transaction snapshot"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Path, Request

from ledger_insights.api.dependencies import get_request_id, get_settings
from ledger_insights.api.v1.schemas import (
    AnalysisRequest,
    AnalysisResponse,
    ChartDataOut,
    FinancialAnalysisOut,
    MonthlyCashFlowOut,
    PeriodSpendingOut,
    SanitizedTransactionOut,
    SavingsPointOut,
    SubscriptionOut,
    TransactionsRequest,
)
from ledger_insights.config import Settings
from ledger_insights.domain.analysis import analyze_finances
from ledger_insights.domain.charts import monthly_breakdown, savings_trend
from ledger_insights.domain.coach import sanitize_transaction
from ledger_insights.domain.exceptions import DomainException
from ledger_insights.domain.periods import period_spending, spending_by_period
from ledger_insights.domain.subscriptions import detect_subscriptions
from ledger_insights.infrastructure.observability.logging import log_analysis
from ledger_insights.infrastructure.observability.metrics import invalid_input_counter, record_analysis

router = APIRouter()


@router.post("/analysis", response_model=AnalysisResponse)
def create_analysis(
    request_body: AnalysisRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Analyze a transaction snapshot.

    Flow:
    1. Convert provider records into domain transactions and accounts
    2. Run income/spending/health/insight analysis
    3. Detect subscriptions over the same snapshot
    4. Recompute spending per trailing horizon (3M/6M/12M by default)
    5. Build chart series with the analysis' category colors
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        transactions = request_body.domain_transactions()
        accounts = request_body.domain_accounts()
        logging.debug(
            "Analysis input received",
            extra={
                "request_id": request_id,
                "account_masks": [a.mask for a in accounts],
            },
        )

        analysis = analyze_finances(
            transactions,
            accounts,
            as_of=request_body.as_of,
            top_category_count=app_settings.top_category_count,
        )
        subscriptions = detect_subscriptions(transactions)
        periods = spending_by_period(
            transactions,
            horizons=request_body.horizons or app_settings.default_horizons,
            as_of=request_body.as_of,
            limit=app_settings.period_category_limit,
        )
        breakdown = monthly_breakdown(transactions)

        duration_ms = (time.time() - start_time) * 1000
        record_analysis(analysis.cash_flow_health.status, len(subscriptions))
        log_analysis(request_id, len(transactions), analysis.cash_flow_health.status, len(subscriptions), duration_ms)

        return AnalysisResponse(
            analysis=FinancialAnalysisOut.model_validate(analysis),
            subscriptions=[SubscriptionOut.model_validate(s) for s in subscriptions],
            spending_by_period={key: PeriodSpendingOut.model_validate(p) for key, p in periods.items()},
            chart_data=ChartDataOut(
                income_spending=[MonthlyCashFlowOut.model_validate(b) for b in breakdown],
                savings_trend=[SavingsPointOut.model_validate(p) for p in savings_trend(breakdown)],
                category_colors=analysis.category_colors,
            ),
            recent_transactions=[
                SanitizedTransactionOut(**sanitize_transaction(t))
                for t in transactions[: app_settings.recent_transaction_limit]
            ],
        )

    except (DomainException, ValueError) as e:
        invalid_input_counter.inc()
        logging.warning(f"Invalid analysis input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/periods/{months}", response_model=PeriodSpendingOut)
def get_period_spending(
    request_body: TransactionsRequest,
    request: Request,
    months: int = Path(..., gt=0, description="Trailing window in months"),
    app_settings: Settings = Depends(get_settings),
):
    """Spending by category restricted to the trailing `months` window"""
    request_id = get_request_id(request)

    try:
        transactions = request_body.domain_transactions()
        period = period_spending(transactions, months, limit=app_settings.period_category_limit)
        return PeriodSpendingOut.model_validate(period)

    except (DomainException, ValueError) as e:
        invalid_input_counter.inc()
        logging.warning(f"Invalid period input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
