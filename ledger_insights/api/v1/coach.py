"""POST /v1/coach/context - sanitized input for the external coaching text generator"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from ledger_insights.api.dependencies import get_request_id, get_settings
from ledger_insights.api.v1.schemas import CoachContextRequest
from ledger_insights.config import Settings
from ledger_insights.domain.analysis import analyze_finances
from ledger_insights.domain.coach import build_coach_context
from ledger_insights.domain.exceptions import DomainException
from ledger_insights.domain.periods import spending_by_period
from ledger_insights.domain.subscriptions import detect_subscriptions
from ledger_insights.infrastructure.observability.metrics import invalid_input_counter

router = APIRouter()

@router.post("/coach/context")
def create_coach_context(
    request_body: CoachContextRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Build the PII-free payload handed to the text-generation service.

    Contains aggregates, goal progress and a short list of sanitized
    transactions (date, amount, merchant, category label only).
    """
    request_id = get_request_id(request)

    try:
        transactions = request_body.domain_transactions()
        analysis = analyze_finances(
            transactions,
            request_body.domain_accounts(),
            as_of=request_body.as_of,
            top_category_count=app_settings.top_category_count,
        )
        subscriptions = detect_subscriptions(transactions)
        periods = spending_by_period(
            transactions,
            horizons=request_body.horizons or app_settings.coach_horizons,
            as_of=request_body.as_of,
        )
    except (DomainException, ValueError) as e:
        invalid_input_counter.inc()
        logging.warning(f"Invalid coach input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    return build_coach_context(
        analysis,
        subscriptions,
        transactions,
        periods,
        savings_goal_target=request_body.savings_goal_target or app_settings.default_savings_goal,
        user_type=request_body.user_type,
        goal_type=request_body.goal_type,
        transaction_limit=app_settings.coach_transaction_limit,
        subscription_limit=app_settings.coach_subscription_limit,
    )
