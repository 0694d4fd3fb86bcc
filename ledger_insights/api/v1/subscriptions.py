"""POST /v1/subscriptions - recurring charge detection"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Request

from ledger_insights.api.dependencies import get_request_id
from ledger_insights.api.v1.schemas import SubscriptionOut, TransactionsRequest
from ledger_insights.domain.exceptions import DomainException
from ledger_insights.domain.subscriptions import detect_subscriptions
from ledger_insights.infrastructure.observability.metrics import invalid_input_counter

router = APIRouter()


@router.post("/subscriptions", response_model=List[SubscriptionOut])
def list_subscriptions(request_body: TransactionsRequest, request: Request):
    """
    Detect subscriptions in a transaction snapshot.

    Returns:
        Subscription patterns ordered by drift score, highest first
    """
    try:
        transactions = request_body.domain_transactions()
    except DomainException as e:
        invalid_input_counter.inc()
        logging.warning(f"Invalid subscription input: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return [SubscriptionOut.model_validate(s) for s in detect_subscriptions(transactions)]
