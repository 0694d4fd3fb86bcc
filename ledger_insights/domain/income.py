"""Income detection - totals, variability and pay cadence of money received"""

import logging
from typing import List

from ledger_insights.domain.cadence import IRREGULAR, classify_pay_cadence
from ledger_insights.domain.models import IncomeAnalysis, LastPaycheck, Transaction
from ledger_insights.utils.date_utils import day_span
from ledger_insights.utils.statistics import coefficient_of_variation

logger = logging.getLogger(__name__)

VARIABLE_INCOME_THRESHOLD = 0.2
DAYS_PER_MONTH = 30


def income_transactions(transactions: List[Transaction]) -> List[Transaction]:
    """All money received (strictly negative amounts), in input order"""
    return [t for t in transactions if t.is_income]


def income_month_span(incoming: List[Transaction]) -> float:
    """Months covered by the income dates (day span / 30), 0 for fewer than two"""
    return day_span([t.date for t in incoming]) / DAYS_PER_MONTH


def detect_income(transactions: List[Transaction]) -> IncomeAnalysis:
    """
    Classify incoming money and derive income statistics.

    Income is every negative transaction: paychecks, refunds, transfers in.
    Average monthly income divides the total by max(1, day span / 30).

    The reported last paycheck is the first income transaction in input
    order. Provider feeds arrive newest-first, so this is the most recent
    deposit without re-sorting; all cadence statistics use date order.
    """
    incoming = income_transactions(transactions)

    if not incoming:
        logger.debug("No income transactions found in %d records", len(transactions))
        return IncomeAnalysis(
            total_income=0.0,
            average_monthly=0.0,
            is_variable=False,
            variability=0.0,
            pattern=IRREGULAR,
            last_paycheck=None,
            income_transactions=[],
        )

    amounts = [abs(t.amount) for t in incoming]
    total_income = sum(amounts)
    average_monthly = total_income / max(1.0, income_month_span(incoming))

    variability = coefficient_of_variation(amounts)
    pattern = classify_pay_cadence([t.date for t in incoming])

    first = incoming[0]
    last_paycheck = LastPaycheck(amount=abs(first.amount), date=first.date)

    return IncomeAnalysis(
        total_income=total_income,
        average_monthly=average_monthly,
        is_variable=variability > VARIABLE_INCOME_THRESHOLD,
        variability=variability,
        pattern=pattern,
        last_paycheck=last_paycheck,
        income_transactions=incoming,
    )
