"""Recurrence interval classification from average day gaps"""

from datetime import date
from typing import Optional, Sequence, Tuple

from ledger_insights.utils.date_utils import day_gaps
from ledger_insights.utils.statistics import mean

WEEKLY = "weekly"
BIWEEKLY = "biweekly"
MONTHLY = "monthly"
ANNUAL = "annual"
IRREGULAR = "irregular"

# Inclusive (low, high) bands checked in order
PAY_CADENCE_BANDS: Tuple[Tuple[str, float, float], ...] = (
    (MONTHLY, 25, 35),
    (BIWEEKLY, 12, 16),
    (WEEKLY, 5, 9),
)

CHARGE_CADENCE_BANDS: Tuple[Tuple[str, float, float], ...] = (
    (ANNUAL, 340, 390),
    (MONTHLY, 25, 35),
    (WEEKLY, 5, 9),
)


def average_gap(dates: Sequence[date]) -> Optional[float]:
    """Mean day gap between date-sorted entries, None for fewer than two dates"""
    if len(dates) < 2:
        return None
    return mean(day_gaps(sorted(dates)))


def classify_gap(avg_gap: Optional[float], bands: Tuple[Tuple[str, float, float], ...]) -> str:
    if avg_gap is None:
        return IRREGULAR
    for cadence, low, high in bands:
        if low <= avg_gap <= high:
            return cadence
    return IRREGULAR


def classify_pay_cadence(dates: Sequence[date]) -> str:
    """Income cadence: weekly, biweekly, monthly or irregular"""
    return classify_gap(average_gap(dates), PAY_CADENCE_BANDS)


def classify_charge_cadence(dates: Sequence[date]) -> str:
    """Subscription cadence: weekly, monthly, annual or irregular (no biweekly band)"""
    return classify_gap(average_gap(dates), CHARGE_CADENCE_BANDS)
