"""Descriptive statistics shared by income and subscription analysis"""

import math
from typing import Sequence, Tuple


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence"""
    if not values:
        return 0.0
    return sum(values) / len(values)


def mean_and_std(values: Sequence[float]) -> Tuple[float, float]:
    """Mean and population standard deviation (variance divides by n)"""
    if not values:
        return 0.0, 0.0

    avg = mean(values)
    variance = sum((v - avg) ** 2 for v in values) / len(values)
    return avg, math.sqrt(variance)


def coefficient_of_variation(values: Sequence[float]) -> float:
    """stddev / mean, defined as 0.0 when the mean is 0"""
    avg, std_dev = mean_and_std(values)
    return std_dev / avg if avg > 0 else 0.0


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (not banker's rounding)"""
    return int(math.floor(value + 0.5))


def round_half_up_cents(value: float) -> float:
    """Round to 2 decimal places with .005 going up"""
    return math.floor(value * 100 + 0.5) / 100
