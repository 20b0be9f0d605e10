"""
Numeric helpers shared by the scorers and the population aggregator.

Rounding is always "half up" through ``Decimal`` so that a value such as
2.25 rounds to 2.3 on every platform instead of following float
representation or banker's rounding.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

# Upper bounds of the five histogram bins over the 1-5 scale; the last bin
# is open-ended.
DISTRIBUTION_BIN_EDGES: tuple[float, ...] = (1.5, 2.5, 3.5, 4.5)


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round ``value`` to ``decimals`` places, halves away from zero.

    Examples
    --------
    >>> round_half_up(2.25, 1)
    2.3
    >>> round_half_up(3.2)
    3.0
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def weighted_average(scores: Sequence[float], weights: Sequence[float]) -> float | None:
    """Σ(w·s) / Σw, or ``None`` when there is nothing to average."""
    if not scores or len(scores) != len(weights):
        return None
    total_weight = sum(weights)
    if total_weight <= 0:
        return None
    return sum(s * w for s, w in zip(scores, weights)) / total_weight


def normal_cdf(z: float) -> float:
    """Standard normal cumulative distribution function."""
    return 0.5 * (1.0 + math.erf(z / math.sqrt(2.0)))


def percentile_from_normal(value: float, mean: float, stddev: float) -> int:
    """Position of ``value`` in N(mean, stddev) as an integer in [1, 99].

    A degenerate distribution (``stddev <= 0``) places everyone at 50.
    """
    if stddev <= 0:
        return 50
    percentile = round_half_up(normal_cdf((value - mean) / stddev) * 100)
    return int(clamp(percentile, 1, 99))


def median(values: Sequence[float]) -> float | None:
    if not values:
        return None
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def distribution(values: Sequence[float]) -> list[int]:
    """Counts per bin: [<1.5, <2.5, <3.5, <4.5, rest]."""
    bins = [0] * (len(DISTRIBUTION_BIN_EDGES) + 1)
    for value in values:
        for index, edge in enumerate(DISTRIBUTION_BIN_EDGES):
            if value < edge:
                bins[index] += 1
                break
        else:
            bins[-1] += 1
    return bins
