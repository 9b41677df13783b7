from __future__ import annotations
from typing import Sequence
from functools import cmp_to_key
import math
from .models import StatisticsResult

PERCENTILES = (10, 25, 50, 75, 90, 95, 99)

def _partial_cmp(a: float, b: float) -> int:
    # unordered pairs (NaN involved) compare as equal
    if a < b:
        return -1
    if a > b:
        return 1
    return 0

def _nearest_rank(p: int, n: int) -> int:
    # round half away from zero, clamped to the last index
    return min(int(math.floor(p / 100.0 * (n - 1) + 0.5)), n - 1)

def compute_statistics(values: Sequence[float]) -> StatisticsResult:
    """Mean, median, min, max and nearest-rank percentiles.

    An empty input yields the zeroed result with no percentiles.
    """
    n = len(values)
    if n == 0:
        return StatisticsResult()

    ordered = sorted((float(v) for v in values), key=cmp_to_key(_partial_cmp))
    mean = sum(float(v) for v in values) / n
    if n % 2 == 0:
        median = (ordered[n // 2 - 1] + ordered[n // 2]) / 2.0
    else:
        median = ordered[n // 2]

    percentiles = {f"p{p}": ordered[_nearest_rank(p, n)] for p in PERCENTILES}
    return StatisticsResult(
        mean=mean,
        median=median,
        min=ordered[0],
        max=ordered[-1],
        percentiles=percentiles,
    )
