"""
Statistics primitives for Budget Baselines.

Mean, median, standard deviation, winsorized mean, EMA, tolerance checks and
the per-category confidence label. All helpers are total: empty input returns
0.0 (or Low confidence) instead of raising.
"""

import math
import statistics
from enum import Enum
from typing import Dict, Optional, Sequence

from .config.baseline_config import BASELINE_CONFIG


class ConfidenceLevel(Enum):
    """Stability of a series of monthly amounts."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return float(statistics.mean(values))


def median(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return float(statistics.median(values))


def standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation (n - 1); 0.0 for fewer than two values."""
    if not values or len(values) < 2:
        return 0.0

    return statistics.stdev(values)


def _check_percentile(name: str, value: float) -> None:
    if not 0 <= value <= 100:
        raise ValueError(f"{name} must be within [0, 100], got {value}")


def winsorized_mean(values: Sequence[float], lower_pct: float, upper_pct: float) -> float:
    """
    Mean after clipping every value into the [lower_pct, upper_pct] percentile bounds.

    Bounds are read from a sorted copy at floor(n * lower / 100) and
    ceil(n * upper / 100), both clamped to the valid index range, so small
    samples are clipped little or not at all.

    Args:
        values: Observations (any order, not modified)
        lower_pct: Lower percentile, 0-100
        upper_pct: Upper percentile, 0-100, not below lower_pct

    Returns:
        Winsorized mean; 0.0 for empty input, the value itself for one value

    Raises:
        ValueError: if a percentile is outside [0, 100] or lower_pct > upper_pct
    """
    _check_percentile("lower_pct", lower_pct)
    _check_percentile("upper_pct", upper_pct)
    if lower_pct > upper_pct:
        raise ValueError(f"lower_pct ({lower_pct}) must not exceed upper_pct ({upper_pct})")

    if not values:
        return 0.0
    if len(values) == 1:
        return float(values[0])

    ordered = sorted(values)
    n = len(ordered)
    lower_index = min(max(0, math.floor(n * lower_pct / 100.0)), n - 1)
    upper_index = min(max(0, math.ceil(n * upper_pct / 100.0)), n - 1)

    lower_bound = ordered[lower_index]
    upper_bound = ordered[upper_index]

    clipped = [max(lower_bound, min(upper_bound, v)) for v in values]
    return mean(clipped)


def exponential_moving_average(values: Sequence[float], alpha: float) -> float:
    """EMA seeded with the first value; alpha weights the newest observation."""
    if not 0 < alpha <= 1:
        raise ValueError(f"alpha must be within (0, 1], got {alpha}")

    if not values:
        return 0.0

    ema = float(values[0])
    for value in values[1:]:
        ema = alpha * value + (1 - alpha) * ema
    return ema


def is_within_tolerance(value: float, target: float, tolerance_percent: float) -> bool:
    if target == 0:
        return abs(value) <= tolerance_percent / 100.0

    tolerance = abs(target * tolerance_percent / 100.0)
    return abs(value - target) <= tolerance


def coefficient_of_variation(values: Sequence[float], epsilon: float = 0.01) -> Optional[float]:
    """stdev / |mean|, or None when the mean is indistinguishable from zero."""
    avg = mean(values)
    if abs(avg) < epsilon:
        return None
    return standard_deviation(values) / abs(avg)


def confidence_level(values: Sequence[float], config: Optional[Dict] = None) -> ConfidenceLevel:
    """
    Label how stable a series of monthly amounts is.

    Fewer than 3 observations or a near-zero mean is Low. Otherwise the
    coefficient of variation decides: below 0.15 High, below 0.40 Medium,
    anything larger Low.
    """
    cfg = config or BASELINE_CONFIG["confidence"]

    if not values or len(values) < cfg["min_observations"]:
        return ConfidenceLevel.LOW

    cv = coefficient_of_variation(values, cfg["zero_mean_epsilon"])
    if cv is None:
        return ConfidenceLevel.LOW

    if cv < cfg["high_max_cv"]:
        return ConfidenceLevel.HIGH
    if cv < cfg["medium_max_cv"]:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW
