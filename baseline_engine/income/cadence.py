"""
Paycheck cadence detection.

Infers pay frequency from the dates of transactions already identified as
baseline income.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..config.baseline_config import BASELINE_CONFIG
from ..models import Transaction
from ..stats import mean, is_within_tolerance


class PaycheckCadence(Enum):
    """Inferred interval between income deposits."""
    WEEKLY = "Weekly"
    BIWEEKLY = "Biweekly"
    SEMI_MONTHLY = "SemiMonthly"
    MONTHLY = "Monthly"
    IRREGULAR = "Irregular"


def day_gaps(transactions: Iterable[Transaction]) -> List[int]:
    """Days between each consecutive pair of transactions, in date order."""
    dates = sorted(t.date for t in transactions)
    return [(dates[i] - dates[i - 1]).days for i in range(1, len(dates))]


def detect_paycheck_cadence(
    income_transactions: Iterable[Transaction],
    config: Optional[Dict] = None
) -> PaycheckCadence:
    """
    Classify the average gap between income deposits.

    Targets are checked in order (7, 14, 15, 30 days by default) with a 20%
    tolerance; the first match wins, so an average gap inside both the
    14-day and 15-day bands is Biweekly.

    Args:
        income_transactions: Transactions already identified as baseline income
        config: Cadence settings, defaults to BASELINE_CONFIG["cadence"]

    Returns:
        PaycheckCadence, IRREGULAR when fewer than 3 deposits or no band matches
    """
    cfg = config or BASELINE_CONFIG["cadence"]
    transactions = list(income_transactions)

    if len(transactions) < cfg["min_income_transactions"]:
        return PaycheckCadence.IRREGULAR

    gaps = day_gaps(transactions)
    if not gaps:
        return PaycheckCadence.IRREGULAR

    average_gap = mean(gaps)
    for target in cfg["targets"]:
        if is_within_tolerance(average_gap, target["days"], cfg["tolerance_pct"]):
            return PaycheckCadence(target["cadence"])

    return PaycheckCadence.IRREGULAR
