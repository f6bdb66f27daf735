"""
Income Detection Module for the Budget Baseline Engine.

Detects whitelisted baseline income and infers paycheck cadence.
"""

from .income_detector import IncomeDetector, IncomeWhitelist
from .cadence import PaycheckCadence, detect_paycheck_cadence, day_gaps

__all__ = [
    "IncomeDetector",
    "IncomeWhitelist",
    "PaycheckCadence",
    "detect_paycheck_cadence",
    "day_gaps",
]
