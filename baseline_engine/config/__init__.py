"""
Configuration module for the Budget Baseline Engine.

This module contains the baseline configuration dictionaries and the
income whitelist loader.
"""

from .baseline_config import BASELINE_CONFIG, INCOME_WHITELIST_CONFIG
from .whitelist_loader import load_income_whitelist_csv

__all__ = [
    "BASELINE_CONFIG",
    "INCOME_WHITELIST_CONFIG",
    "load_income_whitelist_csv",
]
