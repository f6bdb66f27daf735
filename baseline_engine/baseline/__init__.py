"""
Baseline Module for the Budget Baseline Engine.

Date windows, the transaction store contract and the baseline calculator.
"""

from .date_windows import DateRange, DateWindows
from .transaction_store import TransactionStore, InMemoryTransactionStore
from .baseline_calculator import BudgetBaseline, BaselineCalculator, round_cents

__all__ = [
    "DateRange",
    "DateWindows",
    "TransactionStore",
    "InMemoryTransactionStore",
    "BudgetBaseline",
    "BaselineCalculator",
    "round_cents",
]
