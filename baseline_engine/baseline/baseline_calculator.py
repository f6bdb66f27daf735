"""
Budget Baseline Calculator.
Combines the classifiers and statistics into a trailing 3-month baseline:
monthly income, monthly spend per category, confidence per category and
paycheck cadence.
"""

import math
from typing import Dict, Iterable, List, Optional
from dataclasses import dataclass, field
from datetime import date
from collections import defaultdict
import logging

from ..config.baseline_config import BASELINE_CONFIG
from ..models import Transaction
from ..stats import ConfidenceLevel, winsorized_mean, confidence_level
from ..categorisation.preprocess import normalize_category
from ..categorisation.refund_heuristics import RefundClassifier
from ..categorisation.transfer_heuristics import TransferClassifier
from ..income.income_detector import IncomeDetector
from ..income.cadence import PaycheckCadence, detect_paycheck_cadence
from .date_windows import DateWindows
from .transaction_store import TransactionStore

# Initialize logger for this module
logger = logging.getLogger(__name__)


def round_cents(value: float) -> int:
    """Round half-up to whole cents."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class BudgetBaseline:
    """Typical-month snapshot derived from the trailing transaction window."""
    monthly_income_cents: int = 0
    monthly_expenses_by_category: Dict[str, int] = field(default_factory=dict)
    total_monthly_expenses_cents: int = 0
    paycheck_cadence: PaycheckCadence = PaycheckCadence.IRREGULAR
    category_confidence_scores: Dict[str, ConfidenceLevel] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "BudgetBaseline":
        return cls()

    def to_dict(self) -> Dict:
        return {
            "monthly_income_cents": self.monthly_income_cents,
            "monthly_expenses_by_category": dict(self.monthly_expenses_by_category),
            "total_monthly_expenses_cents": self.total_monthly_expenses_cents,
            "paycheck_cadence": self.paycheck_cadence.value,
            "category_confidence_scores": {
                category: level.value
                for category, level in self.category_confidence_scores.items()
            },
        }


class BaselineCalculator:
    """Calculates budget baselines from a transaction window."""

    def __init__(
        self,
        transaction_store: Optional[TransactionStore] = None,
        income_detector: Optional[IncomeDetector] = None,
        transfer_classifier: Optional[TransferClassifier] = None,
        refund_classifier: Optional[RefundClassifier] = None,
        date_windows: Optional[DateWindows] = None,
        config: Optional[Dict] = None
    ):
        """
        Initialize the baseline calculator.

        Args:
            transaction_store: Source of transactions for calculate_baseline.
                Not needed when calling calculate_from_transactions directly.
            income_detector: Whitelist income detector (default: configured whitelist)
            transfer_classifier: Transfer heuristics (default: configured issuers)
            refund_classifier: Refund heuristics
            date_windows: Window builder in the reference timezone
            config: Baseline settings, defaults to BASELINE_CONFIG
        """
        self.config = config or BASELINE_CONFIG
        self.transaction_store = transaction_store
        self.transfer_classifier = transfer_classifier or TransferClassifier()
        self.refund_classifier = refund_classifier or RefundClassifier()
        self.income_detector = income_detector or IncomeDetector(
            refund_classifier=self.refund_classifier,
            transfer_classifier=self.transfer_classifier,
        )
        self._date_windows = date_windows
        self.lookback_months = self.config["lookback_months"]
        self.lower_pct = self.config["winsorize"]["lower_pct"]
        self.upper_pct = self.config["winsorize"]["upper_pct"]

    @property
    def date_windows(self) -> DateWindows:
        if self._date_windows is None:
            self._date_windows = DateWindows(self.config["reference_timezone"])
        return self._date_windows

    # ----------------------------
    # Entry points
    # ----------------------------
    def calculate_baseline(self, user_id: str, today: Optional[date] = None) -> BudgetBaseline:
        """
        Fetch the trailing window for a user and compute the baseline.

        Args:
            user_id: Identifier passed through to the transaction store
            today: Reference date (default: today in the reference timezone)

        Returns:
            BudgetBaseline for the last `lookback_months` calendar months
        """
        if self.transaction_store is None:
            raise ValueError("calculate_baseline requires a transaction_store")

        window = self.date_windows.last_n_months(self.lookback_months, today=today)
        transactions = self.transaction_store.find_by_user_and_date_range(
            user_id, window.start, window.end
        )

        logger.debug(
            "[BASELINE] user=%s window=%s..%s transactions=%d",
            user_id, window.start, window.end, len(transactions)
        )
        return self.calculate_from_transactions(transactions)

    def calculate_from_transactions(self, transactions: Iterable[Transaction]) -> BudgetBaseline:
        """Compute the baseline over an already-fetched transaction window."""
        posted = [t for t in transactions if not t.pending]
        if not posted:
            return BudgetBaseline.empty()

        income_transactions = self.select_income_transactions(posted)
        expense_transactions = self.select_expense_transactions(posted)

        monthly_income = self._calculate_monthly_income(income_transactions)
        monthly_by_category = self._monthly_totals_by_category(expense_transactions)

        monthly_expenses = {
            category: round_cents(winsorized_mean(list(months.values()), self.lower_pct, self.upper_pct))
            for category, months in monthly_by_category.items()
        }
        confidence_scores = {
            category: confidence_level(list(months.values()), self.config["confidence"])
            for category, months in monthly_by_category.items()
        }
        cadence = detect_paycheck_cadence(income_transactions, self.config["cadence"])

        logger.debug(
            "[BASELINE] posted=%d income_txns=%d expense_txns=%d categories=%d "
            "income=%d cadence=%s",
            len(posted), len(income_transactions), len(expense_transactions),
            len(monthly_expenses), monthly_income, cadence.value
        )

        return BudgetBaseline(
            monthly_income_cents=monthly_income,
            monthly_expenses_by_category=monthly_expenses,
            total_monthly_expenses_cents=sum(monthly_expenses.values()),
            paycheck_cadence=cadence,
            category_confidence_scores=confidence_scores,
        )

    # ----------------------------
    # Partitioning
    # ----------------------------
    def select_income_transactions(self, transactions: Iterable[Transaction]) -> List[Transaction]:
        return [
            t for t in transactions
            if not t.pending and self.income_detector.is_baseline_income(t)
        ]

    def is_expense(self, transaction: Transaction) -> bool:
        """
        Outflow that is real spend.

        Transfers, refunds (checked on the absolute amount), transfer
        categories and, when configured, card payments are excluded.
        """
        if transaction.pending or transaction.amount_cents >= 0:
            return False

        tc = self.transfer_classifier
        if tc.is_transfer(transaction.name, transaction.category_top, transaction.category_sub):
            return False
        if self.refund_classifier.is_refund(transaction.name, abs(transaction.amount_cents)):
            return False
        if tc.is_excluded_transfer_category(transaction.category_top, transaction.category_sub):
            return False
        if self.config.get("exclude_card_payments", False) and tc.is_card_payment(transaction):
            return False

        return True

    def select_expense_transactions(self, transactions: Iterable[Transaction]) -> List[Transaction]:
        return [t for t in transactions if self.is_expense(t)]

    # ----------------------------
    # Aggregation
    # ----------------------------
    def _monthly_totals(self, transactions: Iterable[Transaction]) -> Dict[date, int]:
        """Sum of absolute amounts per calendar month."""
        totals: Dict[date, int] = defaultdict(int)
        for txn in transactions:
            totals[txn.month_key] += abs(txn.amount_cents)
        return dict(totals)

    def _monthly_totals_by_category(
        self,
        transactions: Iterable[Transaction]
    ) -> Dict[str, Dict[date, int]]:
        by_category: Dict[str, List[Transaction]] = defaultdict(list)
        for txn in transactions:
            by_category[normalize_category(txn.category_top, txn.category_sub)].append(txn)

        return {
            category: self._monthly_totals(txns)
            for category, txns in by_category.items()
        }

    def _calculate_monthly_income(self, income_transactions: List[Transaction]) -> int:
        if not income_transactions:
            return 0

        monthly = self._monthly_totals(income_transactions)
        logger.debug("[BASELINE] income by month: %s", sorted(monthly.items()))
        return round_cents(winsorized_mean(list(monthly.values()), self.lower_pct, self.upper_pct))
