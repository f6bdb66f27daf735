"""
Whitelist Income Detection Module for Budget Baselines.

Separates recurring, whitelisted income from other inflows. Refunds and
transfers are never income; an unrecognized deposit is an "other inflow"
so one-off money does not inflate the monthly income estimate.
"""

from typing import Dict, Iterable, Optional
from dataclasses import dataclass, field

from ..config.baseline_config import INCOME_WHITELIST_CONFIG
from ..models import Transaction
from ..categorisation.preprocess import normalize_text
from ..categorisation.refund_heuristics import RefundClassifier
from ..categorisation.transfer_heuristics import TransferClassifier


@dataclass(frozen=True)
class IncomeWhitelist:
    """Configured income payer-name substrings and verbatim income categories."""
    names: frozenset = field(default_factory=frozenset)
    categories: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_values(
        cls,
        names: Optional[Iterable[str]] = None,
        categories: Optional[Iterable[str]] = None
    ) -> "IncomeWhitelist":
        return cls(
            names=frozenset(n for n in (names or []) if n and n.strip()),
            categories=frozenset(c for c in (categories or []) if c),
        )

    @classmethod
    def from_config(cls, config: Optional[Dict] = None) -> "IncomeWhitelist":
        """Build from a dict shaped like INCOME_WHITELIST_CONFIG."""
        cfg = INCOME_WHITELIST_CONFIG if config is None else config
        return cls.from_values(cfg.get("names", []), cfg.get("categories", []))


class IncomeDetector:
    """Detects baseline income: positive, not a refund, not a transfer, and whitelisted."""

    NOT_INFLOW = "not_inflow"
    REFUND = "refund"
    TRANSFER = "transfer"
    BASELINE_INCOME = "baseline_income"
    OTHER_INFLOW = "other_inflow"

    def __init__(
        self,
        whitelist: Optional[IncomeWhitelist] = None,
        refund_classifier: Optional[RefundClassifier] = None,
        transfer_classifier: Optional[TransferClassifier] = None
    ):
        self.whitelist = whitelist if whitelist is not None else IncomeWhitelist.from_config()
        self.refund_classifier = refund_classifier or RefundClassifier()
        self.transfer_classifier = transfer_classifier or TransferClassifier()
        self._whitelist_names_lower = tuple(
            n.lower() for n in sorted(self.whitelist.names)
        )

    # ----------------------------
    # Exclusions + whitelist tests
    # ----------------------------
    def _is_excluded_inflow(self, transaction: Transaction) -> bool:
        return (
            self.refund_classifier.is_refund(transaction.name, transaction.amount_cents)
            or self.transfer_classifier.is_transfer_transaction(transaction)
        )

    def matches_whitelisted_name(self, name: Optional[str]) -> bool:
        text = normalize_text(name)
        if not text:
            return False
        return any(w in text for w in self._whitelist_names_lower)

    def matches_whitelisted_category(self, category_sub: Optional[str]) -> bool:
        return category_sub is not None and category_sub in self.whitelist.categories

    # ----------------------------
    # Public API
    # ----------------------------
    def classify_inflow(self, transaction: Transaction) -> str:
        """
        Label a transaction for diagnostics.

        Returns one of: not_inflow, refund, transfer, baseline_income, other_inflow
        """
        if transaction.amount_cents <= 0:
            return self.NOT_INFLOW
        if self.refund_classifier.is_refund(transaction.name, transaction.amount_cents):
            return self.REFUND
        if self.transfer_classifier.is_transfer_transaction(transaction):
            return self.TRANSFER
        if (self.matches_whitelisted_name(transaction.name) or
                self.matches_whitelisted_category(transaction.category_sub)):
            return self.BASELINE_INCOME
        return self.OTHER_INFLOW

    def is_baseline_income(self, transaction: Transaction) -> bool:
        if transaction.amount_cents <= 0:
            return False

        if self._is_excluded_inflow(transaction):
            return False

        return (
            self.matches_whitelisted_name(transaction.name)
            or self.matches_whitelisted_category(transaction.category_sub)
        )

    def is_other_inflow(self, transaction: Transaction) -> bool:
        if transaction.amount_cents <= 0:
            return False

        if self._is_excluded_inflow(transaction):
            return False

        return not self.is_baseline_income(transaction)
