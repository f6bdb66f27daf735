"""
Transfer Heuristics for Budget Baseline Classification.

Decides whether a transaction moves money between the user's own accounts
(or pays down the user's own card balance) rather than being real spend or
income.
"""

from typing import Iterable, Optional

from ..models import Transaction
from ..patterns.transaction_patterns import (
    TRANSFER_PATTERNS,
    TRANSFER_EXCLUSION_CATEGORIES,
    CARD_PAYMENT_PATTERNS,
    ISSUER_NAMES,
)
from .pattern_matching import match_keywords, match_exact, match_regex_patterns
from .preprocess import normalize_text


class TransferClassifier:
    """Stateless transfer detector; safe to share across requests."""

    def __init__(self, issuer_names: Optional[Iterable[str]] = None):
        """
        Initialize the classifier.

        Args:
            issuer_names: Card issuer names matched against merchant names.
                Defaults to ISSUER_NAMES.
        """
        names = ISSUER_NAMES if issuer_names is None else issuer_names
        self.issuer_names = frozenset(n.lower().strip() for n in names if n and n.strip())
        self.transfer_patterns = TRANSFER_PATTERNS
        self.exclusion_categories = TRANSFER_EXCLUSION_CATEGORIES
        self.card_payment_patterns = CARD_PAYMENT_PATTERNS

    # ----------------------------
    # Name / category heuristics
    # ----------------------------
    def is_transfer(
        self,
        name: Optional[str],
        category_top: Optional[str] = None,
        category_sub: Optional[str] = None
    ) -> bool:
        """
        Check the name and raw categories for transfer signals.

        A transaction without a name is never treated as a transfer here;
        category-only exclusions are handled by is_excluded_transfer_category.
        """
        if name is None:
            return False

        text = normalize_text(name)
        top = normalize_text(category_top)
        sub = normalize_text(category_sub)

        return (
            self._has_transfer_keyword(text)
            or self._has_transfer_category(top, sub)
            or self._has_reference_pattern(text)
        )

    def _has_transfer_keyword(self, text: str) -> bool:
        return match_keywords(text, self.transfer_patterns["keywords"]) is not None

    def _has_transfer_category(self, top: str, sub: str) -> bool:
        categories = self.transfer_patterns["categories"]
        return match_exact(top, categories) is not None or match_exact(sub, categories) is not None

    def _has_reference_pattern(self, text: str) -> bool:
        # account numbers and confirmation numbers
        return match_regex_patterns(text, self.transfer_patterns["regex_patterns"]) is not None

    # ----------------------------
    # Category-level exclusion
    # ----------------------------
    def is_excluded_transfer_category(
        self,
        category_top: Optional[str],
        category_sub: Optional[str]
    ) -> bool:
        """True when the raw categories mark the row as a transfer or card payment."""
        if category_top is not None:
            if category_top.lower().startswith(self.exclusion_categories["top_prefix"]):
                return True

        if category_sub is not None:
            return category_sub in self.exclusion_categories["sub_categories"]

        return False

    # ----------------------------
    # Card / issuer payments
    # ----------------------------
    def is_card_payment(self, transaction: Transaction) -> bool:
        """Check sub category, description and merchant for card-balance payments."""
        if transaction is None:
            return False

        return (
            self._has_card_payment_sub_category(transaction.category_sub)
            or self._has_card_payment_description(transaction.name)
            or self.is_from_card_issuer(transaction.merchant_name)
        )

    def _has_card_payment_sub_category(self, category_sub: Optional[str]) -> bool:
        sub = normalize_text(category_sub)
        if not sub:
            return False

        if match_keywords(sub, self.card_payment_patterns["sub_category_keywords"]):
            return True

        for group in self.card_payment_patterns["sub_category_keyword_groups"]:
            if all(word in sub for word in group):
                return True

        return False

    def _has_card_payment_description(self, name: Optional[str]) -> bool:
        if name is None:
            return False
        return match_regex_patterns(name, self.card_payment_patterns["regex_patterns"]) is not None

    def is_from_card_issuer(self, merchant_name: Optional[str]) -> bool:
        merchant = normalize_text(merchant_name)
        if not merchant:
            return False
        return match_keywords(merchant, self.issuer_names) is not None

    # ----------------------------
    # Public API
    # ----------------------------
    def is_transfer_transaction(self, transaction: Transaction) -> bool:
        """
        Full transfer check over a transaction.

        Combines the category exclusion, card-payment signals and the
        name/category heuristics.
        """
        if transaction is None:
            return False

        if self.is_excluded_transfer_category(transaction.category_top, transaction.category_sub):
            return True

        if self.is_card_payment(transaction):
            return True

        return self.is_transfer(
            transaction.name,
            transaction.category_top,
            transaction.category_sub
        )
