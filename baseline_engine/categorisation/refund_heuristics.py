"""
Refund Heuristics for Budget Baseline Classification.

A refund is a positive-amount transaction that reverses earlier spend and
must not be counted as income.
"""

from typing import Optional

from ..patterns.transaction_patterns import REFUND_PATTERNS
from .pattern_matching import match_keywords, match_regex_patterns
from .preprocess import normalize_text


class RefundClassifier:
    """Stateless refund detector; safe to share across requests."""

    def __init__(self):
        self.refund_patterns = REFUND_PATTERNS

    def is_refund(self, name: Optional[str], amount_cents: int) -> bool:
        """
        Check whether an inflow is a refund or credit adjustment.

        Only positive amounts can be refunds. Callers classifying an outflow
        pass its absolute amount.

        Args:
            name: Raw transaction description
            amount_cents: Amount in cents (positive = inflow)

        Returns:
            True if the description carries a refund signal
        """
        if name is None:
            return False
        if amount_cents <= 0:
            return False

        text = normalize_text(name)
        return (
            match_keywords(text, self.refund_patterns["keywords"]) is not None
            or match_regex_patterns(text, self.refund_patterns["regex_patterns"]) is not None
        )
