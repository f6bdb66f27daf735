"""
Categorisation Module for the Budget Baseline Engine.

Classifies transactions ahead of baselining through:
- Preprocessing (text normalization, category normalization)
- Pattern matching (keyword, exact-label and regex based)
- Transfer heuristics (inter-account movements, card payments)
- Refund heuristics (refunds and credit adjustments)
"""

from .preprocess import (
    normalize_text,
    normalize_category,
    select_category,
    capitalize_words,
    DEFAULT_CATEGORY,
)
from .pattern_matching import (
    match_keywords,
    match_exact,
    match_regex_patterns,
)
from .transfer_heuristics import TransferClassifier
from .refund_heuristics import RefundClassifier

__all__ = [
    # Classifiers
    "TransferClassifier",
    "RefundClassifier",
    # Preprocessing utilities
    "normalize_text",
    "normalize_category",
    "select_category",
    "capitalize_words",
    "DEFAULT_CATEGORY",
    # Pattern matching utilities
    "match_keywords",
    "match_exact",
    "match_regex_patterns",
]
