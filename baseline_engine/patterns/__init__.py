"""
Transaction Pattern Definitions for the Budget Baseline Engine.

Contains the keyword, category and regex tables for:
- Transfer patterns (inter-account movements)
- Orchestrator-level transfer category exclusions
- Credit card / own-account payment patterns and issuer names
- Refund patterns (refunds, reversals, credit adjustments)
"""

from .transaction_patterns import (
    TRANSFER_PATTERNS,
    TRANSFER_EXCLUSION_CATEGORIES,
    CARD_PAYMENT_PATTERNS,
    ISSUER_NAMES,
    REFUND_PATTERNS,
)

__all__ = [
    "TRANSFER_PATTERNS",
    "TRANSFER_EXCLUSION_CATEGORIES",
    "CARD_PAYMENT_PATTERNS",
    "ISSUER_NAMES",
    "REFUND_PATTERNS",
]
