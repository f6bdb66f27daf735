"""
Budget Baseline Engine - Transaction Classification & Statistical Baselining.

Turns a user's raw bank-transaction history into a budget baseline: typical
monthly income, typical monthly spend per category, a confidence label per
category and the paycheck cadence.

Main Components:
    - patterns: Transfer, card-payment and refund pattern tables
    - config: Baseline configuration and income whitelist loading
    - categorisation: Category normalizer, transfer and refund classifiers
    - income: Whitelist income detection and paycheck cadence
    - baseline: Date windows, transaction store contract, baseline calculator
"""

from typing import Dict, Iterable, List, Optional, Union

from .models import Transaction
from .stats import (
    ConfidenceLevel,
    mean,
    median,
    standard_deviation,
    winsorized_mean,
    exponential_moving_average,
    is_within_tolerance,
    coefficient_of_variation,
    confidence_level,
)

# Classification components
from .categorisation import (
    TransferClassifier,
    RefundClassifier,
    normalize_category,
)

# Income detection
from .income import (
    IncomeDetector,
    IncomeWhitelist,
    PaycheckCadence,
    detect_paycheck_cadence,
)

# Baseline components
from .baseline import (
    DateRange,
    DateWindows,
    TransactionStore,
    InMemoryTransactionStore,
    BudgetBaseline,
    BaselineCalculator,
)

# Configuration
from .config import (
    BASELINE_CONFIG,
    INCOME_WHITELIST_CONFIG,
    load_income_whitelist_csv,
)

from .patterns import (
    TRANSFER_PATTERNS,
    TRANSFER_EXCLUSION_CATEGORIES,
    CARD_PAYMENT_PATTERNS,
    ISSUER_NAMES,
    REFUND_PATTERNS,
)


__version__ = "1.0.0"
__all__ = [
    # Data model
    "Transaction",
    "BudgetBaseline",
    "PaycheckCadence",
    "ConfidenceLevel",
    # Statistics
    "mean",
    "median",
    "standard_deviation",
    "winsorized_mean",
    "exponential_moving_average",
    "is_within_tolerance",
    "coefficient_of_variation",
    "confidence_level",
    # Classification
    "TransferClassifier",
    "RefundClassifier",
    "normalize_category",
    "IncomeDetector",
    "IncomeWhitelist",
    "detect_paycheck_cadence",
    # Baseline
    "DateRange",
    "DateWindows",
    "TransactionStore",
    "InMemoryTransactionStore",
    "BaselineCalculator",
    # Configuration
    "BASELINE_CONFIG",
    "INCOME_WHITELIST_CONFIG",
    "load_income_whitelist_csv",
    # Patterns
    "TRANSFER_PATTERNS",
    "TRANSFER_EXCLUSION_CATEGORIES",
    "CARD_PAYMENT_PATTERNS",
    "ISSUER_NAMES",
    "REFUND_PATTERNS",
    # Main function
    "calculate_budget_baseline",
]


def calculate_budget_baseline(
    transactions: Iterable[Union[Transaction, Dict]],
    income_whitelist_names: Optional[Iterable[str]] = None,
    income_whitelist_categories: Optional[Iterable[str]] = None,
    issuer_names: Optional[Iterable[str]] = None,
) -> Dict:
    """
    Main entry point for computing a baseline over an in-memory window.

    The caller supplies the trailing window; no date filtering happens here.

    Args:
        transactions: Transaction objects or dicts with keys:
            - date: Transaction date ("YYYY-MM-DD" string or date)
            - amount_cents: Signed amount in cents (negative=outflow, positive=inflow)
              or amount: Signed amount in major units
            - name: Transaction description
            - merchant_name: (Optional) Cleaned merchant name
            - category_top / category_sub: (Optional) Upstream category labels
            - pending: (Optional) Pending flag, pending rows are ignored
        income_whitelist_names: Payer-name substrings (default: INCOME_WHITELIST_CONFIG)
        income_whitelist_categories: Verbatim income sub categories (default: INCOME_WHITELIST_CONFIG)
        issuer_names: Card issuer names (default: ISSUER_NAMES)

    Returns:
        Dictionary containing:
            - monthly_income_cents
            - monthly_expenses_by_category
            - total_monthly_expenses_cents
            - paycheck_cadence: "Weekly", "Biweekly", "SemiMonthly", "Monthly" or "Irregular"
            - category_confidence_scores: category -> "High", "Medium" or "Low"

    Example:
        >>> result = calculate_budget_baseline([
        ...     {"date": "2025-03-03", "amount_cents": -10000, "name": "Whole Foods",
        ...      "category_top": "Groceries"},
        ... ])
        >>> result["monthly_expenses_by_category"]
        {'Groceries': 10000}
    """
    parsed: List[Transaction] = [
        t if isinstance(t, Transaction) else Transaction.from_dict(t)
        for t in transactions
    ]

    whitelist = IncomeWhitelist.from_values(
        INCOME_WHITELIST_CONFIG["names"] if income_whitelist_names is None else income_whitelist_names,
        INCOME_WHITELIST_CONFIG["categories"] if income_whitelist_categories is None else income_whitelist_categories,
    )

    transfer_classifier = TransferClassifier(issuer_names=issuer_names)
    refund_classifier = RefundClassifier()
    calculator = BaselineCalculator(
        income_detector=IncomeDetector(
            whitelist=whitelist,
            refund_classifier=refund_classifier,
            transfer_classifier=transfer_classifier,
        ),
        transfer_classifier=transfer_classifier,
        refund_classifier=refund_classifier,
    )

    return calculator.calculate_from_transactions(parsed).to_dict()
