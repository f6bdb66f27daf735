"""
Baseline configuration for the Budget Baseline Engine.
Contains window sizes, winsorizing bounds, confidence thresholds,
cadence targets and the income whitelist.
"""

# Baseline Configuration
BASELINE_CONFIG = {
    # Trailing window: N calendar months including the current partial month
    "lookback_months": 3,
    "reference_timezone": "America/Denver",

    # Percentile bounds used when averaging per-month totals
    "winsorize": {
        "lower_pct": 10,
        "upper_pct": 90,
    },

    # Coefficient-of-variation bands for per-category confidence
    "confidence": {
        "min_observations": 3,
        "zero_mean_epsilon": 0.01,  # cents
        "high_max_cv": 0.15,  # cv < 0.15 -> High
        "medium_max_cv": 0.40,  # cv < 0.40 -> Medium, else Low
    },

    # Paycheck cadence detection (checked in order, first match wins)
    "cadence": {
        "min_income_transactions": 3,
        "tolerance_pct": 20,
        "targets": [
            {"days": 7, "cadence": "Weekly"},
            {"days": 14, "cadence": "Biweekly"},
            {"days": 15, "cadence": "SemiMonthly"},
            {"days": 30, "cadence": "Monthly"},
        ],
    },

    # Opt-in: also drop card-payment descriptions and issuer merchants from
    # the expense side (catches bills such as "... Autopay" too)
    "exclude_card_payments": False,
}

# Income whitelist (payer-name substrings and verbatim sub categories)
INCOME_WHITELIST_CONFIG = {
    "names": [
        "Cozy Eart Dir Dep", "Cozy Earth", "Mastercard Stipend",
    ],
    "categories": [
        "Payroll", "Salary", "Income Wages", "Paycheck",
    ],
}
