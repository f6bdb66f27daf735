"""
Transaction classification patterns for the Budget Baseline Engine.
Keyword, category and regex tables used to separate transfers and refunds
from genuine income and spend.
"""

# Inter-account movements (Not income, Not spend)
TRANSFER_PATTERNS = {
    "keywords": [
        "transfer", "xfer", "online transfer", "external transfer", "internal transfer",
        "account transfer", "mobile transfer", "wire transfer", "ach transfer",
        "withdrawal", "payment to", "payment from",
    ],
    # Exact (lowercased) top or sub category labels
    "categories": [
        "transfer", "bank fees",
    ],
    # Matched against the whole lowercased name
    "regex_patterns": [
        # account / acct numbers: "acct #5678", "account *9012"
        r".*(?:account|acct)\s*(?:#|\*)?\d{2,}.*",
        # confirmation numbers: "ref#ABC123DEF", "conf #XYZ789"
        r".*(?:ref|confirmation|conf)\s*#?\s*[a-z0-9]{6,}.*",
    ],
    "description": "Inter-Account Transfers (Not Income / Not Spend)"
}

# Category-level exclusion applied when building the expense side of a baseline
TRANSFER_EXCLUSION_CATEGORIES = {
    # Lowercased top category prefix
    "top_prefix": "transfer",
    # Exact sub category labels (case-sensitive, as delivered upstream)
    "sub_categories": [
        "Credit Card Payment", "Transfer", "Transfer Out", "Transfer In",
    ],
}

# Credit card and own-account payments (paying down the user's own balance)
CARD_PAYMENT_PATTERNS = {
    # Substrings of the lowercased sub category
    "sub_category_keywords": [
        "credit card payment", "transfer in", "transfer out", "account transfer",
        "withdrawal", "loan payments",
    ],
    # Sub category must contain every word of at least one group
    "sub_category_keyword_groups": [
        ["savings", "transfer"],
    ],
    "regex_patterns": [
        r"(?i).*(?:payment (?:received|thank you|to|posted)|cardmember services|autopay|statement|bill pay|online payment).*",
    ],
    "description": "Credit Card / Own-Account Payments"
}

# Card issuers: a merchant name containing one of these is a balance payment
ISSUER_NAMES = [
    "American Express", "Amex", "Chase", "JPMorgan", "Capital One",
    "Citi", "Citibank", "Discover", "Bank of America", "Wells Fargo",
    "US Bank", "Barclays",
]

# Refunds and credit adjustments (reverse a prior expense, Not income)
REFUND_PATTERNS = {
    "keywords": [
        "refund", "return", "reversal", "credit", "adjustment", "chargeback",
        "dispute", "cashback", "cash back", "rebate", "reimbursement",
    ],
    "regex_patterns": [
        r".*(?:return|refund|credit|reversal|chargeback).*",
        # merchant returns: "return to target", "refund from best buy"
        r".*(?:return|refund)\s+(?:from|to)\s+.*",
    ],
    "description": "Refunds & Credit Adjustments (Not Income)"
}
