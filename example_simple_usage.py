"""
Simple examples demonstrating the Budget Baseline Engine.
"""

from datetime import date

# Example 1: Classifying individual transactions
print("=" * 60)
print("Example 1: Transaction Classification")
print("=" * 60)

from baseline_engine import Transaction, TransferClassifier, RefundClassifier, IncomeDetector

transfers = TransferClassifier()
refunds = RefundClassifier()
detector = IncomeDetector()

samples = [
    Transaction(date(2025, 5, 2), 250000, name="COZY EARTH DIR DEP"),
    Transaction(date(2025, 5, 3), 5000, name="Refund from Amazon"),
    Transaction(date(2025, 5, 4), -100000, name="Online Transfer to Savings"),
    Transaction(date(2025, 5, 5), -45000, name="Payment Thank You", merchant_name="Chase"),
    Transaction(date(2025, 5, 6), 7500, name="Venmo cashout"),
    Transaction(date(2025, 5, 7), -8250, name="Whole Foods", category_top="Groceries"),
]

print("\nClassifying transactions:")
for txn in samples:
    flags = []
    if transfers.is_transfer_transaction(txn):
        flags.append("transfer")
    if refunds.is_refund(txn.name, txn.amount_cents):
        flags.append("refund")
    label = detector.classify_inflow(txn)
    print(f"  {txn.name:30} {txn.amount_cents:>8} -> {label:15} {', '.join(flags)}")

# Example 2: Baseline over a trailing window
print("\n" + "=" * 60)
print("Example 2: Budget Baseline")
print("=" * 60)

from baseline_engine import BaselineCalculator, InMemoryTransactionStore

history = []
for month in (3, 4, 5):
    history.append(Transaction(date(2025, month, 1), 200000, name="Cozy Earth Payroll"))
    history.append(Transaction(date(2025, month, 15), 200000, name="Cozy Earth Payroll"))
    history.append(Transaction(date(2025, month, 5), -10000 - 500 * month, name="Whole Foods",
                               category_top="Groceries"))
    history.append(Transaction(date(2025, month, 9), -145000, name="Rent", category_top="rent and utilities"))

store = InMemoryTransactionStore({"demo-user": history})
calculator = BaselineCalculator(transaction_store=store)
baseline = calculator.calculate_baseline("demo-user", today=date(2025, 5, 20))

print(f"\nMonthly income:   {baseline.monthly_income_cents / 100:,.2f}")
print(f"Monthly expenses: {baseline.total_monthly_expenses_cents / 100:,.2f}")
print(f"Paycheck cadence: {baseline.paycheck_cadence.value}")
for category, amount in sorted(baseline.monthly_expenses_by_category.items()):
    confidence = baseline.category_confidence_scores[category].value
    print(f"  {category:25} {amount / 100:>10,.2f}  ({confidence})")

print("\n" + "=" * 60)
print("All examples completed successfully!")
print("=" * 60)
